"""
NL Corpus Application Package

Sentence boundary disambiguation, regex-based named-entity recognition
and entity-aware tokenization over collections of plain-text documents.
"""

__version__ = "1.0.0"
__author__ = "NL Corpus Development Team"

from .core.document import Document
from .core.corpus_runner import CorpusRunner, CorpusResult
from .core.file_manager import load_stopwords
from .strategies.regex_strategy import EntityRecognizer
from .config.settings import MAX_WORKERS

__all__ = [
    'Document',
    'CorpusRunner',
    'CorpusResult',
    'load_stopwords',
    'EntityRecognizer',
    'MAX_WORKERS'
]
