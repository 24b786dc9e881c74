"""
Core functionality module for the NL corpus pipeline.

Contains sentence boundary disambiguation, entity-aware tokenization,
the document pipeline, corpus orchestration and file management.
"""

from .errors import (
    NLCorpusError, SourceUnreadableError, StopwordsUnavailableError,
    NotReadyError, MalformedEntityQueueStateError
)
from .sbd import SentenceBoundaryDisambiguator, split_sentences
from .tokenizer import EntityAwareTokenizer, EntityOccurrences, rank_entities, tokenize_plain
from .document import Document, DocumentState
from .corpus_runner import CorpusRunner, CorpusResult, DocumentStatus, aggregate_entities, run_corpus
from .file_manager import (
    load_stopwords, iter_source_lines, export_named_entities, export_xml,
    save_results, load_results
)

__all__ = [
    'NLCorpusError',
    'SourceUnreadableError',
    'StopwordsUnavailableError',
    'NotReadyError',
    'MalformedEntityQueueStateError',
    'SentenceBoundaryDisambiguator',
    'split_sentences',
    'EntityAwareTokenizer',
    'EntityOccurrences',
    'rank_entities',
    'tokenize_plain',
    'Document',
    'DocumentState',
    'CorpusRunner',
    'CorpusResult',
    'DocumentStatus',
    'aggregate_entities',
    'run_corpus',
    'load_stopwords',
    'iter_source_lines',
    'export_named_entities',
    'export_xml',
    'save_results',
    'load_results'
]
