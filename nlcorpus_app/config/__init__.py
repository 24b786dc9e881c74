"""
Configuration module for the NL corpus pipeline.

Contains worker settings, file paths, logging setup and regex patterns.
"""

from .settings import (
    MAX_WORKERS, FILE_ENCODING, DEFAULT_STOPWORDS_PATH, STOPWORDS_ENV_VAR,
    get_stopwords_path, configure_logging
)
from .patterns import get_entity_pattern, get_sentence_boundary_pattern, get_token_split_pattern

__all__ = [
    'MAX_WORKERS',
    'FILE_ENCODING',
    'DEFAULT_STOPWORDS_PATH',
    'STOPWORDS_ENV_VAR',
    'get_stopwords_path',
    'configure_logging',
    'get_entity_pattern',
    'get_sentence_boundary_pattern',
    'get_token_split_pattern'
]
