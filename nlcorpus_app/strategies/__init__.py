"""
Strategy implementations for the NL corpus pipeline.

Contains the regex-based named-entity recognition strategy.
"""

from .regex_strategy import EntityRecognizer, regex_detection

__all__ = [
    'EntityRecognizer',
    'regex_detection'
]
