"""
Regex-based named-entity recognition strategy for the NL corpus pipeline.

Candidates are found with the Title | Abbreviation | Name alternation and
filtered against the stopword list to drop capitalized common words.
"""

import logging
from typing import AbstractSet, Dict, Iterable, Iterator
from ..config.patterns import get_entity_pattern

logger = logging.getLogger(__name__)


class EntityRecognizer:
    """Finds candidate named entities in finalized sentences."""

    def __init__(self, stopwords: AbstractSet[str]):
        self.stopwords = stopwords
        self._pattern = get_entity_pattern()

    def _strip_stopwords(self, candidate: str) -> str:
        """Peel capitalized stopwords off the front of a candidate."""
        while candidate:
            head = candidate.split(None, 1)[0]
            if head.lower() not in self.stopwords:
                break
            candidate = candidate[len(head):].lstrip()
        return candidate

    def candidates(self, sentence: str) -> Iterator[str]:
        """Yield the filtered entity strings of one sentence, left to right."""
        for match in self._pattern.finditer(sentence):
            candidate = match.group(0).strip()
            if candidate.lower() in self.stopwords:
                continue
            candidate = self._strip_stopwords(candidate)
            if candidate:
                yield candidate

    def recognize(self, sentences: Iterable[str]) -> Dict[str, list]:
        """Build the entity registry for a document.

        Keys are exact, case-sensitive surface strings; values are empty
        occurrence lists filled in later by the tokenizer.
        """
        entities = {}
        for sentence in sentences:
            for candidate in self.candidates(sentence):
                entities.setdefault(candidate, [])

        logger.debug(f"[NER] Recognized {len(entities)} candidate entities")
        return entities


def regex_detection(sentences: Iterable[str], stopwords: AbstractSet[str]) -> Dict[str, list]:
    """Regex-based entity detection over a list of sentences."""
    return EntityRecognizer(stopwords).recognize(sentences)
