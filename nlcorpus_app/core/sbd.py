"""
Streaming sentence boundary disambiguation for the NL corpus pipeline.

Lines are consumed one at a time; text that is not yet known to end at a
sentence boundary is carried over in a fragment buffer so that a document
never has to be held in memory as a single string.
"""

import logging
from typing import Iterable, List, Tuple
from ..config.patterns import get_sentence_boundary_pattern

logger = logging.getLogger(__name__)

_BOUNDARY = get_sentence_boundary_pattern()


class SentenceBoundaryDisambiguator:
    """Incremental sentence splitter.

    Sentence boundaries occur where a lowercase letter or digit is followed
    by ``.``, ``!`` or ``?`` (optionally followed by a closing quote), then
    whitespace, then an optional opening quote and an uppercase letter.
    """

    def __init__(self):
        self._fragment = ""
        self._sentences: List[str] = []
        self._finished = False

    @property
    def fragment(self) -> str:
        """Text carried over from previous lines."""
        return self._fragment

    @property
    def sentences(self) -> Tuple[str, ...]:
        """Sentences committed so far."""
        return tuple(self._sentences)

    @property
    def finished(self) -> bool:
        return self._finished

    def feed(self, line: str):
        """Consume one raw line."""
        if self._finished:
            raise RuntimeError("Cannot feed lines after finish()")
        if not line.strip():
            return

        clauses = _BOUNDARY.split((self._fragment + " " + line).strip())
        # Only N-1 clauses are complete; the last one stays in the buffer
        self._sentences.extend(clauses[:-1])
        self._fragment = clauses[-1]

    def feed_lines(self, lines: Iterable[str]):
        for line in lines:
            self.feed(line)

    def finish(self) -> Tuple[str, ...]:
        """Flush the residual fragment and return every sentence.

        An empty residual fragment is suppressed rather than emitted as a
        blank trailing sentence.
        """
        if not self._finished:
            residual = self._fragment.strip()
            if residual:
                self._sentences.append(residual)
            self._fragment = ""
            self._finished = True
            logger.debug(f"[SBD] Disambiguated {len(self._sentences)} sentences")
        return self.sentences


def split_sentences(lines: Iterable[str]) -> Tuple[str, ...]:
    """Run sentence boundary disambiguation over an iterable of lines."""
    sbd = SentenceBoundaryDisambiguator()
    sbd.feed_lines(lines)
    return sbd.finish()
