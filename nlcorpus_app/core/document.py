"""
Per-document pipeline for the NL corpus system.

A Document reads its source line by line, disambiguates sentence
boundaries in one pass, recognizes named entities and finally tokenizes
every sentence against the entity registry. Each phase runs exactly once
and in order.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import AbstractSet, Any, Dict, Iterable, Mapping, Optional, Tuple
from .errors import NotReadyError, SourceUnreadableError
from .file_manager import iter_source_lines
from .sbd import SentenceBoundaryDisambiguator
from .tokenizer import EntityAwareTokenizer, EntityOccurrences
from ..strategies.regex_strategy import EntityRecognizer

logger = logging.getLogger(__name__)


class DocumentState(Enum):
    EMPTY = 0
    SBD_COMPLETE = 1
    NER_COMPLETE = 2
    TOKENIZED = 3


class Document:
    """A processed text document.

    Construction runs the whole pipeline unless ``autorun`` is False, in
    which case :meth:`run` must be called before the accessors are used.
    """

    def __init__(self, source: str, stopwords: AbstractSet[str], autorun: bool = True,
                 lines: Optional[Iterable[str]] = None):
        self._source = source
        self._stopwords = stopwords
        self._lines = lines
        self._state = DocumentState.EMPTY
        self._sbd = SentenceBoundaryDisambiguator()
        self._sentences: Tuple[str, ...] = ()
        self._entities: Dict[str, list] = {}
        self._tokens: Tuple[Tuple[str, ...], ...] = ()
        self._registry: Mapping[str, EntityOccurrences] = MappingProxyType({})

        if autorun:
            self.run()

    @classmethod
    def from_lines(cls, name: str, lines: Iterable[str], stopwords: AbstractSet[str]) -> "Document":
        """Build a document from in-memory lines instead of a file."""
        return cls(name, stopwords, lines=lines)

    @property
    def state(self) -> DocumentState:
        return self._state

    def run(self) -> "Document":
        """Advance through SBD, NER and tokenization."""
        if self._state is DocumentState.EMPTY:
            self._disambiguate()
        if self._state is DocumentState.SBD_COMPLETE:
            self._recognize()
        if self._state is DocumentState.NER_COMPLETE:
            self._tokenize()
        return self

    def _disambiguate(self):
        try:
            if self._lines is not None:
                self._sbd.feed_lines(self._lines)
            else:
                self._sbd.feed_lines(iter_source_lines(self._source))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadableError(self._source, str(e)) from e

        self._sentences = self._sbd.finish()
        self._lines = None
        self._state = DocumentState.SBD_COMPLETE

    def _recognize(self):
        recognizer = EntityRecognizer(self._stopwords)
        self._entities = recognizer.recognize(self._sentences)
        self._state = DocumentState.NER_COMPLETE

    def _tokenize(self):
        tokenizer = EntityAwareTokenizer(self._entities)
        self._tokens, occurrences = tokenizer.tokenize_all(self._sentences)
        # Keep the order in which entities were recognized
        self._registry = MappingProxyType({name: occurrences[name] for name in self._entities})
        self._state = DocumentState.TOKENIZED

        logger.debug(f"[DOC] {self._source}: {len(self._tokens)} sentences, "
                     f"{len(self._registry)} entities")

    def _require_tokenized(self):
        if self._state is not DocumentState.TOKENIZED:
            raise NotReadyError(self._source, self._state)

    @property
    def filename(self) -> str:
        return self._source

    @property
    def raw_sentences(self) -> Tuple[str, ...]:
        """Disambiguated sentences before tokenization."""
        self._require_tokenized()
        return self._sentences

    @property
    def sentences(self) -> Tuple[Tuple[str, ...], ...]:
        """Token sequences, one per sentence."""
        self._require_tokenized()
        return self._tokens

    @property
    def named_entities(self) -> Mapping[str, EntityOccurrences]:
        """Read-only view of the entity occurrence registry."""
        self._require_tokenized()
        return self._registry

    def to_dict(self) -> Dict[str, Any]:
        self._require_tokenized()
        return {
            "filename": self._source,
            "sentences": [list(tokens) for tokens in self._tokens],
            "named_entities": {name: occ.to_dict() for name, occ in self._registry.items()},
        }

    def __repr__(self) -> str:
        return f"Document({self._source!r}, state={self._state.name})"
