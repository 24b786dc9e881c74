"""
Entity-aware tokenization for the NL corpus pipeline.

Sentences are split into words and punctuation marks while every
recognized named entity is kept as one indivisible token. Entities are
applied longest first so that "United States" is never shattered by a
shorter key such as "United".
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple
from ..config.patterns import WHITESPACE_BEFORE_PUNCTUATION, get_token_split_pattern
from .errors import MalformedEntityQueueStateError

logger = logging.getLogger(__name__)

_SPLIT = get_token_split_pattern()
_SPACE_BEFORE_PUNCT = re.compile(WHITESPACE_BEFORE_PUNCTUATION)


@dataclass(frozen=True)
class EntityOccurrences:
    """Where an entity occurs in a document.

    ``sentences[i]`` and ``tokens[i]`` together locate the i-th occurrence.
    """

    sentences: Tuple[int, ...] = ()
    tokens: Tuple[int, ...] = ()

    def __post_init__(self):
        if len(self.sentences) != len(self.tokens):
            raise ValueError("sentence and token index lists must be the same length")

    def __len__(self) -> int:
        return len(self.tokens)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        return zip(self.sentences, self.tokens)

    def to_dict(self) -> Dict[str, List[int]]:
        return {"sentence": list(self.sentences), "token": list(self.tokens)}


def rank_entities(entities: Iterable[str]) -> Tuple[str, ...]:
    """Order entity keys by descending length, then lexicographically."""
    return tuple(sorted(set(entities), key=lambda e: (-len(e), e)))


def tokenize_plain(text: str) -> List[str]:
    """Split text without entities into words and punctuation marks.

    Whitespace is dropped; word-internal hyphens and apostrophes
    (contractions) stay inside their token.
    """
    text = _SPACE_BEFORE_PUNCT.sub("", text)
    return [token for token in _SPLIT.split(text) if token]


class EntityAwareTokenizer:
    """Tokenizes sentences against a fixed entity registry."""

    def __init__(self, entities: Iterable[str]):
        self.queue = rank_entities(entities)
        for entity in self.queue:
            if not entity:
                raise MalformedEntityQueueStateError("empty entity key in queue")

    def _split(self, text: str, start: int) -> List[str]:
        """Split ``text`` using the entities from ``start`` on.

        The queue itself is an immutable tuple, so each fragment only owns
        its own position in it and siblings never see what another
        fragment has consumed. Work items live on an explicit stack: a
        ``(fragment, start)`` pair still has to be split, a plain string is
        a finished entity token.
        """
        queue = self.queue
        tokens = []
        stack = [(text, start)]

        while stack:
            item = stack.pop()
            if isinstance(item, str):
                tokens.append(item)
                continue

            fragment, start = item
            # Skip entities absent from this fragment
            while start < len(queue) and queue[start] not in fragment:
                start += 1
            if start == len(queue):
                tokens.extend(tokenize_plain(fragment))
                continue

            entity = queue[start]
            pieces = fragment.split(entity)
            if len(pieces) != fragment.count(entity) + 1:
                raise MalformedEntityQueueStateError(
                    f"fragment/entity mismatch while splitting on '{entity}'"
                )

            work = []
            for i, piece in enumerate(pieces):
                if i > 0:
                    work.append(entity)
                work.append((piece, start + 1))
            # Reversed so the leftmost piece is popped first
            stack.extend(reversed(work))

        return tokens

    def split(self, sentence: str) -> List[str]:
        """Tokenize one sentence without recording occurrences."""
        return self._split(sentence, 0)

    def tokenize(self, sentence: str, sentence_index: int,
                 occurrences: Dict[str, List[Tuple[int, int]]]) -> Tuple[str, ...]:
        """Tokenize one sentence and record entity positions.

        ``occurrences`` maps each entity key to a list of
        (sentence index, token index) pairs that is appended to in
        left-to-right order.
        """
        tokens = tuple(self.split(sentence))
        for position, token in enumerate(tokens):
            if token in occurrences:
                occurrences[token].append((sentence_index, position))
        return tokens

    def tokenize_all(self, sentences: Sequence[str]) -> Tuple[Tuple[Tuple[str, ...], ...],
                                                              Dict[str, EntityOccurrences]]:
        """Tokenize every sentence and build the occurrence registry."""
        found: Dict[str, List[Tuple[int, int]]] = {entity: [] for entity in self.queue}
        token_lists = tuple(
            self.tokenize(sentence, index, found)
            for index, sentence in enumerate(sentences)
        )

        registry = {}
        for entity, pairs in found.items():
            registry[entity] = EntityOccurrences(
                sentences=tuple(s for s, _ in pairs),
                tokens=tuple(t for _, t in pairs),
            )

        logger.debug(f"[TOKENIZE] Tokenized {len(token_lists)} sentences "
                     f"against {len(self.queue)} entities")
        return token_lists, registry
