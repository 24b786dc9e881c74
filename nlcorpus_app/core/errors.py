"""
Exception types raised by the NL corpus pipeline.
"""


class NLCorpusError(Exception):
    """Base class for all pipeline errors."""


class SourceUnreadableError(NLCorpusError):
    """A document source is missing, unreadable or cannot be decoded."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Cannot read source '{source}': {reason}")
        self.source = source
        self.reason = reason


class StopwordsUnavailableError(NLCorpusError):
    """The stopword list cannot be loaded; no corpus run can proceed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load stopwords from '{path}': {reason}")
        self.path = path
        self.reason = reason


class NotReadyError(NLCorpusError):
    """A document accessor was used before the pipeline finished."""

    def __init__(self, source: str, state):
        super().__init__(f"Document '{source}' is not tokenized yet (state={state.name})")
        self.source = source
        self.state = state


class MalformedEntityQueueStateError(NLCorpusError):
    """Internal invariant violation in the entity-aware tokenizer."""
