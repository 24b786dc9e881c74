"""
Corpus orchestrator for the NL corpus pipeline.

Runs one Document pipeline per source, sequentially or on a fixed-size
thread pool, and assembles the results in input order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple
from tqdm import tqdm
from ..config.settings import MAX_WORKERS
from .document import Document
from .errors import SourceUnreadableError
from .file_manager import load_stopwords

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentStatus:
    """Outcome of one document's pipeline."""

    source: str
    ok: bool
    error: Optional[str] = None


def aggregate_entities(documents: Iterable[Document]) -> Set[str]:
    """Union of the entity keys of all documents (case-sensitive)."""
    entities = set()
    for doc in documents:
        entities.update(doc.named_entities.keys())
    return entities


class CorpusResult:
    """Ordered outcome of a corpus run."""

    def __init__(self, outcomes: Sequence[Tuple[DocumentStatus, Optional[Document]]]):
        self.statuses: Tuple[DocumentStatus, ...] = tuple(status for status, _ in outcomes)
        self.documents: Tuple[Document, ...] = tuple(doc for _, doc in outcomes if doc is not None)
        self.failures: Tuple[str, ...] = tuple(s.source for s in self.statuses if not s.ok)

    def unique_entities(self) -> Set[str]:
        return aggregate_entities(self.documents)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "documents": [doc.to_dict() for doc in self.documents],
            "failures": list(self.failures),
            "statuses": [
                {"source": s.source, "ok": s.ok, "error": s.error} for s in self.statuses
            ],
        }

    def __len__(self) -> int:
        return len(self.statuses)


def process_document(source: str, stopwords: AbstractSet[str]) -> Tuple[DocumentStatus, Optional[Document]]:
    """Run the full pipeline for one source, isolating unreadable sources."""
    try:
        doc = Document(source, stopwords)
    except SourceUnreadableError as e:
        logger.error(f"[ERROR] {e}")
        return DocumentStatus(source, False, e.reason), None

    logger.debug(f"[COMPLETED] {source}")
    return DocumentStatus(source, True), doc


class CorpusRunner:
    """Processes a list of sources against a shared, read-only stopword set."""

    def __init__(self, sources: Sequence[str], stopwords: AbstractSet[str],
                 parallel: bool = False, max_workers: int = MAX_WORKERS,
                 show_progress: bool = False):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.sources = tuple(sources)
        self.stopwords = frozenset(stopwords)
        self.parallel = parallel
        self.max_workers = max_workers
        self.show_progress = show_progress

    @classmethod
    def from_stopwords_file(cls, sources: Sequence[str], stopwords_path: str = None,
                            **kwargs) -> "CorpusRunner":
        """Create a runner after loading stopwords; a load failure is fatal."""
        return cls(sources, load_stopwords(stopwords_path), **kwargs)

    def _run_sequential(self, progress) -> List[Tuple[DocumentStatus, Optional[Document]]]:
        outcomes = []
        for source in self.sources:
            outcomes.append(process_document(source, self.stopwords))
            progress.update(1)
        return outcomes

    def _run_parallel(self, progress) -> List[Tuple[DocumentStatus, Optional[Document]]]:
        slots: List[Optional[Tuple[DocumentStatus, Optional[Document]]]] = [None] * len(self.sources)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(process_document, source, self.stopwords): index
                for index, source in enumerate(self.sources)
            }

            # Results are slotted by input position, not completion order
            for future in as_completed(future_to_index):
                slots[future_to_index[future]] = future.result()
                progress.update(1)

        return slots

    def run(self) -> CorpusResult:
        """Process every source and return results in input order."""
        mode = f"parallel ({self.max_workers} workers)" if self.parallel else "sequential"
        logger.info(f"[CORPUS] Processing {len(self.sources)} documents, {mode}")

        with tqdm(total=len(self.sources), desc="Processing documents", unit="doc",
                  disable=not self.show_progress) as progress:
            if self.parallel:
                outcomes = self._run_parallel(progress)
            else:
                outcomes = self._run_sequential(progress)

        result = CorpusResult(outcomes)
        logger.info(f"[CORPUS] Completed {len(result.documents)} documents, "
                    f"{len(result.failures)} failed")
        return result


def run_corpus(sources: Sequence[str], stopwords: AbstractSet[str], parallel: bool = False,
               max_workers: int = MAX_WORKERS) -> CorpusResult:
    """Convenience wrapper around :class:`CorpusRunner`."""
    return CorpusRunner(sources, stopwords, parallel=parallel, max_workers=max_workers).run()
