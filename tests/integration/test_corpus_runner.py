"""
Tests de integración para el orquestador de corpus.
"""

import pytest
import itertools
import os
import string
import time
from unittest.mock import patch
from nlcorpus_app.core.corpus_runner import (
    CorpusRunner, CorpusResult, DocumentStatus, aggregate_entities, run_corpus
)
from nlcorpus_app.core.document import Document
from nlcorpus_app.core.errors import StopwordsUnavailableError
from nlcorpus_app.core.tokenizer import EntityOccurrences

# Retardos artificiales: b el más rápido, a el más lento
DELAYS = {"a.txt": 0.3, "b.txt": 0.0, "c.txt": 0.15}

def slow_document(source, stopwords):
    time.sleep(DELAYS[os.path.basename(source)])
    return Document(source, stopwords)

class TestCorpusRunner:
    """Tests de integración para CorpusRunner."""

    def test_sequential_run(self, sample_files, sample_stopwords):
        """Test ejecución secuencial."""
        result = CorpusRunner(sample_files, sample_stopwords).run()

        assert isinstance(result, CorpusResult)
        assert [d.filename for d in result.documents] == sample_files
        assert result.failures == ()
        assert all(status.ok for status in result.statuses)

    def test_parallel_matches_sequential(self, sample_files, sample_stopwords):
        """Test que paralelo y secuencial dan el mismo resultado."""
        sequential = CorpusRunner(sample_files, sample_stopwords).run()
        parallel = CorpusRunner(sample_files, sample_stopwords, parallel=True).run()

        assert parallel.to_dict() == sequential.to_dict()

    def test_parallel_preserves_input_order(self, sample_files, sample_stopwords):
        """Test orden de salida con tiempos de proceso desiguales."""
        with patch('nlcorpus_app.core.corpus_runner.Document', side_effect=slow_document):
            result = CorpusRunner(sample_files, sample_stopwords, parallel=True, max_workers=3).run()

        assert [os.path.basename(d.filename) for d in result.documents] == ["a.txt", "b.txt", "c.txt"]
        assert [os.path.basename(s.source) for s in result.statuses] == ["a.txt", "b.txt", "c.txt"]

    @pytest.mark.parametrize("parallel", [False, True])
    def test_partial_failure(self, sample_files, sample_stopwords, parallel):
        """Test que un documento ilegible no aborta el corpus."""
        os.remove(sample_files[1])
        result = CorpusRunner(sample_files, sample_stopwords, parallel=parallel).run()

        assert [d.filename for d in result.documents] == [sample_files[0], sample_files[2]]
        assert result.failures == (sample_files[1],)
        assert result.statuses[1].ok == False
        assert result.statuses[1].error
        assert len(result.documents[0].sentences) == 4
        assert "Paris" in result.documents[1].named_entities
        assert "Jean-Luc Picard" not in result.unique_entities()

    def test_parallel_run_with_many_entities_in_one_sentence(self, sample_files, sample_stopwords):
        """Test documento con 1500 entidades distintas en una sola oración."""
        names = ["Z" + "".join(letters)
                 for letters in itertools.islice(itertools.product(string.ascii_lowercase, repeat=3), 1500)]
        with open(sample_files[1], 'w', encoding='utf-8') as f:
            f.write(" and ".join(names) + ".\n")

        result = CorpusRunner(sample_files, sample_stopwords, parallel=True).run()

        assert result.failures == ()
        assert len(result.documents) == 3
        crowded = result.documents[1]
        assert len(crowded.named_entities) == 1500
        assert crowded.sentences[0][:3] == ("Zaaa", "and", "Zaab")
        assert crowded.named_entities["Zaab"] == EntityOccurrences((0,), (2,))

    def test_unique_entities(self, sample_files, sample_stopwords):
        """Test unión de entidades del corpus."""
        result = run_corpus(sample_files, sample_stopwords, parallel=True)
        entities = result.unique_entities()

        assert entities == aggregate_entities(result.documents)
        assert {"NASA", "Jean-Luc Picard", "Data", "Paris", "London"} <= entities
        assert "It" not in entities

    def test_aggregate_is_case_sensitive(self, sample_stopwords):
        """Test que la unión distingue mayúsculas."""
        docs = [
            Document.from_lines("x.txt", ["Paris is big."], sample_stopwords),
            Document.from_lines("y.txt", ["PARIS is big."], sample_stopwords),
        ]
        assert aggregate_entities(docs) == {"Paris", "PARIS"}

    def test_empty_corpus(self, sample_stopwords):
        """Test corpus sin documentos."""
        result = CorpusRunner([], sample_stopwords, parallel=True).run()

        assert len(result) == 0
        assert result.documents == ()
        assert result.unique_entities() == set()

    def test_invalid_worker_count(self, sample_stopwords):
        """Test tamaño de pool inválido."""
        with pytest.raises(ValueError):
            CorpusRunner([], sample_stopwords, max_workers=0)

    def test_stopwords_file_failure_is_fatal(self, sample_files, temp_dir):
        """Test que fallar al cargar stopwords aborta la ejecución."""
        with pytest.raises(StopwordsUnavailableError):
            CorpusRunner.from_stopwords_file(sample_files, os.path.join(temp_dir, "missing.txt"))

    def test_from_stopwords_file(self, sample_files, stopwords_file):
        """Test creación del runner desde archivo de stopwords."""
        runner = CorpusRunner.from_stopwords_file(sample_files, stopwords_file, parallel=True)
        result = runner.run()

        assert runner.parallel == True
        assert len(result.documents) == 3

    def test_status_dataclass(self):
        """Test estructura del estado por documento."""
        status = DocumentStatus("a.txt", True)
        assert status.error is None
