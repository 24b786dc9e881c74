"""
Configuración global para todos los tests del pipeline NL Corpus.

Este archivo se ejecuta automáticamente por pytest y contiene fixtures
compartidas entre todos los tests.
"""

import pytest
import os
import tempfile
import shutil

# Textos de prueba sintéticos
SAMPLE_TEXTS = {
    "a.txt": [
        "The United States of America is large.",
        "It borders Canada and Mexico. The President of the United States",
        "lives in Washington.",
        "",
        "NASA launched a rocket from Florida!",
    ],
    "b.txt": [
        "Jean-Luc Picard commands the ship. He trusts Data.",
    ],
    "c.txt": [
        'She said, "Don\'t go to Paris." Then she left for London.',
        "",
        "London is rainy; Paris isn't.",
    ],
}

@pytest.fixture
def sample_stopwords():
    """Lista reducida de stopwords para testing."""
    return frozenset({"the", "of", "it", "he", "she", "then", "and", "a"})

@pytest.fixture
def temp_dir():
    """Crea un directorio temporal para testing."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir

    # Cleanup
    if os.path.exists(temp_dir):
        shutil.rmtree(temp_dir)

@pytest.fixture
def sample_files(temp_dir):
    """Escribe los textos de prueba y retorna sus rutas en orden a, b, c."""
    paths = []
    for name in sorted(SAMPLE_TEXTS):
        path = os.path.join(temp_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write("\n".join(SAMPLE_TEXTS[name]) + "\n")
        paths.append(path)
    return paths

@pytest.fixture
def stopwords_file(temp_dir, sample_stopwords):
    """Archivo de stopwords temporal (una palabra por línea)."""
    path = os.path.join(temp_dir, "stopwords.txt")
    with open(path, 'w', encoding='utf-8') as f:
        for word in sorted(sample_stopwords):
            f.write(word.upper() + "\n")
        f.write("\n")
    return path
