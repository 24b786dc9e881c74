"""
File management utilities for the NL corpus pipeline.

Handles stopword loading, line-by-line source reading, and exporting
processed corpora as XML, JSONL and plain-text entity lists.
"""

import json
import logging
import os
from typing import FrozenSet, Iterator
from xml.sax.saxutils import escape
from ..config.settings import FILE_ENCODING, XML_HEADER, XML_ENTITY_ESCAPES, get_stopwords_path
from .errors import StopwordsUnavailableError

logger = logging.getLogger(__name__)

def load_stopwords(path: str = None) -> FrozenSet[str]:
    """Load a stopword list, one word per line, lowercased."""
    path = path or get_stopwords_path()
    try:
        with open(path, 'r', encoding=FILE_ENCODING) as f:
            stopwords = frozenset(line.strip().lower() for line in f if line.strip())
    except (OSError, UnicodeDecodeError) as e:
        raise StopwordsUnavailableError(path, str(e)) from e

    logger.info(f"[FILE] Loaded {len(stopwords)} stopwords from {os.path.basename(path)}")
    return stopwords

def iter_source_lines(source: str) -> Iterator[str]:
    """Yield the lines of a source file without trailing newlines."""
    with open(source, 'r', encoding=FILE_ENCODING) as f:
        for line in f:
            yield line.rstrip('\r\n')

def escape_xml(text: str) -> str:
    """Escape text for use in XML content and attribute values."""
    return escape(text, XML_ENTITY_ESCAPES)

def export_named_entities(result, output_file: str) -> int:
    """Export the unique named entities of a corpus, one per line."""
    entities = sorted(result.unique_entities())
    with open(output_file, 'w', encoding=FILE_ENCODING) as f:
        for entity in entities:
            f.write(entity + '\n')

    logger.info(f"[FILE] Saved {len(entities)} named entities to {output_file}")
    return len(entities)

def export_xml(result, output_file: str):
    """Export the aggregated corpus into a single XML file."""
    with open(output_file, 'w', encoding=FILE_ENCODING) as f:
        f.write(XML_HEADER + '\n')
        f.write('<corpus>\n')
        for doc in result.documents:
            f.write(f'  <nldoc id="{escape_xml(doc.filename)}">\n')

            f.write('    <named-entities>\n')
            for name, occurrences in doc.named_entities.items():
                sentences = ",".join(str(s) for s in occurrences.sentences)
                tokens = ",".join(str(t) for t in occurrences.tokens)
                f.write(f'      <entity sentence="{sentences}" token="{tokens}">'
                        f'{escape_xml(name)}</entity>\n')
            f.write('    </named-entities>\n')

            for s, tokens in enumerate(doc.sentences):
                f.write(f'    <sentence id="{s}">\n')
                words = "".join(f'<w id="{t}">{escape_xml(token)}</w>'
                                for t, token in enumerate(tokens))
                f.write(f'      {words}\n')
                f.write('    </sentence>\n')
            f.write('  </nldoc>\n')
        f.write('</corpus>\n')

    logger.info(f"[FILE] Saved XML report for {len(result.documents)} documents to {output_file}")

def save_results(result, output_file: str):
    """Save per-document results to a JSONL file."""
    with open(output_file, 'w', encoding=FILE_ENCODING) as f:
        for doc in result.documents:
            f.write(json.dumps(doc.to_dict(), ensure_ascii=False) + '\n')

    logger.info(f"[FILE] Results saved to {output_file}")

def load_results(input_file: str) -> list:
    """Load per-document results from a JSONL file."""
    results = []
    with open(input_file, 'r', encoding=FILE_ENCODING) as f:
        for line in f:
            if line.strip():
                results.append(json.loads(line))
    return results
