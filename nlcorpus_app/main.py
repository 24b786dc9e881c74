#!/usr/bin/env python3
"""
NL Corpus - command-line entry point.

Processes a list of text files and writes the aggregated XML report,
optionally with a named-entity list and JSONL results.
"""

import logging
from collections import Counter

from .config.settings import configure_logging
from .core.corpus_runner import CorpusRunner, CorpusResult
from .core.errors import StopwordsUnavailableError
from .core.file_manager import export_named_entities, export_xml, save_results
from .utils.cli_parser import parse_arguments, validate_arguments, print_configuration

logger = logging.getLogger(__name__)

def print_summary(result: CorpusResult):
    """Log processing summary."""
    logger.info(f"[SUMMARY] Processed {len(result.documents)}/{len(result)} documents")

    total_sentences = sum(len(doc.sentences) for doc in result.documents)
    logger.info(f"[SUMMARY] Total sentences: {total_sentences}")
    logger.info(f"[SUMMARY] Unique named entities: {len(result.unique_entities())}")

    # Most frequent entities across the corpus
    counts = Counter()
    for doc in result.documents:
        for name, occurrences in doc.named_entities.items():
            counts[name] += len(occurrences)
    for name, count in counts.most_common(5):
        logger.info(f"  {name}: {count} occurrences")

    for status in result.statuses:
        if not status.ok:
            logger.warning(f"[FAILED] {status.source}: {status.error}")

def main(argv=None):
    """Main entry point for the corpus pipeline."""
    try:
        args = parse_arguments(argv)
        configure_logging(args.verbose)
        if not validate_arguments(args):
            logger.error("[ERROR] Invalid arguments provided")
            return 1

        print_configuration(args)

        runner = CorpusRunner.from_stopwords_file(
            args.inputs, args.stopwords,
            parallel=args.parallel, max_workers=args.workers,
            show_progress=args.progress
        )
        result = runner.run()

        export_xml(result, args.out_xml)
        if args.out_entities:
            export_named_entities(result, args.out_entities)
        if args.out_jsonl:
            save_results(result, args.out_jsonl)

        print_summary(result)
        logger.info("[SUCCESS] Processing completed")
        return 0

    except StopwordsUnavailableError as e:
        logger.error(f"[ERROR] {e}")
        return 1

    except KeyboardInterrupt:
        logger.warning("[INTERRUPTED] Processing stopped by user")
        return 130

    except Exception as e:
        logger.exception(f"[ERROR] Unexpected error: {e}")
        return 1

if __name__ == "__main__":
    exit(main())
