"""
Command-line interface parser for the NL corpus pipeline.

Handles argument parsing, validation, and configuration display.
"""

import argparse
import logging
import os
from ..config.settings import MAX_WORKERS, get_stopwords_path

logger = logging.getLogger(__name__)

def parse_arguments(argv=None):
    """Parse command-line arguments for the corpus pipeline."""
    parser = argparse.ArgumentParser(
        description="NL Corpus - sentence splitting, named-entity recognition and tokenization"
    )

    # Required arguments
    parser.add_argument("inputs", nargs="+",
                       help="Plain-text files to process, in output order")

    # Optional arguments
    parser.add_argument("--stopwords", default=None,
                       help="Stopword list, one word per line (default: bundled list)")
    parser.add_argument("--parallel", action="store_true",
                       help="Process documents on a fixed-size worker pool")
    parser.add_argument("--workers", type=int, default=MAX_WORKERS,
                       help="Worker pool size for --parallel")
    parser.add_argument("--out_xml", default="corpus.xml",
                       help="XML report output file")
    parser.add_argument("--out_entities", default=None,
                       help="Plain-text named entity list output file")
    parser.add_argument("--out_jsonl", default=None,
                       help="JSONL per-document results output file")
    parser.add_argument("--progress", action="store_true",
                       help="Show a progress bar")
    parser.add_argument("--verbose", action="store_true",
                       help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.stopwords is None:
        args.stopwords = get_stopwords_path()
    return args

def validate_arguments(args) -> bool:
    """Validate command-line arguments."""
    # Check if stopword file exists
    if not os.path.exists(args.stopwords):
        logger.error(f"[ERROR] Stopword file not found: {args.stopwords}")
        return False

    # Validate worker count
    if args.workers < 1:
        logger.error("[ERROR] Worker count must be at least 1")
        return False

    # Missing inputs are reported per document, not rejected here
    missing = [path for path in args.inputs if not os.path.exists(path)]
    for path in missing:
        logger.warning(f"[WARNING] Input file not found: {path}")

    return True

def print_configuration(args):
    """Log the current configuration."""
    mode = f"parallel, {args.workers} workers" if args.parallel else "sequential"
    logger.info(f"[CONFIG] {len(args.inputs)} input files ({mode})")
    logger.info(f"[CONFIG] Stopwords: {args.stopwords}")
    logger.info(f"[CONFIG] XML output: {args.out_xml}")
    if args.out_entities:
        logger.info(f"[CONFIG] Entity list output: {args.out_entities}")
    if args.out_jsonl:
        logger.info(f"[CONFIG] JSONL output: {args.out_jsonl}")
