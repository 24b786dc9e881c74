"""
General system settings and constants for the NL corpus pipeline.

Contains file paths, processing settings, and system-wide constants.
"""

import logging
import os

# Threading settings
MAX_WORKERS = 3  # Fixed pool size for parallel corpus runs

# File settings
FILE_ENCODING = "utf-8"
DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")
DEFAULT_STOPWORDS_PATH = os.path.join(DATA_DIR, "stopwords.txt")
STOPWORDS_ENV_VAR = "NLCORPUS_STOPWORDS"

# Export settings
XML_HEADER = '<?xml version="1.0" encoding="utf-8"?>'
XML_ENTITY_ESCAPES = {
    "'": "&apos;",
    '"': "&quot;",
}

# Logging settings
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

def get_stopwords_path() -> str:
    """Get the stopword file path, honouring the environment override."""
    return os.environ.get(STOPWORDS_ENV_VAR) or DEFAULT_STOPWORDS_PATH

def configure_logging(verbose: bool = False):
    """Configure root logging for command-line runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
