"""
Regular expressions used by the NL corpus pipeline.

Sentence boundary disambiguation, named-entity patterns and the
tokenizer split rule all live here so the stages share one definition.
"""

import re

# Sentence boundary: lowercase/digit + terminal mark (+ optional closing quote),
# whitespace, then an optional opening quote and an uppercase letter.
SENTENCE_BOUNDARY = (
    r"(?:(?<=[a-z0-9][.!?])|(?<=[a-z0-9][.!?][\"']))"
    r"\s+(?=[\"']?[A-Z])"
)

# Named-entity building blocks
# A capitalized word; never cut short, and not a contraction ("Don't"), but
# a possessive suffix may follow ("Obama's" -> "Obama").
NAME_WORD = r"\b[A-Z][a-z][\w]*(?:-[\w]+)*(?![\w-])(?!'(?!s\b)\w)"
NAME = rf"{NAME_WORD}(?:\s{NAME_WORD})*"
ABBREVIATION = rf"(?:(?:\b[A-Z]\.)+|\b[A-Z][A-Z0-9]+\b)(?:\s{NAME})?"
TITLE = rf"(?:(?:{ABBREVIATION}|{NAME})\sof\s(?:the\s)?)+(?:{ABBREVIATION}|{NAME})"

# Tokenizer split points
PUNCTUATION = r"[.,;!?()\"]"
WHITESPACE_BEFORE_PUNCTUATION = rf"\s+(?={PUNCTUATION})"
TOKEN_SPLIT = (
    r"\s+"
    r"|(?='(?:\W|$))"          # closing quote / trailing apostrophe
    r"|(?<=\W')(?=\S)"         # opening quote after a non-word char
    rf"|(?={PUNCTUATION})|(?<={PUNCTUATION})"
)

_ENTITY_PATTERN = None

def get_sentence_boundary_pattern():
    """Get the compiled sentence boundary pattern."""
    return re.compile(SENTENCE_BOUNDARY)

def get_entity_pattern():
    """Get the compiled Title | Abbreviation | Name alternation."""
    global _ENTITY_PATTERN
    if _ENTITY_PATTERN is None:
        _ENTITY_PATTERN = re.compile(f"{TITLE}|{ABBREVIATION}|{NAME}")
    return _ENTITY_PATTERN

def get_token_split_pattern():
    """Get the compiled tokenizer split pattern."""
    return re.compile(TOKEN_SPLIT)
