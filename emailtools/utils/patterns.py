"""Regex patterns for email extraction and validation."""

import re
from typing import Pattern

# Whitespace as browsers define it for list input. Narrower than Python's \s
# (no \x1c-\x1f or \x85) and wider by \ufeff.
WHITESPACE_CHARS = r'\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff'

# Loose pattern used to find addresses anywhere in free-form text.
# Matches only start at the beginning of a run of address characters.
EXTRACTION_PATTERN: Pattern = re.compile(
    r'(?<![A-Za-z0-9._-])[A-Za-z0-9._-]+@[A-Za-z0-9._-]+\.[A-Za-z0-9._-]+',
    re.IGNORECASE,
)

# Strict pattern used to classify a single list token. Must match the whole token.
VALIDATION_PATTERN: Pattern = re.compile(
    r'(([^<>()\[\]\\.,;:' + WHITESPACE_CHARS + r'@"]+(\.[^<>()\[\]\\.,;:' + WHITESPACE_CHARS + r'@"]+)*)|(".+"))'
    r'@'
    r'((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))'
)

# Separators between entries of a pasted or uploaded list
TOKEN_SEPARATOR: Pattern = re.compile(r'[,' + WHITESPACE_CHARS + r']+')

BLANK_TEXT: Pattern = re.compile(r'[' + WHITESPACE_CHARS + r']*')


def is_blank(text: str) -> bool:
    """Return True if text is empty or holds only whitespace."""
    return not text or BLANK_TEXT.fullmatch(text) is not None


def is_valid_syntax(candidate: str) -> bool:
    """Return True if the whole candidate matches the strict address pattern."""
    return VALIDATION_PATTERN.fullmatch(candidate) is not None
