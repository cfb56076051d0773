"""
Line-level normalization applied before any extraction.

Input text may be anything a decoder produced: CRLF line endings, NULs and other
control characters from a bad PDF text layer, non-breaking spaces. These helpers
reduce it to clean lines without ever raising.
"""

import re
from typing import List

CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
WHITESPACE_RE = re.compile(r"\s+")
LEADING_BULLET_RE = re.compile(r"^[\s•●▪◦·\-*>+]+")


def scrub_text(text: str) -> str:
    """Normalize line endings and drop control characters (tabs are kept)."""
    if not text:
        return ""
    t = text.replace("\r\n", "\n").replace("\r", "\n")
    t = t.replace("\u00a0", " ")
    return CONTROL_CHARS_RE.sub("", t)


def split_lines(text: str) -> List[str]:
    """
    Split text into stripped lines, preserving blank lines as "".

    Blank lines are kept so callers can reason about document positions;
    extractors skip them as needed.
    """
    return [line.strip() for line in scrub_text(text).split("\n")]


def non_blank_lines(text: str) -> List[str]:
    return [line for line in split_lines(text) if line]


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def strip_bullet(text: str) -> str:
    """
    Remove leading bullet glyphs.

    Examples:
        '• Python' -> 'Python'
        '- Led migration' -> 'Led migration'
    """
    return LEADING_BULLET_RE.sub("", text).strip()
