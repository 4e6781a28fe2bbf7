"""Whitespace and line-ending canonicalization."""

from __future__ import annotations

import re

_CRLF_RE = re.compile(r"\r\n?")
# Any whitespace except the newline itself (tabs, NBSP, form feeds, ...)
_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_LINE_EDGE_SPACE_RE = re.compile(r"^ +| +$", re.MULTILINE)
_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` to ``\\n``."""
    return _CRLF_RE.sub("\n", text)


def collapse_blank_lines(text: str) -> str:
    """Collapse three or more consecutive newlines to exactly two."""
    return _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", text)


def normalize(text: str) -> str:
    """Return *text* with canonical whitespace.

    - ``\\r\\n`` / ``\\r`` become ``\\n``
    - tabs and runs of horizontal whitespace become one space
    - every line is stripped of leading/trailing spaces
    - at most one blank line separates blocks
    - the whole string is stripped

    Idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    if not text:
        return ""
    out = normalize_newlines(text)
    out = _HORIZONTAL_WS_RE.sub(" ", out)
    out = _LINE_EDGE_SPACE_RE.sub("", out)
    out = collapse_blank_lines(out)
    return out.strip()


def word_count(text: str) -> int:
    """Approximate word count: whitespace-separated tokens of the stripped text."""
    return len(text.split())
