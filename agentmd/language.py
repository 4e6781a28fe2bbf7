"""Language detection fallback for documents without a declared language.

Only the prose of a markdown document is worth feeding to langdetect:
frontmatter, fenced code and URLs skew it towards whatever language the
identifiers or hostnames happen to resemble.  :func:`detection_sample`
strips those before :func:`detect_language` looks at the text.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_MIN_SAMPLE_CHARS = 40

_FRONTMATTER_RE = re.compile(r"\A\s*---\n.*?\n---[ \t]*(?:\n|\Z)", re.DOTALL)
_CODE_FENCE_RE = re.compile(
    r"^[ \t]*(`{3,})[^`\n]*\n.*?(?:^[ \t]*\1`*[ \t]*$|\Z)", re.DOTALL | re.MULTILINE
)
_INLINE_CODE_RE = re.compile(r"`[^`\n]+`")
_LINK_RE = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
_URL_RE = re.compile(r"https?://\S+")
_WS_RE = re.compile(r"\s+")


def detection_sample(text: str) -> str:
    """Return the prose of *text*: no frontmatter, code, link targets or bare URLs."""
    sample = text.replace("\r\n", "\n")
    sample = _FRONTMATTER_RE.sub("", sample, count=1)
    sample = _CODE_FENCE_RE.sub(" ", sample)
    sample = _INLINE_CODE_RE.sub(" ", sample)
    sample = _LINK_RE.sub(r"\1", sample)
    sample = _URL_RE.sub(" ", sample)
    return _WS_RE.sub(" ", sample).strip()


def detect_language(text: str) -> str | None:
    """Return an ISO 639-1 code for *text*, or None when it is too short or undetectable."""
    if not text:
        return None
    sample = detection_sample(text)
    if len(sample) < _MIN_SAMPLE_CHARS:
        logger.debug("Skipping language detection: %d chars of prose", len(sample))
        return None
    try:
        from langdetect import DetectorFactory, detect

        DetectorFactory.seed = 0
        code = detect(sample)
    except Exception as exc:
        logger.debug("Language detection failed: %s", exc)
        return None
    return code if code else None
