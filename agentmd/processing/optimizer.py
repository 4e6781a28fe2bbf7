"""Agent optimization: spacing, duplicate lines and navigation boilerplate."""

from __future__ import annotations

import logging
import re

from .normalize import collapse_blank_lines, normalize

logger = logging.getLogger(__name__)

# "Skip to content" / "Skip to main (content)" accessibility links, bare or
# as [text] / [text](target)
_SKIP_LINK_RE = re.compile(
    r"\n*\[?[^\S\n]*skip to (?:main(?: content)?|content)[^\S\n]*\]?"
    r"(?:\([^)\n]*\))?[^\S\n]*\n*",
    re.IGNORECASE,
)


def dedupe_lines(text: str) -> str:
    """Drop every non-blank line whose trimmed, case-folded text was already seen.

    Blank lines are always kept so paragraph separators survive.
    """
    seen: set[str] = set()
    out: list[str] = []
    for line in text.split("\n"):
        key = line.strip().casefold()
        if key and key in seen:
            continue
        seen.add(key)
        out.append(line)
    return "\n".join(out)


def remove_hidden(text: str) -> str:
    """Remove skip-navigation links and re-collapse the gaps they leave."""
    out = _SKIP_LINK_RE.sub("\n", text)
    return collapse_blank_lines(out).strip()


def _optimize_once(text: str) -> str:
    return normalize(remove_hidden(dedupe_lines(normalize(text))))


def optimize(text: str) -> str:
    """Return the agent-optimized form of *text*.

    One pass is ``normalize(remove_hidden(dedupe_lines(normalize(text))))``.
    Removing boilerplate can expose new duplicate lines, so passes repeat
    until the text is stable; every pass only removes characters.
    """
    out = _optimize_once(text)
    passes = 1
    while True:
        again = _optimize_once(out)
        if again == out:
            break
        out = again
        passes += 1
    if passes > 1:
        logger.debug("optimize() settled after %d passes", passes)
    return out
