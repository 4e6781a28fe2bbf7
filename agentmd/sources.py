"""Infer the frontmatter source kind from a URL."""

from __future__ import annotations

from urllib.parse import urlsplit

from agentmd import settings
from agentmd.items import SourceKind


def _host(url: str) -> str:
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""


def infer_platform(url: str) -> str | None:
    """Return ``"twitter"`` for Twitter/X/Nitter URLs, else None."""
    if _host(url) in settings.SOCIAL_HOSTS:
        return settings.DEFAULT_PLATFORM
    return None


def infer_source_kind(url: str) -> SourceKind:
    """Social-post hosts map to ``"social"``; everything else to ``"document"``."""
    return "social" if infer_platform(url) else "document"
