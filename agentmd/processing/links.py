"""Link extraction and URL canonicalization."""

from __future__ import annotations

import logging
import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from agentmd import settings

logger = logging.getLogger(__name__)

_INLINE_LINK_RE = re.compile(r"\[([^\]]*)\]\((https?://[^)\s]+)\)")
_BARE_URL_RE = re.compile(r"https?://[^\s)\]\"]+")
_TRAILING_PUNCT_RE = re.compile(r"[)\]\"']+$")


def _is_tracking_param(key: str) -> bool:
    return key.lower().startswith(settings.TRACKING_PARAM_PREFIXES)


def canonicalize_url(url: str) -> str:
    """Strip tracking query parameters from *url* and re-serialize it.

    Scheme and host are lower-cased and an empty http(s) path becomes ``/``.
    The query is only re-encoded when a parameter was actually removed; the
    fragment is kept.  Strings that do not parse as absolute URLs are
    returned unchanged.
    """
    try:
        parsed = urlsplit(url)
    except ValueError as exc:
        logger.debug("Leaving unparsable URL %r unchanged: %s", url, exc)
        return url
    if not parsed.scheme or not parsed.netloc:
        return url

    scheme = parsed.scheme.lower()
    path = parsed.path
    if not path and scheme in ("http", "https"):
        path = "/"

    query = parsed.query
    if query:
        pairs = parse_qsl(query, keep_blank_values=True)
        kept = [(k, v) for k, v in pairs if not _is_tracking_param(k)]
        if len(kept) != len(pairs):
            query = urlencode(kept)

    return urlunsplit((scheme, parsed.netloc.lower(), path, query, parsed.fragment))


def extract_links(markdown: str) -> list[str]:
    """Return the unique, canonicalized links of *markdown*, sorted by code point.

    Inline ``[text](url)`` links are collected first, then bare ``http(s)://``
    URLs outside the spans already captured.
    """
    seen: set[str] = set()
    links: list[str] = []

    def _add(raw: str) -> None:
        url = canonicalize_url(raw)
        if url not in seen:
            seen.add(url)
            links.append(url)

    masked = list(markdown)
    for match in _INLINE_LINK_RE.finditer(markdown):
        _add(match.group(2))
        start, end = match.span(2)
        masked[start:end] = " " * (end - start)

    for match in _BARE_URL_RE.finditer("".join(masked)):
        raw = _TRAILING_PUNCT_RE.sub("", match.group(0))
        _add(raw)

    return sorted(links)
