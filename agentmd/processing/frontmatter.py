"""Source-specific frontmatter headers wrapped around a markdown body.

Two fixed variants, selected by source kind:

``document``::

    ---
    source: https://example.com/post
    canonical: https://example.com/post
    title: Post title
    content_hash: 3f2a...
    word_count: 512
    ---

``social``::

    ---
    platform: twitter
    source: https://x.com/jack/status/20
    tweet_id: 20
    content_hash: 9b1c...
    stats:
      likes: 120
    author:
      name: jack
    ---

Keys whose value is missing or blank are left out entirely.
"""

from __future__ import annotations

import re

from agentmd import settings
from agentmd.errors import SourceKindError
from agentmd.items import MarkdownResult, Metadata, PostStats

_NEWLINES_RE = re.compile(r"\r?\n|\r")
_POST_ID_RE = re.compile(r"/status/(\d+)")

_STAT_FIELDS = ("replies", "retweets", "likes", "views")


def escape_value(value: str) -> str:
    """Fold newlines into spaces; quote values containing ``:`` or starting with ``"``."""
    s = _NEWLINES_RE.sub(" ", value).strip()
    if ":" in s or s.startswith('"'):
        return '"' + s.replace('"', '\\"') + '"'
    return s


def _line(key: str, value: str | None, indent: str = "") -> str | None:
    if value is None or not value.strip():
        return None
    return f"{indent}{key}: {escape_value(value)}"


def parse_post_id(url: str) -> str | None:
    """Return the digits of a ``/status/<digits>`` path segment, if any."""
    match = _POST_ID_RE.search(url)
    return match.group(1) if match else None


def _wrap(lines: list[str | None], body: str) -> str:
    front = "\n".join(line for line in lines if line)
    return f"---\n{front}\n---\n\n{body}"


def _format_document(result: MarkdownResult) -> str:
    meta = result.metadata or Metadata()
    lines = [
        _line("source", result.url),
        _line("canonical", meta.canonical_url or result.url),
        _line("title", result.title),
        _line("description", result.description),
        _line("image", meta.image),
        _line("author", meta.author),
        _line("published_at", meta.published_at),
        _line("language", meta.language),
        _line("content_hash", result.content_hash),
        _line("word_count", str(result.word_count)),
    ]
    return _wrap(lines, result.markdown)


def _stats_block(stats: PostStats | None) -> list[str | None]:
    if stats is None:
        return []
    entries = [_line(name, getattr(stats, name), indent="  ") for name in _STAT_FIELDS]
    entries = [entry for entry in entries if entry]
    if not entries:
        return []
    return ["stats:", *entries]


def _format_social(result: MarkdownResult) -> str:
    meta = result.metadata or Metadata()
    lines = [
        _line("platform", meta.platform or settings.DEFAULT_PLATFORM),
        _line("source", result.url),
        _line("tweet_id", parse_post_id(result.url)),
        _line("image", meta.image),
        _line("published_at", meta.published_at),
        _line("language", meta.language),
        _line("content_hash", result.content_hash),
    ]
    lines.extend(_stats_block(meta.post_stats))
    author = _line("name", meta.author, indent="  ")
    if author:
        lines.extend(["author:", author])
    return _wrap(lines, result.markdown)


def format_with_frontmatter(source_kind: str, result: MarkdownResult) -> str:
    """Return ``result.markdown`` prefixed with the *source_kind* frontmatter.

    Raises:
        SourceKindError: if *source_kind* is neither ``"document"`` nor ``"social"``.
    """
    if source_kind == "document":
        return _format_document(result)
    if source_kind == "social":
        return _format_social(result)
    raise SourceKindError(source_kind)
