"""agentmd.pipeline — markdown in, structured agent-ready result out.

Basic usage::

    from agentmd.pipeline import convert_markdown

    result = convert_markdown(
        markdown,
        url="https://example.com/blog/post",
        title="Post title",
        chunk_size=2000,
    )
    print(result.markdown)        # frontmatter + optimized body
    print(result.links)
    for chunk in result.chunks or []:
        print(chunk.index, chunk.total, len(chunk.content))

HTML input goes through an injectable converter::

    result = convert_html(html, url=url, converter=my_html_to_markdown)
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable, Iterator
from typing import Any

from agentmd.errors import SourceKindError
from agentmd.items import MarkdownResult, Metadata, StreamPiece, StructuredResult
from agentmd.language import detect_language
from agentmd.processing.chunker import chunk_by_size
from agentmd.processing.frontmatter import format_with_frontmatter
from agentmd.processing.links import extract_links
from agentmd.processing.markdown import html_to_markdown
from agentmd.processing.normalize import word_count
from agentmd.processing.optimizer import optimize
from agentmd.processing.sections import split_sections

logger = logging.getLogger(__name__)

_SOURCE_KINDS = ("document", "social")


def build_structured_result(
    markdown: str,
    url: str = "",
    title: str = "",
    description: str | None = None,
) -> StructuredResult:
    """Optimize *markdown* and derive its sections, links and word count.

    *url*, *title* and *description* are accepted for symmetry with the
    frontmatter step and do not affect the result.
    """
    optimized = optimize(markdown)
    return StructuredResult(
        sections=split_sections(optimized),
        links=extract_links(optimized),
        word_count=word_count(optimized),
    )


def content_hash(text: str) -> str:
    """SHA-256 hex digest of *text* (UTF-8)."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def convert_markdown(
    markdown: str,
    *,
    url: str = "",
    title: str = "",
    description: str | None = None,
    metadata: Metadata | None = None,
    source: str = "document",
    chunk_size: int | None = None,
    detect_lang: bool = False,
) -> MarkdownResult:
    """Run the full pipeline over an already-converted markdown body.

    Args:
        markdown:    Markdown produced by the upstream HTML converter.
        url:         Source URL (frontmatter ``source``; social post id).
        title:       Page title; falls back to ``metadata.title``.
        description: Page description; falls back to ``metadata.description``.
        metadata:    Optional :class:`~agentmd.items.Metadata` from the extractor.
        source:      ``"document"`` or ``"social"`` frontmatter variant.
        chunk_size:  When a positive int, the final document is chunked.
        detect_lang: Detect ``metadata.language`` from the body when missing.

    Returns:
        :class:`~agentmd.items.MarkdownResult` whose ``markdown`` is the
        frontmatter-wrapped document.

    Raises:
        SourceKindError: if *source* is not a known source kind.
    """
    if source not in _SOURCE_KINDS:
        raise SourceKindError(source)

    meta = metadata.model_copy() if metadata is not None else Metadata()
    title = title or meta.title
    if description is None:
        description = meta.description

    body = optimize(markdown)
    structured = build_structured_result(body, url, title, description)

    if detect_lang and not meta.language:
        meta.language = detect_language(body)

    result = MarkdownResult(
        url=url,
        title=title,
        description=description,
        markdown=body,
        sections=structured.sections,
        links=structured.links,
        word_count=structured.word_count,
        content_hash=content_hash(body),
        metadata=meta,
    )
    document = format_with_frontmatter(source, result)

    update: dict[str, Any] = {"markdown": document}
    if chunk_size is not None and chunk_size > 0:
        update["chunks"] = chunk_by_size(document, chunk_size)
        logger.debug(
            "Chunked %s into %d chunk(s) of <= %d chars",
            url or "<document>", len(update["chunks"]), chunk_size,
        )
    return result.model_copy(update=update)


def convert_html(
    html: str,
    *,
    converter: Callable[[str], str] = html_to_markdown,
    **kwargs: Any,
) -> MarkdownResult:
    """Convert *html* with *converter*, then run :func:`convert_markdown`.

    All keyword arguments other than *converter* are forwarded.
    """
    return convert_markdown(converter(html), **kwargs)


def iter_markdown_stream(result: MarkdownResult) -> Iterator[StreamPiece]:
    """Yield *result* piece by piece: meta, then each section, then links."""
    yield StreamPiece(
        type="meta",
        content=f"# {result.title}\n\n{result.description or ''}\n\nURL: {result.url}\n\n",
    )

    for section in result.sections:
        if not (section.heading or section.content):
            continue
        if section.heading:
            content = f"## {section.heading}\n\n{section.content}"
        else:
            content = section.content
        yield StreamPiece(type="section", content=content, section=section)

    if result.links:
        listing = "\n".join(f"- {link}" for link in result.links)
        yield StreamPiece(type="links", content=f"\n## Links\n\n{listing}\n")
