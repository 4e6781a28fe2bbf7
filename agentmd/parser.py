"""agentmd.parser — High-level AgentMarkdown class.

Bundles the source kind, chunk size, HTML converter and language detection
switch into one reusable object.

Usage::

    from agentmd import AgentMarkdown

    converter = AgentMarkdown(chunk_size=2000)
    result = converter.convert(markdown, url="https://example.com/post")

    # Social posts get the social frontmatter variant
    social = AgentMarkdown(source="social")
    result = social.convert_html(embed_html, url="https://x.com/jack/status/20")

    # Streaming
    for piece in converter.stream(markdown, url="https://example.com/post"):
        print(piece.type, piece.content)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from agentmd import settings
from agentmd.errors import SourceKindError
from agentmd.pipeline import convert_markdown, iter_markdown_stream
from agentmd.processing.markdown import html_to_markdown

if TYPE_CHECKING:
    from agentmd.items import MarkdownResult, StreamPiece


class AgentMarkdown:
    """Reusable converter with fixed pipeline options.

    Args:
        source:      Frontmatter variant, ``"document"`` (default) or ``"social"``.
        chunk_size:  Chunk the final document when positive (default: no chunking).
        converter:   HTML-to-Markdown function used by :meth:`convert_html`.
        detect_lang: Fill in a missing language with ``langdetect``.

    Raises:
        SourceKindError: if *source* is not a known source kind.
    """

    def __init__(
        self,
        source: str = settings.DEFAULT_SOURCE,
        chunk_size: int = settings.DEFAULT_CHUNK_SIZE,
        converter: Callable[[str], str] = html_to_markdown,
        detect_lang: bool = settings.DETECT_LANGUAGE,
    ) -> None:
        if source not in ("document", "social"):
            raise SourceKindError(source)
        self._source = source
        self._chunk_size = chunk_size
        self._converter = converter
        self._detect_lang = detect_lang

    def _options(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        kwargs.setdefault("source", self._source)
        kwargs.setdefault("chunk_size", self._chunk_size)
        kwargs.setdefault("detect_lang", self._detect_lang)
        return kwargs

    def convert(self, markdown: str, **kwargs: Any) -> MarkdownResult:
        """Convert an already-extracted markdown body.

        Keyword arguments are forwarded to
        :func:`agentmd.pipeline.convert_markdown`; ``source``, ``chunk_size``
        and ``detect_lang`` default to the constructor values.
        """
        return convert_markdown(markdown, **self._options(kwargs))

    def convert_html(self, html: str, **kwargs: Any) -> MarkdownResult:
        """Convert *html* with the configured converter, then :meth:`convert`."""
        return self.convert(self._converter(html), **kwargs)

    def stream(self, markdown: str, **kwargs: Any) -> Iterator[StreamPiece]:
        """Convert *markdown* and yield meta, section and links pieces."""
        return iter_markdown_stream(self.convert(markdown, **kwargs))
