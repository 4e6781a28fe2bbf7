"""agentmd - turn extracted web content into agent-ready Markdown.

Quick usage::

    from agentmd import convert_markdown

    result = convert_markdown(markdown, url="https://example.com/post", title="Post")
    print(result.markdown)      # frontmatter + optimized body
    print(result.sections[0].heading)
    print(result.links)

Chunking for RAG::

    from agentmd import chunk_by_size, to_jsonl

    chunks = chunk_by_size(result.markdown, 2000)
    to_jsonl([convert_markdown(markdown, url=url, chunk_size=2000)], "/tmp/out.jsonl")
"""

from agentmd.errors import AgentMDError, ProfileError, SourceKindError
from agentmd.items import (
    Chunk,
    MarkdownResult,
    Metadata,
    PostStats,
    Section,
    StreamPiece,
    StructuredResult,
)
from agentmd.parser import AgentMarkdown
from agentmd.pipeline import (
    build_structured_result,
    content_hash,
    convert_html,
    convert_markdown,
    iter_markdown_stream,
)
from agentmd.processing import (
    canonicalize_url,
    chunk_by_size,
    dedupe_lines,
    extract_links,
    format_with_frontmatter,
    html_to_markdown,
    normalize,
    optimize,
    remove_hidden,
    split_sections,
    tokenize_atoms,
    word_count,
)
from agentmd.rag import to_jsonl
from agentmd.sources import infer_source_kind

__version__ = "0.1.0"
__all__ = [
    "AgentMDError",
    "AgentMarkdown",
    "Chunk",
    "MarkdownResult",
    "Metadata",
    "PostStats",
    "ProfileError",
    "Section",
    "SourceKindError",
    "StreamPiece",
    "StructuredResult",
    "build_structured_result",
    "canonicalize_url",
    "chunk_by_size",
    "content_hash",
    "convert_html",
    "convert_markdown",
    "dedupe_lines",
    "extract_links",
    "format_with_frontmatter",
    "html_to_markdown",
    "infer_source_kind",
    "iter_markdown_stream",
    "normalize",
    "optimize",
    "remove_hidden",
    "split_sections",
    "to_jsonl",
    "tokenize_atoms",
    "word_count",
]
