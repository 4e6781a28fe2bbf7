"""Text-structuring core: normalization, sections, links, chunks, frontmatter."""

from .chunker import Atom, AtomKind, chunk_by_size, tokenize_atoms
from .frontmatter import escape_value, format_with_frontmatter, parse_post_id
from .links import canonicalize_url, extract_links
from .markdown import html_to_markdown
from .normalize import normalize, word_count
from .optimizer import dedupe_lines, optimize, remove_hidden
from .sections import split_sections

__all__ = [
    "Atom",
    "AtomKind",
    "canonicalize_url",
    "chunk_by_size",
    "dedupe_lines",
    "escape_value",
    "extract_links",
    "format_with_frontmatter",
    "html_to_markdown",
    "normalize",
    "optimize",
    "parse_post_id",
    "remove_hidden",
    "split_sections",
    "tokenize_atoms",
    "word_count",
]
