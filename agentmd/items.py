"""Pydantic models and chunk records produced by the conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SourceKind = Literal["document", "social"]


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

class Section(BaseModel):
    """A heading plus the body text that follows it, up to the next heading."""

    model_config = ConfigDict(frozen=True)

    heading: str = ""
    content: str = ""


@dataclass
class Chunk:
    """One size-bounded slice of a markdown document.

    ``total`` is filled in once every chunk of a call has been produced.
    """

    content: str
    index: int
    total: int = 0


class StructuredResult(BaseModel):
    """Sections, links and word count derived from one markdown body."""

    sections: list[Section] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    word_count: int = 0


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class PostStats(BaseModel):
    """Engagement counters for a social post, kept as display strings."""

    replies: str | None = None
    retweets: str | None = None
    likes: str | None = None
    views: str | None = None

    @field_validator("replies", "retweets", "likes", "views", mode="before")
    @classmethod
    def coerce_counter(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class Metadata(BaseModel):
    """Page metadata handed over by the upstream extractor."""

    title: str = ""
    description: str | None = None
    author: str | None = None
    published_at: str | None = None
    image: str | None = None
    canonical_url: str | None = None
    language: str | None = None
    platform: str | None = None
    post_stats: PostStats | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v or ""


# ---------------------------------------------------------------------------
# Conversion output
# ---------------------------------------------------------------------------

class MarkdownResult(BaseModel):
    """Everything produced for one converted document.

    ``markdown`` is the body handed to the frontmatter formatter; results
    returned by :func:`agentmd.pipeline.convert_markdown` carry the final,
    frontmatter-wrapped document instead.
    """

    url: str = ""
    title: str = ""
    description: str | None = None
    markdown: str = ""
    sections: list[Section] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    word_count: int = 0
    content_hash: str = ""
    metadata: Metadata | None = None
    chunks: list[Chunk] | None = None

    @field_validator("url", mode="before")
    @classmethod
    def strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


class StreamPiece(BaseModel):
    """A piece emitted by :func:`agentmd.pipeline.iter_markdown_stream`."""

    type: Literal["meta", "section", "links"]
    content: str
    section: Section | None = None
