"""agentmd.rag — JSONL export of chunked results.

Each line is ``{"id": chunk_id, "text": ..., "metadata": {...}}``, the
upsert shape accepted by Pinecone, Chroma, Weaviate and Qdrant.

Usage::

    from agentmd import convert_markdown, to_jsonl

    result = convert_markdown(md, url=url, chunk_size=2000)
    to_jsonl([result], "/tmp/out.jsonl")
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from agentmd.items import Chunk
from agentmd.processing.normalize import word_count

if TYPE_CHECKING:
    from agentmd.items import MarkdownResult


def _slug_from_url(url: str) -> str:
    """Generate a short identifier from a URL for use in chunk IDs."""
    slug = re.sub(r"https?://", "", url)
    slug = re.sub(r"[^\w]", "_", slug)
    return slug[:60].strip("_") or "document"


def _result_chunks(result: MarkdownResult) -> list[Chunk]:
    if result.chunks:
        return list(result.chunks)
    return [Chunk(content=result.markdown, index=0, total=1)]


def chunk_records(result: MarkdownResult) -> list[dict[str, Any]]:
    """Return the JSONL records for every chunk of *result*."""
    slug = _slug_from_url(result.url)
    return [
        {
            "id": f"{slug}_{chunk.index}",
            "text": chunk.content,
            "metadata": {
                "url": result.url,
                "title": result.title,
                "index": chunk.index,
                "total": chunk.total,
                "word_count": word_count(chunk.content),
            },
        }
        for chunk in _result_chunks(result)
    ]


def to_jsonl(results: list[MarkdownResult], path: str | Path) -> int:
    """Write all chunks of *results* to *path* (created/overwritten).

    Results converted without ``chunk_size`` are written as a single chunk.

    Returns:
        Total number of lines written.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    total = 0
    with out_path.open("w", encoding="utf-8") as fh:
        for result in results:
            for record in chunk_records(result):
                fh.write(json.dumps(record, ensure_ascii=False) + "\n")
                total += 1

    return total
