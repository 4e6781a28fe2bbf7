"""Tests for JSONL chunk export."""

from __future__ import annotations

import json

from agentmd.pipeline import convert_markdown
from agentmd.processing.normalize import word_count
from agentmd.rag import chunk_records, to_jsonl


class TestChunkRecords:
    def test_ids_and_metadata(self, article_md):
        result = convert_markdown(
            article_md, url="https://example.com/blog/agents", title="Agents", chunk_size=200,
        )
        records = chunk_records(result)
        assert len(records) == len(result.chunks)
        assert records[0]["id"] == "example_com_blog_agents_0"
        meta = records[-1]["metadata"]
        assert meta["url"] == "https://example.com/blog/agents"
        assert meta["title"] == "Agents"
        assert meta["index"] == len(records) - 1
        assert meta["total"] == len(records)
        assert meta["word_count"] == word_count(records[-1]["text"])

    def test_unchunked_result_is_one_record(self):
        result = convert_markdown("Body text", url="")
        records = chunk_records(result)
        assert len(records) == 1
        assert records[0]["id"] == "document_0"
        assert records[0]["text"] == result.markdown


class TestToJsonl:
    def test_writes_one_line_per_chunk(self, tmp_path, article_md):
        results = [
            convert_markdown(article_md, url="https://example.com/a", chunk_size=200),
            convert_markdown("Short", url="https://example.com/b"),
        ]
        out = tmp_path / "nested" / "out.jsonl"
        written = to_jsonl(results, out)
        lines = out.read_text(encoding="utf-8").splitlines()
        assert written == len(lines) == len(results[0].chunks) + 1
        parsed = [json.loads(line) for line in lines]
        assert parsed[-1]["metadata"]["url"] == "https://example.com/b"
        assert all(set(p) == {"id", "text", "metadata"} for p in parsed)
