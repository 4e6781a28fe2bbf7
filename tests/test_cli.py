"""Tests for the command-line entry point."""

from __future__ import annotations

import io
import json

import pytest

from agentmd.__main__ import main


@pytest.fixture
def article_file(tmp_path, article_md):
    path = tmp_path / "article.md"
    path.write_text(article_md, encoding="utf-8")
    return path


class TestMain:
    def test_prints_markdown_with_frontmatter(self, article_file, capsys):
        code = main([str(article_file), "--url", "https://example.com/p", "--title", "Agents"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith('---\nsource: "https://example.com/p"\n')
        assert "title: Agents" in out
        assert out.endswith("\n")

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("# Hi\n\nthere"))
        assert main(["-"]) == 0
        assert capsys.readouterr().out.endswith("---\n\n# Hi\n\nthere\n")

    def test_json_output(self, article_file, capsys):
        assert main([str(article_file), "--json", "--chunk-size", "200"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["links"][0] == "https://docs.example.com/options"
        assert data["chunks"][0]["index"] == 0
        assert data["chunks"][0]["total"] == len(data["chunks"])

    def test_html_input(self, tmp_path, article_html, capsys):
        path = tmp_path / "page.html"
        path.write_text(article_html, encoding="utf-8")
        assert main([str(path), "--html"]) == 0
        assert "# Fixture Article" in capsys.readouterr().out

    def test_auto_source_for_social_url(self, article_file, capsys):
        code = main([
            str(article_file), "--url", "https://x.com/jack/status/20",
            "--source", "auto", "--author", "jack",
        ])
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("---\nplatform: twitter\n")
        assert "tweet_id: 20" in out
        assert "author:\n  name: jack" in out

    def test_chunks_output(self, article_file, capsys):
        assert main([str(article_file), "--chunk-size", "200", "--chunks"]) == 0
        assert "chunk 1/" in capsys.readouterr().out

    def test_jsonl_export(self, article_file, tmp_path, capsys):
        out_path = tmp_path / "chunks.jsonl"
        assert main([str(article_file), "--chunk-size", "200", "--jsonl", str(out_path)]) == 0
        lines = out_path.read_text(encoding="utf-8").splitlines()
        assert lines
        assert "wrote" in capsys.readouterr().err

    def test_profile_applies_per_domain(self, article_file, profile_path, capsys):
        code = main([
            str(article_file), "--url", "https://x.com/jack/status/20",
            "--profile", str(profile_path), "--json",
        ])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["markdown"].startswith("---\nplatform: twitter\n")
        assert data["chunks"] is not None

    def test_flags_override_profile(self, article_file, profile_path, capsys):
        code = main([
            str(article_file), "--url", "https://x.com/jack/status/20",
            "--profile", str(profile_path), "--source", "document", "--chunk-size", "0", "--json",
        ])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["markdown"].startswith("---\nsource:")
        assert data["chunks"] is None

    def test_missing_input_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.md")]) == 1
        assert "agentmd:" in capsys.readouterr().err

    def test_bad_profile(self, article_file, tmp_path, capsys):
        assert main([str(article_file), "--profile", str(tmp_path / "missing.yaml")]) == 1
        assert "Cannot load profile" in capsys.readouterr().err

    def test_unknown_source_from_profile(self, article_file, tmp_path, capsys):
        profile = tmp_path / "p.yaml"
        profile.write_text("default:\n  source: reddit\n", encoding="utf-8")
        assert main([str(article_file), "--profile", str(profile)]) == 1
        assert "Unknown source kind" in capsys.readouterr().err
