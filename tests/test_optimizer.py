"""Unit tests for duplicate-line removal, boilerplate removal and optimize()."""

from __future__ import annotations

import pytest

from agentmd.processing.optimizer import dedupe_lines, optimize, remove_hidden


class TestDedupeLines:
    def test_repeated_lines_dropped_case_insensitively(self):
        text = "Home\nAbout\nhome\n\nText\n\nABOUT"
        assert dedupe_lines(text) == "Home\nAbout\n\nText\n"

    def test_blank_lines_never_deduplicated(self):
        assert dedupe_lines("a\n\nb\n\nc") == "a\n\nb\n\nc"

    def test_key_ignores_surrounding_whitespace(self):
        assert dedupe_lines("Menu\n  menu  ") == "Menu"

    def test_first_occurrence_wins(self):
        assert dedupe_lines("x\ny\nx\nz") == "x\ny\nz"

    def test_calls_do_not_share_state(self):
        assert dedupe_lines("Footer") == "Footer"
        assert dedupe_lines("Footer") == "Footer"


class TestRemoveHidden:
    def test_markdown_skip_link(self):
        assert remove_hidden("[Skip to content](#main)\n\n# Title") == "# Title"

    def test_bracketed_skip_link(self):
        assert remove_hidden("[skip to main]\nBody") == "Body"

    def test_skip_to_main_content(self):
        assert remove_hidden("Intro\n\nSkip to main content\n\nBody") == "Intro\nBody"

    def test_case_insensitive(self):
        assert remove_hidden("SKIP TO CONTENT\nText") == "Text"

    def test_ordinary_text_untouched(self):
        text = "Skip the intro and go to the content."
        assert remove_hidden(text) == text

    def test_gaps_collapse(self):
        assert remove_hidden("a\n\n\n\nb") == "a\n\nb"


class TestOptimize:
    def test_normalizes_spacing(self):
        md = "  too   many   spaces  \n\n\n\nand   newlines  "
        assert optimize(md) == "too many spaces\n\nand newlines"

    def test_settles_when_boilerplate_exposes_duplicates(self):
        assert optimize("foo\nskip to content foo") == "foo"

    def test_fixture(self, article_md):
        out = optimize(article_md)
        assert out.startswith("Home\nBlog\nAbout\n\n# Parsing Markdown for Agents")
        assert "Skip to content" not in out
        assert out.count("Home") == 1
        assert "Agents work best with clean text. Read the" in out
        assert "\n\n\n" not in out
        assert out.endswith("[the FAQ](https://example.com/faq?fbclid=abc).")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "  too   many   spaces  \n\n\n\nand   newlines  ",
            "A\na\n\n\n[Skip to content](#x)\nA\n\tB\n b \n",
            "x skip to main y\nx\ny\nx skip to content y",
            "```\ncode\n```\n\n```\ncode\n```",
        ],
    )
    def test_idempotent(self, text):
        once = optimize(text)
        assert optimize(once) == once

    def test_idempotent_on_fixture(self, article_md):
        once = optimize(article_md)
        assert optimize(once) == once
