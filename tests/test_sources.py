"""Unit tests for source-kind inference."""

from __future__ import annotations

import pytest

from agentmd.sources import infer_platform, infer_source_kind


class TestInferSourceKind:
    @pytest.mark.parametrize(
        "url",
        [
            "https://twitter.com/jack/status/20",
            "https://x.com/jack/status/20",
            "https://WWW.X.COM/jack",
            "https://mobile.twitter.com/jack",
            "https://nitter.net/jack/status/20",
        ],
    )
    def test_social_hosts(self, url):
        assert infer_source_kind(url) == "social"
        assert infer_platform(url) == "twitter"

    @pytest.mark.parametrize(
        "url",
        ["https://example.com/x.com", "https://notx.com/", "not a url", "", "http://[::1"],
    )
    def test_everything_else_is_a_document(self, url):
        assert infer_source_kind(url) == "document"
        assert infer_platform(url) is None
