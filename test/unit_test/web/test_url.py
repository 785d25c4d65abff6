"""Unit tests for URL helpers."""

from unittest.mock import patch

import pytest

from recordkit.web.url import www


class TestWww:
    @pytest.mark.parametrize(
        "url,expected",
        [
            (None, "/"),
            ("", "/"),
            ("plugins/3", "/plugins/3"),
            ("/plugins/3", "/plugins/3"),
            ("https://example.com/a", "https://example.com/a"),
            ("//cdn.example.com/app.js", "//cdn.example.com/app.js"),
            ("mailto:jane@example.com", "mailto:jane@example.com"),
        ],
    )
    def test_default_root(self, url, expected):
        assert www(url) == expected

    @pytest.mark.parametrize("root", ["https://example.com/admin", "https://example.com/admin/"])
    def test_configured_root(self, root):
        with patch("recordkit.web.url.settings.web_root", root):
            assert www("plugins") == "https://example.com/admin/plugins"
            assert www("/plugins") == "https://example.com/admin/plugins"
            assert www() == "https://example.com/admin/"
