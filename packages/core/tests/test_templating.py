from __future__ import annotations

from datefeed_core.sources import DEFAULT_SOURCES
from datefeed_core.templating import DATE_PLACEHOLDER, build_url


def test_every_builtin_source_is_fully_substituted() -> None:
    for template in DEFAULT_SOURCES.values():
        url = build_url(template, "20250509")
        assert "20250509" in url
        assert DATE_PLACEHOLDER not in url


def test_multiple_placeholders_get_the_same_date() -> None:
    template = "https://example.com/${date}/feed-${date}.json?d=${date}"
    url = build_url(template, "20250509")
    assert url == "https://example.com/20250509/feed-20250509.json?d=20250509"


def test_template_without_placeholder_is_unchanged() -> None:
    assert build_url("https://example.com/static", "20250509") == "https://example.com/static"
