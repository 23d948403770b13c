from __future__ import annotations

DATE_PLACEHOLDER = "${date}"


def has_placeholder(template: str) -> bool:
    return DATE_PLACEHOLDER in template


def build_url(template: str, date_str: str) -> str:
    # every occurrence, not only the first
    return template.replace(DATE_PLACEHOLDER, date_str)
