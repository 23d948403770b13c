from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from datefeed_core.errors import InvalidSourceError, SourceConfigError
from datefeed_core.templating import DATE_PLACEHOLDER, has_placeholder

logger = logging.getLogger(__name__)

DEFAULT_SOURCES: Mapping[str, str] = MappingProxyType(
    {
        "datiya": "https://free.datiya.com/uploads/${date}-clash.yaml",
        "gamma": "https://feeds.gamma-service.net/data?for_date=${date}&format=json",
    }
)
DEFAULT_SOURCE_KEY = "datiya"


class InvalidSourcePolicy(str, Enum):
    DEFAULT = "default"
    REJECT = "reject"


class SourceMap(Mapping[str, str]):
    """Read-only mapping of lowercase source keys to URL templates."""

    def __init__(self, templates: Mapping[str, str]) -> None:
        if not templates:
            raise SourceConfigError("At least one source must be configured")
        entries: dict[str, str] = {}
        for key, template in templates.items():
            if not isinstance(key, str) or not isinstance(template, str):
                raise SourceConfigError("Source keys and templates must be strings")
            if not key or key != key.lower():
                raise SourceConfigError(f"Source key must be non-empty lowercase: {key!r}")
            if not has_placeholder(template):
                raise SourceConfigError(
                    f"Template for source {key!r} is missing the {DATE_PLACEHOLDER} placeholder"
                )
            entries[key] = template
        self._entries = MappingProxyType(entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SourceMap({dict(self._entries)!r})"

    def keys_list(self) -> list[str]:
        return list(self._entries)


@dataclass(frozen=True)
class SelectedSource:
    key: str
    template: str
    defaulted: bool = False


def resolve_source(
    source_map: SourceMap,
    requested: str | None,
    policy: InvalidSourcePolicy = InvalidSourcePolicy.DEFAULT,
    default_key: str = DEFAULT_SOURCE_KEY,
) -> SelectedSource:
    """Pick the template for ``requested``, matching keys case-insensitively.

    Under ``InvalidSourcePolicy.REJECT`` a missing or unknown key raises
    ``InvalidSourceError``; under ``DEFAULT`` the default key is used instead.
    """
    key = requested.lower() if requested else None
    if key and key in source_map:
        return SelectedSource(key=key, template=source_map[key])

    error = InvalidSourceError(requested, source_map.keys_list())
    if policy is InvalidSourcePolicy.REJECT:
        raise error
    if default_key not in source_map:
        raise SourceConfigError(f"Default source {default_key!r} is not configured")
    logger.warning("%s Falling back to %r.", error.message, default_key)
    return SelectedSource(key=default_key, template=source_map[default_key], defaulted=True)
