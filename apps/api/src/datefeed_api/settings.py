from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

import orjson
from datefeed_core.dates import DEFAULT_TIMEZONE, load_timezone
from datefeed_core.errors import SourceConfigError
from datefeed_core.sources import (
    DEFAULT_SOURCE_KEY,
    DEFAULT_SOURCES,
    InvalidSourcePolicy,
    SourceMap,
)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    sources: SourceMap
    default_source: str
    invalid_source_policy: InvalidSourcePolicy
    timezone: str
    upstream_timeout: float | None
    log_level: str
    cors_origins: tuple[str, ...]


def _parse_sources(raw_sources: str | None) -> SourceMap:
    if not raw_sources:
        return SourceMap(DEFAULT_SOURCES)
    try:
        payload = orjson.loads(raw_sources)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"DATEFEED_SOURCES is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("DATEFEED_SOURCES must be a JSON object of source -> template")
    try:
        return SourceMap({str(key).lower(): value for key, value in payload.items()})
    except SourceConfigError as exc:
        raise ValueError(f"DATEFEED_SOURCES is invalid: {exc}") from exc


def _parse_policy(raw_policy: str) -> InvalidSourcePolicy:
    try:
        return InvalidSourcePolicy(raw_policy.lower().strip())
    except ValueError as exc:
        raise ValueError("DATEFEED_INVALID_SOURCE must be 'default' or 'reject'") from exc


def _parse_timeout(raw_timeout: str | None) -> float | None:
    if raw_timeout is None or not raw_timeout.strip():
        return None
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise ValueError("DATEFEED_UPSTREAM_TIMEOUT must be a number of seconds") from exc
    if timeout <= 0:
        raise ValueError("DATEFEED_UPSTREAM_TIMEOUT must be positive")
    return timeout


@lru_cache
def get_settings() -> Settings:
    sources = _parse_sources(os.getenv("DATEFEED_SOURCES"))
    default_source = os.getenv("DATEFEED_DEFAULT_SOURCE", DEFAULT_SOURCE_KEY).lower()
    if default_source not in sources:
        raise ValueError(
            f"DATEFEED_DEFAULT_SOURCE={default_source} is not one of: {', '.join(sources)}"
        )
    invalid_source_policy = _parse_policy(os.getenv("DATEFEED_INVALID_SOURCE", "default"))
    timezone = os.getenv("DATEFEED_TIMEZONE", DEFAULT_TIMEZONE)
    load_timezone(timezone)
    upstream_timeout = _parse_timeout(os.getenv("DATEFEED_UPSTREAM_TIMEOUT"))
    log_level = os.getenv("DATEFEED_LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"DATEFEED_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
    raw_origins = os.getenv("DATEFEED_CORS_ORIGINS", "")
    cors_origins = tuple(origin.strip() for origin in raw_origins.split(",") if origin.strip())
    return Settings(
        sources=sources,
        default_source=default_source,
        invalid_source_policy=invalid_source_policy,
        timezone=timezone,
        upstream_timeout=upstream_timeout,
        log_level=log_level,
        cors_origins=cors_origins,
    )
