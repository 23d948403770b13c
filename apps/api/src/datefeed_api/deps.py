from __future__ import annotations

from typing import Any

import httpx
from fastapi import Request

from datefeed_api.logging_config import configure_logging
from datefeed_api.services.feed_service import FeedService
from datefeed_api.settings import Settings, get_settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    options: dict[str, Any] = {"follow_redirects": True}
    if settings.upstream_timeout is not None:
        options["timeout"] = settings.upstream_timeout
    return httpx.AsyncClient(**options)


def init_app_state(app) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    client = create_http_client(settings)
    app.state.settings = settings
    app.state.http_client = client
    app.state.feed_service = FeedService(settings, client)


async def close_app_state(app) -> None:
    client = getattr(app.state, "http_client", None)
    if client is not None:
        await client.aclose()


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_feed_service(request: Request) -> FeedService:
    return request.app.state.feed_service
