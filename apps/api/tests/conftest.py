from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import httpx
import pytest
from datefeed_api.main import create_app
from datefeed_api.services.feed_service import FeedService
from datefeed_api.settings import get_settings
from fastapi.testclient import TestClient

FIXED_NOW = datetime(2025, 5, 9, 2, 0, tzinfo=timezone.utc)

_ENV_VARS = (
    "DATEFEED_SOURCES",
    "DATEFEED_DEFAULT_SOURCE",
    "DATEFEED_INVALID_SOURCE",
    "DATEFEED_TIMEZONE",
    "DATEFEED_UPSTREAM_TIMEOUT",
    "DATEFEED_LOG_LEVEL",
    "DATEFEED_CORS_ORIGINS",
)


class FakeUpstream:
    def __init__(self) -> None:
        self.urls: list[str] = []
        self.methods: list[str] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, text="OK"
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        self.methods.append(request.method)
        return self.handler(request)


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app, upstream: FakeUpstream):
    with TestClient(app) as client:
        fake_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
        app.state.feed_service = FeedService(
            app.state.settings,
            fake_client,
            clock=lambda: FIXED_NOW,
        )
        yield client
