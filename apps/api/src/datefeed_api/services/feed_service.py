from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

import httpx
from datefeed_core.fetch import UpstreamResponse, fetch_with_fallback
from datefeed_core.sources import SelectedSource, resolve_source

from datefeed_api.settings import Settings

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FeedService:
    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._clock = clock or utc_now

    def select(self, requested: str | None) -> SelectedSource:
        return resolve_source(
            self._settings.sources,
            requested,
            policy=self._settings.invalid_source_policy,
            default_key=self._settings.default_source,
        )

    async def fetch(self, requested: str | None) -> UpstreamResponse:
        """Resolve ``requested`` and fetch its feed, falling back one day on 404.

        Raises ``InvalidSourceError`` only when the reject policy is configured.
        """
        selected = self.select(requested)
        logger.info(
            "Selected template for source=%r (%s): %s",
            requested,
            selected.key,
            selected.template,
        )
        return await fetch_with_fallback(
            self._client,
            selected.template,
            self._clock(),
            self._settings.timezone,
        )
