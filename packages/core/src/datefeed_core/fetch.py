from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import httpx

from datefeed_core.dates import DEFAULT_TIMEZONE, format_feed_date
from datefeed_core.templating import build_url

logger = logging.getLogger(__name__)

PLAIN_TEXT = "text/plain; charset=utf-8"

_FETCH_ERRORS = (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError)


class Attempt(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"

    @property
    def days_back(self) -> int:
        return 0 if self is Attempt.TODAY else 1

    @property
    def allows_fallback(self) -> bool:
        return self is Attempt.TODAY

    @property
    def label(self) -> str:
        if self is Attempt.TODAY:
            return "First attempt (today)"
        return "Second attempt (previous day)"


# Exactly one fallback: the loop in fetch_with_fallback never walks past this.
ATTEMPTS: tuple[Attempt, ...] = (Attempt.TODAY, Attempt.YESTERDAY)


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    body: str
    content_type: str
    url: str
    attempt: Attempt

    @property
    def wants_fallback(self) -> bool:
        return self.status_code == 404 and self.attempt.allows_fallback


def is_ok_status(status_code: int) -> bool:
    return 200 <= status_code < 400


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def _decode_body(response: httpx.Response) -> str:
    # Always UTF-8: the body is re-encoded as UTF-8 on the way out while the
    # upstream Content-Type is forwarded unchanged.
    return response.content.decode("utf-8", errors="replace")


async def fetch_once(client: httpx.AsyncClient, url: str, attempt: Attempt) -> UpstreamResponse:
    """GET ``url`` once and classify the outcome.

    Transport failures become a local 500. A 404 on an attempt that allows a
    fallback comes back unread so the caller can move on to the next day.
    """
    logger.info("%s - fetching %s", attempt.label, url)
    try:
        async with client.stream("GET", url) as response:
            status = response.status_code
            content_type = response.headers.get("Content-Type") or PLAIN_TEXT

            if is_ok_status(status):
                await response.aread()
                logger.info("%s - fetched %s", attempt.label, url)
                return UpstreamResponse(status, _decode_body(response), content_type, url, attempt)

            if status == 404 and attempt.allows_fallback:
                logger.info("%s - %s returned 404, trying the previous day", attempt.label, url)
                return UpstreamResponse(status, "", content_type, url, attempt)

            error_text = f"{attempt.label} - URL {url} returned status: {status}"
            logger.warning(error_text)
            try:
                await response.aread()
                body = _decode_body(response)
            except _FETCH_ERRORS:
                body = ""
            return UpstreamResponse(status, body or error_text, content_type, url, attempt)
    except _FETCH_ERRORS as exc:
        message = f"{attempt.label} - error fetching content ({url}): {_describe(exc)}"
        logger.error(message)
        return UpstreamResponse(500, message, PLAIN_TEXT, url, attempt)


async def fetch_with_fallback(
    client: httpx.AsyncClient,
    template: str,
    now: datetime,
    tz_name: str = DEFAULT_TIMEZONE,
) -> UpstreamResponse:
    result: UpstreamResponse | None = None
    for attempt in ATTEMPTS:
        date_str = format_feed_date(now, tz_name, days_back=attempt.days_back)
        result = await fetch_once(client, build_url(template, date_str), attempt)
        if not result.wants_fallback:
            return result
    return result
