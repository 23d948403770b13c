from __future__ import annotations

from datefeed_core.errors import InvalidSourceError
from datefeed_core.fetch import PLAIN_TEXT
from fastapi import APIRouter, Depends, Request, Response

from datefeed_api.deps import get_feed_service
from datefeed_api.services.feed_service import FeedService

router = APIRouter()

# The incoming method is not inspected; upstream is always fetched with GET.
PROXY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def first_query_value(request: Request, name: str) -> str | None:
    # A repeated parameter resolves to its first occurrence.
    values = request.query_params.getlist(name)
    return values[0] if values else None


def _plain_text(body: str, status_code: int, content_type: str = PLAIN_TEXT) -> Response:
    # Content-Type goes in as a header so Starlette does not append a charset.
    return Response(content=body, status_code=status_code, headers={"Content-Type": content_type})


@router.api_route("/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
async def proxy_feed(
    request: Request,
    service: FeedService = Depends(get_feed_service),
) -> Response:
    try:
        result = await service.fetch(first_query_value(request, "source"))
    except InvalidSourceError as exc:
        return _plain_text(exc.message, 400)
    return _plain_text(result.body, result.status_code, result.content_type)
