from __future__ import annotations

from fastapi import APIRouter, Depends

from datefeed_api.deps import get_settings_dep
from datefeed_api.schemas import SourcesResponse
from datefeed_api.settings import Settings

router = APIRouter()


@router.get("/v1/sources", response_model=SourcesResponse)
def sources(settings: Settings = Depends(get_settings_dep)) -> dict:
    return {
        "sources": settings.sources.keys_list(),
        "default": settings.default_source,
        "invalid_source_policy": settings.invalid_source_policy.value,
    }
