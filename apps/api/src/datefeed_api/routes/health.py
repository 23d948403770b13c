from __future__ import annotations

from fastapi import APIRouter

from datefeed_api.schemas import HealthResponse

router = APIRouter()


@router.get("/v1/health", response_model=HealthResponse)
def health() -> dict:
    return {"status": "ok"}
