from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["ok"]


class SourcesResponse(BaseModel):
    sources: list[str]
    default: str
    invalid_source_policy: Literal["default", "reject"]
