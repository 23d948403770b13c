from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from datefeed_api.deps import close_app_state, init_app_state
from datefeed_api.routes import feed_router, health_router, sources_router
from datefeed_api.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_app_state(app)
    settings = app.state.settings
    logger.info(
        "Datefeed ready: sources=%s default=%s policy=%s timezone=%s",
        ", ".join(settings.sources),
        settings.default_source,
        settings.invalid_source_policy.value,
        settings.timezone,
    )
    yield
    await close_app_state(app)
    logger.info("Datefeed stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="Datefeed API", version="0.1.0", lifespan=lifespan)

    allow_origins = list(get_settings().cors_origins)
    if allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health_router)
    app.include_router(sources_router)
    # catch-all proxy route goes last
    app.include_router(feed_router)

    return app
