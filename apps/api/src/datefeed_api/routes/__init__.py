from datefeed_api.routes.feed import router as feed_router
from datefeed_api.routes.health import router as health_router
from datefeed_api.routes.sources import router as sources_router

__all__ = [
    "feed_router",
    "health_router",
    "sources_router",
]
