from datefeed_api.services.feed_service import FeedService

__all__ = ["FeedService"]
