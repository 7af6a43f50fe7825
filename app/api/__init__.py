"""API routers for the LearnStream API."""

from app.api.routes_feed import router as feed_router
from app.api.routes_health import router as health_router

__all__ = [
    "health_router",
    "feed_router",
]
