"""Feed assembly module for the learning video feed."""

from .models import FeedAuthor, FeedEntry
from .repository import build_feed_query, get_feed, resolve_feed_limit, row_to_entry

__all__ = [
    "FeedAuthor",
    "FeedEntry",
    "build_feed_query",
    "get_feed",
    "resolve_feed_limit",
    "row_to_entry",
]
