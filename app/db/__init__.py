"""Database module for the LearnStream API."""

from app.db.models import Author, Base, ModerationStatus, Quiz, User, Video
from app.db.session import dispose_engine, get_engine, get_session, get_sessionmaker

__all__ = [
    "Author",
    "Base",
    "ModerationStatus",
    "Quiz",
    "User",
    "Video",
    "dispose_engine",
    "get_session",
    "get_engine",
    "get_sessionmaker",
]
