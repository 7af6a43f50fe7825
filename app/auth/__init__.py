"""Account registration module for the LearnStream API."""

from app.auth.passwords import hash_password, verify_password
from app.auth.router import router

__all__ = ["router", "hash_password", "verify_password"]
