"""Application exception hierarchy for the LearnStream API.

    LearnStreamError (base)
    ├── FeedUnavailableError       → 500, storage or row-mapping failure
    └── RegistrationConflictError  → 409, email or username already taken
"""

from typing import Any


class LearnStreamError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Client-safe error description
        context: Extra debug info, logged but never returned to clients
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: dict[str, Any] | None = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class FeedUnavailableError(LearnStreamError):
    """Raised when the feed could not be read from storage.

    Covers both connection/query failures and rows that could not be mapped
    to feed entries. The original exception is kept on ``cause`` and is also
    chained as ``__cause__`` by the raiser.
    """

    def __init__(
        self,
        cause: BaseException | None = None,
        message: str = "Feed is temporarily unavailable",
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, context=context)
        self.cause = cause


class RegistrationConflictError(LearnStreamError):
    """Raised when a user with the same email or username already exists."""

    def __init__(
        self,
        message: str = "User with this email or username already exists",
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message=message, context=context)
