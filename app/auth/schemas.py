"""Request and response models for account registration."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class RegisterRequest(BaseModel):
    """Registration payload. Missing fields are reported as validation errors."""

    email: str = ""
    username: str = ""
    password: str = ""
    full_name: str | None = None


class UserOut(BaseModel):
    """Public view of a user; never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: str
    full_name: str | None = None
    score: int
    current_streak: int
    best_streak: int
    created_at: datetime
    updated_at: datetime


def validate_register_request(req: RegisterRequest) -> str | None:
    """Return the first validation error message, or None if the payload is valid."""
    if not req.email.strip():
        return "email is required"
    if "@" not in req.email or "." not in req.email:
        return "invalid email format"

    if not req.username.strip():
        return "username is required"
    if len(req.username) < 3:
        return "username must be at least 3 characters"
    if len(req.username) > 50:
        return "username must be less than 50 characters"

    if not req.password.strip():
        return "password is required"
    if len(req.password) < 6:
        return "password must be at least 6 characters"

    return None
