"""Tests for password hashing and registration validation."""

import pytest

from app.auth.passwords import hash_password, verify_password
from app.auth.schemas import RegisterRequest, validate_register_request

# Password hashing


def test_hash_password_is_salted():
    """The same password hashes differently each time."""
    first = hash_password("secret123")
    second = hash_password("secret123")

    assert first != second
    assert first != "secret123"


def test_verify_password_accepts_correct_password():
    password_hash = hash_password("secret123")
    assert verify_password(password_hash, "secret123") is True


def test_verify_password_rejects_wrong_password():
    password_hash = hash_password("secret123")
    assert verify_password(password_hash, "secret124") is False


def test_hash_uses_pbkdf2():
    assert hash_password("secret123").startswith("$pbkdf2-sha256$")


# Registration validation


def make_request(**overrides) -> RegisterRequest:
    fields = {"email": "user@example.com", "username": "learner", "password": "secret123"}
    fields.update(overrides)
    return RegisterRequest(**fields)


def test_valid_request_passes():
    assert validate_register_request(make_request()) is None


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"email": ""}, "email is required"),
        ({"email": "   "}, "email is required"),
        ({"email": "user@example"}, "invalid email format"),
        ({"email": "user.example.com"}, "invalid email format"),
        ({"username": ""}, "username is required"),
        ({"username": "ab"}, "username must be at least 3 characters"),
        ({"username": "x" * 51}, "username must be less than 50 characters"),
        ({"password": ""}, "password is required"),
        ({"password": "      "}, "password is required"),
        ({"password": "12345"}, "password must be at least 6 characters"),
    ],
)
def test_invalid_request_reports_first_problem(overrides, message):
    assert validate_register_request(make_request(**overrides)) == message


def test_username_length_bounds_are_inclusive():
    assert validate_register_request(make_request(username="abc")) is None
    assert validate_register_request(make_request(username="x" * 50)) is None
