"""FastAPI router for account registration."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.passwords import hash_password
from app.auth.schemas import RegisterRequest, UserOut, validate_register_request
from app.db import crud
from app.db.session import get_session
from app.exceptions import RegistrationConflictError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"status": "error", "error": message}
    )


@router.post("/register")
@limiter.limit("10/minute")
async def register(
    request: Request,
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_session),
):
    """
    Register a new user account.

    Validates the payload, rejects duplicate emails or usernames and stores
    the password as a salted hash.

    Returns:
        201 with the created user wrapped in a status envelope

    Rate limit: 10 requests per minute per IP.
    """
    ip_address = request.client.host if request.client else "unknown"

    problem = validate_register_request(payload)
    if problem:
        logger.info(f"Registration rejected from ip={ip_address}: {problem}")
        return _error(problem, 400)

    try:
        user = await crud.create_user(
            db,
            email=payload.email,
            username=payload.username,
            password_hash=hash_password(payload.password),
            full_name=payload.full_name,
        )
    except RegistrationConflictError as e:
        logger.info(
            f"Registration conflict from ip={ip_address}: {e.context}"
        )
        return _error(e.message, 409)
    except SQLAlchemyError:
        logger.error("Failed to create user", exc_info=True)
        return _error("Internal server error", 500)

    logger.info(f"User registered: user_id={user.id}, ip={ip_address}")

    return JSONResponse(
        status_code=201,
        content={
            "status": "success",
            "message": "User registered successfully",
            "data": UserOut.model_validate(user).model_dump(mode="json"),
        },
    )
