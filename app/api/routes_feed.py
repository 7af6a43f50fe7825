"""Feed endpoint for the LearnStream API."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.exceptions import FeedUnavailableError
from app.feed import get_feed
from app.logging import request_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/feed", tags=["feed"])
limiter = Limiter(key_func=get_remote_address)

ANONYMOUS_USER_ID = "anonymous"


@router.get("")
@limiter.limit("120/minute")
async def read_feed(
    request: Request,
    user_id: str | None = Query(default=None, description="Requesting user"),
    limit: str | None = Query(
        default=None, description="Items to return (default 10, max 50)"
    ),
    db: AsyncSession = Depends(get_session),
):
    """
    Latest approved videos with author attribution.

    ``limit`` is read as raw text so that invalid values fall back to the
    default page size instead of failing validation.

    Returns:
        JSON response with:
            - success: True
            - data: List of feed entries, newest first
            - count: Number of entries in data
    """
    requester_id = user_id or ANONYMOUS_USER_ID

    try:
        entries = await get_feed(db, requester_id, limit)
    except FeedUnavailableError as e:
        logger.error(
            "Failed to load feed",
            extra=request_context(
                request, requester_id=requester_id, limit=limit, context=e.context
            ),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to load feed"},
        )

    return {
        "success": True,
        "data": [entry.model_dump(mode="json") for entry in entries],
        "count": len(entries),
    }
