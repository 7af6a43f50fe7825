"""Feed retrieval: latest approved videos joined with their authors."""

import re
from typing import Any, Mapping

from sqlalchemy import Text, cast, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.arrays import parse_array_literal
from app.db.models import Author, ModerationStatus, Video
from app.exceptions import FeedUnavailableError
from app.feed.models import FeedAuthor, FeedEntry

# ASCII digits only, optional sign, no whitespace or underscores
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def resolve_feed_limit(
    requested: int | str | None,
    default: int | None = None,
    maximum: int | None = None,
) -> int:
    """Resolve the caller-supplied page size into a safe query limit.

    Missing, non-numeric, zero and negative values fall back to the default;
    values above the maximum are clamped.

    Args:
        requested: Raw limit, e.g. an int or a query-string value
        default: Fallback size (defaults to ``feed_limit_default`` setting)
        maximum: Upper bound (defaults to ``feed_limit_max`` setting)

    Returns:
        An integer in ``[1, maximum]``
    """
    if default is None or maximum is None:
        settings = get_settings()
        default = settings.feed_limit_default if default is None else default
        maximum = settings.feed_limit_max if maximum is None else maximum

    # bool is an int subclass but never a meaningful page size
    if requested is None or isinstance(requested, bool):
        return default

    if isinstance(requested, str):
        if not _INTEGER_TEXT.fullmatch(requested):
            return default
        limit = int(requested)
    elif isinstance(requested, int):
        limit = requested
    else:
        return default

    if limit <= 0:
        return default
    return min(limit, maximum)


def build_feed_query(limit: int):
    """Build the feed SELECT for the given, already resolved, limit."""
    return (
        select(
            Video.id,
            Video.title,
            Video.description,
            Video.video_url,
            Video.thumbnail_url,
            Video.duration_sec,
            cast(Video.tags, Text).label("tags"),
            Video.created_at,
            Author.id.label("author_id"),
            Author.full_name.label("author_full_name"),
            Author.expertise_area.label("author_expertise_area"),
            Author.trust_tier.label("author_trust_tier"),
            Author.is_verified.label("author_is_verified"),
        )
        .join(Author, Video.author_id == Author.id)
        .where(Video.moderation_status == ModerationStatus.APPROVED.value)
        .order_by(Video.created_at.desc())
        .limit(limit)
    )


def row_to_entry(row: Mapping[str, Any]) -> FeedEntry:
    """Map one feed query row to a FeedEntry."""
    tags_raw = row["tags"]
    return FeedEntry(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        video_url=row["video_url"],
        thumbnail_url=row["thumbnail_url"],
        duration_sec=row["duration_sec"],
        tags=parse_array_literal(tags_raw) if tags_raw else [],
        created_at=row["created_at"],
        author=FeedAuthor(
            id=row["author_id"],
            full_name=row["author_full_name"],
            expertise_area=row["author_expertise_area"],
            trust_tier=row["author_trust_tier"],
            is_verified=row["author_is_verified"],
        ),
    )


async def get_feed(
    db: AsyncSession,
    requester_id: str,
    limit: int | str | None = None,
) -> list[FeedEntry]:
    """Fetch the newest approved videos with author attribution.

    ``requester_id`` is accepted for future personalization and is not used
    to filter results.

    Args:
        db: Database session
        requester_id: Identity of the caller
        limit: Requested number of entries, resolved by ``resolve_feed_limit``

    Returns:
        Feed entries ordered newest first; possibly empty

    Raises:
        FeedUnavailableError: If the query fails or a row cannot be mapped.
            No partial result is returned in that case.
    """
    resolved = resolve_feed_limit(limit)
    query = build_feed_query(resolved)

    # Result processors (e.g. DateTime parsing) run while rows are fetched,
    # so conversion errors can surface from execute, fetch or mapping alike
    try:
        result = await db.execute(query)
        rows = result.mappings().all()
        return [row_to_entry(row) for row in rows]
    except (SQLAlchemyError, KeyError, TypeError, ValueError) as e:
        raise FeedUnavailableError(e, context={"limit": resolved}) from e
