"""Demo data loader for local development.

Writes against schema version ``SEED_SCHEMA_VERSION``: the ``users``,
``authors``, ``videos`` and ``quizzes`` tables exactly as declared in
``app.db.models``. Tables are created from the models; the loader never
inspects the live database to guess which columns exist.

Run with ``python -m app.seed`` or the ``learnstream-seed`` script.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.auth.passwords import hash_password
from app.db import crud
from app.db.models import Author, Base, ModerationStatus, Quiz, User, Video
from app.db.session import dispose_engine, get_engine

logger = logging.getLogger(__name__)

SEED_SCHEMA_VERSION = 1

DEMO_USER = {
    "email": "demo@learnstream.dev",
    "username": "demo_user",
    "password": "learnstream123",
    "full_name": "Demo User",
}

DEMO_AUTHOR = {
    "full_name": "Dmitry Programmer",
    "expertise_area": "IT",
    "trust_tier": "gold",
    "bio": "Backend developer with ten years of experience in Go, microservices and DevOps.",
    "is_verified": True,
}

DEMO_VIDEOS = [
    {
        "title": "What is an API in 60 seconds",
        "description": "A simple explanation of APIs for beginners.",
        "video_url": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/BigBuckBunny.mp4",
        "thumbnail_url": "https://img.youtube.com/vi/s7wmiS2mSXY/mqdefault.jpg",
        "duration_sec": 60,
        "tags": ["programming", "api", "web"],
    },
    {
        "title": "Go language basics",
        "description": "Why Go is popular for backend development.",
        "video_url": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ElephantsDream.mp4",
        "thumbnail_url": "https://img.youtube.com/vi/yoTahYcKnyo/mqdefault.jpg",
        "duration_sec": 90,
        "tags": ["golang", "go", "programming"],
    },
    {
        "title": "HTTP vs HTTPS in plain words",
        "description": "What differs between HTTP and HTTPS and why it matters.",
        "video_url": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerBlazes.mp4",
        "thumbnail_url": "https://img.youtube.com/vi/hExRDVZHhig/mqdefault.jpg",
        "duration_sec": 75,
        "tags": ["http", "security", "web"],
    },
    {
        "title": "SQL databases in 80 seconds",
        "description": "SELECT, INSERT, UPDATE and DELETE for beginners.",
        "video_url": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerEscapes.mp4",
        "thumbnail_url": None,
        "duration_sec": 80,
        "tags": ["sql", "databases", "postgresql"],
    },
    {
        "title": "Beating procrastination",
        "description": "Practical advice for developers and everyone else.",
        "video_url": "https://commondatastorage.googleapis.com/gtv-videos-bucket/sample/ForBiggerFun.mp4",
        "thumbnail_url": "https://img.youtube.com/vi/Qvcx7Y4caQE/mqdefault.jpg",
        "duration_sec": 85,
        "tags": ["productivity", "psychology", "self-improvement"],
    },
]

DEMO_QUIZ = {
    "question": "Was this material useful?",
    "correct_answer": "Yes, I learned something new",
    "wrong_answers": ["I already knew this", "Too complicated", "Off topic"],
    "points_awarded": 10,
}


@dataclass
class SeedReport:
    """Summary of what a seed run wrote."""

    schema_version: int
    user_id: str
    author_id: str
    videos_added: int
    quizzes_added: int


async def _ensure_demo_user(db: AsyncSession) -> User:
    user = await crud.find_conflicting_user(
        db, DEMO_USER["email"], DEMO_USER["username"]
    )
    if user:
        return user
    return await crud.create_user(
        db,
        email=DEMO_USER["email"],
        username=DEMO_USER["username"],
        password_hash=hash_password(DEMO_USER["password"]),
        full_name=DEMO_USER["full_name"],
    )


async def _ensure_demo_author(db: AsyncSession, user_id: str) -> Author:
    author = await crud.get_author_by_name(db, DEMO_AUTHOR["full_name"])
    if author:
        return author
    author = Author(user_id=user_id, **DEMO_AUTHOR)
    db.add(author)
    await db.commit()
    await db.refresh(author)
    return author


async def seed_demo_data(db: AsyncSession) -> SeedReport:
    """Insert the demo user, author, approved videos and quizzes.

    Re-running replaces the demo videos of the demo author, so the feed
    never accumulates duplicates.

    Args:
        db: Database session on a schema created from ``Base.metadata``

    Returns:
        A SeedReport describing the inserted rows
    """
    user = await _ensure_demo_user(db)
    author = await _ensure_demo_author(db, user.id)

    titles = [v["title"] for v in DEMO_VIDEOS]
    stale_ids = (
        await db.execute(
            select(Video.id).where(
                Video.author_id == author.id, Video.title.in_(titles)
            )
        )
    ).scalars().all()
    if stale_ids:
        await db.execute(delete(Quiz).where(Quiz.video_id.in_(stale_ids)))
        await db.execute(delete(Video).where(Video.id.in_(stale_ids)))

    # Spread creation times so the feed order is deterministic
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    videos = []
    for i, data in enumerate(DEMO_VIDEOS):
        video = Video(
            author_id=author.id,
            moderation_status=ModerationStatus.APPROVED.value,
            created_at=now - timedelta(minutes=i),
            updated_at=now - timedelta(minutes=i),
            **data,
        )
        video.quiz = Quiz(**DEMO_QUIZ)
        videos.append(video)
    db.add_all(videos)
    await db.commit()

    report = SeedReport(
        schema_version=SEED_SCHEMA_VERSION,
        user_id=user.id,
        author_id=author.id,
        videos_added=len(videos),
        quizzes_added=len(videos),
    )
    logger.info(f"Seed complete: {report}")
    return report


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables declared by the models."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def run_seed() -> SeedReport:
    """Create the schema and load demo data into the configured database."""
    engine = get_engine()
    try:
        await create_schema(engine)
        sessionmaker = async_sessionmaker(engine, expire_on_commit=False)
        async with sessionmaker() as db:
            return await seed_demo_data(db)
    finally:
        await dispose_engine()


def main():
    """Entry point for the ``learnstream-seed`` script."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    report = asyncio.run(run_seed())
    print(
        f"Seeded {report.videos_added} videos and {report.quizzes_added} quizzes "
        f"(schema v{report.schema_version})"
    )


if __name__ == "__main__":
    main()
