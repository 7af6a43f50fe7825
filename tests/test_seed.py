"""Tests for the demo data loader."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app.db.models import Author, Quiz, User, Video
from app.feed import get_feed
from app.seed import DEMO_VIDEOS, SEED_SCHEMA_VERSION, create_schema, seed_demo_data


@pytest_asyncio.fixture
async def sessionmaker():
    """Create an in-memory database with the schema the seeder expects."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", future=True)
    await create_schema(engine)

    yield async_sessionmaker(engine, expire_on_commit=False)

    await engine.dispose()


async def count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.asyncio
async def test_seed_inserts_demo_data(sessionmaker):
    async with sessionmaker() as db:
        report = await seed_demo_data(db)

        assert report.schema_version == SEED_SCHEMA_VERSION
        assert report.videos_added == len(DEMO_VIDEOS)
        assert report.quizzes_added == len(DEMO_VIDEOS)
        assert await count(db, User) == 1
        assert await count(db, Author) == 1
        assert await count(db, Video) == len(DEMO_VIDEOS)
        assert await count(db, Quiz) == len(DEMO_VIDEOS)


@pytest.mark.asyncio
async def test_seed_is_idempotent(sessionmaker):
    """Running the seeder twice does not duplicate rows."""
    async with sessionmaker() as db:
        first = await seed_demo_data(db)
        second = await seed_demo_data(db)

        assert first.user_id == second.user_id
        assert first.author_id == second.author_id
        assert await count(db, User) == 1
        assert await count(db, Author) == 1
        assert await count(db, Video) == len(DEMO_VIDEOS)
        assert await count(db, Quiz) == len(DEMO_VIDEOS)


@pytest.mark.asyncio
async def test_seeded_videos_appear_in_feed(sessionmaker):
    async with sessionmaker() as db:
        await seed_demo_data(db)

        entries = await get_feed(db, "demo")

    assert [e.title for e in entries] == [v["title"] for v in DEMO_VIDEOS]
    assert entries[0].tags == DEMO_VIDEOS[0]["tags"]
    assert entries[0].author.trust_tier == "gold"
    assert entries[3].thumbnail_url is None
