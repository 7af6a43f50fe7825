"""Tests for database models and CRUD operations."""

import pytest
import pytest_asyncio
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.crud import create_user, find_conflicting_user, get_user_by_id
from app.db.models import Author, Base, ModerationStatus, Quiz, User, Video
from app.exceptions import RegistrationConflictError


@pytest_asyncio.fixture
async def db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Create a database session for testing."""
    async_session = async_sessionmaker(db_engine, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def author(db_session: AsyncSession) -> Author:
    author = Author(full_name="Anna Petrova", expertise_area="Math", trust_tier="silver")
    db_session.add(author)
    await db_session.commit()
    await db_session.refresh(author)
    return author


@pytest.mark.asyncio
async def test_create_user_defaults(db_session: AsyncSession):
    """Test creating a new user with zeroed counters."""
    user = await create_user(
        db_session,
        email="Learner@Example.com",
        username="learner",
        password_hash="hashed",
    )

    assert user.id is not None
    assert user.email == "learner@example.com"
    assert user.full_name is None
    assert user.score == 0
    assert user.current_streak == 0
    assert user.best_streak == 0
    assert user.created_at is not None
    assert user.updated_at is not None

    fetched = await get_user_by_id(db_session, user.id)
    assert fetched is not None
    assert fetched.username == "learner"


@pytest.mark.asyncio
async def test_create_user_conflict(db_session: AsyncSession):
    """Test duplicate email or username raises a conflict."""
    await create_user(db_session, "a@example.com", "first", "hashed")

    with pytest.raises(RegistrationConflictError):
        await create_user(db_session, "A@example.com", "second", "hashed")
    with pytest.raises(RegistrationConflictError):
        await create_user(db_session, "b@example.com", "first", "hashed")


@pytest.mark.asyncio
async def test_find_conflicting_user_none(db_session: AsyncSession):
    assert await find_conflicting_user(db_session, "x@example.com", "nobody") is None


@pytest.mark.asyncio
async def test_get_user_by_id_missing(db_session: AsyncSession):
    assert await get_user_by_id(db_session, "missing") is None


@pytest.mark.asyncio
async def test_author_defaults(author: Author):
    assert author.is_verified is False
    assert author.bio is None
    assert author.user_id is None
    assert author.created_at is not None


@pytest.mark.asyncio
async def test_video_defaults(db_session: AsyncSession, author: Author):
    """New videos start pending with no tags."""
    video = Video(
        author_id=author.id,
        title="Fractions",
        video_url="https://cdn.example.com/fractions.mp4",
    )
    db_session.add(video)
    await db_session.commit()
    await db_session.refresh(video)

    assert video.moderation_status == ModerationStatus.PENDING.value
    assert video.tags == []
    assert video.thumbnail_url is None
    assert video.duration_sec == 0
    assert video.description == ""


@pytest.mark.asyncio
async def test_tags_stored_as_array_literal(db_session: AsyncSession, author: Author):
    """On SQLite the tag list is kept as array literal text."""
    video = Video(
        id="video-1",
        author_id=author.id,
        title="Geometry",
        video_url="https://cdn.example.com/geometry.mp4",
        tags=["math", "two words", "a,b"],
    )
    db_session.add(video)
    await db_session.commit()

    raw = (
        await db_session.execute(text("SELECT tags FROM videos WHERE id = 'video-1'"))
    ).scalar_one()
    assert raw == '{math,"two words","a,b"}'

    db_session.expunge_all()
    loaded = (
        await db_session.execute(select(Video).where(Video.id == "video-1"))
    ).scalar_one()
    assert loaded.tags == ["math", "two words", "a,b"]


@pytest.mark.asyncio
async def test_quiz_relationship(db_session: AsyncSession, author: Author):
    """A quiz belongs to exactly one video."""
    video = Video(
        author_id=author.id,
        title="Algebra",
        video_url="https://cdn.example.com/algebra.mp4",
    )
    video.quiz = Quiz(
        question="Was this useful?",
        correct_answer="Yes",
        wrong_answers=["No", "Not sure"],
    )
    db_session.add(video)
    await db_session.commit()

    quiz = (
        await db_session.execute(select(Quiz).where(Quiz.video_id == video.id))
    ).scalar_one()
    assert quiz.points_awarded == 10
    assert quiz.wrong_answers == ["No", "Not sure"]
