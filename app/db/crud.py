"""CRUD utilities for database operations."""

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Author, User
from app.exceptions import RegistrationConflictError


async def get_user_by_id(db: AsyncSession, user_id: str) -> User | None:
    """Get a user by their ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def find_conflicting_user(
    db: AsyncSession, email: str, username: str
) -> User | None:
    """Return a user that already owns the email or the username, if any."""
    result = await db.execute(
        select(User)
        .where(or_(User.email == email.lower(), User.username == username))
        .limit(1)
    )
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    email: str,
    username: str,
    password_hash: str,
    full_name: str | None = None,
) -> User:
    """Create a new user with zeroed score and streaks.

    Args:
        db: Database session
        email: Email address, stored lower-cased
        username: Unique username
        password_hash: Already hashed password
        full_name: Optional display name

    Returns:
        The persisted User

    Raises:
        RegistrationConflictError: If the email or username is already taken
    """
    conflict = await find_conflicting_user(db, email, username)
    if conflict:
        raise RegistrationConflictError(
            context={"email": conflict.email, "username": conflict.username}
        )

    user = User(
        email=email.lower(),
        username=username,
        password_hash=password_hash,
        full_name=full_name,
        score=0,
        current_streak=0,
        best_streak=0,
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration
        await db.rollback()
        raise RegistrationConflictError(context={"email": email.lower()}) from e
    await db.refresh(user)
    return user


async def get_author_by_name(db: AsyncSession, full_name: str) -> Author | None:
    """Get the first author with the given full name."""
    result = await db.execute(
        select(Author).where(Author.full_name == full_name).limit(1)
    )
    return result.scalar_one_or_none()
