"""Database configuration and connection management."""

import os
from typing import AsyncGenerator

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

# Load environment variables from .env file
load_dotenv()


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def normalize_database_url(url: str) -> str:
    """Point plain PostgreSQL URLs (as handed out by hosting providers) at asyncpg."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix) :]
    return url


# Database configuration from environment variables
DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required")
DATABASE_URL = normalize_database_url(DATABASE_URL)

SQL_DEBUG = os.getenv("SQL_DEBUG", "false").lower() == "true"
DB_AUTO_CREATE = os.getenv("DB_AUTO_CREATE", "false").lower() == "true"

# SQLite connections are not shared across event loops
engine_options = {"poolclass": NullPool} if DATABASE_URL.startswith("sqlite") else {}

# Create async engine
engine = create_async_engine(DATABASE_URL, echo=SQL_DEBUG, future=True, **engine_options)

# Create session factory
AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db() -> None:
    """Initialize database connection on startup."""
    if DB_AUTO_CREATE:
        # Import models so their tables are registered on the metadata
        from contest.models import db  # noqa: F401

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Close database connections on shutdown."""
    await engine.dispose()
