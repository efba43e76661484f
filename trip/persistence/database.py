"""Database engine and session factory for PostgreSQL."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from trip.config import Settings
from trip.util.error import ConfigurationError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Engine settings with database URL and pool sizes

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the URL does not name the asyncpg driver
    """
    url = make_url(settings.database.url)
    if url.drivername != "postgresql+asyncpg":
        raise ConfigurationError(
            f"Database URL must use postgresql+asyncpg, got {url.drivername}"
        )

    return create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Sessions never autoflush or expire on commit; the unit of work commits
    explicitly.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
