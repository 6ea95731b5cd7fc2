"""Database connection and session management."""
import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tableorder.core.config import Settings
from tableorder.db.models import Base

logger = logging.getLogger(__name__)


def async_database_url(url: str) -> str:
    """Convert postgresql:// and sqlite:// URLs to their async drivers."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


class Database:
    """Engine and session factory built from the application settings."""

    def __init__(self, settings: Settings):
        self.engine = create_async_engine(
            async_database_url(settings.database_url),
            echo=False,
        )
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def connect(self) -> None:
        """Check connectivity and create missing tables."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency for getting database session."""
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        yield session
