"""Database client shared by the whole process."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from feedback_api.models import Base

logger = logging.getLogger("FeedbackAPI.database")


class Database:
    """Async engine plus session factory.

    Built once when the app is created and disposed on shutdown. Connection
    pooling is left to the engine.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = create_async_engine(url, echo=echo)
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)

    def session(self) -> AsyncSession:
        return self.sessionmaker()

    async def create_all(self) -> None:
        """Create all tables that don't exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")
