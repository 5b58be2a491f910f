"""
Database connection and initialization
"""

import logging
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from assetkeeper.core.config import settings
from assetkeeper.models.base import Base

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """Pool options for the configured backend"""
    if url.startswith("sqlite"):
        # SQLite pools do not take size/overflow arguments
        return {}
    return {
        "pool_size": 20,
        "max_overflow": 0,
        "pool_pre_ping": True,
    }


# Create async engine
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    future=True,
    **_engine_options(settings.DATABASE_URL),
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Initialize database and create tables"""
    # Import models so every table is registered on the metadata
    import assetkeeper.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")
