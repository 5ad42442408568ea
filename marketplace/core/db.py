import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from marketplace.core.config import settings
from marketplace.core.errors import StoreFailure

log = logging.getLogger(__name__)

engine = create_async_engine(settings.database_url, pool_pre_ping=True)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session


@asynccontextmanager
async def store_errors(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Roll back and surface any persistence error as StoreFailure."""
    try:
        yield db
    except SQLAlchemyError as exc:
        await db.rollback()
        log.exception("store operation failed")
        raise StoreFailure("Store operation failed") from exc
