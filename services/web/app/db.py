from __future__ import annotations

from collections.abc import AsyncIterator

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from services.web.app.logging import logger
from services.web.app.settings import SETTINGS


# Building the engine does not connect; pages never query, only /healthz does.
ENGINE = create_async_engine(SETTINGS.database_url, pool_pre_ping=True, poolclass=NullPool)
SESSIONMAKER = async_sessionmaker(ENGINE, expire_on_commit=False, class_=AsyncSession)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with SESSIONMAKER() as session:
        yield session


async def database_reachable(session: AsyncSession) -> bool:
    try:
        await session.execute(sa.text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("database_unreachable", error=str(e), error_type=type(e).__name__)
        return False
    return True
