from __future__ import annotations

import argparse
import asyncio
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from db.schema import skills
from db.settings import SETTINGS


@dataclass(frozen=True)
class SkillRecord:
    name: str
    sort: int


SKILLS: tuple[SkillRecord, ...] = (
    SkillRecord(name="JavaScript", sort=1),
    SkillRecord(name="CSS/HTML", sort=2),
    SkillRecord(name="React", sort=3),
    SkillRecord(name="NodeJS", sort=6),
    SkillRecord(name="Remix", sort=1),
)


def async_database_url(url: str) -> str:
    for prefix in ("postgresql+psycopg://", "postgresql+psycopg2://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


@asynccontextmanager
async def _engine(database_url: str) -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(async_database_url(database_url), poolclass=NullPool)
    try:
        yield engine
    finally:
        await engine.dispose()


async def _create(engine: AsyncEngine, record: SkillRecord) -> None:
    # One transaction per row: a failing insert leaves the others committed.
    async with engine.begin() as conn:
        await conn.execute(skills.insert().values(**asdict(record)))


async def seed_skills(database_url: str, records: tuple[SkillRecord, ...] = SKILLS) -> int:
    """
    Insert every record concurrently. Not idempotent: rows are added on each run.

    Every insert is awaited before the batch settles; the first failure is then raised
    and rows already committed stay in place.
    """
    async with _engine(database_url) as engine:
        results = await asyncio.gather(*(_create(engine, r) for r in records), return_exceptions=True)
    errors = [r for r in results if isinstance(r, BaseException)]
    if errors:
        structlog.get_logger().error("seed_failed", table="skills", failed=len(errors), attempted=len(records))
        raise errors[0]
    return len(records)


def seed(database_url: str) -> int:
    inserted = asyncio.run(seed_skills(database_url))
    structlog.get_logger().info("seed_completed", table="skills", inserted=inserted)
    return inserted


def main() -> None:
    parser = argparse.ArgumentParser(description="Insert the fixed skills rows.")
    parser.add_argument("--database-url", default=os.getenv("DATABASE_URL") or SETTINGS.database_url)
    args = parser.parse_args()
    seed(args.database_url)


if __name__ == "__main__":
    main()
