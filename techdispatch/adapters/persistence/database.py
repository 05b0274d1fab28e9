"""Async SQLAlchemy engine and session factory."""

from collections.abc import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from techdispatch.config import settings

engine = create_async_engine(settings.database_url, echo=settings.debug)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_session() -> AsyncIterator[AsyncSession]:
    async with async_session_factory() as session:
        yield session


_SYNC_DRIVERS = {"aiosqlite": "", "asyncpg": "psycopg2"}


def sync_database_url(url: str) -> str:
    """Same database through its blocking driver, for alembic."""
    parsed = make_url(url)
    backend, _, driver = parsed.drivername.partition("+")
    if driver in _SYNC_DRIVERS:
        sync_driver = _SYNC_DRIVERS[driver]
        parsed = parsed.set(drivername=f"{backend}+{sync_driver}" if sync_driver else backend)
    return parsed.render_as_string(hide_password=False)


async def create_schema() -> None:
    """Create missing tables; used for the embedded SQLite default."""
    from techdispatch.adapters.persistence import models  # noqa: F401 — register tables

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
