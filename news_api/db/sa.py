from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from news_api.config import CREATE_TABLES, DB_DSN


_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

_ASYNC_DRIVER = "postgresql+asyncpg://"


def to_async_dsn(dsn: str | None) -> str:
    """Rewrite a plain Postgres DSN so SQLAlchemy picks the asyncpg dialect."""
    if not dsn:
        raise RuntimeError("DATABASE_URL is not configured")
    if dsn.startswith(_ASYNC_DRIVER):
        return dsn
    for prefix in ("postgresql://", "postgres://"):
        if dsn.startswith(prefix):
            return _ASYNC_DRIVER + dsn[len(prefix):]
    return dsn


async def init_sa_engine() -> None:
    global _engine, _sessionmaker
    if _engine is not None:
        return
    _engine = create_async_engine(to_async_dsn(DB_DSN), pool_pre_ping=True)
    _sessionmaker = async_sessionmaker(bind=_engine, expire_on_commit=False, autoflush=False)
    if CREATE_TABLES:
        await create_tables()


async def create_tables() -> None:
    # Idempotent: create_all skips tables that already exist
    from news_api.db.base import Base
    from news_api.models import tables  # noqa: F401 ensure model registration

    if _engine is None:
        raise RuntimeError("SQLAlchemy engine is not initialized. Call init_sa_engine() first.")
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_sa_engine() -> None:
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _sessionmaker = None


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    if _sessionmaker is None:
        raise RuntimeError("SQLAlchemy engine is not initialized. Call init_sa_engine() first.")
    async with _sessionmaker() as session:
        yield session


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with session_scope() as session:
        yield session
