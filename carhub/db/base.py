"""Async SQLAlchemy engine, session factory, declarative Base, and FastAPI dependency."""


from collections.abc import AsyncGenerator

from sqlalchemy import Table
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from carhub.core.config import settings

# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
_engine_kwargs: dict = {
    "pool_pre_ping": True,
    "echo": settings.app_env == "development",
}

# SQLite (local dev) doesn't support connection pooling parameters
if settings.database_url.startswith("sqlite"):
    _engine_kwargs["connect_args"] = {"check_same_thread": False}

engine = create_async_engine(settings.database_url, **_engine_kwargs)

# ---------------------------------------------------------------------------
# Session factory
# ---------------------------------------------------------------------------
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)

# ---------------------------------------------------------------------------
# Declarative Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """All ORM models inherit from this base."""

# ---------------------------------------------------------------------------
# Schema bootstrap
# ---------------------------------------------------------------------------
async def create_tables(*tables: Table) -> None:
    """Create the given tables if missing. Each app only creates the tables it owns."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=list(tables))

# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session; roll back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
