from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from movies_api.core.config import Settings
from movies_api.db.base import Base
from movies_api.models import Movie  # noqa: F401  registers the table on Base.metadata


def create_engine(settings: Settings) -> AsyncEngine:
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite":
        # sqlite uses a single-file pool, sizing options do not apply
        return create_async_engine(url, echo=settings.DB_ECHO)
    return create_async_engine(url,
                               echo=settings.DB_ECHO,
                               # Pool settings
                               pool_size=settings.DB_POOL_SIZE,
                               max_overflow=settings.DB_MAX_OVERFLOW,
                               pool_timeout=settings.DB_POOL_TIMEOUT,
                               pool_recycle=settings.DB_POOL_RECYCLE,
                               pool_pre_ping=True
                               )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False
    )


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides an async DB session
    and ensures it's closed after the request.
    """
    async with request.app.state.session_factory() as session:
        yield session


async def init_db(engine: AsyncEngine) -> None:
    """
    Create all tables based on models.
    There are no migrations, existing tables are left untouched.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(engine: AsyncEngine) -> bool:
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError):
        return False
