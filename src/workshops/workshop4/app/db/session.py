"""Database engine and session management."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.requests import HTTPConnection

from ..config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine; no connection is opened until first use."""

    return create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db_session(connection: HTTPConnection) -> AsyncIterator[AsyncSession]:
    """Yield a session from the application's session maker.

    Works for both HTTP requests and websocket connections.
    """

    session_maker: async_sessionmaker[AsyncSession] = connection.app.state.session_maker
    async with session_maker() as session:
        yield session


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables registered on ``SQLModel.metadata``."""

    from .. import models  # noqa: F401  # register tables

    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
