"""Async engine, session factory and the per-request session dependency."""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    """Create the process-wide engine; its connection pool is shared by all requests."""
    engine = create_async_engine(database_url)
    logger.info(f"Database engine created for {safe_url(database_url)}")
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False)


async def check_connection(engine: AsyncEngine) -> None:
    """Round-trip a trivial query so an unreachable database fails startup."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.debug("Database connectivity check passed")


def safe_url(database_url: str) -> str:
    return make_url(database_url).render_as_string(hide_password=True)


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    sessionmaker = request.app.state.sessionmaker
    async with sessionmaker() as session:
        yield session
