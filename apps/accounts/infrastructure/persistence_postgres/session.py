"""PostgreSQL Session Management."""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.accounts.setup.config import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - ACCOUNTS_DATABASE_URL: PostgreSQL 연결 URL
        - ACCOUNTS_DB_POOL_SIZE / ACCOUNTS_DB_MAX_OVERFLOW / ACCOUNTS_DB_POOL_RECYCLE
    """
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤."""
    return async_sessionmaker(
        get_async_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자.

    커밋되지 않은 변경은 세션 종료 시 롤백됩니다.
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        yield session
