"""Async Session Factory — builds engines and session factories outside FastAPI.

Invariants:
    - Sessions never expire attributes on commit (records outlive the commit)
    - Shared by DatabaseSessionManager, scripts and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: no pooling or error mapping,
      callers own the engine lifecycle
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given database URL."""
    return create_async_engine(database_url, echo=echo)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to `engine`."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
