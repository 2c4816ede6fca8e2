"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Same session options as DatabaseSessionManager (expire_on_commit=False)
    - Meant for scripts and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: this is a convenience for non-FastAPI contexts
    - Accepts an existing engine so test fixtures can share one in-memory database
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_session_factory(
    database_url: str | None = None, engine: AsyncEngine | None = None,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given database URL or engine."""
    if engine is None:
        if database_url is None:
            raise ValueError("create_session_factory needs a database_url or an engine")
        engine = create_async_engine(database_url, echo=False)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
