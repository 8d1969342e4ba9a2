from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from space_api.config import settings
from space_api.models.base import Base  # noqa: F401 - imported so Base.metadata includes all models


def _enable_case_sensitive_like(dbapi_connection, connection_record) -> None:
    # SQLite LIKE ignores ASCII case by default; name/planet filters must not
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine, switching SQLite connections to case-sensitive LIKE."""
    engine = create_async_engine(database_url, echo=False, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_case_sensitive_like)
    return engine


engine = build_engine(settings.database_url)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
