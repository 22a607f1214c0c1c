"""Async engine + session factory; engine is created in the app lifespan from validated settings."""
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from viennaflow.errors import ConfigurationError, DataAccessError

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def init_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    global _engine, _session_factory
    # URL must use asyncpg for async
    _engine = create_async_engine(database_url, echo=echo)
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    return _engine


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db():
    if _session_factory is None:
        raise ConfigurationError("Server configuration error: database engine not initialized")
    async with _session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


STORE_ERRORS = (SQLAlchemyError, OSError)  # asyncpg connect failures are not wrapped by SQLAlchemy


def _data_access_error(exc: Exception) -> DataAccessError:
    orig = getattr(exc, "orig", None)
    return DataAccessError(str(orig or exc) or exc.__class__.__name__)


async def fetch_all(db: AsyncSession, stmt: Any) -> list:
    """Execute a read query and return all rows. Driver and connection failures become DataAccessError."""
    try:
        result = await db.execute(stmt)
        return list(result.all())
    except STORE_ERRORS as exc:
        raise _data_access_error(exc) from exc


async def fetch_scalars(db: AsyncSession, stmt: Any) -> list:
    """Like fetch_all, but returns the first column / ORM entity of each row."""
    try:
        result = await db.execute(stmt)
        return list(result.scalars().all())
    except STORE_ERRORS as exc:
        raise _data_access_error(exc) from exc
