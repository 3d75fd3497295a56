"""Persistence: async SQLite engine, session factory, and Base for SQLAlchemy ORM.

The Database handle is constructed once at process start (see
donor_tracker.core.lifespan) and passed to the store; nothing here is
module-level state. Schema creation is idempotent (create_all), so
connect() is safe on every startup.

Every pooled connection runs PRAGMA foreign_keys=ON so SQLite enforces
the task -> event / task -> donor references.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from donor_tracker.domain.exceptions import StorageException, StorageInitializationException
from donor_tracker.shared.logging import get_logger

logger = get_logger(__name__)

MEMORY_LOCATION = ":memory:"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on SQLite foreign-key enforcement for a new DBAPI connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the async engine and session factory for one SQLite database.

    Args:
        location: Path to the database file, or ":memory:" for a private
            in-process database (single shared connection).
        echo: Log emitted SQL (SQLAlchemy echo).
    """

    def __init__(self, location: str | Path, *, echo: bool = False) -> None:
        self.location = str(location)
        self.echo = echo
        self.engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def url(self) -> str:
        return f"sqlite+aiosqlite:///{self.location}"

    @property
    def is_connected(self) -> bool:
        return self._session_factory is not None

    async def connect(self) -> None:
        """Create the database file if absent, enable foreign keys, create tables.

        Raises:
            StorageInitializationException: If the file or schema cannot be created.
        """
        if self.is_connected:
            return
        # Register all models on Base.metadata before create_all.
        from donor_tracker.infrastructure.persistence import models  # noqa: F401

        engine_kwargs: dict[str, Any] = {}
        engine: AsyncEngine | None = None
        try:
            if self.location == MEMORY_LOCATION:
                engine_kwargs["poolclass"] = StaticPool
            else:
                path = Path(self.location)
                if not path.exists():
                    logger.info("Database file %s does not exist. Creating a new one.", path)
                    path.parent.mkdir(parents=True, exist_ok=True)
            engine = create_async_engine(self.url, echo=self.echo, **engine_kwargs)
            event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (OSError, SQLAlchemyError) as exc:
            if engine is not None:
                await engine.dispose()
            logger.error("Could not initialize database at %s: %s", self.location, exc)
            raise StorageInitializationException(self.location, str(exc)) from exc

        self.engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database ready at %s (events, donors, tasks)", self.location)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session; the caller decides whether to open a transaction.

        Raises:
            StorageException: If connect() has not been awaited or the
                database was disposed.
        """
        if self._session_factory is None:
            raise StorageException("session", "database is not connected")
        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Close pooled connections. Safe to call more than once."""
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database engine disposed")
        self.engine = None
        self._session_factory = None
