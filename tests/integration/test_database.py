"""Database initialization tests: file creation, idempotent schema, foreign keys."""

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from donor_tracker.application.dtos.event import EventCreate
from donor_tracker.application.results import Failure, Ok
from donor_tracker.domain.exceptions import StorageInitializationException
from donor_tracker.infrastructure.persistence.database import Database
from donor_tracker.infrastructure.persistence.store import DonorTaskStore


async def test_connect_creates_file_and_tables(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "tracker.db"
    db = Database(path)
    await db.connect()
    try:
        assert path.exists()
        async with db.session() as session:
            result = await session.execute(
                text("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
            )
            tables = {row[0] for row in result}
        assert {"events", "donors", "tasks"} <= tables
    finally:
        await db.dispose()


async def test_reconnect_keeps_existing_rows(tmp_path, gala) -> None:
    path = tmp_path / "tracker.db"
    first = DonorTaskStore(Database(path))
    await first.initialize()
    await first.create_event(gala)
    await first.database.dispose()

    second = DonorTaskStore(Database(path))
    await second.initialize()
    try:
        events = (await second.list_events()).unwrap()
        assert [e.name for e in events] == ["Charity Gala"]
    finally:
        await second.database.dispose()


async def test_foreign_keys_enabled(database) -> None:
    async with database.session() as session:
        result = await session.execute(text("PRAGMA foreign_keys"))
        assert result.scalar_one() == 1


async def test_unwritable_location_raises_initialization_error(tmp_path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("plain file", encoding="utf-8")
    db = Database(blocker / "tracker.db")
    with pytest.raises(StorageInitializationException) as exc_info:
        await db.connect()
    assert exc_info.value.error_code == "STORAGE_INIT_ERROR"
    assert not db.is_connected


async def test_in_memory_database(gala) -> None:
    store = DonorTaskStore(Database(":memory:"))
    await store.initialize()
    try:
        assert (await store.create_event(gala)).unwrap() == 1
        assert len((await store.list_events()).unwrap()) == 1
    finally:
        await store.database.dispose()


async def test_ping(store) -> None:
    assert (await store.ping()).unwrap() is True


async def test_store_before_initialize_returns_failure(tmp_path) -> None:
    store = DonorTaskStore(Database(tmp_path / "never_connected.db"))
    result = await store.list_events()
    assert isinstance(result, Failure)
    assert result.error_code == "STORAGE_ERROR"
    assert result.message == "An error occurred: database is not connected"


async def test_store_after_dispose_returns_failure(database, store, gala) -> None:
    await store.create_event(gala)
    await database.dispose()
    assert (await store.list_tasks()).error_code == "STORAGE_ERROR"
    assert isinstance(await store.create_event(gala), Failure)
    assert isinstance(await store.update_task_status(1, "approved"), Failure)


async def test_failed_schema_creation_disposes_engine(tmp_path, monkeypatch) -> None:
    """A location that exists but cannot be opened as a database releases its engine."""
    disposed = []
    original_dispose = AsyncEngine.dispose

    async def recording_dispose(self, *args, **kwargs):
        disposed.append(self)
        await original_dispose(self, *args, **kwargs)

    monkeypatch.setattr(AsyncEngine, "dispose", recording_dispose)
    directory = tmp_path / "a_directory"
    directory.mkdir()

    db = Database(directory)
    with pytest.raises(StorageInitializationException):
        await db.connect()
    assert len(disposed) == 1
    assert db.engine is None
    assert not db.is_connected


async def test_ids_are_not_reused_after_delete(database, store) -> None:
    for name in ("First", "Second"):
        await store.create_event(EventCreate(name))
    async with database.session() as session:
        async with session.begin():
            await session.execute(text("DELETE FROM events WHERE event_id = 2"))
    assert await store.create_event(EventCreate("Third")) == Ok(3)
