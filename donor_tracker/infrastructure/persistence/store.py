"""Donor/Task store: the single owner and writer of events, donors and tasks.

Every public operation opens its own session, runs the repository calls
(write operations inside one transaction), and returns Ok(value) or
Failure(error). Storage faults become StorageException carrying the
engine's message; no exception escapes a public operation.

Batch inserts (donors, tasks) are one transaction each: either every row
is written or none is. find_or_create_donor holds a store-wide lock
across the lookup and the insert so concurrent setups in this process
cannot duplicate a donor.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from donor_tracker.application.dtos.donor import DonorCreate, DonorResolution, DonorResult
from donor_tracker.application.dtos.event import EventCreate, EventResult
from donor_tracker.application.dtos.task import TaskResult, TaskWithDonorResult
from donor_tracker.application.results import Failure, Ok, Result
from donor_tracker.domain.enums import TaskStatus
from donor_tracker.domain.exceptions import (
    DonorTrackerException,
    ResourceNotFoundException,
    StorageException,
    TaskAlreadyFinalizedException,
    ValidationException,
)
from donor_tracker.infrastructure.persistence.database import Database
from donor_tracker.infrastructure.persistence.repositories import (
    DonorRepository,
    EventRepository,
    TaskRepository,
)
from donor_tracker.shared.logging import get_logger

logger = get_logger(__name__)


def _engine_message(exc: SQLAlchemyError) -> str:
    """Return the DBAPI error text when present (e.g. 'FOREIGN KEY constraint failed')."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def parse_update_status(status: str | TaskStatus | None) -> TaskStatus:
    """Validate a requested status update target.

    Raises:
        ValidationException: When status is missing, unknown, or 'pending'.
    """
    if status is None or status == "":
        raise ValidationException("status is required", field="status")
    try:
        target = TaskStatus(status)
    except ValueError:
        raise ValidationException(
            f"Invalid status {status!r}; expected one of {TaskStatus.values()}",
            field="status",
        ) from None
    if target not in TaskStatus.update_targets():
        raise ValidationException(
            f"Tasks cannot be moved to {target.value!r}; use approved or rejected",
            field="status",
        )
    return target


class DonorTaskStore:
    """CRUD, join queries and status transitions over one Database.

    Args:
        database: Connected (or connectable) Database handle; the store
            does not create or dispose it.
        allow_status_correction: When False, approved/rejected tasks
            refuse further status updates.
    """

    def __init__(self, database: Database, *, allow_status_correction: bool = False) -> None:
        self.database = database
        self.allow_status_correction = allow_status_correction
        self._donor_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create the database file and tables if needed.

        Raises:
            StorageInitializationException: If the storage is not writable.
        """
        await self.database.connect()

    async def _run[T](
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        *,
        write: bool = False,
    ) -> Result[T]:
        """Run work in a fresh session and wrap the outcome."""
        try:
            async with self.database.session() as session:
                if write:
                    async with session.begin():
                        value = await work(session)
                else:
                    value = await work(session)
        except StorageException as exc:
            logger.error("Error in %s: %s", operation, exc.message)
            return Failure(exc)
        except DonorTrackerException as exc:
            logger.info("%s refused: %s", operation, exc.message)
            return Failure(exc)
        except SQLAlchemyError as exc:
            reason = _engine_message(exc)
            logger.error("Error in %s: %s", operation, reason)
            return Failure(StorageException(operation, reason))
        return Ok(value)

    async def ping(self) -> Result[bool]:
        """Round-trip a trivial query (readiness probe)."""

        async def work(session: AsyncSession) -> bool:
            await session.execute(text("SELECT 1"))
            return True

        return await self._run("ping", work)

    # ---- Events ----

    async def list_events(self) -> Result[list[EventResult]]:
        return await self._run(
            "list_events", lambda s: EventRepository(s).list_events()
        )

    async def get_event(self, event_id: int) -> Result[EventResult | None]:
        return await self._run(
            "get_event", lambda s: EventRepository(s).get_event(event_id)
        )

    async def create_event(self, data: EventCreate) -> Result[int]:
        """Insert an event and return its generated id."""

        async def work(session: AsyncSession) -> int:
            event = await EventRepository(session).create_event(data)
            logger.info("Event added with ID: %s", event.event_id)
            return event.event_id

        return await self._run("create_event", work, write=True)

    # ---- Donors ----

    async def list_donors(self) -> Result[list[DonorResult]]:
        return await self._run(
            "list_donors", lambda s: DonorRepository(s).list_donors()
        )

    async def get_donor(self, donor_id: int) -> Result[DonorResult | None]:
        return await self._run(
            "get_donor", lambda s: DonorRepository(s).get_donor(donor_id)
        )

    async def find_donor_by_name(
        self, first_name: str | None, last_name: str | None
    ) -> Result[DonorResult | None]:
        """Look up a donor by name. Ok(None) means no match, not a fault."""
        return await self._run(
            "find_donor_by_name",
            lambda s: DonorRepository(s).find_by_name(first_name, last_name),
        )

    async def create_donor(self, data: DonorCreate) -> Result[int]:
        return await self._run(
            "create_donor", lambda s: DonorRepository(s).create_donor(data), write=True
        )

    async def create_donors_batch(self, items: Sequence[DonorCreate]) -> Result[list[int]]:
        """Insert all donors or none; returns ids in input order."""
        return await self._run(
            "create_donors_batch",
            lambda s: DonorRepository(s).create_donors(items),
            write=True,
        )

    async def find_or_create_donor(self, data: DonorCreate) -> Result[DonorResolution]:
        """Return the existing donor id for this name, or insert the donor."""

        async def work(session: AsyncSession) -> DonorResolution:
            repo = DonorRepository(session)
            existing = await repo.find_by_name(data.first_name, data.last_name)
            if existing is not None:
                return DonorResolution(donor_id=existing.donor_id, created=False)
            donor_id = await repo.create_donor(data)
            return DonorResolution(donor_id=donor_id, created=True)

        async with self._donor_lock:
            return await self._run("find_or_create_donor", work, write=True)

    async def list_pmms(self) -> Result[list[str]]:
        return await self._run("list_pmms", lambda s: DonorRepository(s).list_pmms())

    # ---- Tasks ----

    async def create_tasks_for_event(
        self, event_id: int, donor_ids: Sequence[int]
    ) -> Result[list[int]]:
        """Create one pending task per donor; all or nothing.

        An unknown event or donor id fails the whole batch (foreign key).
        """

        async def work(session: AsyncSession) -> list[int]:
            task_ids = await TaskRepository(session).create_for_event(event_id, donor_ids)
            logger.info("Tasks created for event ID: %s (%d)", event_id, len(task_ids))
            return task_ids

        return await self._run("create_tasks_for_event", work, write=True)

    async def update_task_status(
        self,
        task_id: int,
        status: str | TaskStatus | None,
        reason: str | None = None,
    ) -> Result[TaskResult]:
        """Move a task to approved or rejected.

        Failures: ValidationException for a missing or disallowed status,
        ResourceNotFoundException for an unknown task,
        TaskAlreadyFinalizedException when the task is terminal and
        corrections are disabled.
        """
        try:
            target = parse_update_status(status)
        except ValidationException as exc:
            return Failure(exc)

        async def work(session: AsyncSession) -> TaskResult:
            repo = TaskRepository(session)
            task = await repo.get_by_id(task_id)
            if task is None:
                raise ResourceNotFoundException("task", task_id)
            current = TaskStatus(task.status)
            if current.is_terminal and not self.allow_status_correction:
                raise TaskAlreadyFinalizedException(task_id, current.value, target.value)
            updated = await repo.set_status(task, target, reason)
            logger.info("Task %s updated to %s.", task_id, target.value)
            return updated

        return await self._run("update_task_status", work, write=True)

    async def get_task(self, task_id: int) -> Result[TaskWithDonorResult | None]:
        return await self._run(
            "get_task", lambda s: TaskRepository(s).get_joined(task_id)
        )

    async def list_tasks(self) -> Result[list[TaskWithDonorResult]]:
        return await self._run("list_tasks", lambda s: TaskRepository(s).list_joined())

    async def list_tasks_by_pmm(self, pmm: str) -> Result[list[TaskWithDonorResult]]:
        return await self._run(
            "list_tasks_by_pmm", lambda s: TaskRepository(s).list_joined_by_pmm(pmm)
        )

    async def list_tasks_by_event(self, event_id: int) -> Result[list[TaskWithDonorResult]]:
        return await self._run(
            "list_tasks_by_event",
            lambda s: TaskRepository(s).list_joined_by_event(event_id),
        )
