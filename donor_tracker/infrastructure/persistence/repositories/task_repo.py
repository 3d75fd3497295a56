"""Task repository: batch creation, status updates, and donor-joined listings."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from donor_tracker.application.dtos.task import TaskResult, TaskWithDonorResult
from donor_tracker.domain.enums import TaskStatus
from donor_tracker.infrastructure.persistence.models.donor import Donor
from donor_tracker.infrastructure.persistence.models.task import Task
from donor_tracker.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        task_id=t.task_id,
        event_id=t.event_id,
        donor_id=t.donor_id,
        status=t.status,
        reason=t.reason,
        created_at=t.created_at,
    )


def _to_joined_result(t: Task, d: Donor) -> TaskWithDonorResult:
    """Map a (Task, Donor) row to TaskWithDonorResult."""
    return TaskWithDonorResult(
        task_id=t.task_id,
        event_id=t.event_id,
        donor_id=t.donor_id,
        status=t.status,
        reason=t.reason,
        created_at=t.created_at,
        first_name=d.first_name,
        nick_name=d.nick_name,
        last_name=d.last_name,
        pmm=d.pmm,
        organization_name=d.organization_name,
        city=d.city,
        total_donations=d.total_donations,
    )


class TaskRepository(BaseRepository[Task]):
    """Invitation task persistence."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def create_for_event(self, event_id: int, donor_ids: Sequence[int]) -> list[int]:
        """Insert one pending task per donor id; returns task ids in input order."""
        tasks = await self.create_many(
            [
                Task(event_id=event_id, donor_id=donor_id, status=TaskStatus.PENDING.value)
                for donor_id in donor_ids
            ]
        )
        return [t.task_id for t in tasks]

    async def set_status(
        self, task: Task, status: TaskStatus, reason: str | None
    ) -> TaskResult:
        """Apply a status transition to a loaded task.

        Rejection records the reason; a blank reason is stored as NULL.
        Approval leaves the stored reason as it is.
        """
        task.status = status.value
        if status is TaskStatus.REJECTED:
            task.reason = reason if reason and reason.strip() else None
        await self.db.flush()
        await self.db.refresh(task)
        return _to_result(task)

    def _joined(self) -> Select:
        return (
            select(Task, Donor)
            .join(Donor, Task.donor_id == Donor.donor_id)
            .order_by(Task.task_id)
        )

    async def _fetch_joined(self, stmt: Select) -> list[TaskWithDonorResult]:
        result = await self.db.execute(stmt)
        return [_to_joined_result(t, d) for t, d in result.all()]

    async def get_joined(self, task_id: int) -> TaskWithDonorResult | None:
        rows = await self._fetch_joined(self._joined().where(Task.task_id == task_id))
        return rows[0] if rows else None

    async def list_joined(self) -> list[TaskWithDonorResult]:
        return await self._fetch_joined(self._joined())

    async def list_joined_by_pmm(self, pmm: str) -> list[TaskWithDonorResult]:
        return await self._fetch_joined(self._joined().where(Donor.pmm == pmm))

    async def list_joined_by_event(self, event_id: int) -> list[TaskWithDonorResult]:
        return await self._fetch_joined(self._joined().where(Task.event_id == event_id))
