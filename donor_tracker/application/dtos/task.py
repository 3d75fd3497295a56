"""DTOs for invitation tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskResult:
    """Bare task row."""

    task_id: int
    event_id: int
    donor_id: int
    status: str
    reason: str | None
    created_at: str


@dataclass(frozen=True)
class TaskWithDonorResult:
    """Task row denormalized with its donor's descriptive fields.

    Returned by every task listing so callers never look the donor up
    separately.
    """

    task_id: int
    event_id: int
    donor_id: int
    status: str
    reason: str | None
    created_at: str
    first_name: str | None
    nick_name: str | None
    last_name: str | None
    pmm: str
    organization_name: str | None
    city: str | None
    total_donations: float | None
