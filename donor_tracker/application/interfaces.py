"""Interfaces (ports) for the application layer.

Protocols define what services need from the store and the upstream
donor source; infrastructure implementations fulfill them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from donor_tracker.application.dtos.donor import DonorCreate, DonorResolution
    from donor_tracker.application.dtos.event import EventCreate
    from donor_tracker.application.results import Result


class IEventSetupStore(Protocol):
    """Store operations used by the event setup workflow."""

    async def create_event(self, data: EventCreate) -> Result[int]:
        """Insert an event and return its id."""

    async def find_or_create_donor(self, data: DonorCreate) -> Result[DonorResolution]:
        """Resolve a donor by name, inserting it when absent."""

    async def create_tasks_for_event(
        self, event_id: int, donor_ids: Sequence[int]
    ) -> Result[list[int]]:
        """Create pending tasks for the event; all or nothing."""


class IDonorSource(Protocol):
    """Upstream provider of candidate donors, already mapped to DonorCreate."""

    async def search_candidate_donors(
        self, cities: Sequence[str], limit: int = 1
    ) -> list[DonorCreate]:
        """Return candidate donors for the cities."""
