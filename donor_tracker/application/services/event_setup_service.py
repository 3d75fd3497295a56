"""Event setup workflow: event -> upstream candidates -> donors -> pending tasks.

Orchestration only. Each step calls one store operation; the first
Failure (or upstream error) stops the workflow and is raised, so earlier
steps stay committed exactly as the individual operations left them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from donor_tracker.application.dtos.event import EventCreate
from donor_tracker.application.interfaces import IDonorSource, IEventSetupStore
from donor_tracker.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EventSetupResult:
    """Ids produced by one event setup."""

    event_id: int
    donor_ids: list[int]
    task_ids: list[int]
    donors_created: int


class EventSetupService:
    """Creates an event and invites the upstream's candidate donors to it."""

    def __init__(self, store: IEventSetupStore, donor_source: IDonorSource) -> None:
        self.store = store
        self.donor_source = donor_source

    async def setup_event(
        self,
        event: EventCreate,
        cities: Sequence[str],
        limit: int = 1,
    ) -> EventSetupResult:
        """Run the full setup and return the ids it produced.

        Raises:
            DonorTrackerException: The error of the first failed step
                (StorageException, UpstreamServiceException, ValidationException).
        """
        event_id = (await self.store.create_event(event)).unwrap()

        candidates = await self.donor_source.search_candidate_donors(cities, limit)

        donor_ids: list[int] = []
        created = 0
        for candidate in candidates:
            resolution = (await self.store.find_or_create_donor(candidate)).unwrap()
            created += int(resolution.created)
            if resolution.donor_id not in donor_ids:
                donor_ids.append(resolution.donor_id)

        task_ids = (await self.store.create_tasks_for_event(event_id, donor_ids)).unwrap()
        logger.info(
            "Event setup completed with event ID: %s (%d donors, %d new, %d tasks)",
            event_id,
            len(donor_ids),
            created,
            len(task_ids),
        )
        return EventSetupResult(
            event_id=event_id,
            donor_ids=donor_ids,
            task_ids=task_ids,
            donors_created=created,
        )
