"""Event repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from donor_tracker.application.dtos.event import EventCreate, EventResult
from donor_tracker.infrastructure.persistence.models.event import Event
from donor_tracker.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(e: Event) -> EventResult:
    """Map Event ORM to EventResult DTO."""
    return EventResult(
        event_id=e.event_id,
        name=e.name,
        location=e.location,
        date=e.date,
        description=e.description,
        created_at=e.created_at,
    )


class EventRepository(BaseRepository[Event]):
    """Insert and read events."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Event)

    async def create_event(self, data: EventCreate) -> EventResult:
        event = await self.create(
            Event(
                name=data.name,
                location=data.location,
                date=data.date,
                description=data.description,
            )
        )
        return _to_result(event)

    async def get_event(self, event_id: int) -> EventResult | None:
        event = await self.get_by_id(event_id)
        return _to_result(event) if event else None

    async def list_events(self) -> list[EventResult]:
        return [_to_result(e) for e in await self.get_all()]
