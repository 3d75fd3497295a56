"""DTOs for events (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EventCreate:
    """Input for creating an event record."""

    name: str
    location: str | None = None
    date: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class EventResult:
    """Event read-model."""

    event_id: int
    name: str
    location: str | None
    date: str | None
    description: str | None
    created_at: str
