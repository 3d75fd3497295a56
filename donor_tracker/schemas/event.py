"""Event API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class EventCreateRequest(BaseModel):
    """Request body for POST /event. date is free-form text."""

    name: str = Field(..., min_length=1, description="Event name")
    location: str | None = None
    date: str | None = Field(default=None, description="Free-form date text")
    description: str | None = None


class EventCreateResponse(BaseModel):
    """Response after event creation."""

    event_id: int
    message: str


class EventResponse(BaseModel):
    """Event in list/get responses."""

    model_config = ConfigDict(from_attributes=True)

    event_id: int
    name: str
    location: str | None
    date: str | None
    description: str | None
    created_at: str


class EventSetupRequest(EventCreateRequest):
    """Request body for POST /setup-event: event fields plus upstream search."""

    cities: list[str] = Field(..., min_length=1, description="Cities to search for donors")
    limit: int = Field(default=1, ge=1, le=1000, description="Max upstream donors")


class EventSetupResponse(BaseModel):
    """Response after event setup."""

    message: str
    event_id: int
    donor_ids: list[int]
    task_ids: list[int]
    donors_created: int
