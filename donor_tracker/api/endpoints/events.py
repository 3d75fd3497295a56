"""Event API: thin routes over DonorTaskStore and EventSetupService."""

from fastapi import APIRouter

from donor_tracker.api.dependencies import EventSetupDep, StoreDep
from donor_tracker.application.dtos.event import EventCreate
from donor_tracker.domain.exceptions import ResourceNotFoundException
from donor_tracker.schemas.event import (
    EventCreateRequest,
    EventCreateResponse,
    EventResponse,
    EventSetupRequest,
    EventSetupResponse,
)

router = APIRouter()


@router.get("/events", response_model=list[EventResponse])
async def list_events(store: StoreDep):
    """List all events in creation order."""
    events = (await store.list_events()).unwrap()
    return [EventResponse.model_validate(e) for e in events]


@router.get("/events/{event_id}", response_model=EventResponse)
async def get_event(event_id: int, store: StoreDep):
    event = (await store.get_event(event_id)).unwrap()
    if event is None:
        raise ResourceNotFoundException("event", event_id)
    return EventResponse.model_validate(event)


@router.post("/event", response_model=EventCreateResponse)
async def create_event(body: EventCreateRequest, store: StoreDep):
    """Create an event; responds with the generated id."""
    event_id = (await store.create_event(EventCreate(**body.model_dump()))).unwrap()
    return EventCreateResponse(event_id=event_id, message=f"Event added with ID: {event_id}")


@router.post("/setup-event", response_model=EventSetupResponse)
async def setup_event(body: EventSetupRequest, setup_svc: EventSetupDep):
    """Create an event, pull candidate donors for the cities, and create pending tasks."""
    result = await setup_svc.setup_event(
        EventCreate(
            name=body.name,
            location=body.location,
            date=body.date,
            description=body.description,
        ),
        cities=body.cities,
        limit=body.limit,
    )
    return EventSetupResponse(
        message=f"Event setup completed with event ID: {result.event_id}",
        event_id=result.event_id,
        donor_ids=result.donor_ids,
        task_ids=result.task_ids,
        donors_created=result.donors_created,
    )
