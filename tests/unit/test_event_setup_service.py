"""Unit tests for EventSetupService with an in-memory store and donor source."""

from collections.abc import Sequence
from typing import Any

import pytest

from donor_tracker.application.dtos.donor import DonorCreate, DonorResolution
from donor_tracker.application.dtos.event import EventCreate
from donor_tracker.application.results import Failure, Ok
from donor_tracker.application.services import EventSetupService
from donor_tracker.domain.exceptions import StorageException, UpstreamServiceException
from donor_tracker.infrastructure.external.donor_api.mapping import map_upstream_donors


class FakeStore:
    """Keeps donors keyed by name; records every call."""

    def __init__(self, existing: dict[tuple, int] | None = None) -> None:
        self.donors = dict(existing or {})
        self.events: list[EventCreate] = []
        self.task_calls: list[tuple[int, list[int]]] = []
        self.fail_tasks = False

    async def create_event(self, data: EventCreate):
        self.events.append(data)
        return Ok(len(self.events))

    async def find_or_create_donor(self, data: DonorCreate):
        key = (data.first_name, data.last_name)
        if key in self.donors:
            return Ok(DonorResolution(self.donors[key], created=False))
        self.donors[key] = 100 + len(self.donors)
        return Ok(DonorResolution(self.donors[key], created=True))

    async def create_tasks_for_event(self, event_id: int, donor_ids: Sequence[int]):
        if self.fail_tasks:
            return Failure(StorageException("create_tasks_for_event", "FOREIGN KEY constraint failed"))
        self.task_calls.append((event_id, list(donor_ids)))
        return Ok([500 + i for i in range(len(donor_ids))])


class FakeSource:
    """Serves the recorded upstream rows, mapped the way DonorApiClient maps them."""

    def __init__(self, payload: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: list[tuple[list[str], int]] = []

    async def search_candidate_donors(
        self, cities: Sequence[str], limit: int = 1
    ) -> list[DonorCreate]:
        self.calls.append((list(cities), limit))
        if self.error is not None:
            raise self.error
        return map_upstream_donors(self.payload)


async def test_setup_creates_event_donors_and_tasks(upstream_payload) -> None:
    store = FakeStore()
    source = FakeSource(upstream_payload)
    svc = EventSetupService(store, source)

    result = await svc.setup_event(EventCreate("Spring Gala"), ["Vancouver", "Victoria"], limit=3)

    assert result.event_id == 1
    assert result.donor_ids == [100, 101, 102]
    assert result.task_ids == [500, 501, 502]
    assert result.donors_created == 3
    assert source.calls == [(["Vancouver", "Victoria"], 3)]
    assert store.task_calls == [(1, [100, 101, 102])]


async def test_setup_reuses_known_donors(upstream_payload) -> None:
    store = FakeStore(existing={("Maria", "Johnson"): 7})
    result = await EventSetupService(store, FakeSource(upstream_payload)).setup_event(
        EventCreate("Gala"), ["Victoria"]
    )
    assert 7 in result.donor_ids
    assert result.donors_created == 2


async def test_duplicate_upstream_rows_get_one_task(upstream_payload) -> None:
    payload = {**upstream_payload, "data": upstream_payload["data"][:1] * 2}
    store = FakeStore()
    result = await EventSetupService(store, FakeSource(payload)).setup_event(
        EventCreate("Gala"), ["Vancouver"]
    )
    assert result.donor_ids == [100]
    assert store.task_calls == [(1, [100])]


async def test_upstream_failure_propagates_after_event_created() -> None:
    store = FakeStore()
    source = FakeSource(error=UpstreamServiceException("Donor API returned status 503", 503))
    with pytest.raises(UpstreamServiceException):
        await EventSetupService(store, source).setup_event(EventCreate("Gala"), ["Vancouver"])
    assert len(store.events) == 1
    assert store.task_calls == []


async def test_task_failure_raises_storage_error(upstream_payload) -> None:
    store = FakeStore()
    store.fail_tasks = True
    with pytest.raises(StorageException, match="FOREIGN KEY"):
        await EventSetupService(store, FakeSource(upstream_payload)).setup_event(
            EventCreate("Gala"), ["Vancouver"]
        )
