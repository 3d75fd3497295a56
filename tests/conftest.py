"""Pytest configuration and fixtures for donor_tracker.

Each test gets its own SQLite file under tmp_path. HTTP tests run the app
over ASGITransport with the store and the upstream donor API client
replaced through app.dependency_overrides; the upstream is an
httpx.MockTransport serving tests/fixtures/upstream_event_response.json.
"""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from donor_tracker.api.dependencies import get_donor_api_client, get_store
from donor_tracker.application.dtos.donor import DonorCreate
from donor_tracker.application.dtos.event import EventCreate
from donor_tracker.infrastructure.external.donor_api import DonorApiClient
from donor_tracker.infrastructure.persistence.database import Database
from donor_tracker.infrastructure.persistence.store import DonorTaskStore
from donor_tracker.main import create_app

FIXTURES = Path(__file__).parent / "fixtures"

CARLOS = DonorCreate(
    first_name="Carlos",
    nick_name="Charlie",
    last_name="Smith",
    pmm="PMM123",
    organization_name="Helping Hands Inc.",
    city="Los Angeles",
    total_donations=5000,
)
MARIA = DonorCreate(
    first_name="Maria",
    nick_name="Mia",
    last_name="Johnson",
    pmm="PMM456",
    organization_name="Bright Future Foundation",
    city="San Francisco",
    total_donations=7500,
)
GALA = EventCreate(
    name="Charity Gala",
    location="New York",
    date="2024-11-20",
    description="An exclusive charity gala to support cancer research.",
)


@pytest.fixture
def carlos() -> DonorCreate:
    return CARLOS


@pytest.fixture
def maria() -> DonorCreate:
    return MARIA


@pytest.fixture
def gala() -> EventCreate:
    return GALA


@pytest.fixture
async def database(tmp_path: Path) -> Database:
    """Connected Database on a fresh file; disposed after the test."""
    db = Database(tmp_path / "test_donor_tracker.db")
    await db.connect()
    yield db
    await db.dispose()


@pytest.fixture
async def store(database: Database) -> DonorTaskStore:
    """Store with status corrections disabled (default)."""
    return DonorTaskStore(database)


@pytest.fixture
def upstream_payload() -> dict[str, Any]:
    """Recorded upstream /event response (headers + positional rows)."""
    return json.loads((FIXTURES / "upstream_event_response.json").read_text(encoding="utf-8"))


@pytest.fixture
def upstream_state() -> dict[str, Any]:
    """Mutable knobs for the mock upstream (status code, requests seen)."""
    return {"status": 200, "requests": []}


@pytest.fixture
async def donor_api(
    upstream_payload: dict[str, Any], upstream_state: dict[str, Any]
) -> DonorApiClient:
    """DonorApiClient backed by httpx.MockTransport."""

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_state["requests"].append(request)
        if upstream_state["status"] != 200:
            return httpx.Response(upstream_state["status"], json={"message": "boom"})
        if request.url.path == "/cities":
            return httpx.Response(
                200, json={"headers": ["city"], "data": [["Vancouver"], ["Victoria"]]}
            )
        if request.url.path in ("/event", "/donors"):
            return httpx.Response(200, json=upstream_payload)
        return httpx.Response(404, json={"message": "not found"})

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://donor-api.test"
    ) as http_client:
        yield DonorApiClient(http_client)


@pytest.fixture
async def client(store: DonorTaskStore, donor_api: DonorApiClient) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with test store and upstream."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_donor_api_client] = lambda: donor_api
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
