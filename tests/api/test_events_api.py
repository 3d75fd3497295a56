"""HTTP tests for event endpoints."""

from httpx import AsyncClient

GALA_BODY = {
    "name": "Charity Gala",
    "location": "New York",
    "date": "2024-11-20",
    "description": "An exclusive charity gala to support cancer research.",
}


async def test_create_event_returns_id_and_message(client: AsyncClient) -> None:
    response = await client.post("/api/event", json=GALA_BODY)
    assert response.status_code == 200
    assert response.json() == {"event_id": 1, "message": "Event added with ID: 1"}


async def test_list_events(client: AsyncClient) -> None:
    await client.post("/api/event", json=GALA_BODY)
    await client.post("/api/event", json={"name": "Golf Day"})
    response = await client.get("/api/events")
    assert response.status_code == 200
    data = response.json()
    assert [e["name"] for e in data] == ["Charity Gala", "Golf Day"]
    assert data[0]["date"] == "2024-11-20"
    assert data[1]["location"] is None
    assert data[0]["created_at"]


async def test_get_event(client: AsyncClient) -> None:
    await client.post("/api/event", json=GALA_BODY)
    response = await client.get("/api/events/1")
    assert response.status_code == 200
    assert response.json()["description"].startswith("An exclusive")


async def test_get_unknown_event_returns_404(client: AsyncClient) -> None:
    response = await client.get("/api/events/99")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_create_event_without_name_returns_422(client: AsyncClient) -> None:
    response = await client.post("/api/event", json={"location": "Nowhere"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"
