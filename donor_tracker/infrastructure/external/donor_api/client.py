"""HTTP client for the external donor-data API (read-only upstream).

Thin wrapper over a shared httpx.AsyncClient. Non-2xx responses and
transport errors raise UpstreamServiceException. Raw payloads are returned as
the upstream sends them (headers + positional rows); search_candidate_donors
also maps them to DonorCreate for the event setup workflow.
"""

from collections.abc import Sequence
from typing import Any

import httpx

from donor_tracker.application.dtos.donor import DonorCreate
from donor_tracker.domain.exceptions import UpstreamServiceException
from donor_tracker.infrastructure.external.donor_api.mapping import map_upstream_donors
from donor_tracker.shared.logging import get_logger

logger = get_logger(__name__)


class DonorApiClient:
    """Calls /cities, /donors and /event on the upstream donor API.

    Args:
        http_client: httpx.AsyncClient whose base_url points at the upstream.
            The caller owns its lifecycle.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self.http_client = http_client

    async def _get_json(self, path: str, params: list[tuple[str, Any]]) -> dict[str, Any]:
        try:
            response = await self.http_client.get(path, params=params)
        except httpx.HTTPError as exc:
            logger.error("Donor API request %s failed: %s", path, exc)
            raise UpstreamServiceException(f"Donor API unreachable: {exc}") from exc
        if response.status_code != 200:
            logger.error(
                "Donor API %s returned status=%d", path, response.status_code
            )
            raise UpstreamServiceException(
                f"Donor API returned status {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamServiceException("Donor API returned invalid JSON") from exc

    async def get_cities(self) -> list[str]:
        """Return city names (first column of each row)."""
        payload = await self._get_json("/cities", [("format", "json")])
        return [row[0] for row in payload.get("data", []) if row]

    async def list_donors(self, limit: int = 1) -> dict[str, Any]:
        """Return the raw donor listing payload."""
        return await self._get_json("/donors", [("limit", limit), ("format", "json")])

    async def search_donors(self, cities: Sequence[str], limit: int = 1) -> dict[str, Any]:
        """Return candidate donors for the given cities as {"headers", "data"}."""
        params: list[tuple[str, Any]] = [("cities", city) for city in cities]
        params += [("limit", limit), ("format", "json")]
        payload = await self._get_json("/event", params)
        logger.debug(
            "Donor API returned %d rows for cities=%s", len(payload.get("data", [])), list(cities)
        )
        return payload

    async def search_candidate_donors(
        self, cities: Sequence[str], limit: int = 1
    ) -> list[DonorCreate]:
        """Search the cities and map each upstream row to a DonorCreate.

        Raises:
            UpstreamServiceException: If the upstream call fails.
            ValidationException: If a row does not fit the column mapping.
        """
        return map_upstream_donors(await self.search_donors(cities, limit))
