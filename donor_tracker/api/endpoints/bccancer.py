"""Pass-through routes to the upstream donor-data API."""

from typing import Annotated

from fastapi import APIRouter, Query

from donor_tracker.api.dependencies import DonorApiDep
from donor_tracker.domain.exceptions import ValidationException
from donor_tracker.schemas.upstream import CitiesResponse, City, DonorSearchResponse

router = APIRouter()


@router.get("/cities", response_model=CitiesResponse)
async def list_cities(donor_api: DonorApiDep):
    """City names from the upstream, numbered by position."""
    names = await donor_api.get_cities()
    return CitiesResponse(data=[City(id=i, name=name) for i, name in enumerate(names)])


@router.get("/donors", response_model=DonorSearchResponse)
async def list_upstream_donors(
    donor_api: DonorApiDep,
    limit: Annotated[int, Query(ge=1, le=1000)] = 1,
):
    return await donor_api.list_donors(limit)


@router.get("/search-donors", response_model=DonorSearchResponse)
async def search_donors(
    donor_api: DonorApiDep,
    cities: Annotated[list[str] | None, Query()] = None,
    limit: Annotated[int, Query(ge=1, le=1000)] = 1,
):
    """Candidate donors for the selected cities."""
    if not cities:
        raise ValidationException("At least one city must be provided.", field="cities")
    return await donor_api.search_donors(cities, limit)
