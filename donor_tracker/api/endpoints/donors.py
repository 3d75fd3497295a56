"""Donor API: thin routes over DonorTaskStore."""

from typing import Annotated

from fastapi import APIRouter, Query

from donor_tracker.api.dependencies import StoreDep
from donor_tracker.domain.exceptions import ResourceNotFoundException
from donor_tracker.schemas.donor import (
    DonorBatchResponse,
    DonorCreateRequest,
    DonorCreateResponse,
    DonorResponse,
)

router = APIRouter()


@router.get("/donors", response_model=list[DonorResponse])
async def list_donors(store: StoreDep):
    donors = (await store.list_donors()).unwrap()
    return [DonorResponse.model_validate(d) for d in donors]


@router.get("/donors/{donor_id}", response_model=DonorResponse)
async def get_donor(donor_id: int, store: StoreDep):
    donor = (await store.get_donor(donor_id)).unwrap()
    if donor is None:
        raise ResourceNotFoundException("donor", donor_id)
    return DonorResponse.model_validate(donor)


@router.get("/donor/find", response_model=DonorResponse)
async def find_donor(
    store: StoreDep,
    first_name: Annotated[str, Query(alias="firstName")],
    last_name: Annotated[str, Query(alias="lastName")],
):
    """Find a donor by first and last name; 404 when none matches."""
    donor = (await store.find_donor_by_name(first_name, last_name)).unwrap()
    if donor is None:
        raise ResourceNotFoundException("donor", f"{first_name} {last_name}")
    return DonorResponse.model_validate(donor)


@router.post("/donor", response_model=DonorCreateResponse)
async def create_donor(body: DonorCreateRequest, store: StoreDep):
    donor_id = (await store.create_donor(body.to_dto())).unwrap()
    return DonorCreateResponse(donor_id=donor_id)


@router.post("/donors", response_model=DonorBatchResponse)
async def create_donors(body: list[DonorCreateRequest], store: StoreDep):
    """Insert a batch of donors atomically."""
    donor_ids = (await store.create_donors_batch([d.to_dto() for d in body])).unwrap()
    return DonorBatchResponse(donor_ids=donor_ids, message="Donors added successfully.")


@router.get("/pmm", response_model=list[str])
async def list_pmms(store: StoreDep):
    """Distinct PMM names (login picker and PMM dashboard)."""
    return (await store.list_pmms()).unwrap()
