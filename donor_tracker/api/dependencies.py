"""Presentation-layer dependency injection (composition root).

The store and the upstream client are built once in the lifespan and
kept on app.state; routes receive them through these dependencies so
tests can swap them with app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from donor_tracker.application.services import EventSetupService
from donor_tracker.infrastructure.external.donor_api import DonorApiClient
from donor_tracker.infrastructure.persistence.store import DonorTaskStore


def get_store(request: Request) -> DonorTaskStore:
    """Return the process-wide DonorTaskStore created at startup."""
    return request.app.state.store


def get_donor_api_client(request: Request) -> DonorApiClient:
    """Return the upstream donor API client created at startup."""
    return request.app.state.donor_api_client


def get_event_setup_service(
    store: Annotated[DonorTaskStore, Depends(get_store)],
    donor_api: Annotated[DonorApiClient, Depends(get_donor_api_client)],
) -> EventSetupService:
    """Build EventSetupService over the shared store and upstream client."""
    return EventSetupService(store, donor_api)


StoreDep = Annotated[DonorTaskStore, Depends(get_store)]
DonorApiDep = Annotated[DonorApiClient, Depends(get_donor_api_client)]
EventSetupDep = Annotated[EventSetupService, Depends(get_event_setup_service)]
