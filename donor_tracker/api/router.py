"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes get
the store and upstream client from donor_tracker.api.dependencies.
"""

from fastapi import APIRouter

from donor_tracker.api.endpoints import bccancer, donors, events, health, tasks

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(events.router, tags=["events"])
api_router.include_router(donors.router, tags=["donors"])
api_router.include_router(tasks.router, tags=["tasks"])
api_router.include_router(bccancer.router, prefix="/bccancer", tags=["donor-api"])
