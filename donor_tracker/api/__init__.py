"""HTTP API: routers and dependencies."""

from donor_tracker.api.router import api_router

__all__ = ["api_router"]
