"""Application services (workflows composed from store operations)."""

from donor_tracker.application.services.event_setup_service import (
    EventSetupResult,
    EventSetupService,
)

__all__ = ["EventSetupResult", "EventSetupService"]
