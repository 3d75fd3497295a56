"""Application DTOs: plain dataclasses passed between store, services and API."""

from donor_tracker.application.dtos.donor import DonorCreate, DonorResolution, DonorResult
from donor_tracker.application.dtos.event import EventCreate, EventResult
from donor_tracker.application.dtos.task import TaskResult, TaskWithDonorResult

__all__ = [
    "DonorCreate",
    "DonorResolution",
    "DonorResult",
    "EventCreate",
    "EventResult",
    "TaskResult",
    "TaskWithDonorResult",
]
