"""Persistence repositories. Re-exports for the store."""

from donor_tracker.infrastructure.persistence.repositories.base import BaseRepository
from donor_tracker.infrastructure.persistence.repositories.donor_repo import DonorRepository
from donor_tracker.infrastructure.persistence.repositories.event_repo import EventRepository
from donor_tracker.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "BaseRepository",
    "DonorRepository",
    "EventRepository",
    "TaskRepository",
]
