"""Persistence models: ORM entities and mixins."""

from donor_tracker.infrastructure.persistence.models.donor import Donor
from donor_tracker.infrastructure.persistence.models.event import Event
from donor_tracker.infrastructure.persistence.models.mixins import CreatedAtMixin
from donor_tracker.infrastructure.persistence.models.task import Task

__all__ = [
    "Event",
    "Donor",
    "Task",
    "CreatedAtMixin",
]
