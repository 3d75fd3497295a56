"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from donor_tracker.domain.enums import TaskStatus
from donor_tracker.domain.exceptions import (
    DonorTrackerException,
    ResourceNotFoundException,
    StorageException,
    StorageInitializationException,
    TaskAlreadyFinalizedException,
    UpstreamServiceException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskStatus",
    # Exceptions
    "DonorTrackerException",
    "ResourceNotFoundException",
    "StorageException",
    "StorageInitializationException",
    "TaskAlreadyFinalizedException",
    "UpstreamServiceException",
    "ValidationException",
]
