"""Domain exceptions for the donor tracker.

Defines domain-level exceptions that represent business rule violations and
storage faults. These exceptions are independent of the web layer; the store
returns them inside Failure results and the presentation layer maps their
error_code to HTTP responses in exception handlers.
"""

from typing import Any


class DonorTrackerException(Exception):
    """Base exception for all donor tracker errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DonorTrackerException):
    """Raised when input validation fails (e.g. status outside the allowed set)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(DonorTrackerException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'donor', 'task').
            resource_id: The ID (or lookup key) that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TaskAlreadyFinalizedException(DonorTrackerException):
    """Raised when a task in a terminal status is transitioned again."""

    def __init__(self, task_id: int, current_status: str, requested_status: str) -> None:
        """Initialize with the task and both statuses.

        Args:
            task_id: Task whose status update was refused.
            current_status: Terminal status the task already holds.
            requested_status: Status the caller asked for.
        """
        super().__init__(
            f"Task {task_id} is already {current_status}",
            "TASK_ALREADY_FINALIZED",
            {
                "task_id": task_id,
                "current_status": current_status,
                "requested_status": requested_status,
            },
        )


class StorageException(DonorTrackerException):
    """Raised when the storage engine fails during an operation.

    Covers disk errors, constraint violations (including foreign keys)
    and malformed statements. The engine's message is kept verbatim.
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"An error occurred: {reason}",
            "STORAGE_ERROR",
            {"operation": operation},
        )


class StorageInitializationException(DonorTrackerException):
    """Raised when the database file or schema cannot be created."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(
            f"Could not initialize storage at {location}: {reason}",
            "STORAGE_INIT_ERROR",
            {"location": location},
        )


class UpstreamServiceException(DonorTrackerException):
    """Raised when the external donor-data API fails or is unreachable."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, "UPSTREAM_ERROR", details)
