"""Tests for domain exceptions (error_code, message, details)."""

from donor_tracker.domain.exceptions import (
    DonorTrackerException,
    ResourceNotFoundException,
    StorageException,
    StorageInitializationException,
    TaskAlreadyFinalizedException,
    UpstreamServiceException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base DonorTrackerException uses class name as error_code when not provided."""
    exc = DonorTrackerException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "DonorTrackerException"
    assert exc.details == {}


def test_base_exception_to_dict() -> None:
    exc = DonorTrackerException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid status", field="status")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "status"}


def test_validation_exception_without_field() -> None:
    assert ValidationException("Bad").details == {}


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("task", 7)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "task not found: 7"
    assert exc.details == {"resource_type": "task", "resource_id": 7}


def test_task_already_finalized() -> None:
    exc = TaskAlreadyFinalizedException(3, "approved", "rejected")
    assert exc.error_code == "TASK_ALREADY_FINALIZED"
    assert exc.message == "Task 3 is already approved"
    assert exc.details["requested_status"] == "rejected"


def test_storage_exception_keeps_engine_message() -> None:
    exc = StorageException("create_event", "Database error")
    assert exc.error_code == "STORAGE_ERROR"
    assert exc.message == "An error occurred: Database error"
    assert exc.details == {"operation": "create_event"}


def test_storage_initialization_exception() -> None:
    exc = StorageInitializationException("/nope/db.sqlite", "permission denied")
    assert exc.error_code == "STORAGE_INIT_ERROR"
    assert "/nope/db.sqlite" in exc.message


def test_upstream_exception_status_code_optional() -> None:
    assert UpstreamServiceException("down").details == {}
    exc = UpstreamServiceException("bad gateway", status_code=503)
    assert exc.error_code == "UPSTREAM_ERROR"
    assert exc.details == {"status_code": 503}
