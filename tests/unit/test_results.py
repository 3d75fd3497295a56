"""Tests for the Ok / Failure result types."""

import pytest

from donor_tracker.application.results import Failure, Ok
from donor_tracker.domain.exceptions import ResourceNotFoundException, StorageException


def test_ok_unwraps_value() -> None:
    result = Ok([1, 2])
    assert result.is_ok
    assert result.unwrap() == [1, 2]


def test_ok_equality() -> None:
    assert Ok(None) == Ok(None)
    assert Ok(1) != Ok(2)


def test_failure_exposes_error_fields() -> None:
    result = Failure(StorageException("list_events", "disk I/O error"))
    assert not result.is_ok
    assert result.error_code == "STORAGE_ERROR"
    assert result.message == "An error occurred: disk I/O error"


def test_failure_unwrap_raises_error() -> None:
    error = ResourceNotFoundException("task", 9)
    with pytest.raises(ResourceNotFoundException) as exc_info:
        Failure(error).unwrap()
    assert exc_info.value is error


def test_results_match_by_type() -> None:
    def describe(result) -> str:
        match result:
            case Ok(value=value):
                return f"ok:{value}"
            case Failure(error=error):
                return f"failed:{error.error_code}"
        return "unknown"

    assert describe(Ok(3)) == "ok:3"
    assert describe(Failure(StorageException("x", "y"))) == "failed:STORAGE_ERROR"
