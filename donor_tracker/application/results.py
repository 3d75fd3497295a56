"""Tagged results returned by store operations.

Ok carries the payload; Failure carries a DonorTrackerException. Callers
branch on isinstance (or match) instead of comparing status codes, and
the HTTP layer calls unwrap() to let the registered exception handlers
pick the response status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from donor_tracker.domain.exceptions import DonorTrackerException


@dataclass(frozen=True)
class Ok[T]:
    """Successful operation carrying its value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed operation carrying a structured domain error."""

    error: DonorTrackerException

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def error_code(self) -> str:
        return self.error.error_code

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        raise self.error


type Result[T] = Ok[T] | Failure
