"""Mapping from the upstream donor API's positional rows to DonorCreate.

The upstream returns {"headers": [...], "data": [[...], ...]} and the
donor fields are identified by column position. All index knowledge
lives in UPSTREAM_DONOR_COLUMNS; tests/fixtures/upstream_event_response.json
pins it against a recorded response.
"""

from collections.abc import Sequence
from typing import Any

from donor_tracker.application.dtos.donor import DonorCreate
from donor_tracker.domain.exceptions import ValidationException

UPSTREAM_DONOR_COLUMNS: dict[str, int] = {
    "pmm": 0,
    "first_name": 5,
    "nick_name": 6,
    "last_name": 7,
    "organization_name": 8,
    "total_donations": 9,
    "city": 20,
}

_MIN_ROW_LENGTH = max(UPSTREAM_DONOR_COLUMNS.values()) + 1


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _amount(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationException(
            f"total_donations must be numeric, got {value!r}", field="total_donations"
        ) from None


def map_upstream_donor(row: Sequence[Any]) -> DonorCreate:
    """Build a DonorCreate from one upstream data row.

    Raises:
        ValidationException: If the row is too short or has no PMM.
    """
    if len(row) < _MIN_ROW_LENGTH:
        raise ValidationException(
            f"Upstream donor row has {len(row)} columns; expected at least {_MIN_ROW_LENGTH}",
            field="data",
        )
    cols = UPSTREAM_DONOR_COLUMNS
    pmm = _text(row[cols["pmm"]])
    if pmm is None:
        raise ValidationException("Upstream donor row has no PMM", field="pmm")
    return DonorCreate(
        pmm=pmm,
        first_name=_text(row[cols["first_name"]]),
        nick_name=_text(row[cols["nick_name"]]),
        last_name=_text(row[cols["last_name"]]),
        organization_name=_text(row[cols["organization_name"]]),
        city=_text(row[cols["city"]]),
        total_donations=_amount(row[cols["total_donations"]]),
    )


def map_upstream_donors(payload: dict[str, Any]) -> list[DonorCreate]:
    """Map every row of an upstream {"headers", "data"} payload."""
    return [map_upstream_donor(row) for row in payload.get("data", [])]
