"""Contract tests for mapping upstream donor rows (recorded response fixture)."""

import pytest

from donor_tracker.domain.exceptions import ValidationException
from donor_tracker.infrastructure.external.donor_api.mapping import (
    UPSTREAM_DONOR_COLUMNS,
    map_upstream_donor,
    map_upstream_donors,
)

pytestmark = pytest.mark.contract


def test_column_positions_match_recorded_headers(upstream_payload) -> None:
    headers = upstream_payload["headers"]
    for field, index in UPSTREAM_DONOR_COLUMNS.items():
        assert headers[index] == field


def test_maps_recorded_rows(upstream_payload) -> None:
    donors = map_upstream_donors(upstream_payload)
    assert [d.first_name for d in donors] == ["Carlos", "Maria", "Priya"]

    carlos = donors[0]
    assert carlos.pmm == "PMM123"
    assert carlos.nick_name == "Charlie"
    assert carlos.last_name == "Smith"
    assert carlos.organization_name == "Helping Hands Inc."
    assert carlos.city == "Vancouver"
    assert carlos.total_donations == 5000.0


def test_blank_text_becomes_none_and_amount_is_parsed(upstream_payload) -> None:
    priya = map_upstream_donors(upstream_payload)[2]
    assert priya.nick_name is None
    assert priya.organization_name is None
    assert priya.total_donations == 1250.5
    assert priya.city == "Kelowna"


def test_empty_payload_maps_to_no_donors() -> None:
    assert map_upstream_donors({"headers": [], "data": []}) == []
    assert map_upstream_donors({}) == []


def test_short_row_is_rejected(upstream_payload) -> None:
    row = upstream_payload["data"][0][:10]
    with pytest.raises(ValidationException) as exc_info:
        map_upstream_donor(row)
    assert exc_info.value.details == {"field": "data"}


def test_row_without_pmm_is_rejected(upstream_payload) -> None:
    row = list(upstream_payload["data"][0])
    row[0] = "  "
    with pytest.raises(ValidationException, match="no PMM"):
        map_upstream_donor(row)


def test_non_numeric_total_is_rejected(upstream_payload) -> None:
    row = list(upstream_payload["data"][1])
    row[UPSTREAM_DONOR_COLUMNS["total_donations"]] = "lots"
    with pytest.raises(ValidationException) as exc_info:
        map_upstream_donor(row)
    assert exc_info.value.details == {"field": "total_donations"}
