"""External donor-data API: HTTP client and positional row mapping."""

from donor_tracker.infrastructure.external.donor_api.client import DonorApiClient
from donor_tracker.infrastructure.external.donor_api.mapping import (
    UPSTREAM_DONOR_COLUMNS,
    map_upstream_donor,
    map_upstream_donors,
)

__all__ = [
    "DonorApiClient",
    "UPSTREAM_DONOR_COLUMNS",
    "map_upstream_donor",
    "map_upstream_donors",
]
