"""DTOs for donors (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DonorCreate:
    """Input for creating a donor. pmm is the only required field."""

    pmm: str
    first_name: str | None = None
    nick_name: str | None = None
    last_name: str | None = None
    organization_name: str | None = None
    city: str | None = None
    total_donations: float | None = None


@dataclass(frozen=True)
class DonorResult:
    """Donor read-model."""

    donor_id: int
    first_name: str | None
    nick_name: str | None
    last_name: str | None
    pmm: str
    organization_name: str | None
    city: str | None
    total_donations: float | None
    created_at: str


@dataclass(frozen=True)
class DonorResolution:
    """Outcome of find-or-create: the donor id and whether a row was inserted."""

    donor_id: int
    created: bool
