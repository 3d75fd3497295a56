"""Donor API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from donor_tracker.application.dtos.donor import DonorCreate


class DonorCreateRequest(BaseModel):
    """Request body for a single donor (POST /donor) or one batch item (POST /donors)."""

    first_name: str | None = None
    nick_name: str | None = None
    last_name: str | None = None
    pmm: str = Field(..., min_length=1, description="Responsible project manager")
    organization_name: str | None = None
    city: str | None = None
    total_donations: float | None = Field(default=None, ge=0)

    def to_dto(self) -> DonorCreate:
        return DonorCreate(**self.model_dump())


class DonorCreateResponse(BaseModel):
    donor_id: int


class DonorBatchResponse(BaseModel):
    donor_ids: list[int]
    message: str


class DonorResponse(BaseModel):
    """Donor in list/get/find responses."""

    model_config = ConfigDict(from_attributes=True)

    donor_id: int
    first_name: str | None
    nick_name: str | None
    last_name: str | None
    pmm: str
    organization_name: str | None
    city: str | None
    total_donations: float | None
    created_at: str
