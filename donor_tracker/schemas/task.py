"""Task API schemas.

Request bodies accept the camelCase keys the dashboards send (eventId,
donorIds, taskId) as well as snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class TaskCreateRequest(BaseModel):
    """Request body for POST /tasks."""

    model_config = ConfigDict(populate_by_name=True)

    event_id: int = Field(..., alias="eventId")
    donor_ids: list[int] = Field(..., alias="donorIds")


class TaskCreateResponse(BaseModel):
    task_ids: list[int]
    message: str


class TaskStatusUpdateRequest(BaseModel):
    """Request body for PUT /task.

    status is validated by the store (approved or rejected) so an invalid
    value gets the same VALIDATION_ERROR whether it comes over HTTP or not.
    """

    model_config = ConfigDict(populate_by_name=True)

    task_id: int = Field(..., alias="taskId")
    status: str | None = None
    reason: str | None = None


class TaskResponse(BaseModel):
    """Bare task (after a status update)."""

    model_config = ConfigDict(from_attributes=True)

    task_id: int
    event_id: int
    donor_id: int
    status: str
    reason: str | None
    created_at: str


class TaskWithDonorResponse(TaskResponse):
    """Task joined with its donor's descriptive fields."""

    first_name: str | None
    nick_name: str | None
    last_name: str | None
    pmm: str
    organization_name: str | None
    city: str | None
    total_donations: float | None
