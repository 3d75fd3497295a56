"""Task API: creation, PMM review, and donor-joined listings."""

from fastapi import APIRouter

from donor_tracker.api.dependencies import StoreDep
from donor_tracker.schemas.task import (
    TaskCreateRequest,
    TaskCreateResponse,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskWithDonorResponse,
)

router = APIRouter()


@router.get("/tasks", response_model=list[TaskWithDonorResponse])
async def list_tasks(store: StoreDep):
    tasks = (await store.list_tasks()).unwrap()
    return [TaskWithDonorResponse.model_validate(t) for t in tasks]


@router.get("/tasks/{event_id}", response_model=list[TaskWithDonorResponse])
async def list_tasks_for_event(event_id: int, store: StoreDep):
    """Tasks for one event; empty list when the event has none."""
    tasks = (await store.list_tasks_by_event(event_id)).unwrap()
    return [TaskWithDonorResponse.model_validate(t) for t in tasks]


@router.get("/tasks-of-pmm/{pmm}", response_model=list[TaskWithDonorResponse])
async def list_tasks_for_pmm(pmm: str, store: StoreDep):
    """Tasks whose donor belongs to this PMM; empty list when none."""
    tasks = (await store.list_tasks_by_pmm(pmm)).unwrap()
    return [TaskWithDonorResponse.model_validate(t) for t in tasks]


@router.post("/tasks", response_model=TaskCreateResponse)
async def create_tasks(body: TaskCreateRequest, store: StoreDep):
    """Create pending tasks for an event; all or nothing."""
    task_ids = (await store.create_tasks_for_event(body.event_id, body.donor_ids)).unwrap()
    return TaskCreateResponse(
        task_ids=task_ids, message=f"Tasks created for event ID: {body.event_id}"
    )


@router.put("/task", response_model=TaskResponse)
async def update_task_status(body: TaskStatusUpdateRequest, store: StoreDep):
    """Approve or reject a task (reason recorded on rejection)."""
    task = (
        await store.update_task_status(body.task_id, body.status, body.reason)
    ).unwrap()
    return TaskResponse.model_validate(task)
