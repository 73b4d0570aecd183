"""Routes handling task CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import TaskServiceDependency
from ...errors import unwrap
from ...schemas import ErrorResponse, TaskRead, TaskRequest, TaskStatusUpdate

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    description="Creates a PENDING task assigned to an existing user, category and priority.",
)
async def create_task(payload: TaskRequest, service: TaskServiceDependency) -> TaskRead:
    return unwrap(
        await service.create_task(
            title=payload.title,
            description=payload.description,
            user_id=payload.user_id,
            category_id=payload.category_id,
            priority_id=payload.priority_id,
        )
    )


@router.get("", response_model=list[TaskRead], summary="List all tasks")
async def list_tasks(service: TaskServiceDependency) -> list[TaskRead]:
    return await service.list_tasks()


@router.get("/{task_id}", response_model=TaskRead, summary="Retrieve a task by id")
async def get_task(task_id: int, service: TaskServiceDependency) -> TaskRead:
    return unwrap(await service.get_task(task_id))


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Replace a task",
    description="Replaces title, description and references. The status is left unchanged.",
)
async def update_task(
    task_id: int,
    payload: TaskRequest,
    service: TaskServiceDependency,
) -> TaskRead:
    return unwrap(
        await service.update_task(
            task_id,
            title=payload.title,
            description=payload.description,
            user_id=payload.user_id,
            category_id=payload.category_id,
            priority_id=payload.priority_id,
        )
    )


@router.put(
    "/{task_id}/status",
    response_model=TaskRead,
    summary="Update task status",
    description="Moves a task between PENDING, IN_PROGRESS and DONE.",
)
async def update_task_status(
    task_id: int,
    payload: TaskStatusUpdate,
    service: TaskServiceDependency,
) -> TaskRead:
    return unwrap(await service.update_task_status(task_id, payload.status))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a task")
async def delete_task(task_id: int, service: TaskServiceDependency) -> Response:
    unwrap(await service.delete_task(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
