"""Routes handling priority CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import PriorityServiceDependency
from ...errors import unwrap
from ...schemas import ErrorResponse, PriorityRead, PriorityRequest

router = APIRouter(
    prefix="/priorities",
    tags=["priorities"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


@router.post(
    "",
    response_model=PriorityRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new priority",
)
async def create_priority(
    payload: PriorityRequest,
    service: PriorityServiceDependency,
) -> PriorityRead:
    return await service.create_priority(name=payload.name, level=payload.level)


@router.get("", response_model=list[PriorityRead], summary="List all priorities")
async def list_priorities(service: PriorityServiceDependency) -> list[PriorityRead]:
    return await service.list_priorities()


@router.get("/{priority_id}", response_model=PriorityRead, summary="Retrieve a priority by id")
async def get_priority(priority_id: int, service: PriorityServiceDependency) -> PriorityRead:
    return unwrap(await service.get_priority(priority_id))


@router.put("/{priority_id}", response_model=PriorityRead, summary="Replace a priority")
async def update_priority(
    priority_id: int,
    payload: PriorityRequest,
    service: PriorityServiceDependency,
) -> PriorityRead:
    return unwrap(
        await service.update_priority(priority_id, name=payload.name, level=payload.level)
    )


@router.delete(
    "/{priority_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a priority",
)
async def delete_priority(priority_id: int, service: PriorityServiceDependency) -> Response:
    unwrap(await service.delete_priority(priority_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
