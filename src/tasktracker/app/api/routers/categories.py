"""Routes handling category CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import CategoryServiceDependency
from ...errors import unwrap
from ...schemas import CategoryRead, CategoryRequest, ErrorResponse

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category",
)
async def create_category(
    payload: CategoryRequest,
    service: CategoryServiceDependency,
) -> CategoryRead:
    return await service.create_category(name=payload.name, description=payload.description)


@router.get("", response_model=list[CategoryRead], summary="List all categories")
async def list_categories(service: CategoryServiceDependency) -> list[CategoryRead]:
    return await service.list_categories()


@router.get("/{category_id}", response_model=CategoryRead, summary="Retrieve a category by id")
async def get_category(category_id: int, service: CategoryServiceDependency) -> CategoryRead:
    return unwrap(await service.get_category(category_id))


@router.put("/{category_id}", response_model=CategoryRead, summary="Replace a category")
async def update_category(
    category_id: int,
    payload: CategoryRequest,
    service: CategoryServiceDependency,
) -> CategoryRead:
    return unwrap(
        await service.update_category(
            category_id,
            name=payload.name,
            description=payload.description,
        )
    )


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
)
async def delete_category(category_id: int, service: CategoryServiceDependency) -> Response:
    unwrap(await service.delete_category(category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
