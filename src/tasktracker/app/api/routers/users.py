"""Routes handling user CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...deps import UserServiceDependency
from ...errors import unwrap
from ...schemas import ErrorResponse, UserRead, UserRequest

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
async def create_user(payload: UserRequest, service: UserServiceDependency) -> UserRead:
    return await service.create_user(name=payload.name, email=payload.email)


@router.get("", response_model=list[UserRead], summary="List all users")
async def list_users(service: UserServiceDependency) -> list[UserRead]:
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead, summary="Retrieve a user by id")
async def get_user(user_id: int, service: UserServiceDependency) -> UserRead:
    return unwrap(await service.get_user(user_id))


@router.put("/{user_id}", response_model=UserRead, summary="Replace a user's details")
async def update_user(
    user_id: int,
    payload: UserRequest,
    service: UserServiceDependency,
) -> UserRead:
    return unwrap(await service.update_user(user_id, name=payload.name, email=payload.email))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a user")
async def delete_user(user_id: int, service: UserServiceDependency) -> Response:
    unwrap(await service.delete_user(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
