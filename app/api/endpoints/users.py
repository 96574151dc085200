"""User API: thin routes delegating to UserService.

Not-found, duplicate-email, and credential failures are raised by the
service as domain exceptions and mapped to HTTP by the central handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import (
    get_current_user,
    get_user_service,
    get_user_service_for_write,
)
from app.application.dtos.user import UserCreate, UserResult
from app.application.services.user_service import UserService
from app.schemas.auth import LoginRequest, TokenResponse
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """List all users, oldest first."""
    users = await user_service.list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreateRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Create a user. The password, when given, is stored only as a bcrypt hash."""
    user = await user_service.create_user(
        UserCreate(
            first_name=body.first_name,
            last_name=body.last_name,
            email=body.email,
            password=body.password,
        )
    )
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Authenticate with email and password; return a bearer token valid for one hour."""
    token = await user_service.login(email=body.email, password=body.password)
    return TokenResponse(token=token)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[UserResult, Depends(get_current_user)],
):
    """Return the user named by the bearer token. Requires Authorization."""
    return UserResponse.model_validate(current_user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get user by id."""
    user = await user_service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserUpdateRequest,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Partially update a user: only fields present in the body change."""
    user = await user_service.update_user(user_id, body.model_dump(exclude_unset=True))
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service_for_write)],
) -> Response:
    """Permanently delete a user."""
    await user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
