"""User routes.

This module handles HTTP endpoints for user CRUD operations. Static paths
are registered before ``/{user_id}`` so they are not captured by it.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mvc_portfolio.core.dependencies import UserControllerDep
from mvc_portfolio.schemas.common import ApiResponse, PaginatedResult
from mvc_portfolio.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserRole,
    UserStatistics,
)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=ApiResponse[PaginatedResult[User]], summary="Get all users")
def list_users(
    controller: UserControllerDep,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> JSONResponse:
    """Retrieve a paginated list of users, newest first.

    Args:
        controller: Injected UserController.
        page: Page number (default 1).
        limit: Users per page, 1-100 (default 10).
    """
    return controller.get_users(page, limit)


@router.post(
    "",
    response_model=ApiResponse[User],
    status_code=201,
    summary="Create a new user",
)
def create_user(req: CreateUserRequest, controller: UserControllerDep) -> JSONResponse:
    """Create a new active user. Email must be unique."""
    return controller.create_user(req.model_dump())


@router.get("/search", response_model=ApiResponse[List[User]], summary="Search users")
def search_users(controller: UserControllerDep, q: Optional[str] = None) -> JSONResponse:
    """Search users by name or email (case-insensitive substring)."""
    return controller.search_users(q)


@router.get("/active", response_model=ApiResponse[List[User]], summary="Get active users")
def list_active_users(controller: UserControllerDep) -> JSONResponse:
    return controller.get_active_users()


@router.get(
    "/statistics",
    response_model=ApiResponse[UserStatistics],
    summary="Get user statistics",
)
def get_user_statistics(controller: UserControllerDep) -> JSONResponse:
    return controller.get_user_statistics()


@router.get("/role/{role}", response_model=ApiResponse[List[User]], summary="Get users by role")
def list_users_by_role(role: UserRole, controller: UserControllerDep) -> JSONResponse:
    return controller.get_users_by_role(role)


@router.get("/{user_id}", response_model=ApiResponse[User], summary="Get user by ID")
def get_user(user_id: str, controller: UserControllerDep) -> JSONResponse:
    return controller.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=ApiResponse[User], summary="Update user")
def update_user(user_id: str, req: UpdateUserRequest, controller: UserControllerDep) -> JSONResponse:
    """Update the supplied fields of a user."""
    return controller.update_user(user_id, req.model_dump(exclude_unset=True))


@router.delete("/{user_id}", response_model=ApiResponse[Dict[str, Any]], summary="Delete user")
def delete_user(user_id: str, controller: UserControllerDep) -> JSONResponse:
    return controller.delete_user(user_id)


@router.patch("/{user_id}/activate", response_model=ApiResponse[User], summary="Activate user")
def activate_user(user_id: str, controller: UserControllerDep) -> JSONResponse:
    return controller.activate_user(user_id)


@router.patch("/{user_id}/deactivate", response_model=ApiResponse[User], summary="Deactivate user")
def deactivate_user(user_id: str, controller: UserControllerDep) -> JSONResponse:
    return controller.deactivate_user(user_id)
