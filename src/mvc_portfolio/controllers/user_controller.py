"""User controller handling user-related operations."""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from mvc_portfolio.controllers.base_controller import BaseController
from mvc_portfolio.core.exceptions import NotFoundError, ValidationError


class UserController(BaseController):
    """Request handlers for /api/users."""

    def _require(self, user: Any, user_id: str) -> Any:
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_users(self, page: Optional[str] = None, limit: Optional[str] = None) -> JSONResponse:
        page_number, page_size = self.get_pagination_params(page, limit)
        return self.handle(
            lambda: self.manager.find_with_pagination(page_number, page_size),
            "Failed to fetch users",
        )

    def get_user_by_id(self, user_id: str) -> JSONResponse:
        return self.handle(
            lambda: self._require(self.manager.find_by_id(user_id), user_id),
            "Failed to fetch user",
        )

    def create_user(self, data: Dict[str, Any]) -> JSONResponse:
        def operation():
            validation_error = self.validate_required(data, ["name", "email", "role"])
            if validation_error:
                raise ValidationError(validation_error)
            return self.manager.create_user(data)

        return self.handle(operation, "Failed to create user", status_code=201)

    def update_user(self, user_id: str, data: Dict[str, Any]) -> JSONResponse:
        def operation():
            # An unknown id answers 404 even when the body is invalid
            self._require(self.manager.find_by_id(user_id), user_id)
            return self._require(self.manager.update_user(user_id, data), user_id)

        return self.handle(operation, "Failed to update user")

    def delete_user(self, user_id: str) -> JSONResponse:
        def operation():
            if not self.manager.delete(user_id):
                raise NotFoundError("User", user_id)
            return {"message": "User deleted successfully"}

        return self.handle(operation, "Failed to delete user")

    def get_users_by_role(self, role: str) -> JSONResponse:
        return self.handle(lambda: self.manager.find_by_role(role), "Failed to fetch users by role")

    def get_active_users(self) -> JSONResponse:
        return self.handle(self.manager.find_active_users, "Failed to fetch active users")

    def search_users(self, query: Optional[str]) -> JSONResponse:
        def operation():
            if not query or not query.strip():
                raise ValidationError("Search query is required")
            return self.manager.search(query.strip())

        return self.handle(operation, "Failed to search users")

    def get_user_statistics(self) -> JSONResponse:
        return self.handle(self.manager.get_statistics, "Failed to fetch user statistics")

    def deactivate_user(self, user_id: str) -> JSONResponse:
        return self.handle(
            lambda: self._require(self.manager.deactivate_user(user_id), user_id),
            "Failed to deactivate user",
        )

    def activate_user(self, user_id: str) -> JSONResponse:
        return self.handle(
            lambda: self._require(self.manager.activate_user(user_id), user_id),
            "Failed to activate user",
        )
