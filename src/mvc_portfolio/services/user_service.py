"""Client for /api/users."""

from typing import Any, Dict
from urllib.parse import quote

from mvc_portfolio.services.base_service import BaseService


class UserService(BaseService):
    resource = "users"

    def get_users(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self.get(params={"page": page, "limit": limit})

    def get_user_by_id(self, user_id: str) -> Dict[str, Any]:
        return self.get(f"/{quote(user_id, safe='')}")

    def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a user from ``{"name", "email", "role"}``."""
        return self.post(json=data)

    def update_user(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.put(f"/{quote(user_id, safe='')}", json=data)

    def delete_user(self, user_id: str) -> Dict[str, Any]:
        return self.delete(f"/{quote(user_id, safe='')}")

    def get_users_by_role(self, role: str) -> Dict[str, Any]:
        return self.get(f"/role/{quote(role, safe='')}")

    def get_active_users(self) -> Dict[str, Any]:
        return self.get("/active")

    def search_users(self, query: str) -> Dict[str, Any]:
        return self.get("/search", params={"q": query})

    def get_user_statistics(self) -> Dict[str, Any]:
        return self.get("/statistics")

    def activate_user(self, user_id: str) -> Dict[str, Any]:
        return self.patch(f"/{quote(user_id, safe='')}/activate")

    def deactivate_user(self, user_id: str) -> Dict[str, Any]:
        return self.patch(f"/{quote(user_id, safe='')}/deactivate")
