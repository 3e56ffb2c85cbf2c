"""User management utilities.

This module provides user persistence on top of BaseManager: lookups by
email, role and activity, validated create/update and statistics.
"""

import logging
import re
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError

from mvc_portfolio.core.exceptions import DatabaseError, DuplicateEmailError, ValidationError
from mvc_portfolio.models.user import UserModel
from mvc_portfolio.schemas.user import USER_ROLES, User, UserStatistics
from mvc_portfolio.utils.base_manager import BaseManager

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email or ""))


def compute_user_statistics(users: Iterable[Any]) -> UserStatistics:
    """Count users by activity and role.

    Args:
        users: Objects exposing ``is_active`` and ``role`` attributes
            (schema objects or query rows).

    Returns:
        UserStatistics for the given users.
    """
    total = 0
    active = 0
    by_role: Counter = Counter()
    for user in users:
        total += 1
        if user.is_active:
            active += 1
        by_role[user.role] += 1
    return UserStatistics(
        total=total,
        active=active,
        inactive=total - active,
        by_role=dict(by_role),
    )


class UserManager(BaseManager[User]):
    """Manages user data persistence and operations using SQLAlchemy."""

    model_class = UserModel
    schema_class = User
    entity_name = "user"
    entity_plural = "users"
    search_fields = ("name", "email")

    def create(self, data: Dict[str, Any]) -> User:
        # The unique index catches concurrent inserts that passed the
        # duplicate check in create_user.
        try:
            return super().create(data)
        except DatabaseError as e:
            if isinstance(e.__cause__, IntegrityError):
                raise DuplicateEmailError(data.get("email", "")) from e
            raise

    def update(self, user_id: str, data: Dict[str, Any]) -> Optional[User]:
        try:
            return super().update(user_id, data)
        except DatabaseError as e:
            if isinstance(e.__cause__, IntegrityError):
                raise DuplicateEmailError(data.get("email", "")) from e
            raise

    def find_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address.

        Returns:
            User object if found, None otherwise.
        """
        with self.database_errors("Failed to fetch user"):
            model = self._query().filter(UserModel.email == email).first()
        return self.to_schema(model) if model else None

    def find_by_role(self, role: str) -> List[User]:
        """List users with the given role, newest first."""
        with self.database_errors("Failed to fetch users by role"):
            models = self._newest_first(self._query().filter(UserModel.role == role)).all()
        return [self.to_schema(m) for m in models]

    def find_active_users(self) -> List[User]:
        """List active users, newest first."""
        with self.database_errors("Failed to fetch active users"):
            models = self._newest_first(
                self._query().filter(UserModel.is_active.is_(True))
            ).all()
        return [self.to_schema(m) for m in models]

    def create_user(self, data: Dict[str, Any]) -> User:
        """Create a new active user after validation.

        Args:
            data: Mapping with ``name``, ``email`` and ``role``.

        Returns:
            Created User object.

        Raises:
            DuplicateEmailError: If the email is already registered.
            ValidationError: If the email, name or role is invalid.
        """
        email = data.get("email") or ""
        if self.find_by_email(email):
            raise DuplicateEmailError(email)
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")
        if not (data.get("name") or "").strip():
            raise ValidationError("Name is required")
        role = data.get("role") or "user"
        if role not in USER_ROLES:
            raise ValidationError(f"Invalid role: {role}")

        user = self.create(
            {"name": data["name"], "email": email, "role": role, "is_active": True}
        )
        logger.info("Created user: %s", user.email)
        return user

    def update_user(self, user_id: str, data: Dict[str, Any]) -> Optional[User]:
        """Update a user after validating the changed fields.

        Args:
            user_id: ID of the user to update.
            data: Partial mapping of ``name``, ``email``, ``role``, ``is_active``.

        Returns:
            Updated User object, or None if the user does not exist.

        Raises:
            DuplicateEmailError: If the new email belongs to another user.
            ValidationError: If a supplied field is invalid.
        """
        if "email" in data and data["email"] is not None:
            if not is_valid_email(data["email"]):
                raise ValidationError("Invalid email format")
            existing = self.find_by_email(data["email"])
            if existing and existing.id != user_id:
                raise DuplicateEmailError(data["email"])

        if "name" in data and not (data["name"] or "").strip():
            raise ValidationError("Name cannot be empty")

        if data.get("role") is not None and data["role"] not in USER_ROLES:
            raise ValidationError(f"Invalid role: {data['role']}")

        changes = {key: value for key, value in data.items() if value is not None}
        return self.update(user_id, changes)

    def deactivate_user(self, user_id: str) -> Optional[User]:
        return self.update(user_id, {"is_active": False})

    def activate_user(self, user_id: str) -> Optional[User]:
        return self.update(user_id, {"is_active": True})

    def get_statistics(self) -> UserStatistics:
        """Get user counts by activity and role."""
        with self.database_errors("Failed to fetch user statistics"):
            rows = self.db.query(UserModel.is_active, UserModel.role).all()
        return compute_user_statistics(rows)
