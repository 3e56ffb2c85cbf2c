"""User schema definitions.

This module defines the User data model and the request bodies of the user
endpoints.
"""

import uuid
from datetime import datetime
from typing import Dict, Literal, Optional

import pytz
from pydantic import Field, field_validator

from mvc_portfolio.schemas.common import CamelModel, ensure_utc

UserRole = Literal["admin", "moderator", "user"]

USER_ROLES = ("admin", "moderator", "user")


class User(CamelModel):
    """structure of user"""

    id: str = Field(
        description="The unique identifier for the user.",
        default_factory=lambda: str(uuid.uuid4()),
    )
    name: str = Field(description="Display name.")
    email: str = Field(description="Unique email address.")
    role: UserRole = Field(description="One of 'admin', 'moderator' or 'user'.")
    is_active: bool = Field(default=True, description="Inactive users cannot log in.")
    created_at: datetime = Field(default_factory=lambda: datetime.now(pytz.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(pytz.utc))

    # SQLite hands timestamps back without tzinfo
    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class CreateUserRequest(CamelModel):
    """Body of POST /api/users.

    Fields are optional here so that missing values are reported by the
    controller as "<field> is required" inside the envelope.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None


class UpdateUserRequest(CamelModel):
    """Body of PUT /api/users/{id}; only supplied fields are changed."""

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class UserStatistics(CamelModel):
    total: int
    active: int
    inactive: int
    by_role: Dict[str, int]
