"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes:
request-scoped managers (database-backed, or sample data when no database is
configured), controllers and the current user resolved from the auth cookie.
"""

from typing import Annotated, Optional, Union

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from mvc_portfolio import config
from mvc_portfolio.controllers.post_controller import PostController
from mvc_portfolio.controllers.user_controller import UserController
from mvc_portfolio.core.database import get_db
from mvc_portfolio.schemas.user import User
from mvc_portfolio.utils.auth import get_user_from_token
from mvc_portfolio.utils.post_manager import PostManager
from mvc_portfolio.utils.sample_store import SamplePostManager, SampleUserManager
from mvc_portfolio.utils.user_manager import UserManager

AnyUserManager = Union[UserManager, SampleUserManager]
AnyPostManager = Union[PostManager, SamplePostManager]


def get_user_manager(db: Optional[Session] = Depends(get_db)) -> AnyUserManager:
    """Get a UserManager with request-scoped DB session.

    Args:
        db: Database session, or None when the database is not configured.

    Returns:
        UserManager, or SampleUserManager serving sample data.
    """
    if db is None:
        return SampleUserManager()
    return UserManager(db)


def get_post_manager(db: Optional[Session] = Depends(get_db)) -> AnyPostManager:
    """Get a PostManager with request-scoped DB session.

    Args:
        db: Database session, or None when the database is not configured.

    Returns:
        PostManager, or SamplePostManager serving sample data.
    """
    if db is None:
        return SamplePostManager()
    return PostManager(db)


def get_user_controller(manager: AnyUserManager = Depends(get_user_manager)) -> UserController:
    return UserController(manager)


def get_post_controller(manager: AnyPostManager = Depends(get_post_manager)) -> PostController:
    return PostController(manager)


def get_optional_user(request: Request) -> Optional[User]:
    """Resolve the auth cookie to a user, or None when absent or invalid."""
    return get_user_from_token(request.cookies.get(config.AUTH_COOKIE_NAME))


def get_current_user(request: Request) -> User:
    """Get current authenticated user.

    Raises:
        HTTPException: 401 if the cookie is missing or does not resolve.
    """
    token = request.cookies.get(config.AUTH_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No authentication token found",
        )
    user = get_user_from_token(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return user


# Type aliases for dependency injection
UserManagerDep = Annotated[AnyUserManager, Depends(get_user_manager)]
PostManagerDep = Annotated[AnyPostManager, Depends(get_post_manager)]
UserControllerDep = Annotated[UserController, Depends(get_user_controller)]
PostControllerDep = Annotated[PostController, Depends(get_post_controller)]
OptionalUserDep = Annotated[Optional[User], Depends(get_optional_user)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
