"""Authentication routes.

This module handles HTTP endpoints for login, logout and the current user.
The token is carried in an HTTP-only cookie.
"""

from fastapi import APIRouter, HTTPException, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from mvc_portfolio import config
from mvc_portfolio.core.dependencies import CurrentUserDep
from mvc_portfolio.core.exceptions import AuthenticationError
from mvc_portfolio.schemas.auth import LoginRequest, LoginResponse
from mvc_portfolio.schemas.common import ApiResponse, envelope
from mvc_portfolio.schemas.user import User
from mvc_portfolio.utils.auth import authenticate, create_token

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def set_auth_cookie(response: Response, token: str) -> None:
    """Attach the auth cookie to ``response``."""
    response.set_cookie(
        key=config.AUTH_COOKIE_NAME,
        value=token,
        max_age=config.AUTH_COOKIE_MAX_AGE,
        httponly=True,
        secure=config.AUTH_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_auth_cookie(response: Response) -> None:
    response.set_cookie(
        key=config.AUTH_COOKIE_NAME,
        value="",
        max_age=0,
        httponly=True,
        secure=config.AUTH_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


@router.post("/login", response_model=LoginResponse, summary="User login")
def login(req: LoginRequest) -> JSONResponse:
    """Authenticate with email and password.

    On success the token is returned in the body and set as the
    ``auth-token`` cookie.

    Raises:
        HTTPException: 400 if a credential is missing, 401 if they are wrong.
    """
    try:
        user = authenticate(req.email, req.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    token = create_token(user.id)
    response = JSONResponse(jsonable_encoder(LoginResponse(user=user, token=token)))
    set_auth_cookie(response, token)
    return response


@router.post("/logout", summary="User logout")
def logout() -> JSONResponse:
    """Clear the auth cookie."""
    response = JSONResponse(envelope(True, message="Logout successful"))
    clear_auth_cookie(response)
    return response


@router.get("/me", response_model=ApiResponse[User], summary="Get current user")
def get_me(current_user: CurrentUserDep) -> JSONResponse:
    """Return the user the auth cookie resolves to."""
    return JSONResponse(
        envelope(True, data=current_user, message="User profile retrieved successfully")
    )
