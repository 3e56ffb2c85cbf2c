"""Authentication schema definitions."""

from typing import Optional

from pydantic import BaseModel

from mvc_portfolio.schemas.user import User


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    success: bool = True
    user: User
    token: str
    message: str = "Login successful"
