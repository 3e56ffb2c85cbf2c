"""Authentication utilities.

Authentication is deliberately simple: two hardcoded accounts with plaintext
passwords and an unsigned token of the form base64("<user id>:<epoch ms>").
The token is only looked up, never verified or expired.
"""

import base64
import binascii
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

import pytz

from mvc_portfolio.core.exceptions import AuthenticationError
from mvc_portfolio.schemas.user import User

logger = logging.getLogger(__name__)

ROLE_LEVELS = {"user": 0, "moderator": 1, "admin": 2}


@dataclass(frozen=True)
class Account:
    id: str
    name: str
    email: str
    password: str
    role: str
    is_active: bool
    created_at: datetime

    def to_user(self) -> User:
        """Public view of the account, without the password."""
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            role=self.role,
            is_active=self.is_active,
            created_at=self.created_at,
            updated_at=self.created_at,
        )


_STARTED_AT = datetime.now(pytz.utc)

ACCOUNTS: List[Account] = [
    Account(
        id="1",
        name="Admin User",
        email="admin@example.com",
        password="admin123",
        role="admin",
        is_active=True,
        created_at=_STARTED_AT,
    ),
    Account(
        id="2",
        name="John Doe",
        email="john@example.com",
        password="password123",
        role="user",
        is_active=True,
        created_at=_STARTED_AT,
    ),
]


def authenticate(email: Optional[str], password: Optional[str]) -> User:
    """Check credentials against the hardcoded accounts.

    Args:
        email: Login email.
        password: Plaintext password.

    Returns:
        The matching User.

    Raises:
        ValueError: If email or password is missing.
        AuthenticationError: If the credentials are wrong or the account is
            deactivated.
    """
    if not email or not password:
        raise ValueError("Email and password are required")

    account = next((a for a in ACCOUNTS if a.email == email), None)
    if account is None or account.password != password:
        logger.info("Rejected login for %s", email)
        raise AuthenticationError("Invalid email or password")
    if not account.is_active:
        raise AuthenticationError("Account is deactivated")

    logger.info("User %s logged in", account.email)
    return account.to_user()


def create_token(user_id: str, issued_at_ms: Optional[int] = None) -> str:
    """Encode ``"<user_id>:<issued_at_ms>"`` as base64."""
    if issued_at_ms is None:
        issued_at_ms = int(time.time() * 1000)
    raw = f"{user_id}:{issued_at_ms}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def get_user_from_token(token: Optional[str]) -> Optional[User]:
    """Resolve a token to an active account.

    Returns:
        The User, or None when the token is malformed, unknown or the
        account is inactive.
    """
    if not token:
        return None
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    user_id = decoded.split(":", 1)[0]
    account = next((a for a in ACCOUNTS if a.id == user_id), None)
    if account is None or not account.is_active:
        return None
    return account.to_user()


def has_role(user: User, required_role: str) -> bool:
    """True when ``user`` ranks at least ``required_role`` (user < moderator < admin)."""
    return ROLE_LEVELS.get(user.role, -1) >= ROLE_LEVELS.get(required_role, 0)
