import base64

import pytest

from mvc_portfolio.core.exceptions import AuthenticationError
from mvc_portfolio.schemas.user import User
from mvc_portfolio.utils.auth import authenticate, create_token, get_user_from_token, has_role


def test_token_encodes_id_and_timestamp():
    token = create_token("1", issued_at_ms=1700000000000)

    assert base64.b64decode(token).decode() == "1:1700000000000"
    assert get_user_from_token(token).email == "admin@example.com"


@pytest.mark.parametrize("token", [None, "", "not base64!", create_token("42")])
def test_invalid_tokens_resolve_to_nobody(token):
    assert get_user_from_token(token) is None


def test_authenticate_errors():
    with pytest.raises(ValueError, match="Email and password are required"):
        authenticate("admin@example.com", "")
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        authenticate("admin@example.com", "wrong")
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        authenticate("nobody@example.com", "admin123")


def test_role_hierarchy():
    moderator = User(id="x", name="Mod", email="mod@example.com", role="moderator")

    assert has_role(moderator, "user")
    assert has_role(moderator, "moderator")
    assert not has_role(moderator, "admin")


def test_login_sets_http_only_cookie(sample_client):
    response = sample_client.post(
        "/api/auth/login", json={"email": "john@example.com", "password": "password123"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["user"]["role"] == "user"
    assert "password" not in body["user"]
    assert base64.b64decode(body["token"]).decode().startswith("2:")

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("auth-token=")
    assert body["token"] in set_cookie
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()
    assert "Max-Age=604800" in set_cookie


def test_login_missing_credentials(sample_client):
    response = sample_client.post("/api/auth/login", json={"email": "john@example.com"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email and password are required"}


def test_login_wrong_password(sample_client):
    response = sample_client.post(
        "/api/auth/login", json={"email": "john@example.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid email or password"


def test_me_requires_cookie(sample_client):
    response = sample_client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"] == "No authentication token found"


def test_me_rejects_unknown_token(sample_client):
    response = sample_client.get("/api/auth/me", headers={"Cookie": "auth-token=garbage"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"


def test_me_returns_user(sample_client, admin_token):
    response = sample_client.get("/api/auth/me", headers={"Cookie": f"auth-token={admin_token}"})

    body = response.json()
    assert body["data"]["email"] == "admin@example.com"
    assert body["message"] == "User profile retrieved successfully"


def test_logout_clears_cookie(sample_client):
    response = sample_client.post("/api/auth/logout")

    assert response.json()["message"] == "Logout successful"
    assert "Max-Age=0" in response.headers["set-cookie"]
