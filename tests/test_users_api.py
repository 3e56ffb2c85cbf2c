from mvc_portfolio.models import Base


def _create_user(client, **overrides):
    body = {"name": "Ada Lovelace", "email": "ada@example.com", "role": "user"}
    body.update(overrides)
    return client.post("/api/users", json=body)


def test_create_user_returns_201_envelope_in_camel_case(client):
    response = _create_user(client)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["email"] == "ada@example.com"
    assert body["data"]["isActive"] is True
    assert "createdAt" in body["data"]
    assert "message" not in body


def test_create_user_missing_field(client):
    response = client.post("/api/users", json={"email": "ada@example.com", "role": "user"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "name is required"}


def test_create_user_duplicate_email(client):
    _create_user(client)

    response = _create_user(client, name="Other")

    assert response.status_code == 400
    assert response.json()["error"] == "User with this email already exists"


def test_create_user_invalid_email(client):
    response = _create_user(client, email="nope")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid email format"


def test_malformed_body_is_a_400_envelope(client):
    response = _create_user(client, role="superuser")

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "role" in response.json()["error"]


def test_get_user_not_found(client):
    response = client.get("/api/users/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "User not found"}


def test_list_users_paginates(client):
    for index in range(3):
        _create_user(client, name=f"User {index}", email=f"u{index}@example.com")

    body = client.get("/api/users", params={"page": "2", "limit": "2"}).json()

    assert body["success"] is True
    assert body["data"]["total"] == 3
    assert body["data"]["page"] == 2
    assert body["data"]["limit"] == 2
    assert body["data"]["totalPages"] == 2
    assert len(body["data"]["data"]) == 1


def test_list_users_with_bad_pagination_uses_defaults(client):
    body = client.get("/api/users", params={"page": "x", "limit": "1000"}).json()

    assert body["data"]["page"] == 1
    assert body["data"]["limit"] == 100


def test_update_user(client):
    user_id = _create_user(client).json()["data"]["id"]

    response = client.put(f"/api/users/{user_id}", json={"name": "Countess", "isActive": False})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Countess"
    assert data["isActive"] is False
    assert data["email"] == "ada@example.com"


def test_update_missing_user(client):
    response = client.put("/api/users/missing", json={"name": "X"})

    assert response.status_code == 404


def test_update_user_rejects_blank_email(client):
    user_id = _create_user(client).json()["data"]["id"]

    response = client.put(f"/api/users/{user_id}", json={"email": ""})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid email format"}
    assert client.get(f"/api/users/{user_id}").json()["data"]["email"] == "ada@example.com"


def test_update_user_rejects_email_of_another_user(client):
    _create_user(client)
    other_id = _create_user(client, name="Grace Hopper", email="grace@example.com").json()["data"]["id"]

    response = client.put(f"/api/users/{other_id}", json={"email": "ada@example.com"})

    assert response.status_code == 400
    assert response.json()["error"] == "User with this email already exists"


def test_update_missing_user_is_404_before_validation(client):
    _create_user(client)

    response = client.put("/api/users/missing", json={"email": "ada@example.com"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "User not found"}


def test_timestamps_are_utc_on_the_wire(client):
    data = _create_user(client).json()["data"]
    fetched = client.get(f"/api/users/{data['id']}").json()["data"]

    assert fetched["createdAt"].endswith("+00:00")
    assert fetched["updatedAt"].endswith("+00:00")


def test_database_failure_is_a_500_with_generic_message(client, engine):
    Base.metadata.drop_all(bind=engine)

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch users"}


def test_delete_user(client):
    user_id = _create_user(client).json()["data"]["id"]

    response = client.delete(f"/api/users/{user_id}")

    assert response.status_code == 200
    assert response.json()["data"] == {"message": "User deleted successfully"}
    assert client.get(f"/api/users/{user_id}").status_code == 404
    assert client.delete(f"/api/users/{user_id}").status_code == 404


def test_search_requires_query(client):
    response = client.get("/api/users/search")

    assert response.status_code == 400
    assert response.json()["error"] == "Search query is required"


def test_search_users(client):
    _create_user(client)
    _create_user(client, name="Grace Hopper", email="grace@example.com")

    body = client.get("/api/users/search", params={"q": "grace"}).json()

    assert [u["name"] for u in body["data"]] == ["Grace Hopper"]


def test_role_active_and_statistics(client):
    ada_id = _create_user(client).json()["data"]["id"]
    _create_user(client, name="Grace", email="grace@example.com", role="admin")

    client.patch(f"/api/users/{ada_id}/deactivate")

    admins = client.get("/api/users/role/admin").json()["data"]
    active = client.get("/api/users/active").json()["data"]
    stats = client.get("/api/users/statistics").json()["data"]

    assert [u["name"] for u in admins] == ["Grace"]
    assert [u["name"] for u in active] == ["Grace"]
    assert stats == {"total": 2, "active": 1, "inactive": 1, "byRole": {"user": 1, "admin": 1}}


def test_activate_user(client):
    user_id = _create_user(client).json()["data"]["id"]
    client.patch(f"/api/users/{user_id}/deactivate")

    response = client.patch(f"/api/users/{user_id}/activate")

    assert response.json()["data"]["isActive"] is True
    assert client.patch("/api/users/missing/activate").status_code == 404
