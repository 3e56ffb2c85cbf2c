def _create_post(client, **overrides):
    body = {"title": "Hello", "content": "First post", "authorId": "1", "tags": ["intro"]}
    body.update(overrides)
    return client.post("/api/posts", json=body)


def test_create_post(client):
    response = _create_post(client)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["title"] == "Hello"
    assert data["authorId"] == "1"
    assert data["published"] is False
    assert data["tags"] == ["intro"]


def test_create_post_requires_author(client):
    response = client.post("/api/posts", json={"title": "Hello", "content": "x"})

    assert response.status_code == 400
    assert response.json()["error"] == "Author ID is required"


def test_create_post_defaults_author_to_logged_in_user(client, user_token):
    response = client.post(
        "/api/posts",
        json={"title": "Mine", "content": "x"},
        headers={"Cookie": f"auth-token={user_token}"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["authorId"] == "2"


def test_create_post_requires_title(client):
    response = _create_post(client, title="")

    assert response.status_code == 400
    assert response.json()["error"] == "title is required"


def test_create_post_rejects_non_list_tags(client):
    response = _create_post(client, tags="python")

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_get_update_delete_post(client):
    post_id = _create_post(client).json()["data"]["id"]

    assert client.get(f"/api/posts/{post_id}").json()["data"]["id"] == post_id

    updated = client.put(f"/api/posts/{post_id}", json={"title": "Renamed"}).json()["data"]
    assert updated["title"] == "Renamed"
    assert updated["content"] == "First post"

    assert client.delete(f"/api/posts/{post_id}").json()["data"] == {
        "message": "Post deleted successfully"
    }
    response = client.get(f"/api/posts/{post_id}")
    assert response.status_code == 404
    assert response.json()["error"] == "Post not found"


def test_update_post_rejects_empty_content(client):
    post_id = _create_post(client).json()["data"]["id"]

    response = client.put(f"/api/posts/{post_id}", json={"content": ""})

    assert response.status_code == 400
    assert response.json()["error"] == "Content cannot be empty"


def test_publish_flow(client):
    post_id = _create_post(client).json()["data"]["id"]

    assert client.get("/api/posts/published").json()["data"] == []

    published = client.patch(f"/api/posts/{post_id}/publish").json()["data"]
    assert published["published"] is True
    assert [p["id"] for p in client.get("/api/posts/published").json()["data"]] == [post_id]

    client.patch(f"/api/posts/{post_id}/unpublish")
    assert client.get("/api/posts/published").json()["data"] == []


def test_finders(client):
    first = _create_post(client, tags=["python"], authorId="7").json()["data"]["id"]
    _create_post(client, title="CSS grid", content="Layouts", tags=["css"])

    by_tag = client.get("/api/posts/tag/python").json()["data"]
    by_author = client.get("/api/posts/author/7").json()["data"]
    found = client.get("/api/posts/search", params={"q": "grid"}).json()["data"]

    assert [p["id"] for p in by_tag] == [first]
    assert [p["id"] for p in by_author] == [first]
    assert [p["title"] for p in found] == ["CSS grid"]


def test_post_statistics(client):
    _create_post(client, tags=["a", "b"], published=True)
    _create_post(client, tags=["a"])

    stats = client.get("/api/posts/statistics").json()["data"]

    assert stats == {"total": 2, "published": 1, "unpublished": 1, "byTag": {"a": 2, "b": 1}}


def test_list_posts(client):
    for index in range(3):
        _create_post(client, title=f"Post {index}")

    body = client.get("/api/posts", params={"limit": "2"}).json()

    assert body["data"]["total"] == 3
    assert body["data"]["totalPages"] == 2
    assert len(body["data"]["data"]) == 2


def test_unknown_api_route_is_enveloped(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_cors_preflight(client):
    response = client.options(
        "/api/posts",
        headers={
            "Origin": "https://example.org",
            "Access-Control-Request-Method": "PATCH",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "PATCH" in response.headers["access-control-allow-methods"]
    assert response.headers["access-control-max-age"] == "86400"


def test_health(client):
    body = client.get("/api/health").json()

    assert body["success"] is True
    assert body["data"]["status"] == "ok"
