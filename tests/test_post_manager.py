import pytest

from mvc_portfolio.core.exceptions import ValidationError
from mvc_portfolio.utils.post_manager import PostManager


@pytest.fixture
def manager(db_session):
    return PostManager(db_session)


def _create(manager, title="Hello", content="World", tags=None, published=False, author_id="1"):
    return manager.create_post(
        {"title": title, "content": content, "tags": tags or [], "published": published},
        author_id,
    )


def test_create_post_defaults(manager):
    post = _create(manager, tags=["python"])

    assert post.published is False
    assert post.tags == ["python"]
    assert post.author_id == "1"


@pytest.mark.parametrize(
    "data, message",
    [
        ({"title": "", "content": "x"}, "Title is required"),
        ({"title": "x", "content": "  "}, "Content is required"),
        ({"title": "x", "content": "y", "tags": "python"}, "Tags must be an array"),
    ],
)
def test_create_post_validation(manager, data, message):
    with pytest.raises(ValidationError, match=message):
        manager.create_post(data, "1")


def test_update_post_rejects_blank_title(manager):
    post = _create(manager)

    with pytest.raises(ValidationError, match="Title cannot be empty"):
        manager.update_post(post.id, {"title": ""})


def test_update_post_keeps_other_fields(manager):
    post = _create(manager, tags=["a"])

    updated = manager.update_post(post.id, {"content": "New content"})

    assert updated.content == "New content"
    assert updated.title == post.title
    assert updated.tags == ["a"]


def test_publish_and_unpublish(manager):
    post = _create(manager)

    assert manager.publish_post(post.id).published is True
    assert [p.id for p in manager.find_published()] == [post.id]
    assert manager.unpublish_post(post.id).published is False
    assert manager.find_published() == []
    assert manager.publish_post("missing") is None


def test_find_by_tag_and_author(manager):
    python_post = _create(manager, title="Typing", tags=["python", "typing"])
    _create(manager, title="CSS", tags=["css"], author_id="2")

    assert [p.id for p in manager.find_by_tag("python")] == [python_post.id]
    assert manager.find_by_tag("rust") == []
    assert [p.id for p in manager.find_by_author("1")] == [python_post.id]


def test_find_by_tags_matches_any(manager):
    _create(manager, title="One", tags=["a"])
    _create(manager, title="Two", tags=["b"])
    _create(manager, title="Three", tags=["c"])

    assert {p.title for p in manager.find_by_tags(["a", "b"])} == {"One", "Two"}


def test_search_posts_matches_title_or_content(manager):
    by_title = _create(manager, title="FastAPI tips", content="Short")
    by_content = _create(manager, title="Other", content="Uses fastapi daily")
    _create(manager, title="Unrelated", content="Nothing here")

    assert {p.id for p in manager.search_posts("fastapi")} == {by_title.id, by_content.id}


def test_statistics(manager):
    _create(manager, tags=["python", "web"], published=True)
    _create(manager, tags=["python"])

    stats = manager.get_statistics()

    assert stats.total == 2
    assert stats.published == 1
    assert stats.unpublished == 1
    assert stats.by_tag == {"python": 2, "web": 1}
