from datetime import timedelta

import pytest

from mvc_portfolio.core.exceptions import DuplicateEmailError, ValidationError
from mvc_portfolio.utils.user_manager import UserManager, is_valid_email


@pytest.fixture
def manager(db_session):
    return UserManager(db_session)


def _create(manager, name="Ada Lovelace", email="ada@example.com", role="user"):
    return manager.create_user({"name": name, "email": email, "role": role})


def test_create_user_is_active_with_generated_id(manager):
    user = _create(manager)

    assert user.id
    assert user.is_active is True
    assert user.created_at is not None
    assert manager.find_by_id(user.id).email == "ada@example.com"


def test_create_user_rejects_duplicate_email(manager):
    _create(manager)

    with pytest.raises(DuplicateEmailError, match="User with this email already exists"):
        _create(manager, name="Someone Else")


def test_create_user_rejects_invalid_email(manager):
    with pytest.raises(ValidationError, match="Invalid email format"):
        _create(manager, email="not-an-email")


def test_create_user_rejects_unknown_role(manager):
    with pytest.raises(ValidationError, match="Invalid role"):
        _create(manager, role="superuser")


def test_update_user_changes_only_given_fields(manager):
    user = _create(manager)

    updated = manager.update_user(user.id, {"name": "Countess Ada"})

    assert updated.name == "Countess Ada"
    assert updated.email == user.email
    assert updated.updated_at >= user.updated_at


def test_update_user_allows_keeping_own_email(manager):
    user = _create(manager)

    updated = manager.update_user(user.id, {"email": user.email, "role": "moderator"})

    assert updated.role == "moderator"


def test_update_user_rejects_email_of_another_user(manager):
    _create(manager)
    other = _create(manager, name="Grace Hopper", email="grace@example.com")

    with pytest.raises(DuplicateEmailError):
        manager.update_user(other.id, {"email": "ada@example.com"})


def test_update_user_rejects_blank_name(manager):
    user = _create(manager)

    with pytest.raises(ValidationError, match="Name cannot be empty"):
        manager.update_user(user.id, {"name": "  "})


def test_update_user_rejects_blank_email(manager):
    user = _create(manager)

    with pytest.raises(ValidationError, match="Invalid email format"):
        manager.update_user(user.id, {"email": ""})
    assert manager.find_by_id(user.id).email == "ada@example.com"


def test_update_translates_unique_index_violation(manager):
    _create(manager)
    other = _create(manager, name="Grace Hopper", email="grace@example.com")

    # update() skips the duplicate lookup, so only the unique index can object
    with pytest.raises(DuplicateEmailError, match="User with this email already exists"):
        manager.update(other.id, {"email": "ada@example.com"})
    assert manager.find_by_id(other.id).email == "grace@example.com"


def test_timestamps_read_back_in_utc(manager):
    user = manager.find_by_id(_create(manager).id)

    assert user.created_at.utcoffset() == timedelta(0)
    assert user.updated_at.utcoffset() == timedelta(0)


def test_update_missing_user_returns_none(manager):
    assert manager.update_user("missing", {"name": "Nobody"}) is None


def test_finders_and_activity_toggles(manager):
    ada = _create(manager)
    grace = _create(manager, name="Grace Hopper", email="grace@example.com", role="admin")

    assert [u.id for u in manager.find_by_role("admin")] == [grace.id]
    assert manager.find_by_email("ada@example.com").id == ada.id

    manager.deactivate_user(ada.id)
    assert [u.id for u in manager.find_active_users()] == [grace.id]

    manager.activate_user(ada.id)
    assert {u.id for u in manager.find_active_users()} == {ada.id, grace.id}


def test_search_is_case_insensitive_over_name_and_email(manager):
    ada = _create(manager)
    _create(manager, name="Grace Hopper", email="grace@navy.mil")

    assert [u.id for u in manager.search("LOVELACE")] == [ada.id]
    assert len(manager.search("@")) == 2


def test_pagination_reports_totals(manager):
    for index in range(5):
        _create(manager, name=f"User {index}", email=f"user{index}@example.com")

    page = manager.find_with_pagination(page=2, limit=2)

    assert page.total == 5
    assert page.total_pages == 3
    assert len(page.data) == 2


def test_statistics(manager):
    _create(manager)
    grace = _create(manager, name="Grace Hopper", email="grace@example.com", role="admin")
    manager.deactivate_user(grace.id)

    stats = manager.get_statistics()

    assert stats.total == 2
    assert stats.active == 1
    assert stats.inactive == 1
    assert stats.by_role == {"user": 1, "admin": 1}


def test_delete(manager):
    user = _create(manager)

    assert manager.delete(user.id) is True
    assert manager.delete(user.id) is False
    assert manager.find_by_id(user.id) is None


@pytest.mark.parametrize(
    "email, valid",
    [("a@b.co", True), ("a b@c.de", False), ("missing-at.com", False), ("a@b", False)],
)
def test_is_valid_email(email, valid):
    assert is_valid_email(email) is valid
