import pytest

from mvc_portfolio import config
from mvc_portfolio.core.database import get_db, is_database_configured, make_database_url


@pytest.mark.parametrize(
    "url, expected",
    [
        (
            "postgres://u:p@db.example.com:5432/app",
            "postgresql+psycopg://u:p@db.example.com:5432/app?sslmode=require",
        ),
        (
            "postgresql://u:p@db.example.com/app?application_name=x",
            "postgresql+psycopg://u:p@db.example.com/app?application_name=x&sslmode=require",
        ),
        ("postgresql://u:p@localhost/app", "postgresql+psycopg://u:p@localhost/app"),
        ("sqlite:///portfolio.db", "sqlite:///portfolio.db"),
    ],
)
def test_make_database_url(url, expected):
    assert make_database_url(url) == expected


@pytest.mark.parametrize(
    "url, configured",
    [("", False), ("postgresql://placeholder", False), ("sqlite:///x.db", True)],
)
def test_is_database_configured(monkeypatch, url, configured):
    monkeypatch.setattr(config, "DATABASE_URL", url)

    assert is_database_configured() is configured


def test_get_db_yields_none_without_database(monkeypatch):
    monkeypatch.setattr(config, "DATABASE_URL", "")

    assert list(get_db()) == [None]
