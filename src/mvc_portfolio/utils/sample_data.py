"""Hardcoded sample data.

Served by the API when no database is configured, and inserted by
``mvc-portfolio test-connection`` into an empty database.
"""

from datetime import datetime, timedelta
from typing import List

import pytz

from mvc_portfolio.schemas.post import Post
from mvc_portfolio.schemas.user import User

_NOW = datetime.now(pytz.utc)


def _ago(hours: int) -> datetime:
    return _NOW - timedelta(hours=hours)


SAMPLE_USERS: List[User] = [
    User(id="1", name="John Doe", email="john@example.com", role="admin",
         is_active=True, created_at=_ago(1), updated_at=_ago(1)),
    User(id="2", name="Jane Smith", email="jane@example.com", role="user",
         is_active=True, created_at=_ago(2), updated_at=_ago(2)),
    User(id="3", name="Bob Johnson", email="bob@example.com", role="moderator",
         is_active=True, created_at=_ago(3), updated_at=_ago(3)),
    User(id="4", name="Alice Brown", email="alice@example.com", role="user",
         is_active=False, created_at=_ago(4), updated_at=_ago(4)),
]

SAMPLE_POSTS: List[Post] = [
    Post(
        id="1",
        title="Welcome to MVC Architecture",
        content=(
            "This is a comprehensive guide to understanding Model-View-Controller "
            "pattern in modern web development."
        ),
        author_id="1",
        published=True,
        tags=["architecture", "mvc", "web-development"],
        created_at=_ago(1),
        updated_at=_ago(1),
    ),
    Post(
        id="2",
        title="Getting Started with Hosted Postgres",
        content=(
            "Learn how to connect a FastAPI application to a hosted Postgres "
            "database for a complete backend solution."
        ),
        author_id="2",
        published=True,
        tags=["postgres", "fastapi", "database"],
        created_at=_ago(2),
        updated_at=_ago(2),
    ),
    Post(
        id="3",
        title="Python Typing Best Practices",
        content="Essential type hinting patterns and practices for building scalable applications.",
        author_id="3",
        published=False,
        tags=["python", "programming", "best-practices"],
        created_at=_ago(3),
        updated_at=_ago(3),
    ),
    Post(
        id="4",
        title="Dependency Injection Deep Dive",
        content="Understanding FastAPI dependencies and their advanced usage patterns.",
        author_id="4",
        published=True,
        tags=["fastapi", "dependencies", "backend"],
        created_at=_ago(4),
        updated_at=_ago(4),
    ),
    Post(
        id="5",
        title="Building Scalable Web Applications",
        content=(
            "Learn the principles and patterns for building web applications that "
            "can grow with your business needs."
        ),
        author_id="1",
        published=True,
        tags=["scalability", "architecture", "web-development"],
        created_at=_ago(5),
        updated_at=_ago(5),
    ),
    Post(
        id="6",
        title="Modern CSS Techniques",
        content=(
            "Explore the latest CSS features and techniques for creating beautiful, "
            "responsive designs."
        ),
        author_id="2",
        published=True,
        tags=["css", "design", "frontend"],
        created_at=_ago(6),
        updated_at=_ago(6),
    ),
]
