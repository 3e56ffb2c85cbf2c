"""Post management utilities.

This module provides blog post persistence on top of BaseManager: lookups by
author, tag and publication state, validated create/update and statistics.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from mvc_portfolio.core.exceptions import ValidationError
from mvc_portfolio.models.post import PostModel
from mvc_portfolio.schemas.post import Post, PostStatistics
from mvc_portfolio.utils.base_manager import BaseManager

logger = logging.getLogger(__name__)


def compute_post_statistics(posts: Iterable[Any]) -> PostStatistics:
    """Count posts by publication state and tag.

    Args:
        posts: Objects exposing ``published`` and ``tags`` attributes.

    Returns:
        PostStatistics for the given posts.
    """
    total = 0
    published = 0
    by_tag: Counter = Counter()
    for post in posts:
        total += 1
        if post.published:
            published += 1
        by_tag.update(post.tags or [])
    return PostStatistics(
        total=total,
        published=published,
        unpublished=total - published,
        by_tag=dict(by_tag),
    )


def validate_post_fields(data: Dict[str, Any], partial: bool = False) -> None:
    """Check title, content and tags of a post payload.

    Args:
        data: Post fields keyed by attribute name.
        partial: True for updates, where absent fields are not checked.

    Raises:
        ValidationError: On the first invalid field.
    """
    if partial:
        if "title" in data and not (data["title"] or "").strip():
            raise ValidationError("Title cannot be empty")
        if "content" in data and not (data["content"] or "").strip():
            raise ValidationError("Content cannot be empty")
        if data.get("tags") is not None and not isinstance(data["tags"], list):
            raise ValidationError("Tags must be an array")
        return

    if not (data.get("title") or "").strip():
        raise ValidationError("Title is required")
    if not (data.get("content") or "").strip():
        raise ValidationError("Content is required")
    if not isinstance(data.get("tags", []), list):
        raise ValidationError("Tags must be an array")


class PostManager(BaseManager[Post]):
    """Manages blog post persistence using SQLAlchemy."""

    model_class = PostModel
    schema_class = Post
    entity_name = "post"
    entity_plural = "posts"
    search_fields = ("title", "content")

    def find_by_author(self, author_id: str) -> List[Post]:
        """List posts written by ``author_id``, newest first."""
        with self.database_errors("Failed to fetch posts by author"):
            models = self._newest_first(
                self._query().filter(PostModel.author_id == author_id)
            ).all()
        return [self.to_schema(m) for m in models]

    def find_published(self) -> List[Post]:
        """List published posts, newest first."""
        with self.database_errors("Failed to fetch published posts"):
            models = self._newest_first(
                self._query().filter(PostModel.published.is_(True))
            ).all()
        return [self.to_schema(m) for m in models]

    def find_by_tag(self, tag: str) -> List[Post]:
        """List posts carrying ``tag``, newest first."""
        return self.find_by_tags([tag])

    def find_by_tags(self, tags: List[str]) -> List[Post]:
        """List posts sharing at least one tag with ``tags``, newest first."""
        wanted = set(tags)
        # JSON containment differs between SQLite and Postgres, so tags are
        # matched after loading.
        with self.database_errors("Failed to fetch posts by tag"):
            models = self._newest_first(self._query()).all()
        return [self.to_schema(m) for m in models if wanted.intersection(m.tags or [])]

    def create_post(self, data: Dict[str, Any], author_id: str) -> Post:
        """Create a post after validation.

        Args:
            data: Mapping with ``title``, ``content``, ``published`` and ``tags``.
            author_id: ID of the author.

        Returns:
            Created Post object.

        Raises:
            ValidationError: If title or content is blank or tags is not a list.
        """
        validate_post_fields(data)
        post = self.create(
            {
                "title": data["title"],
                "content": data["content"],
                "published": bool(data.get("published", False)),
                "tags": list(data.get("tags") or []),
                "author_id": author_id,
            }
        )
        logger.info("Created post %s by author %s", post.id, author_id)
        return post

    def update_post(self, post_id: str, data: Dict[str, Any]) -> Optional[Post]:
        """Update a post after validating the changed fields.

        Returns:
            Updated Post object, or None if the post does not exist.
        """
        validate_post_fields(data, partial=True)
        changes = {key: value for key, value in data.items() if value is not None}
        return self.update(post_id, changes)

    def publish_post(self, post_id: str) -> Optional[Post]:
        return self.update(post_id, {"published": True})

    def unpublish_post(self, post_id: str) -> Optional[Post]:
        return self.update(post_id, {"published": False})

    def search_posts(self, query: str) -> List[Post]:
        return self.search(query)

    def get_statistics(self) -> PostStatistics:
        """Get post counts by publication state and tag."""
        with self.database_errors("Failed to fetch post statistics"):
            rows = self.db.query(PostModel.published, PostModel.tags).all()
        return compute_post_statistics(rows)
