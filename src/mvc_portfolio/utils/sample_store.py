"""Read-only managers over the hardcoded sample data.

These mirror the query interface of UserManager and PostManager so that
controllers and pages work unchanged when no database is configured. Every
write raises DatabaseNotConfiguredError.
"""

from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from mvc_portfolio.core.exceptions import DatabaseNotConfiguredError
from mvc_portfolio.schemas.common import PaginatedResult
from mvc_portfolio.schemas.post import Post, PostStatistics
from mvc_portfolio.schemas.user import User, UserStatistics
from mvc_portfolio.utils.post_manager import compute_post_statistics
from mvc_portfolio.utils.sample_data import SAMPLE_POSTS, SAMPLE_USERS
from mvc_portfolio.utils.user_manager import compute_user_statistics

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def paginate_items(items: List[Any], page: int, limit: int) -> PaginatedResult:
    """Slice one page out of an in-memory list."""
    start = (page - 1) * limit
    return PaginatedResult.build(items[start:start + limit], total=len(items), page=page, limit=limit)


class SampleManager(Generic[SchemaT]):
    """In-memory counterpart of BaseManager."""

    entity_plural: str = "entities"
    search_fields: Tuple[str, ...] = ()
    is_sample = True

    def __init__(self, items: List[SchemaT]):
        self.items = list(items)

    def find_by_id(self, entity_id: str) -> Optional[SchemaT]:
        return next((item for item in self.items if item.id == entity_id), None)

    def find_all(self) -> List[SchemaT]:
        return list(self.items)

    def find_with_pagination(self, page: int = 1, limit: int = 10) -> PaginatedResult:
        return paginate_items(self.items, page, limit)

    def search(self, query: str) -> List[SchemaT]:
        term = query.lower()
        return [
            item
            for item in self.items
            if any(term in str(getattr(item, field) or "").lower() for field in self.search_fields)
        ]

    def _reject(self, action: str):
        raise DatabaseNotConfiguredError(action, self.entity_plural)

    def create(self, data: Dict[str, Any]) -> SchemaT:
        self._reject("create")

    def update(self, entity_id: str, data: Dict[str, Any]) -> Optional[SchemaT]:
        self._reject("update")

    def delete(self, entity_id: str) -> bool:
        self._reject("delete")


class SampleUserManager(SampleManager[User]):
    entity_plural = "users"
    search_fields = ("name", "email")

    def __init__(self, items: Optional[List[User]] = None):
        super().__init__(SAMPLE_USERS if items is None else items)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self.items if user.email == email), None)

    def find_by_role(self, role: str) -> List[User]:
        return [user for user in self.items if user.role == role]

    def find_active_users(self) -> List[User]:
        return [user for user in self.items if user.is_active]

    def create_user(self, data: Dict[str, Any]) -> User:
        self._reject("create")

    def update_user(self, user_id: str, data: Dict[str, Any]) -> Optional[User]:
        self._reject("update")

    def activate_user(self, user_id: str) -> Optional[User]:
        self._reject("update")

    def deactivate_user(self, user_id: str) -> Optional[User]:
        self._reject("update")

    def get_statistics(self) -> UserStatistics:
        return compute_user_statistics(self.items)


class SamplePostManager(SampleManager[Post]):
    entity_plural = "posts"
    search_fields = ("title", "content")

    def __init__(self, items: Optional[List[Post]] = None):
        super().__init__(SAMPLE_POSTS if items is None else items)

    def find_by_author(self, author_id: str) -> List[Post]:
        return [post for post in self.items if post.author_id == author_id]

    def find_published(self) -> List[Post]:
        return [post for post in self.items if post.published]

    def find_by_tag(self, tag: str) -> List[Post]:
        return self.find_by_tags([tag])

    def find_by_tags(self, tags: List[str]) -> List[Post]:
        wanted = set(tags)
        return [post for post in self.items if wanted.intersection(post.tags)]

    def create_post(self, data: Dict[str, Any], author_id: str) -> Post:
        self._reject("create")

    def update_post(self, post_id: str, data: Dict[str, Any]) -> Optional[Post]:
        self._reject("update")

    def publish_post(self, post_id: str) -> Optional[Post]:
        self._reject("update")

    def unpublish_post(self, post_id: str) -> Optional[Post]:
        self._reject("update")

    def search_posts(self, query: str) -> List[Post]:
        return self.search(query)

    def get_statistics(self) -> PostStatistics:
        return compute_post_statistics(self.items)
