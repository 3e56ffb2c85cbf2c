"""Client for /api/posts."""

from typing import Any, Dict
from urllib.parse import quote

from mvc_portfolio.services.base_service import BaseService


class PostService(BaseService):
    resource = "posts"

    def get_posts(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self.get(params={"page": page, "limit": limit})

    def get_post_by_id(self, post_id: str) -> Dict[str, Any]:
        return self.get(f"/{quote(post_id, safe='')}")

    def create_post(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a post from ``{"title", "content", "authorId", "published", "tags"}``."""
        return self.post(json=data)

    def update_post(self, post_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.put(f"/{quote(post_id, safe='')}", json=data)

    def delete_post(self, post_id: str) -> Dict[str, Any]:
        return self.delete(f"/{quote(post_id, safe='')}")

    def get_posts_by_author(self, author_id: str) -> Dict[str, Any]:
        return self.get(f"/author/{quote(author_id, safe='')}")

    def get_published_posts(self) -> Dict[str, Any]:
        return self.get("/published")

    def get_posts_by_tag(self, tag: str) -> Dict[str, Any]:
        return self.get(f"/tag/{quote(tag, safe='')}")

    def search_posts(self, query: str) -> Dict[str, Any]:
        return self.get("/search", params={"q": query})

    def publish_post(self, post_id: str) -> Dict[str, Any]:
        return self.patch(f"/{quote(post_id, safe='')}/publish")

    def unpublish_post(self, post_id: str) -> Dict[str, Any]:
        return self.patch(f"/{quote(post_id, safe='')}/unpublish")

    def get_post_statistics(self) -> Dict[str, Any]:
        return self.get("/statistics")
