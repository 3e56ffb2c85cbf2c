"""Post controller handling post-related operations."""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from mvc_portfolio.controllers.base_controller import BaseController
from mvc_portfolio.core.exceptions import NotFoundError, ValidationError


class PostController(BaseController):
    """Request handlers for /api/posts."""

    def _require(self, post: Any, post_id: str) -> Any:
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    def get_posts(self, page: Optional[str] = None, limit: Optional[str] = None) -> JSONResponse:
        page_number, page_size = self.get_pagination_params(page, limit)
        return self.handle(
            lambda: self.manager.find_with_pagination(page_number, page_size),
            "Failed to fetch posts",
        )

    def get_post_by_id(self, post_id: str) -> JSONResponse:
        return self.handle(
            lambda: self._require(self.manager.find_by_id(post_id), post_id),
            "Failed to fetch post",
        )

    def create_post(self, data: Dict[str, Any], current_user_id: Optional[str] = None) -> JSONResponse:
        """Create a post.

        The author is taken from the body, falling back to the logged-in user.
        """

        def operation():
            author_id = data.get("author_id") or current_user_id
            if not author_id:
                raise ValidationError("Author ID is required")
            validation_error = self.validate_required(data, ["title", "content"])
            if validation_error:
                raise ValidationError(validation_error)
            return self.manager.create_post(data, author_id)

        return self.handle(operation, "Failed to create post", status_code=201)

    def update_post(self, post_id: str, data: Dict[str, Any]) -> JSONResponse:
        def operation():
            self._require(self.manager.find_by_id(post_id), post_id)
            return self._require(self.manager.update_post(post_id, data), post_id)

        return self.handle(operation, "Failed to update post")

    def delete_post(self, post_id: str) -> JSONResponse:
        def operation():
            if not self.manager.delete(post_id):
                raise NotFoundError("Post", post_id)
            return {"message": "Post deleted successfully"}

        return self.handle(operation, "Failed to delete post")

    def get_posts_by_author(self, author_id: str) -> JSONResponse:
        return self.handle(
            lambda: self.manager.find_by_author(author_id), "Failed to fetch posts by author"
        )

    def get_published_posts(self) -> JSONResponse:
        return self.handle(self.manager.find_published, "Failed to fetch published posts")

    def get_posts_by_tag(self, tag: str) -> JSONResponse:
        return self.handle(lambda: self.manager.find_by_tag(tag), "Failed to fetch posts by tag")

    def search_posts(self, query: Optional[str]) -> JSONResponse:
        def operation():
            if not query or not query.strip():
                raise ValidationError("Search query is required")
            return self.manager.search_posts(query.strip())

        return self.handle(operation, "Failed to search posts")

    def publish_post(self, post_id: str) -> JSONResponse:
        return self.handle(
            lambda: self._require(self.manager.publish_post(post_id), post_id),
            "Failed to publish post",
        )

    def unpublish_post(self, post_id: str) -> JSONResponse:
        return self.handle(
            lambda: self._require(self.manager.unpublish_post(post_id), post_id),
            "Failed to unpublish post",
        )

    def get_post_statistics(self) -> JSONResponse:
        return self.handle(self.manager.get_statistics, "Failed to fetch post statistics")
