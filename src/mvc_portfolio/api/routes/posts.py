"""Post routes.

This module handles HTTP endpoints for blog post CRUD operations.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mvc_portfolio.core.dependencies import OptionalUserDep, PostControllerDep
from mvc_portfolio.schemas.common import ApiResponse, PaginatedResult
from mvc_portfolio.schemas.post import CreatePostRequest, Post, PostStatistics, UpdatePostRequest

router = APIRouter(prefix="/api/posts", tags=["Posts"])


@router.get("", response_model=ApiResponse[PaginatedResult[Post]], summary="Get all posts")
def list_posts(
    controller: PostControllerDep,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> JSONResponse:
    """Retrieve a paginated list of posts, newest first.

    Args:
        controller: Injected PostController.
        page: Page number (default 1).
        limit: Posts per page, 1-100 (default 10).
    """
    return controller.get_posts(page, limit)


@router.post(
    "",
    response_model=ApiResponse[Post],
    status_code=201,
    summary="Create a new post",
)
def create_post(
    req: CreatePostRequest,
    controller: PostControllerDep,
    current_user: OptionalUserDep,
) -> JSONResponse:
    """Create a post.

    ``authorId`` defaults to the logged-in user when the body omits it.
    """
    current_user_id = current_user.id if current_user else None
    return controller.create_post(req.model_dump(), current_user_id)


@router.get("/search", response_model=ApiResponse[List[Post]], summary="Search posts")
def search_posts(controller: PostControllerDep, q: Optional[str] = None) -> JSONResponse:
    """Search posts by title or content (case-insensitive substring)."""
    return controller.search_posts(q)


@router.get("/published", response_model=ApiResponse[List[Post]], summary="Get published posts")
def list_published_posts(controller: PostControllerDep) -> JSONResponse:
    return controller.get_published_posts()


@router.get(
    "/statistics",
    response_model=ApiResponse[PostStatistics],
    summary="Get post statistics",
)
def get_post_statistics(controller: PostControllerDep) -> JSONResponse:
    return controller.get_post_statistics()


@router.get(
    "/author/{author_id}",
    response_model=ApiResponse[List[Post]],
    summary="Get posts by author",
)
def list_posts_by_author(author_id: str, controller: PostControllerDep) -> JSONResponse:
    return controller.get_posts_by_author(author_id)


@router.get("/tag/{tag}", response_model=ApiResponse[List[Post]], summary="Get posts by tag")
def list_posts_by_tag(tag: str, controller: PostControllerDep) -> JSONResponse:
    return controller.get_posts_by_tag(tag)


@router.get("/{post_id}", response_model=ApiResponse[Post], summary="Get post by ID")
def get_post(post_id: str, controller: PostControllerDep) -> JSONResponse:
    return controller.get_post_by_id(post_id)


@router.put("/{post_id}", response_model=ApiResponse[Post], summary="Update post")
def update_post(post_id: str, req: UpdatePostRequest, controller: PostControllerDep) -> JSONResponse:
    """Update the supplied fields of a post."""
    return controller.update_post(post_id, req.model_dump(exclude_unset=True))


@router.delete("/{post_id}", response_model=ApiResponse[Dict[str, Any]], summary="Delete post")
def delete_post(post_id: str, controller: PostControllerDep) -> JSONResponse:
    return controller.delete_post(post_id)


@router.patch("/{post_id}/publish", response_model=ApiResponse[Post], summary="Publish post")
def publish_post(post_id: str, controller: PostControllerDep) -> JSONResponse:
    return controller.publish_post(post_id)


@router.patch("/{post_id}/unpublish", response_model=ApiResponse[Post], summary="Unpublish post")
def unpublish_post(post_id: str, controller: PostControllerDep) -> JSONResponse:
    return controller.unpublish_post(post_id)
