"""Server-rendered page routes.

Pages read through the same managers as the REST API, so they show sample
data when no database is configured. Writes made from forms report
validation failures inline and redirect on success.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Form, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, RedirectResponse

from mvc_portfolio import config
from mvc_portfolio.api.routes.auth import clear_auth_cookie, set_auth_cookie
from mvc_portfolio.api.templating import render
from mvc_portfolio.core.dependencies import OptionalUserDep, PostManagerDep, UserManagerDep
from mvc_portfolio.core.exceptions import (
    AuthenticationError,
    DatabaseNotConfiguredError,
    PortfolioError,
    ValidationError,
)
from mvc_portfolio.schemas.user import User
from mvc_portfolio.utils.auth import authenticate, create_token, has_role
from mvc_portfolio.utils.blog import filter_posts, tag_cloud
from mvc_portfolio.utils.portfolio_content import EXPERIENCES, PROJECTS, skills_by_category
from mvc_portfolio.utils.sample_store import paginate_items
from mvc_portfolio.utils.user_manager import is_valid_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"], include_in_schema=False)


def _redirect(url: str, notice: Optional[str] = None) -> RedirectResponse:
    if notice:
        url = f"{url}?notice={quote(notice)}"
    return RedirectResponse(url, status_code=303)


def _page_number(value: Optional[str]) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return 1


def _guard(user: Optional[User], required_role: str) -> Optional[RedirectResponse]:
    """Redirect anonymous users to /login and under-privileged ones to /."""
    if user is None:
        return _redirect("/login")
    if not has_role(user, required_role):
        return _redirect("/")
    return None


def _split_tags(raw: Optional[str]) -> List[str]:
    return [tag.strip() for tag in (raw or "").split(",") if tag.strip()]


# --- Public pages ---


@router.get("/", response_class=HTMLResponse)
def home(request: Request, posts: PostManagerDep):
    latest = posts.find_published()[: config.HOME_POST_LIMIT]
    return render(request, "home.html", {"posts": latest})


@router.get("/portfolio", response_class=HTMLResponse)
def portfolio(request: Request):
    return render(
        request,
        "portfolio.html",
        {
            "skills": skills_by_category(),
            "projects": PROJECTS,
            "experiences": EXPERIENCES,
        },
    )


@router.get("/contact", response_class=HTMLResponse)
def contact(request: Request):
    return render(request, "contact.html", {"form": {}})


@router.post("/contact", response_class=HTMLResponse)
def submit_contact(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    message: str = Form(""),
):
    """Validate the contact form and acknowledge it."""
    form = {"name": name, "email": email, "message": message}
    if not name.strip():
        error = "Name is required"
    elif not is_valid_email(email.strip()):
        error = "Please enter a valid email address"
    else:
        logger.info("Contact request from %s", email.strip())
        return render(
            request,
            "contact.html",
            {"form": {}, "success": f"Thank you, {name.strip()}! Your message has been received."},
        )
    return render(request, "contact.html", {"form": form, "error": error}, status_code=400)


@router.get("/posts", response_class=HTMLResponse)
def blog(
    request: Request,
    posts: PostManagerDep,
    tag: Optional[str] = None,
    q: Optional[str] = None,
    page: Optional[str] = None,
):
    """Published posts with tag filter, search and pagination."""
    published = posts.find_published()
    matching = filter_posts(published, tag=tag, query=q)
    result = paginate_items(matching, _page_number(page), config.BLOG_PAGE_SIZE)
    return render(
        request,
        "posts.html",
        {
            "result": result,
            "featured": published[: config.FEATURED_POST_LIMIT],
            "tags": tag_cloud(published),
            "active_tag": tag,
            "query": q or "",
        },
    )


@router.get("/posts/{post_id}", response_class=HTMLResponse)
def post_detail(request: Request, post_id: str, posts: PostManagerDep, current_user: OptionalUserDep):
    post = posts.find_by_id(post_id)
    can_preview = current_user is not None and has_role(current_user, "admin")
    if post is None or (not post.published and not can_preview):
        return render(request, "404.html", {"message": "Post not found"}, status_code=404)
    return render(request, "post_detail.html", {"post": post})


# --- Users ---


@router.get("/users", response_class=HTMLResponse)
def users_page(request: Request, users: UserManagerDep, page: Optional[str] = None):
    result = users.find_with_pagination(_page_number(page), config.DEFAULT_PAGE_SIZE)
    return render(request, "users.html", {"result": result, "form": {}})


@router.post("/users", response_class=HTMLResponse)
def create_user_from_form(
    request: Request,
    users: UserManagerDep,
    name: str = Form(""),
    email: str = Form(""),
    role: str = Form("user"),
):
    try:
        user = users.create_user({"name": name.strip(), "email": email.strip(), "role": role})
    except (ValidationError, DatabaseNotConfiguredError) as e:
        result = users.find_with_pagination(1, config.DEFAULT_PAGE_SIZE)
        form = {"name": name, "email": email, "role": role}
        return render(
            request, "users.html", {"result": result, "form": form, "error": str(e)}, status_code=400
        )
    return _redirect("/users", f"User {user.name} created")


@router.post("/users/{user_id}/delete")
def delete_user_from_form(user_id: str, users: UserManagerDep):
    try:
        deleted = users.delete(user_id)
    except DatabaseNotConfiguredError as e:
        return _redirect("/users", str(e))
    return _redirect("/users", "User deleted" if deleted else "User not found")


# --- Authentication ---


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request, current_user: OptionalUserDep):
    if current_user is not None:
        return _redirect("/")
    return render(request, "login.html", {"email": ""})


@router.post("/login", response_class=HTMLResponse)
def login_from_form(request: Request, email: str = Form(""), password: str = Form("")):
    try:
        user = authenticate(email.strip(), password)
    except (ValueError, AuthenticationError) as e:
        status_code = 400 if isinstance(e, ValueError) else 401
        return render(
            request, "login.html", {"email": email, "error": str(e)}, status_code=status_code
        )

    response = _redirect("/admin" if has_role(user, "admin") else "/")
    set_auth_cookie(response, create_token(user.id))
    return response


@router.api_route("/logout", methods=["GET", "POST"])
def logout_from_form():
    response = _redirect("/")
    clear_auth_cookie(response)
    return response


# --- Admin ---


@router.get("/admin", response_class=HTMLResponse)
def admin_dashboard(
    request: Request,
    current_user: OptionalUserDep,
    users: UserManagerDep,
    posts: PostManagerDep,
):
    """Statistics and post management, admins only."""
    redirect = _guard(current_user, "admin")
    if redirect:
        return redirect
    return render(
        request,
        "admin.html",
        {
            "user_stats": users.get_statistics(),
            "post_stats": posts.get_statistics(),
            "posts": posts.find_all(),
            "is_sample": getattr(posts, "is_sample", False),
        },
    )


@router.post("/admin/posts")
def admin_create_post(
    current_user: OptionalUserDep,
    posts: PostManagerDep,
    title: str = Form(""),
    content: str = Form(""),
    tags: str = Form(""),
    published: bool = Form(False),
):
    redirect = _guard(current_user, "admin")
    if redirect:
        return redirect
    data = {"title": title, "content": content, "tags": _split_tags(tags), "published": published}
    try:
        post = posts.create_post(data, current_user.id)
    except (ValidationError, DatabaseNotConfiguredError) as e:
        return _redirect("/admin", str(e))
    return _redirect("/admin", f"Post '{post.title}' created")


@router.post("/admin/posts/{post_id}/{action}")
def admin_post_action(post_id: str, action: str, current_user: OptionalUserDep, posts: PostManagerDep):
    """Publish, unpublish or delete a post from the dashboard."""
    redirect = _guard(current_user, "admin")
    if redirect:
        return redirect

    handlers = {
        "publish": posts.publish_post,
        "unpublish": posts.unpublish_post,
        "delete": posts.delete,
    }
    handler = handlers.get(action)
    if handler is None:
        return _redirect("/admin", f"Unknown action: {action}")
    try:
        outcome = handler(post_id)
    except PortfolioError as e:
        return _redirect("/admin", str(e))
    if not outcome:
        return _redirect("/admin", "Post not found")
    return _redirect("/admin", f"Post {action}ed" if action != "delete" else "Post deleted")


# --- API documentation ---


@router.get("/api-docs", response_class=HTMLResponse)
def api_docs(request: Request):
    """Interactive Swagger UI over the generated OpenAPI document."""
    return get_swagger_ui_html(
        openapi_url=request.app.openapi_url,
        title=f"{config.APP_NAME} - API Documentation",
    )
