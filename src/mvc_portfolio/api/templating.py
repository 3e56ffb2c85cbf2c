"""Jinja2 environment shared by the page routes and the error handlers."""

from datetime import datetime
from typing import Any, Dict, Optional

import pytz
from fastapi import Request
from fastapi.templating import Jinja2Templates

from mvc_portfolio import config
from mvc_portfolio.utils.auth import get_user_from_token
from mvc_portfolio.utils.date_utils import format_date, format_datetime, format_relative_time
from mvc_portfolio.utils.url import get_base_url

templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["format_datetime"] = format_datetime
templates.env.filters["relative_time"] = format_relative_time

NAV_LINKS = [
    ("/", "Home"),
    ("/portfolio", "Portfolio"),
    ("/posts", "Blog"),
    ("/users", "Users"),
    ("/contact", "Contact"),
    ("/api-docs", "API Docs"),
]


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render ``name`` with the layout variables every page needs."""
    page_context = {
        "app_name": config.APP_NAME,
        "nav_links": NAV_LINKS,
        "current_path": request.url.path,
        "current_user": get_user_from_token(request.cookies.get(config.AUTH_COOKIE_NAME)),
        "base_url": get_base_url(request.headers),
        "year": datetime.now(pytz.utc).year,
        "notice": request.query_params.get("notice"),
    }
    page_context.update(context or {})
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)
