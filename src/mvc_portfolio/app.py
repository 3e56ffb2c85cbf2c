"""Main FastAPI application module.

This module initializes the FastAPI application, registers all route
handlers and translates errors into response envelopes or error pages.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from mvc_portfolio import config
from mvc_portfolio.api.routes import auth, pages, posts, users
from mvc_portfolio.api.templating import render
from mvc_portfolio.core.database import init_db, is_database_configured
from mvc_portfolio.core.exceptions import PortfolioError
from mvc_portfolio.core.logging_config import setup_logging
from mvc_portfolio.schemas.common import envelope

logger = logging.getLogger(__name__)

# Setup logging
setup_logging()

# Initialize FastAPI application
app = FastAPI(
    title=f"{config.APP_NAME} API",
    description=(
        "REST API for the portfolio and blog: users, posts and authentication. "
        "Every endpoint answers with a `{success, data, error, message}` envelope."
    ),
    version=config.APP_VERSION,
    contact={"name": "MVC Portfolio", "email": "admin@example.com"},
    license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=config.CORS_ALLOWED_METHODS,
    allow_headers=config.CORS_ALLOWED_HEADERS,
    max_age=config.CORS_MAX_AGE,
)

if config.STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=str(config.STATIC_DIR)), name="static")

# Register route handlers
app.include_router(users.router)
app.include_router(posts.router)
app.include_router(auth.router)
app.include_router(pages.router)


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api/")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if _is_api_request(request):
        return JSONResponse(
            envelope(False, error=str(exc.detail)),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
    template = "404.html" if exc.status_code == 404 else "error.html"
    return render(
        request, template, {"message": str(exc.detail)}, status_code=exc.status_code
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with the first validation problem."""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    error = f"{location}: {message}" if location else message
    if _is_api_request(request):
        return JSONResponse(envelope(False, error=error), status_code=400)
    return render(request, "error.html", {"message": error}, status_code=400)


@app.exception_handler(PortfolioError)
async def portfolio_exception_handler(request: Request, exc: PortfolioError):
    logger.error("Unhandled application error on %s: %s", request.url.path, exc)
    if _is_api_request(request):
        return JSONResponse(envelope(False, error=str(exc)), status_code=500)
    return render(request, "error.html", {"message": str(exc)}, status_code=500)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s", request.url.path)
    if _is_api_request(request):
        return JSONResponse(envelope(False, error="Internal server error"), status_code=500)
    return render(request, "error.html", {"message": "Internal server error"}, status_code=500)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create missing tables when a database is configured."""
    if not is_database_configured():
        logger.warning("DATABASE_URL not set, serving sample data")
        return
    try:
        init_db()
    except Exception as e:
        logger.error("Database initialization failed: %s", e)


@app.get("/api/health", summary="Health check", tags=["Health"])
def health() -> JSONResponse:
    """Health check endpoint.

    Returns:
        Envelope with status "ok" and whether a database is configured.
    """
    return JSONResponse(
        envelope(
            True,
            data={
                "status": "ok",
                "version": config.APP_VERSION,
                "database": "configured" if is_database_configured() else "sample",
            },
        )
    )


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("mvc_portfolio.app:app", host=config.API_HOST, port=config.API_PORT)
