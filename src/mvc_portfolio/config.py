"""Configuration module for the MVC Portfolio service.

This module provides centralized configuration management, including directory
paths, API server settings, database connection and application defaults.
All configuration values can be overridden via environment variables.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Directory Configuration ---

# Package directory (templates and static assets live here)
PACKAGE_DIR = Path(__file__).parent.resolve()

# Root directory of the project (where .env and .env.example live)
ROOT_DIR = PACKAGE_DIR.parent.parent

TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

ENV_FILE = ROOT_DIR / ".env"
ENV_EXAMPLE_FILE = ROOT_DIR / ".env.example"

# --- Application Configuration ---

APP_NAME: str = "MVC Portfolio"
APP_VERSION: str = "1.0.0"

# 'development' or 'production'. Secure cookies are only issued in production.
APP_ENV: str = os.getenv("APP_ENV", "development")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Public base URL of the site, used by API clients and the docs page
SITE_URL: str = os.getenv("SITE_URL", "")

# --- API Server Configuration ---

API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# CORS allowed origins (comma-separated list). The API is public, so the
# default is the wildcard origin.
_CORS_ALLOWED_ORIGINS_STR: str = os.getenv("CORS_ALLOWED_ORIGINS", "*")
CORS_ALLOWED_ORIGINS: List[str] = [
    origin.strip()
    for origin in _CORS_ALLOWED_ORIGINS_STR.split(",")
    if origin.strip()
]
CORS_ALLOWED_METHODS: List[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_ALLOWED_HEADERS: List[str] = ["Content-Type", "Authorization"]
CORS_MAX_AGE: int = 86400

# --- Database Configuration ---

# SQLAlchemy URL of the hosted database (e.g. the Postgres connection string
# of a Supabase project). Empty or placeholder means "not configured" and the
# API falls back to sample data.
DATABASE_URL: str = os.getenv("DATABASE_URL", "")
DATABASE_PLACEHOLDER_URL: str = "postgresql://placeholder"
DATABASE_ECHO: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

# --- Pagination Configuration ---

DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

# Blog listing page
BLOG_PAGE_SIZE: int = 12
FEATURED_POST_LIMIT: int = 5

# Number of published posts in the home page blog section
HOME_POST_LIMIT: int = 6

# --- Authentication Configuration ---

AUTH_COOKIE_NAME: str = "auth-token"
AUTH_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 7  # 7 days
AUTH_COOKIE_SECURE: bool = APP_ENV == "production"

# --- Messages ---

SAMPLE_DATA_MESSAGE: str = "Sample data - Configure the database for real data"
