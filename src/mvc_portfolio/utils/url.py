"""Base URL helpers."""

from typing import Mapping, Optional

from mvc_portfolio import config

DEFAULT_BASE_URL = "http://localhost:8000"


def derive_base_url_from_headers(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    """Build ``scheme://host`` from proxy-aware request headers.

    Returns:
        The base URL, or None when no host header is present.
    """
    if not headers:
        return None
    protocol = headers.get("x-forwarded-proto") or "http"
    host = headers.get("x-forwarded-host") or headers.get("host")
    return f"{protocol}://{host}" if host else None


def get_base_url(headers: Optional[Mapping[str, str]] = None) -> str:
    """Resolve the public base URL: SITE_URL, then request headers, then localhost."""
    return (
        config.SITE_URL
        or derive_base_url_from_headers(headers)
        or DEFAULT_BASE_URL
    ).rstrip("/")
