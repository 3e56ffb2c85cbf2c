"""HTTP client base for the REST API.

Services mirror the controllers one-to-one. Every call returns the envelope
dictionary the server produced; transport failures are folded into the same
shape as ``{"success": False, "error": ...}``.
"""

import logging
from typing import Any, Dict, Optional

import requests

from mvc_portfolio.utils.url import get_base_url

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class BaseService:
    """Thin wrapper around a ``requests.Session`` bound to one API prefix."""

    resource: str = ""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the service.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``. Defaults to
                SITE_URL or localhost.
            session: Optional session to reuse (cookies, connection pool).
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or get_base_url()).rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.setdefault("Content-Type", "application/json")
        self.timeout = timeout

    def url(self, path: str = "") -> str:
        return f"{self.base_url}/api/{self.resource}{path}"

    def request(
        self,
        method: str,
        path: str = "",
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send a request and return the decoded envelope."""
        try:
            response = self.session.request(
                method,
                self.url(path),
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, self.url(path), e)
            return {"success": False, "error": str(e)}

        try:
            return response.json()
        except ValueError:
            return {
                "success": False,
                "error": f"Unexpected response (HTTP {response.status_code})",
            }

    def get(self, path: str = "", params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str = "", json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request("POST", path, json=json)

    def put(self, path: str = "", json: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request("PUT", path, json=json)

    def patch(self, path: str = "") -> Dict[str, Any]:
        return self.request("PATCH", path)

    def delete(self, path: str = "") -> Dict[str, Any]:
        return self.request("DELETE", path)
