"""Base controller.

Controllers sit between the routes and the managers: they validate request
fields, call the manager and wrap the outcome in the response envelope.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from mvc_portfolio import config
from mvc_portfolio.core.exceptions import (
    DatabaseError,
    DatabaseNotConfiguredError,
    NotFoundError,
    ValidationError,
)
from mvc_portfolio.schemas.common import envelope

logger = logging.getLogger(__name__)


def _parse_positive_default(value: Optional[str], default: int) -> int:
    # Missing, non-numeric and zero values all fall back to the default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed or default


class BaseController:
    """Shared envelope, validation and pagination helpers."""

    def __init__(self, manager: Any):
        """Initialize the controller.

        Args:
            manager: A database-backed or sample-data manager.
        """
        self.manager = manager

    @property
    def sample_message(self) -> Optional[str]:
        if getattr(self.manager, "is_sample", False):
            return config.SAMPLE_DATA_MESSAGE
        return None

    def success(self, data: Any, message: Optional[str] = None, status_code: int = 200) -> JSONResponse:
        """Build a success envelope response."""
        return JSONResponse(
            envelope(True, data=data, message=message or self.sample_message),
            status_code=status_code,
        )

    def error(self, error: str, status_code: int = 400) -> JSONResponse:
        """Build an error envelope response."""
        return JSONResponse(envelope(False, error=error), status_code=status_code)

    def validate_required(self, data: Dict[str, Any], fields: Iterable[str]) -> Optional[str]:
        """Return "<field> is required" for the first missing field, else None."""
        for field in fields:
            value = data.get(field)
            if value is None or value == "":
                return f"{field} is required"
        return None

    def get_pagination_params(
        self, page: Optional[str] = None, limit: Optional[str] = None
    ) -> Tuple[int, int]:
        """Parse and clamp pagination query parameters.

        Returns:
            ``(page, limit)`` with ``page >= 1`` and ``1 <= limit <= MAX_PAGE_SIZE``.
        """
        page_number = _parse_positive_default(page, config.DEFAULT_PAGE)
        page_size = _parse_positive_default(limit, config.DEFAULT_PAGE_SIZE)
        return max(1, page_number), min(config.MAX_PAGE_SIZE, max(1, page_size))

    def handle(
        self,
        operation: Callable[[], Any],
        error_message: str = "An error occurred",
        status_code: int = 200,
    ) -> JSONResponse:
        """Run ``operation`` and translate its outcome into an envelope.

        Args:
            operation: Callable producing the response data.
            error_message: Generic message used for database failures.
            status_code: Status of the success response.

        Returns:
            JSONResponse with the envelope.
        """
        try:
            result = operation()
        except NotFoundError as e:
            return self.error(str(e), 404)
        except (ValidationError, DatabaseNotConfiguredError) as e:
            return self.error(str(e), 400)
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error("%s: %s", error_message, e)
            return self.error(error_message, 500)
        return self.success(result, status_code=status_code)
