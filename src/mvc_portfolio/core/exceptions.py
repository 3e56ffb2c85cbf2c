"""Custom exception classes for the MVC Portfolio service.

This module defines application-specific exceptions following Google Python
Style Guide. Controllers translate them into response envelopes.
"""


class PortfolioError(Exception):
    """Base exception for all MVC Portfolio errors."""

    pass


class NotFoundError(PortfolioError):
    """Raised when a requested entity cannot be found."""

    def __init__(self, entity: str, entity_id: str):
        """Initialize the exception.

        Args:
            entity: Human readable entity name, e.g. "User".
            entity_id: The ID of the entity that was not found.
        """
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class ValidationError(PortfolioError):
    """Raised when data validation fails."""

    pass


class DuplicateEmailError(ValidationError):
    """Raised when creating or renaming a user to an email already in use."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User with this email already exists")


class DatabaseError(PortfolioError):
    """Raised when a database operation fails.

    The message is the generic failure text shown to API clients; the
    original driver error is kept as ``__cause__``.
    """

    pass


class DatabaseNotConfiguredError(PortfolioError):
    """Raised when a write is attempted while serving sample data."""

    def __init__(self, action: str, entity: str):
        """Initialize the exception.

        Args:
            action: Verb of the rejected operation, e.g. "create".
            entity: Plural entity name, e.g. "posts".
        """
        self.action = action
        self.entity = entity
        super().__init__(
            f"Database not configured. Please set up the database to {action} {entity}."
        )


class AuthenticationError(PortfolioError):
    """Raised when credentials or an auth token are rejected."""

    pass
