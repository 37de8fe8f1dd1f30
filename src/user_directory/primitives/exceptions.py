"""Domain and infrastructure exceptions for user-directory."""

from __future__ import annotations


class UserDirectoryError(Exception):
    """Root exception for the entire user-directory package."""


class DomainError(UserDirectoryError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when an aggregate or resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


class ValidationError(UserDirectoryError):
    """Raised when an incoming request fails validation.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    @property
    def messages(self) -> list[str]:
        """Flat list of every message, in field order."""
        return [msg for field_msgs in self.errors.values() for msg in field_msgs]


class InvalidPageRequestError(ValidationError):
    """Raised when a page index or page size is out of range."""


class InfrastructureError(UserDirectoryError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""


class StoreUnavailableError(PersistenceError):
    """Raised when the backing store cannot be reached.

    Never retried internally: a paginated search is not safe to replay
    while concurrent writes may shift offsets.
    """


class QueryExecutionError(PersistenceError):
    """Raised when the backing store rejects or fails to run a query."""
