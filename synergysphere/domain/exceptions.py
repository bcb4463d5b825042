"""Domain level errors raised by use cases and repositories."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors the API layer knows how to report."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DomainError):
    """The resource does not exist or is outside the caller's scope.

    Both cases are reported identically so callers cannot detect the
    existence of records they do not own.
    """

    def __init__(self, resource: str, identifier: object | None = None) -> None:
        detail = f"{resource} not found"
        if identifier is not None:
            detail = f"{resource} '{identifier}' not found"
        super().__init__(detail)
        self.resource = resource
        self.identifier = identifier


class PermissionDeniedError(DomainError):
    """The caller can see the resource but its role does not allow the action."""

    def __init__(self, detail: str = "Permission denied") -> None:
        super().__init__(detail)


class ValidationFailure(DomainError):
    """Malformed input supplied by the caller."""

    def __init__(self, detail: str, field: str | None = None) -> None:
        super().__init__(detail)
        self.field = field


class ConflictError(DomainError):
    """The requested change collides with existing state."""


class StoreError(DomainError):
    """The datastore could not complete the operation; safe to retry."""

    def __init__(self, detail: str = "The datastore is unavailable, try again later") -> None:
        super().__init__(detail)


__all__ = [
    "DomainError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationFailure",
    "ConflictError",
    "StoreError",
]
