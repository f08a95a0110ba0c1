"""Domain error classes.

Protocol-agnostic errors that represent business failures.
The HTTP adapter translates them into failure envelopes with a status code.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message, a machine-readable ``error_code``
    and optional context that is merged into ``to_dict()``.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed request at the domain level.

    Examples:
        - priceMin > priceMax
        - missing status on the by-user listing
        - unknown status value

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "status", "message": "Required"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class FilterValidationError(ValidationError):
    """Raised when filter criteria are invalid."""


class PagingValidationError(ValidationError):
    """Raised when paging parameters cannot be normalized."""


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Post")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class UnauthorizedError(DomainError):
    """Caller identity is required but missing.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class StoreUnavailableError(DomainError):
    """The listing store could not serve the request.

    Not retried here; retry policy belongs to the store client.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "STORE_UNAVAILABLE"
