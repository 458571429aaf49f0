"""
Exception hierarchy for the Quest application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class QuestAppException(Exception):
    """Base exception for all Quest application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(QuestAppException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ResourceNotFoundError(QuestAppException):
    """Raised when a quest, challenge or user cannot be found."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            resource: Kind of resource (quest, challenge, user)
            identifier: ID that was looked up
            details: Additional context
        """
        details = details or {}
        details["resource"] = resource
        details["id"] = identifier
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource.capitalize()} not found: {identifier}", details)


class DuplicateEntryError(QuestAppException):
    """Raised when a unique key or pair already exists."""

    def __init__(self, resource: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["resource"] = resource
        self.resource = resource
        super().__init__(f"Duplicate {resource}", details)


class AuthenticationError(QuestAppException):
    """Raised when credentials or session tokens are missing or invalid."""

    pass


class AuthorizationError(QuestAppException):
    """Raised when an authenticated user addresses another user's resources."""

    pass


class StorageError(QuestAppException):
    """Raised when S3 or DynamoDB operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (put_item, query, put_object)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
