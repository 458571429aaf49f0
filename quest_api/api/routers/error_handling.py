"""
Router error handling utilities.

Provides a decorator for consistent error handling across API
endpoints: domain exceptions from the service layer are logged and
mapped to HTTP status codes.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from quest_api.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateEntryError,
    ResourceNotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to transform service-layer exceptions into HTTPExceptions.

    This centralizes:
    - Logging of errors with their details
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ResourceNotFoundError as e:
            logger.warning("Resource not found", extra={"details": e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (DuplicateEntryError, ValidationError) as e:
            logger.warning("Invalid request", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AuthenticationError as e:
            logger.warning("Authentication failed", extra={"error": e.message})
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=e.message,
                headers={"WWW-Authenticate": "Bearer"},
            )

        except AuthorizationError as e:
            logger.warning("Forbidden", extra={"error": e.message, "details": e.details})
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.message)

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(),
            )

        except StorageError as e:
            logger.exception("Storage operation failed", extra={"details": e.details})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Storage operation failed",
            )

        except Exception as e:
            logger.exception("Unexpected failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
