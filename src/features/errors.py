"""
Feature Layer - Error Classes

Custom exceptions raised by the feature services. Each one carries the HTTP
status and the client-safe message the API layer answers with:

- ValidationError: missing or malformed input field (400)
- InvalidIdentifierError: record id is not well formed (400)
- NotFoundError: referenced entity absent (404)
- InvalidStatusError: status outside the booking status set (400)
- InvalidOperationError: illegal state transition, e.g. cancel-after-confirm (400)
- PaymentNotSucceededError: gateway reports a non-success intent (400)
- InternalError: unexpected persistence or gateway failure (500)
"""

import functools
import logging
from typing import Callable


class GarmentGridError(Exception):
    """Base exception for all service errors."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(GarmentGridError):
    status_code = 400
    code = "validation_error"


class InvalidIdentifierError(ValidationError):
    """Raised when an id is not well formed, before any lookup happens."""

    code = "invalid_id"

    def __init__(self, entity: str, value=None):
        self.entity = entity
        self.value = value
        super().__init__(f"Invalid {entity.lower()} ID format")


class NotFoundError(GarmentGridError):
    status_code = 404
    code = "not_found"

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found")


class InvalidStatusError(GarmentGridError):
    status_code = 400
    code = "invalid_status"

    def __init__(self, status=None):
        self.status = status
        super().__init__("Invalid status")


class InvalidOperationError(GarmentGridError):
    status_code = 400
    code = "invalid_operation"


class PaymentNotSucceededError(GarmentGridError):
    status_code = 400
    code = "payment_not_succeeded"

    def __init__(self, intent_status=None):
        self.intent_status = intent_status
        super().__init__("Payment not successful")


class InternalError(GarmentGridError):
    """Unexpected failure; the message is generic and safe to show."""

    status_code = 500
    code = "internal_error"


def log_operation(name: str, failure_message: str) -> Callable:
    """
    Decorator for service operations.

    Service errors pass through untouched. Anything else is logged with the
    operation name and re-raised as InternalError(failure_message), so
    backend details never reach the caller.

    Example:
        >>> @log_operation("create_booking", "Failed to create booking")
        ... def create_booking(self, request):
        ...     ...
    """
    def decorator(func: Callable) -> Callable:
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except GarmentGridError as e:
                logger.info(
                    f"{name} rejected: {e.message}",
                    extra={"operation": name, "error_type": type(e).__name__},
                )
                raise
            except Exception as e:
                logger.error(
                    f"{name} failed",
                    extra={
                        "operation": name,
                        "error_type": type(e).__name__,
                        "error_message": str(e),
                    },
                    exc_info=True,
                )
                raise InternalError(failure_message) from e

        return wrapper
    return decorator
