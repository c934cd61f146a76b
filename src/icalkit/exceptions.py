"""Centralized error definitions for icalkit."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from icalkit.error_codes import ErrorCode


logger = logging.getLogger(__name__)

@dataclass(eq=False)
class ICalKitError(Exception):
    """Base exception for all icalkit errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class InvalidFieldError(ICalKitError):
    """Structurally invalid field or property input."""
    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = dict(details or {})
        if field is not None:
            details["field"] = field
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details or None)
        self.field = field

class ConfigError(ICalKitError):
    """Configuration error."""
    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.CONFIG_INVALID
    ):
        super().__init__(message, code, details)

@contextmanager
def handle_errors(
    error_type: type[ICalKitError],
    service: str,
    operation: str
) -> Iterator[None]:
    """Log errors raised inside the block and re-raise them.

    Args:
        error_type: The expected error type, logged without a traceback
        service: The service name
        operation: The operation name
    """
    try:
        yield
    except error_type as e:
        logger.error(f"{service}.{operation} failed: {e}")
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error in {service}.{operation}: {e}",
            exc_info=True
        )
        raise
