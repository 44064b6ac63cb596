"""
Chain Mirror Error Model

This module provides the error handling framework for the key mapping
package. Validation failures on inputs are ordinary errors; an
``InvariantViolation`` signals a state that the mapping code has proven
impossible and must abort the mirroring run.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes for the key mapping package."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2

    # Key errors (100-199)
    INVALID_KEY = 100
    INVALID_KEY_TYPE = 101
    INVALID_KEY_ENCODING = 102

    # Account errors (200-299)
    INVALID_ACCOUNT_ID = 200

    # Configuration errors (300-399)
    INVALID_CONFIG = 300
    INVALID_SECRET = 301

    # Fatal errors (900-999)
    INVARIANT_VIOLATION = 900


class MirrorError(Exception):
    """
    Base class for all key mapping errors.

    Carries a code, optional structured details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a mirror error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class InvalidKeyError(MirrorError):
    """Malformed public or secret key material."""

    def __init__(self, message: str = "Invalid key", code: ErrorCode = ErrorCode.INVALID_KEY,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidAccountIdError(MirrorError):
    """Account id does not follow the chain's naming rules."""

    def __init__(self, message: str = "Invalid account id",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_ACCOUNT_ID, details, cause)


class ConfigError(MirrorError):
    """Invalid mirror configuration."""

    def __init__(self, message: str = "Invalid configuration", code: ErrorCode = ErrorCode.INVALID_CONFIG,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidSecretError(ConfigError):
    """Operator secret has the wrong shape."""

    def __init__(self, message: str = "Invalid operator secret",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVALID_SECRET, details, cause)


class InvariantViolation(MirrorError):
    """
    Fatal error: the mapper reached a state its own checks rule out.

    Never raised for bad user input. Callers should let it terminate the
    mirroring run rather than retry or substitute a value.
    """

    def __init__(self, message: str,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.INVARIANT_VIOLATION, details, cause)


def is_fatal(error: Exception) -> bool:
    """Check whether an error must abort the mirroring run."""
    return isinstance(error, MirrorError) and error.code == ErrorCode.INVARIANT_VIOLATION


__all__ = [
    "ErrorCode",
    "MirrorError",
    "InvalidKeyError",
    "InvalidAccountIdError",
    "ConfigError",
    "InvalidSecretError",
    "InvariantViolation",
    "is_fatal",
]
