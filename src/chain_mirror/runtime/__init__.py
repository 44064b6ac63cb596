"""Runtime helpers for the chain mirror"""

from .errors import MirrorError, InvariantViolation, ErrorCode

__all__ = [
    "ErrorCode",
    "MirrorError",
    "InvariantViolation",
]
