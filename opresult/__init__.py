"""opresult -- status-tagged operation results with optional payloads."""

from .core import (
    FAILED,
    FORBIDDEN,
    INVALID,
    NOT_FOUND,
    SUCCESS,
    UNAUTHORIZED,
    WARNING,
    WELL_KNOWN_STATUSES,
    OperationResult,
    OperationResult1,
    OperationResult2,
    OperationResult3,
    StatusCode,
    define_custom,
    is_object_empty,
)

__version__ = "0.1.0"

__all__ = [
    "FAILED",
    "FORBIDDEN",
    "INVALID",
    "NOT_FOUND",
    "OperationResult",
    "OperationResult1",
    "OperationResult2",
    "OperationResult3",
    "SUCCESS",
    "StatusCode",
    "UNAUTHORIZED",
    "WARNING",
    "WELL_KNOWN_STATUSES",
    "define_custom",
    "is_object_empty",
]
