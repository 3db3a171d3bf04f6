"""Status codes and operation results."""

from .result import (
    OperationResult,
    OperationResult1,
    OperationResult2,
    OperationResult3,
    is_object_empty,
)
from .status import (
    FAILED,
    FORBIDDEN,
    INVALID,
    NOT_FOUND,
    SUCCESS,
    UNAUTHORIZED,
    WARNING,
    WELL_KNOWN_STATUSES,
    StatusCode,
    define_custom,
)

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
