"""Plain-data views of results for JSON-facing layers."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from .core.result import OperationResult
from .core.status import StatusCode

logger = logging.getLogger(__name__)


class StatusModel(BaseModel):
    code: int = Field(description="Numeric status code")
    name: str = Field(description="Display name of the status")
    is_success: bool = Field(description="Whether the status counts as success")


class OperationResultModel(BaseModel):
    status: StatusModel
    message: str = Field(default="", description="Human-readable outcome message")
    is_success: bool
    is_failure: bool
    items: list[Any] = Field(default_factory=list, description="Payloads in slot order")
    is_null_or_empty: bool | None = Field(
        default=None,
        description="Emptiness of all payloads; None for results without payload slots.",
    )


def status_to_model(status: StatusCode) -> StatusModel:
    return StatusModel(code=status.code, name=status.name, is_success=status.is_success)


def to_model(result: OperationResult) -> OperationResultModel:
    """Describe *result* as a pydantic model.

    Payloads are passed through as-is; serializing them is left to pydantic.
    """
    items = list(result.items)
    model = OperationResultModel(
        status=status_to_model(result.status),
        message=result.message,
        is_success=result.is_success,
        is_failure=result.is_failure,
        items=items,
        is_null_or_empty=getattr(result, "is_null_or_empty", None),
    )
    logger.debug("Converted %s result with %d payload slot(s)", result.status, len(items))
    return model
