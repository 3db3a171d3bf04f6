"""Status codes attached to operation results.

A :class:`StatusCode` is identified by its numeric ``code`` alone: the display
``name`` and the optional success override never take part in equality or
hashing.  Codes in the 200-299 range count as success unless overridden.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SUCCESS_MIN = 200
SUCCESS_MAX = 299


@dataclass(frozen=True, slots=True, eq=False)
class StatusCode:
    """Immutable status descriptor: numeric code, display name, success rule.

    Examples::

        teapot = StatusCode.define_custom(418, "Teapot", is_success=True)
        assert teapot.is_success
        assert teapot == StatusCode(418, "Other name")
    """

    code: int
    name: str
    success_override: bool | None = None

    @property
    def is_success(self) -> bool:
        if self.success_override is not None:
            return self.success_override
        return SUCCESS_MIN <= self.code <= SUCCESS_MAX

    @classmethod
    def define_custom(cls, code: int, name: str, is_success: bool | None = None) -> StatusCode:
        """Build a custom status.  Neither *code* nor *name* is validated."""
        status = cls(code, name, is_success)
        logger.debug("Defined custom status %s (code=%s, success=%s)", name, code, status.is_success)
        return status

    # -- protocols ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusCode):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.name


SUCCESS = StatusCode(200, "Success")
WARNING = StatusCode(202, "Warning")
INVALID = StatusCode(400, "Invalid")
UNAUTHORIZED = StatusCode(401, "Unauthorized")
FORBIDDEN = StatusCode(403, "Forbidden")
NOT_FOUND = StatusCode(404, "NotFound")
FAILED = StatusCode(500, "Failed")

WELL_KNOWN_STATUSES: tuple[StatusCode, ...] = (
    SUCCESS,
    WARNING,
    INVALID,
    UNAUTHORIZED,
    FORBIDDEN,
    NOT_FOUND,
    FAILED,
)

define_custom = StatusCode.define_custom
