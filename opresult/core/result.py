"""Result types for operation outcomes.

:class:`OperationResult` carries a status and a message.  The generic
variants :class:`OperationResult1`, :class:`OperationResult2` and
:class:`OperationResult3` add one, two or three payload slots plus
emptiness predicates.  Emptiness is only reported for successful results:
every emptiness predicate of a failed result is ``False``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .status import FAILED, SUCCESS, StatusCode

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")

_MISSING = object()


def is_object_empty(value: Any) -> bool:
    """Return True if *value* is ``None`` or a container with no elements.

    Sized containers are checked with ``len``.  Other iterables, and sized
    values whose ``len`` raises ``TypeError``, are probed for a first
    element, so a single-pass iterator or generator loses that element.
    Values that refuse both (a 0-d array) and non-iterable values such as
    numbers, booleans and records are never empty, whatever they hold.
    """
    if value is None:
        return True
    if isinstance(value, Sized) and isinstance(value, Iterable):
        try:
            return len(value) == 0
        except TypeError:
            pass
    if not isinstance(value, Iterable):
        return False
    try:
        iterator = iter(value)
    except TypeError:
        return False
    return next(iterator, _MISSING) is _MISSING


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of an operation without a payload.

    Evaluates truthy on success.

    Examples::

        r = OperationResult.fail("disk full")
        if not r:
            print(r)  # Failed: disk full
    """

    message: str = ""
    status: StatusCode = FAILED

    is_object_empty = staticmethod(is_object_empty)

    def __post_init__(self) -> None:
        if self.message is None:
            object.__setattr__(self, "message", "")

    # -- constructors ------------------------------------------------------

    @classmethod
    def ok(cls, message: str = "") -> OperationResult:
        return cls(message, SUCCESS)

    @classmethod
    def fail(cls, message: str = "", status: StatusCode = FAILED) -> OperationResult:
        return cls(message, status)

    # -- derived state -----------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def items(self) -> tuple[Any, ...]:
        return ()

    def _empty(self, *values: Any) -> bool:
        # Failed results never report emptiness.
        return self.is_success and all(is_object_empty(v) for v in values)

    def _init_base(self, message: str | None, status: StatusCode) -> None:
        object.__setattr__(self, "message", "" if message is None else message)
        object.__setattr__(self, "status", status)

    # -- protocols ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self.is_success

    def __str__(self) -> str:
        if not self.message:
            return str(self.status)
        return f"{self.status}: {self.message}"


@dataclass(frozen=True, init=False)
class OperationResult1(OperationResult, Generic[T1]):
    """Outcome carrying one payload."""

    item1: T1 | None = None

    def __init__(
        self,
        item1: T1 | None,
        message: str | None = "",
        status: StatusCode = FAILED,
    ) -> None:
        self._init_base(message, status)
        object.__setattr__(self, "item1", item1)

    @classmethod
    def ok(cls, item1: T1, message: str = "") -> OperationResult1[T1]:  # type: ignore[override]
        return cls(item1, message, SUCCESS)

    @classmethod
    def fail(cls, message: str = "", status: StatusCode = FAILED) -> OperationResult1[T1]:
        return cls(None, message, status)

    @property
    def items(self) -> tuple[T1 | None]:
        return (self.item1,)

    @property
    def is_null_or_empty(self) -> bool:
        return self._empty(*self.items)

    @property
    def is_item1_empty(self) -> bool:
        return self._empty(self.item1)


@dataclass(frozen=True, init=False)
class OperationResult2(OperationResult, Generic[T1, T2]):
    """Outcome carrying two independently typed payloads."""

    item1: T1 | None = None
    item2: T2 | None = None

    def __init__(
        self,
        item1: T1 | None,
        item2: T2 | None,
        message: str | None = "",
        status: StatusCode = FAILED,
    ) -> None:
        self._init_base(message, status)
        object.__setattr__(self, "item1", item1)
        object.__setattr__(self, "item2", item2)

    @classmethod
    def ok(cls, item1: T1, item2: T2, message: str = "") -> OperationResult2[T1, T2]:  # type: ignore[override]
        return cls(item1, item2, message, SUCCESS)

    @classmethod
    def fail(cls, message: str = "", status: StatusCode = FAILED) -> OperationResult2[T1, T2]:
        return cls(None, None, message, status)

    @property
    def items(self) -> tuple[T1 | None, T2 | None]:
        return (self.item1, self.item2)

    @property
    def is_null_or_empty(self) -> bool:
        return self._empty(*self.items)

    @property
    def is_item1_empty(self) -> bool:
        return self._empty(self.item1)

    @property
    def is_item2_empty(self) -> bool:
        return self._empty(self.item2)


@dataclass(frozen=True, init=False)
class OperationResult3(OperationResult, Generic[T1, T2, T3]):
    """Outcome carrying three independently typed payloads."""

    item1: T1 | None = None
    item2: T2 | None = None
    item3: T3 | None = None

    def __init__(
        self,
        item1: T1 | None,
        item2: T2 | None,
        item3: T3 | None,
        message: str | None = "",
        status: StatusCode = FAILED,
    ) -> None:
        self._init_base(message, status)
        object.__setattr__(self, "item1", item1)
        object.__setattr__(self, "item2", item2)
        object.__setattr__(self, "item3", item3)

    @classmethod
    def ok(  # type: ignore[override]
        cls, item1: T1, item2: T2, item3: T3, message: str = ""
    ) -> OperationResult3[T1, T2, T3]:
        return cls(item1, item2, item3, message, SUCCESS)

    @classmethod
    def fail(cls, message: str = "", status: StatusCode = FAILED) -> OperationResult3[T1, T2, T3]:
        return cls(None, None, None, message, status)

    @property
    def items(self) -> tuple[T1 | None, T2 | None, T3 | None]:
        return (self.item1, self.item2, self.item3)

    @property
    def is_null_or_empty(self) -> bool:
        return self._empty(*self.items)

    @property
    def is_item1_empty(self) -> bool:
        return self._empty(self.item1)

    @property
    def is_item2_empty(self) -> bool:
        return self._empty(self.item2)

    @property
    def is_item3_empty(self) -> bool:
        return self._empty(self.item3)
