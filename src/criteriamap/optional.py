# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Optional-value holder returned by conditional lookups."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .errors import NoValuePresentError

V = TypeVar("V")
R = TypeVar("R")


class OptionalValue(Generic[V]):
    """
    Either empty or present.

    Unlike ``of_nullable``, ``of`` always produces a present optional, so a
    present optional may wrap ``None``.
    """

    __slots__ = ("_present", "_value")

    def __init__(self, present: bool, value: V | None = None):
        self._present = present
        self._value = value if present else None

    @classmethod
    def empty(cls) -> OptionalValue[Any]:
        return _EMPTY

    @classmethod
    def of(cls, value: V) -> OptionalValue[V]:
        return cls(True, value)

    @classmethod
    def of_nullable(cls, value: V | None) -> OptionalValue[V]:
        if value is None:
            return _EMPTY
        return cls(True, value)

    def is_present(self) -> bool:
        return self._present

    def is_empty(self) -> bool:
        return not self._present

    def __bool__(self) -> bool:
        return self._present

    def get(self) -> V:
        if not self._present:
            raise NoValuePresentError("No value present")
        return self._value  # type: ignore[return-value]

    def or_else(self, default: V) -> V:
        return self._value if self._present else default  # type: ignore[return-value]

    def or_else_get(self, supplier: Callable[[], V]) -> V:
        return self._value if self._present else supplier()  # type: ignore[return-value]

    def if_present(self, action: Callable[[V], Any]) -> bool:
        if self._present:
            action(self._value)  # type: ignore[arg-type]
            return True
        return False

    def map(self, fn: Callable[[V], R | None]) -> OptionalValue[R]:
        if not self._present:
            return _EMPTY
        return OptionalValue.of_nullable(fn(self._value))  # type: ignore[arg-type]

    def filter(self, predicate: Callable[[V], bool]) -> OptionalValue[V]:
        if self._present and predicate(self._value):  # type: ignore[arg-type]
            return self
        return _EMPTY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalValue):
            return NotImplemented
        if not self._present or not other._present:
            return self._present == other._present
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        if not self._present:
            return "OptionalValue.empty"
        return f"OptionalValue[{self._value!r}]"


_EMPTY: OptionalValue[Any] = OptionalValue(False)


__all__ = ["OptionalValue"]
