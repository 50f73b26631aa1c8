# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Predicate constants and the shared evaluation policy.

A predicate is any callable taking a candidate value and returning a bool.
Evaluation is a short-circuit AND over an ordered sequence; a ``None`` entry in
the sequence is an argument error rather than a false result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Final

from .errors import InvalidArgumentError

Predicate = Callable[[Any], bool]


def _is_null(value: object) -> bool:
    return value is None


def _is_not_null(value: object) -> bool:
    return value is not None


def _string_is_empty(value: str) -> bool:
    return len(value) == 0


def _string_not_empty(value: str) -> bool:
    return len(value) != 0


def _string_not_null_not_empty(value: str | None) -> bool:
    return value is not None and len(value) != 0


def _string_not_null_but_empty(value: str | None) -> bool:
    return value is not None and len(value) == 0


IS_NULL: Final[Predicate] = _is_null
IS_NOT_NULL: Final[Predicate] = _is_not_null

STRING_IS_NULL: Final[Predicate] = _is_null
STRING_NOT_NULL: Final[Predicate] = _is_not_null
# Not null-safe: calling these with None raises TypeError.
STRING_IS_EMPTY: Final[Predicate] = _string_is_empty
STRING_NOT_EMPTY: Final[Predicate] = _string_not_empty
STRING_NOT_NULL_NOT_EMPTY: Final[Predicate] = _string_not_null_not_empty
STRING_NOT_NULL_BUT_EMPTY: Final[Predicate] = _string_not_null_but_empty


def require_predicates(predicates: Sequence[Predicate | None] | None) -> Sequence[Predicate]:
    """
    Validate a predicate list up front.

    Raises InvalidArgumentError if the list itself is None or any entry is None,
    regardless of where the entry sits in the list.
    """
    if predicates is None:
        raise InvalidArgumentError("Parameter 'predicates' cannot be None")
    for index, predicate in enumerate(predicates):
        if predicate is None:
            raise InvalidArgumentError(f"Predicate at position {index} cannot be None")
    return predicates  # type: ignore[return-value]


def test_all(value: Any, predicates: Iterable[Predicate | None]) -> bool:
    """
    Return True when every predicate accepts ``value``.

    Each entry is checked for None just before it is called, so a None entry
    positioned after the first false result is never reached.
    """
    for index, predicate in enumerate(predicates):
        if predicate is None:
            raise InvalidArgumentError(f"Predicate at position {index} cannot be None")
        if not predicate(value):
            return False
    return True


__all__ = [
    "IS_NOT_NULL",
    "IS_NULL",
    "Predicate",
    "STRING_IS_EMPTY",
    "STRING_IS_NULL",
    "STRING_NOT_EMPTY",
    "STRING_NOT_NULL",
    "STRING_NOT_NULL_BUT_EMPTY",
    "STRING_NOT_NULL_NOT_EMPTY",
    "require_predicates",
    "test_all",
]
