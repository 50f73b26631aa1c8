# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and argument-check helpers."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class ErrorCategory(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    NO_VALUE = "NO_VALUE"


class CriteriaMapError(Exception):
    """Base class for all criteriamap errors."""

    category: ErrorCategory = ErrorCategory.INVALID_ARGUMENT


class InvalidArgumentError(CriteriaMapError, ValueError):
    """A required argument was None, or a mapping carried a None key."""

    category = ErrorCategory.INVALID_ARGUMENT


class TypeMismatchError(CriteriaMapError, TypeError):
    """A stored value could not be narrowed to the requested type."""

    category = ErrorCategory.TYPE_MISMATCH


class NoValuePresentError(CriteriaMapError, LookupError):
    """Raised by ``OptionalValue.get()`` on an empty optional."""

    category = ErrorCategory.NO_VALUE


def require_not_none(value: T | None, name: str) -> T:
    """Return ``value`` unchanged, or raise InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(f"Parameter '{name}' cannot be None")
    return value


__all__ = [
    "CriteriaMapError",
    "ErrorCategory",
    "InvalidArgumentError",
    "NoValuePresentError",
    "TypeMismatchError",
    "require_not_none",
]
