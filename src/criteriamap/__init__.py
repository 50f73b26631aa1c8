# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
criteriamap package entrypoint.

This package provides CriteriaMap, an insertion-ordered mapping from string
keys to values that adds predicate-gated insertion and retrieval. Conditional
lookups return OptionalValue holders, and argument errors are raised as
InvalidArgumentError.
"""

from .config import CriteriaSettings, load_settings
from .container import CriteriaContainer, CriteriaMap
from .errors import (
    CriteriaMapError,
    ErrorCategory,
    InvalidArgumentError,
    NoValuePresentError,
    TypeMismatchError,
)
from .log import setup_logging
from .optional import OptionalValue
from .predicates import (
    IS_NOT_NULL,
    IS_NULL,
    STRING_IS_EMPTY,
    STRING_IS_NULL,
    STRING_NOT_EMPTY,
    STRING_NOT_NULL,
    STRING_NOT_NULL_BUT_EMPTY,
    STRING_NOT_NULL_NOT_EMPTY,
    Predicate,
)
from .version import __version__

__all__ = [
    "CriteriaContainer",
    "CriteriaMap",
    "CriteriaMapError",
    "CriteriaSettings",
    "ErrorCategory",
    "IS_NOT_NULL",
    "IS_NULL",
    "InvalidArgumentError",
    "NoValuePresentError",
    "OptionalValue",
    "Predicate",
    "STRING_IS_EMPTY",
    "STRING_IS_NULL",
    "STRING_NOT_EMPTY",
    "STRING_NOT_NULL",
    "STRING_NOT_NULL_BUT_EMPTY",
    "STRING_NOT_NULL_NOT_EMPTY",
    "TypeMismatchError",
    "load_settings",
    "setup_logging",
    "__version__",
]
