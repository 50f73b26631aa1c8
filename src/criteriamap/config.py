# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for criteriamap."""

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class CriteriaSettings:
    """Container behaviour defaults."""

    log_rejections: bool = False
    repr_limit: int = 10

    @classmethod
    def from_env(cls) -> "CriteriaSettings":
        """Create settings from environment variables (evaluated at call time)."""
        repr_limit = _int_env("CRITERIAMAP_REPR_LIMIT", cls.repr_limit)
        if repr_limit <= 0:
            repr_limit = cls.repr_limit
        return cls(
            log_rejections=_bool_env("CRITERIAMAP_LOG_REJECTIONS", cls.log_rejections),
            repr_limit=repr_limit,
        )


def load_settings() -> CriteriaSettings:
    """Load container settings from environment with sensible defaults."""
    return CriteriaSettings.from_env()
