# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for criteriamap."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "criteriamap"
LOG_LEVEL_ENV = "CRITERIAMAP_LOG_LEVEL"


def setup_logging(level: str | None = None) -> None:
    """
    Attach a stderr handler and set the level of the ``criteriamap`` logger.

    Only the package namespace gets the requested level; the root logger stays
    at WARNING so other libraries are not made noisier. The level comes from
    ``level`` or, when omitted, ``CRITERIAMAP_LOG_LEVEL`` read at call time.
    """
    effective_level = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(LOGGER_NAME).setLevel(getattr(logging, effective_level, logging.WARNING))


__all__ = ["LOGGER_NAME", "LOG_LEVEL_ENV", "setup_logging"]
