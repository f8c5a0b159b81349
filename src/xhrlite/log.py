# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for xhrlite."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "xhrlite"
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _env_log_level() -> str:
    return os.getenv("XHRLITE_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None, *, fmt: str = DEFAULT_LOG_FORMAT) -> logging.Logger:
    """
    Configure root logging and the package logger.

    The package logger only emits DEBUG traces (dispatch, resolution); failed
    calls are reported through handlers, never through warnings.
    """
    effective_level = getattr(logging, (level or _env_log_level()).upper(), logging.WARNING)
    logging.basicConfig(level=effective_level, format=fmt)
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(effective_level)
    return package_logger


__all__ = ["LOGGER_NAME", "setup_logging"]
