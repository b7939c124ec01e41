"""Shared utilities: logger setup."""

# Golf Team Builder
# Copyright (C) 2025  Golf Team Builder developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from typing import Optional, Union

from teambuilder.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "teambuilder"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    # Unknown names come back as "Level <name>"
    return resolved if isinstance(resolved, int) else logging.WARNING


def _configure_package_logger() -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(
            _resolve_level(os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        )
    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger under the package logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance whose records propagate to the package handler
    """
    _configure_package_logger()
    return logging.getLogger(name)


def set_log_level(level: Optional[Union[int, str]]) -> None:
    """Change the package log level, e.g. from a ``--verbose`` flag."""
    if level is None:
        return
    _configure_package_logger().setLevel(_resolve_level(level))
