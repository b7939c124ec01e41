"""Exceptions for use in Golf Team Builder.

The team-formation core never raises for data-quality problems; these
exceptions belong to the loading, checking and file handling layers.
"""

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


# ========== Base Application Exception ==========


class TeamBuilderException(Exception):
    """Base exception for all Golf Team Builder errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Golfer Exceptions ==========


class GolferException(TeamBuilderException):
    """Base exception for golfer-related errors."""

    pass


class InvalidGolferDataException(GolferException):
    """Raised when golfer data is invalid or incomplete."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TeamBuilderException):
    """Base exception for validation errors."""

    pass


class HandicapValidationException(ValidationException):
    """Raised when a handicap value is invalid."""

    pass


class EmailValidationException(ValidationException):
    """Raised when an email address is invalid."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(TeamBuilderException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
