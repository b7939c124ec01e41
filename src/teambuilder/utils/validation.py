"""Validation utilities for Golf Team Builder.

This module provides reusable validation functions for registrant fields.
Each validator returns a ``ValidationResult``; the ``*_strict`` variants
raise instead.
"""

import re
from typing import Optional, Union

from teambuilder.constants import MAX_HANDICAP, MIN_HANDICAP
from teambuilder.exceptions import (
    EmailValidationException,
    HandicapValidationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[Union[str, float]] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Identifier Validation ==========


def validate_identifier(
    value: Optional[Union[str, int]], field_name: str = "Identifier"
) -> ValidationResult:
    """Validate a record identifier and normalize it to a string.

    Registrant exports carry ids as strings (UUIDs) or integers; both are
    accepted and compared as strings afterwards.
    """
    if value is None or isinstance(value, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    text = str(value).strip()
    if not text:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=text)


# ========== Name Validation ==========


def validate_name_part(value: Optional[str]) -> ValidationResult:
    """Validate a first or last name.

    Names are optional for grouping purposes; a missing name simply gives
    the preference matcher nothing to match against. Registrants write
    nicknames and couples into name fields ("Katie (Kate)", "Bob & Sue"),
    so any text is kept as given with whitespace collapsed.

    Args:
        value: Name part to validate

    Returns:
        ValidationResult with the stripped name ("" when missing)
    """
    if value is None:
        return ValidationResult(is_valid=True, sanitized_value="")

    if not isinstance(value, str):
        return ValidationResult(
            is_valid=False,
            error_message=f"Name must be text: {value!r}",
        )

    return ValidationResult(is_valid=True, sanitized_value=" ".join(value.split()))


# ========== Email Validation ==========


def validate_email(email: Optional[str], required: bool = False) -> ValidationResult:
    """Validate an email address.

    Args:
        email: Email address to validate
        required: Whether email is required (empty = invalid)

    Returns:
        ValidationResult with validation status

    Example:
        >>> result = validate_email("golfer@example.com")
        >>> if result:
        ...     print(f"Valid email: {result.sanitized_value}")
    """
    if not email or not email.strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Email address is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    email = email.strip()

    # RFC 5322 simplified email regex
    pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if re.match(pattern, email):
        return ValidationResult(is_valid=True, sanitized_value=email)

    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid email format: {email}",
    )


def validate_email_strict(email: str) -> None:
    """Validate email and raise exception if invalid.

    Raises:
        EmailValidationException: If email is invalid
    """
    result = validate_email(email, required=True)
    if not result.is_valid:
        raise EmailValidationException(result.error_message)


# ========== Handicap Validation ==========


def validate_handicap(
    handicap: Optional[Union[str, int, float]],
    min_handicap: float = MIN_HANDICAP,
    max_handicap: float = MAX_HANDICAP,
) -> ValidationResult:
    """Validate a golf handicap.

    Plus-handicaps may be written as ``"+2.1"`` and are stored negative.
    A missing handicap is valid and sanitizes to None.

    Args:
        handicap: Handicap value to validate
        min_handicap: Minimum allowed handicap
        max_handicap: Maximum allowed handicap

    Returns:
        ValidationResult with the handicap as float
    """
    if handicap is None or isinstance(handicap, bool):
        return ValidationResult(is_valid=True, sanitized_value=None)

    if isinstance(handicap, str):
        text = handicap.strip()
        if not text:
            return ValidationResult(is_valid=True, sanitized_value=None)
        if text.startswith("+"):
            text = "-" + text[1:]
        handicap = text

    try:
        value = float(handicap)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Handicap must be a number: {handicap}",
        )

    if value != value or value < min_handicap or value > max_handicap:
        return ValidationResult(
            is_valid=False,
            error_message=f"Handicap must be between {min_handicap} and {max_handicap}: {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_handicap_strict(handicap: Union[str, int, float]) -> Optional[float]:
    """Validate handicap and return it or raise exception.

    Raises:
        HandicapValidationException: If handicap is invalid
    """
    result = validate_handicap(handicap)
    if not result.is_valid:
        raise HandicapValidationException(result.error_message)
    return result.sanitized_value


# ========== Free Text Validation ==========


def validate_optional_text(value: Optional[Union[str, int]]) -> ValidationResult:
    """Normalize optional free text: blank means no signal (None)."""
    if value is None:
        return ValidationResult(is_valid=True, sanitized_value=None)

    text = str(value).strip()
    return ValidationResult(is_valid=True, sanitized_value=text or None)
