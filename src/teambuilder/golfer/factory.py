"""Factory for creating Golfer objects with validation.

This module implements the Factory pattern for Golfer creation,
providing a single point of entry for turning registrant records into
golfers with proper validation and error handling.
"""

from typing import Any, Dict, Optional, Union

from teambuilder.constants import (
    KEY_CONTACT_ID,
    KEY_EMAIL,
    KEY_FIRST_NAME,
    KEY_HANDICAP,
    KEY_LAST_NAME,
    KEY_PREFERRED_TEAMMATES,
    KEY_REGISTRATION_GROUP_ID,
    KEY_REGISTRATION_ID,
)
from teambuilder.exceptions import InvalidGolferDataException
from teambuilder.golfer.base_golfer import Golfer
from teambuilder.utils import setup_logger
from teambuilder.utils.validation import (
    validate_email,
    validate_handicap,
    validate_identifier,
    validate_name_part,
    validate_optional_text,
)

logger = setup_logger(__name__)


class GolferFactory:
    """Factory for creating Golfer instances.

    Missing optional fields are never an error: they are "no signal" for
    the team builder. Malformed optional fields (a handicap of "abc", an
    email without a domain) are dropped with a warning, or raise when the
    factory is strict. A missing identifier always raises.

    Example:
        >>> factory = GolferFactory()
        >>> golfer = factory.create_golfer(
        ...     golfer_id="c-17",
        ...     first_name="Alex",
        ...     last_name="Moreno",
        ...     preferred_teammates="Sam Lee, Jordan",
        ... )
    """

    def __init__(self, validate: bool = True, strict: bool = False):
        """Initialize the GolferFactory.

        Args:
            validate: Whether to validate input data
            strict: Whether to raise exceptions on validation errors
        """
        self.validate = validate
        self.strict = strict

    def create_golfer(
        self,
        golfer_id: Union[str, int],
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        handicap: Optional[Union[str, int, float]] = None,
        preferred_teammates: Optional[str] = None,
        registration_group_id: Optional[Union[str, int]] = None,
        registration_id: Optional[Union[str, int]] = None,
        email: Optional[str] = None,
    ) -> Golfer:
        """Create a Golfer from individual fields.

        Raises:
            InvalidGolferDataException: If the id is missing, or a field is
                malformed and the factory is strict
        """
        id_result = validate_identifier(golfer_id, "Golfer id")
        if not id_result:
            raise InvalidGolferDataException(id_result.error_message)
        golfer_id = id_result.sanitized_value

        if not self.validate:
            return Golfer(
                id=golfer_id,
                first_name=first_name or "",
                last_name=last_name or "",
                handicap=handicap,
                preferred_teammates=preferred_teammates or None,
                registration_group_id=(
                    str(registration_group_id) if registration_group_id else None
                ),
                registration_id=(
                    str(registration_id) if registration_id is not None else None
                ),
                email=email or None,
            )

        return Golfer(
            id=golfer_id,
            first_name=self._checked(validate_name_part(first_name), golfer_id, ""),
            last_name=self._checked(validate_name_part(last_name), golfer_id, ""),
            handicap=self._checked(validate_handicap(handicap), golfer_id, None),
            preferred_teammates=validate_optional_text(
                preferred_teammates
            ).sanitized_value,
            registration_group_id=validate_optional_text(
                registration_group_id
            ).sanitized_value,
            registration_id=validate_optional_text(registration_id).sanitized_value,
            email=self._checked(validate_email(email), golfer_id, None),
        )

    def create_golfer_from_dict(self, data: Dict[str, Any]) -> Golfer:
        """Create a Golfer from a registrant source record.

        Records without ``contact_id`` use ``id`` as the person identifier.

        Raises:
            InvalidGolferDataException: If the record is not a mapping, has
                no identifier, or is malformed and the factory is strict
        """
        if not isinstance(data, dict):
            raise InvalidGolferDataException(
                f"Golfer record must be an object, got {type(data).__name__}"
            )

        if data.get(KEY_CONTACT_ID) not in (None, ""):
            golfer_id = data.get(KEY_CONTACT_ID)
            registration_id = data.get(KEY_REGISTRATION_ID)
        else:
            golfer_id = data.get(KEY_REGISTRATION_ID)
            registration_id = None

        return self.create_golfer(
            golfer_id=golfer_id,
            first_name=data.get(KEY_FIRST_NAME),
            last_name=data.get(KEY_LAST_NAME),
            handicap=data.get(KEY_HANDICAP),
            preferred_teammates=data.get(KEY_PREFERRED_TEAMMATES),
            registration_group_id=data.get(KEY_REGISTRATION_GROUP_ID),
            registration_id=registration_id,
            email=data.get(KEY_EMAIL),
        )

    def _checked(self, result, golfer_id: str, fallback):
        if result.is_valid:
            return result.sanitized_value
        if self.strict:
            raise InvalidGolferDataException(
                f"Golfer {golfer_id}: {result.error_message}"
            )
        logger.warning("Golfer %s: %s", golfer_id, result.error_message)
        return fallback


_default_factory = GolferFactory()


def create_golfer(golfer_id: Union[str, int], **kwargs) -> Golfer:
    """Create a golfer with the default (lenient) factory."""
    return _default_factory.create_golfer(golfer_id, **kwargs)


def create_golfer_from_dict(data: Dict[str, Any]) -> Golfer:
    """Create a golfer from a registrant record with the default factory."""
    return _default_factory.create_golfer_from_dict(data)
