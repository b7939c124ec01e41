"""A golfer registered for a tournament's golf event."""

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

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from teambuilder.constants import (
    KEY_CONTACT_ID,
    KEY_EMAIL,
    KEY_FIRST_NAME,
    KEY_HANDICAP,
    KEY_LAST_NAME,
    KEY_PREFERRED_TEAMMATES,
    KEY_REGISTRATION_GROUP_ID,
    KEY_REGISTRATION_ID,
    PREFERENCE_SEPARATOR,
)
from teambuilder.type_hints import GolferId


@dataclass(frozen=True)
class Golfer:
    """Represents one registrant of a tournament's golf event.

    Golfers are immutable value objects; the team builder only ever reads
    them and wraps them in team members.

    Attributes:
        id: Stable person identifier (the registrant's contact id)
        first_name: Given name, "" when unknown
        last_name: Family name, "" when unknown
        handicap: Golf handicap, None when not supplied
        preferred_teammates: Raw comma separated preference text
        registration_group_id: Shared by golfers registered in one transaction
        registration_id: Id of the registration record, carried through
        email: Contact email, carried through
    """

    id: GolferId
    first_name: str = ""
    last_name: str = ""
    handicap: Optional[float] = None
    preferred_teammates: Optional[str] = None
    registration_group_id: Optional[str] = None
    registration_id: Optional[str] = None
    email: Optional[str] = None

    def __post_init__(self):
        # Ids are compared as strings everywhere (assigned ids, lookups)
        if not isinstance(self.id, str):
            object.__setattr__(self, "id", str(self.id))

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def has_group(self) -> bool:
        return bool(self.registration_group_id)

    def preference_tokens(self) -> List[str]:
        """Split preference text into trimmed, lowercased, non-empty names."""
        if not self.preferred_teammates:
            return []
        tokens = (
            token.strip().lower()
            for token in self.preferred_teammates.split(PREFERENCE_SEPARATOR)
        )
        return [token for token in tokens if token]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the registrant source's keys."""
        return {
            KEY_REGISTRATION_ID: self.registration_id,
            KEY_CONTACT_ID: self.id,
            KEY_FIRST_NAME: self.first_name,
            KEY_LAST_NAME: self.last_name,
            KEY_EMAIL: self.email,
            KEY_HANDICAP: self.handicap,
            KEY_PREFERRED_TEAMMATES: self.preferred_teammates,
            KEY_REGISTRATION_GROUP_ID: self.registration_group_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Golfer":
        """Deserialize without validation.

        Use ``GolferFactory`` for untrusted input. When a record has no
        ``contact_id`` its ``id`` is used as the person identifier.
        """
        contact_id = data.get(KEY_CONTACT_ID)
        if contact_id is None:
            contact_id = data[KEY_REGISTRATION_ID]
            registration_id = None
        else:
            registration_id = data.get(KEY_REGISTRATION_ID)
        return cls(
            id=str(contact_id),
            first_name=data.get(KEY_FIRST_NAME) or "",
            last_name=data.get(KEY_LAST_NAME) or "",
            handicap=data.get(KEY_HANDICAP),
            preferred_teammates=data.get(KEY_PREFERRED_TEAMMATES) or None,
            registration_group_id=data.get(KEY_REGISTRATION_GROUP_ID) or None,
            registration_id=(
                str(registration_id) if registration_id is not None else None
            ),
            email=data.get(KEY_EMAIL) or None,
        )

    def __str__(self) -> str:
        return self.full_name or self.id
