"""Team suggestion data models.

These are the structures the team builder returns and the caller's edit
surface manipulates. They hold golfer references, never copies.
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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from teambuilder.golfer import Golfer
from teambuilder.type_hints import GolferId, Reasons


@dataclass
class TeamMember:
    """A golfer placed on a suggested team, with the reasons for placing them.

    Attributes:
        golfer: The golfer placed
        reasons: Short justifications, e.g. "Registered together"; may be empty
    """

    golfer: Golfer
    reasons: Reasons = field(default_factory=list)

    @property
    def id(self) -> GolferId:
        return self.golfer.id

    def to_dict(self) -> Dict[str, Any]:
        data = self.golfer.to_dict()
        data["reasons"] = list(self.reasons)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamMember":
        return cls(
            golfer=Golfer.from_dict(data), reasons=list(data.get("reasons") or [])
        )


@dataclass
class TeamSuggestion:
    """An editable, named grouping of 2 to 4 golfers.

    Attributes:
        name: Display name, "Team N" in creation order
        members: Team members in seat order
    """

    name: str
    members: List[TeamMember] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def member_ids(self) -> List[GolferId]:
        return [member.id for member in self.members]

    @property
    def golfers(self) -> List[Golfer]:
        return [member.golfer for member in self.members]

    def reasons_for(self, golfer_id: GolferId) -> List[str]:
        """Reasons attached to one member, empty if not on this team."""
        for member in self.members:
            if member.id == golfer_id:
                return list(member.reasons)
        return []

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "members": [member.to_dict() for member in self.members],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamSuggestion":
        return cls(
            name=data.get("name", ""),
            members=[TeamMember.from_dict(member) for member in data.get("members", [])],
        )


@dataclass
class SuggestionResult:
    """Output of one team builder run.

    Attributes:
        suggested_teams: Suggested teams in creation order
        unassigned: Available golfers placed on no team, in input order
    """

    suggested_teams: List[TeamSuggestion] = field(default_factory=list)
    unassigned: List[Golfer] = field(default_factory=list)

    @property
    def assigned_ids(self) -> List[GolferId]:
        return [
            golfer_id
            for team in self.suggested_teams
            for golfer_id in team.member_ids
        ]

    @property
    def unassigned_ids(self) -> List[GolferId]:
        return [golfer.id for golfer in self.unassigned]

    def team_of(self, golfer_id: GolferId):
        """Return the suggestion holding a golfer, or None."""
        for team in self.suggested_teams:
            if golfer_id in team.member_ids:
                return team
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the hand-off format used by the persistence layer."""
        return {
            "suggestedTeams": [team.to_dict() for team in self.suggested_teams],
            "unassigned": [golfer.to_dict() for golfer in self.unassigned],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SuggestionResult":
        """Deserialize the hand-off format produced by ``to_dict``."""
        return cls(
            suggested_teams=[
                TeamSuggestion.from_dict(team) for team in data.get("suggestedTeams", [])
            ],
            unassigned=[Golfer.from_dict(golfer) for golfer in data.get("unassigned", [])],
        )
