"""Build context and the immutable accumulator threaded through the rules.

``BuildContext`` holds the read-only inputs of one run. ``BuildState`` is
the accumulator: every rule takes a state and returns a new one with the
teams it formed appended and their members marked assigned.
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
from typing import Callable, Dict, FrozenSet, List, Optional, Sequence, Tuple

from teambuilder.constants import TEAM_NAME_TEMPLATE
from teambuilder.golfer import Golfer
from teambuilder.grouping.preferences import PreferenceGraph
from teambuilder.models import TeamMember, TeamSuggestion
from teambuilder.type_hints import GolferId, GroupBuckets


@dataclass(frozen=True)
class BuildContext:
    """Read-only inputs shared by every rule of one run.

    Attributes:
        available: Golfers not already on a persisted team, input order
        groups: Registration group id -> available golfers of that group
        ungrouped: Available golfers without a registration group
        graph: Preference graph over the available golfers
    """

    available: Tuple[Golfer, ...]
    groups: GroupBuckets
    ungrouped: Tuple[Golfer, ...]
    graph: PreferenceGraph
    by_id: Dict[GolferId, Golfer] = field(default_factory=dict)

    def __post_init__(self):
        if not self.by_id:
            object.__setattr__(
                self, "by_id", {golfer.id: golfer for golfer in self.available}
            )

    def golfer(self, golfer_id: GolferId) -> Optional[Golfer]:
        return self.by_id.get(golfer_id)


@dataclass(frozen=True)
class BuildState:
    """Teams formed so far and the ids they consumed."""

    teams: Tuple[TeamSuggestion, ...] = ()
    assigned: FrozenSet[GolferId] = frozenset()

    def is_assigned(self, golfer_id: GolferId) -> bool:
        return golfer_id in self.assigned

    def unassigned(self, golfers: Sequence[Golfer]) -> List[Golfer]:
        """Golfers from ``golfers`` not yet placed, order preserved."""
        return [golfer for golfer in golfers if golfer.id not in self.assigned]

    def with_team(self, members: Sequence[TeamMember]) -> "BuildState":
        """Return a new state with one more team, named by its position."""
        team = TeamSuggestion(
            name=TEAM_NAME_TEMPLATE.format(number=len(self.teams) + 1),
            members=list(members),
        )
        return BuildState(
            teams=self.teams + (team,),
            assigned=self.assigned | {member.id for member in members},
        )


# A rule stage of the pipeline
Stage = Callable[[BuildContext, BuildState], BuildState]
