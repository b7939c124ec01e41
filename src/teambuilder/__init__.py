"""Golf Team Builder - suggested four-person teams for golf tournaments.

Typical use::

    from teambuilder import build_team_suggestions, load_golfers

    golfers = load_golfers("registrants.json")
    result = build_team_suggestions(golfers, assigned_ids={"c-12", "c-40"})
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

from teambuilder.golfer import Golfer, GolferFactory
from teambuilder.grouping import PreferenceGraph, build_team_suggestions
from teambuilder.models import SuggestionResult, TeamMember, TeamSuggestion
from teambuilder.registrants import (
    fold_accepted_team,
    load_golfers,
    resolve_assigned_ids,
)
from teambuilder.validation import check_suggestions

__version__ = "0.3.0"

__all__ = [
    "Golfer",
    "GolferFactory",
    "PreferenceGraph",
    "SuggestionResult",
    "TeamMember",
    "TeamSuggestion",
    "build_team_suggestions",
    "check_suggestions",
    "fold_accepted_team",
    "load_golfers",
    "resolve_assigned_ids",
]
