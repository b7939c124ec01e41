"""Team suggestion entry point.

``build_team_suggestions`` runs the full pipeline over in-memory data:
availability filter, group partition, preference linking, the group
rules and finally preference clustering of the leftover pool. It performs
no I/O, keeps no state between calls, and never raises for missing or
unmatched data; an empty input gives an empty result.
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

from typing import Sequence, Tuple

from teambuilder.golfer import Golfer
from teambuilder.grouping.assembler import (
    assemble_exact_groups,
    assemble_large_groups,
    assemble_pairs,
    assemble_trios,
)
from teambuilder.grouping.clusters import assemble_clusters
from teambuilder.grouping.partition import (
    drop_duplicate_ids,
    filter_available,
    partition_by_group,
)
from teambuilder.grouping.preferences import build_preference_graph
from teambuilder.grouping.state import BuildContext, BuildState, Stage
from teambuilder.models import SuggestionResult
from teambuilder.type_hints import AssignedIds
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)

# Order matters: each stage only sees golfers earlier stages left over
PIPELINE: Tuple[Stage, ...] = (
    assemble_exact_groups,
    assemble_large_groups,
    assemble_trios,
    assemble_pairs,
    assemble_clusters,
)


def build_context(
    golfers: Sequence[Golfer], assigned_ids: AssignedIds = ()
) -> BuildContext:
    """Filter, partition and link the golfers of one run."""
    available = filter_available(drop_duplicate_ids(golfers), assigned_ids)
    groups, ungrouped = partition_by_group(available)
    return BuildContext(
        available=tuple(available),
        groups=groups,
        ungrouped=tuple(ungrouped),
        graph=build_preference_graph(available),
    )


def run_pipeline(context: BuildContext) -> BuildState:
    state = BuildState()
    for stage in PIPELINE:
        state = stage(context, state)
    return state


def build_team_suggestions(
    golfers: Sequence[Golfer], assigned_ids: AssignedIds = ()
) -> SuggestionResult:
    """Suggest four-person teams for the golfers not yet on a team.

    Args:
        golfers: Golfers of the tournament's golf event, in a stable order
        assigned_ids: Ids of golfers already placed on a persisted team

    Returns:
        Suggested teams of 2 to 4 members and the golfers left unassigned;
        together they cover every available golfer exactly once
    """
    context = build_context(golfers, assigned_ids)
    state = run_pipeline(context)
    unassigned = state.unassigned(context.available)

    logger.info(
        "Suggested %s teams for %s available golfers, %s unassigned",
        len(state.teams),
        len(context.available),
        len(unassigned),
    )
    return SuggestionResult(suggested_teams=list(state.teams), unassigned=unassigned)
