"""Team Assembler: turns registration groups into teams.

Rules run in a fixed priority order and each only sees group members not
consumed by an earlier rule:

1. groups of exactly four become teams
2. groups larger than four are cut into runs of four; a short final run
   is left for later rules
3. groups of three get a fourth member from the fill-search
4. groups of two are merged pairwise by mutual preference score, and a
   pair left over is padded by the fill-search

Ties are always broken by iteration order ("first found"), never by a
score, so the output is a pure function of the input ordering.
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
from typing import AbstractSet, List, Optional, Sequence, Set

from teambuilder.constants import (
    PAIR_FILL_SEATS,
    REASON_REGISTERED_TOGETHER,
    TEAM_SIZE,
)
from teambuilder.golfer import Golfer
from teambuilder.grouping.preferences import PreferenceGraph
from teambuilder.grouping.reasons import preferred_by, prefers, registered_together
from teambuilder.grouping.state import BuildContext, BuildState
from teambuilder.models import TeamMember
from teambuilder.type_hints import GolferId, Pair, Reasons
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class FillMatch:
    """A golfer found by the fill-search and why they were picked."""

    golfer: Golfer
    reasons: Reasons = field(default_factory=list)

    def as_member(self) -> TeamMember:
        return TeamMember(golfer=self.golfer, reasons=list(self.reasons))


# ========== Fill-search ==========


def find_fill_match(
    reference: Sequence[Golfer],
    context: BuildContext,
    excluded: AbstractSet[GolferId],
) -> Optional[FillMatch]:
    """Find one companion for an under-sized group.

    Search order:
      a. someone a reference member prefers ("Preferred by <referrer>")
      b. someone who prefers a reference member ("Prefers <referee>")
      c. the first free ungrouped golfer, without reasons

    Args:
        reference: Members needing a companion, in group order
        context: Inputs of the current run
        excluded: Ids that may not be picked (already assigned or picked)

    Returns:
        The match, or None when nobody is left
    """
    reference_ids = {member.id for member in reference}
    graph = context.graph

    for member in reference:
        for preferred_id in graph.preferences_of(member.id):
            if preferred_id in excluded or preferred_id in reference_ids:
                continue
            golfer = context.golfer(preferred_id)
            if golfer is not None:
                return FillMatch(golfer=golfer, reasons=[preferred_by(member)])

    for referrer_id in graph.referrers():
        if referrer_id in excluded or referrer_id in reference_ids:
            continue
        for member in reference:
            if graph.prefers(referrer_id, member.id):
                golfer = context.golfer(referrer_id)
                if golfer is not None:
                    return FillMatch(golfer=golfer, reasons=[prefers(member)])

    for golfer in context.ungrouped:
        if golfer.id not in excluded:
            return FillMatch(golfer=golfer, reasons=[])

    return None


def find_fillers(
    reference: Sequence[Golfer],
    count: int,
    context: BuildContext,
    excluded: AbstractSet[GolferId],
) -> List[FillMatch]:
    """Run the fill-search up to ``count`` times, excluding earlier picks."""
    local_excluded: Set[GolferId] = set(excluded)
    local_excluded.update(member.id for member in reference)

    fillers: List[FillMatch] = []
    for _ in range(count):
        match = find_fill_match(reference, context, local_excluded)
        if match is None:
            continue
        fillers.append(match)
        local_excluded.add(match.golfer.id)
    return fillers


# ========== Rules ==========


def assemble_exact_groups(context: BuildContext, state: BuildState) -> BuildState:
    """Rule 1: a registration group of exactly four is a team."""
    for group_id, members in context.groups.items():
        if len(members) == TEAM_SIZE:
            logger.debug("Group %s registered as a full team", group_id)
            state = state.with_team(registered_together(members))
    return state


def chunk(golfers: Sequence[Golfer], size: int) -> List[List[Golfer]]:
    return [list(golfers[i : i + size]) for i in range(0, len(golfers), size)]


def assemble_large_groups(context: BuildContext, state: BuildState) -> BuildState:
    """Rule 2: cut groups larger than four into consecutive teams of four."""
    for group_id, members in context.groups.items():
        remaining = state.unassigned(members)
        if len(remaining) <= TEAM_SIZE:
            continue
        for run in chunk(remaining, TEAM_SIZE):
            if len(run) == TEAM_SIZE:
                state = state.with_team(registered_together(run))
            else:
                logger.debug(
                    "Group %s leaves %s golfers after splitting", group_id, len(run)
                )
    return state


def assemble_trios(context: BuildContext, state: BuildState) -> BuildState:
    """Rule 3: complete groups of three with one filler when possible."""
    for group_id, members in context.groups.items():
        remaining = state.unassigned(members)
        if len(remaining) != TEAM_SIZE - 1:
            continue

        team = registered_together(remaining)
        fourth = find_fill_match(remaining, context, state.assigned)
        if fourth is not None:
            team.append(fourth.as_member())
        else:
            logger.debug("No fourth golfer available for group %s", group_id)
        state = state.with_team(team)
    return state


def collect_pairs(context: BuildContext, state: BuildState) -> List[Pair]:
    """Groups with exactly two unassigned members, in group order."""
    pairs = []
    for members in context.groups.values():
        remaining = state.unassigned(members)
        if len(remaining) == 2:
            pairs.append(remaining)
    return pairs


def mutual_preference_score(
    pair_a: Sequence[Golfer], pair_b: Sequence[Golfer], graph: PreferenceGraph
) -> int:
    """Directed preference edges between two groups, both directions counted."""
    return sum(graph.edge_count(a.id, b.id) for a in pair_a for b in pair_b)


def _merged_pair_members(
    pair_a: Pair, pair_b: Pair, graph: PreferenceGraph
) -> List[TeamMember]:
    members = []
    for own, other in ((pair_a, pair_b), (pair_b, pair_a)):
        for golfer in own:
            reasons = [REASON_REGISTERED_TOGETHER]
            reasons.extend(
                preferred_by(referrer)
                for referrer in other
                if graph.prefers(referrer.id, golfer.id)
            )
            members.append(TeamMember(golfer=golfer, reasons=reasons))
    return members


def assemble_pairs(context: BuildContext, state: BuildState) -> BuildState:
    """Rule 4: merge pairs by best mutual preference score, then pad leftovers."""
    pairs = collect_pairs(context, state)
    merged: Set[int] = set()

    for i, pair in enumerate(pairs):
        if i in merged:
            continue
        best_index = -1
        best_score = -1
        for j in range(i + 1, len(pairs)):
            if j in merged:
                continue
            score = mutual_preference_score(pair, pairs[j], context.graph)
            if score > best_score:
                best_score = score
                best_index = j

        if best_index < 0:
            continue
        merged.update((i, best_index))
        logger.debug("Merging pairs %s and %s (score %s)", i, best_index, best_score)
        state = state.with_team(
            _merged_pair_members(pair, pairs[best_index], context.graph)
        )

    for i, pair in enumerate(pairs):
        if i in merged:
            continue
        fillers = find_fillers(pair, PAIR_FILL_SEATS, context, state.assigned)
        team = registered_together(pair)
        team.extend(filler.as_member() for filler in fillers)
        state = state.with_team(team)
    return state
