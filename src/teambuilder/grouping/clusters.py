"""Cluster Builder: preference-linked teams from the leftover pool.

The pool is everything the assembler did not place: ungrouped golfers
first, then leftover group members. While at least four golfers remain,
a seed is chosen by preference degree and a cluster is grown greedily;
clusters are padded in plain pool order. A pool of two or three golfers
is never clustered, even when they all named each other.
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

from typing import List, Optional, Sequence

from teambuilder.constants import TEAM_SIZE
from teambuilder.golfer import Golfer
from teambuilder.grouping.partition import drop_duplicate_ids
from teambuilder.grouping.preferences import PreferenceGraph
from teambuilder.grouping.reasons import preferred_by_reasons, without_reasons
from teambuilder.grouping.state import BuildContext, BuildState
from teambuilder.models import TeamMember
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)


def links_to(golfer: Golfer, others: Sequence[Golfer], graph: PreferenceGraph) -> int:
    """Directed edges between ``golfer`` and ``others``, both directions."""
    return sum(
        graph.edge_count(golfer.id, other.id)
        for other in others
        if other.id != golfer.id
    )


def pick_seed(pool: Sequence[Golfer], graph: PreferenceGraph) -> Optional[Golfer]:
    """Pool golfer with the most links to the rest of the pool.

    Returns None when nobody in the pool is linked to anybody else.
    """
    seed = None
    best_count = 0
    for golfer in pool:
        count = links_to(golfer, pool, graph)
        if count > best_count:
            best_count = count
            seed = golfer
    return seed


def grow_cluster(
    seed: Golfer,
    pool: Sequence[Golfer],
    graph: PreferenceGraph,
    max_size: int = TEAM_SIZE,
) -> List[Golfer]:
    """Add the best-linked pool golfer until full or nobody is linked."""
    cluster = [seed]
    cluster_ids = {seed.id}
    while len(cluster) < max_size:
        best = None
        best_score = -1
        for candidate in pool:
            if candidate.id in cluster_ids:
                continue
            score = links_to(candidate, cluster, graph)
            if score > best_score:
                best_score = score
                best = candidate

        if best is None or best_score == 0:
            break
        cluster.append(best)
        cluster_ids.add(best.id)
    return cluster


def build_cluster(
    pool: Sequence[Golfer], graph: PreferenceGraph, max_size: int = TEAM_SIZE
) -> List[Golfer]:
    """Greedy preference cluster; a single golfer when the pool has no links."""
    if not pool:
        return []
    seed = pick_seed(pool, graph)
    if seed is None:
        return [pool[0]]
    return grow_cluster(seed, pool, graph, max_size)


def leftover_pool(context: BuildContext, state: BuildState) -> List[Golfer]:
    """Unplaced golfers: ungrouped first, then leftover group members."""
    return state.unassigned(
        drop_duplicate_ids(list(context.ungrouped) + list(context.available))
    )


def assemble_clusters(context: BuildContext, state: BuildState) -> BuildState:
    """Form teams of four from the leftover pool while it holds four or more."""
    pool = leftover_pool(context, state)

    while len(pool) >= TEAM_SIZE:
        cluster = build_cluster(pool, context.graph)
        if len(cluster) >= 2:
            cluster_ids = {golfer.id for golfer in cluster}
            padding = [golfer for golfer in pool if golfer.id not in cluster_ids]
            team_golfers = cluster + padding[: TEAM_SIZE - len(cluster)]
            members = [
                TeamMember(
                    golfer=golfer,
                    reasons=preferred_by_reasons(golfer, team_golfers, context.graph),
                )
                for golfer in team_golfers
            ]
            logger.debug(
                "Preference cluster of %s padded to %s", len(cluster), len(members)
            )
        else:
            members = without_reasons(pool[:TEAM_SIZE])

        state = state.with_team(members)
        pool = state.unassigned(pool)

    if pool:
        logger.debug("%s golfers left in the pool", len(pool))
    return state
