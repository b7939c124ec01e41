"""Preference Linker: free-text teammate preferences to a directed graph.

Each preference token is matched against the other golfers with a fixed,
ordered list of name heuristics. The first golfer in input order that
satisfies any heuristic wins the token; there is no similarity scoring.
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

from typing import Dict, Iterable, List, Optional, Sequence

from teambuilder.golfer import Golfer
from teambuilder.type_hints import GolferId
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)


class PreferenceGraph:
    """Directed "A named B as a preferred teammate" edges.

    Edges are one-directional and insertion ordered, both over referrers
    and over each referrer's preferred ids. Only golfers with at least one
    edge appear as referrers.
    """

    def __init__(self, edges: Optional[Dict[GolferId, Iterable[GolferId]]] = None):
        # dict values used as ordered sets
        self._edges: Dict[GolferId, Dict[GolferId, None]] = {}
        for source, targets in (edges or {}).items():
            for target in targets:
                self.add_edge(source, target)

    def add_edge(self, source: GolferId, target: GolferId) -> None:
        if source == target:
            return
        self._edges.setdefault(source, {})[target] = None

    def preferences_of(self, golfer_id: GolferId) -> List[GolferId]:
        """Ids the golfer named, in match order."""
        return list(self._edges.get(golfer_id, ()))

    def prefers(self, source: GolferId, target: GolferId) -> bool:
        return target in self._edges.get(source, ())

    def edge_count(self, first: GolferId, second: GolferId) -> int:
        """Number of directed edges between two golfers (0, 1 or 2)."""
        return int(self.prefers(first, second)) + int(self.prefers(second, first))

    def referrers(self) -> List[GolferId]:
        """Golfers with at least one preference, in insertion order."""
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        edge_total = sum(len(targets) for targets in self._edges.values())
        return f"PreferenceGraph(referrers={len(self)}, edges={edge_total})"


def name_matches(token: str, candidate: Golfer) -> bool:
    """Check a lowercased preference token against a candidate's name.

    Rules, in order of acceptance:
      a. the token is a substring of the full name
      b. the token contains the last name
      c. the token contains the first name
      d. the first name starts with the token
      e. the last name starts with the token
    """
    first_name = candidate.first_name.lower()
    last_name = candidate.last_name.lower()
    full_name = f"{first_name} {last_name}"

    # An empty name part would be "contained" in every token
    return (
        token in full_name
        or (bool(last_name) and last_name in token)
        or (bool(first_name) and first_name in token)
        or first_name.startswith(token)
        or last_name.startswith(token)
    )


def match_token(
    token: str, golfer: Golfer, candidates: Sequence[Golfer]
) -> Optional[Golfer]:
    """First candidate, other than ``golfer``, whose name matches ``token``."""
    for candidate in candidates:
        if candidate.id == golfer.id:
            continue
        if name_matches(token, candidate):
            return candidate
    return None


def build_preference_graph(golfers: Sequence[Golfer]) -> PreferenceGraph:
    """Link each golfer's preference text to the available golfers it names.

    Args:
        golfers: Available golfers, in input order

    Returns:
        Directed, possibly asymmetric preference graph
    """
    graph = PreferenceGraph()
    for golfer in golfers:
        for token in golfer.preference_tokens():
            match = match_token(token, golfer, golfers)
            if match is None:
                logger.debug(
                    "No golfer matches preference %r of %s", token, golfer.id
                )
                continue
            graph.add_edge(golfer.id, match.id)

    logger.debug("Built %r", graph)
    return graph
