"""Team formation: partitioning, preference linking, group rules, clustering."""

from teambuilder.grouping.preferences import PreferenceGraph, build_preference_graph
from teambuilder.grouping.team_builder import build_context, build_team_suggestions

__all__ = [
    "PreferenceGraph",
    "build_preference_graph",
    "build_context",
    "build_team_suggestions",
]
