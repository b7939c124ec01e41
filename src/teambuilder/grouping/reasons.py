"""Reason strings attached to team members."""

from typing import List, Sequence

from teambuilder.constants import (
    REASON_PREFERRED_BY,
    REASON_PREFERS,
    REASON_REGISTERED_TOGETHER,
)
from teambuilder.golfer import Golfer
from teambuilder.grouping.preferences import PreferenceGraph
from teambuilder.models import TeamMember


def preferred_by(referrer: Golfer) -> str:
    return REASON_PREFERRED_BY.format(name=referrer.first_name)


def prefers(referee: Golfer) -> str:
    return REASON_PREFERS.format(name=referee.first_name)


def registered_together(golfers: Sequence[Golfer]) -> List[TeamMember]:
    return [
        TeamMember(golfer=golfer, reasons=[REASON_REGISTERED_TOGETHER])
        for golfer in golfers
    ]


def without_reasons(golfers: Sequence[Golfer]) -> List[TeamMember]:
    return [TeamMember(golfer=golfer, reasons=[]) for golfer in golfers]


def preferred_by_reasons(
    golfer: Golfer, teammates: Sequence[Golfer], graph: PreferenceGraph
) -> List[str]:
    """One "Preferred by X" for each teammate X who named ``golfer``."""
    return [
        preferred_by(other)
        for other in teammates
        if other.id != golfer.id and graph.prefers(other.id, golfer.id)
    ]
