"""Type hints used in Golf Team Builder."""

from typing import Dict, Iterable, List

# Stable person identifier (the registrant's contact id)
GolferId = str

# Golfers already placed on a persisted team
AssignedIds = Iterable[GolferId]

# Human readable justification attached to a team member
Reasons = List[str]

# Registration group id -> golfers who registered in that transaction
GroupBuckets = Dict[str, List["Golfer"]]

# A registration pair collected for the pair rule
Pair = List["Golfer"]

#  LocalWords:  GolferId
