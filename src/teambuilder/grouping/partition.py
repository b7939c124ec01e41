"""Availability filtering and registration-group partitioning."""

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

from typing import Iterable, List, Sequence, Set, Tuple

from teambuilder.golfer import Golfer
from teambuilder.type_hints import AssignedIds, GroupBuckets
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)


def drop_duplicate_ids(golfers: Iterable[Golfer]) -> List[Golfer]:
    """Keep the first golfer for each id, preserving order."""
    seen: Set[str] = set()
    unique = []
    for golfer in golfers:
        if golfer.id in seen:
            logger.debug("Ignoring duplicate registrant %s", golfer.id)
            continue
        seen.add(golfer.id)
        unique.append(golfer)
    return unique


def filter_available(
    golfers: Sequence[Golfer], assigned_ids: AssignedIds = ()
) -> List[Golfer]:
    """Return the golfers not already placed on a persisted team.

    Args:
        golfers: All golfers of the tournament's golf event
        assigned_ids: Ids already on a persisted team (any iterable)

    Returns:
        Golfers whose id is not in ``assigned_ids``, in input order
    """
    on_team = {str(golfer_id) for golfer_id in assigned_ids}
    return [golfer for golfer in golfers if golfer.id not in on_team]


def partition_by_group(golfers: Sequence[Golfer]) -> Tuple[GroupBuckets, List[Golfer]]:
    """Bucket golfers by registration group id.

    Returns:
        (groups, ungrouped): groups maps group id to its golfers, both
        keyed and filled in first-seen order; ungrouped holds golfers
        without a group id
    """
    groups: GroupBuckets = {}
    ungrouped: List[Golfer] = []
    for golfer in golfers:
        if golfer.has_group:
            groups.setdefault(golfer.registration_group_id, []).append(golfer)
        else:
            ungrouped.append(golfer)

    logger.debug(
        "Partitioned %s golfers into %s groups and %s ungrouped",
        len(golfers),
        len(groups),
        len(ungrouped),
    )
    return groups, ungrouped
