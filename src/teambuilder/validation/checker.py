"""Suggestion checker - verifies the membership invariants of a result.

Callers edit suggestions in memory (swap, dismiss, merge) without
re-running the team builder. This module checks that an edited or freshly
generated result still covers every available golfer exactly once, with
every team between two and four members.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from teambuilder.constants import MAX_TEAM_SIZE, MIN_TEAM_SIZE
from teambuilder.golfer import Golfer
from teambuilder.models import SuggestionResult
from teambuilder.type_hints import AssignedIds, GolferId
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)


class CheckStatus(Enum):
    """Overall status of a suggestion check."""

    PASSED = "PASSED"
    FAILED = "FAILED"


class ViolationKind(Enum):
    """Kinds of invariant violations."""

    DUPLICATE_GOLFER = "DUPLICATE_GOLFER"  # listed more than once
    TEAM_SIZE = "TEAM_SIZE"  # fewer than 2 or more than 4 members
    MISSING_GOLFER = "MISSING_GOLFER"  # available but neither placed nor unassigned
    UNKNOWN_GOLFER = "UNKNOWN_GOLFER"  # not among the input golfers
    ALREADY_ASSIGNED = "ALREADY_ASSIGNED"  # already on a persisted team


@dataclass
class Violation:
    """A single invariant violation."""

    kind: ViolationKind
    description: str
    golfer_id: Optional[GolferId] = None
    team_name: Optional[str] = None


@dataclass
class CheckReport:
    """Complete check report for one suggestion result."""

    violations: List[Violation] = field(default_factory=list)
    checked_teams: int = 0
    checked_golfers: int = 0

    @property
    def status(self) -> CheckStatus:
        return CheckStatus.FAILED if self.violations else CheckStatus.PASSED

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def by_kind(self, kind: ViolationKind) -> List[Violation]:
        return [violation for violation in self.violations if violation.kind == kind]

    @property
    def summary(self) -> str:
        if self.is_valid:
            return (
                f"{self.status.value}: {self.checked_teams} teams, "
                f"{self.checked_golfers} golfers"
            )
        counts = Counter(violation.kind.value for violation in self.violations)
        details = ", ".join(f"{kind}={count}" for kind, count in sorted(counts.items()))
        return f"{self.status.value}: {len(self.violations)} violations ({details})"


class SuggestionChecker:
    """Checks a result against the golfers and ids it was built from."""

    def __init__(
        self, min_team_size: int = MIN_TEAM_SIZE, max_team_size: int = MAX_TEAM_SIZE
    ):
        self.min_team_size = min_team_size
        self.max_team_size = max_team_size

    def check(
        self,
        result: SuggestionResult,
        golfers: Sequence[Golfer],
        assigned_ids: AssignedIds = (),
    ) -> CheckReport:
        """Check membership and size invariants.

        Args:
            result: Generated or caller-edited suggestions
            golfers: Golfers the result was built from
            assigned_ids: Ids already on a persisted team

        Returns:
            CheckReport listing every violation found
        """
        on_team = {str(golfer_id) for golfer_id in assigned_ids}
        known: Dict[GolferId, Golfer] = {golfer.id: golfer for golfer in golfers}
        report = CheckReport(checked_teams=len(result.suggested_teams))

        self._check_team_sizes(result, report)

        placements: List[GolferId] = list(result.assigned_ids) + list(
            result.unassigned_ids
        )
        report.checked_golfers = len(placements)

        for golfer_id, count in Counter(placements).items():
            if count > 1:
                report.violations.append(
                    Violation(
                        kind=ViolationKind.DUPLICATE_GOLFER,
                        description=f"Golfer {golfer_id} is listed {count} times",
                        golfer_id=golfer_id,
                        team_name=self._team_name(result, golfer_id),
                    )
                )
            if golfer_id not in known:
                report.violations.append(
                    Violation(
                        kind=ViolationKind.UNKNOWN_GOLFER,
                        description=f"Golfer {golfer_id} is not a registrant",
                        golfer_id=golfer_id,
                        team_name=self._team_name(result, golfer_id),
                    )
                )
            elif golfer_id in on_team:
                report.violations.append(
                    Violation(
                        kind=ViolationKind.ALREADY_ASSIGNED,
                        description=f"Golfer {golfer_id} is already on a team",
                        golfer_id=golfer_id,
                        team_name=self._team_name(result, golfer_id),
                    )
                )

        placed = set(placements)
        for golfer_id in known:
            if golfer_id not in on_team and golfer_id not in placed:
                report.violations.append(
                    Violation(
                        kind=ViolationKind.MISSING_GOLFER,
                        description=f"Golfer {golfer_id} is neither placed nor unassigned",
                        golfer_id=golfer_id,
                    )
                )

        if report.is_valid:
            logger.debug("Suggestion check passed: %s", report.summary)
        else:
            logger.warning("Suggestion check failed: %s", report.summary)
        return report

    def _check_team_sizes(self, result: SuggestionResult, report: CheckReport) -> None:
        for team in result.suggested_teams:
            if self.min_team_size <= team.size <= self.max_team_size:
                continue
            report.violations.append(
                Violation(
                    kind=ViolationKind.TEAM_SIZE,
                    description=(
                        f"{team.name} has {team.size} members, expected "
                        f"{self.min_team_size}-{self.max_team_size}"
                    ),
                    team_name=team.name,
                )
            )

    @staticmethod
    def _team_name(result: SuggestionResult, golfer_id: GolferId) -> Optional[str]:
        team = result.team_of(golfer_id)
        return team.name if team is not None else None


def create_suggestion_checker() -> SuggestionChecker:
    """Create a checker with the standard team size bounds."""
    return SuggestionChecker()


def check_suggestions(
    result: SuggestionResult,
    golfers: Sequence[Golfer],
    assigned_ids: AssignedIds = (),
) -> CheckReport:
    """Check a result with the standard team size bounds."""
    return create_suggestion_checker().check(result, golfers, assigned_ids)
