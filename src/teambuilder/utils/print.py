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

"""Plain-text rendering of suggestions and check reports."""

from typing import List, Optional

from teambuilder.golfer import Golfer
from teambuilder.models import SuggestionResult, TeamMember
from teambuilder.validation import CheckReport

RULE_WIDTH = 60


def _handicap(golfer: Golfer) -> str:
    if golfer.handicap is None:
        return "-"
    if golfer.handicap < 0:
        return f"+{-golfer.handicap:g}"
    return f"{golfer.handicap:g}"


def format_member(member: TeamMember) -> str:
    golfer = member.golfer
    line = f"  {str(golfer):<28} hcp {_handicap(golfer):>5}"
    if member.reasons:
        line += f"  ({'; '.join(member.reasons)})"
    return line


def format_result(result: SuggestionResult, title: Optional[str] = None) -> str:
    """Render a suggestion result as a printable report."""
    lines: List[str] = []
    if title:
        lines.extend([title, "=" * RULE_WIDTH])

    for team in result.suggested_teams:
        lines.append(f"{team.name} ({team.size} golfers)")
        lines.extend(format_member(member) for member in team.members)
        lines.append("")

    lines.append(f"Unassigned ({len(result.unassigned)})")
    if result.unassigned:
        lines.extend(
            f"  {str(golfer):<28} hcp {_handicap(golfer):>5}"
            for golfer in result.unassigned
        )
    else:
        lines.append("  none")
    return "\n".join(lines)


def format_check_report(report: CheckReport) -> str:
    lines = [report.summary]
    for violation in report.violations:
        where = f" [{violation.team_name}]" if violation.team_name else ""
        lines.append(f"  {violation.kind.value}{where}: {violation.description}")
    return "\n".join(lines)
