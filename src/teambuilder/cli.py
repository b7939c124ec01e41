"""Command-line interface for Golf Team Builder.

This module provides the ``teambuilder`` command: suggest teams for a
registrant export and check a stored suggestion result.
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

import argparse
import json
import sys
from typing import List, Optional

from teambuilder.exceptions import TeamBuilderException
from teambuilder.grouping import build_team_suggestions
from teambuilder.registrants import (
    load_golfers,
    load_result,
    load_team_player_names,
    resolve_assigned_ids,
    save_result,
)
from teambuilder.utils import set_log_level, setup_logger
from teambuilder.utils.print import format_check_report, format_result
from teambuilder.validation import check_suggestions

logger = setup_logger(__name__)


def run_suggest(args: argparse.Namespace) -> int:
    """Build suggestions for a registrant file and print or save them."""
    golfers = load_golfers(args.file, strict=args.strict)

    assigned_ids = set()
    if args.assigned_names:
        names = load_team_player_names(args.assigned_names)
        assigned_ids = resolve_assigned_ids(golfers, names)
        logger.info(
            "%s of %s team player names matched registrants",
            len(assigned_ids),
            len(names),
        )

    result = build_team_suggestions(golfers, assigned_ids)

    if args.output:
        save_result(result, args.output)

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result, title=f"Suggested teams for {args.file}"))
    return 0


def run_check(args: argparse.Namespace) -> int:
    """Check a stored result against the registrant file it came from."""
    golfers = load_golfers(args.file)
    result = load_result(args.result)

    assigned_ids = set()
    if args.assigned_names:
        assigned_ids = resolve_assigned_ids(
            golfers, load_team_player_names(args.assigned_names)
        )

    report = check_suggestions(result, golfers, assigned_ids)
    print(format_check_report(report))
    return 0 if report.is_valid else 1


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="teambuilder",
        description="Suggest four-person golf teams from tournament registrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Suggest teams and print them
  teambuilder suggest registrants.json

  # Leave out golfers already on a saved team, write the hand-off JSON
  teambuilder suggest registrants.csv --assigned-names teams.json --output out.json

  # Check a result (for example after manual edits)
  teambuilder check registrants.csv out.json
        """,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    suggest = subparsers.add_parser("suggest", help="Suggest teams")
    suggest.add_argument("file", help="Registrant file (JSON or CSV)")
    suggest.add_argument(
        "--assigned-names",
        metavar="FILE",
        help="Names of golfers already on a saved team (JSON or text)",
    )
    suggest.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    suggest.add_argument("--output", "-o", help="Also write the result as JSON")
    suggest.add_argument(
        "--strict", action="store_true", help="Reject malformed registrant fields"
    )
    suggest.set_defaults(func=run_suggest)

    check = subparsers.add_parser("check", help="Check a stored result")
    check.add_argument("file", help="Registrant file (JSON or CSV)")
    check.add_argument("result", help="Result JSON written by 'suggest --output'")
    check.add_argument(
        "--assigned-names",
        metavar="FILE",
        help="Names of golfers already on a saved team (JSON or text)",
    )
    check.set_defaults(func=run_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except TeamBuilderException as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
