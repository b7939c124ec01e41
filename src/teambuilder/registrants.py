"""Registrant source adapter.

Reads golfer records exported from the registration store (JSON or CSV),
resolves which golfers already sit on persisted teams, and writes results
back out. Everything here does I/O; the team builder itself does none.
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

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from teambuilder.constants import (
    CSV_EXTENSION,
    JSON_EXTENSION,
    REGISTRANT_FIELDS,
    SUPPORTED_REGISTRANT_EXTENSIONS,
)
from teambuilder.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidGolferDataException,
)
from teambuilder.golfer import Golfer, GolferFactory
from teambuilder.models import SuggestionResult, TeamSuggestion
from teambuilder.type_hints import AssignedIds, GolferId
from teambuilder.utils import setup_logger

logger = setup_logger(__name__)

PathLike = Union[str, Path]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileLoadException(f"File not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e


def _read_json(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Invalid JSON in {path}: {e}") from e


def _json_records(path: Path) -> List[Any]:
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("golfers")
    if not isinstance(data, list):
        raise FileLoadException(
            f"{path} must contain a list of golfers or an object with a 'golfers' list"
        )
    return data


def _csv_records(path: Path) -> List[Dict[str, Any]]:
    reader = csv.DictReader(_read_text(path).splitlines())
    if reader.fieldnames is None:
        return []
    unknown = set(reader.fieldnames) - set(REGISTRANT_FIELDS)
    if unknown:
        logger.debug("Ignoring unknown CSV columns: %s", sorted(unknown))
    # Empty CSV cells mean "no signal"
    return [
        {key: (value if value != "" else None) for key, value in row.items()}
        for row in reader
    ]


def records_to_golfers(
    records: Iterable[Any], factory: Optional[GolferFactory] = None
) -> List[Golfer]:
    """Convert registrant records to golfers.

    A lenient factory skips bad records with a warning; a strict one
    raises on the first bad record.
    """
    factory = factory or GolferFactory()
    golfers = []
    for index, record in enumerate(records):
        try:
            golfers.append(factory.create_golfer_from_dict(record))
        except InvalidGolferDataException as e:
            if factory.strict:
                raise InvalidGolferDataException(f"Record {index}: {e}") from e
            logger.warning("Skipping registrant record %s: %s", index, e)
    return golfers


def load_golfers(path: PathLike, strict: bool = False) -> List[Golfer]:
    """Load golfers from a ``.json`` or ``.csv`` registrant export.

    Args:
        path: Export file
        strict: Raise on malformed records instead of skipping them

    Returns:
        Golfers in file order

    Raises:
        FileLoadException: If the file is missing, unreadable or unsupported
        InvalidGolferDataException: On a bad record in strict mode
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == JSON_EXTENSION:
        records = _json_records(path)
    elif suffix == CSV_EXTENSION:
        records = _csv_records(path)
    else:
        raise FileLoadException(
            f"Unsupported registrant file {path}; expected one of "
            f"{', '.join(SUPPORTED_REGISTRANT_EXTENSIONS)}"
        )

    golfers = records_to_golfers(records, GolferFactory(strict=strict))
    logger.info("Loaded %s golfers from %s", len(golfers), path)
    return golfers


def load_team_player_names(path: PathLike) -> List[str]:
    """Load persisted team player names.

    Accepts a JSON list of names, a JSON list of teams with ``players``
    lists, or a text file with one name per line.
    """
    path = Path(path)
    if path.suffix.lower() != JSON_EXTENSION:
        return [line.strip() for line in _read_text(path).splitlines() if line.strip()]

    data = _read_json(path)
    if not isinstance(data, list):
        raise FileLoadException(f"{path} must contain a JSON list")

    names = []
    for entry in data:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, dict):
            names.extend(str(name) for name in entry.get("players", []) if name)
    return names


def resolve_assigned_ids(
    golfers: Iterable[Golfer], team_player_names: Iterable[Optional[str]]
) -> Set[GolferId]:
    """Map persisted team player names to golfer ids.

    Names are compared to each golfer's full name case-insensitively; the
    first golfer with that name wins. Names matching nobody are ignored.
    """
    by_name: Dict[str, GolferId] = {}
    for golfer in golfers:
        by_name.setdefault(golfer.full_name.lower(), golfer.id)

    assigned = set()
    for name in team_player_names:
        if not name:
            continue
        golfer_id = by_name.get(name.strip().lower())
        if golfer_id is None:
            logger.debug("Team player %r matches no registrant", name)
            continue
        assigned.add(golfer_id)
    return assigned


def fold_accepted_team(
    assigned_ids: AssignedIds, team: TeamSuggestion
) -> Set[GolferId]:
    """Return the assigned ids extended with an accepted team's members."""
    folded = {str(golfer_id) for golfer_id in assigned_ids}
    folded.update(team.member_ids)
    return folded


def load_result(path: PathLike) -> SuggestionResult:
    """Load a result previously written by ``save_result``."""
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise FileLoadException(f"{path} must contain a JSON object")
    try:
        return SuggestionResult.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise FileLoadException(f"Malformed suggestion result in {path}: {e}") from e


def save_result(result: SuggestionResult, path: PathLike) -> Path:
    """Write a result in the hand-off JSON format.

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise FileSaveException(f"Could not write {path}: {e}") from e
    logger.info("Saved %s teams to %s", len(result.suggested_teams), path)
    return path


def save_golfers(golfers: Iterable[Golfer], path: PathLike) -> Path:
    """Write golfers as a JSON registrant export."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps([golfer.to_dict() for golfer in golfers], indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        raise FileSaveException(f"Could not write {path}: {e}") from e
    return path
