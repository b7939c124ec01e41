import json

import pytest

from teambuilder import build_team_suggestions
from teambuilder.exceptions import FileLoadException, InvalidGolferDataException
from teambuilder.registrants import (
    load_golfers,
    load_result,
    load_team_player_names,
    resolve_assigned_ids,
    save_golfers,
    save_result,
)
from teambuilder.testing import generate_field

CSV_HEADER = (
    "id,contact_id,first_name,last_name,email,golf_handicap,"
    "preferred_teammates,registration_group_id"
)


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_json_list(tmp_path):
    records = [
        {"id": "r1", "contact_id": "c1", "first_name": "Amos", "last_name": "Abel"},
        {"id": "r2", "first_name": "Bria", "last_name": "Bond", "golf_handicap": "+1.5"},
    ]
    path = _write(tmp_path / "field.json", json.dumps(records))

    golfers = load_golfers(path)

    assert [g.id for g in golfers] == ["c1", "r2"]
    assert golfers[0].registration_id == "r1"
    assert golfers[1].handicap == -1.5


def test_load_json_object_with_golfers_key(tmp_path):
    path = _write(tmp_path / "field.json", json.dumps({"golfers": [{"id": 7}]}))

    assert [g.id for g in load_golfers(path)] == ["7"]


def test_load_csv_treats_empty_cells_as_missing(tmp_path):
    path = _write(
        tmp_path / "field.csv",
        CSV_HEADER + "\n"
        "r1,c1,Amos,Abel,,12.4,Bria Bond,g1\n"
        "r2,c2,Bria,Bond,bria@example.com,,,g1\n",
    )

    amos, bria = load_golfers(path)

    assert amos.handicap == 12.4
    assert amos.email is None
    assert amos.preferred_teammates == "Bria Bond"
    assert bria.handicap is None
    assert bria.preferred_teammates is None
    assert bria.registration_group_id == "g1"


def test_records_without_id_are_skipped_unless_strict(tmp_path):
    path = _write(
        tmp_path / "field.json",
        json.dumps([{"first_name": "Nobody"}, {"id": "r1", "first_name": "Amos"}]),
    )

    assert [g.id for g in load_golfers(path)] == ["r1"]
    with pytest.raises(InvalidGolferDataException):
        load_golfers(path, strict=True)


def test_bad_files_raise_load_errors(tmp_path):
    with pytest.raises(FileLoadException):
        load_golfers(tmp_path / "missing.json")
    with pytest.raises(FileLoadException):
        load_golfers(_write(tmp_path / "field.txt", "x"))
    with pytest.raises(FileLoadException):
        load_golfers(_write(tmp_path / "broken.json", "{not json"))
    with pytest.raises(FileLoadException):
        load_golfers(_write(tmp_path / "scalar.json", "42"))


def test_team_player_names_from_json_and_text(tmp_path):
    teams = [{"name": "Team A", "players": ["Amos Abel", "Bria Bond"]}, "Cy Crane"]
    json_path = _write(tmp_path / "teams.json", json.dumps(teams))
    text_path = _write(tmp_path / "teams.txt", "Amos Abel\n\n  Dot Dunn \n")

    assert load_team_player_names(json_path) == ["Amos Abel", "Bria Bond", "Cy Crane"]
    assert load_team_player_names(text_path) == ["Amos Abel", "Dot Dunn"]


def test_resolve_assigned_ids_by_full_name():
    golfers = generate_field(num_golfers=10, seed=5)
    names = [golfers[2].full_name.upper(), " " + golfers[4].full_name, "Pat Nobody", None]

    assert resolve_assigned_ids(golfers, names) == {golfers[2].id, golfers[4].id}


def test_saved_result_loads_back(tmp_path):
    golfers = generate_field(num_golfers=30, seed=8)
    result = build_team_suggestions(golfers)

    path = save_result(result, tmp_path / "out" / "result.json")
    loaded = load_result(path)

    assert loaded.to_dict() == result.to_dict()
    assert "suggestedTeams" in json.loads(path.read_text(encoding="utf-8"))


def test_saved_golfers_load_back(tmp_path):
    golfers = generate_field(num_golfers=12, seed=2)

    path = save_golfers(golfers, tmp_path / "field.json")

    assert load_golfers(path) == golfers
