import json

from teambuilder import cli
from teambuilder.registrants import save_golfers
from teambuilder.testing import __main__ as testing_cli
from teambuilder.testing import generate_field


def _field_file(tmp_path, num_golfers=20, seed=1):
    return save_golfers(
        generate_field(num_golfers=num_golfers, seed=seed), tmp_path / "field.json"
    )


def test_suggest_prints_json(tmp_path, capsys):
    path = _field_file(tmp_path)

    assert cli.main(["suggest", str(path), "--format", "json"]) == 0

    data = json.loads(capsys.readouterr().out)
    placed = [m["contact_id"] for t in data["suggestedTeams"] for m in t["members"]]
    placed += [g["contact_id"] for g in data["unassigned"]]
    assert len(placed) == 20


def test_suggest_then_check(tmp_path, capsys):
    path = _field_file(tmp_path)
    result_path = tmp_path / "result.json"

    assert cli.main(["suggest", str(path), "--output", str(result_path)]) == 0
    assert "Unassigned" in capsys.readouterr().out

    assert cli.main(["check", str(path), str(result_path)]) == 0
    assert capsys.readouterr().out.startswith("PASSED")


def test_assigned_names_are_left_out(tmp_path, capsys):
    golfers = generate_field(num_golfers=12, seed=4)
    path = save_golfers(golfers, tmp_path / "field.json")
    names = tmp_path / "teams.txt"
    names.write_text(f"{golfers[0].full_name}\n{golfers[1].full_name}\n")

    cli.main(["suggest", str(path), "--assigned-names", str(names), "--format", "json"])

    output = capsys.readouterr().out
    assert golfers[0].id not in output
    assert golfers[2].id in output


def test_missing_file_returns_error(tmp_path):
    assert cli.main(["suggest", str(tmp_path / "missing.json")]) == 1


def test_check_reports_edited_result(tmp_path, capsys):
    path = _field_file(tmp_path)
    result_path = tmp_path / "result.json"
    cli.main(["suggest", str(path), "--output", str(result_path)])

    data = json.loads(result_path.read_text(encoding="utf-8"))
    data["unassigned"] = []
    data["suggestedTeams"] = data["suggestedTeams"][1:]
    result_path.write_text(json.dumps(data), encoding="utf-8")
    capsys.readouterr()

    assert cli.main(["check", str(path), str(result_path)]) == 1
    assert "MISSING_GOLFER" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_testing_cli_generate_and_suggest(tmp_path, capsys):
    field = tmp_path / "generated.json"

    assert (
        testing_cli.main(
            ["generate", "--golfers", "16", "--seed", "3", "--output", str(field)]
        )
        == 0
    )
    assert field.exists()
    assert testing_cli.main(["suggest", "--file", str(field)]) == 0
    assert "PASSED" in capsys.readouterr().out


def test_testing_cli_check_command():
    assert testing_cli.main(["check", "--fields", "5", "--golfers", "30"]) == 0


def test_interactive_command_lines(capsys):
    assert testing_cli.execute_command_line("") == 0
    assert testing_cli.execute_command_line("/exit") is None
    assert testing_cli.execute_command_line("help check") == 0
    assert "--fields" in capsys.readouterr().out
    assert testing_cli.execute_command_line("nonsense") == 1
    assert testing_cli.execute_command_line("benchmark --golfers 8 --iterations 1") == 0
    assert testing_cli.execute_command_line("check --fields oops") == 2


def test_command_help_shows_usage_and_example(capsys):
    testing_cli.print_command_help("suggest")
    out = capsys.readouterr().out
    assert "usage:   suggest [--golfers]" in out
    assert "example: suggest --file field.json --output teams.json" in out

    testing_cli.print_command_help("putt")
    out = capsys.readouterr().out
    assert "No such command: putt" in out
    assert "benchmark" in out

    assert testing_cli.execute_command_line("nonsense") == 1
    assert "No such command: nonsense" in capsys.readouterr().out
