import json

from click.testing import CliRunner

from keypad_calc.cli import main, replay


def test_replay_collects_ignored_keys():
    calc, ignored = replay(["1", "x", "+", "2", "Enter", "F5"])
    assert calc.state.display == "3"
    assert ignored == ["x", "F5"]


def test_press_prints_snapshot():
    runner = CliRunner()
    result = runner.invoke(main, ["press", "5", "+", "3", "*", "2", "Enter"])
    assert result.exit_code == 0
    data = json.loads(result.output.strip().splitlines()[-1])
    assert data["display"] == "16"
    assert data["operation"] is None


def test_press_reports_unknown_keys():
    runner = CliRunner()
    result = runner.invoke(main, ["press", "4", "q"])
    assert result.exit_code == 0
    assert "Ignoring unknown key: q" in result.output
    assert json.loads(result.output.strip().splitlines()[-1])["display"] == "4"


def test_repl_renders_each_line():
    runner = CliRunner()
    result = runner.invoke(main, ["repl"], input="5 + 3\n=\nquit\n9\n")
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines == ["5 +", "3", "8"]
