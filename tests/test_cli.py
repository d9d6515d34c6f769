from datetime import timedelta

import pytest
from typer.testing import CliRunner

from abletime import config, scanner
from abletime.cli import app

from conftest import BASE_TIME

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "get_config_path", lambda: tmp_path / "config.toml")


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    directory = tmp_path / "project"
    directory.mkdir()
    times = {
        "song 0.1.0.als": (0, 30),
        "song 0.1.1.als": (600, 660),
        "song 0.2.0.als": (9000, 9100),
    }
    for name in times:
        (directory / name).write_text("x")

    def _read_timestamps(path):
        created, modified = times[path.name]
        return (
            BASE_TIME + timedelta(seconds=created),
            BASE_TIME + timedelta(seconds=modified),
        )

    monkeypatch.setattr(scanner, "_read_timestamps", _read_timestamps)
    return directory


def test_summary_prints_sessions(project_dir):
    result = runner.invoke(app, ["summary", str(project_dir)])
    assert result.exit_code == 0, result.output
    assert "Version 0.1.x - 0:11:00.000" in result.output
    assert "Version 0.2.x - 0:01:40.000" in result.output
    assert result.output.rstrip().endswith("Total project time\n0:12:40.000")


def test_summary_without_ceiling(project_dir):
    result = runner.invoke(app, ["summary", str(project_dir), "-m", "0"])
    assert result.exit_code == 0, result.output
    # The minor bump still separates sessions, so the long gap is not counted.
    assert "Version 0.1.x - 0:11:00.000" in result.output


def test_summary_with_other_suffix(project_dir):
    result = runner.invoke(app, ["summary", str(project_dir), "--suffix", ".flp"])
    assert result.exit_code == 0
    assert "No project files found" in result.output


def test_summary_json(project_dir):
    result = runner.invoke(app, ["summary", str(project_dir), "--json"])
    assert result.exit_code == 0, result.output
    assert '"total_time_spent": "0:12:40.000"' in result.output


def test_summary_missing_directory(tmp_path):
    result = runner.invoke(app, ["summary", str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_summary_bad_config(tmp_path, project_dir):
    bad = tmp_path / "bad.toml"
    bad.write_text('suffix = 1\n')
    result = runner.invoke(app, ["summary", str(project_dir), "--config", str(bad)])
    assert result.exit_code == 2


def test_no_arguments_shows_help():
    result = runner.invoke(app, [])
    assert "summary" in result.output
