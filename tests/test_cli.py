"""Tests for the daily-report CLI."""

import json
from pathlib import Path

import pytest
from conftest import activity_payload, change
from typer.testing import CliRunner

from daily_report.cli import app

runner = CliRunner()


@pytest.fixture
def activities_file(tmp_path: Path) -> Path:
    """Saved API response with the reference scenario."""
    path = tmp_path / "activities.json"
    path.write_text(
        json.dumps(
            [
                activity_payload(1, project_key="ABC", comment="Reviewed the PR", activity_type=3),
                activity_payload(2, project_key="ABC", changes=[change("dueDate")]),
                activity_payload(3, project_key="XYZ", changes=[change("status")]),
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def backlog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear Backlog credentials from the environment."""
    monkeypatch.delenv("DAILY_REPORT_BACKLOG_SPACE_URL", raising=False)
    monkeypatch.delenv("DAILY_REPORT_BACKLOG_API_KEY", raising=False)


def test_run_from_file(activities_file: Path, tmp_path: Path) -> None:
    """run --input renders the report for the given user."""
    result = runner.invoke(
        app,
        [
            "run",
            "--user-id",
            "42",
            "--date",
            "2024-05-01",
            "--input",
            str(activities_file),
            "--config",
            str(tmp_path / "none.yaml"),
            "--format",
            "plain",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "ABC-1" in result.output
    assert "XYZ-3" in result.output
    assert "ABC-2" not in result.output


def test_run_json_output(activities_file: Path, tmp_path: Path) -> None:
    """run --json prints the structured result."""
    config = tmp_path / "daily-report.yaml"
    config.write_text("excluded_project_keys: [XYZ]\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "run",
            "-u",
            "42",
            "-d",
            "2024-05-01",
            "-i",
            str(activities_file),
            "-c",
            str(config),
            "--json",
        ],
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[0]["userId"] == 42
    assert data[0]["date"] == "2024-05-01"
    assert [a["id"] for a in data[0]["activities"]] == [1]
    assert list(data[0]["groupedByProject"]) == ["ABC"]


def test_run_without_members_fails(activities_file: Path, tmp_path: Path) -> None:
    """run without --user-id needs configured members."""
    result = runner.invoke(
        app,
        ["run", "-i", str(activities_file), "-c", str(tmp_path / "none.yaml")],
    )

    assert result.exit_code == 1


def test_run_with_invalid_date_fails(activities_file: Path, tmp_path: Path) -> None:
    """Invalid dates are reported as errors."""
    result = runner.invoke(
        app,
        [
            "run",
            "-u",
            "42",
            "-d",
            "yesterday",
            "-i",
            str(activities_file),
            "-c",
            str(tmp_path / "none.yaml"),
        ],
    )

    assert result.exit_code == 1


def test_run_with_invalid_config_fails(activities_file: Path, tmp_path: Path) -> None:
    """A broken config file stops the run."""
    config = tmp_path / "daily-report.yaml"
    config.write_text("activity_count: lots\n", encoding="utf-8")

    result = runner.invoke(
        app, ["run", "-u", "42", "-i", str(activities_file), "-c", str(config)]
    )

    assert result.exit_code == 1


def test_check_fails_without_credentials(backlog_env: None) -> None:
    """check exits with 1 when Backlog settings are missing."""
    result = runner.invoke(app, ["check"])

    assert result.exit_code == 1


def test_check_passes_with_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """check succeeds once the space URL and API key are set."""
    monkeypatch.setenv("DAILY_REPORT_BACKLOG_SPACE_URL", "https://example.backlog.com")
    monkeypatch.setenv("DAILY_REPORT_BACKLOG_API_KEY", "secret")

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0, result.output


def test_init_writes_config(tmp_path: Path) -> None:
    """init creates the config file and refuses to overwrite it."""
    path = tmp_path / "daily-report.yaml"

    first = runner.invoke(app, ["init", "--config", str(path)])
    second = runner.invoke(app, ["init", "--config", str(path)])
    forced = runner.invoke(app, ["init", "--config", str(path), "--force"])

    assert first.exit_code == 0
    assert path.is_file()
    assert second.exit_code == 1
    assert forced.exit_code == 0


def test_version() -> None:
    """version prints the package version."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "backlog-daily-report" in result.output
