from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from apps.levelspecter import __main__ as cli_main
from apps.levelspecter.app import app
from apps.levelspecter.utils.errors import ExitCode, LevelSpecterError


runner = CliRunner()


def test_parse_renders_levels() -> None:
    result = runner.invoke(app, ["parse", "DEV.RD.%"])

    assert result.exit_code == 0
    assert "DEV.RD.%" in result.stdout
    assert "sequence : RD" in result.stdout
    assert "shot     : % (wildcard)" in result.stdout
    assert "concrete : no" in result.stdout


def test_parse_json_output() -> None:
    result = runner.invoke(app, ["parse", "DEV.ASSETDEV.chair", "--format", "json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "levelspec": "DEV.ASSETDEV.chair",
        "show": "DEV",
        "sequence": "ASSETDEV",
        "shot": "chair",
        "concrete": True,
    }


def test_parse_case_mode_option() -> None:
    result = runner.invoke(app, ["--case-mode", "case-insensitive", "parse", "dev.rd"])

    assert result.exit_code == 0
    assert "show     : dev" in result.stdout


def test_parse_case_mode_from_profile(tmp_path: Path) -> None:
    (tmp_path / "project" / "levelspecter.toml").write_text(
        '[profiles.loose]\ncase_mode = "insensitive"\n'
    )

    result = runner.invoke(app, ["--profile", "loose", "parse", "dev.rd.0001"])

    assert result.exit_code == 0


def test_main_returns_success_exit_code() -> None:
    assert cli_main.main(["parse", "DEV.RD.0001"]) == ExitCode.SUCCESS


def test_main_maps_invalid_levelspec_to_validation_exit_code(
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli_main.main(["parse", "dev.rd.0001"])

    assert exit_code == ExitCode.VALIDATION
    assert (
        "Validation error: Invalid show name 'dev': must be uppercase"
        in capsys.readouterr().err
    )


def test_main_maps_unknown_profile_to_config_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "project" / "levelspecter.toml").write_text("[profiles.studio]\n")

    exit_code = cli_main.main(["--profile", "missing", "parse", "DEV"])

    assert exit_code == ExitCode.CONFIG
    assert "Profile 'missing' was not found" in capsys.readouterr().err


def test_insensitive_mode_keeps_digit_only_shots() -> None:
    exit_code = cli_main.main(["--case-mode", "case-insensitive", "parse", "dev.rd.x1"])

    assert exit_code == ExitCode.VALIDATION


def test_main_maps_bad_profile_value_to_config_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "project" / "levelspecter.toml").write_text(
        '[profiles.default]\ncase_mode = "upper"\n'
    )

    exit_code = cli_main.main(["parse", "DEV"])

    assert exit_code == ExitCode.CONFIG
    assert "Configuration error" in capsys.readouterr().err


def test_batch_reports_invalid_entries(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    listing = tmp_path / "levelspecs.txt"
    listing.write_text("DEV.RD.0001\nDEV.RD.SHOT.X\n", encoding="utf-8")

    exit_code = cli_main.main(["batch", "--file", str(listing)])

    captured = capsys.readouterr()
    assert exit_code == ExitCode.VALIDATION
    assert "Validated 2 levelspecs" in captured.out
    assert "INVALID" in captured.out
    assert "1 invalid levelspec(s) found" in captured.err


def test_batch_csv_success(tmp_path: Path) -> None:
    csv_path = tmp_path / "levelspecs.csv"
    csv_path.write_text("levelspec\nDEV.RD.0001\n%.%\n", encoding="utf-8")

    result = runner.invoke(app, ["batch", "--csv", str(csv_path)])

    assert result.exit_code == 0
    assert "All levelspecs are valid." in result.stdout


def test_batch_requires_one_source(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli_main.main(["batch"])

    assert exit_code == ExitCode.VALIDATION
    assert "exactly one of --csv or --file" in capsys.readouterr().err


def test_main_maps_bad_case_mode_environment_to_config_exit_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LEVELSPECTER_CASE_MODE", "bogus")

    exit_code = cli_main.main(["parse", "DEV"])

    assert exit_code == ExitCode.CONFIG
    assert "LEVELSPECTER_CASE_MODE is invalid" in capsys.readouterr().err


def test_workspace_option_overrides_project_profile(tmp_path: Path) -> None:
    (tmp_path / "project" / "levelspecter.toml").write_text(
        '[profiles.default]\ncase_mode = "sensitive"\n'
    )
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    (workspace / "levelspecter.toml").write_text(
        '[profiles.default]\ncase_mode = "insensitive"\n'
    )

    result = runner.invoke(app, ["--workspace", str(workspace), "parse", "dev.rd"])

    assert result.exit_code == 0
    assert "show     : dev" in result.stdout


def test_batch_csv_decode_errors_map_to_io_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    csv_path = tmp_path / "levelspecs.csv"
    csv_path.write_bytes(b"levelspec\nDEV.RD.\xff\xfe0001\n")

    exit_code = cli_main.main(["batch", "--csv", str(csv_path)])

    assert exit_code == ExitCode.IO
    assert "I/O error" in capsys.readouterr().err


def test_unclassified_errors_use_runtime_exit_code() -> None:
    error = LevelSpecterError("unexpected")

    assert error.exit_code == ExitCode.RUNTIME
    assert error.heading == "Error"
