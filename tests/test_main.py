"""Tests for the CLI commands."""

import json
import sys
from pathlib import Path

import pytest

from src import main as cli


def run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["stock-insight", *args])
    cli.main()


def test_validate_ok(monkeypatch: pytest.MonkeyPatch, report_file: Path) -> None:
    run_cli(monkeypatch, "validate", str(report_file))


def test_validate_missing_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch, "validate", str(tmp_path / "missing.json"))

    assert exc_info.value.code == 1


def test_validate_invalid_report(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text(json.dumps({"company": {"symbol": "X"}}), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch, "validate", str(path))

    assert exc_info.value.code == 1


def test_stats(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], report_file: Path
) -> None:
    run_cli(monkeypatch, "stats", str(report_file))

    output = capsys.readouterr().err
    assert "Net change: -10.00" in output
    assert "Percent change: -10.00%" in output
    assert "Average volume: 2,333" in output


def test_stats_empty_series(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, raw_report) -> None:
    raw_report["chartData"] = []
    path = tmp_path / "report.json"
    path.write_text(json.dumps(raw_report), encoding="utf-8")

    run_cli(monkeypatch, "stats", str(path))


def test_dashboard_launches_streamlit(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_call(command: list[str]) -> int:
        calls.append(command)
        return 0

    monkeypatch.setattr(cli.subprocess, "call", fake_call)

    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch, "dashboard", "--port", "8600")

    assert exc_info.value.code == 0
    command = calls[0]
    assert command[1:4] == ["-m", "streamlit", "run"]
    assert command[4].endswith("00_Dashboard.py")
    assert command[-2:] == ["--server.port", "8600"]


def test_command_required(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(SystemExit):
        run_cli(monkeypatch)
