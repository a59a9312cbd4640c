"""Tests for the clockwords command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from clockwords.cli import app


runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CLOCKWORDS_LANGUAGES", "CLOCKWORDS_REPORT_PARTIAL", "CLOCKWORDS_MAX_MATCHES"):
        monkeypatch.delenv(name, raising=False)


def test_scan_json() -> None:
    result = runner.invoke(
        app,
        ["scan", "See you tomorrow at 5pm", "--now", "2026-02-07T14:30:00Z", "--lang", "en", "--json"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert len(payload) == 1
    assert payload[0]["kind"] == "combined"
    assert payload[0]["text"] == "tomorrow at 5pm"
    assert payload[0]["resolved"] == {"type": "point", "instant": "2026-02-08T17:00:00+00:00"}


def test_scan_no_partial() -> None:
    result = runner.invoke(
        app, ["scan", "I worked yester", "--now", "2026-02-07T14:30:00Z", "--no-partial", "--json"]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == []


def test_scan_max() -> None:
    result = runner.invoke(
        app,
        ["scan", "today, tomorrow, yesterday", "--now", "2026-02-07T14:30:00Z", "--max", "2", "--json"],
    )

    assert result.exit_code == 0, result.output
    assert [item["text"] for item in json.loads(result.output)] == ["today", "tomorrow"]


def test_scan_table() -> None:
    result = runner.invoke(app, ["scan", "gestern um 15 Uhr", "--now", "2026-02-07T14:30:00Z"])

    assert result.exit_code == 0, result.output
    assert "combined" in result.output


def test_scan_nothing_found() -> None:
    result = runner.invoke(app, ["scan", "Hello world"])

    assert result.exit_code == 0
    assert "No time expressions found" in result.output


def test_scan_bad_now() -> None:
    result = runner.invoke(app, ["scan", "today", "--now", "yesterday-ish"])
    assert result.exit_code != 0


def test_scan_with_config_file(tmp_path: Path) -> None:
    config_path = tmp_path / "clockwords.json"
    config_path.write_text(json.dumps({"languages": ["de"]}))

    result = runner.invoke(
        app, ["scan", "today", "--config", str(config_path), "--json"]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == []


def test_scan_missing_config_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["scan", "today", "--config", str(tmp_path / "absent.json")])
    assert result.exit_code == 1


def test_languages() -> None:
    result = runner.invoke(app, ["languages"])

    assert result.exit_code == 0
    for code in ("en", "de", "fr", "es"):
        assert code in result.output
    assert "Deutsch" in result.output


def test_benchmark() -> None:
    result = runner.invoke(app, ["benchmark", "--iterations", "2"])

    assert result.exit_code == 0, result.output
    assert "single match" in result.output
