"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.cli import EXIT_EMPTY, EXIT_INVALID, EXIT_OK, main


def _record(**fields: str) -> str:
    return json.dumps(fields)


def test_render_with_profile(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["render", _record(genus_or_above="Abies", specific_epithet="alba", authorship="Mill."), "--profile", "canonical"])
    assert code == EXIT_OK
    assert capsys.readouterr().out == "Abies alba\n"


def test_render_uses_configured_profile(
        clean_env: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("NAME_PROFILE", "canonical_complete")
    code = main(["render", _record(genus_or_above="Puma", specific_epithet="concolor", authorship="L.")])
    assert code == EXIT_OK
    assert capsys.readouterr().out == "Puma concolor L.\n"


def test_render_empty_name(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", "{}"]) == EXIT_EMPTY
    assert capsys.readouterr().out == ""


def test_render_invalid_record(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", "not json"]) == EXIT_INVALID
    assert main(["render", _record(genus="Abies")]) == EXIT_INVALID


def test_validate_scalar_and_range(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", "ALTITUDE", "1080"]) == EXIT_OK
    assert capsys.readouterr().out == "ok\n"

    assert main(["validate", "ALTITUDE", "100,*"]) == EXIT_OK
    assert capsys.readouterr().out == "ok range 100..*\n"


def test_validate_invalid_value(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", "EXTINCT", "1", "--domain", "checklist"]) == EXIT_INVALID
    out = capsys.readouterr().out
    assert "EXTINCT" in out
    assert "'1'" in out


def test_validate_unknown_parameter(clean_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate", "WINGSPAN", "10"]) == EXIT_INVALID
    assert "WINGSPAN" in capsys.readouterr().out


def test_wildcard_disabled_by_settings(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOW_WILDCARD", "false")
    assert main(["validate", "DATE", "*"]) == EXIT_INVALID
