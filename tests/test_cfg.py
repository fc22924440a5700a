"""Tests for tabflags cfg (programmatic config editor)."""

from pathlib import Path

import pytest
import tomlkit
from typer.testing import CliRunner

from tabflags.cfg import _coerce, _load_toml, _save_toml, app

runner = CliRunner()

SAMPLE_TOML = """\
# Completion settings
[completion]
columns = 100  # wide terminal
registry = "flags.json"
"""


def _make_project(tmp_path: Path, toml_content: str = SAMPLE_TOML) -> Path:
    (tmp_path / "tabflags.toml").write_text(toml_content, encoding="utf-8")
    return tmp_path


class TestLoadSave:
    def test_round_trip_preserves_comments(self, tmp_path: Path) -> None:
        path = _make_project(tmp_path) / "tabflags.toml"
        doc = _load_toml(path)
        doc["completion"]["columns"] = 120
        _save_toml(doc, path)
        text = path.read_text(encoding="utf-8")
        assert "# Completion settings" in text
        assert "columns = 120" in text

    def test_missing_file_is_empty_document(self, tmp_path: Path) -> None:
        assert _load_toml(tmp_path / "tabflags.toml") == tomlkit.document()


class TestCoerce:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("False", False), ("120", 120), ("0.5", 0.5), ("DEBUG", "DEBUG")],
    )
    def test_values(self, raw: str, expected: object) -> None:
        assert _coerce(raw) == expected


class TestCommands:
    def test_show_key(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(_make_project(tmp_path))
        result = runner.invoke(app, ["show", "completion.columns"])
        assert result.exit_code == 0
        assert "100" in result.output

    def test_show_missing_key(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(_make_project(tmp_path))
        result = runner.invoke(app, ["show", "completion.nope"])
        assert result.exit_code == 1

    def test_set_updates_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        root = _make_project(tmp_path)
        monkeypatch.chdir(root)
        result = runner.invoke(app, ["set", "logging.level", "DEBUG"])
        assert result.exit_code == 0
        with open(root / "tabflags.toml", "rb") as f:
            doc = tomlkit.load(f)
        assert doc["logging"]["level"] == "DEBUG"
        assert doc["completion"]["columns"] == 100

    def test_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        root = _make_project(tmp_path)
        monkeypatch.chdir(root)
        result = runner.invoke(app, ["path"])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(root.resolve() / "tabflags.toml")
