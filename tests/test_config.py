"""Tests for the tabflags.toml loader."""

from pathlib import Path

import pytest

from tabflags.config import CompletionConfig, _resolve, find_root, load_config


def _make_project(tmp_path: Path, toml_content: str) -> Path:
    """Write a tabflags.toml and return the directory."""
    (tmp_path / "tabflags.toml").write_text(toml_content, encoding="utf-8")
    return tmp_path


# ---------------------------------------------------------------------------
# _resolve() / find_root()
# ---------------------------------------------------------------------------


class TestResolve:
    def test_relative_path(self, tmp_path: Path) -> None:
        assert _resolve(tmp_path, "build/flags.json") == tmp_path / "build" / "flags.json"

    def test_absolute_path(self, tmp_path: Path) -> None:
        assert _resolve(tmp_path, "/abs/flags.json") == Path("/abs/flags.json")

    def test_none_returns_none(self, tmp_path: Path) -> None:
        assert _resolve(tmp_path, None) is None


class TestFindRoot:
    def test_in_start_dir(self, tmp_path: Path) -> None:
        root = _make_project(tmp_path, "")
        assert find_root(root) == root.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        root = _make_project(tmp_path, "")
        nested = root / "a" / "b"
        nested.mkdir(parents=True)
        assert find_root(nested) == root.resolve()

    def test_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        root = _make_project(tmp_path, "")
        monkeypatch.chdir(root)
        assert find_root() == root.resolve()


# ---------------------------------------------------------------------------
# load_config()
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        root = _make_project(
            tmp_path,
            "[completion]\n"
            "columns = 120\n"
            "max_lines = 40\n"
            'program = "server"\n'
            'registry = "build/flags.json"\n'
            "\n"
            "[logging]\n"
            'level = "debug"\n'
            'file = "tabflags.log"\n',
        )
        cfg = load_config(root)
        assert cfg.root == root.resolve()
        assert cfg.columns == 120
        assert cfg.max_lines == 40
        assert cfg.program == "server"
        assert cfg.registry == root.resolve() / "build" / "flags.json"
        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == root.resolve() / "tabflags.log"

    def test_defaults_for_missing_keys(self, tmp_path: Path) -> None:
        cfg = load_config(_make_project(tmp_path, "[completion]\n"))
        assert cfg.columns == 80
        assert cfg.max_lines == 98
        assert cfg.program == ""
        assert cfg.registry is None
        assert cfg.log_level == "WARNING"

    def test_empty_file(self, tmp_path: Path) -> None:
        cfg = load_config(_make_project(tmp_path, ""))
        assert cfg.columns == 80

    @pytest.mark.parametrize("value", ["0", "-5", '"wide"', "true"])
    def test_invalid_columns(self, tmp_path: Path, value: str) -> None:
        root = _make_project(tmp_path, f"[completion]\ncolumns = {value}\n")
        with pytest.raises(ValueError, match="columns"):
            load_config(root)

    def test_dataclass_defaults(self) -> None:
        cfg = CompletionConfig()
        assert cfg.root is None
        assert (cfg.columns, cfg.max_lines) == (80, 98)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("completion = 1\n", r"\[completion\] must be a table"),
            ('logging = "debug"\n', r"\[logging\] must be a table"),
            ("[completion]\nregistry = 5\n", r"\[completion\] registry must be a string"),
            ("[completion]\nprogram = 3\n", r"\[completion\] program must be a string"),
            ("[logging]\nfile = true\n", r"\[logging\] file must be a string"),
            ("[logging]\nlevel = 10\n", r"\[logging\] level must be a string"),
        ],
    )
    def test_wrong_types(self, tmp_path: Path, content: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            load_config(_make_project(tmp_path, content))
