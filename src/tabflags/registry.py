"""Registry snapshot sources.

A completion run needs every flag the target program knows about.  They
can come from a dump file written by the program, or straight from a
click/typer application object.

Dump files are JSON or TOML::

    {"program": "server",
     "flags": [{"name": "port", "type": "int32", "default": "8080",
                "description": "Port to listen on", "file": "src/server.py"}]}

A bare JSON list of flag objects is accepted too.  ``current`` defaults to
``default``; every other missing field is rendered as an empty string.
"""

from __future__ import annotations

import importlib
import inspect
import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
import typer

from tabflags.flags import FlagDescriptor, Snapshot, take_snapshot


class RegistryError(ValueError):
    """A registry source could not be read or understood."""


@dataclass(frozen=True)
class Registry:
    """A program name together with its flag snapshot."""

    program: str
    flags: Snapshot


# ---------------------------------------------------------------------------
# Dump files
# ---------------------------------------------------------------------------


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flag_from_dict(entry: dict[str, Any]) -> FlagDescriptor:
    """Build a :class:`FlagDescriptor` from one dump-file record."""
    if not isinstance(entry, dict):
        raise RegistryError(f"Flag entry must be a table/object, got {type(entry).__name__}")
    name = _text(entry.get("name")).strip()
    if not name:
        raise RegistryError(f"Flag entry without a name: {entry!r}")
    default = _text(entry.get("default"))
    return FlagDescriptor(
        name=name,
        type=_text(entry.get("type")),
        default_value=default,
        current_value=_text(entry["current"]) if "current" in entry else default,
        description=_text(entry.get("description")),
        filename=_text(entry.get("file")),
    )


def _parse(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(path.read_text(encoding="utf-8"))
        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise RegistryError(f"Cannot parse {path}: {exc}") from exc
    raise RegistryError(f"Unsupported registry format '{suffix}' (expected .json or .toml)")


def load_registry(path: Path) -> Registry:
    """Load a registry dump file.

    Raises:
        FileNotFoundError: if *path* does not exist.
        RegistryError: if the file cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Registry not found: {path}")
    raw = _parse(path)

    program = ""
    entries = raw
    if isinstance(raw, dict):
        program = _text(raw.get("program"))
        entries = raw.get("flags", [])
    if not isinstance(entries, list):
        raise RegistryError(f"{path}: 'flags' must be a list")

    return Registry(program=program, flags=take_snapshot(flag_from_dict(e) for e in entries))


# ---------------------------------------------------------------------------
# click / typer applications
# ---------------------------------------------------------------------------

_CLICK_TYPE_NAMES = {
    "text": "string",
    "boolean": "bool",
    "integer": "int32",
    "float": "double",
}


def _option_name(option: click.Option) -> str:
    long_opts = [o for o in option.opts if o.startswith("--")]
    if long_opts:
        return max(long_opts, key=len).lstrip("-")
    return option.opts[0].lstrip("-") if option.opts else (option.name or "")


def _default_text(option: click.Option) -> str:
    default = option.default
    if callable(default):
        return ""
    if isinstance(default, (list, tuple)):
        return ",".join(_text(v) for v in default)
    return _text(default)


def _source_file(command: click.Command) -> str:
    if command.callback is None:
        return ""
    try:
        source = inspect.getsourcefile(inspect.unwrap(command.callback))
    except TypeError:
        return ""
    return Path(source).as_posix() if source else ""


def _is_option(param: click.Parameter) -> bool:
    # typer may build on its own bundled click, so match by shape, not class.
    return getattr(param, "param_type_name", None) == "option"


def _subcommands(command: click.Command) -> dict[str, click.Command]:
    return getattr(command, "commands", None) or {}


def _collect(command: click.Command, out: list[FlagDescriptor]) -> None:
    filename = _source_file(command)
    for param in command.params:
        if not _is_option(param):
            continue
        default = _default_text(param)
        out.append(
            FlagDescriptor(
                name=_option_name(param),
                type=_CLICK_TYPE_NAMES.get(param.type.name, param.type.name),
                default_value=default,
                current_value=default,
                description=param.help or "",
                filename=filename,
            )
        )
    subcommands = _subcommands(command)
    for name in sorted(subcommands):
        _collect(subcommands[name], out)


def flags_from_click(command: click.Command) -> Snapshot:
    """Snapshot every option of *command* and its subcommands."""
    out: list[FlagDescriptor] = []
    _collect(command, out)
    return take_snapshot(out)


def load_app(spec: str) -> Registry:
    """Import ``module:attr`` and snapshot the click/typer app it names.

    The program name is the stem of the module's file, which is where the
    app's own options are usually declared.
    """
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise RegistryError(f"Expected 'module:attr', got {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise RegistryError(f"Cannot import '{module_name}': {exc}") from exc
    try:
        obj = getattr(module, attr)
    except AttributeError as exc:
        raise RegistryError(f"Module '{module_name}' has no attribute '{attr}'") from exc

    if isinstance(obj, typer.Typer):
        command = typer.main.get_command(obj)
    elif isinstance(obj, click.Command) or (hasattr(obj, "params") and hasattr(obj, "callback")):
        command = obj
    else:
        raise RegistryError(f"'{spec}' is not a typer app or click command")

    module_file = getattr(module, "__file__", None)
    program = Path(module_file).stem if module_file else module_name.rpartition(".")[2]
    return Registry(program=program, flags=flags_from_click(command))
