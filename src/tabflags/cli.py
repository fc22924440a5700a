"""Shared CLI utilities for tabflags commands.

Provides common Typer options, config/registry loading helpers, and
standardised output / error helpers so that every command gets consistent
``--registry`` / ``--app`` support and error reporting without boilerplate.

Usage in a command::

    import typer
    from tabflags.cli import AppOption, RegistryOption, get_config, load_flags

    app = typer.Typer()

    @app.command()
    def main(registry: Path | None = RegistryOption, app_spec: str | None = AppOption) -> None:
        cfg = get_config()
        reg = load_flags(registry, app_spec, cfg)
        ...
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from tabflags.config import CompletionConfig, load_config
from tabflags.log import setup_logger, verbosity_level
from tabflags.registry import Registry, RegistryError, load_app, load_registry

RegistryOption: Path | None = typer.Option(
    None,
    "--registry",
    "-r",
    help="Flag dump (.json or .toml). Default: [completion] registry in tabflags.toml.",
)

AppOption: str | None = typer.Option(
    None,
    "--app",
    "-a",
    help="Snapshot a typer/click app instead of a dump file, as 'module:attr'.",
)

VerboseOption: int = typer.Option(
    0,
    "--verbose",
    "-v",
    count=True,
    help="Log pipeline decisions to stderr (-vv for every flag).",
)


# ---------------------------------------------------------------------------
# Standardised output helpers
# ---------------------------------------------------------------------------

_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {escape(msg)}")
    raise typer.Exit(code=code)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))


# ---------------------------------------------------------------------------
# Config / registry helpers
# ---------------------------------------------------------------------------


def get_config(*, json_mode: bool = False) -> CompletionConfig:
    """Load tabflags.toml, exiting on an invalid file."""
    try:
        return load_config()
    except (ValueError, OSError) as exc:
        error_exit(str(exc), json_mode=json_mode)


def init_logging(cfg: CompletionConfig, verbose: int) -> None:
    """Set up loguru from *cfg*, raised to DEBUG/TRACE by ``-v`` flags."""
    level = verbosity_level(verbose, default=cfg.log_level)
    setup_logger(
        log_level=level,
        console_output=verbose > 0,
        log_file=str(cfg.log_file) if cfg.log_file else None,
    )


def load_flags(
    registry: Path | None,
    app_spec: str | None,
    cfg: CompletionConfig,
    *,
    json_mode: bool = False,
) -> Registry:
    """Read the flag snapshot from ``--app``, ``--registry`` or the config."""
    if registry is not None and app_spec is not None:
        error_exit("--registry and --app are mutually exclusive", json_mode=json_mode)
    try:
        if app_spec is not None:
            return load_app(app_spec)
        path = registry if registry is not None else cfg.registry
        if path is None:
            error_exit(
                "No flag registry given. Pass --registry/--app or set "
                "[completion] registry in tabflags.toml.",
                json_mode=json_mode,
            )
        return load_registry(path)
    except (FileNotFoundError, RegistryError) as exc:
        error_exit(str(exc), json_mode=json_mode)


def program_name(option: str | None, cfg: CompletionConfig, reg: Registry) -> str | None:
    """Pick the program name: CLI option, then config, then the registry.

    Returns None when none of them names one, leaving the engine to fall
    back to ``argv[0]``.
    """
    return option or cfg.program or reg.program or None
