"""tabflags cfg: Programmatic editor for tabflags.toml.

Uses tomlkit for format-preserving round-trip editing (comments,
ordering, and whitespace are retained).

Usage::

    tabflags cfg path
    tabflags cfg show [KEY]
    tabflags cfg set completion.columns 120
    tabflags cfg set completion.registry build/flags.json
"""

import contextlib
from pathlib import Path

import tomlkit
import typer

from tabflags.config import CONFIG_NAME, find_root

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _config_path(create: bool = False) -> Path:
    """Return the nearest tabflags.toml, or one in the cwd if *create*."""
    root = find_root()
    if root is not None:
        return root / CONFIG_NAME
    if create:
        return Path.cwd() / CONFIG_NAME
    typer.secho(
        f"Error: Could not find {CONFIG_NAME} in any parent directory.\n"
        "Set a value with 'tabflags cfg set KEY VALUE' to create one here.",
        fg=typer.colors.RED,
        err=True,
    )
    raise typer.Exit(code=1)


def _load_toml(path: Path) -> tomlkit.TOMLDocument:
    """Load *path* as a tomlkit document, preserving formatting."""
    if not path.exists():
        return tomlkit.document()
    return tomlkit.parse(path.read_text(encoding="utf-8"))


def _save_toml(doc: tomlkit.TOMLDocument, path: Path) -> None:
    """Write tomlkit document back, preserving formatting."""
    path.write_text(tomlkit.dumps(doc), encoding="utf-8")


def _coerce(value: str) -> str | int | float | bool:
    """Turn a command-line string into a bool, int or float where it looks like one."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    with contextlib.suppress(ValueError):
        return int(value)
    with contextlib.suppress(ValueError):
        return float(value)
    return value


# ---------------------------------------------------------------------------
# Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="Read and edit tabflags.toml programmatically.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]
  tabflags cfg path                              Print path to tabflags.toml
  tabflags cfg show                              Print the whole file
  tabflags cfg show completion.columns           Read a config value
  tabflags cfg set completion.columns 120        Set a config value
  tabflags cfg set logging.level DEBUG           Turn on debug logging

[dim]Supports dotted key paths for nested TOML tables.
'set' creates tabflags.toml in the current directory if none exists.[/dim]""",
)


@app.command("path")
def show_path() -> None:
    """Print the path of the tabflags.toml in effect."""
    typer.echo(str(_config_path()))


@app.command("show")
def show(
    key: str | None = typer.Argument(
        None, help="Dot-separated key to show, e.g. 'completion.columns'"
    ),
) -> None:
    """Show the current config, or a specific key."""
    doc = _load_toml(_config_path())

    if key is None:
        typer.echo(tomlkit.dumps(doc))
        return

    current = doc
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            typer.secho(f"Key '{key}' not found.", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    if isinstance(current, dict):
        typer.echo(tomlkit.dumps(current))
    else:
        typer.echo(str(current))


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Dot-separated key, e.g. 'completion.columns'."),
    value: str = typer.Argument(..., help="Value to set."),
) -> None:
    """Set a scalar config key."""
    path = _config_path(create=True)
    doc = _load_toml(path)

    parts = key.split(".")
    current = doc
    for part in parts[:-1]:
        if part not in current:
            current[part] = tomlkit.table()
        current = current[part]

    parsed_value = _coerce(value)
    current[parts[-1]] = parsed_value
    _save_toml(doc, path)
    typer.secho(f"Set {key} = {parsed_value!r}", fg=typer.colors.GREEN)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main_entry() -> None:
    app()


if __name__ == "__main__":
    main_entry()
