"""show.py – Inspect a flag registry snapshot.

Without a NAME, prints a Rich table of every flag in the snapshot.  With a
NAME, prints that flag's help entry together with the ownership group
completion would put it in.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tabflags.cli import (
    AppOption,
    RegistryOption,
    VerboseOption,
    error_exit,
    get_config,
    init_logging,
    json_print,
    load_flags,
    program_name,
)
from tabflags.completion.buckets import categorize
from tabflags.completion.engine import program_short_name
from tabflags.completion.ownership import find_module_and_package_dir
from tabflags.describe import describe_flag
from tabflags.flags import FlagDescriptor

_RELEVANCE_LABELS = {
    "module": "module",
    "package": "package",
    "subpackage": "sub-package",
}


def relevance_of(flag: FlagDescriptor, module: str, package_dir: str) -> str:
    """Return which ownership group *flag* falls in, or ``"other"``."""
    # An empty token keeps the perfect-match group out of the way.
    notable = categorize({flag.name: flag}, "", module, package_dir)
    for attr, label in _RELEVANCE_LABELS.items():
        if flag.name in getattr(notable, attr):
            return label
    return "other"


def flag_to_dict(flag: FlagDescriptor, relevance: str) -> dict[str, object]:
    """Serialize *flag* to a plain dict for JSON output."""
    return {
        "name": flag.name,
        "type": flag.type,
        "default": flag.default_value,
        "current": flag.current_value,
        "is_default": flag.is_default,
        "description": flag.description,
        "file": flag.filename,
        "relevance": relevance,
    }


def _render_table(console: Console, flags: list[FlagDescriptor], relevance: dict[str, str]) -> None:
    tbl = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    tbl.add_column("Flag")
    tbl.add_column("Type", style="dim")
    tbl.add_column("Default")
    tbl.add_column("Group")
    tbl.add_column("Defined in", style="dim")
    for flag in flags:
        tbl.add_row(
            f"--{flag.name}",
            flag.type,
            flag.default_value,
            relevance[flag.name],
            flag.filename,
        )
    console.print(tbl)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="Inspect a flag registry snapshot.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

tabflags show -r flags.json                 Table of every flag

tabflags show -r flags.json port            Help entry for --port

tabflags show --app myapp.cli:app --json    Machine-readable JSON output

[dim]The 'Group' column shows how completion ranks each flag for the
program named by --program (or the registry / tabflags.toml).[/dim]""",
)


@app.callback(invoke_without_command=True)
def main(
    name: str | None = typer.Argument(None, help="Flag to describe (without dashes)."),
    registry: Path | None = RegistryOption,
    app_spec: str | None = AppOption,
    program: str | None = typer.Option(
        None, "--program", "-p", help="Short name of the program the flags belong to."
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    verbose: int = VerboseOption,
) -> None:
    """Show the flags in a registry, or the details of one flag."""
    cfg = get_config(json_mode=json_output)
    init_logging(cfg, verbose)
    reg = load_flags(registry, app_spec, cfg, json_mode=json_output)

    prog = program_name(program, cfg, reg) or program_short_name()
    module, package_dir = find_module_and_package_dir(reg.flags, prog)
    relevance = {f.name: relevance_of(f, module, package_dir) for f in reg.flags}

    if name is not None:
        name = name.lstrip("-")
        flag = next((f for f in reg.flags if f.name == name), None)
        if flag is None:
            error_exit(f"No flag named '--{name}' in the registry", json_mode=json_output)
        if json_output:
            json_print(flag_to_dict(flag, relevance[flag.name]))
            return
        console = Console()
        body = describe_flag(flag).rstrip("\n") + f"\n      defined: {flag.filename}"
        console.print(
            Panel(
                Text(body),
                title=f"[bold]--{flag.name}[/]",
                subtitle=f"{relevance[flag.name]} flag of '{prog}'",
                border_style="blue",
            )
        )
        return

    flags = sorted(reg.flags, key=lambda f: f.name)
    if json_output:
        json_print(
            {
                "program": prog,
                "module": module,
                "package_dir": package_dir,
                "flags": [flag_to_dict(f, relevance[f.name]) for f in flags],
            }
        )
        return

    _render_table(Console(), flags, relevance)


def main_entry() -> None:
    """Run the show CLI app."""
    app()


if __name__ == "__main__":
    main_entry()
