"""main.py – Umbrella CLI entry point for tabflags.

Imports every subcommand module by name and registers its typer app.

Single-command modules are registered as flat ``app.command()`` entries;
only true multi-command modules (currently only ``cfg``) use
``add_typer()``.
"""

import importlib

import typer

app = typer.Typer(
    help="Bash-style tab completion for command-line flags.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Typical workflow:[/bold]
  tabflags show -r flags.json            List the flags a program registers
  tabflags complete -r flags.json -w he  What bash sees for '--he<TAB>'
  tabflags cfg set completion.columns 120

[dim]All subcommands read settings from the nearest tabflags.toml.
Run 'tabflags <cmd> --help' for details.[/dim]""",
)

# ---------------------------------------------------------------------------
# Subcommand registry
# ---------------------------------------------------------------------------

_SINGLE_COMMANDS: list[tuple[str, str, str]] = [
    ("complete", "tabflags.complete", "Print bash completions for a partially typed flag."),
    ("show", "tabflags.show", "Inspect a flag registry snapshot."),
]

_MULTI_COMMANDS: list[tuple[str, str, str]] = [
    ("cfg", "tabflags.cfg", "Read and edit tabflags.toml programmatically."),
]


for _name, _module, _help in _SINGLE_COMMANDS:
    _mod = importlib.import_module(_module)
    _epilog = getattr(_mod.app.info, "epilog", None)
    if not isinstance(_epilog, str):
        _epilog = None
    app.command(name=_name, help=_help, epilog=_epilog)(_mod.main)

for _name, _module, _help in _MULTI_COMMANDS:
    _mod = importlib.import_module(_module)
    app.add_typer(_mod.app, name=_name, help=_help)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
