"""complete.py – Print bash completions for a partially typed flag.

This is what a shell completion hook runs on every tab-press: it reads the
target program's flag snapshot, runs the completion pipeline over the word
under the cursor, and prints the resulting lines to stdout.
"""

from pathlib import Path

import typer

from tabflags.cli import (
    AppOption,
    RegistryOption,
    VerboseOption,
    get_config,
    init_logging,
    load_flags,
    program_name,
)
from tabflags.completion import complete
from tabflags.completion.engine import write_completions

app = typer.Typer(
    help="Print bash completions for a partially typed flag.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

tabflags complete -r flags.json -w he             Flags starting with 'he'

tabflags complete -r flags.json -w 'port?'        Names containing 'port'

tabflags complete -r flags.json -w 'net??'        ... or defined in a file matching 'net'

tabflags complete -r flags.json -w 'tls???'       ... or described with 'tls'

tabflags complete -r flags.json -w 'log+'         Every match, no line budget

tabflags complete --app myapp.cli:app --word=--ver  Options of a typer/click app

[dim]An empty --word prints nothing.  Output is meant for bash's 'complete -C'
style hooks: one completion per line, most relevant group first.[/dim]""",
)


@app.callback(invoke_without_command=True)
def main(
    word: str = typer.Option(
        "", "--word", "-w", help="Word under the cursor, with optional ?/+ markers."
    ),
    registry: Path | None = RegistryOption,
    app_spec: str | None = AppOption,
    program: str | None = typer.Option(
        None, "--program", "-p", help="Short name of the program being completed."
    ),
    columns: int | None = typer.Option(
        None, "--columns", "-c", min=1, help="Terminal width used for trimming and wrapping."
    ),
    max_lines: int | None = typer.Option(
        None, "--max-lines", min=1, help="Line budget when '+' is not given."
    ),
    verbose: int = VerboseOption,
) -> None:
    """Print completion candidates for the word under the cursor."""
    if not word:
        return

    cfg = get_config()
    init_logging(cfg, verbose)
    reg = load_flags(registry, app_spec, cfg)

    result = complete(
        word,
        reg.flags,
        program_name=program_name(program, cfg, reg),
        columns=columns if columns is not None else cfg.columns,
        max_lines=max_lines if max_lines is not None else cfg.max_lines,
    )
    write_completions(result)


def main_entry() -> None:
    """Run the complete CLI app."""
    app()


if __name__ == "__main__":
    main_entry()
