"""Per-flag completion lines.

Short lines fit on one terminal row::

    --verbose [false] Print extra diagnostics while running the...

Long lines hold the full help entry.  Bash prints each completion on a row
of its own and would mangle embedded newlines, so every line break is
replaced by enough spaces to reach the next multiple of the column width;
the terminal then wraps the text exactly where the breaks were.
"""

from __future__ import annotations

from collections.abc import Callable

from tabflags.describe import describe_flag
from tabflags.flags import FlagDescriptor

Describer = Callable[[FlagDescriptor], str]

_ELLIPSIS = "..."
_NEWLINE_WITH_INDENT = "\n    "
_DOUBLED_NEWLINES = "\n     \n"


def short_line(indent: str, flag: FlagDescriptor, columns: int) -> str:
    """Return ``--name [default] description``, trimmed to *columns*."""
    quote = "'" if flag.is_string else ""
    prefix = f"{indent}--{flag.name} [{quote}{flag.default_value}{quote}] "
    remainder = columns - len(prefix)
    if remainder <= 0:
        return prefix
    description = flag.description
    if len(description) > remainder:
        # With under 3 columns left the ellipsis alone overruns the row.
        description = description[: max(remainder - 3, 0)] + _ELLIPSIS
    return prefix + description


def _replace_first(text: str, old: str, new: str) -> str:
    """Replace the first *old* in *text*; leave *text* alone if it is absent."""
    pos = text.find(old)
    if pos < 0:
        return text
    return text[:pos] + new + text[pos + len(old) :]


def reflow(text: str, columns: int) -> str:
    """Turn every newline into padding up to the next column boundary."""
    pad = " " * max(columns - 1, 0)
    newline = text.find("\n")
    while newline >= 0:
        missing = columns - newline % columns
        text = text[:newline] + pad[:missing] + text[newline + 1 :]
        newline = text.find("\n")
    return text


def long_line(
    indent: str,
    flag: FlagDescriptor,
    columns: int,
    describe: Describer = describe_flag,
) -> str:
    """Return the full help entry for *flag* as one pre-wrapped line."""
    output = describe(flag)
    output = _replace_first(output, f"-{flag.name}", f"--{flag.name}")
    output = _replace_first(output, " type:", _NEWLINE_WITH_INDENT + "type:")
    output = _replace_first(output, " default:", _NEWLINE_WITH_INDENT + "default:")
    output = (
        f"{indent} Details for '--{flag.name}':\n"
        f"{output}    defined: {flag.filename}"
    )

    # A break inserted right after one the describer already made leaves a
    # blank, space-only line behind.
    while _DOUBLED_NEWLINES in output:
        output = output.replace(_DOUBLED_NEWLINES, "\n", 1)

    return reflow(output, columns)
