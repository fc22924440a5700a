"""Bash-style flag completion, end to end.

The pipeline runs once per tab-press:

1. Canonicalise the cursor word and read search hints from its suffix.
2. Find every matching flag.  With no matches, output nothing; if all
   matches share a prefix longer than the word, output just that prefix.
3. Sort matches into relevance groups using the program's own module.
4. Trim the groups to a line budget bash is happy to show.
5. Render the groups, most relevant first.

:func:`complete` does all of this without side effects;
:func:`handle_completions` prints the result and ends the process.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from loguru import logger

from tabflags.completion.buckets import categorize
from tabflags.completion.compose import DEFAULT_MAX_LINES, finalize_output
from tabflags.completion.matching import find_matching_flags
from tabflags.completion.ownership import find_module_and_package_dir
from tabflags.completion.render import Describer
from tabflags.completion.token import canonicalize
from tabflags.describe import describe_flag
from tabflags.flags import FlagDescriptor, take_snapshot

DEFAULT_COLUMNS = 80

NO_UPDATE_SENTINEL = "~"


@dataclass
class CompletionResult:
    """Lines to print, plus what the pipeline decided along the way."""

    lines: list[str] = field(default_factory=list)
    force_no_update: bool = False
    shortcut: str | None = None


def program_short_name() -> str:
    """Return the invoked program's base name, like ``argv[0]`` without dirs."""
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""


def complete(
    cursor_word: str,
    flags: Iterable[FlagDescriptor],
    *,
    program_name: str | None = None,
    columns: int = DEFAULT_COLUMNS,
    max_lines: int = DEFAULT_MAX_LINES,
    describe: Describer = describe_flag,
) -> CompletionResult:
    """Compute the completion output for *cursor_word* over *flags*.

    *flags* is read exactly once.  *program_name* defaults to the running
    program's short name and drives the module/package guess.
    """
    result = CompletionResult()
    if not cursor_word:
        return result

    token, options = canonicalize(cursor_word)

    snapshot = take_snapshot(flags)
    logger.debug("Found {} flags overall", len(snapshot))

    matches, prefix = find_matching_flags(snapshot, options, token)
    if len(prefix) > len(token):
        # Every match shares a longer prefix; let bash fill it in.
        logger.debug(
            "The common prefix '{}' was longer than the token '{}'. "
            "Returning just this prefix for completion.",
            prefix,
            token,
        )
        result.shortcut = prefix
        result.lines.append(f"--{prefix}")
        return result
    if not matches:
        logger.debug("There were no matching flags, returning nothing.")
        return result

    if program_name is None:
        program_name = program_short_name()
    module, package_dir = find_module_and_package_dir(snapshot, program_name)
    notable = categorize(matches, token, module, package_dir)

    result.lines = finalize_output(
        matches,
        options,
        notable,
        columns=columns,
        max_lines=max_lines,
        describe=describe,
    )
    result.force_no_update = options.force_no_update
    if options.force_no_update:
        result.lines.append(NO_UPDATE_SENTINEL)

    for line in result.lines:
        logger.trace("  Completion entry: '{}'", line)
    return result


def write_completions(result: CompletionResult, out: TextIO | None = None) -> None:
    """Write *result* to *out* (stdout by default), one completion per line."""
    stream = out if out is not None else sys.stdout
    for line in result.lines:
        stream.write(line + "\n")
    stream.flush()


def handle_completions(
    cursor_word: str,
    flags: Iterable[FlagDescriptor],
    *,
    program_name: str | None = None,
    columns: int = DEFAULT_COLUMNS,
    max_lines: int = DEFAULT_MAX_LINES,
    describe: Describer = describe_flag,
    out: TextIO | None = None,
) -> None:
    """Print completions for *cursor_word* and exit the process.

    Does nothing and returns when *cursor_word* is empty, so a program can
    call this unconditionally right after parsing its command line.
    """
    if not cursor_word:
        return
    result = complete(
        cursor_word,
        flags,
        program_name=program_name,
        columns=columns,
        max_lines=max_lines,
        describe=describe,
    )
    write_completions(result, out)
    raise SystemExit(0)
