"""Choose which groups of flags to show and lay them out.

Output is built in groups ordered by relevance.  Each group's lines share
an indentation, and earlier groups are indented further: bash sorts the
completion lines it is given, and leading spaces sort first, so this is
what keeps the most relevant group at the top.

Unless every match was requested, output is capped at a line budget so
bash shows the list without asking the user first.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from tabflags.completion.buckets import NotableFlags
from tabflags.completion.matching import MatchSet
from tabflags.completion.render import Describer, long_line, short_line
from tabflags.completion.token import SearchOptions
from tabflags.describe import describe_flag

DEFAULT_MAX_LINES = 98
UNLIMITED_LINES = 999999

HIDDEN_SENTINEL = "~ (Remaining flags hidden) ~"


@dataclass
class DisplayGroup:
    """One block of output: optional header, flag lines, optional footer."""

    header: str
    footer: str
    flags: MatchSet

    def size_in_lines(self) -> int:
        size = len(self.flags) + 1
        if self.header:
            size += 1
        if self.footer:
            size += 1
        return size


def _banner(title: str) -> tuple[str, str]:
    header = f"-* {title} *-"
    return header, "=" * len(header)


def select_groups(notable: NotableFlags, matches: MatchSet, max_lines: int) -> list[DisplayGroup]:
    """Pick the groups to show, stopping once their sizes reach *max_lines*."""
    groups: list[DisplayGroup] = []
    lines_so_far = 0

    if notable.perfect_match:
        group = DisplayGroup("", "=" * 10, notable.perfect_match)
        lines_so_far += group.size_in_lines()
        groups.append(group)

    candidates = [
        ("Matching module flags", notable.module),
        ("Matching package flags", notable.package),
        ("Commonly used flags", notable.most_common),
        ("Matching sub-package flags", notable.subpackage),
    ]
    for title, flags in candidates:
        if lines_so_far < max_lines and flags:
            header, footer = _banner(title)
            group = DisplayGroup(header, footer, flags)
            lines_so_far += group.size_in_lines()
            groups.append(group)

    if lines_so_far < max_lines:
        obscure = notable.unused(matches)
        if obscure:
            group = DisplayGroup("-* Other flags *-", "", obscure)
            lines_so_far += group.size_in_lines()
            groups.append(group)

    return groups


@dataclass
class _Budget:
    remaining_lines: int
    flags_output: int = 0


def _output_group(
    group: DisplayGroup,
    indent: str,
    long_format: bool,
    budget: _Budget,
    columns: int,
    describe: Describer,
    completions: list[str],
) -> None:
    """Append as much of *group* as the remaining budget allows."""
    if not group.flags:
        return
    if group.header:
        if budget.remaining_lines < 2:
            return
        budget.remaining_lines -= 2
        completions.append(indent + group.header)
        completions.append(indent + "-" * len(group.header))
    for name in sorted(group.flags):
        if budget.remaining_lines <= 0:
            break
        budget.remaining_lines -= 1
        budget.flags_output += 1
        flag = group.flags[name]
        if long_format:
            completions.append(long_line(indent, flag, columns, describe))
        else:
            completions.append(short_line(indent, flag, columns))
    if group.footer:
        if budget.remaining_lines < 1:
            return
        budget.remaining_lines -= 1
        completions.append(indent + group.footer)


def finalize_output(
    matches: MatchSet,
    options: SearchOptions,
    notable: NotableFlags,
    *,
    columns: int,
    max_lines: int = DEFAULT_MAX_LINES,
    describe: Describer = describe_flag,
) -> list[str]:
    """Lay out the completion lines and decide ``options.force_no_update``.

    When some matches did not fit, a hidden-flags sentinel line closes the
    output and bash is left free to collapse it.
    """
    max_desired_lines = UNLIMITED_LINES if options.return_all else max_lines
    groups = select_groups(notable, matches, max_desired_lines)

    completions: list[str] = []
    budget = _Budget(remaining_lines=max_desired_lines)
    long_format = bool(notable.perfect_match)
    for indent, group in zip(range(len(groups) - 1, -1, -1), groups):
        _output_group(group, " " * indent, long_format, budget, columns, describe, completions)
        long_format = False

    if budget.flags_output != len(matches):
        options.force_no_update = False
        completions.append(HIDDEN_SENTINEL)
    else:
        options.force_no_update = True

    logger.debug("Finalized with {} chosen completions", len(completions))
    return completions
