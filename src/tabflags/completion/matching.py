"""Candidate matching and shared-prefix computation."""

from __future__ import annotations

from loguru import logger

from tabflags.completion.token import SearchOptions
from tabflags.flags import FlagDescriptor, Snapshot

MatchSet = dict[str, FlagDescriptor]


def flag_matches(flag: FlagDescriptor, options: SearchOptions, token: str) -> bool:
    """Return True if *flag* is a candidate for *token* under *options*."""
    pos = flag.name.find(token)
    if pos == 0:
        return True
    if options.name_substring and pos >= 0:
        return True
    if options.location_substring and token in flag.filename:
        return True
    # TODO: case-insensitive matching, at least for descriptions.
    if options.description_substring and token in flag.description:
        return True
    return False


def _common_prefix(a: str, b: str) -> str:
    pos = 0
    limit = min(len(a), len(b))
    while pos < limit and a[pos] == b[pos]:
        pos += 1
    return a[:pos]


def find_matching_flags(
    snapshot: Snapshot,
    options: SearchOptions,
    token: str,
) -> tuple[MatchSet, str]:
    """Collect every matching flag and the longest prefix their names share.

    Matches are keyed by name.  The prefix is accumulated in snapshot order;
    once any matching name is empty the prefix stays empty.
    """
    matches: MatchSet = {}
    prefix = ""
    first_match = True
    for flag in snapshot:
        if not flag_matches(flag, options, token):
            continue
        matches.setdefault(flag.name, flag)
        if first_match:
            first_match = False
            prefix = flag.name
        elif not prefix or not flag.name:
            prefix = ""
        else:
            prefix = _common_prefix(prefix, flag.name)

    logger.debug("Identified {} matching flags", len(matches))
    logger.debug("Identified '{}' as longest common prefix", prefix)
    return matches, prefix
