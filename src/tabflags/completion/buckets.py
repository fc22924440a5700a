"""Relevance classification of matching flags."""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from tabflags.completion.matching import MatchSet
from tabflags.completion.ownership import PATH_SEPARATOR


@dataclass
class NotableFlags:
    """Flags that are preferred for some reason, in precedence order.

    A flag placed in a higher set is never placed in a lower one.
    ``most_common`` has no source of data yet and is always empty.
    """

    perfect_match: MatchSet = field(default_factory=dict)
    module: MatchSet = field(default_factory=dict)  # defined in the module file
    package: MatchSet = field(default_factory=dict)  # same directory as the module
    most_common: MatchSet = field(default_factory=dict)
    subpackage: MatchSet = field(default_factory=dict)  # below the package directory

    def groups(self) -> list[MatchSet]:
        return [self.perfect_match, self.module, self.package, self.most_common, self.subpackage]

    def __contains__(self, name: object) -> bool:
        return any(name in group for group in self.groups())

    def unused(self, matches: MatchSet) -> MatchSet:
        """Return the matches that landed in no notable set."""
        return {name: flag for name, flag in matches.items() if name not in self}


def categorize(
    matches: MatchSet,
    token: str,
    module: str,
    package_dir: str,
) -> NotableFlags:
    """Sort *matches* into :class:`NotableFlags` by likely relevance.

    *module* and *package_dir* may be empty when ownership is unknown, in
    which case only exact name matches are notable.
    """
    notable = NotableFlags()
    for name, flag in matches.items():
        logger.trace("Examining match '{}' (filename: '{}')", name, flag.filename)
        pos = flag.filename.find(package_dir) if package_dir else -1
        slash = -1
        if pos >= 0:
            slash = flag.filename.find(PATH_SEPARATOR, pos + len(package_dir) + 1)

        if name == token:
            notable.perfect_match[name] = flag
            logger.trace("Result: perfect match")
        elif module and flag.filename == module:
            notable.module[name] = flag
            logger.trace("Result: module match")
        elif pos >= 0 and slash < 0:
            notable.package[name] = flag
            logger.trace("Result: package match")
        elif pos >= 0:
            notable.subpackage[name] = flag
            logger.trace("Result: subpackage match")
        else:
            logger.trace("Result: not special match")

    logger.debug(
        "Categorized matching flags: perfect_match={} module={} package={} "
        "most_common={} subpackage={}",
        len(notable.perfect_match),
        len(notable.module),
        len(notable.package),
        len(notable.most_common),
        len(notable.subpackage),
    )
    return notable
