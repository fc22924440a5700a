"""Guess which source file "is" the running program.

Nothing links a flag registry to the binary that linked it in, so the
module is found by naming convention: the first flag (in snapshot order)
whose defining file looks like ``.../<program>.<ext>``,
``.../<program>_main.<ext>``, ``.../<program>_test.<ext>`` and so on.

Several directories can share the same trailing file name, in which case
the earliest flag wins arbitrarily.
"""

from __future__ import annotations

from loguru import logger

from tabflags.flags import Snapshot

PATH_SEPARATOR = "/"

_SUFFIXES = (".", "-main.", "_main.", "-test.", "_test.", "-unittest.", "_unittest.")


def module_suffixes(program_name: str) -> list[str]:
    """Return the file-name fragments that mark *program_name*'s own module."""
    return [f"{PATH_SEPARATOR}{program_name}{suffix}" for suffix in _SUFFIXES]


def find_module_and_package_dir(snapshot: Snapshot, program_name: str) -> tuple[str, str]:
    """Return ``(module, package_dir)``; both empty when nothing matches."""
    suffixes = module_suffixes(program_name)
    for flag in snapshot:
        for suffix in suffixes:
            # TODO: require the suffix to sit near the end of the path.
            if suffix in flag.filename:
                module = flag.filename
                sep = module.rfind(PATH_SEPARATOR)
                package_dir = module[:sep] if sep >= 0 else ""
                logger.debug("Identified module: '{}'", module)
                logger.debug("Identified package_dir: '{}'", package_dir)
                return module, package_dir
    logger.debug("No module found for program '{}'", program_name)
    return "", ""
