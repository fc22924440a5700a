"""tabflags: bash-style tab completion for command-line flags.

Given a partially typed word and a snapshot of every flag a program has
registered, tabflags finds the matching flags, ranks them by how likely they
are to belong to the program being completed, and prints a column-bounded
listing (or a shared-prefix shortcut) for the shell to display.
"""

__version__ = "0.1.0"

from loguru import logger

# Library use stays silent until setup_logger() is called.
logger.disable("tabflags")
