"""Cursor-word canonicalisation.

Trailing marker characters on the word being completed widen the search:

====  ==========================================================
``?``   also match flags whose *name* contains the word anywhere
``??``  ... or whose defining *file* contains it
``???`` ... or whose *description* contains it
``+``   list every match instead of trimming to the line budget
====  ==========================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

_MAX_QUESTION_MARKS = 3
_MAX_PLUSSES = 1


@dataclass
class SearchOptions:
    """Search behaviour deduced from the cursor word.

    ``force_no_update`` is the only field written after canonicalisation:
    the output stage sets it once every match has been listed, telling the
    shell not to collapse the listing into the common prefix of its lines.
    """

    name_substring: bool = False
    location_substring: bool = False
    description_substring: bool = False
    return_all: bool = False
    force_no_update: bool = False


def _remove_trailing_char(word: str, char: str) -> tuple[str, bool]:
    if word.endswith(char):
        return word[:-1], True
    return word, False


def canonicalize(cursor_word: str) -> tuple[str, SearchOptions]:
    """Split *cursor_word* into the canonical search token and its options.

    Strips one leading double quote, every leading dash, and up to three
    trailing ``?`` plus one trailing ``+`` in any order.
    """
    options = SearchOptions()
    token = cursor_word
    if not token:
        return token, options

    if token.startswith('"'):
        token = token[1:]
    token = token.lstrip("-")

    question_marks = 0
    plusses = 0
    while True:
        if question_marks < _MAX_QUESTION_MARKS:
            token, removed = _remove_trailing_char(token, "?")
            if removed:
                question_marks += 1
                continue
        if plusses < _MAX_PLUSSES:
            token, removed = _remove_trailing_char(token, "+")
            if removed:
                plusses += 1
                continue
        break

    options.name_substring = question_marks > 0
    options.location_substring = question_marks > 1
    options.description_substring = question_marks > 2
    options.return_all = plusses > 0

    logger.debug("Identified canonical token: '{}'", token)
    return token, options
