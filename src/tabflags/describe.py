"""Single-flag help text, in the registry's ``--help`` layout.

The output looks like::

    -name (description that may wrap onto further lines, each indented by
      six spaces) type: string default: "abc" currently: "xyz"

and always ends with a newline.  The long completion format edits this text
in place, so the ``-<name>``, `` type:`` and `` default:`` markers must stay
recognisable.
"""

from __future__ import annotations

from tabflags.flags import FlagDescriptor

LINE_LENGTH = 80
_CONTINUATION = "\n      "


def _add_field(text: str, chars_in_line: int, field: str) -> tuple[str, int]:
    """Append *field*, breaking the line first if it would reach LINE_LENGTH."""
    if chars_in_line + 1 + len(field) >= LINE_LENGTH:
        return text + _CONTINUATION + field, len(_CONTINUATION) - 1 + len(field)
    return text + " " + field, chars_in_line + 1 + len(field)


def _quoted(flag: FlagDescriptor, label: str, value: str) -> str:
    if flag.is_string:
        return f'{label}: "{value}"'
    return f"{label}: {value}"


def _wrap_main_part(main_part: str) -> tuple[str, int]:
    """Word-wrap *main_part*, honouring embedded newlines.

    Returns the wrapped text and the column reached on its last line.
    """
    out = ""
    rest = main_part
    chars_in_line = 0
    while True:
        newline = rest.find("\n")
        if newline < 0 and chars_in_line + len(rest) < LINE_LENGTH:
            out += rest
            chars_in_line += len(rest)
            break
        if 0 <= newline < LINE_LENGTH - chars_in_line:
            out += rest[:newline]
            rest = rest[newline + 1 :]
        else:
            # Break at the last whitespace that still fits on this line.
            cut = LINE_LENGTH - chars_in_line - 1
            while cut > 0 and not (cut < len(rest) and rest[cut].isspace()):
                cut -= 1
            if cut <= 0:
                # No usable whitespace; dump the remainder on this line.
                out += rest
                chars_in_line = LINE_LENGTH
                break
            out += rest[:cut]
            chars_in_line += cut
            while cut < len(rest) and rest[cut].isspace():
                cut += 1
            rest = rest[cut:]
        if not rest:
            break
        out += _CONTINUATION
        chars_in_line = len(_CONTINUATION) - 1
    return out, chars_in_line


def describe_flag(flag: FlagDescriptor) -> str:
    """Return the multi-line help entry for *flag*."""
    text, chars_in_line = _wrap_main_part(f"    -{flag.name} ({flag.description})")
    text, chars_in_line = _add_field(text, chars_in_line, f"type: {flag.type}")
    text, chars_in_line = _add_field(
        text, chars_in_line, _quoted(flag, "default", flag.default_value)
    )
    if not flag.is_default:
        text, chars_in_line = _add_field(
            text, chars_in_line, _quoted(flag, "currently", flag.current_value)
        )
    return text + "\n"
