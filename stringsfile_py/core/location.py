from __future__ import annotations

from .errors import Location

NEWLINES = frozenset("\n\r\u2028\u2029")


def locate(text: str, offset: int) -> Location:
    """Map a code-point *offset* in *text* to a zero-based line and column.

    ``\\r\\n`` is one line break; any other newline code point starts a line.
    """
    line = 0
    column = 0
    prev = ""
    for ch in text[:offset]:
        if ch in NEWLINES:
            if not (ch == "\n" and prev == "\r"):
                line += 1
            column = 0
        else:
            column += 1
        prev = ch
    return Location(scalar_index=offset, line=line, column=column)
