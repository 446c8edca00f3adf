"""Recursive-descent reader for the legacy property-list strings format.

The grammar is read over code points with one code point of lookahead (two
when telling ``//`` and ``/*`` apart from a lone ``/``, which is a valid
unquoted string).  Quoted strings that contain escapes are assembled as UTF-16
code units, so a ``\\UD83C\\UDF0D`` pair becomes one supplementary character.
"""

from __future__ import annotations

import os
import struct
from pathlib import Path

from .bom import resolve_encoding
from .errors import (
    DeserializationError,
    DeserializationErrorKind,
    FileReadError,
    UnicodeDecodingError,
)
from .location import NEWLINES, locate
from .model import Entry, StringsFile
from .text_decoding import decode_repairing, validate_utf16

_WHITESPACE = frozenset(" \t\v\f") | NEWLINES
_UNQUOTED = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$/:.-"
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_QUOTES = ('"', "'")
_CONTROL_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "f": 0x0C,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "v": 0x0B,
}
_COMMENT_TRIM = " \t"


class _ParseFailure(Exception):
    """Syntax error tagged with a code-point offset; never leaves this module."""

    def __init__(self, kind: DeserializationErrorKind, offset: int) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.offset = offset


def _utf16_units(chunk: str) -> list[int]:
    data = chunk.encode("utf-16-le", "surrogatepass")
    return [unit for (unit,) in struct.iter_unpack("<H", data)]


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.end = len(text)

    def peek(self, ahead: int = 0) -> str:
        idx = self.pos + ahead
        return self.text[idx] if idx < self.end else ""

    # ── entries ──────────────────────────────────────────────────────────────
    def parse_entries(self) -> list[Entry]:
        entries: list[Entry] = []
        while self.pos < self.end:
            comment = self.skip_trivia()
            if self.pos < self.end:
                key, value = self.parse_key_value()
                if comment is not None:
                    comment = comment.strip(_COMMENT_TRIM)
                entries.append(Entry(key, value, comment))
        return entries

    def parse_key_value(self) -> tuple[str, str]:
        key = self.parse_string()
        self.skip_trivia()
        nxt = self.peek()
        if nxt == ";":  # shortcut form, value repeats the key
            self.pos += 1
            return key, key
        if nxt == "=":
            self.pos += 1
            self.skip_trivia()
            value = self.parse_string()
            self.skip_trivia()
            if self.peek() != ";":
                raise _ParseFailure(
                    DeserializationErrorKind.EXPECTED_SEMICOLON_AFTER_KEY_VALUE,
                    self.pos,
                )
            self.pos += 1
            return key, value
        raise _ParseFailure(
            DeserializationErrorKind.EXPECTED_SEMICOLON_OR_EQUALS_SIGN_AFTER_KEY,
            self.pos,
        )

    # ── whitespace & comments ────────────────────────────────────────────────
    def skip_trivia(self) -> str | None:
        """Skip whitespace and comments; return the text of the last comment."""
        last_comment: str | None = None
        text = self.text
        while self.pos < self.end:
            while self.pos < self.end and text[self.pos] in _WHITESPACE:
                self.pos += 1
            if self.peek() != "/":
                break
            comment = self.parse_comment()
            if comment is None:
                break
            last_comment = comment
        return last_comment

    def parse_comment(self) -> str | None:
        start = self.pos
        marker = self.peek(1)
        if marker == "/":
            stop = start + 2
            while stop < self.end and self.text[stop] not in NEWLINES:
                stop += 1
            self.pos = stop
            return self.text[start + 2 : stop]
        if marker == "*":
            close = self.text.find("*/", start + 2)
            if close < 0:
                raise _ParseFailure(DeserializationErrorKind.UNTERMINATED_COMMENT, start)
            self.pos = close + 2
            return self.text[start + 2 : close]
        return None

    # ── strings ──────────────────────────────────────────────────────────────
    def parse_string(self) -> str:
        nxt = self.peek()
        if nxt in _QUOTES:
            return self.parse_quoted_string()
        if nxt in _UNQUOTED:
            return self.parse_unquoted_string()
        if nxt:
            raise _ParseFailure(DeserializationErrorKind.UNEXPECTED_CHARACTER, self.pos)
        raise _ParseFailure(DeserializationErrorKind.UNEXPECTED_END_OF_FILE, self.pos)

    def parse_unquoted_string(self) -> str:
        start = self.pos
        while self.pos < self.end and self.text[self.pos] in _UNQUOTED:
            self.pos += 1
        return self.text[start : self.pos]

    def parse_quoted_string(self) -> str:
        text = self.text
        start = self.pos
        quote = text[start]
        units: list[int] | None = None  # only built once an escape shows up
        pending = cur = start + 1
        while cur < self.end:
            ch = text[cur]
            if ch == quote:
                self.pos = cur + 1
                if units is None:
                    return text[pending:cur]
                units.extend(_utf16_units(text[pending:cur]))
                if not validate_utf16(units):
                    raise _ParseFailure(
                        DeserializationErrorKind.STRING_ESCAPE_SEQUENCE_INVALID_UTF16_SURROGATE,
                        start,
                    )
                return struct.pack(f"<{len(units)}H", *units).decode("utf-16-le")
            if ch == "\\":
                if cur + 1 >= self.end:
                    break
                if units is None:
                    units = []
                units.extend(_utf16_units(text[pending:cur]))
                escaped, cur = self.parse_escape(cur + 1)
                units.extend(escaped)
                pending = cur
            else:
                cur += 1
        raise _ParseFailure(DeserializationErrorKind.UNTERMINATED_STRING, start)

    def parse_escape(self, idx: int) -> tuple[list[int], int]:
        """Decode the escape whose first character is at *idx*."""
        ch = self.text[idx]
        if "0" <= ch <= "9":
            # NeXTSTEP octal escapes are deliberately not supported.
            raise _ParseFailure(
                DeserializationErrorKind.UNSUPPORTED_ESCAPE_SEQUENCE_OCTAL_NEXTSTEP_LATIN,
                idx,
            )
        if ch == "U":
            stop = idx + 1
            while stop < min(idx + 5, self.end) and self.text[stop] in _HEX_DIGITS:
                stop += 1
            if stop == idx + 1:
                return [ord("U")], stop
            return [int(self.text[idx + 1 : stop], 16)], stop
        if ch in _CONTROL_ESCAPES:
            return [_CONTROL_ESCAPES[ch]], idx + 1
        return _utf16_units(ch), idx + 1


# ── public entry points ───────────────────────────────────────────────────────
def parse_text(text: str) -> StringsFile:
    """Parse already-decoded *text* into a StringsFile."""
    try:
        entries = _Parser(text).parse_entries()
    except _ParseFailure as exc:
        raise DeserializationError(
            kind=exc.kind, location=locate(text, exc.offset)
        ) from None
    return StringsFile(entries)


def parse_bytes(data: bytes) -> StringsFile:
    """Decode *data* (BOM-sniffed, UTF-8 by default) and parse it.

    Raises ``UnicodeDecodingError`` instead of accepting replacement
    characters, and ``DeserializationError`` for syntax errors.
    """
    encoding, bom_len = resolve_encoding(data)
    text, repairs_made = decode_repairing(data[bom_len:], encoding)
    if repairs_made:
        raise UnicodeDecodingError(encoding=encoding)
    return parse_text(text)


def parse(path: str | os.PathLike[str]) -> StringsFile:
    """Read *path* and parse its bytes."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileReadError(path=path, original=exc) from exc
    return parse_bytes(raw)
