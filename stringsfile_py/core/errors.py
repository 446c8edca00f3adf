"""Exception family raised by the strings-table codec."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # forward-refs for mypy, no runtime cycle
    from .bom import Encoding


class DeserializationErrorKind(enum.Enum):
    UNEXPECTED_END_OF_FILE = "unexpected_end_of_file"
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNTERMINATED_COMMENT = "unterminated_comment"
    UNTERMINATED_STRING = "unterminated_string"
    UNSUPPORTED_ESCAPE_SEQUENCE_OCTAL_NEXTSTEP_LATIN = (
        "unsupported_escape_sequence_octal_nextstep_latin"
    )
    EXPECTED_SEMICOLON_OR_EQUALS_SIGN_AFTER_KEY = (
        "expected_semicolon_or_equals_sign_after_key"
    )
    EXPECTED_SEMICOLON_AFTER_KEY_VALUE = "expected_semicolon_after_key_value"
    STRING_ESCAPE_SEQUENCE_INVALID_UTF16_SURROGATE = (
        "string_escape_sequence_invalid_utf16_surrogate"
    )


class SerializationErrorKind(enum.Enum):
    COMMENT_CONTAINS_END_OF_COMMENT = "comment_contains_end_of_comment"
    TEXT_CONTAINS_LONE_SURROGATE = "text_contains_lone_surrogate"


@dataclass(frozen=True, slots=True)
class Location:
    """Position in decoded text; ``line`` and ``column`` are zero-based."""

    scalar_index: int
    line: int
    column: int


class StringsFileError(Exception):
    """Base class for every error raised by this package."""


class FileReadError(StringsFileError):
    """Raised when the table file cannot be read from disk."""

    def __init__(self, *, path: Path, original: OSError) -> None:
        super().__init__(f"cannot read {path}: {original}")
        self.path = path
        self.original = original


class UnicodeDecodingError(StringsFileError):
    """Raised when the byte stream is not valid in its (detected) encoding."""

    def __init__(self, *, encoding: Encoding) -> None:
        super().__init__(f"invalid {encoding.codec} byte sequence")
        self.encoding = encoding


class DeserializationError(StringsFileError):
    """Raised for a syntax error, carrying where it was found."""

    def __init__(self, *, kind: DeserializationErrorKind, location: Location) -> None:
        super().__init__(
            f"{kind.value.replace('_', ' ')} "
            f"at line {location.line + 1}, column {location.column + 1}"
        )
        self.kind = kind
        self.location = location


class SerializationError(StringsFileError):
    """Raised when an entry cannot be written without changing its meaning."""

    def __init__(self, *, kind: SerializationErrorKind, entry_index: int) -> None:
        super().__init__(f"{kind.value.replace('_', ' ')} in entry {entry_index}")
        self.kind = kind
        self.entry_index = entry_index
