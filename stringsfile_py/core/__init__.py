"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .errors import (
    DeserializationError,
    DeserializationErrorKind,
    FileReadError,
    Location,
    SerializationError,
    SerializationErrorKind,
    StringsFileError,
    UnicodeDecodingError,
)
from .model import Entry, StringsFile
from .parser import parse, parse_bytes, parse_text
from .project_scanner import scan_root
from .saver import save, serialize

__all__ = [
    "DeserializationError",
    "DeserializationErrorKind",
    "Entry",
    "FileReadError",
    "Location",
    "SerializationError",
    "SerializationErrorKind",
    "StringsFile",
    "StringsFileError",
    "UnicodeDecodingError",
    "parse",
    "parse_bytes",
    "parse_text",
    "save",
    "scan_root",
    "serialize",
]
