"""stringsfile-py – all public symbols are re-exported from .core."""

from importlib import metadata

from .core import (  # noqa: F401 – re-exports
    DeserializationError,
    DeserializationErrorKind,
    Entry,
    FileReadError,
    Location,
    SerializationError,
    SerializationErrorKind,
    StringsFile,
    StringsFileError,
    UnicodeDecodingError,
    parse,
    parse_bytes,
    parse_text,
    save,
    scan_root,
    serialize,
)

try:
    __version__ = metadata.version("stringsfile-py")
except metadata.PackageNotFoundError:  # editable install before first build
    __version__ = "0.0.0"
