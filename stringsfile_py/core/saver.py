from __future__ import annotations

import os
from pathlib import Path

from .atomic_io import write_bytes_atomic
from .errors import SerializationError, SerializationErrorKind
from .model import StringsFile


def _escape(raw: str) -> str:
    """Backslash-escape double quotes and backslashes; nothing else."""
    return raw.replace("\\", "\\\\").replace('"', '\\"')


def serialize(sf: StringsFile) -> bytes:
    """Render every entry as ``"key" = "value";`` in UTF-8 without a BOM."""
    parts: list[bytes] = []
    for index, entry in enumerate(sf.entries):
        chunk = ""
        if entry.comment is not None:
            if "*/" in entry.comment:
                raise SerializationError(
                    kind=SerializationErrorKind.COMMENT_CONTAINS_END_OF_COMMENT,
                    entry_index=index,
                )
            chunk = f"/* {entry.comment} */\n"
        chunk += f'"{_escape(entry.key)}" = "{_escape(entry.value)}";\n\n'
        try:
            parts.append(chunk.encode("utf-8"))
        except UnicodeEncodeError:
            raise SerializationError(
                kind=SerializationErrorKind.TEXT_CONTAINS_LONE_SURROGATE,
                entry_index=index,
            ) from None
    return b"".join(parts)


def save(sf: StringsFile, path: str | os.PathLike[str]) -> None:
    """Serialize *sf* and overwrite *path* atomically."""
    write_bytes_atomic(Path(path), serialize(sf))
