from __future__ import annotations

import enum
from dataclasses import dataclass


class Encoding(enum.Enum):
    """Unicode encoding forms a strings table may be stored in."""

    UTF8 = "utf-8"
    UTF16_BE = "utf-16-be"
    UTF16_LE = "utf-16-le"
    UTF32_BE = "utf-32-be"
    UTF32_LE = "utf-32-le"

    @property
    def codec(self) -> str:
        return self.value

    @property
    def unit_size(self) -> int:
        """Width of one code unit in bytes."""
        return _UNIT_SIZES[self]


_UNIT_SIZES = {
    Encoding.UTF8: 1,
    Encoding.UTF16_BE: 2,
    Encoding.UTF16_LE: 2,
    Encoding.UTF32_BE: 4,
    Encoding.UTF32_LE: 4,
}

# Longer marks first: the UTF-32 LE mark starts with the UTF-16 LE one.
_MARKS: tuple[tuple[bytes, Encoding], ...] = (
    (b"\x00\x00\xfe\xff", Encoding.UTF32_BE),
    (b"\xff\xfe\x00\x00", Encoding.UTF32_LE),
    (b"\xfe\xff", Encoding.UTF16_BE),
    (b"\xff\xfe", Encoding.UTF16_LE),
    (b"\xef\xbb\xbf", Encoding.UTF8),
)


@dataclass(frozen=True, slots=True)
class Bom:
    encoding: Encoding
    byte_length: int


def detect_bom(data: bytes) -> Bom | None:
    """Return the byte order mark at the start of *data*, if any."""
    head = bytes(data[:4])
    for mark, encoding in _MARKS:
        if head.startswith(mark):
            return Bom(encoding, len(mark))
    return None


def resolve_encoding(data: bytes) -> tuple[Encoding, int]:
    """Return ``(encoding, bom_length)``; UTF-8 without a mark is the default."""
    bom = detect_bom(data)
    if bom is None:
        return Encoding.UTF8, 0
    return bom.encoding, bom.byte_length
