"""Strict byte-to-text decoding for the five supported Unicode encoding forms.

Decoding never silently accepts damaged input: the text is produced with the
codec's replacing decoder (so diagnostics still have something to show) and
the same bytes are re-checked by a forward, scalar-by-scalar validator.  A
``True`` *repairs_made* flag means the text contains substitutions and must
not be used as the user's data.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Iterable

from .bom import Encoding

REPLACEMENT_CHARACTER = "\ufffd"

_UNIT_FORMATS = {
    Encoding.UTF16_BE: ">H",
    Encoding.UTF16_LE: "<H",
    Encoding.UTF32_BE: ">I",
    Encoding.UTF32_LE: "<I",
}


def validate_utf8(data: Iterable[int]) -> bool:
    """Check *data* against the well-formed UTF-8 byte sequences table."""
    it = iter(data)
    for lead in it:
        if lead < 0x80:
            continue
        if 0xC2 <= lead <= 0xDF:
            need, low, high = 1, 0x80, 0xBF
        elif lead == 0xE0:
            need, low, high = 2, 0xA0, 0xBF
        elif 0xE1 <= lead <= 0xEC or lead in (0xEE, 0xEF):
            need, low, high = 2, 0x80, 0xBF
        elif lead == 0xED:
            need, low, high = 2, 0x80, 0x9F  # no encoded surrogates
        elif lead == 0xF0:
            need, low, high = 3, 0x90, 0xBF
        elif 0xF1 <= lead <= 0xF3:
            need, low, high = 3, 0x80, 0xBF
        elif lead == 0xF4:
            need, low, high = 3, 0x80, 0x8F
        else:
            return False
        for i in range(need):
            byte = next(it, None)
            if byte is None:
                return False
            if i == 0:
                if not low <= byte <= high:
                    return False
            elif not 0x80 <= byte <= 0xBF:
                return False
    return True


def validate_utf16(units: Iterable[int]) -> bool:
    """Every lead surrogate must be followed by a trail surrogate, and no trail
    surrogate may stand alone."""
    it = iter(units)
    for unit in it:
        if 0xDC00 <= unit <= 0xDFFF:
            return False
        if 0xD800 <= unit <= 0xDBFF:
            trail = next(it, None)
            if trail is None or not 0xDC00 <= trail <= 0xDFFF:
                return False
    return True


def validate_utf32(units: Iterable[int]) -> bool:
    return all(
        unit <= 0x10FFFF and not 0xD800 <= unit <= 0xDFFF for unit in units
    )


_VALIDATORS: dict[Encoding, Callable[[Iterable[int]], bool]] = {
    Encoding.UTF8: validate_utf8,
    Encoding.UTF16_BE: validate_utf16,
    Encoding.UTF16_LE: validate_utf16,
    Encoding.UTF32_BE: validate_utf32,
    Encoding.UTF32_LE: validate_utf32,
}


def split_code_units(data: bytes, encoding: Encoding) -> tuple[list[int], bool]:
    """Return the whole code units of *data* and whether bytes were left over."""
    size = encoding.unit_size
    usable = len(data) - len(data) % size
    if encoding is Encoding.UTF8:
        return list(data), False
    fmt = _UNIT_FORMATS[encoding]
    units = [unit for (unit,) in struct.iter_unpack(fmt, data[:usable])]
    return units, usable != len(data)


def decode_repairing(data: bytes, encoding: Encoding) -> tuple[str, bool]:
    """Decode *data* (without its BOM) and report whether repairs were needed."""
    units, has_trailing_bytes = split_code_units(data, encoding)
    usable = len(units) * encoding.unit_size
    text = bytes(data[:usable]).decode(encoding.codec, errors="replace")
    valid = _VALIDATORS[encoding](units)
    if has_trailing_bytes:
        text += REPLACEMENT_CHARACTER
        valid = False
    return text, not valid
