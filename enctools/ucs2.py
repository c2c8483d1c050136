"""Conversions between text and UTF-8 / UCS-2 byte sequences.

Text is treated as a sequence of 16-bit code units. Characters beyond the
Basic Multilingual Plane cannot be represented and raise ``ValueError``.
Surrogate code points are encoded like any other 16-bit unit.
"""

from __future__ import annotations

_MAX_UNIT = 0xFFFF


def _units(text: str):
    for ch in text:
        code = ord(ch)
        if code > _MAX_UNIT:
            raise ValueError(f"character outside the 16-bit range: U+{code:X}")
        yield code


def encode_utf8(text: str) -> bytes:
    """Encode 16-bit code units as UTF-8 using one to three bytes each."""
    out = bytearray()
    for code in _units(text):
        if code < 0x80:
            out.append(code)
        elif code < 0x800:
            out.append(0xC0 | (code >> 6))
            out.append(0x80 | (code & 0x3F))
        else:
            out.append(0xE0 | (code >> 12))
            out.append(0x80 | ((code >> 6) & 0x3F))
            out.append(0x80 | (code & 0x3F))
    return bytes(out)


def _is_continuation(data: bytes, index: int) -> bool:
    return index < len(data) and (data[index] & 0xC0) == 0x80


def decode_utf8(data: bytes) -> str:
    """Decode one- to three-byte UTF-8 sequences.

    Decoding stops at the first byte that does not start a valid sequence;
    the text decoded up to that point is returned.
    """
    chars: list[str] = []
    i = 0
    n = len(data)
    while i < n:
        lead = data[i]
        if lead & 0x80 == 0:
            chars.append(chr(lead))
            i += 1
        elif (lead & 0xE0) == 0xC0 and _is_continuation(data, i + 1):
            chars.append(chr(((lead & 0x1F) << 6) | (data[i + 1] & 0x3F)))
            i += 2
        elif (
            (lead & 0xF0) == 0xE0
            and _is_continuation(data, i + 1)
            and _is_continuation(data, i + 2)
        ):
            code = (
                ((lead & 0x0F) << 12)
                | ((data[i + 1] & 0x3F) << 6)
                | (data[i + 2] & 0x3F)
            )
            chars.append(chr(code))
            i += 3
        else:
            break
    return "".join(chars)


def decode_ucs2(data: bytes, big_endian: bool = True) -> str:
    """Decode pairs of bytes as 16-bit code units; a trailing odd byte is ignored."""
    order = "big" if big_endian else "little"
    return "".join(
        chr(int.from_bytes(data[i:i + 2], order))
        for i in range(0, len(data) - 1, 2)
    )


def encode_ucs2(text: str, big_endian: bool = True) -> bytes:
    """Encode text as 16-bit code units in the chosen byte order."""
    order = "big" if big_endian else "little"
    return b"".join(code.to_bytes(2, order) for code in _units(text))