"""URL encoding helpers and small string utilities."""

from __future__ import annotations

import string

_SAFE = frozenset(
    (string.ascii_letters + string.digits + "-_.!~*'()&=/\\?").encode("ascii")
)
_HEX = frozenset(string.hexdigits.encode("ascii"))


def char_to_hex(c: str | int) -> str:
    """Two upper-case hex digits for one byte, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        c = ord(c)
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value out of range: {c}")
    return f"{c:02X}"


def url_encode(src: str) -> str:
    """Percent-encode text as UTF-8, turning spaces into '+'."""
    parts = []
    for byte in src.encode("utf-8"):
        if byte == 0x20:
            parts.append("+")
        elif byte in _SAFE:
            parts.append(chr(byte))
        else:
            parts.append("%" + char_to_hex(byte))
    return "".join(parts)


def url_decode(src: str) -> str:
    """Undo url_encode: '+' becomes a space and '%XX' a byte.

    A '%' escape is only decoded when at least one more character follows it.
    """
    data = src.encode("utf-8")
    length = len(data)
    out = bytearray()
    i = 0
    while i < length:
        byte = data[i]
        if byte == 0x2B:
            out.append(0x20)
        elif byte == 0x25:
            if i + 2 < length and data[i + 1] in _HEX and data[i + 2] in _HEX:
                out.append(int(data[i + 1 : i + 3], 16))
                i += 2
            else:
                out.append(byte)
        else:
            out.append(byte)
        i += 1
    return out.decode("utf-8", errors="replace")


def split_string(text: str, delimiter: str) -> list[str]:
    """Split text on delimiter, dropping empty pieces; an empty delimiter yields nothing."""
    if not delimiter:
        return []
    return [piece for piece in text.split(delimiter) if piece]