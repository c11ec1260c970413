from __future__ import annotations

import re

from seedproof.core.errors import DecodingError

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def is_hex(text: str) -> bool:
    return _HEX_RE.fullmatch(text) is not None


def decode_hex(text: str) -> bytes:
    """Decode hex text into bytes, two characters per byte, high nibble first."""
    cleaned = text.strip()
    if not is_hex(cleaned):
        raise DecodingError("Invalid hex string: non-hexadecimal characters")
    if len(cleaned) % 2 != 0:
        raise DecodingError("Invalid hex string: odd length")
    return bytes.fromhex(cleaned)


def encode_hex(data: bytes) -> str:
    return data.hex()


def short_hex(text: str, width: int = 16) -> str:
    if len(text) <= width:
        return text
    return f"{text[:width]}..."
