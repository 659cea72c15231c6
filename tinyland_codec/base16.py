"""Base16 (hex) codec.

Encoding emits uppercase digits; decoding accepts either case.
"""

from tinyland_codec.codec import (
    Codec,
    InvalidCharacterError,
    InvalidLengthError,
    ensure_bytes,
)

HEX_ALPHABET = b"0123456789ABCDEF"

_DIGITS = tuple(
    int(chr(b), 16) if chr(b) in "0123456789ABCDEFabcdef" else -1
    for b in range(256)
)


class Base16Codec(Codec):
    """Nibble-table hex encoder/decoder."""

    def encode(self, data: bytes) -> bytes:
        data = ensure_bytes(data)
        out = bytearray(len(data) * 2)
        for i, byte in enumerate(data):
            out[i * 2] = HEX_ALPHABET[byte >> 4]
            out[i * 2 + 1] = HEX_ALPHABET[byte & 0x0F]
        return bytes(out)

    def decode(self, data: bytes) -> bytes:
        data = ensure_bytes(data)
        if len(data) % 2 != 0:
            raise InvalidLengthError("Odd number of characters in hex data")

        out = bytearray(len(data) // 2)
        for i in range(0, len(data), 2):
            hi = _digit(data, i)
            lo = _digit(data, i + 1)
            out[i // 2] = hi << 4 | lo
        return bytes(out)


def _digit(data: bytes, index: int) -> int:
    value = _DIGITS[data[index]]
    if value == -1:
        ch = chr(data[index])
        raise InvalidCharacterError(
            f"Invalid hex character {ch!r} at index {index}", ch, index
        )
    return value


BASE16 = Base16Codec()
HEX = BASE16


def b16encode(data: bytes) -> str:
    """Encode bytes to an uppercase hex string."""
    return BASE16.encode_to_str(data)


def b16decode(encoded: str) -> bytes:
    """Decode a hex string (either case) to bytes."""
    return BASE16.decode_to_bytes(encoded)


def b16encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to hex."""
    return b16encode(text.encode(encoding))


def b16decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a hex string to text."""
    return b16decode(encoded).decode(encoding)
