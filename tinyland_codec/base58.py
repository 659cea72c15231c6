"""Base58 codec (Bitcoin alphabet).

Converts between base-256 and base-58 with a digit-by-digit carry loop,
the same way Bitcoin Core's ``base58.cpp`` does. Each leading zero byte is
represented by a leading ``'1'`` and vice versa.

The conversion is O(n^2) in the input length. It is meant for short values
such as keys, hashes and credentials; do not use it for bulk data.
"""

from tinyland_codec.codec import (
    Codec,
    InvalidCharacterError,
    InvalidFormatError,
    ensure_bytes,
)

BITCOIN_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ENCODED_ZERO = BITCOIN_ALPHABET[0]

# digit -> character, padded to 256 entries for bytes.translate()
_ENCODE_TABLE = BITCOIN_ALPHABET.encode("ascii").ljust(256, b"\x00")
_B58_MAP = tuple(BITCOIN_ALPHABET.find(chr(c)) for c in range(256))


class Base58Codec(Codec):
    """Base58 encoder/decoder."""

    def encode(self, data: bytes) -> bytes:
        data = ensure_bytes(data)
        end = len(data)

        zeroes = 0
        while zeroes < end and data[zeroes] == 0:
            zeroes += 1

        # log(256) / log(58), rounded up
        size = (end - zeroes) * 138 // 100 + 1
        b58 = bytearray(size)
        length = 0

        for pos in range(zeroes, end):
            # b58 = b58 * 256 + byte
            carry = data[pos]
            i = 0
            index = size - 1
            while (carry != 0 or i < length) and index >= 0:
                carry += 256 * b58[index]
                b58[index] = carry % 58
                carry //= 58
                i += 1
                index -= 1
            length = i

        index = size - length
        while index < size and b58[index] == 0:
            index += 1

        return ENCODED_ZERO.encode("ascii") * zeroes + bytes(
            b58[index:].translate(_ENCODE_TABLE)
        )

    def decode(self, data: bytes) -> bytes:
        data = ensure_bytes(data)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            ch = chr(data[exc.start])
            raise InvalidCharacterError(
                f"Invalid base58 character {ch!r} at index {exc.start}",
                ch,
                exc.start,
            ) from exc

        end = len(text)
        psz = 0
        while psz < end and text[psz].isspace():
            psz += 1

        zeroes = 0
        while psz < end and text[psz] == ENCODED_ZERO:
            zeroes += 1
            psz += 1

        # log(58) / log(256), rounded up
        size = (end - psz) * 733 // 1000 + 1
        b256 = bytearray(size)
        length = 0

        while psz < end and not text[psz].isspace():
            ch = text[psz]
            carry = _B58_MAP[ord(ch)] if ord(ch) < 256 else -1
            if carry == -1:
                raise InvalidCharacterError(
                    f"Invalid base58 character {ch!r} at index {psz}", ch, psz
                )
            # b256 = b256 * 58 + digit
            i = 0
            index = size - 1
            while (carry != 0 or i < length) and index >= 0:
                carry += 58 * b256[index]
                b256[index] = carry & 0xFF
                carry >>= 8
                i += 1
                index -= 1
            length = i
            psz += 1

        while psz < end and text[psz].isspace():
            psz += 1
        if psz != end:
            raise InvalidFormatError(
                f"Unexpected base58 content after whitespace at index {psz}"
            )

        start = size - length
        while start < size and b256[start] == 0:
            start += 1

        return b"\x00" * zeroes + bytes(b256[start:])


BASE58 = Base58Codec()


def b58encode(data: bytes) -> str:
    """Encode bytes to a base58 string using the Bitcoin alphabet."""
    return BASE58.encode_to_str(data)


def b58decode(encoded: str) -> bytes:
    """Decode a base58 string to bytes using the Bitcoin alphabet."""
    return BASE58.decode_to_bytes(encoded)


def b58encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base58."""
    return b58encode(text.encode(encoding))


def b58decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base58 string to text."""
    return b58decode(encoded).decode(encoding)
