"""Shared codec contract and error types.

Every scheme implements one ``bytes -> bytes`` primitive per direction.
The string-shaped variants are derived here:

  encode / decode                    bytes -> bytes (the primitive)
  encode_str / decode_str            str   -> str
  encode_to_bytes / decode_to_bytes  str   -> bytes
  encode_to_str / decode_to_str      bytes -> str

Text is always marshaled as UTF-8.
"""

from typing import Optional

_BYTES_LIKE = (bytes, bytearray, memoryview)


class CodecError(ValueError):
    """Base exception for encode/decode failures."""


class InvalidLengthError(CodecError):
    """Raised when the input length is incompatible with the scheme."""


class InvalidCharacterError(CodecError):
    """Raised when the input contains a character outside the alphabet."""

    def __init__(self, message: str, character: str, index: Optional[int] = None):
        super().__init__(message)
        self.character = character
        self.index = index


class InvalidFormatError(CodecError):
    """Raised for structural problems not covered by the other errors."""


def ensure_bytes(data) -> bytes:
    """Return ``data`` as bytes, rejecting anything that is not bytes-like."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, _BYTES_LIKE):
        return bytes(data)
    raise TypeError("Input must be bytes")


def ensure_str(text) -> str:
    if not isinstance(text, str):
        raise TypeError("Input must be a string")
    return text


class Encoder:
    """Encoding half of a codec. Subclasses implement :meth:`encode`."""

    def encode(self, data: bytes) -> bytes:
        raise NotImplementedError

    def encode_str(self, text: str) -> str:
        return self.encode(ensure_str(text).encode("utf-8")).decode("utf-8")

    def encode_to_bytes(self, text: str) -> bytes:
        return self.encode(ensure_str(text).encode("utf-8"))

    def encode_to_str(self, data: bytes) -> str:
        return self.encode(data).decode("utf-8")


class Decoder:
    """Decoding half of a codec. Subclasses implement :meth:`decode`."""

    def decode(self, data: bytes) -> bytes:
        raise NotImplementedError

    def decode_str(self, text: str) -> str:
        return self.decode(ensure_str(text).encode("utf-8")).decode("utf-8")

    def decode_to_bytes(self, text: str) -> bytes:
        return self.decode(ensure_str(text).encode("utf-8"))

    def decode_to_str(self, data: bytes) -> str:
        return self.decode(data).decode("utf-8")


class Codec(Encoder, Decoder):
    """An encoder and decoder for the same scheme."""
