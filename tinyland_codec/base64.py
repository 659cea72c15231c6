"""Base64 codec (RFC 4648 and RFC 2045).

Three encoder presets are provided:

  basic     standard alphabet, padded, single line
  URL-safe  ``-`` and ``_`` in place of ``+`` and ``/``, padded, single line
  MIME      standard alphabet, padded, 76-character lines joined by CRLF

Encoders can also be built from a :class:`Base64Options` value or from a
flags bitmask (``NO_PADDING``, ``NO_WRAP``, ``CRLF``, ``URL_SAFE``) using
the same bit values as Android's ``android.util.Base64``. Passing ``DEFAULT``
(0) as flags yields RFC 2045 output wrapped at 76 characters with LF.

There is a single decoder. It accepts both alphabets, with or without
padding, and skips whitespace anywhere in the input.
"""

from dataclasses import dataclass
from typing import Optional

from tinyland_codec.codec import (
    Codec,
    Decoder,
    Encoder,
    InvalidCharacterError,
    InvalidLengthError,
    ensure_bytes,
)

DEFAULT = 0
NO_PADDING = 1
NO_WRAP = 2
CRLF = 4
URL_SAFE = 8

_ALL_FLAGS = NO_PADDING | NO_WRAP | CRLF | URL_SAFE

MIME_LINE_MAX = 76

STANDARD_ALPHABET = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
URL_SAFE_ALPHABET = (
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)

_PAD = ord("=")
_WHITESPACE = b"\t\n\r "
_TRAILING = _WHITESPACE + b"="

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_VALUE_62 = (ord("+"), ord("-"))
_VALUE_63 = (ord("/"), ord("_"))


@dataclass(frozen=True)
class Base64Options:
    """Immutable encoder settings.

    ``line_length`` is rounded down to a multiple of 4 and only matters
    when ``wrap`` is set.
    """

    url_safe: bool = False
    padding: bool = True
    wrap: bool = False
    crlf: bool = False
    line_length: int = MIME_LINE_MAX

    def __post_init__(self):
        object.__setattr__(self, "line_length", self.line_length >> 2 << 2)
        if self.wrap and self.line_length <= 0:
            raise ValueError("line_length must be at least 4 when wrapping")

    @classmethod
    def from_flags(cls, flags: int) -> "Base64Options":
        """Build options from a flags bitmask."""
        if flags & ~_ALL_FLAGS:
            raise ValueError(f"Unknown base64 flags: {flags:#x}")
        return cls(
            url_safe=bool(flags & URL_SAFE),
            padding=not flags & NO_PADDING,
            wrap=not flags & NO_WRAP,
            crlf=bool(flags & CRLF),
        )

    @property
    def flags(self) -> int:
        """The equivalent flags bitmask (``line_length`` is not represented)."""
        flags = DEFAULT
        if self.url_safe:
            flags |= URL_SAFE
        if not self.padding:
            flags |= NO_PADDING
        if not self.wrap:
            flags |= NO_WRAP
        if self.crlf:
            flags |= CRLF
        return flags

    @property
    def alphabet(self) -> bytes:
        return URL_SAFE_ALPHABET if self.url_safe else STANDARD_ALPHABET

    @property
    def line_separator(self) -> bytes:
        if not self.wrap:
            return b""
        return b"\r\n" if self.crlf else b"\n"


class Base64Encoder(Encoder):
    """Base64 encoder for one fixed set of :class:`Base64Options`."""

    def __init__(self, options: Optional[Base64Options] = None):
        self._options = options if options is not None else Base64Options()
        self._alphabet = self._options.alphabet
        self._separator = self._options.line_separator
        self._line_groups = self._options.line_length // 4

    @classmethod
    def from_flags(cls, flags: int) -> "Base64Encoder":
        return cls(Base64Options.from_flags(flags))

    @property
    def options(self) -> Base64Options:
        return self._options

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._options!r})"

    def output_length(self, size: int) -> int:
        """Return the exact encoded length for ``size`` input bytes."""
        if self._options.padding:
            length = 4 * ((size + 2) // 3)
        else:
            tail = size % 3
            length = 4 * (size // 3) + (tail + 1 if tail else 0)
        if self._separator and length > 0:
            length += (
                (length - 1) // self._options.line_length * len(self._separator)
            )
        return length

    def encode(self, data: bytes) -> bytes:
        data = ensure_bytes(data)
        alphabet = self._alphabet
        separator = self._separator
        size = len(data)
        out = bytearray(self.output_length(size))
        end = size - size % 3
        count = self._line_groups
        index = 0

        for i in range(0, end, 3):
            b0, b1, b2 = data[i], data[i + 1], data[i + 2]
            out[index] = alphabet[b0 >> 2]
            out[index + 1] = alphabet[(b0 & 0x03) << 4 | b1 >> 4]
            out[index + 2] = alphabet[(b1 & 0x0F) << 2 | b2 >> 6]
            out[index + 3] = alphabet[b2 & 0x3F]
            index += 4
            if separator:
                count -= 1
                # no separator after the final line
                if count == 0 and i + 3 < size:
                    count = self._line_groups
                    out[index:index + len(separator)] = separator
                    index += len(separator)

        tail = size - end
        if tail == 1:
            b0 = data[end]
            out[index] = alphabet[b0 >> 2]
            out[index + 1] = alphabet[(b0 & 0x03) << 4]
            if self._options.padding:
                out[index + 2] = _PAD
                out[index + 3] = _PAD
        elif tail == 2:
            b0, b1 = data[end], data[end + 1]
            out[index] = alphabet[b0 >> 2]
            out[index + 1] = alphabet[(b0 & 0x03) << 4 | b1 >> 4]
            out[index + 2] = alphabet[(b1 & 0x0F) << 2]
            if self._options.padding:
                out[index + 3] = _PAD

        return bytes(out)


class Base64Decoder(Decoder):
    """Lenient decoder for standard, URL-safe and MIME base64."""

    def decode(self, data: bytes) -> bytes:
        data = ensure_bytes(data)

        limit = len(data)
        while limit > 0 and data[limit - 1] in _TRAILING:
            limit -= 1

        out = bytearray(limit * 6 // 8)
        out_count = 0
        in_count = 0
        word = 0

        for pos in range(limit):
            b = data[pos]
            if _UPPER_A <= b <= _UPPER_Z:
                bits = b - _UPPER_A
            elif _LOWER_A <= b <= _LOWER_Z:
                bits = b - _LOWER_A + 26
            elif _DIGIT_0 <= b <= _DIGIT_9:
                bits = b - _DIGIT_0 + 52
            elif b in _VALUE_62:
                bits = 62
            elif b in _VALUE_63:
                bits = 63
            elif b in _WHITESPACE:
                continue
            else:
                ch = chr(b)
                raise InvalidCharacterError(
                    f"Illegal base64 character {ch!r} at index {pos}", ch, pos
                )

            word = (word << 6 | bits) & 0xFFFFFF
            in_count += 1

            # every 4 characters carry 24 bits: emit 3 bytes
            if in_count % 4 == 0:
                out[out_count] = word >> 16
                out[out_count + 1] = word >> 8 & 0xFF
                out[out_count + 2] = word & 0xFF
                out_count += 3

        remainder = in_count % 4
        if remainder == 1:
            # 6 bits cannot form a byte
            raise InvalidLengthError(
                "Invalid base64 length: a single trailing character"
            )
        elif remainder == 2:
            word <<= 12
            out[out_count] = word >> 16 & 0xFF
            out_count += 1
        elif remainder == 3:
            word <<= 6
            out[out_count] = word >> 16 & 0xFF
            out[out_count + 1] = word >> 8 & 0xFF
            out_count += 2

        if out_count == len(out):
            return bytes(out)
        return bytes(out[:out_count])


_RFC4648 = Base64Encoder()
_RFC4648_URLSAFE = Base64Encoder(Base64Options(url_safe=True))
_RFC2045 = Base64Encoder(
    Base64Options(wrap=True, crlf=True, line_length=MIME_LINE_MAX)
)
_DECODER = Base64Decoder()


def get_encoder() -> Base64Encoder:
    """Return the basic (RFC 4648) encoder."""
    return _RFC4648


def get_url_encoder() -> Base64Encoder:
    """Return the URL and filename safe (RFC 4648 section 5) encoder."""
    return _RFC4648_URLSAFE


def get_mime_encoder() -> Base64Encoder:
    """Return the MIME (RFC 2045) encoder."""
    return _RFC2045


def get_decoder() -> Base64Decoder:
    return _DECODER


class Base64Codec(Codec):
    """Pairs an encoder with the lenient decoder. Defaults to the basic encoder."""

    def __init__(
        self,
        encoder: Optional[Base64Encoder] = None,
        decoder: Optional[Base64Decoder] = None,
    ):
        self._encoder = encoder if encoder is not None else _RFC4648
        self._decoder = decoder if decoder is not None else _DECODER

    @property
    def encoder(self) -> Base64Encoder:
        return self._encoder

    def encode(self, data: bytes) -> bytes:
        return self._encoder.encode(data)

    def decode(self, data: bytes) -> bytes:
        return self._decoder.decode(data)


BASE64 = Base64Codec()


def encode_with_flags(data: bytes, flags: int) -> bytes:
    """Encode bytes with an encoder built from ``flags``.

    ``DEFAULT`` produces RFC 2045 output (76-character lines, LF).
    """
    return Base64Encoder.from_flags(flags).encode(data)


def encode_str_with_flags(text: str, flags: int) -> str:
    """Encode a text string with an encoder built from ``flags``."""
    return Base64Encoder.from_flags(flags).encode_str(text)


def b64encode(data: bytes) -> str:
    """Encode bytes to a padded, single-line base64 string."""
    return BASE64.encode_to_str(data)


def b64decode(encoded: str) -> bytes:
    """Decode a base64 string (either alphabet, any padding) to bytes."""
    return BASE64.decode_to_bytes(encoded)


def b64encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base64."""
    return b64encode(text.encode(encoding))


def b64decode_str(encoded: str, encoding: str = "utf-8") -> str:
    """Decode a base64 string to text."""
    return b64decode(encoded).decode(encoding)
