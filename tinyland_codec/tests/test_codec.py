"""Tests for the shared four-shape codec contract and the error hierarchy."""

import pytest

from tinyland_codec import BASE16, BASE58, BASE64
from tinyland_codec.codec import (
    Codec,
    CodecError,
    Decoder,
    Encoder,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidLengthError,
)

CASES = [
    (BASE16, "Hello, World!", "48656C6C6F2C20576F726C6421"),
    (BASE58, "Hello, World!", "72k1xXWG59fYdzSNoA"),
    (BASE64, "Hello, World!", "SGVsbG8sIFdvcmxkIQ=="),
]


def assert_encode(encoder: Encoder, expected: str, text: str) -> None:
    data = text.encode("utf-8")
    expected_bytes = expected.encode("utf-8")
    assert encoder.encode_str(text) == expected
    assert encoder.encode_to_str(data) == expected
    assert encoder.encode(data) == expected_bytes
    assert encoder.encode_to_bytes(text) == expected_bytes


def assert_decode(decoder: Decoder, expected: str, text: str) -> None:
    data = text.encode("utf-8")
    expected_bytes = expected.encode("utf-8")
    assert decoder.decode_str(text) == expected
    assert decoder.decode_to_str(data) == expected
    assert decoder.decode(data) == expected_bytes
    assert decoder.decode_to_bytes(text) == expected_bytes


# ---------------------------------------------------------------------------
# Entry shapes
# ---------------------------------------------------------------------------


class TestEntryShapes:
    """Every codec answers the same way through all four entry shapes."""

    @pytest.mark.parametrize("codec, text, encoded", CASES)
    def test_encode_shapes(self, codec, text, encoded):
        assert_encode(codec, encoded, text)

    @pytest.mark.parametrize("codec, text, encoded", CASES)
    def test_decode_shapes(self, codec, text, encoded):
        assert_decode(codec, text, encoded)

    @pytest.mark.parametrize("codec", [BASE16, BASE58, BASE64])
    def test_accepts_bytes_like(self, codec):
        data = b"\x00\x01binary\xff"
        expected = codec.encode(data)
        assert codec.encode(bytearray(data)) == expected
        assert codec.encode(memoryview(data)) == expected
        assert type(codec.encode(bytearray(data))) is bytes

    @pytest.mark.parametrize("codec", [BASE16, BASE58, BASE64])
    def test_output_is_new_object(self, codec):
        data = bytearray(b"mutable")
        encoded = codec.encode(data)
        data[0] = 0
        assert codec.decode(encoded) == b"mutable"

    @pytest.mark.parametrize("codec", [BASE16, BASE58, BASE64])
    def test_empty_input(self, codec):
        assert codec.encode(b"") == b""
        assert codec.decode(b"") == b""
        assert codec.encode_str("") == ""
        assert codec.decode_str("") == ""


# ---------------------------------------------------------------------------
# Type and encoding errors
# ---------------------------------------------------------------------------


class TestTypeErrors:
    @pytest.mark.parametrize("codec", [BASE16, BASE58, BASE64])
    def test_bytes_shapes_reject_str(self, codec):
        with pytest.raises(TypeError, match="bytes"):
            codec.encode("text")  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="bytes"):
            codec.decode_to_str("text")  # type: ignore[arg-type]

    @pytest.mark.parametrize("codec", [BASE16, BASE58, BASE64])
    def test_str_shapes_reject_bytes(self, codec):
        with pytest.raises(TypeError, match="string"):
            codec.encode_str(b"text")  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="string"):
            codec.decode_to_bytes(None)  # type: ignore[arg-type]

    def test_non_utf8_output_propagates(self):
        with pytest.raises(UnicodeDecodeError):
            BASE16.decode_str("FFFE")

    def test_base_classes_are_abstract(self):
        with pytest.raises(NotImplementedError):
            Encoder().encode(b"")
        with pytest.raises(NotImplementedError):
            Decoder().decode(b"")
        assert issubclass(Codec, Encoder)
        assert issubclass(Codec, Decoder)


class TestErrorHierarchy:
    def test_kinds_share_a_base(self):
        for kind in (InvalidLengthError, InvalidCharacterError, InvalidFormatError):
            assert issubclass(kind, CodecError)
        assert issubclass(CodecError, ValueError)

    def test_kinds_are_distinct(self):
        with pytest.raises(InvalidLengthError):
            BASE16.decode(b"F")
        with pytest.raises(InvalidCharacterError):
            BASE58.decode(b"0")
        with pytest.raises(InvalidFormatError):
            BASE58.decode(b"2g 2g")

    def test_character_error_fields(self):
        exc = InvalidCharacterError("bad", "!", 4)
        assert str(exc) == "bad"
        assert exc.character == "!"
        assert exc.index == 4
        assert InvalidCharacterError("bad", "!").index is None
