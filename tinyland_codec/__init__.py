"""Tinyland Codec - Base16, Base58 and Base64 binary-to-text encoding.

Every codec exposes one bytes-to-bytes primitive per direction plus
string-shaped wrappers over it. Includes a small CLI for encoding and
decoding over stdin/stdout.
"""

__version__ = "0.1.0"

from tinyland_codec.codec import (  # noqa: F401
    Codec,
    Decoder,
    Encoder,
    CodecError,
    InvalidCharacterError,
    InvalidFormatError,
    InvalidLengthError,
)
from tinyland_codec.base16 import (  # noqa: F401
    BASE16,
    HEX,
    Base16Codec,
    b16decode,
    b16decode_str,
    b16encode,
    b16encode_str,
)
from tinyland_codec.base58 import (  # noqa: F401
    BASE58,
    Base58Codec,
    b58decode,
    b58decode_str,
    b58encode,
    b58encode_str,
)
from tinyland_codec.base64 import (  # noqa: F401
    BASE64,
    CRLF,
    DEFAULT,
    NO_PADDING,
    NO_WRAP,
    URL_SAFE,
    Base64Codec,
    Base64Decoder,
    Base64Encoder,
    Base64Options,
    b64decode,
    b64decode_str,
    b64encode,
    b64encode_str,
    encode_str_with_flags,
    encode_with_flags,
    get_decoder,
    get_encoder,
    get_mime_encoder,
    get_url_encoder,
)
from tinyland_codec.cli import main  # noqa: F401
