"""Command-line interface for tinyland-codec.

Provides subcommands:
  encode-b16 - Base16 (hex) encode data from stdin
  decode-b16 - Base16 (hex) decode data from stdin
  encode-b58 - Base58-encode data from stdin
  decode-b58 - Base58-decode data from stdin
  encode-b64 - Base64-encode data from stdin
  decode-b64 - Base64-decode data from stdin

Exit codes:
    0 - Success
    3 - Invalid input or arguments
"""

import argparse
import os
import sys

from tinyland_codec.base16 import BASE16
from tinyland_codec.base58 import BASE58
from tinyland_codec.base64 import (
    MIME_LINE_MAX,
    Base64Encoder,
    Base64Options,
    get_decoder,
)
from tinyland_codec.codec import Decoder, Encoder

FLAGS_ENV = "TINYLAND_CODEC_B64_FLAGS"


def _encode_stdin(encoder: Encoder) -> int:
    """Read raw bytes from stdin and write the encoded text to stdout."""
    raw = sys.stdin.buffer.read()
    sys.stdout.write(encoder.encode_to_str(raw))
    return 0


def _decode_stdin(decoder: Decoder) -> int:
    """Read encoded text from stdin and write the raw bytes to stdout."""
    encoded = sys.stdin.read().strip()
    if not encoded:
        return 0
    try:
        decoded = decoder.decode_to_bytes(encoded)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    sys.stdout.buffer.write(decoded)
    return 0


def _resolve_b64_encoder(args) -> Base64Encoder:
    """Build the base64 encoder from CLI arguments.

    ``--flags`` wins over everything else. Without it, the boolean options
    are used; if none of those were given either, the flags in
    TINYLAND_CODEC_B64_FLAGS are used when set.
    """
    flags = getattr(args, "flags", None)
    explicit = (
        args.url_safe
        or args.no_padding
        or args.wrap
        or args.crlf
        or args.line_length != MIME_LINE_MAX
    )
    if flags is None and not explicit:
        env_value = os.environ.get(FLAGS_ENV)
        if env_value:
            try:
                flags = _parse_flags(env_value)
            except ValueError:
                print(
                    f"error: environment variable {FLAGS_ENV} is not an integer",
                    file=sys.stderr,
                )
                sys.exit(3)

    try:
        if flags is not None:
            return Base64Encoder.from_flags(flags)
        return Base64Encoder(
            Base64Options(
                url_safe=args.url_safe,
                padding=not args.no_padding,
                wrap=args.wrap,
                crlf=args.crlf,
                line_length=args.line_length,
            )
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(3)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def cmd_encode_b16(args) -> int:
    """Handle the 'encode-b16' subcommand -- reads stdin, writes hex."""
    return _encode_stdin(BASE16)


def cmd_decode_b16(args) -> int:
    """Handle the 'decode-b16' subcommand -- reads stdin, writes decoded."""
    return _decode_stdin(BASE16)


def cmd_encode_b58(args) -> int:
    """Handle the 'encode-b58' subcommand -- reads stdin, writes base58."""
    return _encode_stdin(BASE58)


def cmd_decode_b58(args) -> int:
    """Handle the 'decode-b58' subcommand -- reads stdin, writes decoded."""
    return _decode_stdin(BASE58)


def cmd_encode_b64(args) -> int:
    """Handle the 'encode-b64' subcommand -- reads stdin, writes base64."""
    return _encode_stdin(_resolve_b64_encoder(args))


def cmd_decode_b64(args) -> int:
    """Handle the 'decode-b64' subcommand -- reads stdin, writes decoded."""
    return _decode_stdin(get_decoder())


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _parse_flags(value: str) -> int:
    """Parse a flags bitmask given in decimal, hex (0x..) or binary (0b..)."""
    return int(value, 0)


def _add_b64_encoder_args(parser: argparse.ArgumentParser) -> None:
    """Add base64 encoder options to a subparser."""
    parser.add_argument(
        "--url-safe",
        action="store_true",
        help="Use the URL and filename safe alphabet (- and _)",
    )
    parser.add_argument(
        "--no-padding",
        action="store_true",
        help="Omit trailing '=' padding",
    )
    parser.add_argument(
        "--wrap",
        action="store_true",
        help="Break output into lines of --line-length characters",
    )
    parser.add_argument(
        "--crlf",
        action="store_true",
        help="Terminate wrapped lines with CRLF instead of LF",
    )
    parser.add_argument(
        "--line-length",
        type=int,
        default=MIME_LINE_MAX,
        help=f"Wrapped line length, rounded down to a multiple of 4 (default: {MIME_LINE_MAX})",
    )
    parser.add_argument(
        "--flags",
        type=_parse_flags,
        default=None,
        help=(
            "Flags bitmask (NO_PADDING=1, NO_WRAP=2, CRLF=4, URL_SAFE=8); "
            f"overrides the options above (default: ${FLAGS_ENV})"
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinyland-codec",
        description="Base16, Base58 and Base64 encoding over stdin/stdout",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('tinyland_codec').__version__}",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- encode-b16 / decode-b16 --
    p_enc16 = sub.add_parser("encode-b16", help="Hex-encode data from stdin")
    p_enc16.set_defaults(func=cmd_encode_b16)

    p_dec16 = sub.add_parser("decode-b16", help="Hex-decode data from stdin")
    p_dec16.set_defaults(func=cmd_decode_b16)

    # -- encode-b58 / decode-b58 --
    p_enc58 = sub.add_parser("encode-b58", help="Base58-encode data from stdin")
    p_enc58.set_defaults(func=cmd_encode_b58)

    p_dec58 = sub.add_parser("decode-b58", help="Base58-decode data from stdin")
    p_dec58.set_defaults(func=cmd_decode_b58)

    # -- encode-b64 / decode-b64 --
    p_enc64 = sub.add_parser("encode-b64", help="Base64-encode data from stdin")
    _add_b64_encoder_args(p_enc64)
    p_enc64.set_defaults(func=cmd_encode_b64)

    p_dec64 = sub.add_parser(
        "decode-b64",
        help="Base64-decode data from stdin (either alphabet, any padding)",
    )
    p_dec64.set_defaults(func=cmd_decode_b64)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)
