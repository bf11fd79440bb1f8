"""
Command-line interface for gibbercode.

Encodes integer pairs and decodes gibbercode strings.
"""
from __future__ import annotations

import argparse
import sys

from ..core.gibber import CONSONANTS, VOWELS, decode, encode, split_streams, syllables
from ..core.radix import MASK, encode_with_alphabet


def unsigned(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer in the 128-bit unsigned range."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not 0 <= value <= MASK:
        raise argparse.ArgumentTypeError(f"must be 0-{MASK}, got {value}")
    return value


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode MAJOR and MINOR."""
    if args.verbose:
        print(f"Consonant digits: {encode_with_alphabet(args.major, CONSONANTS)!r}")
        print(f"Vowel digits: {encode_with_alphabet(args.minor, VOWELS)!r}")
    print(encode(args.major, args.minor))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode TEXT back to its two values."""
    if args.verbose:
        consonants, vowels = split_streams(args.text)
        print(f"Consonant digits: {consonants!r}")
        print(f"Vowel digits: {vowels!r}")
    major, minor = decode(args.text)
    print(f"{major} {minor}")
    return 0


def cmd_syllables(args: argparse.Namespace) -> int:
    """List syllables before they are grouped into words."""
    for syllable in syllables(args.major, args.minor):
        print(syllable)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gibbercode",
        description="Pronounceable encoding of integer pairs",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also show the raw digit streams",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Encode two integers")
    encode_parser.add_argument("major", type=unsigned, help="Major value (consonants)")
    encode_parser.add_argument("minor", type=unsigned, help="Minor value (vowels)")
    encode_parser.set_defaults(func=cmd_encode)

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a gibbercode string",
        epilog="Put -- before TEXT that starts with a dash.",
    )
    decode_parser.add_argument("text", help="Gibbercode, surrounding noise allowed")
    decode_parser.set_defaults(func=cmd_decode)

    # Syllables command
    syllables_parser = subparsers.add_parser("syllables", help="Show syllables one per line")
    syllables_parser.add_argument("major", type=unsigned, help="Major value (consonants)")
    syllables_parser.add_argument("minor", type=unsigned, help="Minor value (vowels)")
    syllables_parser.set_defaults(func=cmd_syllables)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
