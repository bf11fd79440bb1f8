"""Positional base-N encoding over an arbitrary alphabet.

The base is the alphabet length. Digits are written least-significant
first, and zero is the empty string. Values are 128-bit unsigned: anything
wider is reduced modulo 2**128, and decoding wraps on overflow.
"""
from __future__ import annotations

WIDTH = 128
MASK = (1 << WIDTH) - 1


def check_alphabet(alphabet: str, reserved: str = "") -> None:
    """Raise ValueError unless alphabet is a usable digit table."""
    if len(alphabet) < 2:
        raise ValueError(f"Alphabet needs at least 2 characters, got {alphabet!r}")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"Alphabet has repeated characters: {alphabet!r}")
    clash = sorted(set(alphabet) & set(reserved))
    if clash:
        raise ValueError(f"Alphabet uses reserved characters: {''.join(clash)!r}")


def encode_with_alphabet(value: int, alphabet: str) -> str:
    """Encode value as digits of alphabet, least-significant first."""
    if len(alphabet) < 2:
        raise ValueError(f"Alphabet needs at least 2 characters, got {alphabet!r}")
    base = len(alphabet)
    value &= MASK

    chars = []
    while value:
        chars.append(alphabet[value % base])
        value //= base
    return "".join(chars)


def decode_with_alphabet(chars: str, alphabet: str) -> int:
    """Decode least-significant-first digits of alphabet to an integer.

    Every character must belong to alphabet. Accumulation wraps at 2**128.
    """
    if len(alphabet) < 2:
        raise ValueError(f"Alphabet needs at least 2 characters, got {alphabet!r}")
    base = len(alphabet)
    char_to_index = {c: i for i, c in enumerate(alphabet)}

    value = 0
    for c in reversed(chars):
        digit = char_to_index.get(c)
        if digit is None:
            raise ValueError(f"Invalid character for alphabet {alphabet!r}: {c!r}")
        value = (value * base + digit) & MASK
    return value
