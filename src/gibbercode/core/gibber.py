"""Gibbercode: two integers as pronounceable syllables.

The major value is written in base 17 over consonants, the minor value in
base 5 over vowels. Each syllable takes two consonant digits and one vowel
digit (consonant, vowel, consonant), and syllables are paired into
hyphenated words:

    encode(23242151, 123) == "nurlyt-nyq"

Once a value runs out of digits its slots are filled with a pad character
('h' for consonants, 'e' for vowels). The first syllable made only of pads
ends the code. Decoding ignores structure entirely and reads back whatever
consonants and vowels appear in the text, so hyphens, pads and any other
noise are harmless.
"""
from __future__ import annotations

from .radix import check_alphabet, decode_with_alphabet, encode_with_alphabet

VOWELS = "aiouy"                  # base 5
CONSONANTS = "kgsztdnpbmjrlwvxq"  # base 17

CONSONANT_PAD = "h"
VOWEL_PAD = "e"
SENTINEL = CONSONANT_PAD + VOWEL_PAD + CONSONANT_PAD  # "heh"

WORD_SEPARATOR = "-"
SYLLABLES_PER_WORD = 2

# Pads must never be digits, otherwise dropping "hh" and skipping pads on
# decode would lose data.
check_alphabet(VOWELS, reserved=CONSONANT_PAD + VOWEL_PAD)
check_alphabet(CONSONANTS, reserved=CONSONANT_PAD + VOWEL_PAD + VOWELS)

VOWEL_SET = frozenset(VOWELS)
CONSONANT_SET = frozenset(CONSONANTS)


def syllables(major: int, minor: int) -> list[str]:
    """Return the consonant-vowel-consonant syllables for a pair of values."""
    consonants = encode_with_alphabet(major, CONSONANTS)
    vowels = encode_with_alphabet(minor, VOWELS)

    def consonant_at(i: int) -> str:
        return consonants[i] if i < len(consonants) else CONSONANT_PAD

    def vowel_at(i: int) -> str:
        return vowels[i] if i < len(vowels) else VOWEL_PAD

    result = []
    for i in range(max(len(consonants), 2 * len(vowels)) // 2 + 1):
        syllable = consonant_at(2 * i) + vowel_at(i) + consonant_at(2 * i + 1)
        if syllable == SENTINEL:
            break
        result.append(syllable)
    return result


def encode(major: int, minor: int) -> str:
    """Encode two unsigned integers as a gibbercode string.

    Values wider than 128 bits are reduced modulo 2**128.
    encode(0, 0) is the empty string.
    """
    parts = syllables(major, minor)
    words = []
    for i in range(0, len(parts), SYLLABLES_PER_WORD):
        word = "".join(parts[i:i + SYLLABLES_PER_WORD])
        # A padded tail followed by a padded head leaves "hh" mid-word
        words.append(word.replace(CONSONANT_PAD * 2, ""))
    return WORD_SEPARATOR.join(words)


def split_streams(text: str) -> tuple[str, str]:
    """Return (consonants, vowels) found in text, in order of appearance."""
    consonants = "".join(c for c in text if c in CONSONANT_SET)
    vowels = "".join(c for c in text if c in VOWEL_SET)
    return consonants, vowels


def decode(gibber: str) -> tuple[int, int]:
    """Decode a gibbercode string to (major, minor).

    Never fails: characters outside both alphabets are skipped, so text
    with no gibbercode in it decodes to (0, 0).
    """
    consonants, vowels = split_streams(gibber)
    return (
        decode_with_alphabet(consonants, CONSONANTS),
        decode_with_alphabet(vowels, VOWELS),
    )
