"""Fixed-width binary words and their two-character base64 form."""

from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"

WORD_BITS = 12


def to_binary(number: int, length: int) -> str:
    """Encode ``number`` as a string of ``length`` binary digits.

    Only the low ``length`` bits are kept. A negative number is written as
    the one's complement of its magnitude with the lowest bit toggled,
    which is two's complement for odd magnitudes.
    """
    if length < 1:
        raise ValueError("length must be positive")
    mask = (1 << length) - 1
    if number >= 0:
        value = number & mask
    else:
        value = (~(-number) ^ 1) & mask
    return format(value, f"0{length}b")


def bits_to_int(bits: str) -> int:
    """Read a string of binary digits as an unsigned number.

    Any character other than '1' counts as a zero bit.
    """
    return sum(1 << place for place, char in enumerate(reversed(bits)) if char == "1")


def binary_to_base64(bits: str) -> str:
    """Encode a 12-bit word as two base64 characters."""
    if len(bits) != WORD_BITS:
        raise ValueError(f"expected {WORD_BITS} bits, got {len(bits)}")
    return ALPHABET[bits_to_int(bits[:6])] + ALPHABET[bits_to_int(bits[6:])]