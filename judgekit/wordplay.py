"""String hashing and palindrome checks."""

from __future__ import annotations

import string

MODULUS = 1234567891
RADIX = 31


def polynomial_hash(text: str) -> int:
    """Return sum of letter value * 31**i modulo 1234567891, where a=1 .. z=26."""
    total = 0
    power = 1
    for char in text:
        if char not in string.ascii_lowercase:
            raise ValueError(f"not a lowercase letter: {char!r}")
        value = ord(char) - ord("a") + 1
        total = (total + value * power) % MODULUS
        power = power * RADIX % MODULUS
    return total


def is_palindrome(number_text: str) -> bool:
    """Return True if the text reads the same forwards and backwards."""
    return number_text == number_text[::-1]