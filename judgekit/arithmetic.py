"""Basic arithmetic on small integers and real numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def divide(a: float, b: float) -> float:
    """Return the real quotient a / b.

    Raises ZeroDivisionError when b is zero.
    """
    return float(a) / float(b)


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division that truncates toward zero, remainder takes a's sign."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def four_operations(a: int, b: int) -> tuple[int, int, int, int, int]:
    """Return (a+b, a-b, a*b, a/b, a%b) with truncating integer division."""
    quotient, remainder = _truncating_divmod(a, b)
    return a + b, a - b, a * b, quotient, remainder


def pair_sums(pairs: Iterable[tuple[int, int]]) -> Iterator[int]:
    """Yield the sum of every pair."""
    for a, b in pairs:
        yield a + b


def sums_until_zero(pairs: Iterable[tuple[int, int]]) -> Iterator[int]:
    """Yield pair sums, stopping at the first (0, 0) pair."""
    for a, b in pairs:
        if a == 0 and b == 0:
            return
        yield a + b


def concat_difference(a: int | str, b: int | str, c: int | str) -> tuple[int, int]:
    """Return (A + B - C, int(str(A) + str(B)) - C).

    The second value reads A and B as text and joins them before converting.
    """
    text_a, text_b, text_c = str(a), str(b), str(c)
    numeric = int(text_a) + int(text_b) - int(text_c)
    joined = int(text_a + text_b) - int(text_c)
    return numeric, joined


def check_digit(digits: Iterable[int]) -> int:
    """Return the sum of the squared digits modulo 10."""
    return sum(d * d for d in digits) % 10