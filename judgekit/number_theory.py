"""Number theory helpers: combinatorics, primes, divisors and digit tricks."""

from __future__ import annotations

import math
from collections.abc import Iterable

_DOOM_MARK = "666"


def binomial(n: int, k: int) -> int:
    """Return n choose k.

    Raises ValueError unless 0 <= k <= n.
    """
    if n < 0 or not 0 <= k <= n:
        raise ValueError("binomial() needs 0 <= k <= n")
    return math.factorial(n) // (math.factorial(k) * math.factorial(n - k))


def factorial_trailing_zeros(n: int) -> int:
    """Return how many zeros end the decimal form of n!."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def primes_between(low: int, high: int) -> list[int]:
    """Return the primes p with low <= p <= high in ascending order."""
    if high < 2:
        return []
    sieve = bytearray([1]) * (high + 1)
    sieve[0] = sieve[1] = 0
    for candidate in range(2, math.isqrt(high) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate::candidate] = bytes(
                len(range(candidate * candidate, high + 1, candidate))
            )
    return [number for number in range(max(low, 2), high + 1) if sieve[number]]


def is_prime(n: int) -> bool:
    """Return True if n is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def count_primes(values: Iterable[int]) -> int:
    """Return how many of the values are prime."""
    return sum(1 for value in values if is_prime(value))


def gcd_lcm(a: int, b: int) -> tuple[int, int]:
    """Return (greatest common divisor, least common multiple) of two naturals."""
    if a < 1 or b < 1:
        raise ValueError("gcd_lcm() needs two positive integers")
    divisor = math.gcd(a, b)
    return divisor, a * b // divisor


def decomposition_sum(number: int) -> int:
    """Return number plus the sum of its decimal digits."""
    if number < 0:
        raise ValueError("decomposition_sum() needs a non-negative number")
    return number + sum(int(digit) for digit in str(number))


def smallest_generator(n: int) -> int:
    """Return the smallest m whose decomposition sum is n, or 0 if none exists."""
    # A generator can fall short of n by at most 9 per digit.
    start = max(1, n - 9 * len(str(abs(n))))
    for candidate in range(start, n):
        if decomposition_sum(candidate) == n:
            return candidate
    return 0


def honeycomb_distance(n: int) -> int:
    """Return how many rooms are passed from room 1 to room n, both included."""
    if n < 1:
        raise ValueError("rooms are numbered from 1")
    ring = 1
    last_room = 1
    while n > last_room:
        last_room += 6 * ring
        ring += 1
    return ring


def apartment_residents(floor: int, room: int) -> int:
    """Return how many people live in the given room of the given floor.

    Floor 0 room i holds i people; room b on floor a holds the sum of rooms
    1..b on the floor below.
    """
    if floor < 0 or room < 1:
        raise ValueError("floors start at 0 and rooms start at 1")
    residents = list(range(1, room + 1))
    for _ in range(floor):
        running = 0
        for index, count in enumerate(residents):
            running += count
            residents[index] = running
    return residents[-1]


def nth_doom_number(n: int) -> int:
    """Return the n-th smallest number whose decimal form contains '666'."""
    if n < 1:
        raise ValueError("n must be positive")
    found = 0
    number = int(_DOOM_MARK)
    while True:
        if _DOOM_MARK in str(number):
            found += 1
            if found == n:
                return number
        number += 1