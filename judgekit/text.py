"""Character and word level string tasks."""

from __future__ import annotations

import string


def first_positions(word: str) -> list[int]:
    """Return, for each letter a..z, its first index in word or -1.

    Raises ValueError if word holds anything other than lowercase letters.
    """
    positions: dict[str, int] = {}
    for index, char in enumerate(word):
        if char not in string.ascii_lowercase:
            raise ValueError(f"not a lowercase letter: {char!r}")
        positions.setdefault(char, index)
    return [positions.get(letter, -1) for letter in string.ascii_lowercase]


def count_words(line: str) -> int:
    """Return the number of space-separated words in line."""
    return sum(1 for chunk in line.split(" ") if chunk)


def ascii_code(char: str) -> int:
    """Return the character code of a single character."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    return ord(char)


def digit_sum(digits: str, count: int) -> int:
    """Return the sum of the first count digits of a digit string."""
    if count < 0 or count > len(digits):
        raise ValueError("count does not fit the digit string")
    head = digits[:count]
    if not all(ch in string.digits for ch in head):
        raise ValueError("digit string holds a non-digit")
    return sum(int(ch) for ch in head)


def char_at(text: str, index: int) -> str:
    """Return the character at 1-based position index."""
    if not 1 <= index <= len(text):
        raise IndexError("position out of range")
    return text[index - 1]


def repeat_chars(text: str, times: int) -> str:
    """Return text with every character repeated times in a row."""
    return "".join(char * times for char in text)


def ox_score(result: str) -> int:
    """Score an O/X quiz: each 'O' earns the length of its current O streak."""
    total = 0
    streak = 0
    for mark in result:
        if mark == "O":
            streak += 1
            total += streak
        else:
            streak = 0
    return total