"""Small decisions and fixed-shape listings driven by conditionals and loops."""

from __future__ import annotations


def is_leap_year(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def compare(a: int, b: int) -> str:
    """Return '>', '<' or '==' describing how a relates to b."""
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "=="


def grade(score: int) -> str:
    """Return the letter grade A, B, C, D or F for an exam score."""
    for threshold, letter in ((90, "A"), (80, "B"), (70, "C"), (60, "D")):
        if score >= threshold:
            return letter
    return "F"


def alarm_time(hour: int, minute: int) -> tuple[int, int]:
    """Return the time 45 minutes before hour:minute on a 24-hour clock."""
    minute -= 45
    if minute < 0:
        minute += 60
        hour -= 1
        if hour < 0:
            hour = 23
    return hour, minute


def hotel_room(floors: int, rooms_per_floor: int, guest: int) -> int:
    """Return the room number (floor * 100 + room) given to the guest-th guest.

    Guests fill floors bottom to top before moving to the next room column.
    """
    if floors < 1:
        raise ValueError("a hotel needs at least one floor")
    floor, column = divmod(guest, floors)
    if column == 0:
        return floors * 100 + floor
    return column * 100 + floor + 1


def multiplication_table(n: int) -> list[str]:
    """Return the nine lines 'n * i = n*i' for i from 1 to 9."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 10)]


def count_up(n: int) -> list[int]:
    """Return the integers 1 through n."""
    return list(range(1, n + 1))