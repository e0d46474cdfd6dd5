"""Exhaustive searches over small boards, card hands and groups of people."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

_TILE = 8
_COLOURS = frozenset("BW")


def _validate_board(board: Sequence[str]) -> None:
    if len(board) < _TILE:
        raise ValueError(f"the board needs at least {_TILE} rows")
    width = len(board[0])
    if width < _TILE:
        raise ValueError(f"the board needs at least {_TILE} columns")
    for row in board:
        if len(row) != width:
            raise ValueError("every row of the board must have the same length")
        if not set(row) <= _COLOURS:
            raise ValueError("the board may hold only 'B' and 'W'")


def _repaint_at(board: Sequence[str], top: int, left: int) -> int:
    """Squares to repaint so the 8x8 tile at (top, left) becomes a chessboard."""
    white_first = 0
    for i in range(_TILE):
        row = board[top + i]
        for j in range(_TILE):
            expected = "W" if (i + j) % 2 == 0 else "B"
            if row[left + j] != expected:
                white_first += 1
    return min(white_first, _TILE * _TILE - white_first)


def min_repaint(board: Sequence[str]) -> int:
    """Return the fewest squares to repaint for some 8x8 chessboard in board.

    Rows are strings of 'B' and 'W'; the board must be at least 8 by 8.
    """
    _validate_board(board)
    rows, columns = len(board), len(board[0])
    return min(
        _repaint_at(board, top, left)
        for top in range(rows - _TILE + 1)
        for left in range(columns - _TILE + 1)
    )


def blackjack(cards: Iterable[int], limit: int) -> int:
    """Return the largest sum of three cards not above limit, or 0 if none fits."""
    best = 0
    for hand in combinations(list(cards), 3):
        total = sum(hand)
        if best < total <= limit:
            best = total
    return best


def bulk_ranks(people: Sequence[tuple[int, int]]) -> list[int]:
    """Return each person's rank: one plus how many are both heavier and taller."""
    return [
        1
        + sum(
            1
            for other_weight, other_height in people
            if other_weight > weight and other_height > height
        )
        for weight, height in people
    ]