"""Queue-driven simulations and a queue command interpreter."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_EMPTY = -1


def josephus(n: int, k: int) -> list[int]:
    """Return the removal order of people 1..n when every k-th is taken out."""
    if k < 1:
        raise ValueError("k must be positive")
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-(k - 1))
        order.append(circle.popleft())
    return order


def format_josephus(order: Iterable[int]) -> str:
    """Render a removal order as '<a, b, c>'."""
    return "<" + ", ".join(str(person) for person in order) + ">"


def last_card(n: int) -> int:
    """Discard the top card, move the next to the bottom; return the survivor."""
    if n < 1:
        raise ValueError("there must be at least one card")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.rotate(-1)
    return cards[0]


def print_order(priorities: Sequence[int], target: int) -> int:
    """Return the 1-based turn at which the document at index target is printed.

    A document is moved to the back while a more important one is waiting.
    """
    if not 0 <= target < len(priorities):
        raise IndexError("target is not a document in the queue")
    queue = deque(enumerate(priorities))
    printed = 0
    while queue:
        index, priority = queue.popleft()
        if any(other > priority for _, other in queue):
            queue.append((index, priority))
            continue
        printed += 1
        if index == target:
            return printed
    raise AssertionError("unreachable: target is always printed")


def run_queue_commands(commands: Iterable[str]) -> list[int]:
    """Run push/pop/size/empty/front/back commands and return the printed values.

    pop, front and back report -1 on an empty queue; empty reports 1 or 0.
    Unrecognised commands are ignored.
    """
    queue: deque[int] = deque()
    output: list[int] = []
    for command in commands:
        name, *args = command.split()
        if name == "push":
            if len(args) != 1:
                raise ValueError("push takes exactly one integer")
            queue.append(int(args[0]))
        elif name == "pop":
            output.append(queue.popleft() if queue else _EMPTY)
        elif name == "size":
            output.append(len(queue))
        elif name == "empty":
            output.append(0 if queue else 1)
        elif name == "front":
            output.append(queue[0] if queue else _EMPTY)
        elif name == "back":
            output.append(queue[-1] if queue else _EMPTY)
    return output