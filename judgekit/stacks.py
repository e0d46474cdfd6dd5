"""Stack-driven tasks: running sums, command interpreters and bracket checks."""

from __future__ import annotations

from collections.abc import Iterable

_EMPTY = -1
_PAIRS = {")": "(", "]": "["}


def zero_sum(numbers: Iterable[int]) -> int:
    """Push each number; a zero removes the latest one. Return what remains summed."""
    stack: list[int] = []
    for number in numbers:
        if number == 0 and stack:
            stack.pop()
        else:
            stack.append(number)
    return sum(stack)


def _split_command(command: str) -> tuple[str, list[str]]:
    name, *args = command.split()
    return name, args


def _push_value(args: list[str]) -> int:
    if len(args) != 1:
        raise ValueError("push takes exactly one integer")
    return int(args[0])


def run_stack_commands(commands: Iterable[str]) -> list[int]:
    """Run push/pop/size/empty/top commands and return the printed values.

    pop and top report -1 on an empty stack; empty reports 1 or 0.
    Unrecognised commands are ignored.
    """
    stack: list[int] = []
    output: list[int] = []
    for command in commands:
        name, args = _split_command(command)
        if name == "push":
            stack.append(_push_value(args))
        elif name == "pop":
            output.append(stack.pop() if stack else _EMPTY)
        elif name == "size":
            output.append(len(stack))
        elif name == "empty":
            output.append(0 if stack else 1)
        elif name == "top":
            output.append(stack[-1] if stack else _EMPTY)
    return output


def stack_sequence(sequence: Iterable[int]) -> list[str] | None:
    """Return the '+'/'-' push and pop steps that build sequence from 1, 2, ...

    Returns None when the sequence cannot be produced with one stack.
    """
    stack: list[int] = []
    steps: list[str] = []
    following = 1
    for number in sequence:
        while following <= number:
            stack.append(following)
            steps.append("+")
            following += 1
        if stack and stack[-1] == number:
            stack.pop()
            steps.append("-")
        else:
            return None
    return steps


def _brackets_match(text: str, closers: dict[str, str]) -> bool:
    openers = set(closers.values())
    stack: list[str] = []
    for char in text:
        if char in openers:
            stack.append(char)
        elif char in closers:
            if not stack or stack[-1] != closers[char]:
                return False
            stack.pop()
    return not stack


def is_balanced(line: str) -> bool:
    """Return True if round and square brackets in line pair up properly."""
    return _brackets_match(line, _PAIRS)


def is_vps(text: str) -> bool:
    """Return True if the parentheses in text form a valid parenthesis string."""
    return _brackets_match(text, {")": "("})