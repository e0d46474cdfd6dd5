import pytest

from judgekit.stacks import (
    is_balanced,
    is_vps,
    run_stack_commands,
    stack_sequence,
    zero_sum,
)


def _replay(steps):
    stack, popped, following = [], [], 1
    for step in steps:
        if step == "+":
            stack.append(following)
            following += 1
        else:
            popped.append(stack.pop())
    return popped


def test_zero_sum_without_zeros_is_plain_sum():
    values = [4, 9, 11]
    assert zero_sum(values) == sum(values)


def test_zero_sum_cancels_everything():
    assert zero_sum([3, 0, 4, 0]) == 0


def test_zero_sum_sample():
    assert zero_sum([1, 3, 5, 4, 0, 0, 7, 0, 0, 6]) == 7


def test_zero_sum_zero_on_empty_stack_is_pushed():
    assert zero_sum([0, 5]) == 5


def test_stack_commands_push_and_top():
    assert run_stack_commands(["push 1", "push 2", "top", "size"]) == [2, 2]


def test_stack_commands_empty_stack_reports_minus_one():
    assert run_stack_commands(["pop", "top", "empty", "size"]) == [-1, -1, 1, 0]


def test_stack_commands_pop_order_is_lifo():
    out = run_stack_commands(["push 10", "push 20", "pop", "pop", "empty"])
    assert out == [20, 10, 1]


def test_stack_commands_ignore_unknown():
    assert run_stack_commands(["push 3", "front", "top"]) == [3]


def test_stack_push_needs_argument():
    with pytest.raises(ValueError):
        run_stack_commands(["push"])


def test_stack_sequence_rebuilds_sample():
    sequence = [4, 3, 6, 8, 7, 5, 2, 1]
    steps = stack_sequence(sequence)
    assert steps.count("+") == len(sequence)
    assert steps.count("-") == len(sequence)
    assert _replay(steps) == sequence


def test_stack_sequence_impossible():
    assert stack_sequence([1, 2, 5, 3, 4]) is None


def test_stack_sequence_ascending_alternates():
    assert stack_sequence([1, 2, 3]) == ["+", "-", "+", "-", "+", "-"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("So when I die (the [first] I will see in (heaven) is a score list).", True),
        ("[ first in ] ( first out ).", True),
        ("Half Moon tonight (At least it is better than no Moon at all].", False),
        ("A rope may form )( a trail in a maze.", False),
        ("Help( I[m being held prisoner in a fortune cookie factory)].", False),
        ("([ (([( [ ] ) ( ) (( ))] )) ]).", True),
        (" .", True),
    ],
)
def test_is_balanced(line, expected):
    assert is_balanced(line) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(())())", False),
        ("(((()())()", False),
        ("(()())((()))", True),
        ("((()()(()))(((())))()", False),
        ("()()()()(()()())()", True),
        ("(()((())()(", False),
        ("", True),
    ],
)
def test_is_vps(text, expected):
    assert is_vps(text) is expected