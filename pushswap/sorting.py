"""The sorting strategy: small cases by hand, larger ones by chunks."""

from __future__ import annotations

from collections.abc import Sequence

from .stacks import Stacks


def rank(values: Sequence[int]) -> list[int]:
    """Return, for each value, how many values are smaller than it."""
    return [sum(other < value for other in values) for value in values]


def smallest_position(values: Sequence[int]) -> int:
    """Return the position of the first smallest value, or 0 if there is none."""
    if not values:
        return 0
    return min(range(len(values)), key=lambda position: (values[position], position))


def calculate_moves(values: Sequence[int], target: int) -> int:
    """Return the distance from the top to ``target``.

    The distance is positive when rotating forward is the shorter way and
    negative when rotating backward is.
    """
    moves = 0
    for value in values:
        if value == target:
            break
        moves += 1
    return moves if moves <= len(values) // 2 else -moves


def sort_three(stacks: Stacks) -> None:
    """Sort the three numbers of stack a in at most two operations."""
    first, second, third = list(stacks.a)[:3]
    if first > second > third:
        stacks.sa()
        stacks.rra()
    elif first > third > second:
        stacks.ra()
    elif second > first > third:
        stacks.rra()
    elif second > third > first:
        stacks.sa()
        stacks.ra()
    elif third > first > second:
        stacks.sa()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five numbers by parking the smallest on stack b."""
    size = len(stacks.a)
    while size > 3:
        position = smallest_position(list(stacks.a))
        if position <= size // 2:
            for _ in range(position):
                stacks.ra()
        else:
            for _ in range(size - position):
                stacks.rra()
        stacks.pb()
        size -= 1
    sort_three(stacks)
    stacks.pa()
    if stacks.b:
        stacks.pa()


def push_to_b(stacks: Stacks, size: int) -> None:
    """Move every number to stack b in rough chunks of rank."""
    ranks = dict(zip(stacks.a, rank(list(stacks.a))))
    chunk = 37 if size > 100 else 13
    pushed = 0
    while pushed < size:
        top = ranks[stacks.a[0]]
        if top <= pushed:
            stacks.pb()
            pushed += 1
        elif top <= chunk + pushed:
            stacks.pb()
            stacks.rb()
            pushed += 1
        else:
            stacks.ra()


def push_to_a(stacks: Stacks) -> None:
    """Bring the numbers back from stack b, largest first."""
    size = len(stacks.b)
    for pushed in range(size):
        target = max(stacks.b)
        moves = calculate_moves(list(stacks.b), target)
        if pushed != size - 1:
            if moves > 0:
                while stacks.b[0] != target:
                    stacks.rb()
            elif moves < 0:
                while stacks.b[0] != target:
                    stacks.rrb()
        stacks.pa()


def chunks_sort(stacks: Stacks) -> None:
    """Sort stack a, choosing the method by its size."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_five(stacks)
    elif size > 5:
        push_to_b(stacks, size)
        push_to_a(stacks)