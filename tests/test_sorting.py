import itertools
import random

import pytest

from pushswap.sorting import (
    calculate_moves,
    chunks_sort,
    push_to_a,
    push_to_b,
    rank,
    smallest_position,
    sort_five,
    sort_three,
)
from pushswap.stacks import Stacks


def _shuffled(size, seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), size)
    while size > 1 and values == sorted(values):
        rng.shuffle(values)
    return values


def test_rank_pins_a_small_example():
    assert rank([30, 10, 20]) == [2, 0, 1]


def test_rank_is_a_permutation_preserving_order():
    values = _shuffled(40, 1)
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    for (v1, r1), (v2, r2) in itertools.combinations(zip(values, ranks), 2):
        assert (v1 < v2) == (r1 < r2)


def test_smallest_position():
    values = [3, 1, 2]
    assert values[smallest_position(values)] == min(values)
    assert smallest_position([]) == 0


def test_calculate_moves_forward_and_backward():
    values = [5, 1, 9, 3, 7, 2]
    assert calculate_moves(values, 5) == 0
    assert calculate_moves(values, 3) == 3
    assert calculate_moves(values, 2) == -5


def test_calculate_moves_magnitude_matches_position():
    values = _shuffled(21, 2)
    for position, value in enumerate(values):
        moves = calculate_moves(values, value)
        assert abs(moves) == position
        assert (moves >= 0) == (position <= len(values) // 2)


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_every_permutation(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.is_solved()
    assert len(stacks.history) <= 2


@pytest.mark.parametrize("values", list(itertools.permutations([4, -2, 9, 0, 7])))
def test_sort_five_every_permutation(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)


@pytest.mark.parametrize("values", list(itertools.permutations([10, 20, 30, 40])))
def test_sort_five_handles_four(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert stacks.is_solved()


def test_push_to_b_empties_a():
    values = _shuffled(30, 3)
    stacks = Stacks(values)
    push_to_b(stacks, len(values))
    assert not stacks.a
    assert sorted(stacks.b) == sorted(values)


def test_push_to_a_returns_sorted():
    values = _shuffled(30, 4)
    stacks = Stacks(values)
    push_to_b(stacks, len(values))
    push_to_a(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6, 7, 10, 50, 100, 101, 200])
def test_chunks_sort_solves(size):
    values = _shuffled(size, size)
    stacks = Stacks(values)
    chunks_sort(stacks)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(values)


@pytest.mark.parametrize("size", [5, 12, 120])
def test_history_replays_to_a_solution(size):
    values = _shuffled(size, 100 + size)
    stacks = Stacks(values)
    chunks_sort(stacks)
    replay = Stacks(values)
    for operation in stacks.history:
        replay.apply(operation)
    assert list(replay.a) == list(stacks.a)
    assert replay.is_solved()


def test_chunks_sort_single_element_does_nothing():
    stacks = Stacks([42])
    chunks_sort(stacks)
    assert stacks.history == []
    assert list(stacks.a) == [42]