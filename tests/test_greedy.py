import io
import itertools

import pytest

from pushswap.greedy import greedy_sort, insertion_index, move_cost
from pushswap.operations import Stacks


def _fresh(values):
    values = list(values)
    return Stacks(a=values, remain=len(values), sizes_a=[len(values)])


def _replay(values, log):
    stacks = Stacks(a=list(values))
    for name in log:
        getattr(stacks, name)()
    return stacks


def test_insertion_index_picks_smallest_larger_element():
    stacks = Stacks(a=[3, 5, 1, 8], b=[4])
    index = insertion_index(stacks, 4)
    assert stacks.a[index] == 5


def test_insertion_index_falls_back_to_minimum():
    stacks = Stacks(a=[3, 5, 1, 8], b=[9])
    index = insertion_index(stacks, 9)
    assert stacks.a[index] == 1


def test_insertion_index_empty_a():
    stacks = Stacks(a=[], b=[2])
    assert insertion_index(stacks, 2) == 0


def test_move_cost_zero_when_both_in_place():
    stacks = Stacks(a=[5, 7], b=[3, 9])
    assert move_cost(stacks, 0) == 0


def test_move_cost_is_never_negative():
    stacks = Stacks(a=[2, 6, 9, 0], b=[4, 1, 8, 7, 3, 5])
    costs = [move_cost(stacks, j) for j in range(len(stacks.b))]
    assert all(cost >= 0 for cost in costs)


def test_move_cost_bad_index():
    stacks = Stacks(a=[1], b=[0])
    with pytest.raises(IndexError):
        move_cost(stacks, 1)


def test_move_cost_does_not_change_stacks():
    stacks = Stacks(a=[2, 6, 9, 0], b=[4, 1, 8])
    move_cost(stacks, 2)
    assert stacks.a == [2, 6, 9, 0]
    assert stacks.b == [4, 1, 8]
    assert stacks.log == []


def test_sorted_input_only_rotates_through():
    stacks = _fresh([0, 1, 2, 3, 4])
    greedy_sort(stacks)
    assert stacks.a == [0, 1, 2, 3, 4]
    assert stacks.log == ["ra"] * 5


@pytest.mark.parametrize("values", list(itertools.permutations(range(5))))
def test_every_permutation_of_five_gets_sorted(values):
    stacks = _fresh(values)
    greedy_sort(stacks)
    assert stacks.is_sorted()
    assert stacks.a == sorted(values)


@pytest.mark.parametrize(
    "values",
    [
        [9, 3, 7, 1, 0, 8, 2, 6, 4, 5],
        [5, 4, 3, 2, 1, 0],
        [1, 0],
        [0],
        [11, 2, 14, 7, 0, 5, 13, 9, 1, 12, 3, 10, 6, 8, 4],
    ],
)
def test_log_replays_to_same_result(values):
    stacks = _fresh(values)
    greedy_sort(stacks)
    replayed = _replay(values, stacks.log)
    assert replayed.a == stacks.a
    assert replayed.b == []
    assert replayed.count == stacks.count


def test_pushes_balance():
    values = [7, 2, 9, 4, 0, 6, 1, 8, 3, 5]
    stacks = _fresh(values)
    greedy_sort(stacks)
    assert stacks.log.count("pa") == stacks.log.count("pb")
    assert stacks.is_sorted()


def test_output_stream_matches_log():
    out = io.StringIO()
    values = [3, 0, 4, 1, 2]
    stacks = Stacks(a=list(values), remain=len(values), sizes_a=[len(values)], out=out)
    greedy_sort(stacks)
    assert out.getvalue().splitlines() == stacks.log
    assert stacks.is_sorted()


def test_empty_input_does_nothing():
    stacks = _fresh([])
    greedy_sort(stacks)
    assert stacks.a == []
    assert stacks.log == []