"""Greedy insertion sort: keep an increasing run on ``a``, insert the rest cheaply.

After one split (see :func:`pushswap.runs.split_to_b`), stack ``a`` holds an
increasing run and the other elements wait on ``b``. Each round, the element
of ``b`` that is cheapest to put in place is brought to the top of ``b``. The
element of ``a`` it must sit on is brought to the top of ``a``, and the
element is pushed across. Finally ``a`` is rotated so its smallest element is
on top.
"""

from __future__ import annotations

from enum import Enum

from pushswap.operations import Stacks
from pushswap.runs import split_to_b


class _Route(Enum):
    BOTH_UP = 0
    BOTH_DOWN = 1
    A_DOWN_B_UP = 2
    A_UP_B_DOWN = 3


def _lowest_index(values: list[int]) -> int:
    if not values:
        return 0
    return min(range(len(values)), key=values.__getitem__)


def insertion_index(stacks: Stacks, value: int) -> int:
    """Index in ``a`` of the element that ``value`` must be pushed onto.

    This is the smallest element of ``a`` greater than ``value``. If there is
    none, it is the smallest element of ``a``. It is 0 when ``a`` is empty.
    """
    larger = [(item, index) for index, item in enumerate(stacks.a) if item > value]
    if larger:
        return min(larger)[1]
    return _lowest_index(stacks.a)


def _route_costs(stacks: Stacks, b_index: int) -> tuple[int, dict[_Route, int]]:
    a_size = len(stacks.a)
    b_size = len(stacks.b)
    a_index = insertion_index(stacks, stacks.b[b_index])
    if b_size - b_index > a_size - a_index:
        both_down = b_size + 1 - b_index
    else:
        both_down = a_size + 1 - a_index
    costs = {
        _Route.BOTH_UP: max(a_index, b_index),
        _Route.BOTH_DOWN: both_down,
        _Route.A_DOWN_B_UP: b_index + a_size + 1 - a_index,
        _Route.A_UP_B_DOWN: a_index + b_size + 1 - b_index,
    }
    return a_index, costs


def move_cost(stacks: Stacks, b_index: int) -> int:
    """Estimated number of moves to put ``b[b_index]`` in place on ``a``."""
    if not 0 <= b_index < len(stacks.b):
        raise IndexError(f"no element {b_index} on stack b")
    _, costs = _route_costs(stacks, b_index)
    return min(costs.values())


def _repeat(operation, times: int) -> None:
    for _ in range(times):
        operation()


def _insert(stacks: Stacks, b_index: int) -> None:
    a_index, costs = _route_costs(stacks, b_index)
    cheapest = min(costs.values())
    route = next(route for route in _Route if costs[route] == cheapest)
    a_size = len(stacks.a)
    b_size = len(stacks.b)

    if route is _Route.BOTH_UP:
        shared = min(a_index, b_index)
        _repeat(stacks.rr, shared)
        if a_index > b_index:
            _repeat(stacks.ra, a_index - shared)
        else:
            _repeat(stacks.rb, b_index - shared)
    elif route is _Route.BOTH_DOWN:
        down_a = a_size - a_index
        down_b = b_size - b_index
        shared = min(down_a, down_b)
        _repeat(stacks.rrr, shared)
        if down_a > down_b:
            _repeat(stacks.rra, down_a - shared)
        else:
            _repeat(stacks.rrb, down_b - shared)
    elif route is _Route.A_DOWN_B_UP:
        _repeat(stacks.rra, a_size - a_index)
        _repeat(stacks.rb, b_index)
    else:
        _repeat(stacks.ra, a_index)
        _repeat(stacks.rrb, b_size - b_index)
    stacks.pa()


def greedy_sort(stacks: Stacks) -> None:
    """Sort ``a`` by one split followed by cheapest-first insertion.

    ``stacks.remain`` must hold the number of unsorted elements on ``a`` and
    ``stacks.sizes_a`` the initial run list (normally ``[len(a)]``).
    """
    split_to_b(stacks)
    while stacks.b:
        stacks.ahead = _lowest_index(stacks.a)
        target = min(range(len(stacks.b)), key=lambda j: (move_cost(stacks, j), j))
        _insert(stacks, target)

    stacks.ahead = _lowest_index(stacks.a)
    size = len(stacks.a)
    if stacks.ahead < size - stacks.ahead:
        _repeat(stacks.ra, stacks.ahead)
    else:
        _repeat(stacks.rra, size - stacks.ahead)