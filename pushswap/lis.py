"""Longest monotone subsequences and the rotation that favours them."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence

from pushswap.operations import Stacks

_Order = Callable[[int, int], bool]


def _chain_lengths(values: Sequence[int], follows: _Order) -> list[int]:
    lengths = [1] * len(values)
    for i, current in enumerate(values):
        for j, earlier in enumerate(values[:i]):
            if follows(current, earlier) and lengths[i] < lengths[j] + 1:
                lengths[i] = lengths[j] + 1
    return lengths


def _longest_chain(values: Sequence[int], follows: _Order) -> list[int]:
    lengths = [1] * len(values)
    chains: list[list[int]] = []
    for i, current in enumerate(values):
        chain = [current]
        for j, earlier in enumerate(values[:i]):
            if follows(current, earlier) and lengths[i] < lengths[j] + 1:
                chain = chains[j] + [current]
                lengths[i] = lengths[j] + 1
        chains.append(chain)
    if not chains:
        return []
    best = max(range(len(lengths)), key=lambda k: (lengths[k], -k))
    return list(chains[best])


def longest_increasing(values: Sequence[int]) -> list[int]:
    """Return a longest strictly increasing subsequence of ``values``.

    Among equally long candidates the one ending earliest wins, and each
    chain extends the first predecessor that gave it its length.
    """
    return _longest_chain(values, operator.gt)


def longest_decreasing(values: Sequence[int]) -> list[int]:
    """Return a longest strictly decreasing subsequence of ``values``."""
    return _longest_chain(values, operator.lt)


def lis_length(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence (0 if empty)."""
    return max(_chain_lengths(values, operator.gt), default=0)


def lds_length(values: Sequence[int]) -> int:
    """Length of the longest strictly decreasing subsequence (0 if empty)."""
    return max(_chain_lengths(values, operator.lt), default=0)


def rotate_right(values: Sequence[int]) -> list[int]:
    """Return a copy with the last element moved to the front."""
    items = list(values)
    if len(items) < 2:
        return items
    return [items[-1], *items[:-1]]


def _best_move(values: Sequence[int], measure: Callable[[Sequence[int]], int]) -> int:
    if not values:
        raise ValueError("cannot choose a rotation for an empty sequence")
    best = 0
    first_best = 0
    last_best = 0
    current = list(values)
    for step in range(1, len(current) + 1):
        length = measure(current)
        if best < length:
            best = length
            first_best = step
        if best == length:
            last_best = step
        current = rotate_right(current)
    if 100 - last_best < first_best:
        return last_best
    return first_best


def best_rotation(values: Sequence[int]) -> int:
    """Pick the rotation step at which the increasing run is longest.

    Each of the ``len(values)`` right rotations is scored by
    :func:`lis_length`; the first and the last step reaching the best score
    are kept and one of them is returned. ``values`` is left untouched.
    """
    return _best_move(values, lis_length)


def best_reverse_rotation(values: Sequence[int]) -> int:
    """Like :func:`best_rotation`, scored by :func:`lds_length`."""
    return _best_move(values, lds_length)


def apply_rotation(stacks: Stacks, move: int) -> None:
    """Rotate stack ``a`` by ``move`` steps the cheaper way round."""
    size = len(stacks.a)
    if move < size // 2:
        for _ in range(move):
            stacks.rra()
    else:
        for _ in range(size - move):
            stacks.ra()