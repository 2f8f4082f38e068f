"""Run-merging sort: peel monotone runs off between the stacks, then merge them.

The run sizes are tracked in ``Stacks.sizes_a`` and ``Stacks.sizes_b``. Each
list holds one entry per run that lives on that stack.
"""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.lis import (
    lds_length,
    lis_length,
    longest_decreasing,
    longest_increasing,
    rotate_right,
)
from pushswap.operations import Stacks

_GROWTH_NUMERATOR = 7
_GROWTH_DENOMINATOR = 3


def _outgrows(bigger: int, smaller: int) -> bool:
    return bigger > (_GROWTH_NUMERATOR * smaller) // _GROWTH_DENOMINATOR


def _last_outgrows_previous(sizes: Sequence[int]) -> bool:
    return len(sizes) >= 2 and _outgrows(sizes[-1], sizes[-2])


def _first_outgrows_last(sizes: Sequence[int]) -> bool:
    return bool(sizes) and _outgrows(sizes[0], sizes[-1])


def record_sizes(stacks: Stacks, lissize: int, to_b: bool) -> None:
    """Update the run sizes after a split.

    The stack that was split loses its first recorded run and gains one of
    ``lissize`` at the end; the other stack gets ``stacks.remain`` in front.
    """
    if to_b:
        stacks.sizes_a = [*stacks.sizes_a[1:], lissize]
        stacks.sizes_b = [stacks.remain, *stacks.sizes_b]
    else:
        stacks.sizes_b = [*stacks.sizes_b[1:], lissize]
        stacks.sizes_a = [stacks.remain, *stacks.sizes_a]


def rotate_sizes(sizes: Sequence[int]) -> list[int]:
    """Return the sizes with the last entry moved to the front."""
    return rotate_right(sizes)


def drop_first_size(sizes: Sequence[int]) -> list[int]:
    """Return the sizes without their first entry."""
    return list(sizes[1:])


def split_to_b(stacks: Stacks) -> None:
    """Keep a longest increasing run of the top ``remain`` of ``a``; push the rest to ``b``."""
    window = stacks.a[: stacks.remain]
    keep = set(longest_increasing(window))
    lissize = lis_length(window)
    passes = stacks.remain
    stacks.remain -= lissize
    for _ in range(passes):
        if stacks.a and stacks.a[0] in keep:
            stacks.ra()
        else:
            stacks.pb()
    record_sizes(stacks, lissize, True)


def split_to_a(stacks: Stacks) -> None:
    """Keep a longest decreasing run of the top ``remain`` of ``b``; push the rest to ``a``."""
    window = stacks.b[: stacks.remain]
    keep = set(longest_decreasing(window))
    ldssize = lds_length(window)
    passes = stacks.remain
    stacks.remain -= ldssize
    for _ in range(passes):
        if stacks.b and stacks.b[0] in keep:
            stacks.rb()
        else:
            stacks.pa()
    record_sizes(stacks, ldssize, False)


def _merge_into_b(stacks: Stacks) -> None:
    if _last_outgrows_previous(stacks.sizes_b) and _first_outgrows_last(stacks.sizes_a):
        run_b = stacks.sizes_b[-1]
        run_a = stacks.sizes_a[-1]
        shared = min(run_a, run_b)
        for _ in range(shared):
            stacks.rrr()
        for _ in range(run_b - shared):
            stacks.rrb()
        for _ in range(run_a - shared):
            stacks.rra()
        stacks.sizes_b = rotate_sizes(stacks.sizes_b)
        stacks.sizes_a = rotate_sizes(stacks.sizes_a)
    elif _last_outgrows_previous(stacks.sizes_b):
        for _ in range(stacks.sizes_b[-1]):
            stacks.rrb()
        stacks.sizes_b = rotate_sizes(stacks.sizes_b)
    elif _first_outgrows_last(stacks.sizes_a):
        for _ in range(stacks.sizes_a[-1]):
            stacks.rra()
        stacks.sizes_a = rotate_sizes(stacks.sizes_a)

    incoming = stacks.sizes_a[0]
    moved = 0
    for _ in range(stacks.sizes_b[-1]):
        while moved < incoming and stacks.a and stacks.b and stacks.a[0] < stacks.b[-1]:
            stacks.pb()
            moved += 1
        stacks.rrb()
    while moved < incoming:
        stacks.pb()
        moved += 1

    stacks.sizes_b = rotate_sizes(stacks.sizes_b)
    stacks.sizes_b[0] += stacks.sizes_a[0]
    stacks.sizes_a = drop_first_size(stacks.sizes_a)


def _merge_into_a(stacks: Stacks) -> None:
    if _last_outgrows_previous(stacks.sizes_a) and _first_outgrows_last(stacks.sizes_b):
        run_a = stacks.sizes_a[-1]
        run_b = stacks.sizes_b[-1]
        shared = min(run_a, run_b)
        for _ in range(shared):
            stacks.rrr()
        for _ in range(run_a - shared):
            stacks.rra()
        for _ in range(run_b - shared):
            stacks.rrb()
        stacks.sizes_a = rotate_sizes(stacks.sizes_a)
        stacks.sizes_b = rotate_sizes(stacks.sizes_b)
    elif _last_outgrows_previous(stacks.sizes_a):
        for _ in range(stacks.sizes_a[-1]):
            stacks.rra()
        stacks.sizes_a = rotate_sizes(stacks.sizes_a)
    elif _first_outgrows_last(stacks.sizes_b):
        for _ in range(stacks.sizes_b[-1]):
            stacks.rrb()
        stacks.sizes_b = rotate_sizes(stacks.sizes_b)

    incoming = stacks.sizes_b[0]
    moved = 0
    for _ in range(stacks.sizes_a[-1]):
        while moved < incoming and stacks.b and stacks.a and stacks.b[0] > stacks.a[-1]:
            stacks.pa()
            moved += 1
        stacks.rra()
    while moved < incoming:
        stacks.pa()
        moved += 1

    stacks.sizes_a = rotate_sizes(stacks.sizes_a)
    stacks.sizes_a[0] += stacks.sizes_b[0]
    stacks.sizes_b = drop_first_size(stacks.sizes_b)


def run_sort(stacks: Stacks) -> None:
    """Sort by splitting monotone runs back and forth, then merging them.

    ``stacks.remain`` must hold the number of unsorted elements on ``a`` and
    ``stacks.sizes_a`` the initial run list (normally ``[len(a)]``).
    """
    to_b = True
    while stacks.remain > 1:
        if to_b:
            split_to_b(stacks)
        else:
            split_to_a(stacks)
        to_b = not to_b

    if len(stacks.sizes_a) > len(stacks.sizes_b):
        if len(stacks.a) >= 2 and stacks.a[0] > stacks.a[1]:
            stacks.sa()
    elif len(stacks.b) >= 2 and stacks.b[0] > stacks.b[1]:
        stacks.sb()

    while stacks.sizes_b:
        if len(stacks.sizes_a) > len(stacks.sizes_b):
            _merge_into_b(stacks)
        else:
            _merge_into_a(stacks)