"""Command line: sort the given numbers and print the operations used."""

from __future__ import annotations

import sys

from pushswap.greedy import greedy_sort
from pushswap.operations import Stacks
from pushswap.parsing import ParseError, has_duplicates, parse_numbers, to_ranks

ERROR_STATUS = 255


def main(argv: list[str] | None = None) -> int:
    """Print one operation per line, then the final stacks and the move count."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    try:
        numbers = parse_numbers(args)
    except ParseError:
        out.write("er")
        return ERROR_STATUS
    if has_duplicates(numbers):
        out.write("er")
        return ERROR_STATUS

    ranks = to_ranks(numbers)
    if ranks == list(range(len(ranks))):
        return 0

    size = len(ranks)
    stacks = Stacks(a=ranks, remain=size, sizes_a=[size], out=out)
    greedy_sort(stacks)

    out.write("".join(f"{value} " for value in stacks.a) + "< a \n")
    out.write("".join(f"{value} " for value in stacks.b) + "< b \n")
    out.write(f"{stacks.count}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())