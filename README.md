# pushswap

Sorts a list of distinct integers using only the operations of the
push-swap puzzle, and prints every move it makes.

The puzzle has two stacks, `a` and `b`. The numbers start on `a`, and `b` is
empty. The allowed moves are:

| Move  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom goes to the top)      |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

The sorter works in two phases. First it keeps a longest increasing
subsequence of `a` in place and pushes every other element to `b`. Then it
brings the elements of `b` back one at a time. At each step it picks the
element that costs the fewest moves to insert at its place in `a`. At the
end it rotates `a` so that its smallest element is on top.

## Installing

```
pip install .
```

## Command line

```
pushswap 3 -1 7 0 12
```

Each argument must be an integer in the 32-bit signed range. It may have
one leading `+` or `-`, followed by digits only.

The program prints one move per line. After the moves it prints three more
lines:

- the final contents of `a`, followed by `< a`;
- the final contents of `b`, followed by `< b`;
- the number of moves counted.

Values in the two stack lines are ranks, with 0 for the smallest number.
Input that is already in ascending order prints nothing.

If an argument is not a valid integer, or a number appears twice, the
program prints `er` and exits with status 255.

## Library use

```python
from pushswap.parsing import parse_numbers, to_ranks
from pushswap.operations import Stacks
from pushswap.greedy import greedy_sort

ranks = to_ranks(parse_numbers(["3", "-1", "7", "0", "12"]))
stacks = Stacks(a=ranks, remain=len(ranks), sizes_a=[len(ranks)])
greedy_sort(stacks)
print(stacks.a)    # the ranks, rearranged by the sorter
print(stacks.log)  # every move issued, in order
```

The sorters expect two fields to be set before they start:

- `remain`: the number of unsorted elements on `a`;
- `sizes_a`: the initial list of run sizes, normally `[len(a)]`.

`Stacks` has one method per move (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`,
`rr`, `rra`, `rrb`, `rrr`). Each move that is issued is appended to `log`.
If `out` is given a text stream, each move is also written to it, one per
line. `pa` and `pb` do nothing on an empty source stack, and are then not
logged. `is_sorted()` is true when `b` is empty and `a` ascends from top to
bottom.

`count` keeps its own tally, separate from `log`. A single move adds one
when it changes its stack. A combined move adds one for each stack it
changes, less one.

Other building blocks:

- `pushswap.lis`:
  - `longest_increasing` and `longest_decreasing` return a longest strictly
    monotone subsequence.
  - `lis_length` and `lds_length` return the length of that subsequence.
  - `rotate_right` moves the last element to the front.
  - `best_rotation` and `best_reverse_rotation` pick the rotation step with
    the longest run. They raise `ValueError` on an empty sequence.
  - `apply_rotation` rotates stack `a` by a given number of steps, the
    cheaper way round.
- `pushswap.runs`:
  - `run_sort` is an alternative sorter. It splits the stacks into
    ascending and descending runs back and forth, then merges the runs.
  - Its helpers are `split_to_b`, `split_to_a`, `record_sizes`,
    `rotate_sizes` and `drop_first_size`.
- `pushswap.greedy`:
  - `greedy_sort` is the sorter used by the command line.
  - `insertion_index` and `move_cost` are its helpers. `move_cost` raises
    `IndexError` for an index that is not on `b`.
- `pushswap.parsing`:
  - `parse_int` and `parse_numbers` read the arguments. Both raise
    `ParseError`, a subclass of `ValueError`, on bad input.
  - `has_duplicates` reports whether any value occurs more than once.
  - `to_ranks` replaces each value by its position in sorted order.

## Limits

- The command line always uses `greedy_sort`. `run_sort` is reachable only
  from Python.
- There is no checker that reads a list of moves and verifies it.
- The moves printed are not minimised or optimised after the fact.

## Running the tests

```
pip install .[test]
pytest
```