# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations. The package also checks whether a sequence of operations sorts
a given list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the first element becomes the last |
| `rra`, `rrb`, `rrr` | rotate down: the last element becomes the first |

Swapping a stack with fewer than two elements, or pushing from an empty
stack, raises `StackError`. Rotating a stack with fewer than two elements
does nothing, unless the `Stacks` object was made with
`strict_rotations=True`, in which case it raises `StackError` too.

## Sorting

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

You can pass the numbers as separate arguments or pack them into quoted
strings separated by spaces. Each number must be an integer that fits in
32 bits. No number may appear twice, and no argument may be empty or hold
only spaces. If any of these rules is broken, `Error` is printed to
standard error and the exit status is non-zero. Nothing is printed if the
input is already sorted or has only one number.

Otherwise the operations are printed one per line. Two to five numbers are
sorted with short fixed strategies. Larger inputs are sorted in chunks: the
numbers are ranked, moved to `b` in windows of 13 (37 above 100 numbers),
then brought back to `a` largest first.

## Checking

```
push-swap 3 2 5 1 4 | checker 3 2 5 1 4
```

`checker` takes the same arguments as `push-swap` and reads operations
from standard input, one per line. Every line, the last one included,
must end with a newline. It prints `OK` if the operations leave `a` sorted
and `b` empty, and `KO` otherwise. It prints `Error` to standard error if
a line is not a known operation or an operation cannot be carried out,
such as `pa` while `b` is empty.

## Library use

```python
from pushswap.cli import solve
from pushswap.checker import check

ops = solve([3, 2, 5, 1, 4])
print(check([3, 2, 5, 1, 4], (f"{op}\n" for op in ops)))
```

- `pushswap.stacks`: `Stacks` holds the two stacks, with one method per
  operation, plus `apply`, `is_solved` and a `history` of the operations
  that were applied. It also holds the `Operation` enum and `is_sorted`.
- `pushswap.sorting`: the sorting steps (`sort_three`, `sort_five`,
  `push_to_b`, `push_to_a`, `chunks_sort`).
- `pushswap.parsing`: `parse_arguments` checks and reads command-line
  arguments and raises `InputError` when they are invalid.
- `pushswap.checker`: `parse_operation`, `execute_operation` and `check`.