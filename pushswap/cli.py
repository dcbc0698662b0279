"""Command that prints a list of operations sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .sorting import chunks_sort
from .stacks import Operation, Stacks, is_sorted


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort ``values`` onto stack a."""
    if len(values) <= 1 or is_sorted(values):
        return []
    stacks = Stacks(values)
    chunks_sort(stacks)
    return list(stacks.history)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers, print the sorting operations and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError as error:
        sys.stderr.write("Error\n")
        return error.status
    for operation in solve(values):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())