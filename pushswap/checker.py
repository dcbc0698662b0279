"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stacks import Operation, StackError, Stacks


class InvalidOperationError(ValueError):
    """Raised when a line read from the input is not a known operation."""


def parse_operation(line: str) -> Operation:
    """Return the operation named by ``line``.

    A line must hold exactly one operation name followed by a newline; a final
    line without its newline is rejected as well.
    """
    if not line.endswith("\n"):
        raise InvalidOperationError(f"operation line must end with a newline: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InvalidOperationError(f"unknown operation: {line!r}") from None


def execute_operation(stacks: Stacks, line: str) -> Operation:
    """Parse ``line`` and carry out its operation on ``stacks``."""
    operation = parse_operation(line)
    stacks.apply(operation)
    return operation


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply every operation line to stacks built from ``values``.

    Returns True if stack a ends sorted and stack b ends empty.  Raises
    ``InvalidOperationError`` on the first line that is not an operation and
    ``StackError`` when an operation cannot be carried out.
    """
    stacks = Stacks(values)
    for line in lines:
        execute_operation(stacks, line)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print OK, KO or Error."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError as error:
        sys.stderr.write("Error\n")
        return error.status
    try:
        solved = check(values, sys.stdin)
    except (InvalidOperationError, StackError):
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())