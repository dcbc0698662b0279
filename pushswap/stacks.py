"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """One of the eleven moves allowed on the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class StackError(Exception):
    """Raised when an operation cannot be carried out on the current stacks."""


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values are in non-decreasing order."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class Stacks:
    """Stacks ``a`` and ``b``; the first item of each deque is its top.

    Every operation that takes effect is appended to ``history``.  Rotating a
    stack that holds fewer than two numbers is a silent no-op unless
    ``strict_rotations`` is set, in which case it raises ``StackError``.
    """

    def __init__(self, values: Iterable[int] = (), strict_rotations: bool = False) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.strict_rotations = strict_rotations
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    # -- helpers ---------------------------------------------------------

    @staticmethod
    def _require_swappable(stack: deque[int], name: str) -> None:
        if len(stack) < 2:
            raise StackError(f"cannot swap stack {name}: fewer than two elements")

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def _can_rotate(self, stack: deque[int], name: str) -> bool:
        if len(stack) >= 2:
            return True
        if self.strict_rotations:
            raise StackError(f"cannot rotate stack {name}: fewer than two elements")
        return False

    @staticmethod
    def _push(source: deque[int], target: deque[int], name: str) -> None:
        if not source:
            raise StackError(f"cannot push from stack {name}: it is empty")
        target.appendleft(source.popleft())

    # -- swaps -----------------------------------------------------------

    def sa(self) -> None:
        """Swap the two top numbers of stack a."""
        self._require_swappable(self.a, "a")
        self._swap(self.a)
        self.history.append(Operation.SA)

    def sb(self) -> None:
        """Swap the two top numbers of stack b."""
        self._require_swappable(self.b, "b")
        self._swap(self.b)
        self.history.append(Operation.SB)

    def ss(self) -> None:
        """Do sa and sb at once."""
        self._require_swappable(self.a, "a")
        self._require_swappable(self.b, "b")
        self._swap(self.a)
        self._swap(self.b)
        self.history.append(Operation.SS)

    # -- pushes ----------------------------------------------------------

    def pa(self) -> None:
        """Move the top of stack b onto stack a."""
        self._push(self.b, self.a, "b")
        self.history.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of stack a onto stack b."""
        self._push(self.a, self.b, "a")
        self.history.append(Operation.PB)

    # -- rotations -------------------------------------------------------

    def ra(self) -> None:
        """Move the top of stack a to its bottom."""
        if self._can_rotate(self.a, "a"):
            self.a.rotate(-1)
            self.history.append(Operation.RA)

    def rb(self) -> None:
        """Move the top of stack b to its bottom."""
        if self._can_rotate(self.b, "b"):
            self.b.rotate(-1)
            self.history.append(Operation.RB)

    def rr(self) -> None:
        """Do ra and rb at once."""
        rotate_a = self._can_rotate(self.a, "a")
        rotate_b = self._can_rotate(self.b, "b")
        if rotate_a:
            self.a.rotate(-1)
        if rotate_b:
            self.b.rotate(-1)
        self.history.append(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of stack a to its top."""
        if self._can_rotate(self.a, "a"):
            self.a.rotate(1)
            self.history.append(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of stack b to its top."""
        if self._can_rotate(self.b, "b"):
            self.b.rotate(1)
            self.history.append(Operation.RRB)

    def rrr(self) -> None:
        """Do rra and rrb at once."""
        rotate_a = self._can_rotate(self.a, "a")
        rotate_b = self._can_rotate(self.b, "b")
        if rotate_a:
            self.a.rotate(1)
        if rotate_b:
            self.b.rotate(1)
        self.history.append(Operation.RRR)

    # -- dispatch --------------------------------------------------------

    def apply(self, operation: Operation | str) -> None:
        """Carry out an operation given as an ``Operation`` or its name."""
        try:
            op = Operation(operation)
        except ValueError:
            raise StackError(f"unknown operation: {operation!r}") from None
        getattr(self, op.value)()

    def is_solved(self) -> bool:
        """Return True if stack a is sorted and stack b is empty."""
        return not self.b and is_sorted(self.a)