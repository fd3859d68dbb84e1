"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable


class Operation(str, Enum):
    """An instruction understood by both the sorter and the checker."""

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


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, each a deque whose top is at index 0.

    When ``recording`` is true, every operation that the sorter would print
    is appended to :attr:`operations`.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        recording: bool = False,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.recording = recording
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, op: Operation) -> None:
        if self.recording:
            self.operations.append(op)

    def apply(self, op: Operation | str) -> None:
        """Perform one operation, given as an Operation or its name.

        Raises ValueError for an unknown name.
        """
        operation = Operation(op)
        getattr(self, operation.value)()

    def sa(self) -> None:
        """Swap the top two elements of a."""
        _swap(self.a)
        self._record(Operation.SA)

    def sb(self) -> None:
        """Swap the top two elements of b."""
        _swap(self.b)
        self._record(Operation.SB)

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._record(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens if b is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens if a is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record(Operation.PB)

    def ra(self) -> None:
        """Rotate a so its top goes to the bottom."""
        if _rotate(self.a):
            self._record(Operation.RA)

    def rb(self) -> None:
        """Rotate b so its top goes to the bottom."""
        if _rotate(self.b):
            self._record(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks.

        If a holds fewer than two elements nothing moves at all; if only b
        is too short, a is rotated but the operation is not recorded.
        """
        if not _rotate(self.a):
            return
        if _rotate(self.b):
            self._record(Operation.RR)

    def rra(self) -> None:
        """Rotate a so its bottom comes to the top."""
        _reverse_rotate(self.a)
        self._record(Operation.RRA)

    def rrb(self) -> None:
        """Rotate b so its bottom comes to the top."""
        _reverse_rotate(self.b)
        self._record(Operation.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record(Operation.RRR)

    def is_sorted(self) -> bool:
        """True if a is non-empty and ascending from top to bottom; b is ignored."""
        if not self.a:
            return False
        values = list(self.a)
        return all(x <= y for x, y in zip(values, values[1:]))