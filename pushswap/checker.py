"""Checks whether a list of instructions sorts the given integers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .parsing import ParseError, parse_arguments
from .stacks import Operation, Stacks

_MATCH_ORDER = (
    Operation.SA,
    Operation.SB,
    Operation.SS,
    Operation.PA,
    Operation.PB,
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
)


def instruction_matches(line: str, name: Operation | str) -> bool:
    """True if ``line`` agrees with ``name`` followed by a newline.

    Only the common length of the two is compared, so a final line without
    its newline still matches its instruction.
    """
    expected = f"{Operation(name).value}\n"
    common = min(len(line), len(expected))
    return line[:common] == expected[:common]


def _operation_for(line: str) -> Operation:
    for operation in _MATCH_ORDER:
        if instruction_matches(line, operation):
            return operation
    raise ValueError(f"unknown instruction: {line!r}")


def run_instructions(stacks: Stacks, lines: Iterable[str]) -> None:
    """Apply each instruction line to ``stacks`` in order.

    Raises ValueError at the first line that names no instruction; the
    lines before it have already been applied.
    """
    for line in lines:
        stacks.apply(_operation_for(line))


def verdict(stacks: Stacks) -> str:
    """Return ``"OK"`` if a is sorted and b is empty, otherwise ``"KO"``."""
    return "OK" if stacks.is_sorted() and not stacks.b else "KO"


def check(values: Iterable[int], lines: Iterable[str]) -> str:
    """Run ``lines`` on a stack a holding ``values`` (top first) and return the verdict."""
    stacks = Stacks(values)
    run_instructions(stacks, lines)
    return verdict(stacks)


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] == "":
        return 0
    try:
        values = parse_arguments(args)
        result = check(values, sys.stdin)
    except (ParseError, ValueError):
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write(f"{result}\n")
    sys.stdout.flush()
    return 0