"""The sorting strategy and the command that prints its instructions."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .lis import longest_increasing_subsequence
from .moves import calculate_target_position, locate_non_lis_element, rotate_min_to_top
from .parsing import ParseError, parse_arguments
from .stacks import Operation, Stacks


def _three_step(stacks: Stacks, first: int, second: int, third: int) -> None:
    """Apply the operations chosen for one reading of the top three values."""
    if (
        (first > second and second < third and third > first)
        or (first > second and second > third and third < first)
        or (first < second and second > third and third > first)
    ):
        stacks.sa()
    if first > second and second < third and third < first:
        stacks.ra()
    if first < second and second > third and third < first:
        stacks.rra()


def sort_three(stacks: Stacks) -> None:
    """Sort the top three elements of a into ascending order.

    Raises ValueError if a holds fewer than three elements or if its top
    three are not distinct.
    """
    if len(stacks.a) < 3:
        raise ValueError("stack a needs at least three elements")
    if len({stacks.a[0], stacks.a[1], stacks.a[2]}) < 3:
        raise ValueError("the top three elements of a must be distinct")
    while True:
        first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
        if first < second < third:
            return
        _three_step(stacks, first, second, third)


def insert_back_sorted(stacks: Stacks) -> None:
    """Push every element of b back onto a, each at its sorted place."""
    while stacks.b:
        remaining_b = calculate_target_position(stacks)
        for _ in range(-remaining_b):
            stacks.rrb()
        for _ in range(remaining_b):
            stacks.rb()
        stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack a of five elements using b as scratch space."""
    stacks.pb()
    stacks.pb()
    sort_three(stacks)
    insert_back_sorted(stacks)
    rotate_min_to_top(stacks)


def transfer_non_lis_to_b(stacks: Stacks, lis: Sequence[int]) -> None:
    """Move every element of a that is not in ``lis`` onto b."""
    position = locate_non_lis_element(stacks.a, lis)
    while position is not None:
        for _ in range(position):
            stacks.ra()
        stacks.pb()
        position = locate_non_lis_element(stacks.a, lis)


def swap_if_descending(stacks: Stacks) -> None:
    """Swap the top of a once if a holds two or more values in descending order."""
    values = list(stacks.a)
    if len(values) < 2:
        return
    if any(current < following for current, following in zip(values, values[1:])):
        return
    stacks.sa()


def _execute_sort_algorithm(stacks: Stacks) -> None:
    size = len(stacks.a)
    if size == 3:
        sort_three(stacks)
        return
    if size == 5:
        sort_five(stacks)
        return
    lis = longest_increasing_subsequence(list(stacks.a))
    transfer_non_lis_to_b(stacks, lis)
    insert_back_sorted(stacks)
    rotate_min_to_top(stacks)


def sort_stack(values: Iterable[int]) -> list[Operation]:
    """Return the operations the program prints to sort ``values`` (top first).

    A descending input of two or more values is first swapped once; a stack
    of two values is then left as it is.
    """
    stacks = Stacks(values, recording=True)
    if not stacks.a:
        return []
    swap_if_descending(stacks)
    if len(stacks.a) == 2:
        return stacks.operations
    if not stacks.is_sorted():
        _execute_sort_algorithm(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions that sort the integers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if args[0] == "":
        sys.stderr.write("Error\n")
        return 1
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    operations = sort_stack(values)
    for operation in operations:
        sys.stdout.write(f"{operation.value}\n")
    sys.stdout.flush()
    return 1 if len(values) == 2 else 0