"""Move costs and the rotations that bring stack elements into place."""

from __future__ import annotations

from typing import Sequence

from .stacks import Stacks


def rotation_moves(index: int, size: int) -> int:
    """Signed rotations that bring ``index`` to the top of a stack of ``size``.

    Positive numbers mean forward rotations and negative numbers mean
    reverse rotations. Whichever direction is shorter is chosen.
    """
    if index > size // 2:
        return index - size
    return index


def smaller_absolute(a: int, b: int) -> int:
    """Return whichever of ``a`` and ``b`` has the smaller magnitude, keeping its sign.

    On a tie ``a`` is returned.
    """
    return a if abs(a) <= abs(b) else b


def larger_absolute(a: int, b: int) -> int:
    """Return the larger of the magnitudes of ``a`` and ``b``."""
    return max(abs(a), abs(b))


def rotation_cost(first: int, second: int, size: int) -> int:
    """Return the cheaper of the signed rotations that reach ``first`` or ``second``.

    On a tie the rotation for ``second`` wins.
    """
    return smaller_absolute(rotation_moves(second, size), rotation_moves(first, size))


def extreme_position(stack_a: Sequence[int], value: int) -> int | None:
    """Return where ``value`` belongs in ``stack_a`` if it lies outside its range.

    A value above the maximum belongs just below the maximum; a value below
    the minimum belongs at the minimum's position. A value within the range
    gives None. An empty stack raises ValueError.
    """
    if not stack_a:
        raise ValueError("stack a is empty")
    max_val = min_val = stack_a[0]
    max_pos = min_pos = 0
    for index, number in enumerate(stack_a):
        if number >= max_val:
            max_val = number
            max_pos = index + 1
        if number < min_val:
            min_val = number
            min_pos = index
    if value > max_val:
        return max_pos
    if value < min_val:
        return min_pos
    return None


def moves_for_a(stack_a: Sequence[int], value: int) -> int:
    """Signed rotations of a that make room for ``value`` on its top.

    ``stack_a`` must be in ascending order up to a rotation; if no place
    for ``value`` can be found, ValueError is raised.
    """
    size = len(stack_a)
    position = extreme_position(stack_a, value)
    if position is not None:
        return rotation_moves(position, size)
    if stack_a[-1] < value < stack_a[0]:
        return 0
    for index, (lower, upper) in enumerate(zip(stack_a, stack_a[1:]), start=1):
        if lower < value < upper:
            return rotation_moves(index, size)
    raise ValueError(f"no place for {value} in stack a")


def best_move_index(moves_a: Sequence[int], moves_b: Sequence[int]) -> int:
    """Return the index of the cheapest pair of rotations.

    Rotations in the same direction run together, so they cost the larger
    of the two; otherwise the two counts add up. The first cheapest index
    wins.
    """
    costs = [
        larger_absolute(move_a, move_b)
        if (move_a > 0 and move_b > 0) or (move_a < 0 and move_b < 0)
        else abs(move_a) + abs(move_b)
        for move_a, move_b in zip(moves_a, moves_b)
    ]
    if not costs:
        raise ValueError("no moves to compare")
    return min(range(len(costs)), key=costs.__getitem__)


def execute_combined_rotations(stacks: Stacks, move_a: int, move_b: int) -> int:
    """Rotate a by ``move_a``, sharing rotations with b where both go the same way.

    Returns the rotations of b still left to do.
    """
    while move_a < 0 and move_b < 0:
        stacks.rrr()
        move_a += 1
        move_b += 1
    while move_a > 0 and move_b > 0:
        stacks.rr()
        move_a -= 1
        move_b -= 1
    for _ in range(-move_a):
        stacks.rra()
    for _ in range(move_a):
        stacks.ra()
    return move_b


def calculate_target_position(stacks: Stacks) -> int:
    """Pick the cheapest element of b to push, and rotate a to receive it.

    Returns the rotations of b still needed to bring that element to the top.
    """
    size_b = len(stacks.b)
    stack_a = list(stacks.a)
    moves_b = [rotation_moves(index, size_b) for index in range(size_b)]
    moves_a = [moves_for_a(stack_a, value) for value in stacks.b]
    index = best_move_index(moves_a, moves_b)
    return execute_combined_rotations(stacks, moves_a[index], moves_b[index])


def locate_non_lis_element(stack_a: Sequence[int], lis: Sequence[int]) -> int | None:
    """Return the position of the first element of a not in ``lis``, or None."""
    if not lis:
        return None
    members = set(lis)
    for position, value in enumerate(stack_a):
        if value not in members:
            return position
    return None


def rotate_min_to_top(stacks: Stacks) -> None:
    """Rotate a the shorter way until its smallest element is on top."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    values = list(stacks.a)
    min_pos = values.index(min(values))
    execute_combined_rotations(stacks, rotation_moves(min_pos, len(values)), 0)