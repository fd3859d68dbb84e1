"""Longest strictly increasing subsequence of the values on stack a."""

from __future__ import annotations

from typing import Sequence


def longest_increasing_subsequence(values: Sequence[int]) -> list[int]:
    """Return a longest strictly increasing subsequence of ``values``.

    The quadratic dynamic programme keeps, for every position, the first
    predecessor that gives it the longest chain.  Among equally long
    chains the one ending earliest is chosen.
    """
    size = len(values)
    if size == 0:
        return []

    lengths = [1] * size
    previous = [-1] * size
    for outer, current in enumerate(values):
        for inner in range(outer):
            if current > values[inner] and lengths[outer] < lengths[inner] + 1:
                lengths[outer] = lengths[inner] + 1
                previous[outer] = inner

    best_length = 0
    end_index = 0
    for index, length in enumerate(lengths):
        if length > best_length:
            best_length = length
            end_index = index

    sequence: list[int] = []
    while end_index >= 0:
        sequence.append(values[end_index])
        end_index = previous[end_index]
    sequence.reverse()
    return sequence