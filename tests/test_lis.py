import pytest

from pushswap.lis import longest_increasing_subsequence


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def test_empty_input_gives_empty_sequence():
    assert longest_increasing_subsequence([]) == []


def test_already_increasing_is_returned_whole():
    assert longest_increasing_subsequence([1, 2, 3]) == [1, 2, 3]


def test_decreasing_keeps_first_element():
    assert longest_increasing_subsequence([3, 2, 1]) == [3]


def test_first_predecessor_wins_on_ties():
    assert longest_increasing_subsequence([2, 1, 3]) == [2, 3]


def test_single_value():
    assert longest_increasing_subsequence([42]) == [42]


@pytest.mark.parametrize(
    "values",
    [
        [10, 22, 9, 33, 21, 50, 41, 60, 80, 5, 15, 25, 35, 45],
        [5, -3, 8, 0, 2, 7, -10, 4],
        [100, 90, 80, 1, 2, 3, 70],
    ],
)
def test_result_is_strictly_increasing_subsequence(values):
    result = longest_increasing_subsequence(values)
    assert all(x < y for x, y in zip(result, result[1:]))
    assert _is_subsequence(result, values)
    assert len(result) >= 1


def test_result_not_shorter_than_known_chain():
    values = [100, 90, 80, 1, 2, 3, 70]
    result = longest_increasing_subsequence(values)
    assert len(result) >= len([1, 2, 3, 70])


def test_input_is_not_modified():
    values = [4, 1, 3, 2]
    longest_increasing_subsequence(values)
    assert values == [4, 1, 3, 2]