import pytest

from algodrills.sequences import (
    knapsack,
    longest_common_subsequence,
    longest_increasing_subsequence,
    min_path_sum,
    rotate_left,
    stock_span,
)


def test_lcs_known_example():
    assert longest_common_subsequence("AGGTAB", "GXTXAYB") == 4


def test_lcs_identical_and_empty():
    assert longest_common_subsequence("banana", "banana") == len("banana")
    assert longest_common_subsequence("", "abc") == 0
    assert longest_common_subsequence("abc", "") == 0


@pytest.mark.parametrize("first,second", [("kitten", "sitting"), ("abcd", "badc"), ("xyz", "zyx")])
def test_lcs_symmetric_and_bounded(first, second):
    forward = longest_common_subsequence(first, second)
    assert forward == longest_common_subsequence(second, first)
    assert forward <= min(len(first), len(second))


def test_lcs_of_embedded_sequence():
    assert longest_common_subsequence("ace", "xaxcxex") == len("ace")


def test_lis_sorted_and_reversed():
    assert longest_increasing_subsequence([1, 2, 3, 4, 5]) == 5
    assert longest_increasing_subsequence([5, 4, 3, 2, 1]) == 1
    assert longest_increasing_subsequence([]) == 0


def test_lis_counts_equal_values():
    assert longest_increasing_subsequence([5, 5, 5]) == 3


def test_knapsack_known_example():
    assert knapsack([10, 20, 30], [60, 100, 120], 50) == 220


def test_knapsack_everything_fits():
    weights, values = [1, 2, 3], [4, 5, 6]
    assert knapsack(weights, values, sum(weights)) == sum(values)


def test_knapsack_zero_capacity():
    assert knapsack([1, 2], [3, 4], 0) == 0


def test_knapsack_errors():
    with pytest.raises(ValueError):
        knapsack([1, 2], [3], 5)
    with pytest.raises(ValueError):
        knapsack([1], [3], -1)


def test_stock_span_classic():
    assert stock_span([100, 80, 60, 70, 60, 75, 85]) == [1, 1, 1, 2, 1, 4, 6]


def test_stock_span_rising_prices():
    prices = [1, 2, 3, 4]
    assert stock_span(prices) == [day + 1 for day in range(len(prices))]


def test_stock_span_bounds():
    prices = [3, 1, 4, 1, 5, 9, 2, 6]
    spans = stock_span(prices)
    assert len(spans) == len(prices)
    assert all(1 <= span <= day + 1 for day, span in enumerate(spans))


def test_rotate_full_turn_is_identity():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert rotate_left(values, len(values)) == values
    assert rotate_left(values, 0) == values


def test_rotate_composes():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert rotate_left(rotate_left(values, 2), 3) == rotate_left(values, 5)


def test_rotate_moves_element_to_front():
    values = [1, 2, 3, 4, 5, 6, 7]
    rotated = rotate_left(values, 2)
    assert rotated[0] == values[2]
    assert sorted(rotated) == values


def test_rotate_empty_and_negative():
    assert rotate_left([], 3) == []
    with pytest.raises(ValueError):
        rotate_left([1], -1)


def test_min_path_single_row_and_column():
    assert min_path_sum([[4]]) == 4
    assert min_path_sum([[1, 2, 3]]) == 1 + 2 + 3
    assert min_path_sum([[1], [2], [3]]) == 1 + 2 + 3


def test_min_path_uniform_grid():
    rows, cols = 4, 5
    grid = [[1] * cols for _ in range(rows)]
    assert min_path_sum(grid) == rows + cols - 1


def test_min_path_errors():
    with pytest.raises(ValueError):
        min_path_sum([])
    with pytest.raises(ValueError):
        min_path_sum([[1, 2], [3]])