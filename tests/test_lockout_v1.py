import random

import pytest

from contestsolvers.lockout_v1 import (
    MODULUS,
    FenwickTree,
    blue_balls,
    expected_values,
    min_cut_cost,
    positive_sum_subarrays,
    prefix_order_count,
)


def test_blue_balls_without_red_counts_all():
    assert blue_balls(17, 3, 0) == 17


def test_blue_balls_short_sequence_all_blue():
    assert blue_balls(4, 7, 2) == 4


@pytest.mark.parametrize("n,a,b", [(0, 1, 1), (9, 2, 3), (100, 5, 8), (13, 1, 12)])
def test_blue_balls_period_shift(n, a, b):
    assert blue_balls(n + a + b, a, b) == blue_balls(n, a, b) + a
    assert blue_balls(n, a, b) <= n


def test_blue_balls_rejects_empty_period():
    with pytest.raises(ValueError):
        blue_balls(5, 0, 0)


def test_positive_sum_matches_prefix_order():
    rng = random.Random(7)
    for _ in range(30):
        values = [rng.randint(-5, 5) for _ in range(rng.randint(0, 12))]
        assert positive_sum_subarrays(values) == prefix_order_count(values)


def test_positive_values_make_every_subarray_positive():
    values = [3, 1, 4, 1, 5]
    n = len(values)
    assert positive_sum_subarrays(values) == n * (n + 1) // 2
    assert prefix_order_count(values) == n * (n + 1) // 2


def test_negative_values_make_no_subarray_positive():
    assert positive_sum_subarrays([-1, -2, -3]) == 0


def test_min_cut_cost_two_pieces():
    assert min_cut_cost(3, [1, 2]) == 3


def test_min_cut_cost_leftover_piece():
    assert min_cut_cost(10, [3]) == 10


def test_min_cut_cost_three_pieces():
    assert min_cut_cost(3, [1, 1, 1]) == 5


def test_min_cut_cost_rejects_too_long_pieces():
    with pytest.raises(ValueError):
        min_cut_cost(2, [2, 1])


def test_fenwick_matches_plain_sums():
    rng = random.Random(3)
    size = 20
    tree = FenwickTree(size)
    plain = [0] * size
    for _ in range(100):
        index = rng.randrange(size)
        value = rng.randint(-10, 10)
        tree.add(index, value)
        plain[index] += value
        left = rng.randrange(size)
        right = rng.randrange(left, size)
        assert tree.range_sum(left, right) == sum(plain[left : right + 1])
        assert tree.prefix_sum(right) == sum(plain[: right + 1])


def test_fenwick_index_errors():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(4)


def test_expected_values_single_value():
    assert expected_values([7]) == [7]


def test_expected_values_constant_sequence():
    assert expected_values([3, 3, 3]) == [3, 3, 3]


def test_expected_values_pair_fraction():
    result = expected_values([1, 2])
    assert result[0] == 1
    assert result[1] * 4 % MODULUS == 7


def test_expected_values_rejects_negative():
    with pytest.raises(ValueError):
        expected_values([1, -1])


def test_expected_values_empty():
    assert expected_values([]) == []