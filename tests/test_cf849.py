import pytest

from contestsolvers.cf849 import (
    DigitSumArray,
    in_codeforces,
    max_distinct_split,
    max_sum_after_negations,
    passes_candy,
    shortest_original_length,
)


class TestCodeforcesChecking:
    @pytest.mark.parametrize("ch", list("codeforces"))
    def test_present(self, ch):
        assert in_codeforces(ch)

    @pytest.mark.parametrize("ch", ["z", "a", "C", ""])
    def test_absent(self, ch):
        assert not in_codeforces(ch)


class TestFollowingDirections:
    def test_reaches_point(self):
        assert passes_candy("UR")
        assert passes_candy("RU")

    def test_never_reaches(self):
        assert not passes_candy("LLL")

    def test_passes_and_leaves(self):
        assert passes_candy("RUUR")


class TestPrependAndAppend:
    def test_equal_ends(self):
        s = "1001"
        assert shortest_original_length(s) == len(s)

    def test_fully_peeled(self):
        assert shortest_original_length("1100") == 0

    def test_empty(self):
        assert shortest_original_length("") == 0


class TestDistinctSplit:
    def test_all_distinct(self):
        s = "abc"
        assert max_distinct_split(s) == len(s)

    def test_repeated_pair(self):
        assert max_distinct_split("aa") == len("aa")

    @pytest.mark.parametrize("s", ["abcabc", "aabbcc", "zzzzzz", "abacaba"])
    def test_bounds(self, s):
        distinct = len(set(s))
        assert distinct <= max_distinct_split(s) <= 2 * distinct

    def test_empty(self):
        assert max_distinct_split("") == 0


class TestNegatives:
    def test_all_positive(self):
        values = [1, 2, 3]
        assert max_sum_after_negations(values) == sum(values)

    def test_even_negatives(self):
        values = [-1, -2, 4]
        assert max_sum_after_negations(values) == sum(abs(v) for v in values)

    def test_single_negative_stays(self):
        assert max_sum_after_negations([-3]) == -3

    def test_odd_negatives_lose_smallest(self):
        assert max_sum_after_negations([-1, 5, 6]) == 10

    def test_empty(self):
        assert max_sum_after_negations([]) == 0


class TestDigitSumArray:
    def test_worked_example(self):
        arr = DigitSumArray([1, 420, 69, 1434, 2023])
        arr.update(1, 2)
        assert arr.query(1) == 6
        assert arr.query(2) == 15
        assert arr.query(3) == 1434
        arr.update(1, 4)
        assert arr.query(0) == 1
        assert arr.query(2) == 6
        assert arr.query(4) == 7

    def test_single_digits_unchanged(self):
        values = [0, 5, 9]
        arr = DigitSumArray(values)
        arr.update(0, 2)
        assert [arr.query(i) for i in range(3)] == values

    def test_repeated_updates_reach_single_digit(self):
        values = [999999999, 123456789, 10**17]
        arr = DigitSumArray(values)
        for _ in range(5):
            arr.update(0, len(values) - 1)
        assert all(0 <= arr.query(i) <= 9 for i in range(len(values)))

    def test_outside_range_untouched(self):
        arr = DigitSumArray([55, 66, 77])
        arr.update(1, 1)
        assert arr.query(0) == 55
        assert arr.query(2) == 77

    def test_query_out_of_range(self):
        arr = DigitSumArray([1])
        with pytest.raises(IndexError):
            arr.query(3)