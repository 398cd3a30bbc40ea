"""Ball counting, positive-sum subarrays, optimal cutting and expected maxima."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate

from sortedcontainers import SortedList

MODULUS = 998244353


class FenwickTree:
    """Binary indexed tree over ``size`` slots with point updates and prefix sums."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * size

    def __len__(self) -> int:
        return self._size

    def add(self, index: int, value: int) -> None:
        """Add ``value`` to the slot at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        i = index + 1
        while i <= self._size:
            self._tree[i - 1] += value
            i += i & -i

    def prefix_sum(self, index: int) -> int:
        """Sum of slots ``0..index``; zero when ``index`` is negative."""
        if index >= self._size:
            raise IndexError(f"index {index} out of range")
        total = 0
        i = index + 1
        while i > 0:
            total += self._tree[i - 1]
            i -= i & -i
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of slots ``left..right`` inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def blue_balls(n: int, a: int, b: int) -> int:
    """Blue balls among the first ``n`` when ``a`` blue and ``b`` red repeat forever."""
    period = a + b
    if period <= 0:
        raise ValueError("a + b must be positive")
    return n // period * a + min(a, n % period)


def positive_sum_subarrays(values: Sequence[int]) -> int:
    """Number of contiguous subarrays whose sum is strictly positive."""
    prefixes = list(accumulate(values, initial=0))
    ranks = {v: i for i, v in enumerate(sorted(set(prefixes)))}
    seen = FenwickTree(len(ranks))
    seen.add(ranks[0], 1)
    total = 0
    for prefix in prefixes[1:]:
        rank = ranks[prefix]
        total += seen.prefix_sum(rank - 1)
        seen.add(rank, 1)
    return total


def prefix_order_count(values: Iterable[int]) -> int:
    """Pairs of prefix sums (earlier, later) with the earlier strictly smaller.

    The empty prefix counts as an earlier prefix of sum zero.
    """
    seen = SortedList([0])
    total = 0
    for prefix in accumulate(values):
        seen.add(prefix)
        total += seen.bisect_left(prefix)
    return total


def min_cut_cost(length: int, pieces: Iterable[int]) -> int:
    """Cheapest way to cut a rod of ``length`` into ``pieces``, each cut costing the part's length.

    Any length left over beyond the pieces forms one more piece.
    """
    heap = list(pieces)
    total = sum(heap)
    if length < total:
        raise ValueError("pieces are longer than the rod")
    if length != total:
        heap.append(length - total)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def expected_values(values: Sequence[int]) -> list[int]:
    """For each prefix, the expected maximum of two uniform picks with replacement.

    Each answer is a fraction reduced modulo 998244353.
    """
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    if not values:
        return []
    size = max(values) + 1
    counts = FenwickTree(size)
    sums = FenwickTree(size)
    running_total = 0
    pair_max_sum = 0
    result = []
    for i, value in enumerate(values, start=1):
        smaller = counts.prefix_sum(value - 1)
        at_least = running_total - sums.prefix_sum(value - 1)
        pair_max_sum += 2 * at_least + value * (2 * smaller + 1)
        counts.add(value, 1)
        sums.add(value, value)
        running_total += value
        inverse = pow(i * i % MODULUS, -1, MODULUS)
        result.append(pair_max_sum % MODULUS * inverse % MODULUS)
    return result