"""Divisors, tournaments, triples, couple swaps, distinct LCMs and smoothing an array."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def kth_common_divisor(a: int, b: int, k: int) -> int:
    """The ``k``-th largest common divisor of ``a`` and ``b`` (1-based)."""
    if a <= 0 or b <= 0:
        raise ValueError("a and b must be positive")
    g = math.gcd(a, b)
    divisors = sorted(
        (d for d in range(1, g + 1) if g % d == 0), reverse=True
    )
    if not 1 <= k <= len(divisors):
        raise ValueError(f"there is no common divisor number {k}")
    return divisors[k - 1]


def tournament_ranks(powers: Sequence[int]) -> list[int]:
    """Ranks in a knockout where neighbours fight and the stronger one advances.

    On a tie the right-hand player advances. A player knocked out in round
    ``r`` of ``n`` rounds gets rank ``n + 2 - r``; the champion gets 1.
    """
    m = len(powers)
    if m == 0 or m & (m - 1):
        raise ValueError("the number of players must be a power of two")
    rounds = m.bit_length() - 1
    ranks = [0] * m
    alive = list(enumerate(powers))
    for rnd in range(1, rounds + 1):
        winners = []
        for left, right in zip(alive[::2], alive[1::2]):
            winner, loser = (left, right) if left[1] > right[1] else (right, left)
            winners.append(winner)
            ranks[loser[0]] = rounds + 2 - rnd
        alive = winners
    ranks[alive[0][0]] = 1
    return ranks


def om_wins(values: Sequence[int], k: int) -> bool:
    """Whether, after at most ``k`` changes, equal-value triples are at least half of all triples."""
    n = len(values)
    freq = SortedList(Counter(values).values())
    while k > 0 and len(freq) > 1:
        k -= 1
        low = freq.pop(0)
        high = freq.pop(-1)
        freq.add(high + 1)
        if low > 1:
            freq.add(low - 1)
    om = sum(x * (x - 1) * (x - 2) for x in freq)
    others = n * (n - 1) * (n - 2) - om
    return om >= others


def _check_row(row: Sequence[int]) -> None:
    if len(row) % 2:
        raise ValueError("the row must hold an even number of people")
    if sorted(row) != list(range(len(row))):
        raise ValueError("the row must be a permutation of 0..n-1")


def min_swaps_couples(row: Sequence[int]) -> int:
    """Fewest swaps so that each couple ``(2i, 2i+1)`` sits side by side."""
    _check_row(row)
    partner = [0] * len(row)
    for a, b in zip(row[::2], row[1::2]):
        partner[a] = b
        partner[b] = a
    swaps = 0
    for person in range(len(row)):
        wanted = person ^ 1
        if partner[person] != wanted:
            swaps += 1
            theirs = partner[wanted]
            ours = partner[person]
            partner[person] = wanted
            partner[wanted] = person
            partner[theirs] = ours
            partner[ours] = theirs
    return swaps


class DisjointSet:
    """Union-find with path halving and union by size."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        parent = self._parent
        while x != parent[x]:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._size[b] > self._size[a]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        self._size[b] = 0
        return True

    def same(self, x: int, y: int) -> bool:
        """Whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]


def min_swaps_couples_dsu(row: Sequence[int]) -> int:
    """Same as :func:`min_swaps_couples`, counted through connected components."""
    _check_row(row)
    n = len(row)
    sets = DisjointSet(n)
    components = n
    for i in range(0, n, 2):
        components -= sets.union(i, i + 1)
    for a, b in zip(row[::2], row[1::2]):
        components -= sets.union(a, b)
    return n // 2 - components


def count_distinct_lcms(numbers: Iterable[Iterable[tuple[int, int]]]) -> int:
    """Distinct LCMs obtained by leaving out exactly one number or none.

    Each number is given as its ``(prime, exponent)`` pairs.
    """
    factored = [list(number) for number in numbers]
    exponents: defaultdict[int, list[int]] = defaultdict(list)
    for number in factored:
        for prime, exponent in number:
            exponents[prime].append(exponent)
    top_two = {
        prime: (sorted(found, reverse=True) + [0, 0])[:2]
        for prime, found in exponents.items()
    }

    distinct = 0
    lonely = False
    for number in factored:
        unique = any(
            exponent == top_two[prime][0] and top_two[prime][1] != top_two[prime][0]
            for prime, exponent in number
        )
        distinct += unique
        lonely = lonely or not unique
    return distinct + lonely


class MinSegmentTree:
    """Range-minimum tree; updates may only lower a value."""

    def __init__(self, values: Iterable[float]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree: list[float] = [math.inf] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = min(self._tree[2 * i], self._tree[2 * i + 1])

    def update(self, index: int, value: float) -> None:
        """Set the value at ``index`` to the smaller of it and ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        i = index + self._n
        self._tree[i] = min(self._tree[i], value)
        i //= 2
        while i:
            self._tree[i] = min(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, left: int, right: int) -> float:
        """Minimum over ``left..right`` clipped to the array; infinity if empty."""
        left = max(left, 0)
        right = min(right, self._n - 1)
        best: float = math.inf
        lo = left + self._n
        hi = right + self._n + 1
        while lo < hi:
            if lo & 1:
                best = min(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best


def _fits(values: Sequence[int], m: int, k: int, limit: int) -> bool:
    costs: list[float] = [0] * (m + 1)
    for value in values:
        tree = MinSegmentTree(costs)
        costs = [tree.query(x - limit, x + limit) + (x != value) for x in range(m + 1)]
    return min(costs) <= k


def min_absolute_difference(values: Sequence[int], m: int, k: int) -> int:
    """Smallest possible largest neighbour difference after changing at most ``k`` values.

    New values are taken from ``0..m``. Returns -1 when no limit works.
    """
    if m < 0:
        raise ValueError("m must not be negative")
    low, high = 0, m
    answer = -1
    while low <= high:
        mid = (low + high) // 2
        if _fits(values, m, k, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer