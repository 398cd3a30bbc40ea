"""Cricket weeks, lines through the origin, a sign game, array counts, xor cycles, gaps and tuples."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import accumulate, pairwise

MODULUS = 998244353
QUERY_LIMIT = 300_000

_VERTICAL_SLOPE = 2e18


def love_for_cricket(q: int) -> int:
    """Full weeks left in ``q`` days after the first thirty."""
    return max(0, (q - 30) // 7)


def count_lines_float(points: Iterable[tuple[int, int]]) -> int:
    """Distinct lines through the origin and the points, compared by floating slope.

    Points at the origin are ignored; the answer is never below one.
    """
    slopes: set[float] = set()
    for x, y in points:
        if x == 0 and y == 0:
            continue
        slopes.add(_VERTICAL_SLOPE if x == 0 else y / x)
    return max(1, len(slopes))


def _direction(x: int, y: int) -> tuple[int, int]:
    """Reduced direction of ``(x, y)``, with opposite directions made equal."""
    if x == 0:
        x, y = 0, 1
    elif y == 0:
        x, y = 1, 0
    else:
        g = math.gcd(x, y)
        x, y = x // g, y // g
    if (x < 0) != (y < 0):
        return -abs(x), abs(y)
    return abs(x), abs(y)


def count_lines(points: Iterable[tuple[int, int]]) -> int:
    """Distinct lines through the origin and the points, compared exactly.

    Points at the origin are ignored; zero when no other point is given.
    """
    return len({_direction(x, y) for x, y in points if x or y})


def decrease_to_zero_winner(values: Sequence[int]) -> str:
    """``"alice"`` or ``"bob"``: who wins the game of decreasing values towards zero."""
    if len(values) == 1:
        return "alice"
    for index, value in enumerate(values):
        if abs(value) > 1:
            return "bob" if index % 2 else "alice"
    return "alice" if len(values) % 2 else "bob"


class BinomialTable:
    """Binomial coefficients modulo a prime, for arguments up to ``limit``."""

    def __init__(self, limit: int, modulus: int) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        if modulus < 2:
            raise ValueError("modulus must be at least 2")
        self._limit = limit
        self._modulus = modulus
        self._fact = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % modulus, initial=1)
        )
        inverse = [1] * (limit + 1)
        inverse[limit] = pow(self._fact[limit], -1, modulus)
        for i in range(limit, 0, -1):
            inverse[i - 1] = inverse[i] * i % modulus
        self._inverse = inverse

    def binomial(self, n: int, r: int) -> int:
        """``C(n, r)`` modulo the table's modulus; zero outside ``0 <= r <= n``."""
        if r > n or r < 0 or n < 0:
            return 0
        if n > self._limit:
            raise ValueError(f"{n} exceeds the table limit {self._limit}")
        mod = self._modulus
        return self._fact[n] * self._inverse[r] % mod * self._inverse[n - r] % mod


def count_arrays(n: int, m: int) -> int:
    """Number of arrays counted by stars and bars: ``C(2n + m - 1, m - 1)`` mod 998244353."""
    top = 2 * n + m - 1
    table = BinomialTable(max(top, 0), MODULUS)
    return table.binomial(top, m - 1)


def _signs(values: Iterable[int]) -> list[int]:
    return [1 if v > 0 else 0 for v in values]


def one_is_enough(values: Sequence[int], m: int) -> int:
    """Ones left after ``m`` rounds of replacing each cell by the xor of its circular neighbours.

    Positive values count as one, everything else as zero.
    """
    if m < 0:
        raise ValueError("m must not be negative")
    bits = _signs(values)
    n = len(bits)
    if n == 0:
        return 0
    shift = 1
    remaining = m
    while remaining:
        if remaining & 1:
            bits = [bits[(j - shift) % n] ^ bits[(j + shift) % n] for j in range(n)]
        remaining >>= 1
        shift <<= 1
    return sum(bits)


def one_is_enough_memo(values: Sequence[int], m: int) -> int:
    """Same as :func:`one_is_enough`, computed per cell with memoised recursion."""
    if m < 0:
        raise ValueError("m must not be negative")
    bits = _signs(values)
    n = len(bits)
    if n == 0:
        return 0

    @lru_cache(maxsize=None)
    def cell(index: int, state: int) -> int:
        if state == 0:
            return bits[index]
        top = 1 << (state.bit_length() - 1)
        rest = state - top
        return cell((index - top) % n, rest) ^ cell((index + top) % n, rest)

    return sum(cell(i, m) for i in range(n))


def _positive_gaps(values: Sequence[int]) -> Counter[int]:
    return Counter(b - a for a, b in pairwise(values) if b > a)


def _checked_queries(queries: Iterable[int]) -> list[int]:
    found = list(queries)
    for query in found:
        if not 0 <= query <= QUERY_LIMIT:
            raise ValueError(f"query {query} outside 0..{QUERY_LIMIT}")
    return found


def _answers(best: list[float], queries: list[int]) -> list[int]:
    return [-1 if math.isinf(best[q]) else int(best[q]) for q in queries]


def tle_or_mle_min_ops(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """For each query, the fewest neighbour gaps of ``values`` that sum to it, or -1.

    Each gap may be used as often as it occurs; only positive gaps count.
    """
    wanted = _checked_queries(queries)
    if not wanted:
        return []
    size = max(wanted) + 1
    best: list[float] = [math.inf] * size
    best[0] = 0
    for gap, count in sorted(_positive_gaps(values).items()):
        updated = best[:]
        for residue in range(min(gap, size)):
            window: deque[tuple[float, int]] = deque()
            for j in range(residue, size, gap):
                key = best[j] - j // gap
                while window and window[-1][0] >= key:
                    window.pop()
                window.append((key, j))
                while window[0][1] < j - count * gap:
                    window.popleft()
                start = window[0][1]
                updated[j] = min(updated[j], best[start] + (j - start) // gap)
        best = updated
    return _answers(best, wanted)


def tle_or_mle_min_ops_binary(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """Same as :func:`tle_or_mle_min_ops`, via binary splitting into a 0/1 knapsack."""
    wanted = _checked_queries(queries)
    if not wanted:
        return []
    size = max(wanted) + 1
    weights: list[tuple[int, int]] = []
    for gap, count in _positive_gaps(values).items():
        chunk = 1
        while count - chunk > 0:
            weights.append((chunk * gap, chunk))
            count -= chunk
            chunk *= 2
        weights.append((count * gap, count))

    best: list[float] = [math.inf] * size
    best[0] = 0
    for weight, used in weights:
        best = best[:weight] + [
            min(best[j], best[j - weight] + used) for j in range(weight, size)
        ]
    return _answers(best, wanted)


def _suffix_max(values: list[int], top: int) -> None:
    for i in range(top, 0, -1):
        values[i] = max(values[i], values[i + 1])


def three_tuples(p: int, q: int, r: int, triples: Iterable[tuple[int, int, int]]) -> int:
    """Tuples in ``[1..p] x [1..q] x [1..r]`` strictly above every triple in at least two places."""
    if min(p, q, r) < 0:
        raise ValueError("bounds must not be negative")
    size = max(p, q, r) + 7
    ab = [0] * size
    ac = [0] * size
    bc = [0] * size
    cb = [0] * size
    for x, y, z in triples:
        if not (1 <= x <= p and 1 <= y <= q and 1 <= z <= r):
            raise ValueError(f"triple {(x, y, z)} lies outside the bounds")
        ab[x] = max(ab[x], y)
        ac[x] = max(ac[x], z)
        bc[y] = max(bc[y], z)
        cb[z] = max(cb[z], y)

    _suffix_max(ab, p)
    _suffix_max(ac, p)
    _suffix_max(bc, q)
    _suffix_max(cb, r)
    bc = list(accumulate(bc))
    cb = list(accumulate(cb))

    total = 0
    for y, z in zip(ab[1 : p + 1], ac[1 : p + 1]):
        if y == q or z == r:
            continue
        total += (q - y) * (r - z)
        if bc[y + 1] - bc[y] > z:
            covered = bc[y] + cb[z] - y * z
            total -= bc[q + 1] - covered
    return total