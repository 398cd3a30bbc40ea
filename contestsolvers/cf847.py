"""Digits of pi, dice, permutations, nesting dolls, xor pairs and black-white trees."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

_PI_DIGITS = "314159265358979323846264338327"


def pi_prefix_length(digits: str) -> int:
    """How many leading characters of ``digits`` agree with the digits of pi."""
    count = 0
    for got, expected in zip(digits, _PI_DIGITS):
        if got != expected:
            break
        count += 1
    return count


def dice_values(n: int, total: int, remaining: int) -> list[int]:
    """Values of ``n`` dice summing to ``total``, the first being ``total - remaining``.

    The other ``n - 1`` dice share ``remaining`` as evenly as possible,
    larger shares first.
    """
    if n < 2:
        raise ValueError("at least two dice are required")
    share, extra = divmod(remaining, n - 1)
    rest = [share + 1 if i < extra else share for i in range(n - 1)]
    return [total - remaining, *rest]


def restore_permutation(rows: Sequence[Sequence[int]]) -> list[int]:
    """Rebuild a permutation from its copies that each miss a different element."""
    firsts = Counter(row[0] for row in rows if row)
    first = next((value for value, seen in firsts.items() if seen != 1), None)
    if first is None:
        raise ValueError("no leading value repeats; the rows cannot be combined")
    for row in rows:
        if row[0] != first:
            return [first, *row]
    raise ValueError("every row starts with the same value")


def min_matryoshka_sets(sizes: Iterable[int]) -> int:
    """Fewest sets of consecutive sizes that together use every doll exactly once."""
    groups = [
        (size, sum(1 for _ in run))
        for size, run in groupby(sorted(sizes, reverse=True))
    ]
    if not groups:
        return 0
    total = groups[0][1]
    for (prev_size, prev_count), (size, count) in zip(groups, groups[1:]):
        if size + 1 == prev_size:
            total += max(count - prev_count, 0)
        else:
            total += count
    return total


def vlad_pair(x: int) -> tuple[int, int] | None:
    """A pair ``(a, b)`` with ``a ^ b == x`` and ``a + b == 2 * x``, or ``None``."""
    if x % 2:
        return None
    a = x + x // 2
    b = x // 2
    return (a, b) if a ^ b == x else None


def _parents(n: int, root: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    parent = [-1] * n
    seen = [False] * n
    seen[root] = True
    stack = [root]
    while stack:
        u = stack.pop()
        for v in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                stack.append(v)
    return parent


def black_white_distances(
    n: int, order: Sequence[int], edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Smallest distance between two black vertices after each vertex is painted.

    Vertices are 0-based. ``order[0]`` is black from the start; one distance
    is reported after each of the later vertices in ``order`` is painted.
    """
    if not order:
        raise ValueError("the first black vertex is required")
    parent = _parents(n, order[0], edges)
    unreachable = n + 1
    best = unreachable
    nearest = [unreachable] * n
    result = []
    for i, vertex in enumerate(order):
        level = 0
        node = vertex
        while level < best and node != -1:
            best = min(best, level + nearest[node])
            nearest[node] = min(nearest[node], level)
            node = parent[node]
            level += 1
        if i >= 1:
            result.append(best)
    return result