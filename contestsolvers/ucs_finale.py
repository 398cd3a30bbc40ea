"""Digit factorial decomposition, bipartite checks and tennis tournament rounds."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from collections.abc import Iterable

_DIGIT_EXPANSION = {
    "2": "2",
    "3": "3",
    "4": "223",
    "5": "5",
    "6": "35",
    "7": "7",
    "8": "2227",
    "9": "3327",
}


def factorial_digits(digits: str) -> str:
    """Largest number without 0 or 1 whose digit-factorial product equals that of ``digits``."""
    expanded = "".join(_DIGIT_EXPANSION.get(ch, "") for ch in digits if ch > "1")
    return "".join(sorted(expanded, reverse=True))


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the graph on 0-based vertices ``0..n-1`` can be two-coloured."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    colour = [-1] * n
    for root in range(n):
        if colour[root] != -1:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if colour[v] == -1:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def max_tennis_rounds(n: int) -> int:
    """Most games the winner can play in a knockout of ``n`` players."""
    fib = [1, 2]
    while fib[-1] <= n:
        fib.append(fib[-1] + fib[-2])
    return bisect_right(fib, n) - 1