"""Graph and sequence problems: two-colour shortest paths, decreasing subsequences, tree beauty."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Sequence


def _shortest_paths(
    adjacency: list[list[tuple[int, int, int]]], source: int, colour: int
) -> list[float]:
    """Dijkstra from ``source`` using only edges of the given colour."""
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight, edge_colour in adjacency[u]:
            if edge_colour != colour:
                continue
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def colorless_and_colorful(
    n: int,
    edges: Iterable[tuple[int, int, int, int]],
    start: int,
    end: int,
) -> int | None:
    """Shortest walk from ``start`` to ``end`` that first uses colour-0 edges, then colour-1 edges.

    Vertices are 0-based; each edge is ``(u, v, weight, colour)``.
    Returns ``None`` when no such walk exists.
    """
    adjacency: list[list[tuple[int, int, int]]] = [[] for _ in range(n)]
    for u, v, weight, colour in edges:
        adjacency[u].append((v, weight, colour))
        adjacency[v].append((u, weight, colour))

    from_start = _shortest_paths(adjacency, start, 0)
    to_end = _shortest_paths(adjacency, end, 1)

    best = min(from_start[end], to_end[start])
    best = min([best, *(a + b for a, b in zip(from_start, to_end))])
    return None if math.isinf(best) else int(best)


def min_removals_strictly_decreasing(values: Sequence[int]) -> int:
    """Fewest elements to delete so that the rest is strictly decreasing."""
    tails: list[int] = []
    for value in values:
        key = -value
        pos = bisect_left(tails, key)
        if pos == len(tails):
            tails.append(key)
        else:
            tails[pos] = key
    return len(values) - len(tails)


def _divisors(x: int) -> list[int]:
    found = []
    i = 1
    while i * i <= x:
        if x % i == 0:
            found.append(i)
            if i * i != x:
                found.append(x // i)
        i += 1
    return found


def satya_tree_beauty(
    values: Sequence[int], edges: Iterable[tuple[int, int]]
) -> list[int]:
    """For each vertex, the largest gcd of its root path when one path value may be set to 0.

    The tree is rooted at vertex 0; vertices and edges are 0-based.
    """
    n = len(values)
    if n == 0:
        return []
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent = [-1] * n
    visited = [False] * n
    visited[0] = True
    order = []
    queue = deque([0])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            if not visited[v]:
                visited[v] = True
                parent[v] = u
                queue.append(v)

    best = [0] * n

    for divisor in _divisors(values[0]):
        misses = [0] * n
        for u in order:
            inherited = misses[parent[u]] if parent[u] >= 0 else 0
            misses[u] = inherited + (values[u] % divisor != 0)
            if misses[u] <= 1:
                best[u] = max(best[u], divisor)

    # Drop the root's value entirely and take the gcd of the rest of the path.
    path_gcd = [0] * n
    for u in order:
        above = path_gcd[parent[u]] if parent[u] >= 0 else 0
        path_gcd[u] = math.gcd(above, 0 if u == 0 else values[u])
        best[u] = max(best[u], path_gcd[u])

    return best