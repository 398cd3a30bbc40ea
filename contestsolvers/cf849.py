"""String, walk and array problems, plus an array that replaces values by digit sums."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList

_WORD = "codeforces"

_STEPS = {"L": (-1, 0), "R": (1, 0), "U": (0, 1)}


def in_codeforces(ch: str) -> bool:
    """Whether the character occurs in the word ``codeforces``."""
    return len(ch) == 1 and ch in _WORD


def passes_candy(moves: str) -> bool:
    """Whether a walk from the origin visits the point (1, 1).

    ``L``, ``R`` and ``U`` move as named; any other letter moves down.
    """
    x = y = 0
    for move in moves:
        dx, dy = _STEPS.get(move, (0, -1))
        x += dx
        y += dy
        if (x, y) == (1, 1):
            return True
    return False


def shortest_original_length(s: str) -> int:
    """Length left after peeling outer pairs of differing characters from ``s``."""
    length = len(s)
    i, j = 0, len(s) - 1
    while i < j and s[i] != s[j]:
        length -= 2
        i += 1
        j -= 1
    return length


def max_distinct_split(s: str) -> int:
    """Largest sum of distinct letters in a prefix plus distinct letters in the rest."""
    suffix = Counter(s)
    prefix: set[str] = set()
    best = len(suffix)
    for ch in s:
        prefix.add(ch)
        suffix[ch] -= 1
        if suffix[ch] == 0:
            del suffix[ch]
        best = max(best, len(prefix) + len(suffix))
    return best


def max_sum_after_negations(values: Sequence[int]) -> int:
    """Largest sum after negating adjacent pairs any number of times."""
    if not values:
        return 0
    absolute = [abs(v) for v in values]
    total = sum(absolute)
    negatives = sum(1 for v in values if v < 0)
    return total - 2 * min(absolute) if negatives % 2 else total


def _digit_sum(x: int) -> int:
    return sum(int(d) for d in str(x))


class DigitSumArray:
    """An array whose range update replaces each value by the sum of its digits."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._multi_digit = SortedList(
            i for i, v in enumerate(self._values) if v >= 10
        )

    def update(self, left: int, right: int) -> None:
        """Replace every value with index in ``[left, right]`` by its digit sum."""
        for index in list(self._multi_digit.irange(left, right)):
            self._values[index] = _digit_sum(self._values[index])
            if self._values[index] < 10:
                self._multi_digit.remove(index)

    def query(self, index: int) -> int:
        """Current value at ``index``."""
        return self._values[index]