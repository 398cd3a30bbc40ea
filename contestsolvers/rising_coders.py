"""Short ad-hoc problems: parity, anagrams, fantasy scores, dictionaries, phones, segments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def parity_of_sum(a: int, b: int, c: int) -> str:
    """``"ODD"`` or ``"EVEN"`` for the parity of ``a + b + c``."""
    total = a + b + c
    if total % 2 != 0:
        return "ODD"
    return "EVEN"


def is_acm(word: str) -> bool:
    """Whether ``word`` is a permutation of the letters ``A``, ``C`` and ``M``."""
    return sorted(word) == sorted("ACM")


def football_fantasy(n: int, alice: Sequence[int], bob: Sequence[int]) -> bool:
    """Whether Alice can still finish strictly ahead of Bob after ``n`` rounds.

    ``alice`` and ``bob`` are the points of the rounds played so far; each
    remaining round can earn Alice at most one point more than Bob.
    """
    if len(alice) != len(bob):
        raise ValueError("both players must have played the same number of rounds")
    played = len(alice)
    return sum(alice) + n - played > sum(bob)


def alien_dictionary_match(
    s: str, y: str, swaps: Iterable[tuple[str, str]]
) -> bool:
    """Whether each letter of ``s`` equals that of ``y`` or is paired with it.

    Pairs are symmetric; a later pair overrides an earlier one for a letter.
    """
    if len(y) < len(s):
        raise ValueError("second word is shorter than the first")
    partner: dict[str, str] = {}
    for a, b in swaps:
        partner[a] = b
        partner[b] = a
    return all(x == z or partner.get(x) == z for x, z in zip(s, y))


def superior_inferior_pair(phones: Iterable[tuple[int, int]]) -> str:
    """``"NEW PHONE"`` if some phone has a higher first and a lower second value than another.

    Otherwise ``"OLD IT IS"``.
    """
    ordered = sorted(phones)
    if not ordered:
        raise ValueError("at least one phone is required")
    highest = ordered[0][1]
    for _, second in ordered[1:]:
        if second < highest:
            return "NEW PHONE"
        highest = max(highest, second)
    return "OLD IT IS"


def count_pharaoh_segments(values: Sequence[int]) -> int:
    """Number of segments in which the k-th element is at least k."""
    n = len(values)
    right = 0
    total = 0
    for i in range(n):
        while right < n and values[right] >= right - i + 1:
            right += 1
        total += right - i
    return total