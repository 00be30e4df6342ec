"""Solutions to two practice problems on factor moves and increasing runs."""

from __future__ import annotations

from collections.abc import Iterable

from algokit.fenwick import FenwickTree

MOD = 1_000_000_007


def prefix_max_sums(values: Iterable[int]) -> list[int]:
    """For each prefix, the largest sum reachable by moving factors of 2 rightwards.

    Results are taken modulo 10**9 + 7.
    """
    stack: list[tuple[int, int]] = []
    total = 0
    answers = []
    for value in values:
        if value < 1:
            raise ValueError("values must be positive")
        exponent = (value & -value).bit_length() - 1
        odd = value >> exponent
        while stack:
            top_odd, top_exponent = stack[-1]
            if exponent < top_odd.bit_length() and top_odd >= odd << exponent:
                break
            stack.pop()
            total += top_odd - pow(2, top_exponent, MOD) * top_odd
            exponent += top_exponent
        total = (total + pow(2, exponent, MOD) * odd) % MOD
        stack.append((odd, exponent))
        answers.append(total)
    return answers


def count_increasing_subsequences(values: Iterable[int], k: int) -> int:
    """Number of strictly increasing subsequences with ``k + 1`` elements."""
    if k < 0:
        raise ValueError("k must not be negative")
    values = list(values)
    rank_of = {value: rank for rank, value in enumerate(sorted(set(values)))}
    ranks = [rank_of[value] for value in values]
    counts = [1] * len(values)
    for _ in range(k):
        tree = FenwickTree(len(rank_of))
        added = 0
        longer = []
        for rank, count in zip(reversed(ranks), reversed(counts)):
            longer.append(added - tree.prefix_sum(rank))
            tree.add(rank, count)
            added += count
        counts = longer[::-1]
    return sum(counts)