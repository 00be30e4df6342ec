"""Suffix array with LCP values and substring counting."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import pairwise


def _sort_cyclic(codes: list[int]) -> tuple[list[int], list[int]]:
    size = len(codes)
    rank = list(codes)
    order = sorted(range(size), key=rank.__getitem__)
    step = 1
    while step < size:
        def key(i: int, step: int = step, rank: list[int] = rank) -> tuple[int, int]:
            return rank[i], rank[(i + step) % size]

        order.sort(key=key)
        new_rank = [0] * size
        for prev, cur in pairwise(order):
            new_rank[cur] = new_rank[prev] + (key(cur) != key(prev))
        rank = new_rank
        if rank[order[-1]] == size - 1:
            break
        step <<= 1
    return order, rank


class SuffixArray:
    """Sorted suffixes of a text with a terminating sentinel.

    ``order`` lists the starting positions of the suffixes in sorted order;
    the first entry is the sentinel suffix.  ``lcp[j]`` is the longest common
    prefix of the suffixes at ``order[j]`` and ``order[j + 1]``.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        codes = [ord(ch) + 1 for ch in text]
        codes.append(0)
        order, rank = _sort_cyclic(codes)
        lcp = [0] * len(codes)
        shared = 0
        for i in range(len(text)):
            position = rank[i]
            j = order[position - 1]
            while codes[i + shared] == codes[j + shared]:
                shared += 1
            lcp[position - 1] = shared
            shared = max(shared - 1, 0)
        self.order = tuple(order)
        self.lcp = tuple(lcp)

    def count(self, pattern: str) -> int:
        """Number of (possibly overlapping) occurrences of ``pattern``."""
        width = len(pattern)

        def prefix(i: int) -> str:
            return self._text[i : i + width]

        low = bisect_left(self.order, pattern, lo=1, key=prefix)
        high = bisect_right(self.order, pattern, lo=1, key=prefix)
        return high - low

    def __len__(self) -> int:
        """Number of suffixes, the sentinel one included."""
        return len(self.order)