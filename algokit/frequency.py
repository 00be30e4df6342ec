"""Static frequency table over a sorted set of distinct values."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from itertools import groupby


class FrequencyMap:
    """Counts of each distinct value, looked up by binary search."""

    def __init__(self, values: Iterable) -> None:
        keys = []
        freqs = []
        for key, group in groupby(sorted(values)):
            keys.append(key)
            freqs.append(sum(1 for _ in group))
        self._keys = keys
        self._freqs = freqs

    def get(self, value) -> int:
        """How many times ``value`` occurred; 0 if it never did."""
        index = bisect_left(self._keys, value)
        if index == len(self._keys) or self._keys[index] != value:
            return 0
        return self._freqs[index]

    def __getitem__(self, value) -> int:
        return self.get(value)

    def __len__(self) -> int:
        return len(self._keys)

    def items(self) -> Iterator[tuple[object, int]]:
        """Pairs of (value, count) in ascending order of value."""
        return zip(self._keys, self._freqs)