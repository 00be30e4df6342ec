"""Fenwick (binary indexed) tree over a fixed number of positions."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Point updates and prefix/range sums in logarithmic time."""

    def __init__(self, size_or_values: int | Iterable) -> None:
        if isinstance(size_or_values, int):
            if size_or_values < 0:
                raise ValueError("size must not be negative")
            self._tree = [0] * size_or_values
            return
        values = list(size_or_values)
        size = len(values)
        tree = [0] * size
        for i, value in enumerate(values):
            tree[i] += value
            parent = i | (i + 1)
            if parent < size:
                tree[parent] += tree[i]
        self._tree = tree

    def __len__(self) -> int:
        return len(self._tree)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tree):
            raise IndexError(f"index {index} out of range for size {len(self._tree)}")

    def prefix_sum(self, r: int):
        """Sum of the elements at positions 0 through ``r`` inclusive."""
        self._check(r)
        total = 0
        i = r
        while i >= 0:
            total += self._tree[i]
            i = (i & (i + 1)) - 1
        return total

    def range_sum(self, l: int, r: int):
        """Sum of the elements at positions ``l`` through ``r`` inclusive."""
        if l < 0:
            raise IndexError(f"index {l} out of range for size {len(self._tree)}")
        if l == 0:
            return self.prefix_sum(r)
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def add(self, index: int, value) -> None:
        """Add ``value`` to the element at ``index``."""
        self._check(index)
        size = len(self._tree)
        while index < size:
            self._tree[index] += value
            index |= index + 1