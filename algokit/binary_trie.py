"""Binary trie over fixed-width non-negative integers."""

from __future__ import annotations

from collections.abc import Iterator

_NONE = -1


class BinaryTrie:
    """Multiset (or set) of integers supporting minimum-XOR lookups."""

    def __init__(self, bits: int, as_set: bool = False) -> None:
        if bits < 1:
            raise ValueError("bits must be at least 1")
        self._bits = bits
        self._as_set = as_set
        self._children: list[list[int]] = [[_NONE, _NONE]]
        self._counts: list[int] = [0]
        self._free: list[int] = []

    def _path(self, value: int) -> Iterator[tuple[int, int]]:
        for i in range(self._bits - 1, -1, -1):
            yield i, (value >> i) & 1

    def _validate(self, value: int) -> None:
        if not 0 <= value < 1 << self._bits:
            raise ValueError(f"{value} does not fit in {self._bits} bits")

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or not 0 <= value < 1 << self._bits:
            return False
        node = 0
        for _, bit in self._path(value):
            node = self._children[node][bit]
            if node == _NONE:
                return False
        return True

    def min_xor(self, value: int) -> int:
        """Smallest ``value ^ x`` over all stored ``x``."""
        self._validate(value)
        if self._counts[0] == 0:
            raise ValueError("trie is empty")
        result = 0
        node = 0
        for i, bit in self._path(value):
            child = self._children[node][bit]
            if child == _NONE:
                result |= 1 << i
                child = self._children[node][bit ^ 1]
            node = child
        return result

    def _create(self) -> int:
        if self._free:
            index = self._free.pop()
            self._children[index] = [_NONE, _NONE]
            return index
        self._children.append([_NONE, _NONE])
        self._counts.append(0)
        return len(self._children) - 1

    def insert(self, value: int) -> None:
        """Store ``value``; in set mode a stored value is not added again."""
        self._validate(value)
        if self._as_set and value in self:
            return
        node = 0
        self._counts[node] += 1
        for _, bit in self._path(value):
            child = self._children[node][bit]
            if child == _NONE:
                child = self._create()
                self._children[node][bit] = child
            node = child
            self._counts[node] += 1

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; absent values are ignored."""
        if value not in self:
            return
        node = 0
        self._counts[node] -= 1
        for _, bit in self._path(value):
            parent = node
            node = self._children[node][bit]
            self._counts[node] -= 1
            if self._counts[node] == 0:
                self._children[parent][bit] = _NONE
                self._free.append(node)