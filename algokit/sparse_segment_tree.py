"""Dynamic segment tree with range assignment and prefix-height search.

Each position holds a height change.  ``assign`` sets every position in a
range to the same change, and ``first_exceeding`` finds the first position
whose running total rises above a given height.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

_NONE = -1


class SparseLazySegmentTree:
    """Range-assign, first-prefix-above-height tree over ``size`` positions."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._left = [_NONE]
        self._right = [_NONE]
        self._max = [0]
        self._sum = [0]
        self._lazy: list[int | None] = [None]

    def _new_node(self) -> int:
        self._left.append(_NONE)
        self._right.append(_NONE)
        self._max.append(0)
        self._sum.append(0)
        self._lazy.append(None)
        return len(self._left) - 1

    def _set(self, node: int, value: int, length: int) -> None:
        total = value * length
        self._sum[node] = total
        self._max[node] = max(0, total)
        self._lazy[node] = value

    def _push(self, node: int, lo: int, mid: int, hi: int) -> None:
        if self._left[node] == _NONE:
            self._left[node] = self._new_node()
        if self._right[node] == _NONE:
            self._right[node] = self._new_node()
        value = self._lazy[node]
        if value is not None:
            self._set(self._left[node], value, mid - lo)
            self._set(self._right[node], value, hi - mid)
            self._lazy[node] = None

    def _pull(self, node: int) -> None:
        left, right = self._left[node], self._right[node]
        self._sum[node] = self._sum[left] + self._sum[right]
        self._max[node] = max(self._max[left], self._sum[left] + self._max[right])

    def _assign(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if left <= lo and hi <= right:
            self._set(node, value, hi - lo)
            return
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        if left < mid:
            self._assign(self._left[node], lo, mid, left, right, value)
        if right > mid:
            self._assign(self._right[node], mid, hi, left, right, value)
        self._pull(node)

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every position in ``[left, right)`` to ``value``."""
        if not 0 <= left <= right <= self.size:
            raise IndexError(f"range [{left}, {right}) outside [0, {self.size})")
        if left < right:
            self._assign(0, 0, self.size, left, right, value)

    def first_exceeding(self, height: int) -> int:
        """First position whose running total exceeds ``height``, else ``size``."""
        if height >= self._max[0]:
            return self.size
        node, lo, hi = 0, 0, self.size
        while True:
            if node == _NONE:
                return lo
            value = self._lazy[node]
            if value is not None:
                if height < 0 or value <= 0:
                    return lo
                return lo + height // value
            if hi - lo == 1:
                return lo
            mid = (lo + hi) // 2
            left = self._left[node]
            left_max = self._max[left] if left != _NONE else 0
            if height >= left_max:
                if left != _NONE:
                    height -= self._sum[left]
                node, lo = self._right[node], mid
            else:
                node, hi = left, mid


def run_commands(size: int, commands: Iterable[Sequence]) -> list[int]:
    """Run ``("I", a, b, d)``, ``("Q", h)`` and ``("E",)`` commands.

    Insertions use 1-based inclusive ranges; the answers to queries are
    returned in order.  An ``"E"`` command ends processing.
    """
    tree = SparseLazySegmentTree(size)
    answers = []
    for command in commands:
        kind = command[0]
        if kind == "E":
            break
        if kind == "I":
            first, last, value = command[1:]
            tree.assign(first - 1, last, value)
        elif kind == "Q":
            answers.append(tree.first_exceeding(command[1]))
        else:
            raise ValueError(f"unknown command {kind!r}")
    return answers


def _parse_commands(tokens: Iterator[str]) -> Iterator[tuple]:
    for kind in tokens:
        if kind == "E":
            yield ("E",)
            return
        if kind == "I":
            yield ("I", int(next(tokens)), int(next(tokens)), int(next(tokens)))
        elif kind == "Q":
            yield ("Q", int(next(tokens)))
        else:
            raise ValueError(f"unknown command {kind!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Read a size and commands from standard input and print query answers."""
    parser = argparse.ArgumentParser(
        description="Answer range-assignment and height queries read from stdin."
    )
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    size = int(next(tokens))
    for answer in run_commands(size, _parse_commands(tokens)):
        print(answer)
    return 0