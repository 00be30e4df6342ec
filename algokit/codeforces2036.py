"""Solutions to six contest problems on melodies, shelves, patterns and XOR."""

from __future__ import annotations

import operator
from bisect import bisect_left, bisect_right
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise

PATTERN = "1100"
LAYER_TARGET = "1543"


def is_perfect_melody(notes: Iterable[int]) -> bool:
    """Whether every pair of adjacent notes is 5 or 7 semitones apart."""
    return all(abs(b - a) in (5, 7) for a, b in pairwise(notes))


def max_shelf_profit(shelves: int, bottles: Iterable[tuple[int, int]]) -> int:
    """Largest total cost placeable on ``shelves`` shelves, one brand per shelf."""
    if shelves < 0:
        raise ValueError("shelves must not be negative")
    totals: defaultdict[int, int] = defaultdict(int)
    for brand, cost in bottles:
        totals[brand] += cost
    return sum(sorted(totals.values(), reverse=True)[:shelves])


class PatternTracker:
    """A binary string that reports whether it contains ``"1100"`` after edits."""

    def __init__(self, text: str) -> None:
        if set(text) - {"0", "1"}:
            raise ValueError("text must consist of '0' and '1'")
        self._chars = list(text)
        self._count = text.count(PATTERN)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def found(self) -> bool:
        """Whether the pattern currently occurs."""
        return self._count > 0

    def _matches(self, start: int) -> bool:
        return "".join(self._chars[start : start + 4]) == PATTERN

    def _affected(self, index: int) -> range:
        return range(max(index - 3, 0), min(len(self._chars) - 4, index) + 1)

    def update(self, index: int, value: str) -> bool:
        """Set position ``index`` (0-based) to ``value`` and report a match."""
        if not 0 <= index < len(self._chars):
            raise IndexError(f"index {index} out of range for length {len(self._chars)}")
        if value not in ("0", "1"):
            raise ValueError("value must be '0' or '1'")
        windows = self._affected(index)
        self._count -= sum(self._matches(start) for start in windows)
        self._chars[index] = value
        self._count += sum(self._matches(start) for start in windows)
        return self.found


def _layer(rows: Sequence[str], depth: int) -> str:
    top, bottom = depth, len(rows) - 1 - depth
    left, right = depth, len(rows[0]) - 1 - depth
    cells = [rows[top][j] for j in range(left, right)]
    cells += [rows[i][right] for i in range(top, bottom)]
    cells += [rows[bottom][j] for j in range(right, left, -1)]
    cells += [rows[i][left] for i in range(bottom, top, -1)]
    return "".join(cells)


def count_layer_occurrences(grid: Iterable) -> int:
    """Occurrences of ``"1543"`` read clockwise around every layer of ``grid``."""
    rows = ["".join(map(str, row)) for row in grid]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    total = 0
    for depth in range(min(len(rows), width) // 2):
        ring = _layer(rows, depth)
        total += (ring + ring[:3]).count(LAYER_TARGET)
    return total


class RegionIndex:
    """Countries whose regions' values are OR-accumulated from the first country."""

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        table = [list(row) for row in rows]
        if not table:
            raise ValueError("at least one country is required")
        width = len(table[0])
        if width == 0 or any(len(row) != width for row in table):
            raise ValueError("every country must have the same, non-zero number of regions")
        self._countries = len(table)
        self._columns = [list(accumulate(column, operator.or_)) for column in zip(*table)]

    def query(self, requirements: Iterable[tuple[int, str, int]]) -> int:
        """Smallest 1-based country meeting all ``(region, sign, limit)``, or -1."""
        low, high = 0, self._countries - 1
        for region, sign, limit in requirements:
            if not 1 <= region <= len(self._columns):
                raise IndexError(f"region {region} out of range")
            column = self._columns[region - 1]
            if sign == ">":
                low = max(low, bisect_right(column, limit))
            elif sign == "<":
                high = min(high, bisect_left(column, limit) - 1)
            else:
                raise ValueError(f"unknown sign {sign!r}")
        return low + 1 if low <= high else -1


def _prefix_xor(n: int) -> int:
    """XOR of 0 through ``n``; 0 for ``n`` of -1."""
    return (n, 1, n + 1, 0)[n % 4]


def range_xor(l: int, r: int) -> int:
    """XOR of every integer from ``l`` to ``r`` inclusive."""
    if l < 0 or l > r:
        raise ValueError(f"invalid range [{l}, {r}]")
    return _prefix_xor(l - 1) ^ _prefix_xor(r)


def xor_excluding(l: int, r: int, i: int, k: int) -> int:
    """XOR of the integers ``x`` in ``[l, r]`` with ``x mod 2**i != k``."""
    if i < 0:
        raise ValueError("i must not be negative")
    block = 1 << i
    if not 0 <= k < block:
        raise ValueError(f"k must lie in [0, {block})")
    result = range_xor(l, r)
    mask = ~(block - 1)
    first = (l & mask) + k
    if first < l:
        first += block
    if first > r:
        return result
    last = (r & mask) + k
    if last > r:
        last -= block
    first >>= i
    last >>= i
    result ^= range_xor(first, last) << i
    if (last - first) % 2 == 0:
        result ^= k
    return result