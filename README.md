# algokit

Algorithmic data structures and solvers for classic contest problems, in
plain Python with no third-party dependencies. Python 3.10 or later is
required.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Data structures

- `algokit.fenwick.FenwickTree(size_or_values)`: point updates with
  `add(index, value)`, and sums with `prefix_sum(r)` and `range_sum(l, r)`.
  Both bounds are inclusive and 0-based. An index that is out of range raises
  `IndexError`.
- `algokit.binary_trie.BinaryTrie(bits, as_set=False)`: a multiset of
  non-negative integers of width `bits`. It can also work as a set. It offers
  `insert`, `remove` (absent values are ignored), `value in trie`, and
  `min_xor(value)`, the smallest `value ^ x` over the stored `x`.
- `algokit.frequency.FrequencyMap(values)`: the count of each distinct value.
  Use `get(value)` or `fmap[value]` to read a count (0 when the value is
  absent). `len()` gives the number of distinct values, and `items()` yields
  `(value, count)` pairs in ascending order.
- `algokit.suffix_array.SuffixArray(text)`: the sorted suffix positions are in
  `order`, with the sentinel suffix first, and the adjacent LCP values are in
  `lcp`. `count(pattern)` gives the number of overlapping occurrences of
  `pattern`, and `len()` the number of suffixes including the sentinel.
- `algokit.sparse_segment_tree.SparseLazySegmentTree(size)`: a tree with nodes
  allocated as needed. `assign(left, right, value)` sets every position in the
  half-open range `[left, right)` to `value`. `first_exceeding(height)` returns
  the first 0-based position whose running total exceeds `height`, or `size`
  when there is none. `run_commands(size, commands)` runs a list of
  `("I", a, b, d)`, `("Q", h)` and `("E",)` commands and returns the answers
  to the queries.

```python
from algokit.fenwick import FenwickTree
from algokit.suffix_array import SuffixArray

tree = FenwickTree([1, 2, 3, 4])
tree.add(2, 10)
tree.range_sum(1, 3)                 # 19

SuffixArray("banana").count("ana")   # 2
```

## Problem solvers

Each solver is a plain function. It takes the problem's inputs as Python values
and returns the answer. Invalid inputs raise `ValueError` or `IndexError`.

- `algokit.cses`:
  - `max_pair_gcd`
  - `power_mod`
  - `tower_power_mod`
  - `divisor_count_table`
  - `josephus_kth_removed`
- `algokit.codechef159`: `problem_a` through `problem_e`.
- `algokit.codeforces2032`:
  - `light_switches`
  - `median_partition`
  - `min_triangle_operations`
- `algokit.codeforces2036`:
  - `is_perfect_melody`
  - `max_shelf_profit`
  - `PatternTracker`, which tracks whether `"1100"` occurs as single
    characters are edited
  - `count_layer_occurrences`
  - `RegionIndex`
  - `range_xor`
  - `xor_excluding`
- `algokit.practice`:
  - `prefix_max_sums`
  - `count_increasing_subsequences`
- `algokit.iccpc`:
  - `separating_cut`
  - `min_folds`
  - `latest_adult`

```python
from algokit.cses import power_mod
from algokit.codeforces2036 import xor_excluding

power_mod(3, 4)              # 81
xor_excluding(1, 3, 1, 0)    # 2
```

## Command line

`algokit-segtree` reads a command script for `SparseLazySegmentTree` from
standard input. It prints the answer to each query on its own line. The script
starts with the size, followed by these commands:

- `I a b d`: assign `d` to positions `a..b`. The positions are 1-based and
  inclusive.
- `Q h`: print the first 0-based position whose running total exceeds `h`.
- `E`: end the script.

```
printf '4\nQ 1\nI 1 4 2\nQ 3\nE\n' | algokit-segtree
```

This prints `4` and then `1`.

## What it does not do

Only the segment tree has a command. The problem solvers do not read input in
a judge's format and do not print answers. You call them from Python.