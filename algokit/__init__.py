"""Algorithmic data structures and contest problem solvers."""

__version__ = "0.1.0"
__all__ = [
    "fenwick",
    "binary_trie",
    "frequency",
    "suffix_array",
    "sparse_segment_tree",
    "cses",
    "codechef159",
    "codeforces2032",
    "codeforces2036",
    "practice",
    "iccpc",
]