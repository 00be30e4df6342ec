"""Number-theory and counting routines for classic judge tasks."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def max_pair_gcd(values: Iterable[int]) -> int:
    """Largest greatest common divisor of any two of ``values``.

    Returns 1 when no divisor above 1 is shared by two values.
    """
    values = list(values)
    if any(v < 1 for v in values):
        raise ValueError("values must be positive integers")
    if not values:
        return 1
    limit = max(values)
    counts = [0] * (limit + 1)
    for value in values:
        counts[value] += 1
    for divisor in range(limit, 1, -1):
        if sum(counts[divisor::divisor]) > 1:
            return divisor
    return 1


def power_mod(a: int, b: int) -> int:
    """``a ** b`` modulo 10**9 + 7."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    return pow(a, b, MOD)


def tower_power_mod(a: int, b: int, c: int) -> int:
    """``a ** (b ** c)`` modulo 10**9 + 7, reducing the exponent by Fermat."""
    if b < 0 or c < 0:
        raise ValueError("exponents must not be negative")
    return pow(a, pow(b, c, MOD - 1), MOD)


def divisor_count_table(limit: int) -> list[int]:
    """List whose entry ``i`` is the number of divisors of ``i`` (entry 0 is 0)."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    table = [0] + [1] * limit
    for divisor in range(2, limit + 1):
        for multiple in range(divisor, limit + 1, divisor):
            table[multiple] += 1
    return table


def josephus_kth_removed(n: int, k: int) -> int:
    """The ``k``-th child removed when every second child of ``n`` leaves."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in [1, {n}]")
    if n == 1:
        return 1
    first_pass = n // 2
    if k <= first_pass:
        return 2 * k
    if n % 2 == 0:
        return 2 * josephus_kth_removed(n // 2, k - first_pass) - 1
    position = josephus_kth_removed((n + 1) // 2, k - first_pass)
    return n if position == 1 else 2 * position - 3