"""Solutions to three contest problems on switches, medians and triangles."""

from __future__ import annotations

from collections.abc import Iterable

from algokit.frequency import FrequencyMap


def light_switches(n: int, switches: Iterable) -> tuple[int, int]:
    """Minimum and maximum number of lights on for ``2n`` switch states."""
    states = [str(state) for state in switches]
    if len(states) != 2 * n:
        raise ValueError(f"expected {2 * n} switch states, got {len(states)}")
    if any(state not in ("0", "1") for state in states):
        raise ValueError("switch states must be 0 or 1")
    on = states.count("1")
    if on > n:
        on = 2 * n - on
    return on & 1, on


def median_partition(n: int, k: int) -> list[int] | None:
    """Left borders of odd-length parts of ``1..n`` whose medians' median is ``k``.

    Returns None when no such partition exists.
    """
    if not 1 <= k <= n:
        raise ValueError(f"k must lie in [1, {n}]")
    if k in (1, n):
        return [1] if n == 1 else None
    if (k - 1) % 2 != (n - k) % 2:
        return None
    if (k - 1) % 2:
        return [1, k, k + 1]
    return [1, k - 1, k + 2]


def min_triangle_operations(values: Iterable[int]) -> int:
    """Fewest assignments so every triple of elements forms a proper triangle."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    total = len(values)
    pairs = list(FrequencyMap(values).items())
    keys = [key for key, _ in pairs]
    freqs = [freq for _, freq in pairs]
    distinct = len(keys)
    best = total
    kept = 0
    right = 0
    for i, key in enumerate(keys):
        while right < distinct:
            if keys[right] < 2 * key:
                kept += freqs[right]
                right += 1
                best = min(best, total - kept)
            elif i + 1 < distinct and keys[right] < key + keys[i + 1]:
                kept += freqs[right]
                right += 1
                best = min(best, total - kept + freqs[i] - 1)
            else:
                break
        kept -= freqs[i]
    return best