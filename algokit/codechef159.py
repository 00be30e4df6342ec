"""Solutions to a set of five contest problems."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007


def problem_a(x: int, gains: Sequence[int], losses: Sequence[int]) -> bool:
    """Whether the battle can be won starting with ``x`` spare health."""
    if len(gains) != len(losses):
        raise ValueError("gains and losses must have the same length")
    diffs = sorted((g - l for g, l in zip(gains, losses)), reverse=True)
    for diff in diffs[: len(diffs) // 2 + 1]:
        if diff > 0:
            continue
        if x < 1 - diff:
            return False
        x += diff - 1
    return True


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def problem_b(h: int, k: int) -> int:
    """Number of moves: halvings of ``k`` plus the steps reducing ``h`` to 1."""
    if h < 1:
        raise ValueError("h must be positive")
    doublings = k.bit_length() - 1 if k >= 1 else 0
    if h == 1:
        steps = 0
    elif _is_prime(h):
        steps = 1
    else:
        steps = 2
    return doublings + steps


def problem_c(n: int) -> int:
    """Answer for a board of size ``n``."""
    if n % 2 == 0:
        return 2
    if n == 1:
        return 1
    return n * n // 2 + 2


def problem_d(k: int) -> int:
    """The probability ``(k + 1) / (2k)`` modulo 10**9 + 7."""
    inverse = pow(2 * k % MOD, -1, MOD)
    return (k + 1) * inverse % MOD


def problem_e(n: int, m: int, moves: str) -> str:
    """Winner ("ALICE", "BOB" or "DRAW") of the game driven by ``moves``."""
    if any(move not in "AB" for move in moves):
        raise ValueError("moves must consist of 'A' and 'B'")
    rounds = max(n, m) - 1
    if rounds > 0 and not moves:
        raise ValueError("moves must not be empty")
    scores = [0, 0]
    for i in range(rounds):
        player = 0 if moves[i % len(moves)] == "A" else 1
        other = 1 - player
        if scores[other]:
            scores[other] -= 2
        scores[player] += n + m - 1
    if scores[0] == scores[1]:
        return "DRAW"
    return "ALICE" if scores[0] > scores[1] else "BOB"