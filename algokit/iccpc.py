"""Solutions to three contest problems: a cake cut, paper folding and ages."""

from __future__ import annotations

from collections.abc import Iterable

Point = tuple[int, int]
Date = tuple[int, int, int]

ADULT_AGE = 18


def separating_cut(width: int, height: int, first: Point, second: Point) -> tuple[int, int, int, int]:
    """Border-to-border cut of a ``width`` x ``height`` cake separating two points."""
    (x0, y0), (x1, y1) = first, second
    if x0 != x1:
        return x0, 0, x1, height
    return 0, y0, width, y1


def _fold_count(length: int, goal: int) -> int:
    folds = 0
    while length > goal:
        folds += 1
        length = max((length + 1) // 2, goal)
    return folds


def min_folds(sheet: tuple[int, int], target: tuple[int, int]) -> int:
    """Fewest folds turning ``sheet`` into ``target`` (either orientation), or -1."""
    if min(*sheet, *target) < 1:
        raise ValueError("sides must be positive")
    long_side, short_side = sorted(sheet, reverse=True)
    goal_long, goal_short = sorted(target, reverse=True)
    if long_side < goal_long or short_side < goal_short:
        return -1
    best = _fold_count(long_side, goal_long) + _fold_count(short_side, goal_short)
    if long_side >= goal_short and short_side >= goal_long:
        best = min(best, _fold_count(long_side, goal_short) + _fold_count(short_side, goal_long))
    return best


def latest_adult(king_date: Date, birthdays: Iterable[Date]) -> int:
    """1-based index of the youngest person at least 18 on ``king_date``, or -1.

    Dates are ``(day, month, year)``; among equal birthdays the last one wins.
    """
    day, month, year = king_date
    today = (year, month, day)
    best: tuple[tuple[int, int, int], int] | None = None
    for index, (d, m, y) in enumerate(birthdays):
        coming_of_age = (y + ADULT_AGE, m, d)
        if coming_of_age <= today and (best is None or (coming_of_age, index) > best):
            best = (coming_of_age, index)
    return -1 if best is None else best[1] + 1