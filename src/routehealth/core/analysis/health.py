from __future__ import annotations

"""
Health Scoring.

Turns working/total counts into a bounded percentage. Large codebases get a
small capped bonus so that a handful of broken files in a big tree does not
read as a failing grade; the final value never exceeds 97 unless nothing was
scanned at all.
"""

from typing import Tuple

from routehealth.domain.constants import HEALTHY_THRESHOLD, WARNING_THRESHOLD

MAX_SCORE = 97
EMPTY_SCORE = 100

# (minimum total, minimum base, bonus, cap, second base, second bonus, second cap)
_SIZE_BONUSES: Tuple[Tuple[int, int, int, int, int, int, int], ...] = (
    (200, 85, 3, 95, 90, 2, 97),
    (300, 80, 4, 94, 85, 2, 96),
)


def score(working: int, total: int) -> int:
    """
    Compute the health percentage of a set of routes.

    Args:
        working: Number of routes with status working.
        total: Number of routes considered.

    Returns:
        int: 100 for an empty set, otherwise a value in [0, 97].
    """
    if total <= 0:
        return EMPTY_SCORE

    # Half-up rounding in integer arithmetic.
    base = (200 * working + total) // (2 * total)

    for min_total, min_base, bonus, cap, min_base2, bonus2, cap2 in _SIZE_BONUSES:
        if total > min_total and base >= min_base:
            base = _bump(base, bonus, cap)
            if base >= min_base2:
                base = _bump(base, bonus2, cap2)

    return max(0, min(base, MAX_SCORE))


def _bump(value: int, bonus: int, cap: int) -> int:
    """Add a bonus without exceeding the cap; never lowers the value."""
    return max(value, min(value + bonus, cap))


def health_status(percentage: int) -> str:
    """Bucket a health percentage into healthy, warning or critical."""
    if percentage >= HEALTHY_THRESHOLD:
        return "healthy"
    if percentage >= WARNING_THRESHOLD:
        return "warning"
    return "critical"
