from __future__ import annotations

import math

# Published penalty weights for the resume critique score.
CRITICAL_PENALTY = 18
WARNING_PENALTY = 8
SCORE_FLOOR = 15
SCORE_CEILING = 100


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def round_half_up(x: float) -> int:
    # round() is banker's rounding; coverage rings expect 2.5 -> 3
    return int(math.floor(x + 0.5))


def coverage_percent(covered: int, total: int) -> int:
    """
    Share of a skill list satisfied, as an integer percentage in [0, 100].
    An empty list counts as fully covered.
    """
    if total <= 0:
        return 100
    return int(clamp(round_half_up(100.0 * covered / total), 0, 100))


def critique_score(critical_count: int, warning_count: int) -> int:
    """
    100 minus fixed penalties per critical/warning issue, clamped to
    [SCORE_FLOOR, SCORE_CEILING]. Info-level issues never reach this function.
    """
    raw = SCORE_CEILING - CRITICAL_PENALTY * critical_count - WARNING_PENALTY * warning_count
    return int(clamp(raw, SCORE_FLOOR, SCORE_CEILING))


def fit_label(coverage: int) -> str:
    if coverage >= 80:
        return "Strong Fit"
    if coverage >= 60:
        return "Good Fit"
    return "Gaps to Fill"


def coverage_band(coverage: int) -> str:
    """Colour band of a coverage ring."""
    if coverage >= 80:
        return "strong"
    if coverage >= 60:
        return "good"
    if coverage >= 40:
        return "fair"
    return "weak"
