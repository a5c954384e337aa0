#!/usr/bin/env python3
"""
Score Aggregator - fit/trust/bonus sub-totals and the final percentage.
"""

from typing import NamedTuple

from carematch.scorer.models import (
    BONUS_COMPONENTS, FIT_COMPONENTS, TRUST_COMPONENTS, MatchBreakdown,
)
from carematch.utils import clamp, round_half_up


class AggregateScore(NamedTuple):
    score: int
    fit_score: float
    trust_score: float
    bonus_score: float


def _subtotal(breakdown: MatchBreakdown, names) -> float:
    return round_half_up(sum(getattr(breakdown, name).score for name in names), 2)


def aggregate(breakdown: MatchBreakdown) -> AggregateScore:
    """
    score = round_half_up(fit + trust + bonus), clamped to [0, 100].

    Sub-totals keep 2 decimals for display.
    """
    fit = _subtotal(breakdown, FIT_COMPONENTS)
    trust = _subtotal(breakdown, TRUST_COMPONENTS)
    bonus = _subtotal(breakdown, BONUS_COMPONENTS)

    total = round_half_up(fit + trust + bonus)
    score = int(clamp(total, 0, 100))

    return AggregateScore(score=score, fit_score=fit, trust_score=trust, bonus_score=bonus)
