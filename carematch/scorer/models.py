#!/usr/bin/env python3
"""
Scoring Models - Data structures for match results.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ScoreComponent:
    """One explained dimension of the score. ``0 <= score <= max_score``."""
    score: float
    max_score: float
    details: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'score': self.score, 'maxScore': self.max_score, 'details': self.details}


@dataclass(frozen=True)
class MatchBreakdown:
    """The ten scoring dimensions. Field names are fixed; the max scores add up to 100."""
    # Fit
    age_range: ScoreComponent
    modality: ScoreComponent
    activities: ScoreComponent
    regime: ScoreComponent
    availability: ScoreComponent
    children_count: ScoreComponent
    # Trust
    seal: ScoreComponent
    reviews: ScoreComponent
    # Bonus
    distance_bonus: ScoreComponent
    budget_bonus: ScoreComponent

    def components(self) -> Dict[str, ScoreComponent]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def max_total(self) -> float:
        return sum(c.max_score for c in self.components().values())

    def to_dict(self) -> Dict[str, Any]:
        return {_camel(name): c.to_dict() for name, c in self.components().items()}


FIT_COMPONENTS = ('age_range', 'modality', 'activities', 'regime', 'availability', 'children_count')
TRUST_COMPONENTS = ('seal', 'reviews')
BONUS_COMPONENTS = ('distance_bonus', 'budget_bonus')


@dataclass(frozen=True)
class MatchResult:
    """Complete result of one caregiver/job evaluation."""
    score: int
    fit_score: float
    trust_score: float
    bonus_score: float
    is_eligible: bool
    elimination_reasons: Tuple[str, ...]
    breakdown: MatchBreakdown

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'fitScore': self.fit_score,
            'trustScore': self.trust_score,
            'bonusScore': self.bonus_score,
            'isEligible': self.is_eligible,
            'eliminationReasons': list(self.elimination_reasons),
            'breakdown': self.breakdown.to_dict(),
        }


def _camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)
