#!/usr/bin/env python3
"""
Scoring Module - Component scores, aggregation and results.

- models.py: ScoreComponent, MatchBreakdown, MatchResult
- fit_components.py: age range, modality, activities, regime, availability, children count
- trust_components.py: verification seal, reviews
- bonus_components.py: distance and budget bonuses
- aggregator.py: fit/trust/bonus sub-totals and the final percentage
- service.py: MatchingService and compute_match
- ranking.py: rank_caregivers for a single job
"""

from carematch.scorer.models import MatchBreakdown, MatchResult, ScoreComponent
from carematch.scorer.service import MatchingService, compute_match
from carematch.scorer.ranking import RankedCandidate, rank_caregivers

__all__ = [
    'MatchingService', 'compute_match', 'rank_caregivers', 'RankedCandidate',
    'MatchResult', 'MatchBreakdown', 'ScoreComponent'
]
