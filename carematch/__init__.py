"""CareMatch - caregiver/family compatibility matching."""
from carematch.matcher.models import (
    CaregiverProfile, JobOpportunity, FamilyContext, ChildContext,
    Coordinates, DaySlot
)
from carematch.scorer import (
    MatchingService, compute_match, rank_caregivers, RankedCandidate,
    MatchResult, MatchBreakdown, ScoreComponent
)

__all__ = [
    'compute_match', 'rank_caregivers', 'MatchingService', 'RankedCandidate',
    'MatchResult', 'MatchBreakdown', 'ScoreComponent',
    'CaregiverProfile', 'JobOpportunity', 'FamilyContext', 'ChildContext',
    'Coordinates', 'DaySlot'
]
