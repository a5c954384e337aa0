"""Matcher Module - Snapshots, hard constraints and the helpers the scorers share."""
from carematch.matcher.models import (
    CaregiverProfile, JobOpportunity, FamilyContext, ChildContext,
    Coordinates, DaySlot
)
from carematch.matcher.eligibility import EligibilityFilter, EligibilityOutcome
from carematch.matcher.availability import overlap
from carematch.matcher.geo import calculate_distance, distance_between
from carematch.matcher.labels import label_for

__all__ = [
    'EligibilityFilter', 'EligibilityOutcome',
    'CaregiverProfile', 'JobOpportunity', 'FamilyContext', 'ChildContext',
    'Coordinates', 'DaySlot',
    'overlap', 'calculate_distance', 'distance_between', 'label_for'
]
