#!/usr/bin/env python3
"""
Bonus Components - small boosts for proximity and price.

Both are positive-only: a missing location or rate range earns nothing but
never penalizes the candidate elsewhere.
"""

import logging

from carematch.config_loader import ScorerConfig
from carematch.matcher.eligibility import travel_ceiling_km
from carematch.matcher.geo import distance_between
from carematch.matcher.labels import label_for
from carematch.matcher.models import CaregiverProfile, FamilyContext
from carematch.scorer.fit_components import bounded
from carematch.scorer.models import ScoreComponent

logger = logging.getLogger(__name__)


def score_distance_bonus(
    family: FamilyContext,
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    """Linear decay from max score at 0 km to 0 at the caregiver's travel ceiling."""
    max_score = config.weights.distance_bonus

    distance = distance_between(family.location, caregiver.location)
    # Unknown distance is not treated as zero distance
    if distance is None:
        return bounded(0.0, max_score, "Location unavailable")

    ceiling = travel_ceiling_km(caregiver, config.default_travel_distance_km)
    score = max_score * max(0.0, 1.0 - distance / ceiling)
    return bounded(score, max_score, f"{distance:.1f} km away (travel limit {ceiling:g} km)")


def score_budget_bonus(
    family: FamilyContext,
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    """
    Full bonus when the caregiver's rate bucket is at or below the family's,
    a fraction when it is exactly one bucket above, nothing beyond.
    """
    max_score = config.weights.budget_bonus
    caregiver_rate = caregiver.hourly_rate_range
    family_rate = family.hourly_rate_range

    if caregiver_rate is None or family_rate is None:
        return bounded(0.0, max_score, "Rate range unavailable")

    gap = caregiver_rate.rank - family_rate.rank
    if gap <= 0:
        return bounded(max_score, max_score, f"{label_for(caregiver_rate)} fits the family's budget")
    if gap == 1:
        return bounded(
            max_score * config.budget_adjacent_fraction,
            max_score,
            f"{label_for(caregiver_rate)} is one range above the family's budget"
        )
    return bounded(0.0, max_score, f"{label_for(caregiver_rate)} is above the family's budget")
