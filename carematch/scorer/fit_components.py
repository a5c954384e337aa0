#!/usr/bin/env python3
"""
Fit Components (Can-do-the-job)

Six scorers comparing the job's structure with the caregiver's profile:
- age_range: children's age buckets vs. declared age-range experience,
  halved per child with uncovered special needs
- modality: preferred engagement modality offered by the caregiver
- activities: coverage of the family's expected activities; any refused
  activity zeroes the component
- regime: exact contract regime, or half credit for a compatible one
- availability: share of the family's weekly slots the caregiver covers
- children_count: number of children vs. the caregiver's limit, degrading
  linearly past it

Each scorer is pure and returns a ScoreComponent bounded by its max score.
Missing data is handled by an explicit branch in each scorer.
"""

from datetime import date, datetime
from typing import Optional, Sequence, Union
import logging

from carematch.config_loader import ScorerConfig
from carematch.matcher.availability import common_slots, overlap
from carematch.matcher.children import effective_age_range, special_needs_covered
from carematch.matcher.enums import Regime
from carematch.matcher.labels import join_labels, label_for
from carematch.matcher.models import CaregiverProfile, ChildContext, FamilyContext
from carematch.scorer.models import ScoreComponent
from carematch.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

# Pairs of regimes that can substitute for each other
COMPATIBLE_REGIMES = frozenset({
    frozenset({Regime.SELF_EMPLOYED, Regime.CONTRACTOR}),
})


def bounded(score: float, max_score: float, details: Optional[str] = None) -> ScoreComponent:
    """Clamp to [0, max_score] and round to 2 decimals."""
    return ScoreComponent(
        score=round_half_up(clamp(score, 0.0, max_score), 2),
        max_score=max_score,
        details=details,
    )


def score_age_range(
    children: Sequence[ChildContext],
    caregiver: CaregiverProfile,
    as_of: Union[date, datetime],
    config: ScorerConfig
) -> ScoreComponent:
    """
    Mean per-child credit scaled to max score.

    Credit is 1 for a child whose bucket is in the caregiver's experience,
    ``special_needs_partial_credit`` of that when the child's special needs are
    not covered, and 0 otherwise. Children without a resolvable age are left out.
    """
    max_score = config.weights.age_range

    credits = []
    covered = 0
    partial = 0
    for child in children:
        bucket = effective_age_range(child, as_of)
        if bucket is None:
            continue
        if bucket not in caregiver.age_ranges_experience:
            credits.append(0.0)
            continue
        if special_needs_covered(child, caregiver):
            credits.append(1.0)
            covered += 1
        else:
            credits.append(config.special_needs_partial_credit)
            partial += 1

    # No child could be placed in a bucket: nothing to credit
    if not credits:
        return bounded(0.0, max_score, "No children with a known age")

    score = max_score * sum(credits) / len(credits)
    details = f"{covered + partial} of {len(credits)} children within the caregiver's age experience"
    if partial:
        details += f" ({partial} with special needs not covered)"
    return bounded(score, max_score, details)


def score_modality(
    family: FamilyContext,
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    max_score = config.weights.modality

    # No stated preference: any modality fits
    if family.preferred_modality is None:
        return bounded(max_score, max_score, "No modality preference")

    label = label_for(family.preferred_modality)
    if family.preferred_modality in caregiver.employment_modalities:
        return bounded(max_score, max_score, f"Offers {label}")
    return bounded(0.0, max_score, f"Does not offer {label}")


def score_activities(
    family: FamilyContext,
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    """
    Coverage of the family's expected activities by the caregiver's accepted ones.

    The denominator is the family's expectation. An expected activity that the
    caregiver explicitly refuses zeroes the component.
    """
    max_score = config.weights.activities
    expected = family.domestic_help_expected

    # Nothing expected: nothing to miss
    if not expected:
        return bounded(max_score, max_score, "No activities expected")

    refused = expected & caregiver.refused_activities
    if refused:
        return bounded(0.0, max_score, f"Refuses expected activities: {join_labels(refused)}")

    matched = expected & caregiver.accepted_activities
    score = max_score * len(matched) / len(expected)
    details = f"{len(matched)} of {len(expected)} expected activities accepted"
    missing = expected - matched
    if missing:
        details += f" (missing: {join_labels(missing)})"
    return bounded(score, max_score, details)


def regimes_compatible(a: Regime, b: Regime) -> bool:
    return frozenset({a, b}) in COMPATIBLE_REGIMES


def score_regime(
    family: FamilyContext,
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    max_score = config.weights.regime
    preferred = family.preferred_regime

    # No stated preference: any regime fits
    if preferred is None:
        return bounded(max_score, max_score, "No regime preference")

    if preferred in caregiver.contract_regimes:
        return bounded(max_score, max_score, f"Accepts {label_for(preferred)}")

    compatible = [r for r in caregiver.contract_regimes if regimes_compatible(preferred, r)]
    if compatible:
        return bounded(
            max_score * config.regime_compatible_fraction,
            max_score,
            f"Accepts compatible regime {join_labels(compatible)} instead of {label_for(preferred)}"
        )
    return bounded(0.0, max_score, f"Does not accept {label_for(preferred)}")


def score_availability(
    family: FamilyContext,
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    max_score = config.weights.availability

    # Family stated no slots: trivially covered
    if not family.availability_slots:
        return bounded(max_score, max_score, "No schedule requested")

    fraction = overlap(caregiver.availability_slots, family.availability_slots)
    shared = len(common_slots(caregiver.availability_slots, family.availability_slots))
    return bounded(
        max_score * fraction,
        max_score,
        f"Available for {shared} of {len(family.availability_slots)} requested slots"
    )


def score_children_count(
    family: FamilyContext,
    children: Sequence[ChildContext],
    caregiver: CaregiverProfile,
    config: ScorerConfig
) -> ScoreComponent:
    """
    Full score within the caregiver's limit, falling linearly to 0 once the
    count exceeds it by ``tolerance``.
    """
    max_score = config.weights.children_count
    count = family.number_of_children
    if count is None:
        count = len(children)

    # No declared limit: any number of children fits
    if caregiver.max_children_care is None:
        return bounded(max_score, max_score, "No limit on number of children")

    limit = caregiver.max_children_care
    if count <= limit:
        return bounded(max_score, max_score, f"{count} children within the limit of {limit}")

    excess = count - limit
    tolerance = config.children_over_capacity_tolerance
    if tolerance <= 0:
        score = 0.0
    else:
        score = max_score * (1 - excess / tolerance)
    return bounded(score, max_score, f"{count} children exceeds the limit of {limit} by {excess}")
