#!/usr/bin/env python3
"""
Eligibility Filter - Hard constraints deciding whether a caregiver may be shown.

Every constraint is evaluated so that all failures are reported, not only the
first one. Ratings, reviews, price and soft preferences are never consulted
here; they only move the score.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple, Union
import logging

from carematch.config_loader import EligibilityConfig
from carematch.matcher.children import (
    relevant_children, resolve_age_ranges, uncovered_special_needs,
)
from carematch.matcher.enums import PetComfort, Requirement
from carematch.matcher.geo import distance_between
from carematch.matcher.labels import join_labels, label_for
from carematch.matcher.models import (
    CaregiverProfile, ChildContext, FamilyContext, JobOpportunity,
)

logger = logging.getLogger(__name__)

NO_AGE_RANGE_OVERLAP = "No age-range overlap between the caregiver's experience and the children"


@dataclass(frozen=True)
class EligibilityOutcome:
    is_eligible: bool
    reasons: Tuple[str, ...] = ()


class EligibilityFilter:
    """
    Evaluates the hard constraints of a (job, caregiver) pair.

    Usage:
        outcome = EligibilityFilter(config.eligibility, default_travel_distance_km=10.0).evaluate(
            job, family, children, caregiver, as_of
        )
    """

    def __init__(
        self,
        config: Optional[EligibilityConfig] = None,
        default_travel_distance_km: float = 10.0
    ):
        self.config = config or EligibilityConfig()
        self.default_travel_distance_km = default_travel_distance_km

    def evaluate(
        self,
        job: JobOpportunity,
        family: FamilyContext,
        children: Sequence[ChildContext],
        caregiver: CaregiverProfile,
        as_of: Union[date, datetime]
    ) -> EligibilityOutcome:
        relevant = relevant_children(job, children)

        reasons: List[str] = []
        reasons.extend(self.check_requirements(job, relevant, caregiver))

        age_reason = self.check_age_overlap(relevant, caregiver, as_of)
        if age_reason:
            reasons.append(age_reason)

        distance_reason = self.check_distance(family, caregiver)
        if distance_reason:
            reasons.append(distance_reason)

        pets_reason = self.check_pets(family, caregiver)
        if pets_reason:
            reasons.append(pets_reason)

        if reasons:
            logger.debug(f"Caregiver {caregiver.id} not eligible for job {job.id}: {reasons}")

        return EligibilityOutcome(is_eligible=not reasons, reasons=tuple(reasons))

    def check_requirements(
        self,
        job: JobOpportunity,
        relevant: Sequence[ChildContext],
        caregiver: CaregiverProfile
    ) -> List[str]:
        """One reason per mandatory requirement the caregiver does not meet."""
        reasons = []
        # Iterate in declaration order so reasons come out in a stable order
        for requirement in Requirement:
            if requirement not in job.mandatory_requirements:
                continue

            if requirement is Requirement.NON_SMOKER:
                if caregiver.is_smoker:
                    reasons.append(f"Requirement not met: {label_for(requirement)} (caregiver smokes)")

            elif requirement is Requirement.DRIVER_LICENSE:
                if not caregiver.has_drivers_license:
                    reasons.append(
                        f"Requirement not met: {label_for(requirement)} (caregiver has no driver's license)"
                    )

            elif requirement is Requirement.SPECIAL_NEEDS_EXPERIENCE:
                reason = self._check_special_needs(relevant, caregiver)
                if reason:
                    reasons.append(reason)

        return reasons

    def _check_special_needs(
        self,
        relevant: Sequence[ChildContext],
        caregiver: CaregiverProfile
    ) -> Optional[str]:
        with_needs = [c for c in relevant if c.has_special_needs]
        if not with_needs:
            return None

        label = label_for(Requirement.SPECIAL_NEEDS_EXPERIENCE)
        if not caregiver.has_special_needs_experience:
            return f"Requirement not met: {label} (caregiver has no special-needs experience)"

        uncovered = set()
        for child in with_needs:
            uncovered |= uncovered_special_needs(child, caregiver)
        if uncovered:
            return f"Requirement not met: {label} (not covered: {join_labels(uncovered)})"
        return None

    def check_age_overlap(
        self,
        relevant: Sequence[ChildContext],
        caregiver: CaregiverProfile,
        as_of: Union[date, datetime]
    ) -> Optional[str]:
        # Children that cannot be resolved leave nothing to overlap with
        buckets = set(resolve_age_ranges(relevant, as_of).values())
        if buckets & caregiver.age_ranges_experience:
            return None
        return NO_AGE_RANGE_OVERLAP

    def check_distance(self, family: FamilyContext, caregiver: CaregiverProfile) -> Optional[str]:
        distance = distance_between(family.location, caregiver.location)
        if distance is None:
            return None

        ceiling = travel_ceiling_km(caregiver, self.default_travel_distance_km)
        if distance > ceiling * self.config.distance_tolerance:
            return f"Distance {distance:.1f} km exceeds the caregiver's travel limit of {ceiling:g} km"
        return None

    def check_pets(self, family: FamilyContext, caregiver: CaregiverProfile) -> Optional[str]:
        if not self.config.pets_are_eliminatory:
            return None
        if family.has_pets and caregiver.pet_comfort is PetComfort.NO:
            return "Family has pets and the caregiver is not comfortable with animals"
        return None


def travel_ceiling_km(caregiver: CaregiverProfile, default_km: float) -> float:
    """Ceiling of the caregiver's travel bucket, or ``default_km`` when undeclared."""
    if caregiver.max_travel_distance is None:
        return default_km
    return caregiver.max_travel_distance.ceiling_km
