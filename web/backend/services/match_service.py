#!/usr/bin/env python3
"""
Match service - turns request payloads into snapshots and runs the engine.
"""

import logging
from typing import FrozenSet, List, Optional

from carematch.config_loader import MatchingConfig
from carematch.matcher.converters import (
    build_availability_slots, parse_slots, parse_weekly_availability,
)
from carematch.matcher.models import (
    CaregiverProfile, ChildContext, Coordinates, DaySlot, FamilyContext, JobOpportunity,
)
from carematch.scorer import MatchingService, RankedCandidate, rank_caregivers
from carematch.scorer.models import MatchResult
from ..models.requests import (
    CaregiverIn,
    ChildIn,
    ComputeMatchRequest,
    FamilyIn,
    JobIn,
    LocationIn,
    RankCaregiversRequest,
)
from ..exceptions import InvalidSnapshotException

logger = logging.getLogger(__name__)


def _coordinates(location: Optional[LocationIn]) -> Optional[Coordinates]:
    if location is None:
        return None
    return Coordinates(location.latitude, location.longitude)


def _caregiver_slots(caregiver: CaregiverIn) -> FrozenSet[DaySlot]:
    if caregiver.availability_slots is not None:
        return parse_slots(caregiver.availability_slots)
    return parse_weekly_availability(caregiver.availability)


def _family_slots(family: FamilyIn) -> FrozenSet[DaySlot]:
    if family.availability_slots is not None:
        return parse_slots(family.availability_slots)
    return build_availability_slots(family.needed_days, family.needed_shifts)


def to_caregiver(caregiver: CaregiverIn) -> CaregiverProfile:
    try:
        slots = _caregiver_slots(caregiver)
    except ValueError as e:
        raise InvalidSnapshotException(f"Caregiver {caregiver.id}: {e}") from e

    return CaregiverProfile(
        id=caregiver.id,
        name=caregiver.name,
        gender=caregiver.gender,
        birth_date=caregiver.birth_date,
        is_smoker=caregiver.is_smoker,
        has_drivers_license=caregiver.has_drivers_license,
        experience_years=caregiver.experience_years,
        has_special_needs_experience=caregiver.has_special_needs_experience,
        special_needs_specialties=frozenset(caregiver.special_needs_specialties),
        special_needs_description=caregiver.special_needs_description,
        certifications=frozenset(caregiver.certifications),
        age_ranges_experience=frozenset(caregiver.age_ranges_experience),
        max_travel_distance=caregiver.max_travel_distance,
        max_children_care=caregiver.max_children_care,
        pet_comfort=caregiver.pet_comfort,
        accepted_activities=frozenset(caregiver.accepted_activities),
        refused_activities=frozenset(caregiver.refused_activities),
        employment_modalities=frozenset(caregiver.employment_modalities),
        contract_regimes=frozenset(caregiver.contract_regimes),
        hourly_rate_range=caregiver.hourly_rate_range,
        document_validated=caregiver.document_validated,
        document_expiration_date=caregiver.document_expiration_date,
        personal_data_validated=caregiver.personal_data_validated,
        criminal_background_validated=caregiver.criminal_background_validated,
        average_rating=caregiver.average_rating,
        review_count=caregiver.review_count,
        last_active_at=caregiver.last_active_at,
        location=_coordinates(caregiver.location),
        availability_slots=slots,
    )


def to_job(job: JobIn) -> JobOpportunity:
    return JobOpportunity(
        id=job.id,
        mandatory_requirements=frozenset(job.mandatory_requirements),
        child_ids=tuple(job.child_ids),
    )


def to_family(family: FamilyIn) -> FamilyContext:
    try:
        slots = _family_slots(family)
    except ValueError as e:
        raise InvalidSnapshotException(f"Family {family.id}: {e}") from e

    return FamilyContext(
        id=family.id,
        has_pets=family.has_pets,
        number_of_children=family.number_of_children,
        preferred_modality=family.preferred_modality,
        preferred_regime=family.preferred_regime,
        hourly_rate_range=family.hourly_rate_range,
        domestic_help_expected=frozenset(family.domestic_help_expected),
        availability_slots=slots,
        location=_coordinates(family.location),
    )


def to_child(child: ChildIn) -> ChildContext:
    return ChildContext(
        id=child.id,
        birth_date=child.birth_date,
        expected_birth_date=child.expected_birth_date,
        unborn=child.unborn,
        has_special_needs=child.has_special_needs,
        special_needs_types=frozenset(child.special_needs_types),
        special_needs_description=child.special_needs_description,
    )


class MatchService:
    """Service for computing and ranking matches from API payloads."""

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()
        self.matching = MatchingService(self.config)

    def compute(self, request: ComputeMatchRequest) -> MatchResult:
        """
        Evaluate one caregiver against one job.

        Raises:
            InvalidSnapshotException: A stored record in the payload is malformed.
        """
        return self.matching.compute_match(
            to_job(request.job),
            to_family(request.family),
            [to_child(c) for c in request.children],
            to_caregiver(request.caregiver),
            as_of=request.as_of,
        )

    def rank(self, request: RankCaregiversRequest) -> List[RankedCandidate]:
        """
        Rank the request's caregivers for its job.

        Policy fields left out of the request fall back to the configured
        result policy.
        """
        policy = self.config.result_policy
        if request.policy is not None:
            overrides = request.policy.model_dump(exclude_none=True)
            policy = policy.model_copy(update=overrides)

        return rank_caregivers(
            to_job(request.job),
            to_family(request.family),
            [to_child(c) for c in request.children],
            [to_caregiver(c) for c in request.caregivers],
            policy,
            as_of=request.as_of,
            config=self.config,
        )
