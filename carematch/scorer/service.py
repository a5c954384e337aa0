#!/usr/bin/env python3
"""
Matching Service - Eligibility plus the ten component scores.

For one (job, family, children, caregiver) tuple:
- Eligibility: hard constraints, reported as elimination reasons
- Breakdown: ten bounded components (fit, trust, bonus)
- Score: rounded, clamped percentage of the breakdown

The eligibility outcome never short-circuits scoring, so an ineligible
candidate still carries a complete breakdown explaining how close it came.
"""

from datetime import date, datetime, timezone
from typing import Optional, Sequence, Union
import logging

from carematch.config_loader import MatchingConfig
from carematch.matcher.children import relevant_children
from carematch.matcher.eligibility import EligibilityFilter
from carematch.matcher.models import (
    CaregiverProfile, ChildContext, FamilyContext, JobOpportunity,
)
from carematch.scorer import bonus_components, fit_components, trust_components
from carematch.scorer.aggregator import aggregate
from carematch.scorer.models import MatchBreakdown, MatchResult

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Computes MatchResult objects with a fixed configuration.

    Stateless apart from the configuration; one instance can serve
    concurrent evaluations.
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()
        self.eligibility_filter = EligibilityFilter(
            self.config.eligibility,
            default_travel_distance_km=self.config.scorer.default_travel_distance_km
        )

    def build_breakdown(
        self,
        job: JobOpportunity,
        family: FamilyContext,
        children: Sequence[ChildContext],
        caregiver: CaregiverProfile,
        as_of: Union[date, datetime]
    ) -> MatchBreakdown:
        scorer = self.config.scorer
        relevant = relevant_children(job, children)

        return MatchBreakdown(
            age_range=fit_components.score_age_range(relevant, caregiver, as_of, scorer),
            modality=fit_components.score_modality(family, caregiver, scorer),
            activities=fit_components.score_activities(family, caregiver, scorer),
            regime=fit_components.score_regime(family, caregiver, scorer),
            availability=fit_components.score_availability(family, caregiver, scorer),
            children_count=fit_components.score_children_count(family, relevant, caregiver, scorer),
            seal=trust_components.score_seal(caregiver, as_of, scorer),
            reviews=trust_components.score_reviews(caregiver, scorer),
            distance_bonus=bonus_components.score_distance_bonus(family, caregiver, scorer),
            budget_bonus=bonus_components.score_budget_bonus(family, caregiver, scorer),
        )

    def compute_match(
        self,
        job: JobOpportunity,
        family: FamilyContext,
        children: Sequence[ChildContext],
        caregiver: CaregiverProfile,
        as_of: Optional[Union[date, datetime]] = None
    ) -> MatchResult:
        """
        Evaluate one caregiver against one job.

        Args:
            job: Job posting with mandatory requirements and referenced children
            family: Family owning the job
            children: Child snapshots the caller could resolve
            caregiver: Caregiver being evaluated
            as_of: Evaluation time for ages and document expiry (defaults to now, UTC).
                Pass it explicitly for reproducible results.

        Returns:
            MatchResult with the complete breakdown, eligible or not
        """
        if as_of is None:
            as_of = datetime.now(timezone.utc)

        outcome = self.eligibility_filter.evaluate(job, family, children, caregiver, as_of)
        breakdown = self.build_breakdown(job, family, children, caregiver, as_of)
        totals = aggregate(breakdown)

        logger.debug(
            f"Job {job.id} / caregiver {caregiver.id}: score={totals.score}, "
            f"fit={totals.fit_score:.2f}, trust={totals.trust_score:.2f}, "
            f"bonus={totals.bonus_score:.2f}, eligible={outcome.is_eligible}"
        )

        return MatchResult(
            score=totals.score,
            fit_score=totals.fit_score,
            trust_score=totals.trust_score,
            bonus_score=totals.bonus_score,
            is_eligible=outcome.is_eligible,
            elimination_reasons=outcome.reasons,
            breakdown=breakdown,
        )


def compute_match(
    job: JobOpportunity,
    family: FamilyContext,
    children: Sequence[ChildContext],
    caregiver: CaregiverProfile,
    *,
    as_of: Optional[Union[date, datetime]] = None,
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """Evaluate one caregiver against one job. See MatchingService.compute_match."""
    return MatchingService(config).compute_match(job, family, children, caregiver, as_of=as_of)
