#!/usr/bin/env python3
"""
Candidate Ranking - score many caregivers for one job and keep the best.

Sort order (all descending): score, fit score, reviews component, seal
component, last activity. Ties keep the input order.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Union
import logging

from carematch.config_loader import MatchingConfig, ResultPolicy
from carematch.matcher.models import (
    CaregiverProfile, ChildContext, EntityId, FamilyContext, JobOpportunity,
)
from carematch.scorer.models import MatchResult
from carematch.scorer.service import MatchingService

logger = logging.getLogger(__name__)

_NEVER_ACTIVE = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class RankedCandidate:
    caregiver_id: EntityId
    result: MatchResult
    last_active_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'caregiverId': self.caregiver_id, **self.result.to_dict()}


def _activity_key(last_active_at: Optional[datetime]) -> datetime:
    if last_active_at is None:
        return _NEVER_ACTIVE
    if last_active_at.tzinfo is None:
        return last_active_at.replace(tzinfo=timezone.utc)
    return last_active_at


def _sort_key(candidate: RankedCandidate):
    result = candidate.result
    return (
        result.score,
        result.fit_score,
        result.breakdown.reviews.score,
        result.breakdown.seal.score,
        _activity_key(candidate.last_active_at),
    )


def _apply_result_policy(
    candidates: List[RankedCandidate],
    policy: ResultPolicy
) -> List[RankedCandidate]:
    """Filter by eligibility and min score, then truncate to top_k.

    Args:
        candidates: Candidates already sorted best first
        policy: ResultPolicy to apply

    Returns:
        Filtered and truncated candidates
    """
    filtered = candidates

    if not policy.include_ineligible:
        filtered = [c for c in filtered if c.result.is_eligible]

    if policy.min_score > 0:
        filtered = [c for c in filtered if c.result.score >= policy.min_score]

    return filtered[:policy.top_k]


def rank_caregivers(
    job: JobOpportunity,
    family: FamilyContext,
    children: Sequence[ChildContext],
    caregivers: Sequence[CaregiverProfile],
    policy: Optional[ResultPolicy] = None,
    *,
    as_of: Optional[Union[date, datetime]] = None,
    config: Optional[MatchingConfig] = None
) -> List[RankedCandidate]:
    """
    Rank caregivers for a single job.

    Args:
        policy: Filtering and truncation; defaults to ``config.result_policy``
        as_of: Shared evaluation time so every candidate is judged at the same instant

    Returns:
        Best candidates first
    """
    service = MatchingService(config)
    policy = policy or service.config.result_policy
    if as_of is None:
        as_of = datetime.now(timezone.utc)

    scored = [
        RankedCandidate(
            caregiver_id=caregiver.id,
            result=service.compute_match(job, family, children, caregiver, as_of=as_of),
            last_active_at=caregiver.last_active_at,
        )
        for caregiver in caregivers
    ]
    # sorted() is stable, so equal keys keep input order
    scored = sorted(scored, key=_sort_key, reverse=True)

    ranked = _apply_result_policy(scored, policy)
    logger.info(f"Job {job.id}: ranked {len(caregivers)} caregivers, returning {len(ranked)}")
    return ranked
