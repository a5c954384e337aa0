#!/usr/bin/env python3
"""
Match endpoints - evaluate and rank caregivers for a job.
"""

import logging
from fastapi import APIRouter, Depends

from ..dependencies import get_match_service
from ..services.match_service import MatchService
from ..models.requests import ComputeMatchRequest, RankCaregiversRequest
from ..models.responses import (
    MatchResultResponse,
    RankCaregiversResponse,
    RankedCandidateOut
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("/compute", response_model=MatchResultResponse)
def compute_match(
    request: ComputeMatchRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Evaluate one caregiver against one job.

    Always returns the full breakdown, including for ineligible caregivers.
    """
    result = service.compute(request)
    return MatchResultResponse.model_validate(result.to_dict())


@router.post("/rank", response_model=RankCaregiversResponse)
def rank_caregivers(
    request: RankCaregiversRequest,
    service: MatchService = Depends(get_match_service)
):
    """
    Rank caregivers for one job, best first.

    Ineligible caregivers and those under the minimum score are left out
    unless the policy says otherwise.
    """
    candidates = service.rank(request)
    return RankCaregiversResponse(
        success=True,
        count=len(candidates),
        candidates=[RankedCandidateOut.model_validate(c.to_dict()) for c in candidates]
    )
