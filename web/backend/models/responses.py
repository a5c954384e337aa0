#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union


class ScoreComponentOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score: float = Field(ge=0)
    max_score: float = Field(ge=0)
    details: Optional[str] = None


class MatchBreakdownOut(BaseModel):
    """The ten scoring dimensions."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    age_range: ScoreComponentOut
    modality: ScoreComponentOut
    activities: ScoreComponentOut
    regime: ScoreComponentOut
    availability: ScoreComponentOut
    children_count: ScoreComponentOut
    seal: ScoreComponentOut
    reviews: ScoreComponentOut
    distance_bonus: ScoreComponentOut
    budget_bonus: ScoreComponentOut


class MatchResultResponse(BaseModel):
    """Result of one caregiver/job evaluation."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "score": 87,
                "fitScore": 70.0,
                "trustScore": 13.4,
                "bonusScore": 3.2,
                "isEligible": True,
                "eliminationReasons": [],
                "breakdown": {
                    "ageRange": {"score": 15.0, "maxScore": 15.0,
                                 "details": "2 of 2 children within the caregiver's age experience"},
                    "distanceBonus": {"score": 2.2, "maxScore": 3.0,
                                      "details": "2.7 km away (travel limit 10 km)"}
                }
            }
        }
    )

    score: int = Field(ge=0, le=100)
    fit_score: float = Field(ge=0)
    trust_score: float = Field(ge=0)
    bonus_score: float = Field(ge=0)
    is_eligible: bool
    elimination_reasons: List[str]
    breakdown: MatchBreakdownOut


class RankedCandidateOut(MatchResultResponse):
    caregiver_id: Union[int, str]


class RankCaregiversResponse(BaseModel):
    """Ranked candidates for one job, best first."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    count: int
    candidates: List[RankedCandidateOut]
