#!/usr/bin/env python3
"""
Request models for API endpoints.

Field names are camelCase on the wire. Enum fields are validated by pydantic
(schema errors become 422); stored-record shapes such as weekly availability
are converted by the service layer, where malformed content becomes a 400.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from carematch.matcher.enums import (
    Activity, AgeRange, Certification, Day, DistanceBucket, Gender,
    Modality, PetComfort, RateBucket, Regime, Requirement, Shift, SpecialNeed,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LocationIn(CamelModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class CaregiverIn(CamelModel):
    """Caregiver profile as stored.

    Availability may be sent as slot keys (``availabilitySlots``) or as the
    stored weekly object (``availability``); slot keys win when both are given.
    """
    id: Union[int, str]
    name: str = ""
    gender: Optional[Gender] = None
    birth_date: Optional[date] = None
    is_smoker: bool = False
    has_drivers_license: bool = False
    experience_years: Optional[int] = Field(None, ge=0)
    has_special_needs_experience: bool = False
    special_needs_specialties: List[SpecialNeed] = Field(default_factory=list)
    special_needs_description: Optional[str] = None
    certifications: List[Certification] = Field(default_factory=list)
    age_ranges_experience: List[AgeRange] = Field(default_factory=list)
    max_travel_distance: Optional[DistanceBucket] = None
    max_children_care: Optional[int] = Field(None, ge=0)
    pet_comfort: Optional[PetComfort] = None
    accepted_activities: List[Activity] = Field(default_factory=list)
    refused_activities: List[Activity] = Field(default_factory=list)
    employment_modalities: List[Modality] = Field(default_factory=list)
    contract_regimes: List[Regime] = Field(default_factory=list)
    hourly_rate_range: Optional[RateBucket] = None
    document_validated: bool = False
    document_expiration_date: Optional[date] = None
    personal_data_validated: bool = False
    criminal_background_validated: bool = False
    average_rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    last_active_at: Optional[datetime] = None
    location: Optional[LocationIn] = None
    availability_slots: Optional[List[str]] = None
    availability: Optional[Dict[str, Any]] = None


class JobIn(CamelModel):
    id: Union[int, str]
    mandatory_requirements: List[Requirement] = Field(default_factory=list)
    child_ids: List[Union[int, str]] = Field(default_factory=list)


class FamilyIn(CamelModel):
    """Family record.

    Availability may be sent as slot keys (``availabilitySlots``) or as
    ``neededDays`` x ``neededShifts``.
    """
    id: Union[int, str]
    has_pets: bool = False
    number_of_children: Optional[int] = Field(None, ge=0)
    preferred_modality: Optional[Modality] = None
    preferred_regime: Optional[Regime] = None
    hourly_rate_range: Optional[RateBucket] = None
    domestic_help_expected: List[Activity] = Field(default_factory=list)
    availability_slots: Optional[List[str]] = None
    needed_days: List[Day] = Field(default_factory=list)
    needed_shifts: List[Shift] = Field(default_factory=list)
    location: Optional[LocationIn] = None


class ChildIn(CamelModel):
    id: Union[int, str]
    birth_date: Optional[date] = None
    expected_birth_date: Optional[date] = None
    unborn: bool = False
    has_special_needs: bool = False
    special_needs_types: List[SpecialNeed] = Field(default_factory=list)
    special_needs_description: Optional[str] = None


class ComputeMatchRequest(CamelModel):
    """Request to evaluate one caregiver against one job."""
    job: JobIn
    family: FamilyIn
    children: List[ChildIn] = Field(default_factory=list)
    caregiver: CaregiverIn
    as_of: Optional[datetime] = Field(None, description="Evaluation time; defaults to now")


class RankPolicyIn(CamelModel):
    min_score: Optional[int] = Field(None, ge=0, le=100, description="Minimum score (0-100)")
    top_k: Optional[int] = Field(None, ge=1, le=500, description="Maximum results to return (1-500)")
    include_ineligible: Optional[bool] = None


class RankCaregiversRequest(CamelModel):
    """Request to rank several caregivers for one job."""
    job: JobIn
    family: FamilyIn
    children: List[ChildIn] = Field(default_factory=list)
    caregivers: List[CaregiverIn] = Field(default_factory=list)
    policy: Optional[RankPolicyIn] = None
    as_of: Optional[datetime] = None
