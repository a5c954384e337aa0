#!/usr/bin/env python3
"""
Matcher Models - Read-only snapshots consumed by the matching engine.

Callers hydrate these from storage for a single evaluation. Collections are
frozensets/tuples; the engine never mutates them.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import FrozenSet, NamedTuple, Optional, Tuple, Union

from carematch.matcher.enums import (
    Activity, AgeRange, Certification, Day, DistanceBucket, Gender,
    Modality, PetComfort, RateBucket, Regime, Requirement, Shift,
    SpecialNeed, Task,
)

EntityId = Union[int, str]


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


class DaySlot(NamedTuple):
    """One (day, shift) cell of the weekly availability grid."""
    day: Day
    shift: Shift

    @property
    def key(self) -> str:
        return f"{self.day.value}_{self.shift.value}"


@dataclass(frozen=True)
class CaregiverProfile:
    """Caregiver snapshot."""
    id: EntityId
    name: str = ""
    gender: Optional[Gender] = None
    birth_date: Optional[date] = None

    is_smoker: bool = False
    has_drivers_license: bool = False
    experience_years: Optional[int] = None

    has_special_needs_experience: bool = False
    special_needs_specialties: FrozenSet[SpecialNeed] = frozenset()
    special_needs_description: Optional[str] = None

    certifications: FrozenSet[Certification] = frozenset()
    age_ranges_experience: FrozenSet[AgeRange] = frozenset()
    max_travel_distance: Optional[DistanceBucket] = None
    max_children_care: Optional[int] = None
    pet_comfort: Optional[PetComfort] = None

    accepted_activities: FrozenSet[Activity] = frozenset()
    refused_activities: FrozenSet[Activity] = frozenset()
    employment_modalities: FrozenSet[Modality] = frozenset()
    contract_regimes: FrozenSet[Regime] = frozenset()
    hourly_rate_range: Optional[RateBucket] = None

    # Trust flags
    document_validated: bool = False
    document_expiration_date: Optional[date] = None
    personal_data_validated: bool = False
    criminal_background_validated: bool = False

    # Aggregated reviews
    average_rating: Optional[float] = None
    review_count: int = 0
    last_active_at: Optional[datetime] = None

    location: Optional[Coordinates] = None
    availability_slots: FrozenSet[DaySlot] = frozenset()


@dataclass(frozen=True)
class JobOpportunity:
    """Job posting snapshot."""
    id: EntityId
    mandatory_requirements: FrozenSet[Requirement] = frozenset()
    child_ids: Tuple[EntityId, ...] = ()


@dataclass(frozen=True)
class FamilyContext:
    """Family snapshot."""
    id: EntityId
    has_pets: bool = False
    number_of_children: Optional[int] = None
    preferred_modality: Optional[Modality] = None
    preferred_regime: Optional[Regime] = None
    hourly_rate_range: Optional[RateBucket] = None
    domestic_help_expected: FrozenSet[Task] = frozenset()
    availability_slots: FrozenSet[DaySlot] = frozenset()
    location: Optional[Coordinates] = None


@dataclass(frozen=True)
class ChildContext:
    """Child snapshot. ``unborn`` children carry an ``expected_birth_date`` instead."""
    id: EntityId
    birth_date: Optional[date] = None
    expected_birth_date: Optional[date] = None
    unborn: bool = False
    has_special_needs: bool = False
    special_needs_types: FrozenSet[SpecialNeed] = frozenset()
    special_needs_description: Optional[str] = None
