#!/usr/bin/env python3
"""
Display labels for every engine enumeration.

Elimination reasons and breakdown details are rendered with these labels. The
tables are checked for completeness at import time, so adding an enum member
without a label fails loudly instead of falling back to the raw value.
"""

from enum import Enum
from typing import Dict, Iterable, Type

from carematch.matcher.enums import (
    Activity, AgeRange, Certification, Day, DistanceBucket, Gender,
    Modality, PetComfort, RateBucket, Regime, Requirement, Shift, SpecialNeed,
)

LABELS: Dict[Type[Enum], Dict[Enum, str]] = {
    AgeRange: {
        AgeRange.NEWBORN: "Newborn (0-3 months)",
        AgeRange.BABY: "Baby (3-12 months)",
        AgeRange.TODDLER: "Toddler (1-3 years)",
        AgeRange.PRESCHOOL: "Preschool (3-5 years)",
        AgeRange.SCHOOL_AGE: "School age (6-12 years)",
        AgeRange.TEENAGER: "Teenager (13-17 years)",
    },
    Requirement: {
        Requirement.NON_SMOKER: "Non-smoker",
        Requirement.DRIVER_LICENSE: "Driver's license",
        Requirement.SPECIAL_NEEDS_EXPERIENCE: "Special-needs experience",
    },
    Modality: {
        Modality.RELIEF: "Relief caregiver",
        Modality.DAILY: "Daily caregiver",
        Modality.MONTHLY: "Monthly caregiver",
    },
    Regime: {
        Regime.SELF_EMPLOYED: "Self-employed",
        Regime.CONTRACTOR: "Contractor (own company)",
        Regime.EMPLOYEE: "Registered employee",
    },
    RateBucket: {
        RateBucket.UP_TO_25: "Up to $25/h",
        RateBucket.FROM_26_TO_35: "$26-35/h",
        RateBucket.FROM_36_TO_45: "$36-45/h",
        RateBucket.FROM_46_TO_60: "$46-60/h",
        RateBucket.FROM_61_TO_80: "$61-80/h",
        RateBucket.OVER_80: "Over $80/h",
    },
    DistanceBucket: {
        DistanceBucket.UP_TO_5KM: "Up to 5 km",
        DistanceBucket.UP_TO_10KM: "Up to 10 km",
        DistanceBucket.UP_TO_15KM: "Up to 15 km",
        DistanceBucket.UP_TO_20KM: "Up to 20 km",
        DistanceBucket.UP_TO_30KM: "Up to 30 km",
        DistanceBucket.ENTIRE_CITY: "Entire city",
    },
    PetComfort: {
        PetComfort.YES_ANY: "Comfortable with any animal",
        PetComfort.ONLY_SOME: "Depends on the animal",
        PetComfort.NO: "Not comfortable with animals",
    },
    Activity: {
        Activity.CHILD_CARE: "Child care",
        Activity.BABY_CARE: "Baby care",
        Activity.COOKING: "Preparing meals",
        Activity.ORGANIZE: "Organizing the child's room",
        Activity.HOMEWORK: "Homework help",
        Activity.TRANSPORT: "School pick-up and drop-off",
        Activity.BATHING: "Bathing",
        Activity.SLEEPING: "Putting to sleep",
        Activity.PLAYING: "Play and games",
        Activity.READING: "Reading stories",
        Activity.OUTDOOR: "Outdoor walks",
        Activity.CRAFTS: "Arts and crafts",
        Activity.SPORTS: "Sports",
        Activity.LAUNDRY: "Child's laundry",
        Activity.CLEANING: "Light cleaning",
        Activity.PETS: "Pet care",
        Activity.SPECIAL_NEEDS_CARE: "Special-needs care",
        Activity.THERAPEUTIC_ACTIVITIES: "Therapeutic activities",
    },
    SpecialNeed: {
        SpecialNeed.AUTISM: "Autism (ASD)",
        SpecialNeed.ADHD: "ADHD (attention deficit)",
        SpecialNeed.DOWN_SYNDROME: "Down syndrome",
        SpecialNeed.CEREBRAL_PALSY: "Cerebral palsy",
        SpecialNeed.PHYSICAL_DISABILITY: "Physical disability",
        SpecialNeed.VISUAL_IMPAIRMENT: "Visual impairment",
        SpecialNeed.HEARING_IMPAIRMENT: "Hearing impairment",
        SpecialNeed.CHRONIC_ILLNESS: "Chronic illness",
        SpecialNeed.FOOD_ALLERGIES: "Severe food allergies",
        SpecialNeed.OTHER: "Other special needs",
    },
    Certification: {
        Certification.FIRST_AID: "First aid",
        Certification.CPR: "CPR (cardiopulmonary resuscitation)",
        Certification.CHILD_DEVELOPMENT: "Child development",
        Certification.EARLY_EDUCATION: "Early childhood education",
        Certification.NUTRITION: "Child nutrition",
        Certification.SPECIAL_NEEDS: "Special-needs care",
        Certification.MONTESSORI: "Montessori method",
        Certification.NURSING: "Nursing technician",
    },
    Gender: {
        Gender.FEMALE: "Female",
        Gender.MALE: "Male",
        Gender.OTHER: "Other",
        Gender.PREFER_NOT_TO_SAY: "Prefer not to say",
    },
    Day: {
        Day.MONDAY: "Monday",
        Day.TUESDAY: "Tuesday",
        Day.WEDNESDAY: "Wednesday",
        Day.THURSDAY: "Thursday",
        Day.FRIDAY: "Friday",
        Day.SATURDAY: "Saturday",
        Day.SUNDAY: "Sunday",
    },
    Shift: {
        Shift.MORNING: "Morning",
        Shift.AFTERNOON: "Afternoon",
        Shift.NIGHT: "Night",
    },
}


def _check_exhaustive() -> None:
    for enum_cls, table in LABELS.items():
        missing = [m.name for m in enum_cls if m not in table]
        if missing:
            raise RuntimeError(f"Missing labels for {enum_cls.__name__}: {', '.join(missing)}")


_check_exhaustive()


def label_for(member: Enum) -> str:
    """Return the display label of an enum member."""
    return LABELS[type(member)][member]


def join_labels(members: Iterable[Enum]) -> str:
    """Labels of ``members`` in declaration order, comma separated."""
    members = list(members)
    if not members:
        return ""
    order = list(type(members[0]))
    return ", ".join(label_for(m) for m in sorted(members, key=order.index))
