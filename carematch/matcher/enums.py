#!/usr/bin/env python3
"""
Matcher Enums - Closed vocabularies shared by snapshots, scorers and labels.

Values equal member names so stored records and wire payloads can be parsed
with ``Enum(value)`` directly.
"""

from enum import Enum


class AgeRange(str, Enum):
    NEWBORN = "NEWBORN"
    BABY = "BABY"
    TODDLER = "TODDLER"
    PRESCHOOL = "PRESCHOOL"
    SCHOOL_AGE = "SCHOOL_AGE"
    TEENAGER = "TEENAGER"


class Requirement(str, Enum):
    NON_SMOKER = "NON_SMOKER"
    DRIVER_LICENSE = "DRIVER_LICENSE"
    SPECIAL_NEEDS_EXPERIENCE = "SPECIAL_NEEDS_EXPERIENCE"


class Modality(str, Enum):
    """How the caregiver is engaged."""
    RELIEF = "RELIEF"      # covers days off and holidays of a regular caregiver
    DAILY = "DAILY"        # paid per day, occasional
    MONTHLY = "MONTHLY"    # fixed schedule, monthly pay


class Regime(str, Enum):
    """Contract regime."""
    SELF_EMPLOYED = "SELF_EMPLOYED"
    CONTRACTOR = "CONTRACTOR"
    EMPLOYEE = "EMPLOYEE"


class RateBucket(str, Enum):
    UP_TO_25 = "UP_TO_25"
    FROM_26_TO_35 = "FROM_26_TO_35"
    FROM_36_TO_45 = "FROM_36_TO_45"
    FROM_46_TO_60 = "FROM_46_TO_60"
    FROM_61_TO_80 = "FROM_61_TO_80"
    OVER_80 = "OVER_80"

    @property
    def rank(self) -> int:
        return _RATE_ORDER.index(self)


_RATE_ORDER = list(RateBucket)


class DistanceBucket(str, Enum):
    UP_TO_5KM = "UP_TO_5KM"
    UP_TO_10KM = "UP_TO_10KM"
    UP_TO_15KM = "UP_TO_15KM"
    UP_TO_20KM = "UP_TO_20KM"
    UP_TO_30KM = "UP_TO_30KM"
    ENTIRE_CITY = "ENTIRE_CITY"

    @property
    def ceiling_km(self) -> float:
        return _DISTANCE_CEILINGS_KM[self]


_DISTANCE_CEILINGS_KM = {
    DistanceBucket.UP_TO_5KM: 5.0,
    DistanceBucket.UP_TO_10KM: 10.0,
    DistanceBucket.UP_TO_15KM: 15.0,
    DistanceBucket.UP_TO_20KM: 20.0,
    DistanceBucket.UP_TO_30KM: 30.0,
    DistanceBucket.ENTIRE_CITY: 50.0,  # a whole city is taken as ~50 km
}


class PetComfort(str, Enum):
    YES_ANY = "YES_ANY"
    ONLY_SOME = "ONLY_SOME"
    NO = "NO"


class Activity(str, Enum):
    CHILD_CARE = "CHILD_CARE"
    BABY_CARE = "BABY_CARE"
    COOKING = "COOKING"
    ORGANIZE = "ORGANIZE"
    HOMEWORK = "HOMEWORK"
    TRANSPORT = "TRANSPORT"
    BATHING = "BATHING"
    SLEEPING = "SLEEPING"
    PLAYING = "PLAYING"
    READING = "READING"
    OUTDOOR = "OUTDOOR"
    CRAFTS = "CRAFTS"
    SPORTS = "SPORTS"
    LAUNDRY = "LAUNDRY"
    CLEANING = "CLEANING"
    PETS = "PETS"
    SPECIAL_NEEDS_CARE = "SPECIAL_NEEDS_CARE"
    THERAPEUTIC_ACTIVITIES = "THERAPEUTIC_ACTIVITIES"


# Families express expected domestic help with the same vocabulary
Task = Activity


class SpecialNeed(str, Enum):
    AUTISM = "AUTISM"
    ADHD = "ADHD"
    DOWN_SYNDROME = "DOWN_SYNDROME"
    CEREBRAL_PALSY = "CEREBRAL_PALSY"
    PHYSICAL_DISABILITY = "PHYSICAL_DISABILITY"
    VISUAL_IMPAIRMENT = "VISUAL_IMPAIRMENT"
    HEARING_IMPAIRMENT = "HEARING_IMPAIRMENT"
    CHRONIC_ILLNESS = "CHRONIC_ILLNESS"
    FOOD_ALLERGIES = "FOOD_ALLERGIES"
    OTHER = "OTHER"


class Certification(str, Enum):
    FIRST_AID = "FIRST_AID"
    CPR = "CPR"
    CHILD_DEVELOPMENT = "CHILD_DEVELOPMENT"
    EARLY_EDUCATION = "EARLY_EDUCATION"
    NUTRITION = "NUTRITION"
    SPECIAL_NEEDS = "SPECIAL_NEEDS"
    MONTESSORI = "MONTESSORI"
    NURSING = "NURSING"


class Gender(str, Enum):
    FEMALE = "FEMALE"
    MALE = "MALE"
    OTHER = "OTHER"
    PREFER_NOT_TO_SAY = "PREFER_NOT_TO_SAY"


class Day(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class Shift(str, Enum):
    MORNING = "MORNING"      # 06h - 12h
    AFTERNOON = "AFTERNOON"  # 12h - 18h
    NIGHT = "NIGHT"          # 18h - 23h

    @property
    def hours(self):
        return _SHIFT_HOURS[self]


_SHIFT_HOURS = {
    Shift.MORNING: (6, 12),
    Shift.AFTERNOON: (12, 18),
    Shift.NIGHT: (18, 23),
}
