#!/usr/bin/env python3
"""
Availability Overlap - how much of the family's weekly need the caregiver covers.
"""

from typing import AbstractSet, FrozenSet

from carematch.matcher.enums import Day, Shift
from carematch.matcher.models import DaySlot

ALL_SLOTS: FrozenSet[DaySlot] = frozenset(DaySlot(d, s) for d in Day for s in Shift)


def common_slots(
    caregiver_slots: AbstractSet[DaySlot],
    family_slots: AbstractSet[DaySlot]
) -> FrozenSet[DaySlot]:
    return frozenset(caregiver_slots) & frozenset(family_slots)


def overlap(
    caregiver_slots: AbstractSet[DaySlot],
    family_slots: AbstractSet[DaySlot]
) -> float:
    """
    Fraction of the family's slots the caregiver is available for, in [0, 1].

    The denominator is the family's need, not the caregiver's supply. A family
    that states no slots has nothing to cover, so the fraction is 1.0.
    """
    if not family_slots:
        return 1.0
    return len(common_slots(caregiver_slots, family_slots)) / len(family_slots)
