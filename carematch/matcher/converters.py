#!/usr/bin/env python3
"""
Snapshot Converters - Turn stored record shapes into snapshot types.

Records keep availability in two shapes:
- families: a list of needed days and a list of needed shifts
- caregivers: a weekly JSON object, one entry per day with an enabled flag
  and a start/end time

Both end up as a frozenset of DaySlot. Malformed records raise ValueError.
"""

from datetime import time
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Union

from carematch.matcher.enums import Day, Shift
from carematch.matcher.models import DaySlot

DEFAULT_START_TIME = "08:00"
DEFAULT_END_TIME = "18:00"


def parse_slot(value: str) -> DaySlot:
    """Parse a wire key such as ``MONDAY_MORNING``."""
    day_part, sep, shift_part = value.strip().upper().partition("_")
    if not sep:
        raise ValueError(f"Invalid availability slot: {value!r}")
    try:
        return DaySlot(Day(day_part), Shift(shift_part))
    except ValueError:
        raise ValueError(f"Invalid availability slot: {value!r}") from None


def parse_slots(values: Iterable[str]) -> FrozenSet[DaySlot]:
    return frozenset(parse_slot(v) for v in values)


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Invalid {enum_cls.__name__.lower()}: {value!r}") from None


def build_availability_slots(
    days: Iterable[Union[Day, str]],
    shifts: Iterable[Union[Shift, str]]
) -> FrozenSet[DaySlot]:
    """Every combination of the needed days and needed shifts."""
    day_set = {_coerce(Day, d) for d in days}
    shift_set = {_coerce(Shift, s) for s in shifts}
    return frozenset(DaySlot(d, s) for d in day_set for s in shift_set)


def parse_time(value: str) -> time:
    """Parse ``HH:MM``; ``24:00`` is accepted as end of day."""
    try:
        hours_text, minutes_text = value.strip().split(":")
        hours, minutes = int(hours_text), int(minutes_text)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time: {value!r}, expected HH:MM") from None

    if hours == 24 and minutes == 0:
        return time.max
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid time: {value!r}, expected HH:MM")
    return time(hours, minutes)


def _shift_window(shift: Shift):
    start, end = shift.hours
    return time(start), time(end)


def parse_weekly_availability(
    availability: Optional[Mapping[str, Any]]
) -> FrozenSet[DaySlot]:
    """
    Convert a weekly availability object into slots.

    Example:
        {"monday": {"enabled": true, "startTime": "07:00", "endTime": "13:00"}}
        -> {MONDAY_MORNING, MONDAY_AFTERNOON}

    A shift is available when its window intersects the day's enabled range.
    Missing times default to 08:00-18:00.
    """
    if not availability:
        return frozenset()
    if not isinstance(availability, Mapping):
        raise ValueError(f"Weekly availability must be an object, got {type(availability).__name__}")

    slots = set()
    for day_key, entry in availability.items():
        day = _coerce(Day, day_key)
        if entry is None:
            continue
        if not isinstance(entry, Mapping):
            raise ValueError(f"Availability for {day_key!r} must be an object")
        if not entry.get("enabled"):
            continue

        start = parse_time(entry.get("startTime") or DEFAULT_START_TIME)
        end = parse_time(entry.get("endTime") or DEFAULT_END_TIME)
        if end <= start:
            raise ValueError(f"Availability for {day_key!r} ends before it starts")

        for shift in Shift:
            shift_start, shift_end = _shift_window(shift)
            if start < shift_end and end > shift_start:
                slots.add(DaySlot(day, shift))

    return frozenset(slots)

