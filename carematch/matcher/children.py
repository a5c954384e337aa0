#!/usr/bin/env python3
"""
Child Age Resolution - Effective age bucket for each child referenced by a job.

A born child is bucketed by its age at the evaluation date. An unborn child,
or one whose expected birth date is still ahead, is treated as NEWBORN
(prenatal care). A child with neither a usable birth date nor a future
expected birth date is a data inconsistency: it is logged and left out of
age-based calculations.
"""

from datetime import date, datetime
from typing import Dict, FrozenSet, List, Optional, Sequence, Union
import logging

from dateutil.relativedelta import relativedelta

from carematch.matcher.enums import AgeRange, SpecialNeed
from carematch.matcher.models import CaregiverProfile, ChildContext, JobOpportunity

logger = logging.getLogger(__name__)

# Upper bounds (exclusive) in months, checked in order
_AGE_BUCKET_LIMITS_MONTHS = (
    (3, AgeRange.NEWBORN),
    (12, AgeRange.BABY),
    (36, AgeRange.TODDLER),
    (72, AgeRange.PRESCHOOL),
    (156, AgeRange.SCHOOL_AGE),
)


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def age_in_months(birth_date: date, as_of: Union[date, datetime]) -> int:
    """Completed months between ``birth_date`` and ``as_of``."""
    delta = relativedelta(_as_date(as_of), birth_date)
    return delta.years * 12 + delta.months


def bucket_for_age(months: int) -> AgeRange:
    for limit, bucket in _AGE_BUCKET_LIMITS_MONTHS:
        if months < limit:
            return bucket
    return AgeRange.TEENAGER


def effective_age_range(
    child: ChildContext,
    as_of: Union[date, datetime]
) -> Optional[AgeRange]:
    """
    Resolve the child's age bucket at ``as_of``.

    Returns None when the child cannot be placed in any bucket.
    """
    today = _as_date(as_of)

    if child.birth_date is not None and child.birth_date <= today:
        return bucket_for_age(age_in_months(child.birth_date, today))

    if child.expected_birth_date is not None:
        if child.expected_birth_date >= today:
            return AgeRange.NEWBORN
    elif child.unborn:
        return AgeRange.NEWBORN

    logger.warning(
        f"Child {child.id} has no usable birth date "
        f"(birth_date={child.birth_date}, expected_birth_date={child.expected_birth_date}); "
        f"excluded from age checks"
    )
    return None


def relevant_children(
    job: JobOpportunity,
    children: Sequence[ChildContext]
) -> List[ChildContext]:
    """
    Children the job refers to, in ``job.child_ids`` order.

    A job without child ids concerns every child given. Ids that cannot be
    resolved are skipped.
    """
    if not job.child_ids:
        return list(children)

    by_id: Dict[object, ChildContext] = {c.id: c for c in children}
    resolved = []
    for child_id in job.child_ids:
        child = by_id.get(child_id)
        if child is None:
            logger.debug(f"Job {job.id}: child {child_id} not provided, treated as absent")
            continue
        resolved.append(child)
    return resolved


def resolve_age_ranges(
    children: Sequence[ChildContext],
    as_of: Union[date, datetime]
) -> Dict[object, AgeRange]:
    """Map child id to effective bucket, leaving out children that cannot be resolved."""
    resolved = {}
    for child in children:
        bucket = effective_age_range(child, as_of)
        if bucket is not None:
            resolved[child.id] = bucket
    return resolved


def uncovered_special_needs(child: ChildContext, caregiver: CaregiverProfile) -> FrozenSet[SpecialNeed]:
    """
    Special-need types of ``child`` the caregiver did not declare.

    OTHER on the child side is accepted by any special-needs experience, and a
    caregiver specialty of OTHER covers every type.
    """
    if not child.has_special_needs:
        return frozenset()
    needs = frozenset(n for n in child.special_needs_types if n is not SpecialNeed.OTHER)
    if not caregiver.has_special_needs_experience:
        return needs
    if SpecialNeed.OTHER in caregiver.special_needs_specialties:
        return frozenset()
    return needs - caregiver.special_needs_specialties


def special_needs_covered(child: ChildContext, caregiver: CaregiverProfile) -> bool:
    if not child.has_special_needs:
        return True
    return caregiver.has_special_needs_experience and not uncovered_special_needs(child, caregiver)
