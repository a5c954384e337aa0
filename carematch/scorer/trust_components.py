#!/usr/bin/env python3
"""
Trust Components - verification seal and reviews.
"""

from datetime import date, datetime
from typing import Union
import logging

from carematch.config_loader import ScorerConfig
from carematch.matcher.models import CaregiverProfile
from carematch.scorer.fit_components import bounded
from carematch.scorer.models import ScoreComponent
from carematch.utils import clamp

logger = logging.getLogger(__name__)


def document_expired(caregiver: CaregiverProfile, as_of: Union[date, datetime]) -> bool:
    expiration = caregiver.document_expiration_date
    if expiration is None:
        return False
    today = as_of.date() if isinstance(as_of, datetime) else as_of
    return expiration < today


def score_seal(
    caregiver: CaregiverProfile,
    as_of: Union[date, datetime],
    config: ScorerConfig
) -> ScoreComponent:
    """
    Each verification flag is worth a third of the max score.

    An expired document earns nothing even when the stored flag is still set.
    """
    max_score = config.weights.seal
    share = max_score / 3

    expired = caregiver.document_validated and document_expired(caregiver, as_of)
    checks = [
        ('document', caregiver.document_validated and not expired),
        ('personal data', caregiver.personal_data_validated),
        ('background check', caregiver.criminal_background_validated),
    ]
    passed = [name for name, ok in checks if ok]

    details = f"Verified: {', '.join(passed)}" if passed else "No verifications"
    if expired:
        details += " (document expired)"
    return bounded(share * len(passed), max_score, details)


def score_reviews(caregiver: CaregiverProfile, config: ScorerConfig) -> ScoreComponent:
    """
    Neutral floor plus a rating bonus weighted by how many reviews back it.

    With N = max * reviews_neutral_fraction and
    conf = min(1, count / reviews_full_confidence_count):

        score = N + (max - N) * (rating / 5) * conf

    A caregiver without reviews gets N. The score never decreases as the
    rating or the count grows, and reaches max only for a 5.0 rating at full
    confidence.
    """
    max_score = config.weights.reviews
    neutral = max_score * config.reviews_neutral_fraction
    count = caregiver.review_count or 0

    # New caregivers are not penalized for having no history
    if count <= 0 or caregiver.average_rating is None:
        return bounded(neutral, max_score, "No reviews yet")

    rating = clamp(caregiver.average_rating, 0.0, 5.0)
    confidence = min(1.0, count / config.reviews_full_confidence_count)
    score = neutral + (max_score - neutral) * (rating / 5.0) * confidence
    return bounded(score, max_score, f"{rating:.1f} average from {count} review(s)")
