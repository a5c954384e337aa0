#!/usr/bin/env python3
"""
Geodistance - great-circle distance between two coordinates (haversine).
"""

import math
from typing import Optional

from carematch.matcher.models import Coordinates

EARTH_RADIUS_KM = 6371.0


def calculate_distance(point1: Coordinates, point2: Coordinates) -> float:
    """
    Haversine distance in kilometers, rounded to 2 decimals.

    a = sin²(Δlat/2) + cos(lat1) · cos(lat2) · sin²(Δlon/2)
    d = 2R · atan2(√a, √(1−a))
    """
    lat1 = math.radians(point1.latitude)
    lat2 = math.radians(point2.latitude)
    d_lat = math.radians(point2.latitude - point1.latitude)
    d_lon = math.radians(point2.longitude - point1.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round(EARTH_RADIUS_KM * c, 2)


def distance_between(
    point1: Optional[Coordinates],
    point2: Optional[Coordinates]
) -> Optional[float]:
    """Distance in km, or None when either location is unknown.

    Returning None (not 0.0) lets each caller apply its own missing-location policy.
    """
    if point1 is None or point2 is None:
        return None
    return calculate_distance(point1, point2)
