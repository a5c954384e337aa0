#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from .config import get_config
from .services.match_service import MatchService


def get_match_service() -> MatchService:
    """
    Get a match service bound to the configured matching settings.

    Returns:
        MatchService: Service for computing and ranking matches.
    """
    return MatchService(get_config().matching)
