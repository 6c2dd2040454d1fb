"""
Helper utilities for PawMatch.
"""

import math
import sys
from typing import Optional
from loguru import logger

from ..config import get_settings
from ..schemas.animal import Animal
from ..schemas.match import CandidateSummary


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Clamp a value into [lower, upper]."""
    return max(lower, min(upper, value))


def round_score(score: float) -> float:
    """Round a score to 2 decimals, halves rounding up."""
    return math.floor(score * 100 + 0.5) / 100


def to_percentage(score: float) -> int:
    """
    Convert a 0-1 score to an integer percentage.

    Args:
        score: Score between 0 and 1

    Returns:
        Percentage rounded to the nearest integer, halves up
    """
    return int(math.floor(score * 100 + 0.5))


def build_candidate_summary(animal: Animal) -> CandidateSummary:
    """
    Snapshot the display fields of an animal for a match result.

    Args:
        animal: Candidate animal

    Returns:
        Frozen CandidateSummary
    """
    return CandidateSummary(
        id=animal.animal_id,
        name=animal.name,
        type=animal.type,
        breed=animal.breed,
        age=animal.age,
        gender=animal.gender,
        description=animal.description,
        images=list(animal.images),
        weight=animal.weight,
        vaccinated=animal.vaccinated,
        sterilized=animal.sterilized,
        health_details=animal.health_details,
    )


def configure_logging(level: Optional[str] = None, sink=sys.stderr) -> int:
    """
    Route loguru output to a single sink.

    Args:
        level: Log level (defaults to settings.log_level, DEBUG in debug mode)
        sink: Any loguru-compatible sink

    Returns:
        Handler id of the added sink
    """
    if level is None:
        settings = get_settings()
        level = "DEBUG" if settings.debug else settings.log_level

    logger.remove()  # Remove default handler
    return logger.add(sink, level=level.upper())
