"""
Difficulty and special-needs classifiers derived from an animal profile.
"""

from typing import Optional

from ..schemas.animal import AnimalProfile, CareLevel, TrainingLevel
from ..utils.helpers import clamp


# Difficulty of a candidate without a profile
NEUTRAL_DIFFICULTY = 0.5

BASE_DIFFICULTY = 0.3
MIN_DIFFICULTY = 0.1
MAX_DIFFICULTY = 1.0


def get_difficulty_score(profile: Optional[AnimalProfile]) -> float:
    """
    Estimate how much owner skill an animal requires.

    Problem behaviors and demanding care raise the estimate, training lowers
    it. The result never drops below MIN_DIFFICULTY.

    Args:
        profile: Optional animal profile

    Returns:
        Difficulty between 0.1 and 1.0
    """
    if profile is None:
        return NEUTRAL_DIFFICULTY

    difficulty = BASE_DIFFICULTY

    # Problem behaviors
    if profile.destructive_behavior:
        difficulty += 0.2
    if profile.separation_anxiety:
        difficulty += 0.2
    if profile.escape_tendency:
        difficulty += 0.15
    if profile.noise_sensitivity:
        difficulty += 0.1

    # Care level
    if profile.care_level == CareLevel.HIGH:
        difficulty += 0.2
    if profile.care_level == CareLevel.SPECIAL_NEEDS:
        difficulty += 0.4

    # Training
    if profile.training_level == TrainingLevel.ADVANCED:
        difficulty -= 0.1
    if profile.training_level == TrainingLevel.PROFESSIONAL:
        difficulty -= 0.2
    if profile.house_trained:
        difficulty -= 0.1

    return clamp(difficulty, MIN_DIFFICULTY, MAX_DIFFICULTY)


def has_special_needs(profile: Optional[AnimalProfile]) -> bool:
    """
    Check if an animal needs above-baseline care or medical attention.

    Args:
        profile: Optional animal profile

    Returns:
        True if the profile shows special needs, False without a profile
    """
    if profile is None:
        return False

    return (
        profile.care_level == CareLevel.SPECIAL_NEEDS
        or profile.special_diet
        or len(profile.chronic_conditions) > 0
        or len(profile.medications) > 0
        or profile.destructive_behavior
        or profile.separation_anxiety
    )
