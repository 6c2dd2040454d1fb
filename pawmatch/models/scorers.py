"""
Compatibility sub-scorers.

Each scorer maps (preferences, animal, optional profile) to a score between
0 and 1 and appends human-readable strings to the shared reasons and
concerns lists.
"""

from typing import List, Optional

from ..schemas.animal import Animal, AnimalProfile, CareLevel, EnergyLevel, TrainingLevel
from ..schemas.user_preferences import (
    UserPreferences,
    ActivityLevel,
    ExperienceLevel,
    FamilyComposition,
    HousingType,
    TimeAvailability,
)
from ..utils.helpers import clamp
from .classifiers import get_difficulty_score, has_special_needs


BASE_SCORE = 0.5

ACTIVITY_RANKS = {
    ActivityLevel.LOW: 1,
    ActivityLevel.MODERATE: 2,
    ActivityLevel.HIGH: 3,
    ActivityLevel.VERY_HIGH: 4,
}

ENERGY_RANKS = {
    EnergyLevel.VERY_LOW: 1,
    EnergyLevel.LOW: 2,
    EnergyLevel.MODERATE: 3,
    EnergyLevel.HIGH: 4,
    EnergyLevel.VERY_HIGH: 5,
}

EXPERIENCE_SCORES = {
    ExperienceLevel.FIRST_TIME: 0.2,
    ExperienceLevel.SOME_EXPERIENCE: 0.5,
    ExperienceLevel.EXPERIENCED: 0.8,
    ExperienceLevel.EXPERT: 1.0,
}


def get_energy_compatibility(
    activity_level: ActivityLevel, energy_level: EnergyLevel
) -> float:
    """
    Compare the adopter's activity level with the animal's energy.

    Each rank of difference costs 0.25.

    Args:
        activity_level: Adopter's preferred activity level (ranks 1-4)
        energy_level: Animal energy level (ranks 1-5)

    Returns:
        Compatibility between 0 and 1
    """
    user_rank = ACTIVITY_RANKS.get(activity_level, 2)
    animal_rank = ENERGY_RANKS.get(energy_level, 3)
    difference = abs(user_rank - animal_rank)

    return max(0.0, 1 - difference * 0.25)


def get_housing_compatibility(
    housing_type: HousingType, profile: Optional[AnimalProfile]
) -> float:
    """Score how well the adopter's housing suits the animal."""
    if profile is None:
        return 0.5

    housing_scores = {
        HousingType.APARTMENT: 1.0 if profile.apartment_suitable else 0.3,
        HousingType.HOUSE_NO_YARD: 0.7,
        HousingType.HOUSE_SMALL_YARD: 0.8,
        HousingType.HOUSE_LARGE_YARD: 1.0,
        HousingType.FARM: 1.0,
    }

    return housing_scores.get(housing_type, 0.5)


def get_time_compatibility(
    time_availability: TimeAvailability, profile: Optional[AnimalProfile]
) -> float:
    """Score the adopter's daily time against the animal's care level."""
    if profile is None:
        return 0.5

    time_scores = {
        TimeAvailability.MINIMAL: 0.8 if profile.care_level == CareLevel.LOW else 0.2,
        TimeAvailability.LIMITED: 0.8 if profile.care_level == CareLevel.MODERATE else 0.6,
        TimeAvailability.MODERATE: 0.8,
        TimeAvailability.EXTENSIVE: 1.0,
    }

    return time_scores.get(time_availability, 0.5)


def get_experience_score(experience_level: ExperienceLevel) -> float:
    """Map an experience level to a 0-1 skill score."""
    return EXPERIENCE_SCORES.get(experience_level, 0.2)


def calculate_personality_score(
    preferences: UserPreferences,
    animal: Animal,
    profile: Optional[AnimalProfile],
    reasons: List[str],
    concerns: List[str],
) -> float:
    """
    Calculate personality compatibility score.

    Args:
        preferences: Adopter preferences
        animal: Candidate animal
        profile: Optional animal profile
        reasons: Match reasons, appended to
        concerns: Concerns, appended to

    Returns:
        Personality score (0-1), exactly 0.5 without a profile
    """
    score = BASE_SCORE

    if profile is None:
        return score

    # Energy vs preferred activity
    energy_compatibility = get_energy_compatibility(
        preferences.preferred_activity_level, profile.energy_level
    )
    score += energy_compatibility * 0.3

    if energy_compatibility > 0.7:
        reasons.append(f"Compatible energy level ({profile.energy_level.value})")
    elif energy_compatibility < 0.3:
        concerns.append("Energy level differs from your preferred activity level")

    # Kids; unknown never triggers either branch
    if (
        preferences.family_composition == FamilyComposition.FAMILY_YOUNG_KIDS
        and profile.good_with_kids is False
    ):
        score -= 0.4
        concerns.append("Not recommended for families with young children")
    elif profile.good_with_kids is True and "family" in preferences.family_composition.value:
        score += 0.2
        reasons.append("Great with children")

    # Other pets
    if preferences.has_other_pets and profile.good_with_other_pets is False:
        score -= 0.3
        concerns.append("May have trouble living with other pets")
    elif preferences.has_other_pets and profile.good_with_other_pets is True:
        score += 0.2
        reasons.append("Gets along well with other pets")

    return clamp(score)


def calculate_lifestyle_score(
    preferences: UserPreferences,
    animal: Animal,
    profile: Optional[AnimalProfile],
    reasons: List[str],
    concerns: List[str],
) -> float:
    """
    Calculate lifestyle compatibility score.

    Args:
        preferences: Adopter preferences
        animal: Candidate animal
        profile: Optional animal profile
        reasons: Match reasons, appended to
        concerns: Concerns, appended to

    Returns:
        Lifestyle score (0-1)
    """
    score = BASE_SCORE

    housing_compatibility = get_housing_compatibility(preferences.housing_type, profile)
    score += housing_compatibility * 0.4

    if housing_compatibility > 0.8:
        reasons.append("Your home is ideal for this pet")
    elif housing_compatibility < 0.4:
        concerns.append("Your type of home is not ideal for this pet")

    time_compatibility = get_time_compatibility(preferences.time_availability, profile)
    score += time_compatibility * 0.3

    # Zero bounds and values count as unset
    weight = animal.weight
    if preferences.min_size and weight and weight < preferences.min_size:
        score -= 0.1
    if preferences.max_size and weight and weight > preferences.max_size:
        score -= 0.2
        concerns.append("Larger than your preferred size")

    age = animal.age
    if preferences.min_age and age and age < preferences.min_age:
        score -= 0.1
    if preferences.max_age and age and age > preferences.max_age:
        score -= 0.1

    return clamp(score)


def calculate_experience_score(
    preferences: UserPreferences,
    animal: Animal,
    profile: Optional[AnimalProfile],
    reasons: List[str],
    concerns: List[str],
) -> float:
    """
    Calculate experience compatibility score.

    Compares the adopter's skill with the animal's difficulty, then applies
    training and prior-experience bonuses.

    Args:
        preferences: Adopter preferences
        animal: Candidate animal
        profile: Optional animal profile
        reasons: Match reasons, appended to
        concerns: Concerns, appended to

    Returns:
        Experience score (0-1), exactly 0.5 without a profile
    """
    score = BASE_SCORE

    if profile is None:
        return score

    experience = get_experience_score(preferences.experience_level)
    difficulty = get_difficulty_score(profile)

    if experience >= difficulty:
        score += 0.4
        if experience > difficulty + 0.3:
            reasons.append("Your experience is a perfect fit for this pet")
    else:
        gap = difficulty - experience
        score -= gap * 0.6
        if gap > 0.4:
            concerns.append("This pet may need a more experienced owner")

    if preferences.prefers_trained and profile.training_level != TrainingLevel.UNTRAINED:
        score += 0.2
        reasons.append("Already has training")
    elif preferences.prefers_trained and profile.training_level == TrainingLevel.UNTRAINED:
        score -= 0.1

    if animal.type in preferences.previous_pet_types:
        score += 0.2
        reasons.append(f"You have previous experience with a {animal.type.value}")

    return clamp(score)


def calculate_practical_score(
    preferences: UserPreferences,
    animal: Animal,
    profile: Optional[AnimalProfile],
    reasons: List[str],
    concerns: List[str],
) -> float:
    """
    Calculate practical requirements score.

    Args:
        preferences: Adopter preferences
        animal: Candidate animal
        profile: Optional animal profile
        reasons: Match reasons, appended to
        concerns: Concerns, appended to

    Returns:
        Practical score (0-1)
    """
    score = BASE_SCORE

    if animal.type in preferences.preferred_animal_types:
        score += 0.3
        reasons.append(f"Matches your preference for a {animal.type.value}")

    if preferences.preferred_genders and animal.gender in preferences.preferred_genders:
        score += 0.1

    if preferences.prefers_vaccinated and animal.vaccinated:
        score += 0.1
        reasons.append("Vaccinations are up to date")
    elif preferences.prefers_vaccinated and not animal.vaccinated:
        score -= 0.1
        concerns.append("Needs to complete vaccinations")

    if preferences.prefers_sterilized and animal.sterilized:
        score += 0.1
        reasons.append("Already sterilized")
    elif preferences.prefers_sterilized and not animal.sterilized:
        score -= 0.1
        concerns.append("Needs to be sterilized")

    if not preferences.accepts_special_needs and has_special_needs(profile):
        score -= 0.3
        concerns.append("Requires special care")

    return clamp(score)
