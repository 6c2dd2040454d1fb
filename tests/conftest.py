"""
Shared fixtures for PawMatch tests.
"""

import pytest

from pawmatch.config import reload_settings
from pawmatch.schemas.animal import (
    Animal,
    AnimalProfile,
    AnimalType,
    CareLevel,
    EnergyLevel,
    Gender,
    TrainingLevel,
)
from pawmatch.schemas.user_preferences import (
    UserPreferences,
    ActivityLevel,
    ExperienceLevel,
    HousingType,
)


@pytest.fixture
def preferences():
    """Complete preferences of an adopter looking for a dog."""
    return UserPreferences(
        user_id="adopter_001",
        preferred_animal_types=[AnimalType.DOG],
        preferred_activity_level=ActivityLevel.MODERATE,
        housing_type=HousingType.HOUSE_SMALL_YARD,
        experience_level=ExperienceLevel.SOME_EXPERIENCE,
        has_other_pets=False,
        accepts_special_needs=False,
        prefers_vaccinated=True,
        prefers_sterilized=True,
        is_complete=True,
    )


@pytest.fixture
def make_animal():
    """Factory for candidate animals."""
    def _make(animal_id="animal_001", **overrides):
        data = {
            "animal_id": animal_id,
            "name": f"Pet {animal_id}",
            "type": AnimalType.DOG,
            "breed": "Mixed",
            "age": 3,
            "gender": Gender.FEMALE,
            "weight": 15,
            "vaccinated": True,
            "sterilized": True,
        }
        data.update(overrides)
        return Animal(**data)
    return _make


@pytest.fixture
def make_profile():
    """Factory for animal profiles."""
    def _make(animal_id="animal_001", **overrides):
        data = {
            "animal_id": animal_id,
            "energy_level": EnergyLevel.MODERATE,
            "care_level": CareLevel.MODERATE,
            "training_level": TrainingLevel.BASIC,
            "house_trained": True,
            "apartment_suitable": True,
        }
        data.update(overrides)
        return AnimalProfile(**data)
    return _make


@pytest.fixture
def animal(make_animal):
    """A healthy, vaccinated and sterilized dog."""
    return make_animal()


@pytest.fixture
def profile(make_profile):
    """An easy-going, house trained profile."""
    return make_profile()


@pytest.fixture
def override_settings(monkeypatch):
    """Reload settings with environment overrides; restores them afterwards."""
    def _override(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return reload_settings()
    yield _override
    monkeypatch.undo()
    reload_settings()
