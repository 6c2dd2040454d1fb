"""
Repository interfaces consumed by the matching agent, plus in-memory
implementations for tests and local use.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .schemas.animal import Animal, AnimalProfile, AnimalStatus
from .schemas.user_preferences import UserPreferences


@runtime_checkable
class PreferencesRepository(Protocol):
    """Lookup and storage of adopter preferences, one record per user."""

    async def find_by_user_id(self, user_id: str) -> Optional[UserPreferences]:
        ...

    async def save(self, preferences: UserPreferences) -> UserPreferences:
        ...


@runtime_checkable
class AnimalRepository(Protocol):
    """Lookup of candidate animals."""

    async def find_all(
        self,
        available_for_adoption: bool = True,
        status: AnimalStatus = AnimalStatus.AVAILABLE,
    ) -> List[Animal]:
        ...

    async def find_by_id(self, animal_id: str) -> Optional[Animal]:
        ...


@runtime_checkable
class AnimalProfileRepository(Protocol):
    """Lookup and storage of optional animal profiles, keyed by animal id."""

    async def find_by_animal_id(self, animal_id: str) -> Optional[AnimalProfile]:
        ...

    async def save(self, profile: AnimalProfile) -> AnimalProfile:
        ...


class InMemoryPreferencesRepository:
    """Dictionary-backed PreferencesRepository."""

    def __init__(self, preferences: Optional[List[UserPreferences]] = None):
        self._records: Dict[str, UserPreferences] = {}
        for record in preferences or []:
            self._records[record.user_id] = record

    async def find_by_user_id(self, user_id: str) -> Optional[UserPreferences]:
        return self._records.get(user_id)

    async def save(self, preferences: UserPreferences) -> UserPreferences:
        self._records[preferences.user_id] = preferences
        return preferences


class InMemoryAnimalRepository:
    """Dictionary-backed AnimalRepository. Preserves insertion order."""

    def __init__(self, animals: Optional[List[Animal]] = None):
        self._records: Dict[str, Animal] = {}
        for animal in animals or []:
            self._records[animal.animal_id] = animal

    def add(self, animal: Animal) -> Animal:
        self._records[animal.animal_id] = animal
        return animal

    async def find_all(
        self,
        available_for_adoption: bool = True,
        status: AnimalStatus = AnimalStatus.AVAILABLE,
    ) -> List[Animal]:
        return [
            animal
            for animal in self._records.values()
            if animal.available_for_adoption == available_for_adoption
            and animal.status == status
        ]

    async def find_by_id(self, animal_id: str) -> Optional[Animal]:
        return self._records.get(animal_id)


class InMemoryAnimalProfileRepository:
    """Dictionary-backed AnimalProfileRepository."""

    def __init__(self, profiles: Optional[List[AnimalProfile]] = None):
        self._records: Dict[str, AnimalProfile] = {}
        for profile in profiles or []:
            self._records[profile.animal_id] = profile

    async def find_by_animal_id(self, animal_id: str) -> Optional[AnimalProfile]:
        return self._records.get(animal_id)

    async def save(self, profile: AnimalProfile) -> AnimalProfile:
        self._records[profile.animal_id] = profile
        return profile
