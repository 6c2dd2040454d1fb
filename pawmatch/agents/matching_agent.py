"""
Matching Agent - Matching Intelligence
Ranks available animals against an adopter's preferences.
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, List, Optional
from loguru import logger

from ..config import get_settings
from ..exceptions import NotFoundError, PreconditionError
from ..models.compatibility_model import CompatibilityModel
from ..repositories import AnimalProfileRepository, AnimalRepository, PreferencesRepository
from ..schemas.animal import Animal, AnimalProfile, AnimalStatus
from ..schemas.match import CompatibilityAnalysis, MatchResult, MatchingCriteria, PreferencesStatus
from ..schemas.user_preferences import UserPreferences


class MatchingAgent:
    """
    Specialized agent for compatibility matching and ranking.

    Holds only injected collaborators; a single instance can serve any
    number of requests.
    """

    def __init__(
        self,
        preferences_repository: PreferencesRepository,
        animal_repository: AnimalRepository,
        profile_repository: AnimalProfileRepository,
        model: Optional[CompatibilityModel] = None,
        log=None,
    ):
        """
        Initialize the matching agent.

        Args:
            preferences_repository: Adopter preference lookup
            animal_repository: Candidate animal lookup
            profile_repository: Optional animal profile lookup
            model: Compatibility model (a default one sharing this log sink is
                created if omitted)
            log: Log sink; defaults to a loguru logger bound to this component
        """
        self.preferences_repository = preferences_repository
        self.animal_repository = animal_repository
        self.profile_repository = profile_repository
        self.log = log or logger.bind(component="matching_agent")
        self.model = model or CompatibilityModel(log=self.log)
        self.max_concurrency = get_settings().matching_max_concurrency

    async def find_matches(self, criteria: MatchingCriteria) -> List[MatchResult]:
        """
        Find the best matching animals for an adopter.

        Args:
            criteria: Adopter id, limit, minimum score and special-needs flag

        Returns:
            Matches sorted by score descending, at most criteria.limit long

        Raises:
            PreconditionError: Preferences are missing or incomplete
        """
        try:
            preferences = await self._load_preferences(criteria.user_id)

            animals = await self.animal_repository.find_all(
                available_for_adoption=True,
                status=AnimalStatus.AVAILABLE,
            )
            self.log.info(f"Found {len(animals)} available animals for matching")

            profiles = await self._load_profiles(animals)

            matches = []
            for animal, profile in zip(animals, profiles):
                match = self.model.calculate_compatibility(preferences, animal, profile)

                if match.score < criteria.min_score:
                    continue
                if match.has_special_needs and not criteria.include_special_needs:
                    continue

                matches.append(match)

            # Stable sort: equal scores keep candidate-source order
            ranked = sorted(matches, key=lambda m: m.score, reverse=True)[: criteria.limit]

            self.log.info(f"Generated {len(ranked)} matches for user {criteria.user_id}")
            return ranked

        except PreconditionError as e:
            self.log.warning(f"Cannot match user {criteria.user_id}: {e}")
            raise
        except Exception as e:
            self.log.error(f"Error finding matches: {e}")
            raise

    async def analyze_compatibility(self, user_id: str, animal_id: str) -> CompatibilityAnalysis:
        """
        Score one specific animal for an adopter.

        Score and special-needs filters do not apply here.

        Args:
            user_id: Adopter identifier
            animal_id: Animal identifier

        Returns:
            CompatibilityAnalysis with the match and a qualitative label

        Raises:
            PreconditionError: Preferences are missing or incomplete
            NotFoundError: Animal does not exist or is not open for adoption
        """
        preferences = await self._load_preferences(user_id)

        animal = await self.animal_repository.find_by_id(animal_id)
        if animal is None or not animal.can_be_adopted():
            raise NotFoundError("Animal", animal_id)

        profile = await self.profile_repository.find_by_animal_id(animal_id)
        match = self.model.calculate_compatibility(preferences, animal, profile)

        return CompatibilityAnalysis(
            match=match,
            recommendation=self.model.get_recommendation_level(match.score),
        )

    async def save_preferences(self, user_id: str, data: Dict[str, Any]) -> UserPreferences:
        """
        Create or update an adopter's preferences.

        Saving always completes the questionnaire.

        Args:
            user_id: Adopter identifier
            data: Preference fields to set

        Returns:
            Stored preferences
        """
        existing = await self.preferences_repository.find_by_user_id(user_id)
        now = datetime.utcnow()

        payload = existing.model_dump() if existing else {}
        payload.update(data)
        payload.update(
            user_id=user_id,
            is_complete=True,
            completion_date=now,
            updated_at=now,
        )

        preferences = UserPreferences(**payload)
        saved = await self.preferences_repository.save(preferences)

        action = "Updated" if existing else "Created"
        self.log.info(f"{action} preferences for user {user_id}")
        return saved

    async def get_preferences_status(self, user_id: str) -> PreferencesStatus:
        """Report whether an adopter still needs onboarding."""
        preferences = await self.preferences_repository.find_by_user_id(user_id)
        completed = preferences is not None and preferences.is_complete

        return PreferencesStatus(
            has_preferences=preferences is not None,
            has_completed_preferences=completed,
            needs_onboarding=not completed,
        )

    async def save_animal_profile(self, animal_id: str, data: Dict[str, Any]) -> AnimalProfile:
        """
        Create or update the extended profile of an animal.

        Args:
            animal_id: Animal identifier
            data: Profile fields to set

        Returns:
            Stored profile

        Raises:
            NotFoundError: Animal does not exist
        """
        animal = await self.animal_repository.find_by_id(animal_id)
        if animal is None:
            raise NotFoundError("Animal", animal_id)

        existing = await self.profile_repository.find_by_animal_id(animal_id)

        payload = existing.model_dump() if existing else {}
        payload.update(data)
        payload.update(animal_id=animal_id, updated_at=datetime.utcnow())

        profile = AnimalProfile(**payload)
        saved = await self.profile_repository.save(profile)

        action = "Updated" if existing else "Created"
        self.log.info(f"{action} profile for animal {animal_id}")
        return saved

    async def _load_preferences(self, user_id: str) -> UserPreferences:
        """Load preferences, enforcing that the questionnaire is complete."""
        preferences = await self.preferences_repository.find_by_user_id(user_id)

        if preferences is None or not preferences.is_complete:
            raise PreconditionError(f"Preferences for user {user_id} not found or incomplete")

        return preferences

    async def _load_profiles(self, animals: List[Animal]) -> List[Optional[AnimalProfile]]:
        """
        Look up profiles concurrently; results follow the order of animals.

        If any lookup fails, the remaining lookups are cancelled and awaited
        before the error propagates.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def load(animal: Animal) -> Optional[AnimalProfile]:
            async with semaphore:
                return await self.profile_repository.find_by_animal_id(animal.animal_id)

        tasks = [asyncio.create_task(load(animal)) for animal in animals]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
