"""
Tools for PawMatch callers.
Wraps the matching agent and returns plain dictionary payloads.
"""

from typing import Any, Dict, Optional
from pydantic import ValidationError
from loguru import logger

from .agents.matching_agent import MatchingAgent
from .config import get_settings
from .exceptions import NotFoundError, PreconditionError
from .schemas.match import MatchingCriteria
from .utils.validators import (
    validate_matching_params,
    validate_preferences_data,
    validate_profile_data,
)


ONBOARDING_MESSAGE = "Complete your preferences questionnaire to receive personalized recommendations"


class MatchingTools:
    """Collection of matching tools exposed to presentation code."""

    def __init__(self, agent: MatchingAgent):
        """
        Initialize the tools.

        Args:
            agent: Matching agent wired to its repositories
        """
        self.agent = agent

    async def get_recommendations(
        self,
        user_id: str,
        limit: Optional[int] = None,
        min_score: Optional[float] = None,
        include_special_needs: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Get personalized animal recommendations.

        Args:
            user_id: Adopter identifier
            limit: Maximum number of recommendations (default from settings)
            min_score: Minimum compatibility score (default from settings)
            include_special_needs: Include special-needs animals (default from settings)

        Returns:
            Dictionary with recommendations, or an onboarding hint when the
            adopter has not completed their preferences
        """
        is_valid, error_msg = validate_matching_params(limit, min_score)
        if not is_valid:
            return {"success": False, "error": error_msg}

        settings = get_settings()
        if include_special_needs is None:
            include_special_needs = settings.matching_include_special_needs

        criteria = MatchingCriteria(
            user_id=user_id,
            limit=limit if limit is not None else settings.matching_default_limit,
            min_score=min_score if min_score is not None else settings.matching_min_score,
            include_special_needs=include_special_needs,
        )

        try:
            matches = await self.agent.find_matches(criteria)
        except PreconditionError:
            return {
                "needs_onboarding": True,
                "message": ONBOARDING_MESSAGE,
                "recommendations": [],
            }

        return {
            "needs_onboarding": False,
            "total_matches": len(matches),
            "recommendations": [match.model_dump(mode="json") for match in matches],
        }

    async def get_compatibility(self, user_id: str, animal_id: str) -> Dict[str, Any]:
        """
        Get a detailed compatibility analysis for one animal.

        Args:
            user_id: Adopter identifier
            animal_id: Animal identifier

        Returns:
            Dictionary with the analysis, an onboarding hint, or found=False
        """
        try:
            analysis = await self.agent.analyze_compatibility(user_id, animal_id)
        except PreconditionError:
            return {"needs_onboarding": True, "message": ONBOARDING_MESSAGE}
        except NotFoundError as e:
            logger.info(f"Compatibility not available: {e}")
            return {"found": False, "message": str(e)}

        match = analysis.match
        return {
            "found": True,
            "score": match.score,
            "compatibility": match.compatibility.model_dump(),
            "match_reasons": match.match_reasons,
            "concerns": match.concerns,
            "recommendation": analysis.recommendation,
        }

    async def save_preferences(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and store adopter preferences.

        Args:
            user_id: Adopter identifier
            data: Preference fields

        Returns:
            Dictionary with the stored preferences or a validation error
        """
        is_valid, error_msg, validated = validate_preferences_data({**data, "user_id": user_id})
        if not is_valid:
            return {"success": False, "error": error_msg}

        is_new_user = not (await self.agent.get_preferences_status(user_id)).has_preferences

        try:
            preferences = await self.agent.save_preferences(
                user_id, validated.model_dump(exclude_unset=True)
            )
        except ValidationError as e:
            logger.warning(f"Merged preferences invalid for user {user_id}: {e}")
            return {"success": False, "error": str(e)}

        return {
            "success": True,
            "preferences": preferences.model_dump(mode="json"),
            "is_new_user": is_new_user,
        }

    async def get_preferences_status(self, user_id: str) -> Dict[str, Any]:
        """Get onboarding status for an adopter."""
        status = await self.agent.get_preferences_status(user_id)
        return status.model_dump()

    async def save_animal_profile(self, animal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and store an animal profile.

        Args:
            animal_id: Animal identifier
            data: Profile fields

        Returns:
            Dictionary with the stored profile or an error
        """
        is_valid, error_msg, validated = validate_profile_data({**data, "animal_id": animal_id})
        if not is_valid:
            return {"success": False, "error": error_msg}

        try:
            profile = await self.agent.save_animal_profile(
                animal_id, validated.model_dump(exclude_unset=True)
            )
        except NotFoundError as e:
            return {"success": False, "error": str(e)}

        return {"success": True, "profile": profile.model_dump(mode="json")}
