"""
Compatibility model for adopter/animal matching.
Combines four rule-based sub-scores into a weighted overall score.
"""

from typing import Dict, List, Optional
from loguru import logger

from ..schemas.animal import Animal, AnimalProfile
from ..schemas.match import CompatibilityBreakdown, MatchResult
from ..schemas.user_preferences import UserPreferences
from ..utils.helpers import build_candidate_summary, round_score, to_percentage
from .classifiers import has_special_needs
from .scorers import (
    calculate_personality_score,
    calculate_lifestyle_score,
    calculate_experience_score,
    calculate_practical_score,
)


class CompatibilityModel:
    """
    Scores a single adopter/animal pair.
    Holds only the fixed component weights and a log sink, so one instance
    can be shared.
    """

    def __init__(self, model_version: str = "1.0", log=None):
        """
        Initialize the compatibility model.

        Args:
            model_version: Version tag of the scoring rules
            log: Log sink; defaults to a loguru logger bound to this component
        """
        self.model_version = model_version
        self.log = log or logger.bind(component="compatibility_model")
        self.weights = {
            "personality": 0.25,
            "lifestyle": 0.30,
            "experience": 0.25,
            "practical": 0.20,
        }

    def calculate_component_scores(
        self,
        preferences: UserPreferences,
        animal: Animal,
        profile: Optional[AnimalProfile],
        reasons: List[str],
        concerns: List[str],
    ) -> Dict[str, float]:
        """
        Run the four sub-scorers in a fixed order.

        Args:
            preferences: Adopter preferences
            animal: Candidate animal
            profile: Optional animal profile
            reasons: Match reasons, appended to
            concerns: Concerns, appended to

        Returns:
            Dictionary of component name to score (0-1)
        """
        return {
            "personality": calculate_personality_score(preferences, animal, profile, reasons, concerns),
            "lifestyle": calculate_lifestyle_score(preferences, animal, profile, reasons, concerns),
            "experience": calculate_experience_score(preferences, animal, profile, reasons, concerns),
            "practical": calculate_practical_score(preferences, animal, profile, reasons, concerns),
        }

    def calculate_overall_score(self, scores: Dict[str, float]) -> float:
        """Weighted sum of the component scores."""
        return sum(scores[name] * weight for name, weight in self.weights.items())

    def calculate_compatibility(
        self,
        preferences: UserPreferences,
        animal: Animal,
        profile: Optional[AnimalProfile] = None,
    ) -> MatchResult:
        """
        Calculate compatibility between an adopter and an animal.

        Args:
            preferences: Adopter preferences
            animal: Candidate animal
            profile: Optional animal profile

        Returns:
            MatchResult with score, percentage breakdown, reasons and concerns
        """
        reasons: List[str] = []
        concerns: List[str] = []

        scores = self.calculate_component_scores(preferences, animal, profile, reasons, concerns)
        overall_score = self.calculate_overall_score(scores)

        self.log.debug(
            f"Scored animal {animal.animal_id}: overall={overall_score:.3f} "
            f"personality={scores['personality']:.2f} lifestyle={scores['lifestyle']:.2f} "
            f"experience={scores['experience']:.2f} practical={scores['practical']:.2f}"
        )

        return MatchResult(
            animal=build_candidate_summary(animal),
            score=round_score(overall_score),
            compatibility=CompatibilityBreakdown(
                overall=to_percentage(overall_score),
                personality=to_percentage(scores["personality"]),
                lifestyle=to_percentage(scores["lifestyle"]),
                experience=to_percentage(scores["experience"]),
                practical=to_percentage(scores["practical"]),
            ),
            match_reasons=reasons,
            concerns=concerns,
            has_special_needs=has_special_needs(profile),
        )

    @staticmethod
    def get_recommendation_level(score: float) -> str:
        """Get qualitative compatibility label for a score."""
        if score >= 0.8:
            return "excellent"
        elif score >= 0.6:
            return "good"
        elif score >= 0.4:
            return "moderate"
        elif score >= 0.2:
            return "low"
        else:
            return "very low"
