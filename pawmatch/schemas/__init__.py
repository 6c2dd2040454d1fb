"""Data schemas and models for PawMatch."""

from .user_preferences import UserPreferences
from .animal import Animal, AnimalProfile
from .match import (
    CandidateSummary,
    CompatibilityBreakdown,
    MatchResult,
    MatchingCriteria,
    CompatibilityAnalysis,
    PreferencesStatus,
)

__all__ = [
    "UserPreferences",
    "Animal",
    "AnimalProfile",
    "CandidateSummary",
    "CompatibilityBreakdown",
    "MatchResult",
    "MatchingCriteria",
    "CompatibilityAnalysis",
    "PreferencesStatus",
]
