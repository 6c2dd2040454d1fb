"""Scoring models for PawMatch."""

from .compatibility_model import CompatibilityModel
from .classifiers import get_difficulty_score, has_special_needs

__all__ = ["CompatibilityModel", "get_difficulty_score", "has_special_needs"]
