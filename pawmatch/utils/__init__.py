"""Utility modules for PawMatch."""

from .validators import validate_preferences_data, validate_profile_data, validate_matching_params
from .helpers import build_candidate_summary, configure_logging

__all__ = [
    "validate_preferences_data",
    "validate_profile_data",
    "validate_matching_params",
    "build_candidate_summary",
    "configure_logging",
]
