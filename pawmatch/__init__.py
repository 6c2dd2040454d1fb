"""
PawMatch - Rule-Based Pet Adoption Matching

This package contains the compatibility model that scores adopters against
adoptable animals and the matching agent that ranks candidates for an adopter.
"""

__version__ = "1.0.0"

from .agents.matching_agent import MatchingAgent
from .models.compatibility_model import CompatibilityModel
from .tools import MatchingTools

__all__ = ["MatchingAgent", "CompatibilityModel", "MatchingTools"]
