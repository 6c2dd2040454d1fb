"""Agents for PawMatch."""

from .matching_agent import MatchingAgent

__all__ = ["MatchingAgent"]
