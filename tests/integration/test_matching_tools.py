"""
Integration tests for MatchingTools payloads.
"""

import pytest

from pawmatch.agents.matching_agent import MatchingAgent
from pawmatch.repositories import (
    InMemoryAnimalProfileRepository,
    InMemoryAnimalRepository,
    InMemoryPreferencesRepository,
)
from pawmatch.schemas.animal import AnimalType
from pawmatch.tools import ONBOARDING_MESSAGE, MatchingTools


@pytest.fixture
def matching_tools(preferences, make_animal, make_profile):
    """Tools over a small in-memory catalogue."""
    agent = MatchingAgent(
        InMemoryPreferencesRepository([preferences]),
        InMemoryAnimalRepository([
            make_animal("luna"),
            make_animal("whiskers", type=AnimalType.CAT),
            make_animal("rex", vaccinated=False),
        ]),
        InMemoryAnimalProfileRepository([make_profile("luna")]),
    )
    return MatchingTools(agent)


class TestRecommendationTools:
    """Tests for recommendation and compatibility payloads."""

    @pytest.mark.asyncio
    async def test_get_recommendations(self, matching_tools):
        result = await matching_tools.get_recommendations("adopter_001")

        assert result["needs_onboarding"] is False
        assert result["total_matches"] == len(result["recommendations"]) == 3

        top = result["recommendations"][0]
        assert top["animal"]["id"] == "luna"
        assert top["animal"]["type"] == "dog"
        assert top["score"] == pytest.approx(0.91)
        assert set(top["compatibility"]) == {
            "overall", "personality", "lifestyle", "experience", "practical"
        }
        assert isinstance(top["matched_at"], str)

    @pytest.mark.asyncio
    async def test_get_recommendations_with_limit(self, matching_tools):
        result = await matching_tools.get_recommendations("adopter_001", limit=1)

        assert result["total_matches"] == 1

    @pytest.mark.asyncio
    async def test_min_score_zero_is_respected(self, matching_tools):
        high = await matching_tools.get_recommendations("adopter_001", min_score=0.9)
        zero = await matching_tools.get_recommendations("adopter_001", min_score=0)

        assert high["total_matches"] == 1
        assert zero["total_matches"] == 3

    @pytest.mark.asyncio
    async def test_onboarding_payload(self, matching_tools):
        result = await matching_tools.get_recommendations("new_adopter")

        assert result == {
            "needs_onboarding": True,
            "message": ONBOARDING_MESSAGE,
            "recommendations": [],
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": 500}, {"min_score": 1.5}])
    async def test_invalid_params(self, matching_tools, params):
        result = await matching_tools.get_recommendations("adopter_001", **params)

        assert result["success"] is False
        assert "error" in result

    @pytest.mark.asyncio
    async def test_get_compatibility(self, matching_tools):
        result = await matching_tools.get_compatibility("adopter_001", "luna")

        assert result["found"] is True
        assert result["recommendation"] == "excellent"
        assert result["compatibility"]["overall"] == 91
        assert "Vaccinations are up to date" in result["match_reasons"]

    @pytest.mark.asyncio
    async def test_get_compatibility_unknown_animal(self, matching_tools):
        result = await matching_tools.get_compatibility("adopter_001", "ghost")

        assert result["found"] is False
        assert "ghost" in result["message"]

    @pytest.mark.asyncio
    async def test_get_compatibility_needs_onboarding(self, matching_tools):
        result = await matching_tools.get_compatibility("new_adopter", "luna")

        assert result["needs_onboarding"] is True


class TestPreferenceTools:
    """Tests for preference and profile tools."""

    @pytest.mark.asyncio
    async def test_save_preferences_new_then_existing_user(self, matching_tools):
        status = await matching_tools.get_preferences_status("new_adopter")
        assert status["needs_onboarding"] is True

        first = await matching_tools.save_preferences(
            "new_adopter", {"preferred_animal_types": ["cat"], "housing_type": "apartment"}
        )
        second = await matching_tools.save_preferences("new_adopter", {"preferred_activity_level": "high"})

        assert first["success"] is True
        assert first["is_new_user"] is True
        assert first["preferences"]["is_complete"] is True
        assert second["is_new_user"] is False
        assert second["preferences"]["housing_type"] == "apartment"

        status = await matching_tools.get_preferences_status("new_adopter")
        assert status == {
            "has_preferences": True,
            "has_completed_preferences": True,
            "needs_onboarding": False,
        }

    @pytest.mark.asyncio
    async def test_save_preferences_recommendations_follow(self, matching_tools):
        await matching_tools.save_preferences("new_adopter", {"preferred_animal_types": ["cat"]})

        result = await matching_tools.get_recommendations("new_adopter")

        assert result["needs_onboarding"] is False
        assert result["total_matches"] > 0

    @pytest.mark.asyncio
    async def test_save_preferences_invalid_range(self, matching_tools):
        result = await matching_tools.save_preferences("new_adopter", {"min_age": 8, "max_age": 2})

        assert result["success"] is False
        assert "error" in result

    @pytest.mark.asyncio
    async def test_save_preferences_merge_breaks_range(self, matching_tools):
        await matching_tools.save_preferences("new_adopter", {"max_age": 2})

        result = await matching_tools.save_preferences("new_adopter", {"min_age": 8})

        assert result["success"] is False

    @pytest.mark.asyncio
    async def test_save_animal_profile(self, matching_tools):
        result = await matching_tools.save_animal_profile("rex", {"energy_level": "high"})

        assert result["success"] is True
        assert result["profile"]["energy_level"] == "high"
        assert result["profile"]["animal_id"] == "rex"

    @pytest.mark.asyncio
    async def test_save_animal_profile_unknown_animal(self, matching_tools):
        result = await matching_tools.save_animal_profile("ghost", {"energy_level": "high"})

        assert result["success"] is False
        assert "ghost" in result["error"]

    @pytest.mark.asyncio
    async def test_save_animal_profile_invalid(self, matching_tools):
        result = await matching_tools.save_animal_profile("rex", {"care_level": "extreme"})

        assert result["success"] is False


class TestSettingsDefaults:
    """Tests for defaults taken from the current settings."""

    @pytest.mark.asyncio
    async def test_default_limit_follows_reloaded_settings(self, matching_tools, override_settings):
        override_settings(MATCHING_DEFAULT_LIMIT="1")

        result = await matching_tools.get_recommendations("adopter_001")

        assert result["total_matches"] == 1

    @pytest.mark.asyncio
    async def test_include_special_needs_defaults_to_settings(self, matching_tools, override_settings):
        await matching_tools.save_animal_profile("rex", {"care_level": "special_needs"})

        excluded = await matching_tools.get_recommendations("adopter_001")
        override_settings(MATCHING_INCLUDE_SPECIAL_NEEDS="true")
        included = await matching_tools.get_recommendations("adopter_001")
        explicit = await matching_tools.get_recommendations("adopter_001", include_special_needs=False)

        assert "rex" not in [match["animal"]["id"] for match in excluded["recommendations"]]
        rex = [match for match in included["recommendations"] if match["animal"]["id"] == "rex"]
        assert len(rex) == 1
        assert rex[0]["has_special_needs"] is True
        assert explicit["total_matches"] == excluded["total_matches"]
