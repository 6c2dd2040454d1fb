"""
Unit tests for the difficulty and special-needs classifiers.
"""

import pytest

from pawmatch.models.classifiers import get_difficulty_score, has_special_needs
from pawmatch.schemas.animal import AnimalProfile, CareLevel, TrainingLevel


PROBLEM_FLAGS = [
    "destructive_behavior",
    "separation_anxiety",
    "escape_tendency",
    "noise_sensitivity",
]


class TestDifficultyScore:
    """Tests for get_difficulty_score."""

    def test_no_profile_is_neutral(self):
        assert get_difficulty_score(None) == 0.5

    def test_baseline(self):
        assert get_difficulty_score(AnimalProfile(animal_id="a1")) == pytest.approx(0.3)

    @pytest.mark.parametrize("flag,delta", [
        ("destructive_behavior", 0.2),
        ("separation_anxiety", 0.2),
        ("escape_tendency", 0.15),
        ("noise_sensitivity", 0.1),
    ])
    def test_problem_behaviors_raise_difficulty(self, flag, delta):
        profile = AnimalProfile(animal_id="a1", **{flag: True})
        assert get_difficulty_score(profile) == pytest.approx(0.3 + delta)

    @pytest.mark.parametrize("care,expected", [
        (CareLevel.LOW, 0.3),
        (CareLevel.MODERATE, 0.3),
        (CareLevel.HIGH, 0.5),
        (CareLevel.SPECIAL_NEEDS, 0.7),
    ])
    def test_care_level(self, care, expected):
        profile = AnimalProfile(animal_id="a1", care_level=care)
        assert get_difficulty_score(profile) == pytest.approx(expected)

    def test_training_lowers_difficulty(self):
        advanced = AnimalProfile(animal_id="a1", training_level=TrainingLevel.ADVANCED)
        professional = AnimalProfile(animal_id="a1", training_level=TrainingLevel.PROFESSIONAL)
        house_trained = AnimalProfile(animal_id="a1", house_trained=True)

        assert get_difficulty_score(advanced) == pytest.approx(0.2)
        assert get_difficulty_score(professional) == pytest.approx(0.1)
        assert get_difficulty_score(house_trained) == pytest.approx(0.2)

    def test_floor(self):
        profile = AnimalProfile(
            animal_id="a1",
            training_level=TrainingLevel.PROFESSIONAL,
            house_trained=True,
        )
        assert get_difficulty_score(profile) == 0.1

    def test_ceiling(self):
        profile = AnimalProfile(
            animal_id="a1",
            care_level=CareLevel.SPECIAL_NEEDS,
            **{flag: True for flag in PROBLEM_FLAGS}
        )
        assert get_difficulty_score(profile) == 1.0

    @pytest.mark.parametrize("training", list(TrainingLevel))
    @pytest.mark.parametrize("care", list(CareLevel))
    def test_adding_problem_flags_never_decreases(self, training, care):
        base = AnimalProfile(animal_id="a1", training_level=training, care_level=care)
        previous = get_difficulty_score(base)

        flags = {}
        for flag in PROBLEM_FLAGS:
            flags[flag] = True
            profile = base.model_copy(update=flags)
            current = get_difficulty_score(profile)
            assert current >= previous
            assert 0.1 <= current <= 1.0
            previous = current

    @pytest.mark.parametrize("care", list(CareLevel))
    @pytest.mark.parametrize("flag", PROBLEM_FLAGS)
    def test_professional_training_never_increases(self, care, flag):
        untrained = AnimalProfile(animal_id="a1", care_level=care, **{flag: True})
        professional = untrained.model_copy(update={"training_level": TrainingLevel.PROFESSIONAL})

        assert get_difficulty_score(professional) <= get_difficulty_score(untrained)


class TestHasSpecialNeeds:
    """Tests for has_special_needs."""

    def test_no_profile(self):
        assert has_special_needs(None) is False

    def test_default_profile(self):
        assert not has_special_needs(AnimalProfile(animal_id="a1"))

    @pytest.mark.parametrize("overrides", [
        {"care_level": CareLevel.SPECIAL_NEEDS},
        {"special_diet": True},
        {"chronic_conditions": ["diabetes"]},
        {"medications": ["insulin"]},
        {"destructive_behavior": True},
        {"separation_anxiety": True},
    ])
    def test_triggers(self, overrides):
        assert has_special_needs(AnimalProfile(animal_id="a1", **overrides))

    @pytest.mark.parametrize("overrides", [
        {"care_level": CareLevel.HIGH},
        {"noise_sensitivity": True},
        {"escape_tendency": True},
        {"allergies": ["chicken"]},
    ])
    def test_non_triggers(self, overrides):
        assert not has_special_needs(AnimalProfile(animal_id="a1", **overrides))
