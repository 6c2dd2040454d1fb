"""
Adopter preference data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, model_validator

from .animal import AnimalType, Gender


class ExperienceLevel(str, Enum):
    """Pet ownership experience levels."""
    FIRST_TIME = "first_time"
    SOME_EXPERIENCE = "some_experience"
    EXPERIENCED = "experienced"
    EXPERT = "expert"


class HousingType(str, Enum):
    """Types of housing."""
    APARTMENT = "apartment"
    HOUSE_NO_YARD = "house_no_yard"
    HOUSE_SMALL_YARD = "house_small_yard"
    HOUSE_LARGE_YARD = "house_large_yard"
    FARM = "farm"


class ActivityLevel(str, Enum):
    """Preferred activity level."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class TimeAvailability(str, Enum):
    """Daily time available for the animal."""
    MINIMAL = "minimal"  # < 2 hours/day
    LIMITED = "limited"  # 2-4 hours/day
    MODERATE = "moderate"  # 4-6 hours/day
    EXTENSIVE = "extensive"  # > 6 hours/day


class FamilyComposition(str, Enum):
    """Household composition."""
    SINGLE = "single"
    COUPLE = "couple"
    FAMILY_YOUNG_KIDS = "family_young_kids"  # kids under 5
    FAMILY_OLDER_KIDS = "family_older_kids"  # kids over 5
    ELDERLY = "elderly"


class UserPreferences(BaseModel):
    """Adopter preferences for animal matching."""

    user_id: str = Field(..., description="Owning user identifier")

    # Basic animal preferences
    preferred_animal_types: List[AnimalType] = Field(
        default_factory=list,
        description="Preferred animal types"
    )
    preferred_genders: List[Gender] = Field(
        default_factory=list,
        description="Preferred genders"
    )
    min_age: Optional[float] = Field(default=None, ge=0, le=30, description="Minimum age in years")
    max_age: Optional[float] = Field(default=None, ge=0, le=30, description="Maximum age in years")
    min_size: Optional[float] = Field(default=None, ge=0, description="Minimum weight in kg")
    max_size: Optional[float] = Field(default=None, ge=0, description="Maximum weight in kg")

    # Experience
    experience_level: ExperienceLevel = Field(
        default=ExperienceLevel.FIRST_TIME,
        description="Pet ownership experience level"
    )
    previous_pet_types: List[AnimalType] = Field(
        default_factory=list,
        description="Animal types the adopter has cared for before"
    )

    # Home situation
    housing_type: HousingType = Field(default=HousingType.APARTMENT)
    family_composition: FamilyComposition = Field(default=FamilyComposition.SINGLE)
    has_other_pets: bool = Field(default=False, description="Has other pets")
    other_pets_description: Optional[str] = Field(default=None)

    # Time and activity
    time_availability: TimeAvailability = Field(default=TimeAvailability.LIMITED)
    preferred_activity_level: ActivityLevel = Field(default=ActivityLevel.MODERATE)
    work_schedule: Optional[str] = Field(
        default=None,
        description="Work schedule: morning, afternoon, night, flexible"
    )

    # Specific preferences
    prefers_trained: bool = Field(default=False)
    accepts_special_needs: bool = Field(default=False)
    prefers_vaccinated: bool = Field(default=True)
    prefers_sterilized: bool = Field(default=True)

    # Location
    max_distance_km: int = Field(default=50, ge=1, description="Search radius in km")
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    # Budget and motivation
    monthly_budget: Optional[float] = Field(default=None, ge=0)
    adoption_reason: Optional[str] = Field(default=None)
    lifestyle_description: Optional[str] = Field(default=None)

    # Questionnaire lifecycle
    is_complete: bool = Field(default=False, description="Questionnaire completed")
    completion_date: Optional[datetime] = Field(default=None)

    # Metadata
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode="after")
    def validate_ranges(self):
        """Validate min/max bounds are ordered when both are given."""
        if self.min_age is not None and self.max_age is not None and self.min_age > self.max_age:
            raise ValueError("min_age must not exceed max_age")
        if self.min_size is not None and self.max_size is not None and self.min_size > self.max_size:
            raise ValueError("min_size must not exceed max_size")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "user_12345",
                "preferred_animal_types": ["dog"],
                "experience_level": "some_experience",
                "housing_type": "house_small_yard",
                "family_composition": "couple",
                "time_availability": "moderate",
                "preferred_activity_level": "moderate",
                "is_complete": True
            }
        }
