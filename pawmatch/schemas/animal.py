"""
Animal and animal profile data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field


class AnimalType(str, Enum):
    """Types of animals."""
    DOG = "dog"
    CAT = "cat"
    RABBIT = "rabbit"
    BIRD = "bird"
    OTHER = "other"


class Gender(str, Enum):
    """Animal gender."""
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class AnimalStatus(str, Enum):
    """Animal availability status."""
    AVAILABLE = "available"
    NOT_AVAILABLE = "not_available"
    ADOPTED = "adopted"


class EnergyLevel(str, Enum):
    """Energy level, ordered from calmest to most active."""
    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class SocialLevel(str, Enum):
    """Sociability level."""
    SHY = "shy"
    RESERVED = "reserved"
    FRIENDLY = "friendly"
    VERY_SOCIAL = "very_social"
    DOMINANT = "dominant"


class TrainingLevel(str, Enum):
    """Training level, ordered from none to professional."""
    UNTRAINED = "untrained"
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFESSIONAL = "professional"


class CareLevel(str, Enum):
    """Level of care an animal requires."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SPECIAL_NEEDS = "special_needs"


class Animal(BaseModel):
    """Animal listed on the platform (a matching candidate when available)."""

    animal_id: str = Field(..., description="Unique animal identifier")
    name: str = Field(..., min_length=1, description="Animal name")
    type: AnimalType = Field(..., description="Animal type")
    breed: Optional[str] = Field(default=None, description="Breed")
    age: Optional[float] = Field(default=None, ge=0, description="Age in years")
    gender: Gender = Field(default=Gender.UNKNOWN, description="Gender")
    description: str = Field(default="", description="Detailed description")
    images: List[str] = Field(default_factory=list, description="Image references")
    weight: Optional[float] = Field(
        default=None,
        gt=0,
        le=500,
        description="Weight in kg"
    )

    # Health
    vaccinated: bool = Field(default=False)
    sterilized: bool = Field(default=False)
    health_details: Optional[str] = Field(default=None)

    # Availability
    status: AnimalStatus = Field(
        default=AnimalStatus.AVAILABLE,
        description="Availability status"
    )
    available_for_adoption: bool = Field(default=True)
    owner_id: Optional[str] = Field(default=None, description="Owner or NGO identifier")

    # Metadata
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def can_be_adopted(self) -> bool:
        """Check if the animal is open for adoption."""
        return self.available_for_adoption and self.status == AnimalStatus.AVAILABLE

    class Config:
        json_schema_extra = {
            "example": {
                "animal_id": "animal_12345",
                "name": "Luna",
                "type": "dog",
                "breed": "Mixed",
                "age": 3,
                "gender": "female",
                "weight": 15,
                "vaccinated": True,
                "sterilized": True
            }
        }


class AnimalProfile(BaseModel):
    """
    Extended behavioral and health profile of an animal.

    good_with_* fields are tri-state: None means unknown and is never read
    as False.
    """

    animal_id: str = Field(..., description="Animal this profile belongs to")

    # Personality and behavior
    energy_level: EnergyLevel = Field(default=EnergyLevel.MODERATE)
    social_level: SocialLevel = Field(default=SocialLevel.FRIENDLY)
    good_with_kids: Optional[bool] = Field(default=None)
    good_with_other_pets: Optional[bool] = Field(default=None)
    good_with_strangers: Optional[bool] = Field(default=None)

    # Training
    training_level: TrainingLevel = Field(default=TrainingLevel.UNTRAINED)
    house_trained: bool = Field(default=False)
    leash_trained: Optional[bool] = Field(default=None)
    known_commands: List[str] = Field(default_factory=list)

    # Care
    care_level: CareLevel = Field(default=CareLevel.MODERATE)
    exercise_needs: str = Field(
        default="moderate",
        description="Exercise needs: low, moderate, high, very_high"
    )
    grooming_needs: str = Field(
        default="moderate",
        description="Grooming needs: low, moderate, high"
    )
    special_diet: bool = Field(default=False)
    diet_description: Optional[str] = Field(default=None)

    # Health
    chronic_conditions: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    veterinary_needs: Optional[str] = Field(default=None)

    # Problem behaviors
    destructive_behavior: bool = Field(default=False)
    separation_anxiety: bool = Field(default=False)
    noise_sensitivity: bool = Field(default=False)
    escape_tendency: bool = Field(default=False)

    # Environment fit
    apartment_suitable: bool = Field(default=True)
    beginner_friendly: bool = Field(default=True)
    family_friendly: bool = Field(default=True)

    behavioral_notes: Optional[str] = Field(default=None)

    # Metadata
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
