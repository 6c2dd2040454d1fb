"""
Match result data models.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from .animal import AnimalType, Gender


class CandidateSummary(BaseModel):
    """Read-only snapshot of the candidate fields shown next to a match."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: AnimalType
    breed: Optional[str] = None
    age: Optional[float] = None
    gender: Gender
    description: str = ""
    images: List[str] = Field(default_factory=list)
    weight: Optional[float] = None
    vaccinated: bool = False
    sterilized: bool = False
    health_details: Optional[str] = None


class CompatibilityBreakdown(BaseModel):
    """Compatibility scores as integer percentages."""

    overall: int = Field(..., ge=0, le=100)
    personality: int = Field(..., ge=0, le=100)
    lifestyle: int = Field(..., ge=0, le=100)
    experience: int = Field(..., ge=0, le=100)
    practical: int = Field(..., ge=0, le=100)


class MatchResult(BaseModel):
    """Candidate match with compatibility score and explanation."""

    animal: CandidateSummary = Field(..., description="Candidate snapshot")

    score: float = Field(..., ge=0, le=1, description="Overall compatibility score")
    compatibility: CompatibilityBreakdown

    match_reasons: List[str] = Field(
        default_factory=list,
        description="Reasons this candidate fits the adopter"
    )
    concerns: List[str] = Field(
        default_factory=list,
        description="Potential concerns or considerations"
    )
    has_special_needs: bool = Field(default=False)

    matched_at: datetime = Field(default_factory=datetime.utcnow)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "animal": {"id": "animal_12345", "name": "Luna", "type": "dog", "gender": "female"},
                "score": 0.82,
                "compatibility": {
                    "overall": 82,
                    "personality": 80,
                    "lifestyle": 86,
                    "experience": 90,
                    "practical": 70
                },
                "match_reasons": ["Vaccinations are up to date"],
                "concerns": []
            }
        }
    )


class MatchingCriteria(BaseModel):
    """Parameters for a matching request."""

    user_id: str = Field(..., description="Adopter identifier")
    limit: int = Field(default=20, ge=1, description="Maximum number of matches")
    min_score: float = Field(default=0.3, ge=0, le=1, description="Minimum score to keep")
    include_special_needs: bool = Field(default=False)


class CompatibilityAnalysis(BaseModel):
    """Detailed compatibility of one adopter with one candidate."""

    match: MatchResult
    recommendation: str = Field(..., description="Qualitative compatibility label")


class PreferencesStatus(BaseModel):
    """Whether an adopter still needs to complete the questionnaire."""

    has_preferences: bool
    has_completed_preferences: bool
    needs_onboarding: bool
