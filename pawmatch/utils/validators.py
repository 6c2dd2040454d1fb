"""
Input validation and sanitization utilities.
"""

from typing import Any, Dict, Optional
from pydantic import ValidationError
from loguru import logger

from ..schemas.user_preferences import UserPreferences
from ..schemas.animal import AnimalProfile


def sanitize_string(value: str, max_length: int = 1000) -> str:
    """
    Sanitize string input.

    Args:
        value: Input string
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    if not isinstance(value, str):
        return str(value)

    # Remove null bytes
    value = value.replace("\x00", "")

    # Truncate to max length
    value = value[:max_length]

    return value.strip()


def validate_preferences_data(
    data: Dict[str, Any]
) -> tuple[bool, Optional[str], Optional[UserPreferences]]:
    """
    Validate adopter preference data.

    Args:
        data: Preference data dictionary (must include user_id)

    Returns:
        Tuple of (is_valid, error_message, preferences)
    """
    try:
        data = dict(data)

        for field, max_length in (
            ("other_pets_description", 1000),
            ("adoption_reason", 2000),
            ("lifestyle_description", 2000),
            ("work_schedule", 50),
        ):
            if data.get(field):
                data[field] = sanitize_string(data[field], max_length)

        preferences = UserPreferences(**data)
        return True, None, preferences

    except ValidationError as e:
        logger.warning(f"Preference validation failed: {e}")
        return False, str(e), None


def validate_profile_data(
    data: Dict[str, Any]
) -> tuple[bool, Optional[str], Optional[AnimalProfile]]:
    """
    Validate animal profile data.

    Args:
        data: Profile data dictionary (must include animal_id)

    Returns:
        Tuple of (is_valid, error_message, profile)
    """
    try:
        data = dict(data)

        for field in ("diet_description", "veterinary_needs", "behavioral_notes"):
            if data.get(field):
                data[field] = sanitize_string(data[field], 5000)

        profile = AnimalProfile(**data)
        return True, None, profile

    except ValidationError as e:
        logger.warning(f"Animal profile validation failed: {e}")
        return False, str(e), None


def validate_score(score: float, min_val: float = 0.0, max_val: float = 1.0) -> bool:
    """
    Validate a score is within expected range.

    Args:
        score: Score value
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        True if score is valid
    """
    return isinstance(score, (int, float)) and min_val <= score <= max_val


def validate_matching_params(
    limit: Optional[int] = None,
    min_score: Optional[float] = None,
) -> tuple[bool, Optional[str]]:
    """
    Validate matching request parameters.

    Args:
        limit: Maximum number of matches
        min_score: Minimum compatibility score

    Returns:
        Tuple of (is_valid, error_message)
    """
    if limit is not None:
        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1 or limit > 100:
            return False, "Limit must be between 1 and 100"

    if min_score is not None and not validate_score(min_score):
        return False, "Minimum score must be between 0 and 1"

    return True, None
