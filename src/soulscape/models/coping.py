"""
Coping Suggestion Models
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IntensityTier(str, Enum):
    """Intensity bucket used to tailor coping suggestions"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CopingSuggestion(BaseModel):
    """Non-clinical coping suggestion"""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    minutes: int = Field(..., gt=0, description="Suggested duration in minutes")
