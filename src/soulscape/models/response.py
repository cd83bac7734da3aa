"""
Analysis Response Models

Request and response bodies composed at the boundary from the emotion
analysis, the risk assessment and the coping suggestions.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from soulscape.models.coping import CopingSuggestion
from soulscape.models.emotion import (
    EmotionCategory,
    EmotionExplanation,
    SubtypeMatch,
)


class SupportLevel(str, Enum):
    """Severity attached to a support block"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ELEVATED = "elevated"  # intense sadness/fear without risk language


class SupportResource(BaseModel):
    """Crisis contact"""

    model_config = ConfigDict(frozen=True)

    label: str
    url: str = Field(..., description="Contact URI (tel: or https:)")
    note: str


class SupportBlock(BaseModel):
    """Supportive message, with crisis resources when risk language was found"""

    model_config = ConfigDict(frozen=True)

    message: str
    severity: SupportLevel
    resources: Optional[List[SupportResource]] = None


class AnalyzeRequest(BaseModel):
    """Request body for emotion analysis"""

    text: str = Field(..., description="Journal entry text")


class AnalyzeResponse(BaseModel):
    """Full analysis returned to clients"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    emotion: EmotionCategory
    intensity: float
    confidence: float
    palette: Tuple[str, str, str]
    subtypes: List[SubtypeMatch] = Field(default_factory=list)
    explanation: EmotionExplanation
    summary: str
    note: str
    support: Optional[SupportBlock] = None
    disclaimer: str
    coping: List[CopingSuggestion] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error response body"""

    detail: str
