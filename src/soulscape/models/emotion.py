"""
Emotion Analysis Models

Emotion categories, per-category keyword scores and the analysis result
returned by the emotion scoring service.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from soulscape.models.risk import RiskSeverity


class EmotionCategory(str, Enum):
    """Top-level emotion classification labels"""

    JOY = "joy"
    CALM = "calm"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    MIXED = "mixed"  # fallback when the signal is weak or ambiguous


# Categories that are keyword-scored, in ranking tie-break order
PRIMARY_CATEGORIES: Tuple[EmotionCategory, ...] = (
    EmotionCategory.JOY,
    EmotionCategory.CALM,
    EmotionCategory.SADNESS,
    EmotionCategory.ANGER,
    EmotionCategory.FEAR,
)

# Categories that receive a boost from negative sentiment polarity
NEGATIVE_CATEGORIES = frozenset(
    {EmotionCategory.SADNESS, EmotionCategory.FEAR, EmotionCategory.ANGER}
)


@dataclass(frozen=True)
class ScoreResult:
    """
    Keyword score for one category within a single scoring call.

    Attributes:
        category: Scored category
        hit_count: Number of distinct keywords found in the text
        matched_words: Matched keywords in table order
        score: Hit count after sentiment adjustment
    """

    category: EmotionCategory
    hit_count: int
    matched_words: Tuple[str, ...] = field(default_factory=tuple)
    score: float = 0.0


class KeywordMatch(BaseModel):
    """A matched keyword and the category that owns it"""

    model_config = ConfigDict(frozen=True)

    emotion: EmotionCategory = Field(..., description="Category owning the keyword")
    word: str = Field(..., description="Matched keyword")


class CandidateScore(BaseModel):
    """Adjusted score of a ranked candidate category"""

    model_config = ConfigDict(frozen=True)

    emotion: EmotionCategory = Field(..., description="Candidate category")
    score: float = Field(..., ge=0.0, description="Adjusted keyword score")


class SubtypeMatch(BaseModel):
    """Finer-grained label detected under the classified category"""

    model_config = ConfigDict(frozen=True)

    subtype: str = Field(..., description="Subtype label (e.g. resentful)")
    hits: int = Field(..., ge=1, description="Number of matched subtype phrases")
    confidence: float = Field(..., ge=0.0, le=1.0, description="hits / phrases in list")


class EmotionExplanation(BaseModel):
    """Evidence behind a classification

    Serialized with camelCase keys (sentimentScore, selfHarmMatches, ...).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    sentiment_score: int = Field(..., description="Raw sentiment polarity")
    matched_keywords: List[KeywordMatch] = Field(default_factory=list)
    top_candidates: List[CandidateScore] = Field(default_factory=list, max_length=3)
    self_harm_matches: Optional[List[str]] = Field(
        default=None, description="Matched risk phrases, only set when risk was found"
    )
    self_harm_severity: Optional[RiskSeverity] = Field(
        default=None, description="Risk tier, only set when risk was found"
    )


class EmotionAnalysis(BaseModel):
    """Single emotion analysis result"""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    emotion: EmotionCategory = Field(..., description="Classified emotion")
    intensity: float = Field(..., ge=0.2, le=0.95, description="Signal strength (0.2-0.95)")
    confidence: float = Field(..., ge=0.15, le=0.99, description="Certainty (0.15-0.99)")
    palette: Tuple[str, str, str] = Field(..., description="Three hex colors")
    subtypes: List[SubtypeMatch] = Field(default_factory=list, max_length=2)
    explanation: EmotionExplanation
