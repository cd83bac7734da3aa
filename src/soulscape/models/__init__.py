"""
Soulscape Data Models
"""

from soulscape.models.coping import CopingSuggestion, IntensityTier
from soulscape.models.emotion import (
    PRIMARY_CATEGORIES,
    CandidateScore,
    EmotionAnalysis,
    EmotionCategory,
    EmotionExplanation,
    KeywordMatch,
    ScoreResult,
    SubtypeMatch,
)
from soulscape.models.response import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    SupportBlock,
    SupportLevel,
    SupportResource,
)
from soulscape.models.risk import RiskAssessment, RiskSeverity

__all__ = [
    # Emotion
    "PRIMARY_CATEGORIES",
    "CandidateScore",
    "EmotionAnalysis",
    "EmotionCategory",
    "EmotionExplanation",
    "KeywordMatch",
    "ScoreResult",
    "SubtypeMatch",
    # Risk
    "RiskAssessment",
    "RiskSeverity",
    # Coping
    "CopingSuggestion",
    "IntensityTier",
    # Response
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ErrorResponse",
    "SupportBlock",
    "SupportLevel",
    "SupportResource",
]
