"""
Soulscape Services
"""

from soulscape.services.analysis_service import AnalysisService
from soulscape.services.coping_service import CopingStrategyService, classify_intensity
from soulscape.services.emotion_service import EmotionScoringService
from soulscape.services.risk_service import RiskDetectionService, normalize_text
from soulscape.services.sentiment_service import PolaritySource, VaderPolaritySource

__all__ = [
    "AnalysisService",
    "CopingStrategyService",
    "classify_intensity",
    "EmotionScoringService",
    "RiskDetectionService",
    "normalize_text",
    "PolaritySource",
    "VaderPolaritySource",
]
