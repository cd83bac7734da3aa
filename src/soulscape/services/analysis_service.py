"""
Analysis Service

Composes emotion scoring, risk detection and coping selection into the
response returned to clients.
"""

import logging
from typing import Optional

from soulscape.config.tables import EmotionTables, default_tables
from soulscape.models.emotion import EmotionAnalysis, EmotionCategory
from soulscape.models.response import AnalyzeResponse, SupportBlock, SupportLevel
from soulscape.models.risk import RiskAssessment, RiskSeverity
from soulscape.services.coping_service import HIGH_INTENSITY_THRESHOLD, CopingStrategyService
from soulscape.services.emotion_service import EmotionScoringService
from soulscape.services.risk_service import RiskDetectionService
from soulscape.services.sentiment_service import PolaritySource

logger = logging.getLogger(__name__)

NOTE = "This is an automated analysis and not a substitute for professional mental health care."
DISCLAIMER = "Soulscape isn’t a replacement for support—just a place to pause."

HIGH_RISK_MESSAGE = (
    "We detected language that may indicate risk of self-harm or suicidal thinking. "
    "If you are in immediate danger, contacting local emergency services or a crisis line can help."
)
DISTRESS_MESSAGE = (
    "We detected language that may indicate significant distress. "
    "Reaching out to a trusted person or a crisis line may help."
)
ELEVATED_MESSAGE = (
    "You appear to be experiencing intense feelings. "
    "Reaching out to someone you trust or a mental health professional may help."
)

# Categories that get a gentle support prompt at high intensity
ELEVATED_CATEGORIES = frozenset({EmotionCategory.SADNESS, EmotionCategory.FEAR})


def build_summary(analysis: EmotionAnalysis) -> str:
    """Human-readable one-line summary of an analysis."""
    return (
        f"Detected {analysis.emotion.value} "
        f"(confidence {round(analysis.confidence * 100)}%) "
        f"with intensity {analysis.intensity:.2f}"
    )


class AnalysisService:
    """
    Journal entry analysis service

    Runs the emotion scorer and the risk detector over the same text and
    merges their results with support prompts and coping suggestions.
    """

    def __init__(
        self,
        tables: Optional[EmotionTables] = None,
        polarity_source: Optional[PolaritySource] = None,
    ):
        """
        Initialize analysis service

        Args:
            tables: Emotion tables shared by all components
            polarity_source: Sentiment polarity callable for the scorer
        """
        self.tables = tables or default_tables()
        self.scorer = EmotionScoringService(self.tables, polarity_source)
        self.risk_detector = RiskDetectionService(self.tables)
        self.coping = CopingStrategyService(self.tables)

    def analyze(self, text: str) -> AnalyzeResponse:
        """
        Analyze a journal entry.

        Args:
            text: Journal entry text

        Returns:
            AnalyzeResponse with emotion, support prompt and coping suggestions

        Raises:
            ValueError: If text is empty or whitespace only
        """
        if not isinstance(text, str) or not text.strip():
            raise ValueError("Text is required")

        analysis = self.scorer.score(text)
        risk = self.risk_detector.detect_risk(text)

        explanation = analysis.explanation
        if risk.found:
            explanation = explanation.model_copy(
                update={"self_harm_matches": list(risk.matches), "self_harm_severity": risk.severity}
            )

        support = self.build_support(analysis, risk)
        if support is not None:
            logger.info(f"Support block attached (severity={support.severity.value})")

        return AnalyzeResponse(
            emotion=analysis.emotion,
            intensity=analysis.intensity,
            confidence=analysis.confidence,
            palette=analysis.palette,
            subtypes=analysis.subtypes,
            explanation=explanation,
            summary=build_summary(analysis),
            note=NOTE,
            support=support,
            disclaimer=DISCLAIMER,
            coping=self.coping.select_coping(analysis.emotion, analysis.intensity),
        )

    def build_support(
        self, analysis: EmotionAnalysis, risk: RiskAssessment
    ) -> Optional[SupportBlock]:
        """
        Decide which support block, if any, accompanies an analysis.

        Args:
            analysis: Emotion analysis
            risk: Risk assessment for the same text

        Returns:
            SupportBlock with crisis resources when risk language was found,
            a gentle prompt for intense sadness or fear, otherwise None
        """
        if risk.found:
            message = HIGH_RISK_MESSAGE if risk.severity == RiskSeverity.HIGH else DISTRESS_MESSAGE
            return SupportBlock(
                message=message,
                severity=SupportLevel(risk.severity.value),
                resources=list(self.tables.support_resources),
            )

        if (
            analysis.emotion in ELEVATED_CATEGORIES
            and analysis.intensity >= HIGH_INTENSITY_THRESHOLD
        ):
            return SupportBlock(message=ELEVATED_MESSAGE, severity=SupportLevel.ELEVATED)

        return None
