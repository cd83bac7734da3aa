"""
Risk Detection Service

Scans text for explicit self-harm or suicidal phrases and reports the
highest matched severity tier.
"""

import logging
from typing import List, Optional

from soulscape.config.tables import EmotionTables, default_tables, normalize_text
from soulscape.models.risk import RiskAssessment, RiskSeverity

logger = logging.getLogger(__name__)

# Tier order used both for scanning and for picking the reported severity
SEVERITY_ORDER = (RiskSeverity.HIGH, RiskSeverity.MEDIUM, RiskSeverity.LOW)


class RiskDetectionService:
    """
    Self-harm phrase detection service

    Runs independently of emotion scoring: explicit crisis language can
    appear in text that scores as mixed or low intensity.
    """

    def __init__(self, tables: Optional[EmotionTables] = None):
        """
        Initialize risk detection service

        Args:
            tables: Emotion tables holding the risk phrase tiers
        """
        self.tables = tables or default_tables()

    def detect_risk(self, text: Optional[str]) -> RiskAssessment:
        """
        Detect self-harm indicators in text.

        Args:
            text: Text to scan; None or empty never fails

        Returns:
            RiskAssessment with severity and matched phrases in scan order
        """
        normalized = normalize_text(text)

        matches: List[str] = []
        severity: Optional[RiskSeverity] = None

        for tier in SEVERITY_ORDER:
            for phrase in self.tables.risk_phrases.get(tier, ()):
                if phrase in normalized and phrase not in matches:
                    matches.append(phrase)
                    if severity is None:
                        severity = tier

        if matches:
            # Never log the journal text itself
            logger.warning(f"Risk language detected: severity={severity.value}, matches={len(matches)}")

        return RiskAssessment(found=bool(matches), severity=severity, matches=matches)
