"""
Emotion Scoring Service

Keyword scoring blended with sentiment polarity. Produces the classified
emotion, intensity, confidence, palette and ranked subtypes for a text.
"""

import logging
from typing import Dict, List, Optional, Union

from soulscape.config.tables import EmotionTables, default_tables
from soulscape.models.emotion import (
    NEGATIVE_CATEGORIES,
    PRIMARY_CATEGORIES,
    CandidateScore,
    EmotionAnalysis,
    EmotionCategory,
    EmotionExplanation,
    KeywordMatch,
    ScoreResult,
    SubtypeMatch,
)
from soulscape.services.sentiment_service import PolaritySource, VaderPolaritySource

logger = logging.getLogger(__name__)

# Minimum lead over the runner-up before a category is reported
MIXED_GAP_THRESHOLD = 0.75

MIN_INTENSITY = 0.2
MAX_INTENSITY = 0.95
MIN_CONFIDENCE = 0.15
MAX_CONFIDENCE = 0.99

MAX_SUBTYPES = 2
TOP_CANDIDATES = 3


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def count_phrase_hits(lower_text: str, phrases) -> List[str]:
    """
    Phrases that occur anywhere in the lowercased text.

    Plain substring test: "happy" also hits inside "unhappy".
    """
    return [phrase for phrase in phrases if phrase in lower_text]


class EmotionScoringService:
    """
    Service for classifying the dominant emotion of a journal entry.

    Scoring steps:
    1. Count distinct keyword hits per category
    2. Boost joy for positive polarity, sadness/fear/anger for negative
    3. Rank categories; report mixed when the lead is too small
    4. Derive confidence and intensity from the ranked scores
    """

    def __init__(
        self,
        tables: Optional[EmotionTables] = None,
        polarity_source: Optional[PolaritySource] = None,
    ):
        """
        Initialize scoring service

        Args:
            tables: Emotion tables (built-in tables if not given)
            polarity_source: Text -> integer polarity callable (VADER if not given)
        """
        self.tables = tables or default_tables()
        self.polarity_source = polarity_source or VaderPolaritySource()

    def score(self, text: Optional[str]) -> EmotionAnalysis:
        """
        Analyze emotion from text.

        Args:
            text: Journal entry; empty or whitespace-only text is allowed

        Returns:
            EmotionAnalysis for the text
        """
        text = text or ""
        lower = text.lower()

        polarity = self.polarity_source(text) if text.strip() else 0

        results = self._score_categories(lower, polarity)
        # sorted() is stable, so ties keep table declaration order
        ranked = sorted(results, key=lambda r: r.score, reverse=True)

        top = ranked[0]
        next_score = ranked[1].score if len(ranked) > 1 else 0.0
        gap = top.score - next_score

        is_mixed = top.score == 0 or abs(gap) < MIXED_GAP_THRESHOLD
        emotion = EmotionCategory.MIXED if is_mixed else top.category

        total_signal = sum(r.score for r in results)
        confidence = clamp(
            MIN_CONFIDENCE + min(0.85, gap / (1 + total_signal) + min(0.6, total_signal / 6)),
            MIN_CONFIDENCE,
            MAX_CONFIDENCE,
        )

        raw_intensity = min(1.0, top.score / 4 + min(1.0, abs(polarity) / 6))
        intensity = clamp(MIN_INTENSITY + raw_intensity * 0.75, MIN_INTENSITY, MAX_INTENSITY)

        subtypes = [] if is_mixed else self.detect_subtypes(emotion, text)

        explanation = EmotionExplanation(
            sentiment_score=polarity,
            matched_keywords=[
                KeywordMatch(emotion=r.category, word=word)
                for r in ranked
                for word in r.matched_words
            ],
            top_candidates=[
                CandidateScore(emotion=r.category, score=r.score) for r in ranked[:TOP_CANDIDATES]
            ],
        )

        logger.debug(
            f"Scored text: emotion={emotion.value}, top={top.category.value}:{top.score}, "
            f"gap={gap:.2f}, polarity={polarity}"
        )

        return EmotionAnalysis(
            emotion=emotion,
            intensity=intensity,
            confidence=confidence,
            palette=self.tables.palette_for(emotion),
            subtypes=subtypes,
            explanation=explanation,
        )

    def detect_subtypes(
        self, category: Union[EmotionCategory, str], text: Optional[str]
    ) -> List[SubtypeMatch]:
        """
        Detect finer-grained subtypes within a category.

        Args:
            category: Category or subtype namespace (e.g. anger, powerful)
            text: Text to scan

        Returns:
            At most two subtypes with hits, ordered by hit count.
            Ties keep the subtype table's declaration order.
        """
        key = category.value if isinstance(category, EmotionCategory) else category
        subtype_map = self.tables.subtypes.get(key, {})
        lower = (text or "").lower()

        detected = []
        for subtype, phrases in subtype_map.items():
            hits = len(count_phrase_hits(lower, phrases))
            if hits > 0:
                confidence = min(1.0, hits / len(phrases)) if phrases else 0.0
                detected.append(SubtypeMatch(subtype=subtype, hits=hits, confidence=confidence))

        detected.sort(key=lambda s: s.hits, reverse=True)
        return detected[:MAX_SUBTYPES]

    def score_categories(self, text: Optional[str], polarity: int = 0) -> Dict[str, ScoreResult]:
        """
        Adjusted keyword scores per primary category.

        Args:
            text: Text to score
            polarity: Sentiment polarity to blend in

        Returns:
            Mapping of category value to ScoreResult, in table order
        """
        results = self._score_categories((text or "").lower(), polarity)
        return {r.category.value: r for r in results}

    def _score_categories(self, lower_text: str, polarity: int) -> List[ScoreResult]:
        """Keyword hits plus polarity boost for every primary category."""
        positive_boost = min(2.0, polarity / 2) if polarity > 1 else 0.0
        negative_boost = min(2.0, abs(polarity) / 2) if polarity < -1 else 0.0

        results = []
        for category in PRIMARY_CATEGORIES:
            matched = count_phrase_hits(lower_text, self.tables.keywords.get(category.value, ()))
            score = float(len(matched))
            if category == EmotionCategory.JOY:
                score += positive_boost
            elif category in NEGATIVE_CATEGORIES:
                score += negative_boost

            results.append(
                ScoreResult(
                    category=category,
                    hit_count=len(matched),
                    matched_words=tuple(matched),
                    score=score,
                )
            )

        return results
