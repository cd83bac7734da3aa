"""
Sentiment Polarity Source

Integer polarity for a text as the sum of per-word valences from the VADER
lexicon. Positive values mean positive sentiment.
"""

import logging
import re
from typing import Optional, Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"[a-z']+")


class PolaritySource(Protocol):
    """Anything that maps text to an integer sentiment polarity"""

    def __call__(self, text: str) -> int: ...


class VaderPolaritySource:
    """
    Word-valence polarity backed by the VADER lexicon.

    The analyzer (and its lexicon) is loaded on first use.
    """

    def __init__(self, analyzer: Optional[SentimentIntensityAnalyzer] = None):
        """
        Initialize polarity source

        Args:
            analyzer: Preloaded VADER analyzer (optional)
        """
        self._analyzer = analyzer

    @property
    def analyzer(self) -> SentimentIntensityAnalyzer:
        """Lazily created VADER analyzer."""
        if self._analyzer is None:
            self._analyzer = SentimentIntensityAnalyzer()
            logger.info(f"VADER lexicon loaded ({len(self._analyzer.lexicon)} entries)")
        return self._analyzer

    def __call__(self, text: str) -> int:
        """
        Compute polarity.

        Args:
            text: Text to score

        Returns:
            Rounded sum of lexicon valences (0 for empty text)
        """
        if not text or not text.strip():
            return 0

        lexicon = self.analyzer.lexicon
        total = sum(float(lexicon.get(token, 0.0)) for token in _TOKEN_RE.findall(text.lower()))
        return int(round(total))
