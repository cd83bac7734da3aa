"""
Coping Strategy Service

Selects non-clinical coping suggestions for an emotion and intensity.
"""

import logging
from typing import List, Optional, Union

from soulscape.config.tables import MIXED, EmotionTables, default_tables
from soulscape.models.coping import CopingSuggestion, IntensityTier
from soulscape.models.emotion import EmotionCategory

logger = logging.getLogger(__name__)

HIGH_INTENSITY_THRESHOLD = 0.7
MEDIUM_INTENSITY_THRESHOLD = 0.45

HIGH_TIER_LIMIT = 4
DEFAULT_LIMIT = 3


def classify_intensity(intensity: float) -> IntensityTier:
    """Bucket an intensity value into low / medium / high."""
    if intensity >= HIGH_INTENSITY_THRESHOLD:
        return IntensityTier.HIGH
    if intensity >= MEDIUM_INTENSITY_THRESHOLD:
        return IntensityTier.MEDIUM
    return IntensityTier.LOW


class CopingStrategyService:
    """Coping suggestion selector backed by the static coping tables"""

    def __init__(self, tables: Optional[EmotionTables] = None):
        self.tables = tables or default_tables()

    def select_coping(
        self, category: Union[EmotionCategory, str], intensity: float
    ) -> List[CopingSuggestion]:
        """
        Select coping suggestions.

        High intensity puts the two urgent grounding/support suggestions
        first and keeps four entries in total. Otherwise the first three
        base suggestions are returned.

        Args:
            category: Final emotion category
            intensity: Final intensity (0.2-0.95)

        Returns:
            Ordered coping suggestions
        """
        key = category.value if isinstance(category, EmotionCategory) else category
        base = self.tables.coping.get(key, self.tables.coping[MIXED])
        tier = classify_intensity(intensity)

        if tier == IntensityTier.HIGH:
            suggestions = [*self.tables.urgent_coping, *base][:HIGH_TIER_LIMIT]
        else:
            suggestions = list(base[:DEFAULT_LIMIT])

        logger.debug(f"Selected {len(suggestions)} coping suggestions for {key} ({tier.value})")
        return suggestions
