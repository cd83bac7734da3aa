"""
TASK-004: Coping Strategy Selection Tests
"""

import pytest

from soulscape.models.coping import CopingSuggestion, IntensityTier
from soulscape.models.emotion import EmotionCategory
from soulscape.services.coping_service import CopingStrategyService, classify_intensity


@pytest.fixture
def selector():
    return CopingStrategyService()


class TestIntensityTier:
    """classify_intensity"""

    @pytest.mark.parametrize(
        "intensity,tier",
        [
            (0.95, IntensityTier.HIGH),
            (0.7, IntensityTier.HIGH),
            (0.69, IntensityTier.MEDIUM),
            (0.45, IntensityTier.MEDIUM),
            (0.44, IntensityTier.LOW),
            (0.2, IntensityTier.LOW),
        ],
    )
    def test_tiers(self, intensity, tier):
        assert classify_intensity(intensity) == tier


class TestHighIntensity:
    """High tier prepends urgent suggestions"""

    def test_anger_high_intensity(self, selector, tables):
        """anger at 0.8 starts with the two urgent suggestions, four in total"""
        result = selector.select_coping(EmotionCategory.ANGER, 0.8)

        assert len(result) == 4
        assert result[:2] == list(tables.urgent_coping)
        assert [s.title for s in result[2:]] == ["Pause & breathe", "Channel energy"]

    def test_base_entries_truncated_first(self, selector):
        """Urgent entries are kept, base entries are cut"""
        result = selector.select_coping("sadness", 0.9)

        titles = [s.title for s in result]
        assert titles == [
            "Grounding exercise",
            "Contact support",
            "Grounding 5-4-3-2-1",
            "Soothing breakpoint",
        ]


class TestLowerIntensity:
    """Medium and low tiers return the base list"""

    @pytest.mark.parametrize("intensity", [0.2, 0.5, 0.69])
    def test_first_three_base_entries(self, selector, tables, intensity):
        result = selector.select_coping("fear", intensity)

        assert result == list(tables.coping["fear"][:3])
        assert all(s.title != "Contact support" for s in result)

    @pytest.mark.parametrize("category", [c for c in EmotionCategory])
    def test_every_category_has_three(self, selector, category):
        """Every category returns three suggestions below the high tier"""
        result = selector.select_coping(category, 0.3)

        assert len(result) == 3
        assert all(isinstance(s, CopingSuggestion) and s.minutes > 0 for s in result)


class TestFallback:
    """Unknown categories use the mixed list"""

    def test_unknown_category(self, selector, tables):
        result = selector.select_coping("surprised", 0.3)

        assert result == list(tables.coping["mixed"][:3])
