"""
EmotionTables Unit Tests

Built-in tables, invariants, immutability and YAML overrides.
"""

from dataclasses import FrozenInstanceError

import pytest

from soulscape.config.tables import (
    SECONDARY_NAMESPACES,
    EmotionTables,
    TablesConfigError,
    default_tables,
    load_tables,
    normalize_text,
)
from soulscape.models.emotion import PRIMARY_CATEGORIES, EmotionCategory
from soulscape.models.risk import RiskSeverity


class TestDefaultTables:
    """Built-in tables satisfy their invariants"""

    def test_default_tables_are_cached(self):
        assert default_tables() is default_tables()

    def test_default_tables_validate(self):
        assert default_tables().validate() is True

    def test_primary_keywords_not_empty(self):
        tables = default_tables()

        for category in PRIMARY_CATEGORIES:
            assert len(tables.keywords[category.value]) > 0

    def test_mixed_has_no_keywords(self):
        assert default_tables().keywords["mixed"] == ()

    def test_palettes_have_three_colors(self):
        tables = default_tables()

        for category in EmotionCategory:
            assert len(tables.palettes[category.value]) == 3

    def test_seven_subtype_namespaces(self):
        tables = default_tables()
        expected = {c.value for c in PRIMARY_CATEGORIES} | set(SECONDARY_NAMESPACES)

        assert set(tables.subtypes) == expected
        for labels in tables.subtypes.values():
            assert 5 <= len(labels) <= 8

    def test_subtype_phrases_lowercased(self):
        assert "wish i had" in default_tables().subtypes["sadness"]["regretful"]

    def test_risk_tiers(self):
        tables = default_tables()

        assert "kill myself" in tables.risk_phrases[RiskSeverity.HIGH]
        assert "no point" in tables.risk_phrases[RiskSeverity.MEDIUM]
        assert "cut myself" in tables.risk_phrases[RiskSeverity.LOW]

    def test_support_resources(self):
        resources = default_tables().support_resources

        assert len(resources) == 4
        assert resources[0].url == "tel:988"


class TestImmutability:
    """Tables cannot be changed after construction"""

    def test_frozen_dataclass(self):
        with pytest.raises(FrozenInstanceError):
            default_tables().keywords = {}

    def test_read_only_mappings(self):
        with pytest.raises(TypeError):
            default_tables().keywords["joy"] = ("new",)

    def test_tuple_word_lists(self):
        assert isinstance(default_tables().keywords["joy"], tuple)


class TestPaletteLookup:
    """palette_for"""

    def test_known_category(self):
        tables = default_tables()

        assert tables.palette_for(EmotionCategory.ANGER) == tables.palettes["anger"]

    def test_unknown_falls_back_to_mixed(self):
        tables = default_tables()

        assert tables.palette_for("surprised") == tables.palettes["mixed"]


class TestInvariantViolations:
    """from_dict rejects broken tables"""

    def test_mixed_keywords_rejected(self):
        keywords = default_tables().to_dict()["keywords"]
        keywords["mixed"] = ["whatever"]

        with pytest.raises(TablesConfigError, match="mixed"):
            EmotionTables.from_dict({"keywords": keywords})

    def test_empty_primary_keywords_rejected(self):
        keywords = default_tables().to_dict()["keywords"]
        keywords["calm"] = []

        with pytest.raises(TablesConfigError, match="calm"):
            EmotionTables.from_dict({"keywords": keywords})

    def test_two_color_palette_rejected(self):
        palettes = default_tables().to_dict()["palettes"]
        palettes["joy"] = ["#FFFFFF", "#000000"]

        with pytest.raises(TablesConfigError, match="3 colors"):
            EmotionTables.from_dict({"palettes": palettes})

    def test_short_coping_list_rejected(self):
        coping = default_tables().to_dict()["coping"]
        coping["joy"] = coping["joy"][:2]

        with pytest.raises(TablesConfigError, match="at least 3"):
            EmotionTables.from_dict({"coping": coping})

    def test_non_positive_minutes_rejected(self):
        coping = default_tables().to_dict()["coping"]
        coping["joy"][0]["minutes"] = 0

        with pytest.raises(TablesConfigError):
            EmotionTables.from_dict({"coping": coping})

    def test_unknown_section_rejected(self):
        with pytest.raises(TablesConfigError, match="Unknown"):
            EmotionTables.from_dict({"colours": {}})

    def test_wrong_shape_rejected(self):
        with pytest.raises(TablesConfigError):
            EmotionTables.from_dict({"subtypes": ["not", "a", "mapping"]})

    def test_missing_secondary_namespace_rejected(self):
        subtypes = default_tables().to_dict()["subtypes"]
        del subtypes["peaceful"]

        with pytest.raises(TablesConfigError, match="peaceful"):
            EmotionTables.from_dict({"subtypes": subtypes})

    def test_missing_primary_namespace_rejected(self):
        subtypes = default_tables().to_dict()["subtypes"]
        del subtypes["calm"]

        with pytest.raises(TablesConfigError, match="calm"):
            EmotionTables.from_dict({"subtypes": subtypes})

    @pytest.mark.parametrize("phrase", ["", "   ", "!!!"])
    def test_empty_risk_phrase_rejected(self, phrase):
        """Phrases that normalize to nothing would match every text"""
        with pytest.raises(TablesConfigError, match="empty phrase"):
            EmotionTables.from_dict({"risk_phrases": {"high": [phrase], "medium": [], "low": []}})

    def test_empty_keyword_rejected(self):
        keywords = default_tables().to_dict()["keywords"]
        keywords["joy"].append(" ")

        with pytest.raises(TablesConfigError, match="empty keyword"):
            EmotionTables.from_dict({"keywords": keywords})

    def test_empty_subtype_phrase_rejected(self):
        subtypes = default_tables().to_dict()["subtypes"]
        subtypes["anger"]["resentful"].append("")

        with pytest.raises(TablesConfigError, match="anger.resentful"):
            EmotionTables.from_dict({"subtypes": subtypes})


class TestRiskPhraseNormalization:
    """Risk phrases are normalized like the text they are matched against"""

    def test_punctuation_in_phrase_normalized(self):
        tables = EmotionTables.from_dict(
            {"risk_phrases": {"high": ["End-It-All!"], "medium": [], "low": []}}
        )

        assert tables.risk_phrases[RiskSeverity.HIGH] == ("end it all",)

    def test_duplicates_collapse_in_order(self):
        tables = EmotionTables.from_dict(
            {"risk_phrases": {"high": [], "medium": [], "low": ["self harm", "Self-Harm", "hurt myself"]}}
        )

        assert tables.risk_phrases[RiskSeverity.LOW] == ("self harm", "hurt myself")

    def test_default_phrases_are_normalized(self):
        for phrases in default_tables().risk_phrases.values():
            for phrase in phrases:
                assert phrase == normalize_text(phrase)


class TestLoadTables:
    """load_tables"""

    def test_none_path_returns_defaults(self):
        assert load_tables(None) is default_tables()

    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_tables(tmp_path / "missing.yaml") is default_tables()

    def test_empty_file_returns_default_content(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_tables(path) == default_tables()

    def test_yaml_section_override(self, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text(
            "keywords:\n"
            "  joy: [Sunny]\n"
            "  calm: [breeze]\n"
            "  sadness: [rain]\n"
            "  anger: [thunder]\n"
            "  fear: [fog]\n"
            "  mixed: []\n",
            encoding="utf-8",
        )

        tables = load_tables(path)

        assert tables.keywords["joy"] == ("sunny",)
        assert tables.palettes == default_tables().palettes

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("keywords: [unclosed", encoding="utf-8")

        with pytest.raises(TablesConfigError, match="Invalid YAML"):
            load_tables(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- joy\n- calm\n", encoding="utf-8")

        with pytest.raises(TablesConfigError, match="mapping"):
            load_tables(path)
