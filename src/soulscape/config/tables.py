"""
Emotion Tables

Static keyword, subtype, palette, coping, risk phrase and crisis resource
tables. Tables are built once into an immutable EmotionTables instance and
passed into the scoring, risk and coping services.

A YAML file may replace any top-level section of the built-in tables:

    keywords:
      joy: [happy, glad]
    risk_phrases:
      high: [kill myself]
      medium: [no point]
      low: [hurt myself]
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from soulscape.models.coping import CopingSuggestion
from soulscape.models.emotion import PRIMARY_CATEGORIES, EmotionCategory
from soulscape.models.response import SupportResource
from soulscape.models.risk import RiskSeverity

logger = logging.getLogger(__name__)

MIXED = EmotionCategory.MIXED.value

# Subtype-only namespaces, never a classification result
SECONDARY_NAMESPACES: Tuple[str, ...] = ("powerful", "peaceful")

MIN_SUBTYPES_PER_NAMESPACE = 5
MAX_SUBTYPES_PER_NAMESPACE = 8
PALETTE_SIZE = 3
MIN_COPING_SUGGESTIONS = 3


class TablesConfigError(ValueError):
    """Raised when a tables file is malformed or breaks a table invariant."""


_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s']")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for risk phrase matching.

    Lowercases, replaces everything except letters, digits, whitespace and
    apostrophes with a space, then collapses whitespace. Risk phrases go
    through the same normalization when tables are built.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        Normalized text
    """
    lower = (text or "").lower()
    stripped = _DISALLOWED_CHARS.sub(" ", lower)
    return _WHITESPACE.sub(" ", stripped).strip()


DEFAULT_KEYWORDS: Dict[str, list] = {
    "joy": ["happy", "joy", "excited", "grateful", "grace", "love", "glad", "bright", "peaceful"],
    "calm": ["calm", "content", "okay", "fine", "steady", "soft", "chill", "relaxed", "balanced"],
    "sadness": [
        "sad",
        "down",
        "blue",
        "lonely",
        "tired",
        "exhausted",
        "heavy",
        "cry",
        "loss",
        "hopeless",
        "worthless",
    ],
    "anger": [
        "angry",
        "mad",
        "frustrated",
        "upset",
        "irritated",
        "annoyed",
        "rage",
        "furious",
        "resent",
    ],
    "fear": [
        "anxious",
        "scared",
        "afraid",
        "worried",
        "nervous",
        "panic",
        "uneasy",
        "uncertain",
        "terrified",
    ],
    "mixed": [],
}

# Feelings wheel detail; phrases intentionally overlap between subtypes
DEFAULT_SUBTYPES: Dict[str, Dict[str, list]] = {
    "anger": {
        "frustrated": ["frustrated", "frustration", "stuck", "blocked", "can't figure", "helpless"],
        "irritated": ["irritated", "irritation", "annoyed", "bothered"],
        "annoyed": ["annoyed", "peeved", "irritated"],
        "enraged": ["rage", "enraged", "furious", "livid", "explosive"],
        "resentful": ["resent", "resentful", "bitter", "betrayed"],
        "bitter": ["bitter", "resentful", "sour"],
        "hostile": ["hostile", "antagonistic", "aggressive"],
        "jealous": ["jealous", "envy", "envious"],
    },
    "sadness": {
        "lonely": ["lonely", "alone", "isolated", "left out", "abandoned", "forgotten"],
        "disappointed": ["disappointed", "let down", "letdown", "failed", "regretful", "regret"],
        "hopeless": ["hopeless", "no point", "give up", "can't go on", "meaningless", "worthless"],
        "discouraged": ["discouraged", "disheartened", "demoralized"],
        "grief_stricken": ["grief", "grieving", "heartbroken", "mourning", "devastated"],
        "ashamed": ["ashamed", "embarrassed", "humiliated"],
        "guilty": ["guilty", "remorse", "sorry for", "regretful"],
        "regretful": ["regretful", "regret", "should have", "wish I had"],
    },
    "fear": {
        "anxious": ["anxious", "anxiety", "anxiousness"],
        "worried": ["worried", "worry", "concerned"],
        "nervous": ["nervous", "jitters", "butterflies"],
        "insecure": ["insecure", "unsure", "inadequate", "not good enough"],
        "overwhelmed": ["overwhelmed", "overwhelm", "too much", "can't handle"],
        "helpless": ["helpless", "powerless", "can't do anything"],
        "scared": ["scared", "afraid", "terrified"],
        "panicked": ["panic", "panicked", "panicking"],
    },
    "joy": {
        "content": ["content", "contentment", "satisfied"],
        "proud": ["proud", "pride", "accomplished"],
        "excited": ["excited", "thrilled", "pumped", "energized"],
        "playful": ["playful", "funny", "silly"],
        "grateful": ["grateful", "thankful", "blessed"],
        "hopeful": ["hopeful", "optimistic", "hope"],
        "peaceful": ["peaceful", "calm", "serene"],
        "satisfied": ["satisfied", "fulfilled"],
    },
    "calm": {
        "relaxed": ["relaxed", "laid back", "at ease", "chill"],
        "steady": ["steady", "stable", "settled"],
        "content": ["content", "okay", "fine"],
        "balanced": ["balanced", "centered", "grounded"],
        "soothed": ["soothed", "soft", "gentle", "quiet"],
    },
    "powerful": {
        "brave": ["brave", "courageous", "undaunted"],
        "capable": ["capable", "competent", "able"],
        "determined": ["determined", "resolute", "decided"],
        "motivated": ["motivated", "driven", "energized"],
        "inspired": ["inspired", "inspirational"],
        "successful": ["successful", "victorious", "triumphant"],
        "respected": ["respected", "valued", "esteemed"],
    },
    "peaceful": {
        "calm": ["calm", "tranquil", "relaxed"],
        "relaxed": ["relaxed", "laid back", "at ease"],
        "safe": ["safe", "secure", "protected"],
        "balanced": ["balanced", "centered", "grounded"],
        "accepted": ["accepted", "included"],
        "centered": ["centered", "grounded"],
    },
}

DEFAULT_PALETTES: Dict[str, list] = {
    "joy": ["#FFB347", "#FF7A7A", "#FFD166"],
    "calm": ["#75C9C8", "#5E8BFF", "#B8E1FF"],
    "sadness": ["#4D6DE3", "#1B1F3B", "#7A8BA3"],
    "anger": ["#E63946", "#F3722C", "#9B2226"],
    "fear": ["#9E77ED", "#2D2A4A", "#6C63FF"],
    "mixed": ["#F4A261", "#2A9D8F", "#8AB17D"],
}

DEFAULT_COPING: Dict[str, list] = {
    "joy": [
        {
            "title": "Savor the moment",
            "description": "Take 60 seconds to notice what's making you feel good. "
            "Name three details out loud.",
            "minutes": 1,
        },
        {
            "title": "Share the feeling",
            "description": "Tell someone briefly about something good that happened. "
            "It strengthens connection.",
            "minutes": 2,
        },
        {
            "title": "Capture it",
            "description": "Write one sentence about this moment so you can revisit it on a harder day.",
            "minutes": 2,
        },
    ],
    "calm": [
        {
            "title": "Breathing reset",
            "description": "Try 4-4-6 breathing: inhale 4s, hold 4s, exhale 6s. Repeat 4 times.",
            "minutes": 3,
        },
        {
            "title": "Gentle movement",
            "description": "Stand and stretch or take a 5-minute walk to keep balance and clarity.",
            "minutes": 5,
        },
        {
            "title": "Body scan",
            "description": "Slowly move your attention from head to toes, "
            "noticing any tension and letting it soften.",
            "minutes": 5,
        },
    ],
    "sadness": [
        {
            "title": "Grounding 5-4-3-2-1",
            "description": "Name 5 things you can see, 4 you can touch, 3 you can hear, "
            "2 you can smell, 1 you can taste.",
            "minutes": 3,
        },
        {
            "title": "Soothing breakpoint",
            "description": "If feeling very low, try a short self-soothing routine: "
            "warm drink, comfy seat, slow breathing.",
            "minutes": 10,
        },
        {
            "title": "Reach out",
            "description": "Consider messaging a trusted friend or professional "
            "when intensity is high.",
            "minutes": 5,
        },
    ],
    "anger": [
        {
            "title": "Pause & breathe",
            "description": "Step away for a minute, do 6 slow breaths focusing on exhalation.",
            "minutes": 2,
        },
        {
            "title": "Channel energy",
            "description": "Do a short physical activity (walk, push-ups) to release tension safely.",
            "minutes": 5,
        },
        {
            "title": "Name it",
            "description": "Write down what triggered the feeling and what you need right now, "
            "without editing.",
            "minutes": 3,
        },
    ],
    "fear": [
        {
            "title": "Box breathing",
            "description": "Inhale 4s, hold 4s, exhale 4s, hold 4s. "
            "Repeat 4 times to calm the nervous system.",
            "minutes": 3,
        },
        {
            "title": "Reality check",
            "description": "Name evidence that supports and contradicts the fear. "
            "Write two lines for each.",
            "minutes": 5,
        },
        {
            "title": "Worry window",
            "description": "Set a 10-minute timer to write worries down, "
            "then close the notebook and return to your day.",
            "minutes": 10,
        },
    ],
    "mixed": [
        {
            "title": "Check-in journaling",
            "description": "Spend 5 minutes writing what you feel and one small next step you can take.",
            "minutes": 5,
        },
        {
            "title": "Mini self-care",
            "description": "Pick one kind thing to do for yourself now "
            "(hydrate, step outside, call someone).",
            "minutes": 5,
        },
        {
            "title": "Breathing reset",
            "description": "Try 4-4-6 breathing: inhale 4s, hold 4s, exhale 6s. Repeat 4 times.",
            "minutes": 3,
        },
    ],
}

DEFAULT_URGENT_COPING: list = [
    {
        "title": "Grounding exercise",
        "description": "If you feel overwhelmed, use grounding (5-4-3-2-1) or box breathing now.",
        "minutes": 3,
    },
    {
        "title": "Contact support",
        "description": "Consider reaching out to a trusted person or a professional. "
        "If immediate danger, call local emergency services.",
        "minutes": 5,
    },
]

# Scanned high -> medium -> low; order within a tier is the match order
DEFAULT_RISK_PHRASES: Dict[str, list] = {
    "high": [
        "kill myself",
        "end my life",
        "i want to end my life",
        "i want to die",
        "i wanna die",
        "i want to kill myself",
        "i'll kill myself",
        "i will kill myself",
        "i'll end it",
        "i will end it",
        "i want to end it",
    ],
    "medium": [
        "no point in living",
        "no point",
        "can't go on",
        "cant go on",
        "i can't go on",
        "i cant go on",
        "i want to die by suicide",
        "suicidal",
    ],
    "low": [
        "hurt myself",
        "self harm",
        "cut myself",
        "cutting myself",
    ],
}

DEFAULT_SUPPORT_RESOURCES: list = [
    {
        "label": "US: National Suicide & Crisis Lifeline",
        "url": "tel:988",
        "note": "Call or text 988 (US)",
    },
    {
        "label": "Samaritans (UK & ROI)",
        "url": "https://www.samaritans.org/",
        "note": "Call +44 (0)8457 90 90 90 or see website",
    },
    {
        "label": "Befrienders Worldwide",
        "url": "https://www.befrienders.org/",
        "note": "International directory of helplines",
    },
    {
        "label": "WHO: Mental Health",
        "url": "https://www.who.int/teams/mental-health-and-substance-use",
        "note": "Global mental health resources",
    },
]


@dataclass(frozen=True)
class EmotionTables:
    """
    Immutable table set shared by the scoring, risk and coping services.

    Attributes:
        keywords: category -> trigger words
        subtypes: namespace -> subtype label -> trigger phrases
        palettes: category -> three hex colors
        coping: category -> base coping suggestions
        urgent_coping: suggestions prepended at high intensity
        risk_phrases: severity tier -> phrases, ordered high, medium, low
        support_resources: crisis contacts attached when risk is found
    """

    keywords: Mapping[str, Tuple[str, ...]]
    subtypes: Mapping[str, Mapping[str, Tuple[str, ...]]]
    palettes: Mapping[str, Tuple[str, str, str]]
    coping: Mapping[str, Tuple[CopingSuggestion, ...]]
    urgent_coping: Tuple[CopingSuggestion, ...]
    risk_phrases: Mapping[RiskSeverity, Tuple[str, ...]]
    support_resources: Tuple[SupportResource, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmotionTables":
        """
        Build tables from plain data (as loaded from YAML).

        Sections missing from data fall back to the built-in defaults.

        Args:
            data: Mapping with any of the section keys

        Returns:
            EmotionTables instance

        Raises:
            TablesConfigError: If a section has the wrong shape
        """
        unknown = set(data) - set(_SECTION_DEFAULTS)
        if unknown:
            raise TablesConfigError(f"Unknown table sections: {sorted(unknown)}")

        sections = {key: data.get(key, default) for key, default in _SECTION_DEFAULTS.items()}

        try:
            tables = cls(
                keywords=_freeze_word_map(sections["keywords"]),
                subtypes=MappingProxyType(
                    {
                        namespace: _freeze_word_map(labels)
                        for namespace, labels in sections["subtypes"].items()
                    }
                ),
                palettes=MappingProxyType(
                    {
                        category: tuple(str(color) for color in colors)
                        for category, colors in sections["palettes"].items()
                    }
                ),
                coping=MappingProxyType(
                    {
                        category: tuple(CopingSuggestion(**item) for item in items)
                        for category, items in sections["coping"].items()
                    }
                ),
                urgent_coping=tuple(CopingSuggestion(**item) for item in sections["urgent_coping"]),
                risk_phrases=MappingProxyType(
                    {
                        severity: tuple(
                            dict.fromkeys(
                                normalize_text(str(p))
                                for p in sections["risk_phrases"].get(severity.value, [])
                            )
                        )
                        for severity in (RiskSeverity.HIGH, RiskSeverity.MEDIUM, RiskSeverity.LOW)
                    }
                ),
                support_resources=tuple(
                    SupportResource(**item) for item in sections["support_resources"]
                ),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise TablesConfigError(f"Malformed tables: {e}") from e

        tables.validate()
        return tables

    def validate(self) -> bool:
        """
        Check table invariants.

        Returns:
            bool: True if the tables are valid

        Raises:
            TablesConfigError: If an invariant is broken
        """
        for category in PRIMARY_CATEGORIES:
            if not self.keywords.get(category.value):
                raise TablesConfigError(f"Keyword list for '{category.value}' must not be empty")
        if self.keywords.get(MIXED):
            raise TablesConfigError("'mixed' is a fallback and must not have keywords")
        for category, words in self.keywords.items():
            if not all(word.strip() for word in words):
                raise TablesConfigError(f"Keyword list for '{category}' contains an empty keyword")

        if MIXED not in self.palettes:
            raise TablesConfigError("A 'mixed' palette is required")
        for category, colors in self.palettes.items():
            if len(colors) != PALETTE_SIZE:
                raise TablesConfigError(
                    f"Palette '{category}' must have {PALETTE_SIZE} colors, got {len(colors)}"
                )

        required_namespaces = [c.value for c in PRIMARY_CATEGORIES] + list(SECONDARY_NAMESPACES)
        missing = [ns for ns in required_namespaces if ns not in self.subtypes]
        if missing:
            raise TablesConfigError(f"Missing subtype namespaces: {missing}")
        for namespace, labels in self.subtypes.items():
            if not MIN_SUBTYPES_PER_NAMESPACE <= len(labels) <= MAX_SUBTYPES_PER_NAMESPACE:
                raise TablesConfigError(
                    f"Subtype namespace '{namespace}' must have "
                    f"{MIN_SUBTYPES_PER_NAMESPACE}-{MAX_SUBTYPES_PER_NAMESPACE} subtypes, "
                    f"got {len(labels)}"
                )
            for label, phrases in labels.items():
                if not all(phrase.strip() for phrase in phrases):
                    raise TablesConfigError(
                        f"Subtype '{namespace}.{label}' contains an empty phrase"
                    )

        if MIXED not in self.coping:
            raise TablesConfigError("A 'mixed' coping list is required")
        for category, items in self.coping.items():
            if len(items) < MIN_COPING_SUGGESTIONS:
                raise TablesConfigError(
                    f"Coping list for '{category}' needs at least {MIN_COPING_SUGGESTIONS} "
                    f"suggestions, got {len(items)}"
                )
        if len(self.urgent_coping) != 2:
            raise TablesConfigError("Exactly two urgent coping suggestions are required")

        for severity, phrases in self.risk_phrases.items():
            if not all(phrases):
                # An empty phrase would match every text
                raise TablesConfigError(f"Risk tier '{severity.value}' contains an empty phrase")

        return True

    def palette_for(self, category: Union[EmotionCategory, str]) -> Tuple[str, str, str]:
        """Palette for category, falling back to the mixed palette."""
        key = category.value if isinstance(category, EmotionCategory) else category
        return self.palettes.get(key, self.palettes[MIXED])

    def to_dict(self) -> Dict[str, Any]:
        """Convert tables back to plain data."""
        return {
            "keywords": {k: list(v) for k, v in self.keywords.items()},
            "subtypes": {
                ns: {label: list(p) for label, p in labels.items()}
                for ns, labels in self.subtypes.items()
            },
            "palettes": {k: list(v) for k, v in self.palettes.items()},
            "coping": {k: [s.model_dump() for s in v] for k, v in self.coping.items()},
            "urgent_coping": [s.model_dump() for s in self.urgent_coping],
            "risk_phrases": {k.value: list(v) for k, v in self.risk_phrases.items()},
            "support_resources": [r.model_dump() for r in self.support_resources],
        }


_SECTION_DEFAULTS: Dict[str, Any] = {
    "keywords": DEFAULT_KEYWORDS,
    "subtypes": DEFAULT_SUBTYPES,
    "palettes": DEFAULT_PALETTES,
    "coping": DEFAULT_COPING,
    "urgent_coping": DEFAULT_URGENT_COPING,
    "risk_phrases": DEFAULT_RISK_PHRASES,
    "support_resources": DEFAULT_SUPPORT_RESOURCES,
}


def _freeze_word_map(data: Mapping[str, Any]) -> Mapping[str, Tuple[str, ...]]:
    """Lowercase and freeze a name -> phrases mapping, keeping declaration order."""
    return MappingProxyType(
        {str(name): tuple(str(phrase).lower() for phrase in phrases) for name, phrases in data.items()}
    )


@lru_cache(maxsize=1)
def default_tables() -> EmotionTables:
    """
    Get the built-in tables.

    Built on first use and shared for the process lifetime.

    Returns:
        EmotionTables instance
    """
    return EmotionTables.from_dict({})


def load_tables(path: Optional[Path] = None) -> EmotionTables:
    """
    Load tables from a YAML file.

    Args:
        path: Path to the tables YAML file (optional)

    Returns:
        EmotionTables with file sections overriding the defaults.
        Defaults are returned when path is None or does not exist.

    Raises:
        TablesConfigError: If the file is not valid YAML or breaks an invariant
    """
    if path is None:
        return default_tables()

    path = Path(path)
    if not path.exists():
        logger.warning(f"Tables file not found, using built-in tables: {path}")
        return default_tables()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TablesConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TablesConfigError(f"Tables file must contain a mapping: {path}")

    tables = EmotionTables.from_dict(data)
    logger.info(f"Loaded emotion tables from {path} (sections: {sorted(data)})")
    return tables
