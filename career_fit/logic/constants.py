"""
Scoring Engine Constants

Defines the domain enums, neutral defaults, tier weight tables and blend
coefficients used by the career fit scoring engine.
All values are fixed configuration loaded once at import - nothing here is
recomputed or renormalized at request time.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


# =============================================================================
# DOMAIN ENUMS
# =============================================================================

class InterestTheme(str, Enum):
    """Holland (RIASEC) interest themes."""
    REALISTIC = "realistic"
    INVESTIGATIVE = "investigative"
    ARTISTIC = "artistic"
    SOCIAL = "social"
    ENTERPRISING = "enterprising"
    CONVENTIONAL = "conventional"


class ValueDomain(str, Enum):
    """Personal value domains (Schwartz-aligned)."""
    ACHIEVEMENT = "achievement"
    BENEVOLENCE = "benevolence"
    UNIVERSALISM = "universalism"
    SELF_DIRECTION = "self_direction"
    SECURITY = "security"
    POWER = "power"
    HEDONISM = "hedonism"


class LearningStage(str, Enum):
    """Kolb experiential learning stages."""
    CONCRETE = "concrete"
    REFLECTIVE = "reflective"
    ABSTRACT = "abstract"
    ACTIVE = "active"


class LearningStyle(str, Enum):
    """Kolb quadrant label derived from the two learning axes."""
    DIVERGING = "diverging"          # feeling + watching
    ASSIMILATING = "assimilating"    # thinking + watching
    CONVERGING = "converging"        # thinking + doing
    ACCOMMODATING = "accommodating"  # feeling + doing


class Subject(str, Enum):
    """Subjects covered by the readiness quiz."""
    ARABIC = "arabic"
    ENGLISH = "english"
    MATHEMATICS = "mathematics"
    SCIENCE = "science"
    COMPUTER_SCIENCE = "computer_science"
    SOCIAL_STUDIES = "social_studies"


class Priority(str, Enum):
    """National priority sectors a program can contribute to."""
    SUSTAINABILITY = "sustainability"
    AI = "ai"
    HEALTH = "health"
    EDUCATION = "education"
    TOURISM = "tourism"
    LOGISTICS = "logistics"
    SPACE = "space"
    FINTECH = "fintech"
    AGRITECH = "agritech"


class FutureSkill(str, Enum):
    """WEF 16 future-ready skills; values double as storage column names."""
    LITERACY = "literacy"
    NUMERACY = "numeracy"
    SCIENTIFIC_LITERACY = "scientific_literacy"
    ICT_LITERACY = "ict_literacy"
    FINANCIAL_LITERACY = "financial_literacy"
    CULTURAL_CIVIC_LITERACY = "cultural_civic_literacy"
    CRITICAL_THINKING = "critical_thinking"
    CREATIVITY = "creativity"
    COMMUNICATION = "communication"
    COLLABORATION = "collaboration"
    CURIOSITY = "curiosity"
    INITIATIVE = "initiative"
    PERSISTENCE_GRIT = "persistence_grit"
    ADAPTABILITY = "adaptability"
    LEADERSHIP = "leadership"
    SOCIAL_CULTURAL_AWARENESS = "social_cultural_awareness"


class Tier(str, Enum):
    """Assessment tier - selects the weight table."""
    FULL = "full"
    SIMPLIFIED = "simplified"


class ScoreComponent(str, Enum):
    """The five scored components."""
    INTEREST = "interest"
    VALUES = "values"
    READINESS = "readiness"
    ALIGNMENT = "alignment"
    LEARNING_STYLE = "learning_style"


class ScoreStatus(str, Enum):
    COMPLETE = "complete"
    INCOMPLETE_PROFILE = "incomplete_profile"


# =============================================================================
# NEUTRAL DEFAULTS
# =============================================================================

# Returned when a program's reference vector sums to zero.
# Component-specific calibration - do not unify.
NEUTRAL_DEFAULTS: Mapping[ScoreComponent, float] = MappingProxyType({
    ScoreComponent.INTEREST: 50.0,
    ScoreComponent.VALUES: 50.0,
    ScoreComponent.READINESS: 60.0,
    ScoreComponent.LEARNING_STYLE: 65.0,
    ScoreComponent.ALIGNMENT: 50.0,
})


# =============================================================================
# TIER WEIGHTS
# =============================================================================

# Integer percentages; every tier must sum to exactly 100.
# A component listed for a tier is required for that tier.
TIER_WEIGHTS: Mapping[Tier, Mapping[ScoreComponent, int]] = MappingProxyType({
    Tier.FULL: MappingProxyType({
        ScoreComponent.INTEREST: 30,
        ScoreComponent.VALUES: 20,
        ScoreComponent.READINESS: 20,
        ScoreComponent.ALIGNMENT: 20,
        ScoreComponent.LEARNING_STYLE: 10,
    }),
    Tier.SIMPLIFIED: MappingProxyType({
        ScoreComponent.INTEREST: 55,
        ScoreComponent.ALIGNMENT: 25,
        ScoreComponent.LEARNING_STYLE: 20,
    }),
})

WEIGHT_TOTAL = 100

# =============================================================================
# ALIGNMENT BLEND
# =============================================================================

COUNTRY_PRIORITY_BLEND = 0.7   # alpha
USER_PRIORITY_BLEND = 0.3      # beta
MARKET_DEMAND_BLEND = 0.5      # gamma, only when a demand index is supplied
NEUTRAL_MARKET_DEMAND = 1.0
PRIORITY_SCALE = 100.0         # priority weights / demand indices are 0..100

# =============================================================================
# SCORE BOUNDS
# =============================================================================

MIN_SCORE = 0.0
MAX_SCORE = 100.0
SCORE_DECIMALS = 1

TOP_VALUE_COUNT = 3

# =============================================================================
# QUESTION BANKS
# =============================================================================

LIKERT_MIN = 1
LIKERT_MAX = 5

_INTEREST_CODES: Tuple[Tuple[str, InterestTheme], ...] = (
    ("R", InterestTheme.REALISTIC),
    ("I", InterestTheme.INVESTIGATIVE),
    ("A", InterestTheme.ARTISTIC),
    ("S", InterestTheme.SOCIAL),
    ("E", InterestTheme.ENTERPRISING),
    ("C", InterestTheme.CONVENTIONAL),
)
INTEREST_ITEMS_PER_THEME = 5

# Item id -> theme, e.g. "R1" .. "C5"
INTEREST_ITEM_DOMAINS: Mapping[str, InterestTheme] = MappingProxyType({
    f"{code}{n}": theme
    for code, theme in _INTEREST_CODES
    for n in range(1, INTEREST_ITEMS_PER_THEME + 1)
})

_VALUE_CODES: Tuple[Tuple[str, ValueDomain], ...] = (
    ("ACH", ValueDomain.ACHIEVEMENT),
    ("BEN", ValueDomain.BENEVOLENCE),
    ("UNI", ValueDomain.UNIVERSALISM),
    ("SD", ValueDomain.SELF_DIRECTION),
    ("SEC", ValueDomain.SECURITY),
    ("POW", ValueDomain.POWER),
    ("HED", ValueDomain.HEDONISM),
)
VALUE_ITEMS_PER_DOMAIN = 3

# Item id -> value domain, e.g. "ACH1" .. "HED3"
VALUES_ITEM_DOMAINS: Mapping[str, ValueDomain] = MappingProxyType({
    f"{code}{n}": domain
    for code, domain in _VALUE_CODES
    for n in range(1, VALUE_ITEMS_PER_DOMAIN + 1)
})

# Kolb question bank: ce1..ce6, ro1..ro6, ac1..ac6, ae1..ae6
KOLB_DIMENSIONS: Tuple[str, ...] = ("CE", "RO", "AC", "AE")
KOLB_ITEMS_PER_DIMENSION = 6

KOLB_ITEM_DIMENSIONS: Mapping[str, str] = MappingProxyType({
    f"{dim.lower()}{n}": dim
    for dim in KOLB_DIMENSIONS
    for n in range(1, KOLB_ITEMS_PER_DIMENSION + 1)
})

# AC - CE and AE - RO each span +/- items * (max - min)
KOLB_AXIS_RANGE = KOLB_ITEMS_PER_DIMENSION * (LIKERT_MAX - LIKERT_MIN)

STAGE_SCALE = 100.0
# One pole of an axis holds at most half of the stage mass.
MAX_STAGE_SHARE = 0.5

# =============================================================================
# ENGINE
# =============================================================================

ENGINE_VERSION = "1.0.0"
DEFAULT_MAX_WORKERS = 4

COMPONENT_LABELS: Dict[ScoreComponent, str] = {
    ScoreComponent.INTEREST: "Interest Fit",
    ScoreComponent.VALUES: "Values Fit",
    ScoreComponent.READINESS: "Academic Readiness Fit",
    ScoreComponent.ALIGNMENT: "Alignment Fit",
    ScoreComponent.LEARNING_STYLE: "Learning-Style Fit",
}
