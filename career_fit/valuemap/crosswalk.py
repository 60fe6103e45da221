"""
O*NET Work Values -> internal values-domain crosswalk.

The crosswalk is fixed, version-controlled configuration: it is never
inferred at runtime. Bump CROSSWALK_VERSION whenever a weight changes so
persisted profiles can be traced back to the table that produced them.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from ..logic.constants import ValueDomain
from ..logic.exceptions import CrosswalkIntegrityError


class WorkValue(str, Enum):
    """The six O*NET work values (Element Name in Work Values.txt)."""
    ACHIEVEMENT = "Achievement"
    WORKING_CONDITIONS = "Working Conditions"
    RECOGNITION = "Recognition"
    RELATIONSHIPS = "Relationships"
    SUPPORT = "Support"
    INDEPENDENCE = "Independence"


WEIGHT_TOLERANCE = 1e-9


class CrosswalkEntry(BaseModel):
    """One source work value split across one or two internal domains."""
    model_config = ConfigDict(frozen=True)

    source: WorkValue
    targets: Tuple[Tuple[ValueDomain, float], ...]


class Crosswalk(BaseModel):
    """
    Immutable mapping table.

    ``derived_domain`` has no direct source and is set to the mean of the
    ``derived_from`` domains after accumulation.
    """
    model_config = ConfigDict(frozen=True)

    version: str
    entries: Tuple[CrosswalkEntry, ...]
    derived_domain: ValueDomain
    derived_from: Tuple[ValueDomain, ...]

    def validate_weights(self) -> None:
        """Raise CrosswalkIntegrityError unless every source's weights sum to 1.0."""
        seen = set()
        for entry in self.entries:
            if entry.source in seen:
                raise CrosswalkIntegrityError(
                    f"Crosswalk {self.version}: '{entry.source.value}' mapped more than once"
                )
            seen.add(entry.source)

            if any(weight < 0 for _, weight in entry.targets):
                raise CrosswalkIntegrityError(
                    f"Crosswalk {self.version}: negative weight for '{entry.source.value}'"
                )
            total = sum(weight for _, weight in entry.targets)
            if abs(total - 1.0) > WEIGHT_TOLERANCE:
                raise CrosswalkIntegrityError(
                    f"Crosswalk {self.version}: weights for '{entry.source.value}' "
                    f"sum to {total}, expected 1.0"
                )

        if not self.derived_from:
            raise CrosswalkIntegrityError(
                f"Crosswalk {self.version}: derived domain has no inputs"
            )
        if self.derived_domain in self.derived_from:
            raise CrosswalkIntegrityError(
                f"Crosswalk {self.version}: derived domain cannot derive from itself"
            )

    def as_table(self) -> Dict[str, Dict[str, float]]:
        return {
            entry.source.value: {domain.value: weight for domain, weight in entry.targets}
            for entry in self.entries
        }


CROSSWALK_VERSION = "2025.1"

# Schwartz-aligned mapping
DEFAULT_CROSSWALK = Crosswalk(
    version=CROSSWALK_VERSION,
    entries=(
        CrosswalkEntry(source=WorkValue.ACHIEVEMENT, targets=(
            (ValueDomain.ACHIEVEMENT, 1.0),
        )),
        CrosswalkEntry(source=WorkValue.RECOGNITION, targets=(
            (ValueDomain.POWER, 0.6),
            (ValueDomain.ACHIEVEMENT, 0.4),
        )),
        CrosswalkEntry(source=WorkValue.INDEPENDENCE, targets=(
            (ValueDomain.SELF_DIRECTION, 1.0),
        )),
        CrosswalkEntry(source=WorkValue.RELATIONSHIPS, targets=(
            (ValueDomain.BENEVOLENCE, 0.7),
            (ValueDomain.UNIVERSALISM, 0.3),
        )),
        CrosswalkEntry(source=WorkValue.SUPPORT, targets=(
            (ValueDomain.SECURITY, 0.5),
            (ValueDomain.BENEVOLENCE, 0.5),
        )),
        CrosswalkEntry(source=WorkValue.WORKING_CONDITIONS, targets=(
            (ValueDomain.SECURITY, 1.0),
        )),
    ),
    derived_domain=ValueDomain.HEDONISM,
    derived_from=(ValueDomain.ACHIEVEMENT, ValueDomain.SELF_DIRECTION),
)


# Program id -> O*NET-SOC code (O*NET 30.0 taxonomy)
CAREER_ONET_CROSSWALK: Mapping[str, str] = MappingProxyType({
    "software-engineer": "15-1251.00",              # Computer Programmers
    "data-scientist": "15-2051.01",
    "renewable-energy-engineer": "17-2199.03",      # Energy Engineers
    "nurse": "29-1141.00",                          # Registered Nurses
    "digital-marketing-specialist": "13-1161.00",   # Market Research Analysts
    "graphic-designer": "27-1024.00",
    "mechanical-engineer": "17-2141.00",
    "financial-analyst": "13-2052.00",              # Personal Financial Advisors
    "secondary-teacher": "25-2031.00",
    "environmental-scientist": "19-2041.00",
    "civil-engineer": "17-2051.00",
    "architect": "17-1011.00",
    "electrical-engineer": "17-2071.00",
    "biomedical-engineer": "17-2031.00",
    "pharmacist": "29-1051.00",
    "general-practitioner": "29-1216.00",           # General Internal Medicine Physicians
    "dentist": "29-1021.00",
    "physical-therapist": "29-1123.00",
    "psychologist": "19-3032.00",                   # Industrial-Organizational Psychologists
    "social-worker": "21-1022.00",                  # Healthcare Social Workers
    "lawyer": "23-1011.00",
    "accountant": "13-2011.00",
    "hr-manager": "11-3121.00",
    "management-consultant": "13-1111.00",
    "entrepreneur": "11-1021.00",                   # General and Operations Managers
    "sales-manager": "11-2022.00",
    "marketing-manager": "11-2021.00",
    "product-manager": "11-2021.00",                # closest match: Marketing Managers
    "ux-ui-designer": "15-1255.01",
    "video-game-designer": "27-1014.00",            # Special Effects Artists and Animators
    "journalist": "27-3023.00",
    "content-creator": "27-3043.00",                # Writers and Authors
    "photographer": "27-4021.00",
    "chef": "35-1011.00",
    "fashion-designer": "27-1022.00",
    "interior-designer": "27-1025.00",
})
