"""
Work Values -> ValuesVector transform.

1. Rescale each source dimension from 0-7 to 0-100
2. Spread it across internal domains per the crosswalk
3. Accumulate per domain
4. Derive the unmapped domain from already-computed domains
5. Clamp to [0, 100] and round, then verify the result
"""

import math
from typing import Dict

from ..logic.constants import MAX_SCORE, MIN_SCORE, SCORE_DECIMALS, ValueDomain
from ..logic.contracts import ValuesVector
from ..logic.exceptions import ValueMappingIntegrityError
from .crosswalk import DEFAULT_CROSSWALK, Crosswalk
from .parser import OccupationWorkValues


SOURCE_SCALE_MAX = 7.0


def rescale(value: float) -> float:
    """0-7 work-value extent -> 0-100."""
    return value / SOURCE_SCALE_MAX * 100.0


def accumulate(
    occupation: OccupationWorkValues,
    crosswalk: Crosswalk = DEFAULT_CROSSWALK,
) -> Dict[ValueDomain, float]:
    """Unclamped per-domain totals, including the derived domain."""
    totals: Dict[ValueDomain, float] = {domain: 0.0 for domain in ValueDomain}

    for entry in crosswalk.entries:
        scaled = rescale(occupation.get(entry.source))
        for domain, weight in entry.targets:
            totals[domain] += scaled * weight

    totals[crosswalk.derived_domain] = sum(
        totals[domain] for domain in crosswalk.derived_from
    ) / len(crosswalk.derived_from)

    return totals


def map_work_values(
    occupation: OccupationWorkValues,
    crosswalk: Crosswalk = DEFAULT_CROSSWALK,
) -> ValuesVector:
    """
    Map one occupation onto the seven value domains.

    Raises:
        ValueMappingIntegrityError: a domain is not finite or lies outside
            [0, 100] after clamping
    """
    totals = accumulate(occupation, crosswalk)

    mapped: Dict[ValueDomain, float] = {}
    for domain, total in totals.items():
        if not math.isfinite(total):
            raise ValueMappingIntegrityError(
                occupation.onet_code, f"{domain.value} is not a finite number"
            )
        value = round(max(MIN_SCORE, min(MAX_SCORE, total)), SCORE_DECIMALS)
        if not math.isfinite(value) or not MIN_SCORE <= value <= MAX_SCORE:
            raise ValueMappingIntegrityError(
                occupation.onet_code, f"{domain.value}={value} outside [0, 100]"
            )
        mapped[domain] = value

    return ValuesVector.from_mapping(mapped)
