"""
Scoring Engine Exceptions

Error taxonomy for the career fit engine and the value-mapping batch.
Degenerate (all-zero) reference vectors are not errors - they resolve to the
component's neutral default.
"""

from typing import Iterable, Optional


class CareerFitError(Exception):
    """Base exception for the career fit engine."""

    pass


# =============================================================================
# INPUT / PROFILE ERRORS
# =============================================================================

class IncompleteResponsesError(CareerFitError):
    """Required raw responses are missing for a profile section."""

    def __init__(self, section: str, missing_items: Iterable[str]):
        self.section = section
        self.missing_items = sorted(missing_items)
        preview = ", ".join(self.missing_items[:5])
        if len(self.missing_items) > 5:
            preview += ", ..."
        super().__init__(
            f"{section} responses incomplete: {len(self.missing_items)} missing ({preview})"
        )


class InvalidResponseError(CareerFitError):
    """A raw response falls outside the answer scale."""

    def __init__(self, item_id: str, value: float, scale_min: float, scale_max: float):
        self.item_id = item_id
        self.value = value
        super().__init__(
            f"Response {item_id}={value} outside scale {scale_min}..{scale_max}"
        )


# =============================================================================
# REFERENCE DATA / CONFIGURATION ERRORS
# =============================================================================

class MalformedReferenceError(CareerFitError):
    """Program or country reference data failed validation at load time."""

    def __init__(self, entity_type: str, entity_id: Optional[str], detail: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.detail = detail
        super().__init__(f"Malformed {entity_type} {entity_id or '<unknown>'}: {detail}")


class TierWeightConfigError(CareerFitError):
    """Tier weight table is invalid."""

    pass


# =============================================================================
# VALUE-MAPPING BATCH ERRORS
# =============================================================================

class SourceDataError(CareerFitError):
    """The occupational source file is unreadable or malformed."""

    pass


class CrosswalkIntegrityError(CareerFitError):
    """A crosswalk entry's weights do not sum to 1.0."""

    pass


class ValueMappingIntegrityError(CareerFitError):
    """A mapped values vector fell outside [0, 100] after clamping."""

    def __init__(self, onet_code: str, detail: str):
        self.onet_code = onet_code
        super().__init__(f"Values mapping failed for {onet_code}: {detail}")
