"""
Data Adapter for the Scoring Engine

Reads program and country reference data from the database and validates it
into the engine's profile contracts before any scoring begins.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO DB writes
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Type

from pydantic import ValidationError
from sqlalchemy.orm import Session

from ..models import CareerProgram, CountryPriorityProfile
from .contracts import (
    CountryProfile,
    DomainVector,
    InterestVector,
    LearningStyleVector,
    ProgramProfile,
    ValuesVector,
)
from .exceptions import MalformedReferenceError


logger = logging.getLogger(__name__)


def _vector_data(raw: Optional[Dict[str, Any]], vector_type: Type[DomainVector]) -> Dict[str, Any]:
    """
    Fill absent domains with 0 so an unset column reads as an all-zero
    (neutral) vector. Unknown keys are passed through and rejected by the
    vector model.
    """
    data = {domain.value: 0.0 for domain in vector_type.domains}
    if raw:
        data.update(raw)
    return data


def program_profile_from_row(row: CareerProgram) -> ProgramProfile:
    """Validate one CareerProgram row into a ProgramProfile."""
    try:
        return ProgramProfile(
            program_id=row.id,
            title=row.title or "",
            onet_code=row.onet_code,
            interest_profile=_vector_data(row.interest_profile, InterestVector),
            values_profile=_vector_data(row.values_profile, ValuesVector),
            subject_needs=row.subject_needs or {},
            priorities=row.priorities or {},
            learning_style_fit=_vector_data(row.learning_style_fit, LearningStyleVector),
        )
    except ValidationError as e:
        raise MalformedReferenceError("program", row.id, _summarize(e)) from e


def country_profile_from_row(row: CountryPriorityProfile) -> CountryProfile:
    """Validate one CountryPriorityProfile row into a CountryProfile."""
    try:
        return CountryProfile(
            country_code=row.country_code,
            name=row.name or "",
            priority_weights=row.priority_weights or {},
            market_demand_index=row.market_demand_index,
        )
    except ValidationError as e:
        raise MalformedReferenceError("country", row.country_code, _summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ()))
        parts.append(f"{location}: {item.get('msg')}")
    return "; ".join(parts)


def load_program_profiles(
    db: Session,
    program_ids: Optional[Iterable[str]] = None,
) -> List[ProgramProfile]:
    """
    Load and validate program profiles.

    Args:
        db: Database session
        program_ids: Optional subset of program ids; None loads the catalog

    Raises:
        MalformedReferenceError: on the first row that fails validation
    """
    query = db.query(CareerProgram)
    if program_ids is not None:
        ids = list(program_ids)
        if not ids:
            return []
        query = query.filter(CareerProgram.id.in_(ids))

    rows = query.order_by(CareerProgram.id).all()
    profiles = [program_profile_from_row(row) for row in rows]
    logger.info(f"Loaded {len(profiles)} program profiles")
    return profiles


def load_country_profile(db: Session, country_code: str) -> Optional[CountryProfile]:
    """Load a country profile by code (case-insensitive); None when absent."""
    row = (
        db.query(CountryPriorityProfile)
        .filter(CountryPriorityProfile.country_code == country_code.upper())
        .first()
    )
    if row is None:
        logger.warning(f"No country priority profile for '{country_code}'")
        return None
    return country_profile_from_row(row)
