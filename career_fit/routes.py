"""
Career Fit API Routes

Exposes the composite scoring engine via REST API.
- POST /fit-scores             score inline profiles
- POST /fit-scores/assessment  score raw responses against the stored catalog
- POST /fit-scores/skills      future skills profile from raw responses
- GET  /fit-scores/tiers       tier weight tables
- GET  /fit-scores/health
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from db import get_session
from .logic.adapter import load_country_profile, load_program_profiles
from .logic.aggregator import required_components
from .logic.constants import ENGINE_VERSION, NEUTRAL_DEFAULTS, TIER_WEIGHTS, Tier
from .logic.contracts import FutureSkillsProfile, RawAssessment, ScoringOutput, ScoringRequest
from .logic.engine import WEIGHTS_VERSION, FitScoringEngine
from .logic.exceptions import (
    IncompleteResponsesError,
    InvalidResponseError,
    MalformedReferenceError,
)
from .logic.future_skills import calculate_future_skills
from .logic.normalizer import build_user_profile


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fit-scores", tags=["fit-scores"])

engine = FitScoringEngine()


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class AssessmentScoringRequest(BaseModel):
    """Raw assessment scored against programs stored in the catalog."""
    assessment: RawAssessment
    tier: Tier = Tier.FULL
    country_code: Optional[str] = Field(
        default=None,
        description="Country whose priority profile drives Alignment Fit",
        examples=["AE"],
    )
    program_ids: Optional[List[str]] = Field(
        default=None,
        description="Subset of catalog programs; omit to score the whole catalog",
    )
    limit: Optional[int] = Field(default=None, ge=1, le=200)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", response_model=ScoringOutput, summary="Score programs for a user profile")
@router.post("/", response_model=ScoringOutput, include_in_schema=False)
def score_fit(request: ScoringRequest):
    """
    Score one user profile against the supplied programs.

    **Response:**
    - Ranked results with final and component scores (0-100, 1 decimal)
    - `incomplete_profile` results carry no numeric scores
    """
    try:
        return engine.score_programs(request)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fit scoring failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/assessment", response_model=ScoringOutput, summary="Score raw responses against the catalog")
def score_assessment(request: AssessmentScoringRequest, db: Session = Depends(get_session)):
    """
    Normalize raw questionnaire responses, load reference data and score.

    Malformed program/country reference data is rejected with 400 before any
    scoring takes place.
    """
    try:
        try:
            user = build_user_profile(request.assessment)
        except InvalidResponseError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            programs = load_program_profiles(db, request.program_ids)
            country = (
                load_country_profile(db, request.country_code)
                if request.country_code else None
            )
        except MalformedReferenceError as e:
            raise HTTPException(status_code=400, detail=str(e))

        if not programs:
            raise HTTPException(status_code=404, detail="No programs found to score")

        return engine.score_programs(ScoringRequest(
            user=user,
            programs=programs,
            country=country,
            tier=request.tier,
            limit=request.limit,
        ))

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Assessment scoring failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/skills", response_model=FutureSkillsProfile, summary="Future skills profile")
def future_skills(assessment: RawAssessment):
    """
    Derive the 16 future-ready skills from raw questionnaire responses.
    Informational only; fit scores are unaffected.
    """
    try:
        user = build_user_profile(assessment)
        return calculate_future_skills(user)
    except (InvalidResponseError, IncompleteResponsesError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Future skills calculation failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/tiers", summary="Tier weight tables")
def list_tiers():
    """Fixed tier weights (integer percent) and their fingerprint."""
    return {
        "weights_version": WEIGHTS_VERSION,
        "tiers": {
            tier.value: {
                "weights": {c.value: pct for c, pct in weights.items()},
                "required_components": [c.value for c in required_components(tier)],
            }
            for tier, weights in TIER_WEIGHTS.items()
        },
        "neutral_defaults": {c.value: v for c, v in NEUTRAL_DEFAULTS.items()},
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Scoring engine health check")
def health_check():
    """Check if the scoring engine is operational."""
    return {
        "status": "ok",
        "engine": "career-fit",
        "version": ENGINE_VERSION,
        "weights_version": WEIGHTS_VERSION,
    }
