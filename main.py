from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from db import init_db
from career_fit.settings import CORS_ORIGINS, LOG_LEVEL
from career_fit.logic.aggregator import validate_tier_weights
from career_fit.logic.engine import WEIGHTS_VERSION
from career_fit.routes import router as fit_scores_router

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve with an invalid weight table
    validate_tier_weights()
    init_db()
    logger.info(f"Career fit API ready (weights {WEIGHTS_VERSION})")
    yield


app = FastAPI(title="Career Fit Scoring API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fit_scores_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
