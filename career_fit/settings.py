"""
Runtime configuration read from the environment (.env supported).

Scoring constants (tier weights, neutral defaults, crosswalk) are code
constants and are not configurable here.
"""

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SCORING_MAX_WORKERS = int(os.getenv("SCORING_MAX_WORKERS", "4"))

ONET_WORK_VALUES_PATH = os.getenv("ONET_WORK_VALUES_PATH", "data/onet/Work Values.txt")
CAREER_VALUES_EXPORT_PATH = os.getenv("CAREER_VALUES_EXPORT_PATH") or None

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]
