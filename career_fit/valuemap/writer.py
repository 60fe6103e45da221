"""
Persistence for mapped values profiles.

persist_values_profile is the only code path that sets
CareerProgram.values_profile.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping, Union

from sqlalchemy.orm import Session

from ..logic.contracts import ValuesVector
from ..models import CareerProgram


logger = logging.getLogger(__name__)


def values_profile_json(vector: ValuesVector) -> dict:
    """Column representation: domain name -> value."""
    return {domain.value: value for domain, value in vector.as_dict().items()}


def persist_values_profile(
    db: Session,
    program_id: str,
    onet_code: str,
    vector: ValuesVector,
    crosswalk_version: str,
) -> bool:
    """
    Replace a program's values profile.

    Returns False (and writes nothing) if the program is not in the catalog.
    The caller owns the transaction.
    """
    program = db.get(CareerProgram, program_id)
    if program is None:
        logger.warning(f"Program '{program_id}' not found - values profile not written")
        return False

    program.values_profile = values_profile_json(vector)
    program.onet_code = onet_code
    program.values_crosswalk_version = crosswalk_version
    program.values_updated_at = datetime.now(timezone.utc)
    db.flush()
    return True


def write_values_json(
    path: Union[str, Path],
    rows: Iterable[Mapping],
    crosswalk_version: str,
) -> Path:
    """
    Write a canonical JSON export of mapped profiles.

    Rows are sorted by program_id and keys are sorted, so identical input
    always produces byte-identical output.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "crosswalk_version": crosswalk_version,
        "programs": sorted((dict(row) for row in rows), key=lambda r: r["program_id"]),
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info(f"Wrote {len(payload['programs'])} values profiles to {path}")
    return path
