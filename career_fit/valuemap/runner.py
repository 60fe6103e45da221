"""
Value-Mapping Runner

Orchestrates the offline values batch:
1. Validates the crosswalk
2. Parses the O*NET source (or takes pre-parsed occupations)
3. Maps each program's occupation to a values vector
4. Persists accepted vectors and/or writes a JSON export

Sequential and idempotent: the same source and crosswalk always produce the
same vectors. A record that fails its integrity check is logged and
rejected; it never reaches the database or the export.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..logic.contracts import ValuesVector
from ..logic.exceptions import ValueMappingIntegrityError
from .crosswalk import CAREER_ONET_CROSSWALK, DEFAULT_CROSSWALK, Crosswalk
from .parser import OccupationWorkValues, read_work_values
from .transformer import map_work_values
from .writer import persist_values_profile, values_profile_json, write_values_json


logger = logging.getLogger(__name__)


class ValueMappingReport(BaseModel):
    """Outcome of one batch run."""
    crosswalk_version: str
    updated: List[str] = Field(default_factory=list)      # program ids mapped (and persisted)
    missing: List[str] = Field(default_factory=list)      # no source data for the occupation
    rejected: List[str] = Field(default_factory=list)     # integrity violations
    not_in_catalog: List[str] = Field(default_factory=list)
    profiles: Dict[str, ValuesVector] = Field(default_factory=dict)
    export_path: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.rejected


def run_value_mapping(
    source: Union[str, Path, Mapping[str, OccupationWorkValues]],
    program_crosswalk: Mapping[str, str] = CAREER_ONET_CROSSWALK,
    crosswalk: Crosswalk = DEFAULT_CROSSWALK,
    db: Optional[Session] = None,
    export_path: Optional[Union[str, Path]] = None,
) -> ValueMappingReport:
    """
    Run the values batch.

    Args:
        source: Path to Work Values.txt, or occupations already parsed
        program_crosswalk: Program id -> O*NET-SOC code
        crosswalk: Work value -> value domain table
        db: Optional session; when given, accepted profiles are persisted
        export_path: Optional JSON export destination

    Raises:
        CrosswalkIntegrityError: the crosswalk table itself is invalid
        SourceDataError: the source file cannot be parsed
    """
    crosswalk.validate_weights()

    if isinstance(source, (str, Path)):
        occupations = read_work_values(source)
    else:
        occupations = dict(source)

    report = ValueMappingReport(crosswalk_version=crosswalk.version)
    export_rows: List[dict] = []

    for program_id in sorted(program_crosswalk):
        onet_code = program_crosswalk[program_id]
        occupation = occupations.get(onet_code)
        if occupation is None:
            logger.warning(f"No O*NET data for {program_id} ({onet_code})")
            report.missing.append(program_id)
            continue

        try:
            vector = map_work_values(occupation, crosswalk)
        except ValueMappingIntegrityError as e:
            logger.error(f"Rejected {program_id}: {e}")
            report.rejected.append(program_id)
            continue

        if db is not None:
            if not persist_values_profile(db, program_id, onet_code, vector, crosswalk.version):
                report.not_in_catalog.append(program_id)
                continue

        report.updated.append(program_id)
        report.profiles[program_id] = vector
        export_rows.append({
            "program_id": program_id,
            "onet_code": onet_code,
            "values_profile": values_profile_json(vector),
        })

    if export_path is not None:
        report.export_path = str(write_values_json(export_path, export_rows, crosswalk.version))

    logger.info(
        f"Value mapping {crosswalk.version}: {len(report.updated)} updated, "
        f"{len(report.missing)} missing, {len(report.rejected)} rejected"
    )
    return report
