"""
Parser for the O*NET "Work Values.txt" database file.

The file is tab-delimited with one row per (occupation, element, scale).
Only the EX (extent) scale carries the 0-7 work-value scores; the VH rows
are high-point codes and are skipped.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field

from ..logic.exceptions import SourceDataError
from .crosswalk import WorkValue


logger = logging.getLogger(__name__)

CODE_COLUMN = "O*NET-SOC Code"
ELEMENT_COLUMN = "Element Name"
SCALE_COLUMN = "Scale ID"
VALUE_COLUMN = "Data Value"
REQUIRED_COLUMNS = (CODE_COLUMN, ELEMENT_COLUMN, SCALE_COLUMN, VALUE_COLUMN)

EXTENT_SCALE = "EX"


class OccupationWorkValues(BaseModel):
    """Work-value extent scores (0-7) for one occupation."""
    model_config = ConfigDict(frozen=True)

    onet_code: str
    title: str = ""
    values: Dict[WorkValue, float] = Field(default_factory=dict)

    def get(self, work_value: WorkValue) -> float:
        """Score for a work value; absent dimensions read as 0."""
        return self.values.get(work_value, 0.0)


def read_work_values(
    path: Union[str, Path],
    scale_id: str = EXTENT_SCALE,
) -> Dict[str, OccupationWorkValues]:
    """
    Parse Work Values.txt into per-occupation scores.

    Args:
        path: Path to the tab-delimited source file
        scale_id: Scale variant to keep (EX by default)

    Returns:
        Dict keyed by O*NET-SOC code

    Raises:
        SourceDataError: file missing, header incomplete, or a data value
            that is not a number
    """
    path = Path(path)
    if not path.is_file():
        raise SourceDataError(f"Work values file not found: {path}")

    scores: Dict[str, Dict[WorkValue, float]] = {}
    titles: Dict[str, str] = {}
    known_elements = {wv.value: wv for wv in WorkValue}

    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f, delimiter="\t")
        header = reader.fieldnames or []
        missing = [col for col in REQUIRED_COLUMNS if col not in header]
        if missing:
            raise SourceDataError(f"{path.name}: missing columns {missing}")

        for line_no, row in enumerate(reader, start=2):
            if (row.get(SCALE_COLUMN) or "").strip() != scale_id:
                continue

            element = known_elements.get((row.get(ELEMENT_COLUMN) or "").strip())
            if element is None:
                continue

            code = (row.get(CODE_COLUMN) or "").strip()
            if not code:
                raise SourceDataError(f"{path.name}:{line_no}: empty occupation code")

            raw_value = (row.get(VALUE_COLUMN) or "").strip()
            try:
                value = float(raw_value)
            except ValueError:
                raise SourceDataError(
                    f"{path.name}:{line_no}: unparsable data value '{raw_value}' for {code}"
                )

            scores.setdefault(code, {})[element] = value
            if row.get("Title"):
                titles[code] = row["Title"].strip()

    logger.info(f"Parsed {len(scores)} occupations from {path.name} (scale {scale_id})")

    return {
        code: OccupationWorkValues(onet_code=code, title=titles.get(code, ""), values=values)
        for code, values in scores.items()
    }
