"""
Offline values batch: O*NET Work Values -> program values profiles.
"""

from .crosswalk import (
    CAREER_ONET_CROSSWALK,
    CROSSWALK_VERSION,
    DEFAULT_CROSSWALK,
    Crosswalk,
    CrosswalkEntry,
    WorkValue,
)
from .parser import OccupationWorkValues, read_work_values
from .transformer import map_work_values
from .runner import ValueMappingReport, run_value_mapping

__all__ = [
    "CAREER_ONET_CROSSWALK",
    "CROSSWALK_VERSION",
    "DEFAULT_CROSSWALK",
    "Crosswalk",
    "CrosswalkEntry",
    "WorkValue",
    "OccupationWorkValues",
    "read_work_values",
    "map_work_values",
    "ValueMappingReport",
    "run_value_mapping",
]
