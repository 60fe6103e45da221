"""
Refresh program values profiles from the O*NET Work Values dataset.

Usage:
    python update_career_values.py                                   # map + persist
    python update_career_values.py --source "data/onet/Work Values.txt"
    python update_career_values.py --no-db --export data/career_values.json

Exits with status 1 when any record is rejected or the source/crosswalk is
invalid.
"""

import argparse
import logging
import sys

from career_fit.settings import (
    CAREER_VALUES_EXPORT_PATH,
    LOG_LEVEL,
    ONET_WORK_VALUES_PATH,
)
from career_fit.logic.exceptions import CrosswalkIntegrityError, SourceDataError
from career_fit.valuemap import run_value_mapping

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s | %(levelname)-8s | %(message)s', datefmt='%H:%M:%S')
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Map O*NET work values onto program values profiles")
    parser.add_argument("--source", default=ONET_WORK_VALUES_PATH,
                        help="Path to the tab-delimited Work Values.txt file")
    parser.add_argument("--export", default=CAREER_VALUES_EXPORT_PATH,
                        help="Write mapped profiles to this JSON file")
    parser.add_argument("--no-db", action="store_true",
                        help="Do not write to the database")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        if args.no_db:
            report = run_value_mapping(args.source, export_path=args.export)
        else:
            from db import get_db, init_db

            init_db()
            with get_db() as db:
                report = run_value_mapping(args.source, db=db, export_path=args.export)
    except (SourceDataError, CrosswalkIntegrityError) as e:
        logger.error(f"Value mapping aborted: {e}")
        return 1

    logger.info(
        f"Updated {len(report.updated)} programs "
        f"(missing source: {len(report.missing)}, rejected: {len(report.rejected)}, "
        f"not in catalog: {len(report.not_in_catalog)})"
    )
    if report.export_path:
        logger.info(f"Export written to {report.export_path}")

    if not report.ok:
        logger.error(f"Rejected programs: {', '.join(report.rejected)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
