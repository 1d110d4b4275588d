"""Category backfill for records exported without a project name."""

from __future__ import annotations

import logging
from dataclasses import replace

from task_viewer.schema import PLACEHOLDER, WorkRecord

logger = logging.getLogger(__name__)

MISSION_PREFIX = "Mission:"


def is_specific(category: str) -> bool:
    """True for a real project name, false for blanks, "-" and mission labels."""

    return bool(category) and category != PLACEHOLDER and not category.startswith(MISSION_PREFIX)


def backfill(records: list[WorkRecord]) -> list[WorkRecord]:
    """Return a copy of records with absent categories filled from the last project seen.

    Mission labels keep their own text and never become the project that is
    carried forward. Records before the first project are left untouched.
    """

    last_specific = ""
    filled = 0
    result: list[WorkRecord] = []
    for record in records:
        category = record.category
        if is_specific(category):
            last_specific = category
        elif last_specific and category in ("", PLACEHOLDER):
            record = replace(record, category=last_specific)
            filled += 1
        result.append(record)

    logger.debug("Backfilled category on %d of %d records", filled, len(records))
    return result
