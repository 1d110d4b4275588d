"""CSV adapter for work-item exports."""

from __future__ import annotations

import csv
import io
import logging

from task_viewer.coercion import clean_field, coerce_currency, coerce_rate
from task_viewer.durations import parse_duration
from task_viewer.schema import PLACEHOLDER, PayType, WorkRecord

logger = logging.getLogger(__name__)

_COLUMN_ALIASES = {
    "workdate": "date",
    "date": "date",
    "itemid": "id",
    "id": "id",
    "duration": "duration",
    "rateapplied": "rate",
    "rate": "rate",
    "payout": "value",
    "value": "value",
    "paytype": "type",
    "type": "type",
    "projectname": "category",
    "project": "category",
    "category": "category",
    "status": "status",
}


def map_header(header: list[str]) -> dict[str, int]:
    """Map semantic field names to column indexes; unknown columns are ignored."""

    columns: dict[str, int] = {}
    for index, name in enumerate(header):
        field = _COLUMN_ALIASES.get(clean_field(name.replace("\ufeff", "")).lower())
        if field is not None:
            columns[field] = index
    return columns


def _parse_row(row: list[str], columns: dict[str, int]) -> WorkRecord:
    def cell(field: str) -> str:
        index = columns.get(field)
        if index is None:
            return ""
        return clean_field(row[index])

    duration = cell("duration") or PLACEHOLDER
    raw_type = cell("type")

    return WorkRecord(
        date=cell("date"),
        id=cell("id"),
        category=cell("category"),
        duration=duration,
        duration_minutes=parse_duration(duration),
        rate=coerce_rate(cell("rate")),
        value=coerce_currency(cell("value")),
        pay_type=PayType.from_source(raw_type),
        raw_type=raw_type,
        status=cell("status"),
    )


def parse_text(raw_text: str) -> list[WorkRecord]:
    """Parse CSV content with a header row into work records.

    Malformed rows (bad quoting, wrong field count) are logged and skipped.
    """

    reader = csv.reader(io.StringIO(raw_text), skipinitialspace=True, strict=True)

    header: list[str] | None = None
    columns: dict[str, int] = {}
    records: list[WorkRecord] = []
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            logger.warning("Skipping CSV line %d: %s", reader.line_num, exc)
            continue

        if header is None:
            if any(value.strip() for value in row):
                header = row
                columns = map_header(header)
            continue

        if not row:
            continue

        if len(row) != len(header):
            logger.warning(
                "Skipping CSV line %d: expected %d fields, got %d",
                reader.line_num,
                len(header),
                len(row),
            )
            continue

        records.append(_parse_row(row, columns))

    logger.info("Parsed %d records from CSV", len(records))
    return records


def parse(file_path: str) -> list[WorkRecord]:
    """Parse a CSV file into a list of work records."""

    with open(file_path, newline="", encoding="utf-8-sig") as handle:
        return parse_text(handle.read())
