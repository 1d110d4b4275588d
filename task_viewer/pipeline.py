"""Ingestion pipeline: raw export text to records and statistics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from task_viewer.adapters import csv_adapter, text_adapter
from task_viewer.backfill import backfill
from task_viewer.metrics import aggregate
from task_viewer.schema import StatisticsSummary, WorkRecord

logger = logging.getLogger(__name__)

__all__ = [
    "AnalysisResult",
    "InputFormat",
    "aggregate",
    "analyze",
    "backfill",
    "guess_format",
    "ingest",
    "read_payload",
]


class InputFormat(Enum):
    TABULAR = "tabular"
    BLOCK_TEXT = "block-text"

    @classmethod
    def from_hint(cls, hint: "str | InputFormat") -> "InputFormat":
        if isinstance(hint, InputFormat):
            return hint
        normalized = hint.strip().lower()
        if normalized in ("tabular", "csv"):
            return cls.TABULAR
        if normalized in ("block-text", "text"):
            return cls.BLOCK_TEXT
        raise ValueError(f"Unsupported input format '{hint}', expected 'tabular' or 'block-text'")


@dataclass(frozen=True)
class AnalysisResult:
    records: list[WorkRecord]
    summary: StatisticsSummary
    input_format: InputFormat


def ingest(raw_text: str, format_hint: "str | InputFormat") -> list[WorkRecord]:
    """Parse raw export text with the adapter named by format_hint."""

    input_format = InputFormat.from_hint(format_hint)
    if not raw_text.strip():
        return []
    if input_format is InputFormat.TABULAR:
        return csv_adapter.parse_text(raw_text)
    return text_adapter.parse_text(raw_text)


def analyze(raw_text: str, format_hint: "str | InputFormat") -> AnalysisResult:
    """Run ingest, category backfill and aggregation over one payload."""

    input_format = InputFormat.from_hint(format_hint)
    records = backfill(ingest(raw_text, input_format))
    if not records:
        logger.info("No records found in %s input", input_format.value)
        return AnalysisResult([], StatisticsSummary.empty(), input_format)

    logger.info("Analyzing %d records from %s input", len(records), input_format.value)
    return AnalysisResult(records, aggregate(records), input_format)


def guess_format(file_name: str) -> InputFormat:
    """Uploaded .csv files are tabular, anything else is block text."""

    if Path(file_name).suffix.lower() == ".csv":
        return InputFormat.TABULAR
    return InputFormat.BLOCK_TEXT


def read_payload(path: str | Path, max_bytes: int) -> str:
    """Read a payload file as UTF-8 text, refusing files over max_bytes."""

    path = Path(path)
    size = path.stat().st_size
    if size > max_bytes:
        raise ValueError(f"{path.name} is {size} bytes, larger than the {max_bytes} byte limit")
    return path.read_text(encoding="utf-8-sig")
