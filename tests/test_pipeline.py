from pathlib import Path

import pytest

from task_viewer.pipeline import InputFormat, analyze, guess_format, ingest, read_payload
from task_viewer.schema import PayType, StatisticsSummary

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"

CSV_TEXT = (
    "WorkDate,ItemId,Duration,RateApplied,Payout,PayType,ProjectName,Status\n"
    "2024-01-01,T1,1h,$10.00/hr,$10.00,PrePay,Proj A,Approved\n"
    "2024-01-01,T2,1h,$10.00/hr,$10.00,PrePay,-,Approved\n"
    "2024-01-01,T3,1h,$10.00/hr,$10.00,PrePay,-,Approved\n"
    "2024-01-01,T4,30m,$10.00/hr,$5.00,OvertimePay,,Approved\n"
)


def test_input_format_hints():
    assert InputFormat.from_hint("tabular") is InputFormat.TABULAR
    assert InputFormat.from_hint("CSV") is InputFormat.TABULAR
    assert InputFormat.from_hint("block-text") is InputFormat.BLOCK_TEXT
    assert InputFormat.from_hint("text") is InputFormat.BLOCK_TEXT
    with pytest.raises(ValueError):
        InputFormat.from_hint("xml")


def test_ingest_dispatches_on_hint():
    records = ingest(CSV_TEXT, "tabular")
    assert len(records) == 4
    assert ingest(CSV_TEXT, "block-text") == []


def test_ingest_empty_input():
    assert ingest("", "tabular") == []
    assert ingest("  \n", "block-text") == []


def test_analyze_end_to_end():
    result = analyze(CSV_TEXT, "tabular")
    assert result.input_format is InputFormat.TABULAR
    assert [r.category for r in result.records] == ["Proj A"] * 4
    summary = result.summary
    assert summary.total_hours == 3.5
    assert summary.tasks_value == 30.0
    assert summary.exceeded_time_value == 5.0
    assert summary.average_hourly_rate == pytest.approx(10.0)


def test_analyze_empty_gives_zero_summary():
    result = analyze("", "block-text")
    assert result.records == []
    assert result.summary == StatisticsSummary.empty()


def test_analyze_sample_files_agree():
    csv_result = analyze((EXAMPLES_DIR / "sample_dataset.csv").read_text(encoding="utf-8"), "tabular")
    text_result = analyze((EXAMPLES_DIR / "sample_tasks.txt").read_text(encoding="utf-8"), "block-text")
    assert len(csv_result.records) == 6
    assert len(text_result.records) == 4
    assert text_result.records[1].category == "Proj A"
    assert text_result.records[3].pay_type is PayType.MISSION_REWARD
    assert text_result.summary.total_tasks == 2
    assert text_result.summary.other_value == 92.75


def test_guess_format():
    assert guess_format("export.CSV") is InputFormat.TABULAR
    assert guess_format("tasks.txt") is InputFormat.BLOCK_TEXT
    assert guess_format("paste") is InputFormat.BLOCK_TEXT


def test_read_payload_limits(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("x" * 20, encoding="utf-8")
    assert read_payload(path, 100) == "x" * 20
    with pytest.raises(ValueError):
        read_payload(path, 10)
    with pytest.raises(OSError):
        read_payload(tmp_path / "missing.txt", 100)
