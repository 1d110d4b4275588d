from task_viewer.display import format_avg_time, format_hours, format_money, format_records, hour_percentages, summary_rows
from task_viewer.metrics import aggregate
from task_viewer.schema import PayType, StatisticsSummary, WorkRecord


def test_formatters():
    assert format_money(12.5) == "$12.50"
    assert format_hours(3.5) == "3.50 h (3h 30min)"
    assert format_avg_time(1.5) == "1m 30s"


def test_hour_percentages():
    records = [
        WorkRecord(duration_minutes=90, pay_type=PayType.TASK),
        WorkRecord(duration_minutes=30, pay_type=PayType.EXCEEDED_TIME),
    ]
    assert hour_percentages(aggregate(records)) == (75.0, 25.0, 0.0)
    assert hour_percentages(StatisticsSummary.empty()) == (0.0, 0.0, 0.0)


def test_format_records_placeholders():
    rows = format_records(
        [
            WorkRecord(id="M1", value=92.75, pay_type=PayType.MISSION_REWARD, raw_type="MissionReward"),
            WorkRecord(id="B1", duration="1h", duration_minutes=60, rate=10, value=10, pay_type=PayType.UNRECOGNIZED, raw_type="Bonus"),
        ]
    )
    assert rows[0]["Rate"] == "-"
    assert rows[0]["Minutes"] == "-"
    assert rows[0]["Type"] == "Mission Reward"
    assert rows[0]["Value"] == "$92.75"
    assert rows[1]["Rate"] == "$10.00/hr"
    assert rows[1]["Minutes"] == "60.00 mins"
    assert rows[1]["Type"] == "Bonus"


def test_summary_rows():
    rows = summary_rows(StatisticsSummary.empty())
    assert rows["Tasks"] == "0"
    assert rows["Average time per task"] == "0m 0s"
