"""Display formatting for summaries and record tables."""

from __future__ import annotations

from task_viewer.schema import PLACEHOLDER, PayType, StatisticsSummary, WorkRecord


def format_money(value: float) -> str:
    return f"${value:.2f}"


def format_hours(hours: float) -> str:
    """Format fractional hours, e.g. 3.5 -> "3.50 h (3h 30min)"."""

    whole = int(hours)
    minutes = int((hours - whole) * 60)
    return f"{hours:.2f} h ({whole}h {minutes}min)"


def format_avg_time(minutes: float) -> str:
    """Format fractional minutes, e.g. 1.5 -> "1m 30s"."""

    whole = int(minutes)
    seconds = int((minutes - whole) * 60)
    return f"{whole}m {seconds}s"


def hour_percentages(summary: StatisticsSummary) -> tuple[float, float, float]:
    """Share of total hours spent on tasks, exceeded time and other items."""

    if summary.total_hours <= 0:
        return 0.0, 0.0, 0.0
    return (
        summary.task_hours / summary.total_hours * 100.0,
        summary.exceeded_time_hours / summary.total_hours * 100.0,
        summary.other_hours / summary.total_hours * 100.0,
    )


def summary_rows(summary: StatisticsSummary) -> dict[str, str]:
    return {
        "Tasks": str(summary.total_tasks),
        "Total hours": format_hours(summary.total_hours),
        "Total value": format_money(summary.total_value),
        "Tasks value": format_money(summary.tasks_value),
        "Exceeded time value": format_money(summary.exceeded_time_value),
        "Other value": format_money(summary.other_value),
        "Task hours": format_hours(summary.task_hours),
        "Exceeded time hours": format_hours(summary.exceeded_time_hours),
        "Other hours": format_hours(summary.other_hours),
        "Average hourly rate": format_money(summary.average_hourly_rate),
        "Average time per task": format_avg_time(summary.avg_minutes_per_task),
        "Average value per task": format_money(summary.avg_value_per_task),
    }


def _type_label(record: WorkRecord) -> str:
    if record.pay_type is PayType.UNRECOGNIZED:
        return record.raw_type
    return record.pay_type.label


def format_records(records: list[WorkRecord]) -> list[dict[str, str]]:
    """Rows for the details table, one per record."""

    rows = []
    for record in records:
        rows.append(
            {
                "Date": record.date,
                "ID": record.id,
                "Category": record.category,
                "Duration": record.duration or PLACEHOLDER,
                "Rate": f"${record.rate:.2f}/hr" if record.rate > 0 else PLACEHOLDER,
                "Value": format_money(record.value),
                "Type": _type_label(record),
                "Status": record.status,
                "Minutes": f"{record.duration_minutes:.2f} mins" if record.duration_minutes > 0 else PLACEHOLDER,
            }
        )
    return rows
