"""Payout and hour statistics over work records."""

from __future__ import annotations

import logging

from task_viewer.schema import PayType, StatisticsSummary, WorkRecord

logger = logging.getLogger(__name__)


def aggregate(records: list[WorkRecord]) -> StatisticsSummary:
    """Compute totals per pay-type bucket, total hours and per-task averages."""

    task_count = 0
    task_minutes = 0.0
    tasks_value = exceeded_value = other_value = 0.0
    task_hours = exceeded_hours = other_hours = 0.0
    total_hours = 0.0

    for record in records:
        hours = record.duration_minutes / 60.0
        total_hours += hours

        if record.pay_type is PayType.TASK:
            task_count += 1
            task_minutes += record.duration_minutes
            tasks_value += record.value
            task_hours += hours
        elif record.pay_type is PayType.EXCEEDED_TIME:
            exceeded_value += record.value
            exceeded_hours += hours
        else:
            if record.pay_type is PayType.UNRECOGNIZED:
                logger.warning("Unknown pay type %r on item %r, counted as other", record.raw_type, record.id)
            other_value += record.value
            other_hours += hours

    paid_value = tasks_value + exceeded_value
    return StatisticsSummary(
        total_tasks=task_count,
        tasks_value=tasks_value,
        exceeded_time_value=exceeded_value,
        other_value=other_value,
        total_value=paid_value + other_value,
        task_hours=task_hours,
        exceeded_time_hours=exceeded_hours,
        other_hours=other_hours,
        total_hours=total_hours,
        average_hourly_rate=paid_value / total_hours if total_hours > 0 else 0.0,
        avg_minutes_per_task=task_minutes / task_count if task_count else 0.0,
        avg_value_per_task=tasks_value / task_count if task_count else 0.0,
    )
