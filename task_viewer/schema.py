"""Core data schema for work records and their statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


class PayType(Enum):
    """Pay-type tags understood by the aggregator."""

    TASK = "Task"
    EXCEEDED_TIME = "ExceededTime"
    MISSION_REWARD = "MissionReward"
    OPERATION = "Operation"
    ADJUSTMENT = "Adjustment"
    UNRECOGNIZED = "Unrecognized"

    @classmethod
    def from_source(cls, code: str) -> "PayType":
        """Map a source pay-type code to a tag, case-insensitively."""

        return _PAY_TYPE_ALIASES.get(code.strip().lower(), cls.UNRECOGNIZED)

    @property
    def label(self) -> str:
        return _PAY_TYPE_LABELS[self]


_PAY_TYPE_ALIASES = {
    "prepay": PayType.TASK,
    "regularpay": PayType.TASK,
    "task": PayType.TASK,
    "overtimepay": PayType.EXCEEDED_TIME,
    "exceeded time": PayType.EXCEEDED_TIME,
    "exceededtime": PayType.EXCEEDED_TIME,
    "missionreward": PayType.MISSION_REWARD,
    "mission reward": PayType.MISSION_REWARD,
    "qaoperation": PayType.OPERATION,
    "operation": PayType.OPERATION,
    "adjustment": PayType.ADJUSTMENT,
}

_PAY_TYPE_LABELS = {
    PayType.TASK: "Task",
    PayType.EXCEEDED_TIME: "Exceeded Time",
    PayType.MISSION_REWARD: "Mission Reward",
    PayType.OPERATION: "Operation",
    PayType.ADJUSTMENT: "Adjustment",
    PayType.UNRECOGNIZED: "Other",
}

PLACEHOLDER = "-"


@dataclass(frozen=True)
class WorkRecord:
    """Normalized work record produced by both adapters."""

    date: str = ""
    id: str = ""
    category: str = ""
    duration: str = PLACEHOLDER
    duration_minutes: float = 0.0
    rate: float = 0.0
    value: float = 0.0
    pay_type: PayType = PayType.UNRECOGNIZED
    raw_type: str = ""
    status: str = ""

    @property
    def type(self) -> str:
        """Canonical tag, or the verbatim source tag when unrecognized."""

        if self.pay_type is PayType.UNRECOGNIZED:
            return self.raw_type
        return self.pay_type.value

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "id": self.id,
            "category": self.category,
            "duration": self.duration,
            "duration_minutes": self.duration_minutes,
            "rate": self.rate,
            "value": self.value,
            "type": self.type,
            "status": self.status,
        }


@dataclass(frozen=True)
class StatisticsSummary:
    """Totals and averages over one batch of work records."""

    total_tasks: int
    tasks_value: float
    exceeded_time_value: float
    other_value: float
    total_value: float
    task_hours: float
    exceeded_time_hours: float
    other_hours: float
    total_hours: float
    average_hourly_rate: float
    avg_minutes_per_task: float
    avg_value_per_task: float

    @classmethod
    def empty(cls) -> "StatisticsSummary":
        return cls(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    def to_dict(self) -> dict:
        return asdict(self)
