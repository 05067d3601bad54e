"""
Snapshot records consumed by the analytics core and the report rows it produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

UNKNOWN_PLACEHOLDER = "Unknown"
NO_UPCOMING_DEADLINES = "No upcoming deadlines"


class CaseStatus(str, Enum):
    ACTIVE = "Active"
    OPEN = "Open"
    PENDING = "Pending"
    CLOSED = "Closed"
    ON_HOLD = "On Hold"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["CaseStatus"]:
        """Map a stored status string onto the enum using an exact, case-sensitive match."""
        if raw is None:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @property
    def is_active(self) -> bool:
        return self in (CaseStatus.ACTIVE, CaseStatus.OPEN)


class PredictedOutcome(str, Enum):
    LIKELY_SUCCESS = "Likely Success"
    MODERATE_RISK = "Moderate Risk"
    HIGH_RISK = "High Risk"


@dataclass(slots=True)
class DeadlineSnapshot:
    due_date: datetime
    is_completed: bool = False
    completed_date: Optional[datetime] = None
    is_critical: bool = False
    description: Optional[str] = None


@dataclass(slots=True)
class CaseSnapshot:
    case_number: str
    case_title: str
    filing_date: datetime
    status: Optional[CaseStatus]
    estimated_value: Optional[Decimal] = None
    client_name: Optional[str] = None
    attorney_id: Optional[int] = None
    attorney_name: Optional[str] = None
    deadlines: list[DeadlineSnapshot] = field(default_factory=list)
    case_id: Optional[int] = None


@dataclass(slots=True)
class AttorneyAggregate:
    attorney_id: int
    display_name: str
    bar_number: str
    email: Optional[str]
    cases_assigned: list[CaseSnapshot] = field(default_factory=list)
    is_active: bool = True


@dataclass(slots=True)
class AttorneyPerformance:
    rank: int
    attorney_name: str
    bar_number: str
    email: Optional[str]
    total_revenue: Decimal
    avg_case_value: Decimal
    completed_cases: int
    active_cases: int
    total_cases: int
    overdue_deadlines: int
    completion_rate: Decimal
    performance_score: int


@dataclass(slots=True)
class CaseOutcomePrediction:
    case_number: str
    case_title: str
    client_name: str
    attorney_name: str
    days_open: int
    overdue_count: int
    completion_rate: float
    risk_score: float
    predicted_outcome: PredictedOutcome
    estimated_value: Decimal


@dataclass(slots=True)
class CriticalCase:
    case_number: str
    case_title: str
    client_name: str
    attorney_name: str
    case_value: Decimal
    case_age: int
    next_deadline: str
    next_deadline_date: Optional[datetime]
    days_until_deadline: Optional[int]
    overdue_count: int
    attorney_workload: int
    priority_score: float


@dataclass(slots=True)
class MonthlyTrend:
    year: int
    month: int
    period: str
    new_cases: int
    total_revenue: Decimal
    avg_case_value: Decimal


@dataclass(slots=True)
class DeadlinePerformance:
    case_number: str
    attorney_name: str
    total_deadlines: int
    completed_on_time: int
    completed_late: int
    still_pending: int
    overdue: int
    on_time_percentage: float


@dataclass(slots=True)
class DeadlineEntry:
    """One deadline in a firm-wide deadline view, tagged with its case."""

    case_number: str
    case_title: str
    attorney_name: str
    description: Optional[str]
    due_date: datetime
    days_until_due: int
    is_completed: bool
    is_critical: bool


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        # Money stays exact; fixed-point text, never exponent notation.
        return format(value, "f")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    if hasattr(value, "__dataclass_fields__"):
        return to_dict(value)
    return value


def to_dict(record: Any) -> dict:
    """Convert a report or snapshot dataclass into a JSON-safe dict (decimals as strings)."""
    return {f.name: _jsonable(getattr(record, f.name)) for f in fields(record)}
