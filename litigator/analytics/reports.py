"""
Dashboard reports built from case and attorney snapshots.

Each report is a pure function of its inputs and an explicit ``now``. A record
that cannot be transformed is logged and left out; it never aborts the report.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from litigator.analytics import metrics, scoring
from litigator.analytics.models import (
    NO_UPCOMING_DEADLINES,
    UNKNOWN_PLACEHOLDER,
    AttorneyAggregate,
    AttorneyPerformance,
    CaseOutcomePrediction,
    CaseSnapshot,
    CaseStatus,
    CriticalCase,
    DeadlineEntry,
    DeadlinePerformance,
    DeadlineSnapshot,
    MonthlyTrend,
)

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

T = TypeVar("T")
R = TypeVar("R")


def _transform_each(records: Iterable[T], transform: Callable[[T], Optional[R]], report: str) -> list[R]:
    """Apply ``transform`` to every record, skipping (and logging) records that fail."""
    results: list[R] = []
    for record in records:
        try:
            row = transform(record)
        except (AttributeError, TypeError, ValueError, ArithmeticError) as exc:
            key = getattr(record, "case_number", None) or getattr(record, "bar_number", None)
            logger.warning("Skipping %s in %s report: %s", key, report, exc)
            continue
        if row is not None:
            results.append(row)
    return results


def _name_or_placeholder(name: Optional[str]) -> str:
    return name if name else UNKNOWN_PLACEHOLDER


def _value_or_zero(value: Optional[Decimal]) -> Decimal:
    return value if value is not None else Decimal(0)


def _is_active(case: CaseSnapshot) -> bool:
    return case.status is not None and case.status.is_active


def attorney_leaderboard(attorneys: Sequence[AttorneyAggregate], now: datetime) -> list[AttorneyPerformance]:
    """Active attorneys ranked by total estimated revenue, highest first."""

    def summarize(attorney: AttorneyAggregate) -> dict:
        cases = attorney.cases_assigned
        total_cases = len(cases)
        completed = sum(1 for c in cases if c.status is CaseStatus.CLOSED)
        overdue = sum(metrics.overdue_count(c, now) for c in cases)
        # Missing estimates count as zero toward revenue and averages.
        total_revenue = sum((_value_or_zero(c.estimated_value) for c in cases), Decimal(0))
        return {
            "attorney": attorney,
            "total_revenue": total_revenue,
            "avg_case_value": total_revenue / total_cases if total_cases else Decimal(0),
            "completed": completed,
            "active": sum(1 for c in cases if _is_active(c)),
            "total_cases": total_cases,
            "overdue": overdue,
            "completion_rate": Decimal(completed) / Decimal(total_cases) * 100 if total_cases else Decimal(0),
        }

    summaries = _transform_each((a for a in attorneys if a.is_active), summarize, "attorney-performance")
    summaries.sort(key=lambda s: s["total_revenue"], reverse=True)

    return [
        AttorneyPerformance(
            rank=index + 1,
            attorney_name=_name_or_placeholder(s["attorney"].display_name),
            bar_number=s["attorney"].bar_number,
            email=s["attorney"].email,
            total_revenue=s["total_revenue"],
            avg_case_value=s["avg_case_value"],
            completed_cases=s["completed"],
            active_cases=s["active"],
            total_cases=s["total_cases"],
            overdue_deadlines=s["overdue"],
            completion_rate=s["completion_rate"],
            performance_score=scoring.performance_score(s["completed"], s["overdue"]),
        )
        for index, s in enumerate(summaries)
    ]


def case_outcome_predictions(cases: Sequence[CaseSnapshot], now: datetime) -> list[CaseOutcomePrediction]:
    """
    Risk-ranked outcome predictions for Active/Open cases.

    ``cases`` must hold every case (closed ones included) so that attorney
    success rates reflect each attorney's full history.
    """
    success_rates = metrics.attorney_success_rates(cases)

    def predict(case: CaseSnapshot) -> CaseOutcomePrediction:
        overdue = metrics.overdue_count(case, now)
        age = metrics.case_age_days(case, now)
        success_rate = metrics.success_rate_for(success_rates, case.attorney_id)
        return CaseOutcomePrediction(
            case_number=case.case_number,
            case_title=case.case_title,
            client_name=_name_or_placeholder(case.client_name),
            attorney_name=_name_or_placeholder(case.attorney_name),
            days_open=age,
            overdue_count=overdue,
            completion_rate=metrics.completion_rate(case),
            risk_score=scoring.risk_score(overdue, age, success_rate, case.estimated_value),
            predicted_outcome=scoring.predict_outcome(overdue, success_rate),
            estimated_value=_value_or_zero(case.estimated_value),
        )

    predictions = _transform_each((c for c in cases if _is_active(c)), predict, "case-predictions")
    predictions.sort(key=lambda p: p.risk_score, reverse=True)
    return predictions


def critical_cases(cases: Sequence[CaseSnapshot], now: datetime) -> list[CriticalCase]:
    """Active/Open cases with overdue or imminent deadlines, most urgent first."""
    workloads = metrics.active_case_counts(cases)
    window = scoring.CRITICAL_WINDOW_DAYS

    def triage(case: CaseSnapshot) -> Optional[CriticalCase]:
        if not scoring.is_critical(case, now):
            return None
        overdue = metrics.overdue_count(case, now)
        upcoming = metrics.next_deadline(case, now, window)
        days_away = metrics.days_between(upcoming.due_date, now) if upcoming is not None else None
        if upcoming is None:
            next_label = NO_UPCOMING_DEADLINES
        else:
            next_label = upcoming.description or NO_UPCOMING_DEADLINES
        return CriticalCase(
            case_number=case.case_number,
            case_title=case.case_title,
            client_name=_name_or_placeholder(case.client_name),
            attorney_name=_name_or_placeholder(case.attorney_name),
            case_value=_value_or_zero(case.estimated_value),
            case_age=metrics.case_age_days(case, now),
            next_deadline=next_label,
            next_deadline_date=upcoming.due_date if upcoming is not None else None,
            days_until_deadline=days_away,
            overdue_count=overdue,
            attorney_workload=workloads.get(case.attorney_id, 0),
            priority_score=scoring.priority_score(overdue, days_away, case.estimated_value),
        )

    rows = _transform_each((c for c in cases if _is_active(c)), triage, "critical-cases")
    rows.sort(key=lambda r: r.priority_score, reverse=True)
    return rows


def monthly_trends(cases: Sequence[CaseSnapshot]) -> list[MonthlyTrend]:
    """New cases and estimated revenue per filing month, oldest month first."""
    buckets: dict[tuple[int, int], list[Decimal]] = defaultdict(list)

    def bucket(case: CaseSnapshot) -> tuple[int, int]:
        key = (case.filing_date.year, case.filing_date.month)
        buckets[key].append(_value_or_zero(case.estimated_value))
        return key

    _transform_each(cases, bucket, "monthly-trends")

    trends = []
    for (year, month), values in sorted(buckets.items()):
        total = sum(values, Decimal(0))
        trends.append(
            MonthlyTrend(
                year=year,
                month=month,
                period=f"{MONTH_ABBREVIATIONS[month - 1]} {year}",
                new_cases=len(values),
                total_revenue=total,
                avg_case_value=total / len(values),
            )
        )
    return trends


def deadline_performance(cases: Sequence[CaseSnapshot], now: datetime) -> list[DeadlinePerformance]:
    """Per-case deadline punctuality, best on-time percentage first."""

    def measure(case: CaseSnapshot) -> DeadlinePerformance:
        on_time = late = pending = overdue = 0
        for deadline in case.deadlines:
            if deadline.is_completed:
                # A completed deadline without a completion date is neither on time nor late.
                if deadline.completed_date is None:
                    continue
                if deadline.completed_date <= deadline.due_date:
                    on_time += 1
                else:
                    late += 1
            elif deadline.due_date < now:
                overdue += 1
            else:
                pending += 1
        total = len(case.deadlines)
        return DeadlinePerformance(
            case_number=case.case_number,
            attorney_name=_name_or_placeholder(case.attorney_name),
            total_deadlines=total,
            completed_on_time=on_time,
            completed_late=late,
            still_pending=pending,
            overdue=overdue,
            on_time_percentage=on_time / total * 100 if total else 0.0,
        )

    rows = _transform_each(cases, measure, "deadline-performance")
    rows.sort(key=lambda r: r.on_time_percentage, reverse=True)
    return rows


def _deadline_view(
    cases: Sequence[CaseSnapshot],
    now: datetime,
    select: Callable[[CaseSnapshot], Iterable[DeadlineSnapshot]],
    report: str,
) -> list[DeadlineEntry]:
    entries: list[DeadlineEntry] = []

    def collect(case: CaseSnapshot) -> None:
        attorney = _name_or_placeholder(case.attorney_name)
        rows = [
            DeadlineEntry(
                case_number=case.case_number,
                case_title=case.case_title,
                attorney_name=attorney,
                description=d.description,
                due_date=d.due_date,
                days_until_due=metrics.days_between(d.due_date, now),
                is_completed=d.is_completed,
                is_critical=d.is_critical,
            )
            for d in select(case)
        ]
        entries.extend(rows)

    _transform_each(cases, collect, report)
    entries.sort(key=lambda e: e.due_date)
    return entries


def upcoming_deadlines(cases: Sequence[CaseSnapshot], now: datetime, days: int = 30) -> list[DeadlineEntry]:
    """Incomplete deadlines across all cases due between ``now`` and ``now + days``, earliest first."""

    def select(case: CaseSnapshot) -> list[DeadlineSnapshot]:
        return [d for d in metrics.upcoming_within_days(case, now, days) if d.due_date >= now]

    return _deadline_view(cases, now, select, "upcoming-deadlines")


def overdue_deadlines(cases: Sequence[CaseSnapshot], now: datetime) -> list[DeadlineEntry]:
    """Incomplete deadlines across all cases that are already past due, oldest first."""

    def select(case: CaseSnapshot) -> list[DeadlineSnapshot]:
        return [d for d in case.deadlines if metrics.is_overdue(d, now)]

    return _deadline_view(cases, now, select, "overdue-deadlines")


def critical_deadlines(cases: Sequence[CaseSnapshot], now: datetime) -> list[DeadlineEntry]:
    """Incomplete deadlines flagged critical, whether or not they are past due."""

    def select(case: CaseSnapshot) -> list[DeadlineSnapshot]:
        return [d for d in case.deadlines if d.is_critical and not d.is_completed]

    return _deadline_view(cases, now, select, "critical-deadlines")
