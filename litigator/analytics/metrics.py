"""
Per-case and per-attorney metrics derived from snapshot records.

Every function that depends on the current time takes ``now`` explicitly.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta
from typing import Iterable, Optional

from litigator.analytics.models import CaseSnapshot, CaseStatus, DeadlineSnapshot

ONE_DAY = timedelta(days=1)


def days_between(later: datetime, earlier: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, truncated toward zero."""
    return int((later - earlier) / ONE_DAY)


def case_age_days(case: CaseSnapshot, now: datetime) -> int:
    # Negative when the filing date lies in the future.
    return days_between(now, case.filing_date)


def is_overdue(deadline: DeadlineSnapshot, now: datetime) -> bool:
    return not deadline.is_completed and deadline.due_date < now


def overdue_count(case: CaseSnapshot, now: datetime) -> int:
    return sum(1 for d in case.deadlines if is_overdue(d, now))


def completed_count(case: CaseSnapshot) -> int:
    return sum(1 for d in case.deadlines if d.is_completed)


def completion_rate(case: CaseSnapshot) -> float:
    """Percentage of completed deadlines; a case without deadlines counts as fully complete."""
    total = len(case.deadlines)
    if total == 0:
        return 100.0
    return completed_count(case) / total * 100


def upcoming_within_days(case: CaseSnapshot, now: datetime, days: int) -> list[DeadlineSnapshot]:
    """
    Incomplete deadlines due on or before ``now + days``, earliest first.

    Already-overdue deadlines are included. Equal due dates keep their input order.
    """
    horizon = now + timedelta(days=days)
    pending = [d for d in case.deadlines if not d.is_completed and d.due_date <= horizon]
    return sorted(pending, key=lambda d: d.due_date)


def next_deadline(case: CaseSnapshot, now: datetime, days: int) -> Optional[DeadlineSnapshot]:
    upcoming = upcoming_within_days(case, now, days)
    return upcoming[0] if upcoming else None


def attorney_success_rates(cases: Iterable[CaseSnapshot]) -> dict[int, float]:
    """Closed cases as a percentage of all cases, keyed by attorney id."""
    totals: dict[int, int] = defaultdict(int)
    closed: dict[int, int] = defaultdict(int)
    for case in cases:
        if case.attorney_id is None:
            continue
        totals[case.attorney_id] += 1
        if case.status is CaseStatus.CLOSED:
            closed[case.attorney_id] += 1
    return {attorney_id: closed[attorney_id] / total * 100 for attorney_id, total in totals.items()}


def success_rate_for(rates: dict[int, float], attorney_id: Optional[int]) -> float:
    # Attorneys without cases (or cases without an attorney) have no track record.
    if attorney_id is None:
        return 0.0
    return rates.get(attorney_id, 0.0)


def active_case_counts(cases: Iterable[CaseSnapshot]) -> dict[int, int]:
    """Number of Active/Open cases per attorney id."""
    counts: dict[int, int] = defaultdict(int)
    for case in cases:
        if case.attorney_id is not None and case.status is not None and case.status.is_active:
            counts[case.attorney_id] += 1
    return dict(counts)
