"""
Analytics service binding the dashboard reports to the case database.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from psycopg import OperationalError
from psycopg_pool import ConnectionPool
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from litigator.analytics import metrics, reports
from litigator.analytics.models import (
    AttorneyAggregate,
    AttorneyPerformance,
    CaseOutcomePrediction,
    CaseSnapshot,
    CriticalCase,
    DeadlineEntry,
    DeadlinePerformance,
    DeadlineSnapshot,
    MonthlyTrend,
)
from litigator.config import Settings
from litigator.db import queries

logger = logging.getLogger(__name__)

db_retry = retry(
    retry=retry_if_exception_type(OperationalError),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    stop=stop_after_attempt(3),
    reraise=True,
)


class AnalyticsService:
    """Loads a fresh snapshot per call and runs the requested report over it."""

    def __init__(
        self,
        settings: Settings,
        db_pool: ConnectionPool,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.settings = settings
        self.db_pool = db_pool
        self.clock = clock

    def _now(self, now: Optional[datetime]) -> datetime:
        now = now if now is not None else self.clock()
        # Stored timestamps are naive local time.
        if now.tzinfo is not None:
            now = now.astimezone().replace(tzinfo=None)
        return now

    @db_retry
    def _load_cases(self) -> list[CaseSnapshot]:
        with self.db_pool.connection() as conn:
            cases = queries.fetch_case_snapshots(conn)
        logger.debug("Loaded %d case snapshots", len(cases))
        return cases

    @db_retry
    def _load_attorneys(self) -> list[AttorneyAggregate]:
        with self.db_pool.connection() as conn:
            return queries.fetch_attorney_aggregates(conn)

    @db_retry
    def _load_case(self, case_number: str) -> Optional[CaseSnapshot]:
        with self.db_pool.connection() as conn:
            return queries.fetch_case_snapshot(conn, case_number)

    def attorney_performance(self, now: Optional[datetime] = None) -> list[AttorneyPerformance]:
        return reports.attorney_leaderboard(self._load_attorneys(), self._now(now))

    def case_predictions(self, now: Optional[datetime] = None) -> list[CaseOutcomePrediction]:
        return reports.case_outcome_predictions(self._load_cases(), self._now(now))

    def critical_cases(self, now: Optional[datetime] = None) -> list[CriticalCase]:
        return reports.critical_cases(self._load_cases(), self._now(now))

    def monthly_trends(self) -> list[MonthlyTrend]:
        return reports.monthly_trends(self._load_cases())

    def deadline_performance(self, now: Optional[datetime] = None) -> list[DeadlinePerformance]:
        return reports.deadline_performance(self._load_cases(), self._now(now))

    def upcoming_deadlines(
        self,
        case_number: str,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Optional[list[DeadlineSnapshot]]:
        """Incomplete deadlines due within ``days`` for one case, or None if the case does not exist."""
        case = self._load_case(case_number)
        if case is None:
            return None
        window = days if days is not None else self.settings.critical_window_days
        return metrics.upcoming_within_days(case, self._now(now), window)

    def firm_upcoming_deadlines(self, days: int = 30, now: Optional[datetime] = None) -> list[DeadlineEntry]:
        return reports.upcoming_deadlines(self._load_cases(), self._now(now), days)

    def overdue_deadlines(self, now: Optional[datetime] = None) -> list[DeadlineEntry]:
        return reports.overdue_deadlines(self._load_cases(), self._now(now))

    def critical_deadlines(self, now: Optional[datetime] = None) -> list[DeadlineEntry]:
        return reports.critical_deadlines(self._load_cases(), self._now(now))
