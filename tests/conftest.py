"""
Shared pytest fixtures for Litigator tests.

Provides:
- A fixed reference time
- Factories for deadline and case snapshots
- Mock connection/cursor pair for query helpers
"""

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from litigator.analytics.models import CaseSnapshot, CaseStatus, DeadlineSnapshot


@pytest.fixture
def now():
    """Fixture providing the reference time used by every report."""
    return datetime(2025, 6, 15, 12, 0, 0)


@pytest.fixture
def make_deadline(now):
    """Factory for deadlines positioned relative to ``now`` (in days)."""

    def factory(days_from_now, completed=False, completed_offset=None, description="Deadline", critical=False):
        due = now + timedelta(days=days_from_now)
        completed_date = None
        if completed and completed_offset is not None:
            completed_date = due + timedelta(days=completed_offset)
        return DeadlineSnapshot(
            due_date=due,
            is_completed=completed,
            completed_date=completed_date,
            is_critical=critical,
            description=description,
        )

    return factory


@pytest.fixture
def make_case(now):
    """Factory for case snapshots with sensible defaults."""
    counter = {"n": 0}

    def factory(
        status=CaseStatus.ACTIVE,
        age_days=30,
        value=None,
        deadlines=None,
        attorney_id=1,
        attorney_name="Sarah Johnson",
        client_name="John Smith",
        case_number=None,
    ):
        counter["n"] += 1
        return CaseSnapshot(
            case_id=counter["n"],
            case_number=case_number or f"2025-CV-{counter['n']:04d}",
            case_title=f"Case {counter['n']}",
            filing_date=now - timedelta(days=age_days),
            status=status,
            estimated_value=Decimal(str(value)) if value is not None else None,
            client_name=client_name,
            attorney_id=attorney_id,
            attorney_name=attorney_name,
            deadlines=list(deadlines or []),
        )

    return factory


@pytest.fixture
def mock_cursor():
    """Mock cursor that works as a context manager."""
    cursor = MagicMock()
    cursor.fetchone = MagicMock(return_value=None)
    cursor.fetchall = MagicMock(return_value=[])
    cursor.__enter__ = MagicMock(return_value=cursor)
    cursor.__exit__ = MagicMock(return_value=None)
    return cursor


@pytest.fixture
def mock_connection(mock_cursor):
    """Mock psycopg connection whose cursor() returns ``mock_cursor``."""
    conn = MagicMock()
    conn.cursor = MagicMock(return_value=mock_cursor)
    conn.commit = MagicMock()
    return conn
