"""
Case analytics: metrics, scoring and dashboard reports.
"""

from .models import (
    AttorneyAggregate,
    CaseSnapshot,
    CaseStatus,
    DeadlineSnapshot,
    PredictedOutcome,
)
from .service import AnalyticsService

__all__ = [
    "AnalyticsService",
    "AttorneyAggregate",
    "CaseSnapshot",
    "CaseStatus",
    "DeadlineSnapshot",
    "PredictedOutcome",
]
