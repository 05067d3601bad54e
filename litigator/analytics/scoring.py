"""
Fixed-weight scoring formulas for cases and attorneys.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from litigator.analytics import metrics
from litigator.analytics.models import CaseSnapshot, PredictedOutcome

# Risk score weights
RISK_PER_OVERDUE = 30
RISK_AGED_CASE = 50
AGED_CASE_DAYS = 365
RISK_HIGH_VALUE = 25
HIGH_VALUE_THRESHOLD = Decimal("1000000")

# Outcome classification thresholds (attorney success rate, percent)
LIKELY_SUCCESS_RATE = 80
HIGH_RISK_RATE = 50
HIGH_RISK_OVERDUE = 3

# Priority score weights
PRIORITY_PER_OVERDUE = 50
PRIORITY_PER_DAY = 10
PRIORITY_VALUE_BONUS = 25
PRIORITY_VALUE_THRESHOLD = Decimal("100000")
CRITICAL_WINDOW_DAYS = 7

# Performance score weights
PERFORMANCE_PER_COMPLETED = 100
PERFORMANCE_PER_OVERDUE = 50


def _exceeds(value: Optional[Decimal], threshold: Decimal) -> bool:
    # An absent estimate never exceeds a threshold.
    return value is not None and value > threshold


def risk_score(
    overdue_count: int,
    case_age_days: int,
    attorney_success_rate: float,
    estimated_value: Optional[Decimal] = None,
) -> float:
    """Weighted likelihood of an unfavourable outcome; higher is riskier."""
    score = float(overdue_count * RISK_PER_OVERDUE)
    if case_age_days > AGED_CASE_DAYS:
        score += RISK_AGED_CASE
    score += 100 - attorney_success_rate
    if _exceeds(estimated_value, HIGH_VALUE_THRESHOLD):
        score += RISK_HIGH_VALUE
    return score


def predict_outcome(overdue_count: int, attorney_success_rate: float) -> PredictedOutcome:
    if overdue_count == 0 and attorney_success_rate > LIKELY_SUCCESS_RATE:
        return PredictedOutcome.LIKELY_SUCCESS
    if overdue_count > HIGH_RISK_OVERDUE or attorney_success_rate < HIGH_RISK_RATE:
        return PredictedOutcome.HIGH_RISK
    return PredictedOutcome.MODERATE_RISK


def priority_score(
    overdue_count: int,
    next_deadline_days_away: Optional[int],
    estimated_value: Optional[Decimal] = None,
) -> float:
    """Urgency of attention for critical-case triage; higher is more urgent."""
    score = float(overdue_count * PRIORITY_PER_OVERDUE)
    if next_deadline_days_away is not None:
        score += max(0, CRITICAL_WINDOW_DAYS - next_deadline_days_away) * PRIORITY_PER_DAY
    if _exceeds(estimated_value, PRIORITY_VALUE_THRESHOLD):
        score += PRIORITY_VALUE_BONUS
    return score


def is_critical(case: CaseSnapshot, now: datetime) -> bool:
    """A case is critical when an incomplete deadline is overdue or due within the window."""
    if metrics.overdue_count(case, now) > 0:
        return True
    return bool(metrics.upcoming_within_days(case, now, CRITICAL_WINDOW_DAYS))


def performance_score(completed_cases: int, overdue_deadlines: int) -> int:
    # Not floored at zero; the leaderboard ranks raw values.
    return completed_cases * PERFORMANCE_PER_COMPLETED - overdue_deadlines * PERFORMANCE_PER_OVERDUE
