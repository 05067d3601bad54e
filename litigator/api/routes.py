"""
FastAPI routes for the analytics dashboard, per-case deadline lookups and firm-wide deadline views.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool

from litigator.analytics.models import to_dict

router = APIRouter()
analytics_router = APIRouter(prefix="/api/analytics", tags=["analytics"])
cases_router = APIRouter(prefix="/api/cases", tags=["cases"])
deadlines_router = APIRouter(prefix="/api/deadlines", tags=["deadlines"])


def get_app_state(request: Request):
    return request.app.state


AsOf = Annotated[Optional[datetime], Query(description="Reference time for the report (defaults to the server clock).")]


@router.get("/health")
async def health():
    return {"status": "ok"}


@analytics_router.get("/attorney-performance")
async def attorney_performance(as_of: AsOf = None, state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.attorney_performance, as_of)
    return [to_dict(row) for row in rows]


@analytics_router.get("/case-predictions")
async def case_predictions(as_of: AsOf = None, state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.case_predictions, as_of)
    return [to_dict(row) for row in rows]


@analytics_router.get("/critical-cases")
async def critical_cases(as_of: AsOf = None, state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.critical_cases, as_of)
    return [to_dict(row) for row in rows]


@analytics_router.get("/monthly-trends")
async def monthly_trends(state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.monthly_trends)
    return [to_dict(row) for row in rows]


@analytics_router.get("/deadline-performance")
async def deadline_performance(as_of: AsOf = None, state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.deadline_performance, as_of)
    return [to_dict(row) for row in rows]


@cases_router.get("/{case_number}/upcoming-deadlines")
async def upcoming_deadlines(
    case_number: str,
    days: Optional[int] = Query(None, ge=0, le=365),
    as_of: AsOf = None,
    state=Depends(get_app_state),
):
    """Incomplete deadlines due within ``days`` (overdue ones included), earliest first."""
    deadlines = await run_in_threadpool(state.analytics.upcoming_deadlines, case_number, days, as_of)
    if deadlines is None:
        raise HTTPException(status_code=404, detail="Case not found.")
    return {"case_number": case_number, "deadlines": [to_dict(d) for d in deadlines]}


@deadlines_router.get("/upcoming")
async def firm_upcoming_deadlines(
    days: int = Query(30, ge=0, le=365),
    as_of: AsOf = None,
    state=Depends(get_app_state),
):
    """Incomplete deadlines across all cases due within the next ``days``."""
    rows = await run_in_threadpool(state.analytics.firm_upcoming_deadlines, days, as_of)
    return [to_dict(row) for row in rows]


@deadlines_router.get("/overdue")
async def overdue_deadlines(as_of: AsOf = None, state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.overdue_deadlines, as_of)
    return [to_dict(row) for row in rows]


@deadlines_router.get("/critical")
async def critical_deadlines(as_of: AsOf = None, state=Depends(get_app_state)):
    rows = await run_in_threadpool(state.analytics.critical_deadlines, as_of)
    return [to_dict(row) for row in rows]


router.include_router(analytics_router)
router.include_router(cases_router)
router.include_router(deadlines_router)
