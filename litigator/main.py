"""
FastAPI entrypoint for Litigator.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from litigator.analytics import AnalyticsService
from litigator.api import router
from litigator.config import get_settings
from litigator.db.session import get_connection_pool


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    db_pool = get_connection_pool(settings)
    analytics = AnalyticsService(settings, db_pool)

    app = FastAPI(title="Litigator", version="0.1.0")
    app.include_router(router)
    app.state.settings = settings
    app.state.db_pool = db_pool
    app.state.analytics = analytics
    return app


app = create_app()
