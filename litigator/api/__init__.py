"""
HTTP routes for Litigator.
"""

from .routes import router

__all__ = ["router"]
