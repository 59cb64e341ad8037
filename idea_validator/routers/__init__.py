"""Routers package - API endpoint routers."""
from .health import router as health_router
from .ideas import router as ideas_router
from .analytics import router as analytics_router

__all__ = [
    "health_router",
    "ideas_router",
    "analytics_router",
]
