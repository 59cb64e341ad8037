"""Analytics endpoints over the signed-in user's idea history."""
import logging

from fastapi import APIRouter, Depends

from idea_validator.analytics.engine import AnalyticsEngine, records_digest
from idea_validator.analytics.flavor import FlavorSource
from idea_validator.config import get_settings
from idea_validator.errors import FetchFailure
from idea_validator.models import (
    CurrentUser,
    DashboardResponse,
    FinancialReport,
    IdeaRecord,
    PitchAnalytics,
    RoadmapReport,
)
from idea_validator.pipelines.idea_history import load_idea_history
from idea_validator.routers.deps import require_user
from idea_validator.services import CacheKeys, get_redis_cache, get_snowflake_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/analytics", tags=["Analytics"])


def _engine() -> AnalyticsEngine:
    settings = get_settings()
    return AnalyticsEngine(
        FlavorSource(
            stable=settings.analytics_stable_flavor,
            seed=settings.analytics_flavor_seed,
        )
    )


def _records(owner_id: str) -> list[IdeaRecord]:
    """History snapshot; a failed read is treated as an empty history."""
    try:
        return load_idea_history(get_snowflake_service(), owner_id)
    except FetchFailure as exc:
        logger.error(f"Analytics fetch failed for {owner_id}: {exc}")
        return []


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Analytics Dashboard",
)
async def get_dashboard(user: CurrentUser = Depends(require_user)):
    """Every aggregate over the user's ideas.

    Cached per owner and record snapshot, so a new submission produces a new
    cache entry instead of a stale hit.
    """
    settings = get_settings()
    records = _records(user.id)
    engine = _engine()
    if not records or not settings.analytics_stable_flavor:
        return engine.build_dashboard(records)

    cache = get_redis_cache()
    cache_key = CacheKeys.dashboard(user.id, records_digest(records))
    cached = cache.get(cache_key, DashboardResponse)
    if cached:
        return cached

    dashboard = engine.build_dashboard(records)
    cache.set(cache_key, dashboard, settings.cache_ttl_dashboard)
    return dashboard


@router.get(
    "/roadmap",
    response_model=RoadmapReport,
    summary="Roadmap Analysis",
)
async def get_roadmap(user: CurrentUser = Depends(require_user)):
    """Roadmap rows, the per-idea quarter grid and the priority distribution."""
    return _engine().roadmap(_records(user.id))


@router.get(
    "/pitch",
    response_model=PitchAnalytics,
    summary="Pitch Analytics",
)
async def get_pitch_analytics(user: CurrentUser = Depends(require_user)):
    return _engine().pitch(_records(user.id))


@router.get(
    "/financials",
    response_model=FinancialReport,
    summary="Financial Projections",
)
async def get_financials(user: CurrentUser = Depends(require_user)):
    return _engine().financials(_records(user.id))
