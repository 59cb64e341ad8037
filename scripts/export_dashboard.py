"""scripts/export_dashboard.py

Export one owner's analytics dashboard from Snowflake as JSON.

Steps
-----
1. Load the owner's ideas          → newest first, analyses re-validated
2. Build the dashboard             → AnalyticsEngine
3. Print a summary table and write the JSON document

Usage
-----
    python scripts/export_dashboard.py --owner <user-id> [--out data/dashboard.json]
"""

from __future__ import annotations

import logging
import pathlib
import sys

import structlog

# ── app imports ───────────────────────────────────────────────────────────────
from idea_validator.analytics.engine import AnalyticsEngine
from idea_validator.analytics.flavor import FlavorSource
from idea_validator.config import get_settings
from idea_validator.models import DashboardResponse
from idea_validator.pipelines.idea_history import load_idea_history
from idea_validator.services.snowflake import SnowflakeService

# ── logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)
log = structlog.get_logger("export_dashboard")


def export_dashboard(owner_id: str, stable: bool = True) -> DashboardResponse:
    """Load an owner's history and compute the dashboard."""
    settings = get_settings()
    db = SnowflakeService()
    try:
        records = load_idea_history(db, owner_id)
    finally:
        db.disconnect()

    engine = AnalyticsEngine(FlavorSource(stable=stable, seed=settings.analytics_flavor_seed))
    return engine.build_dashboard(records)


def _print_summary(dashboard: DashboardResponse) -> None:
    """Pretty-print the headline statistics and the score series."""
    s = dashboard.summary
    print("\n" + "=" * 48)
    print(f"{'Total ideas':<28}{s.total_ideas:>20}")
    print(f"{'Scored ideas':<28}{s.scored_ideas:>20}")
    print(f"{'Average score':<28}{s.average_score:>20}")
    print(f"{'Highest score':<28}{s.highest_score:>20}")
    print(f"{'High potential (>=80)':<28}{s.high_potential:>20}")
    print(f"{'Success rate %':<28}{s.success_rate:>20}")
    print("=" * 48)
    for point in dashboard.score_series:
        print(f"{point.label:<10}  {point.value:>6.1f}  {point.excerpt}")
    print("=" * 48)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Export one owner's idea analytics dashboard")
    parser.add_argument("--owner", required=True, help="Owner (user) id")
    parser.add_argument("--out", default="data/dashboard.json", help="Output JSON path")
    parser.add_argument(
        "--unstable-flavor",
        action="store_true",
        help="Draw flavor fields from an unseeded generator",
    )
    args = parser.parse_args()

    log.info("export_started", owner=args.owner)
    dashboard = export_dashboard(args.owner, stable=not args.unstable_flavor)
    _print_summary(dashboard)

    out_path = pathlib.Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(dashboard.model_dump_json(indent=2))
    log.info("dashboard_written", path=str(out_path))
