"""Analytics engine: every aggregate view over one owner's idea history."""
import hashlib
from typing import Optional, Sequence

import structlog

from idea_validator.analytics.flavor import FlavorSource
from idea_validator.analytics.pitch import pitch_analytics
from idea_validator.analytics.plans import (
    deployment_category_counts,
    deployment_complexity_counts,
    deployment_taxonomy,
    development_category_counts,
    development_taxonomy,
)
from idea_validator.analytics.projections import (
    competitive_report,
    financial_report,
    market_insights,
)
from idea_validator.analytics.roadmap import roadmap_report
from idea_validator.analytics.scores import score_distribution, score_series, summary_stats
from idea_validator.models.analytics import (
    DashboardResponse,
    FinancialReport,
    PitchAnalytics,
    RoadmapReport,
)
from idea_validator.models.idea import IdeaRecord

logger = structlog.get_logger(__name__)


def records_digest(records: Sequence[IdeaRecord]) -> str:
    """Stable fingerprint of a record snapshot, used as a cache key."""
    h = hashlib.sha256()
    for record in records:
        h.update(record.model_dump_json().encode("utf-8"))
        h.update(b"\n")
    return h.hexdigest()[:32]


class AnalyticsEngine:
    """Compute chart-ready aggregates from an immutable record snapshot.

    The engine holds no state besides its FlavorSource; records are expected
    newest-first and already normalized. Records without an analysis are
    skipped by every analysis-dependent view.

    Parameters
    ----------
    flavor:
        Random source for non-predictive labels. Defaults to a stable source
        so repeated views of one idea agree.
    """

    def __init__(self, flavor: Optional[FlavorSource] = None) -> None:
        self.flavor = flavor or FlavorSource()

    def build_dashboard(self, records: Sequence[IdeaRecord]) -> DashboardResponse:
        records = list(records)
        developments = development_taxonomy(records)
        steps = deployment_taxonomy(records)
        dashboard = DashboardResponse(
            summary=summary_stats(records),
            score_series=score_series(records),
            score_distribution=score_distribution(records),
            developments=developments,
            development_categories=development_category_counts(developments),
            deployment_steps=steps,
            deployment_categories=deployment_category_counts(steps),
            deployment_complexity=deployment_complexity_counts(steps),
            roadmap=roadmap_report(records, self.flavor),
            pitch=pitch_analytics(records, self.flavor),
            market_insights=market_insights(records, self.flavor),
            financials=financial_report(records),
            competitive=competitive_report(records, self.flavor),
        )
        logger.info(
            "dashboard_built",
            records=len(records),
            scored=dashboard.summary.scored_ideas,
            developments=len(developments),
            deployment_steps=len(steps),
            stable_flavor=self.flavor.stable,
        )
        return dashboard

    def roadmap(self, records: Sequence[IdeaRecord]) -> RoadmapReport:
        return roadmap_report(list(records), self.flavor)

    def pitch(self, records: Sequence[IdeaRecord]) -> PitchAnalytics:
        return pitch_analytics(list(records), self.flavor)

    def financials(self, records: Sequence[IdeaRecord]) -> FinancialReport:
        return financial_report(list(records))
