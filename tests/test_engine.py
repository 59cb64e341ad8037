"""End-to-end tests for the analytics engine."""
from idea_validator.analytics.engine import AnalyticsEngine, records_digest
from idea_validator.analytics.flavor import FlavorSource
from idea_validator.models import DashboardResponse, DeploymentCategory, DevelopmentCategory, Level, ScoreBand


class TestDashboard:
    """A single coffee-subscription idea flowing through every view."""

    def test_single_idea(self, make_record, sample_analysis_payload):
        record = make_record(sample_analysis_payload)
        dashboard = AnalyticsEngine().build_dashboard([record])

        assert [(p.label, p.value) for p in dashboard.score_series] == [("Idea 1", 72)]
        assert [(b.band, b.count) for b in dashboard.score_distribution] == [(ScoreBand.GOOD, 1)]

        assert dashboard.developments[0].text == "Build subscription platform"
        assert dashboard.developments[0].category == DevelopmentCategory.TECHNOLOGY

        assert dashboard.deployment_steps[0].text == "Develop MVP"
        assert dashboard.deployment_steps[0].category == DeploymentCategory.DEVELOPMENT
        assert dashboard.deployment_steps[0].phase == 1

        q1 = dashboard.roadmap.rows[0]
        assert (q1.quarter, q1.goals, q1.priority) == ("Q1", "Launch pilot", Level.HIGH)
        assert len(dashboard.roadmap.rows) == 4

        assert dashboard.pitch.total_pitches == 1
        assert dashboard.summary.total_ideas == 1
        assert dashboard.financials.projections[0].investment_required == 760000
        assert len(dashboard.market_insights) == 1
        assert len(dashboard.competitive.positions) == 1

    def test_empty_history(self):
        dashboard = AnalyticsEngine().build_dashboard([])
        assert dashboard == DashboardResponse()

    def test_records_without_analysis_are_skipped(self, make_record):
        dashboard = AnalyticsEngine().build_dashboard([make_record(None), make_record(None)])
        assert dashboard.summary.total_ideas == 2
        assert dashboard.score_series == []
        assert dashboard.developments == []
        assert dashboard.roadmap.rows == []
        assert dashboard.financials.projections == []

    def test_stable_flavor_is_repeatable(self, make_record, sample_analysis_payload):
        records = [make_record(sample_analysis_payload) for _ in range(3)]
        engine = AnalyticsEngine(FlavorSource(stable=True, seed="s"))
        assert engine.build_dashboard(records) == engine.build_dashboard(records)

    def test_score_derived_fields_ignore_flavor(self, make_record, sample_analysis_payload):
        records = [make_record(sample_analysis_payload)]
        a = AnalyticsEngine(FlavorSource(stable=True, seed="a")).build_dashboard(records)
        b = AnalyticsEngine(FlavorSource(stable=False)).build_dashboard(records)
        assert a.financials == b.financials
        assert a.score_series == b.score_series
        assert a.summary == b.summary

    def test_views_match_dashboard(self, make_record, sample_analysis_payload, stable_flavor):
        records = [make_record(sample_analysis_payload)]
        engine = AnalyticsEngine(stable_flavor)
        dashboard = engine.build_dashboard(records)
        assert engine.roadmap(records) == dashboard.roadmap
        assert engine.pitch(records) == dashboard.pitch
        assert engine.financials(records) == dashboard.financials


class TestRecordsDigest:

    def test_same_records_same_digest(self, make_record, sample_analysis_payload):
        record = make_record(sample_analysis_payload, record_id="r1")
        assert records_digest([record]) == records_digest([record])

    def test_new_record_changes_digest(self, make_record, sample_analysis_payload):
        first = make_record(sample_analysis_payload, record_id="r1")
        second = make_record(None, record_id="r2")
        assert records_digest([first]) != records_digest([second, first])


class TestUnscoredAnalysis:

    def test_missing_score_is_unscored(self, make_record):
        from idea_validator.pipelines.result_normalizer import normalize_analysis

        analysis = normalize_analysis('{"key_developments": ["Build app"], "roadmap": {"q2": "Hire"}}')
        dashboard = AnalyticsEngine().build_dashboard([make_record(analysis)])
        assert dashboard.score_series == []
        assert dashboard.score_distribution == []
        assert dashboard.financials.projections == []
        assert len(dashboard.developments) == 1
        assert len(dashboard.market_insights) == 1
