"""Tests for the Redis cache with fakeredis."""
import asyncio

from idea_validator.analytics.engine import AnalyticsEngine
from idea_validator.models import DashboardResponse, SummaryStats
from idea_validator.services.redis_cache import CacheKeys


class TestRedisCache:

    def test_round_trip_model(self, fake_cache):
        fake_cache.set("k", SummaryStats(total_ideas=3), ttl_seconds=60)
        assert fake_cache.get("k", SummaryStats).total_ideas == 3

    def test_miss_returns_none(self, fake_cache):
        assert fake_cache.get("missing", SummaryStats) is None

    def test_ttl_applied(self, fake_cache):
        fake_cache.set("k", SummaryStats(), ttl_seconds=60)
        assert 0 < fake_cache.client.ttl("k") <= 60

    def test_dashboard_round_trip(self, fake_cache, make_record, sample_analysis_payload):
        dashboard = AnalyticsEngine().build_dashboard([make_record(sample_analysis_payload)])
        key = CacheKeys.dashboard("user-123", "abc")
        fake_cache.set(key, dashboard, ttl_seconds=60)
        assert fake_cache.get(key, DashboardResponse) == dashboard

    def test_dashboards_isolated_per_owner(self, fake_cache):
        fake_cache.set(CacheKeys.dashboard("u1", "a"), SummaryStats(total_ideas=1), 60)
        fake_cache.set(CacheKeys.dashboard("u2", "a"), SummaryStats(total_ideas=2), 60)
        assert fake_cache.get(CacheKeys.dashboard("u1", "a"), SummaryStats).total_ideas == 1
        assert fake_cache.get(CacheKeys.dashboard("u2", "a"), SummaryStats).total_ideas == 2
        assert fake_cache.get(CacheKeys.dashboard("u1", "b"), SummaryStats) is None

    def test_health_check(self, fake_cache):
        assert asyncio.run(fake_cache.health_check()) == (True, None)


class TestCacheKeys:

    def test_dashboard_key(self):
        assert CacheKeys.dashboard("u1", "d") == "dashboard:u1:d"
