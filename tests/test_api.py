"""Tests for API endpoints."""
import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from idea_validator.errors import AnalysisRequestFailure, MalformedAnalysisError


@pytest.fixture
def mock_gemini(sample_analysis):
    mock = MagicMock()
    mock.analyze_idea = AsyncMock(return_value=sample_analysis)
    return mock


@pytest.fixture
def mock_exporter():
    mock = MagicMock()
    mock.export = AsyncMock(return_value=False)
    return mock


@pytest.fixture
def validate_body():
    return {
        "idea": "A coffee subscription for remote teams",
        "contact": {"name": "Ada", "email": "ada@example.com", "phone": ""},
    }


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check_all_healthy(self, client, mock_snowflake, mock_redis):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert set(data["dependencies"]) == {"snowflake", "redis"}

    def test_health_check_degraded(self, client, mock_snowflake, mock_redis):
        mock_redis.health_check = AsyncMock(return_value=(False, "Connection refused"))

        response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert data["dependencies"]["redis"] == "unhealthy: Connection refused"


class TestValidateEndpoint:
    """Tests for POST /api/v1/ideas/validate."""

    def _post(self, client, body, gemini, exporter, snowflake, headers=None):
        with patch("idea_validator.routers.ideas.get_gemini_client", return_value=gemini), \
             patch("idea_validator.routers.ideas.get_sheet_exporter", return_value=exporter), \
             patch("idea_validator.routers.ideas.get_snowflake_service", return_value=snowflake):
            return client.post("/api/v1/ideas/validate", json=body, headers=headers or {})

    def test_signed_in(self, client, validate_body, mock_gemini, mock_exporter, mock_snowflake, auth_headers):
        response = self._post(client, validate_body, mock_gemini, mock_exporter, mock_snowflake, auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["analysis"]["score"]["value"] == 72
        assert data["score_band"] == "Good"
        assert data["persisted"] is True
        assert data["record_id"] == "idea-1"
        assert data["exported"] is False
        assert mock_snowflake.insert_idea.call_args.kwargs["owner_email"] == "ada@example.com"

    def test_anonymous(self, client, validate_body, mock_gemini, mock_exporter, mock_snowflake):
        response = self._post(client, validate_body, mock_gemini, mock_exporter, mock_snowflake)

        assert response.status_code == 200
        assert response.json()["persisted"] is False
        mock_snowflake.insert_idea.assert_not_called()

    @pytest.mark.parametrize("error", [AnalysisRequestFailure("status: 500"), MalformedAnalysisError("bad")])
    def test_analysis_failure_is_502(self, client, validate_body, mock_gemini, mock_exporter,
                                     mock_snowflake, auth_headers, error):
        mock_gemini.analyze_idea = AsyncMock(side_effect=error)

        response = self._post(client, validate_body, mock_gemini, mock_exporter, mock_snowflake, auth_headers)

        assert response.status_code == 502
        assert response.json()["detail"].startswith("An error occurred")
        mock_snowflake.insert_idea.assert_not_called()

    def test_missing_contact_is_422(self, client, mock_gemini, mock_exporter, mock_snowflake):
        body = {"idea": "Coffee", "contact": {"name": "Ada"}}

        response = self._post(client, body, mock_gemini, mock_exporter, mock_snowflake)

        assert response.status_code == 422
        mock_gemini.analyze_idea.assert_not_called()


class TestHistoryEndpoint:
    """Tests for GET /api/v1/ideas."""

    def test_requires_user(self, client):
        assert client.get("/api/v1/ideas").status_code == 401

    def test_lists_newest_first(self, client, mock_snowflake, make_row, sample_analysis_payload, auth_headers):
        mock_snowflake.get_ideas_for_owner.return_value = [
            make_row(sample_analysis_payload, record_id="a",
                     submitted_at=datetime(2026, 1, 1, tzinfo=timezone.utc)),
            make_row(None, record_id="b",
                     submitted_at=datetime(2026, 2, 1, tzinfo=timezone.utc)),
        ]

        with patch("idea_validator.routers.ideas.get_snowflake_service", return_value=mock_snowflake):
            response = client.get("/api/v1/ideas", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [item["id"] for item in data["items"]] == ["b", "a"]
        assert data["items"][0]["analysis"] is None

    def test_fetch_failure_is_empty(self, client, mock_snowflake, auth_headers):
        mock_snowflake.get_ideas_for_owner.side_effect = RuntimeError("down")

        with patch("idea_validator.routers.ideas.get_snowflake_service", return_value=mock_snowflake):
            response = client.get("/api/v1/ideas", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0}


class TestAnalyticsEndpoints:
    """Tests for /api/v1/analytics."""

    @pytest.fixture
    def rows(self, make_row, sample_analysis_payload):
        return [
            make_row(sample_analysis_payload, record_id="a",
                     submitted_at=datetime(2026, 1, 1, tzinfo=timezone.utc)),
        ]

    def _get(self, client, path, snowflake, redis, headers):
        with patch("idea_validator.routers.analytics.get_snowflake_service", return_value=snowflake), \
             patch("idea_validator.routers.analytics.get_redis_cache", return_value=redis):
            return client.get(f"/api/v1/analytics/{path}", headers=headers)

    @pytest.mark.parametrize("path", ["dashboard", "roadmap", "pitch", "financials"])
    def test_requires_user(self, client, path):
        assert client.get(f"/api/v1/analytics/{path}").status_code == 401

    def test_dashboard(self, client, mock_snowflake, mock_redis, rows, auth_headers):
        mock_snowflake.get_ideas_for_owner.return_value = rows

        response = self._get(client, "dashboard", mock_snowflake, mock_redis, auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["total_ideas"] == 1
        assert data["score_series"][0]["label"] == "Idea 1"
        assert data["roadmap"]["rows"][0]["priority"] == "High"
        mock_redis.set.assert_called_once()
        key = mock_redis.set.call_args.args[0]
        assert key.startswith("dashboard:user-123:")

    def test_dashboard_cache_hit(self, client, mock_snowflake, mock_redis, rows, auth_headers):
        from idea_validator.models import DashboardResponse, SummaryStats

        mock_snowflake.get_ideas_for_owner.return_value = rows
        mock_redis.get.return_value = DashboardResponse(summary=SummaryStats(total_ideas=99))

        response = self._get(client, "dashboard", mock_snowflake, mock_redis, auth_headers)

        assert response.json()["summary"]["total_ideas"] == 99
        mock_redis.set.assert_not_called()

    def test_dashboard_fetch_failure_is_empty(self, client, mock_snowflake, mock_redis, auth_headers):
        mock_snowflake.get_ideas_for_owner.side_effect = RuntimeError("down")

        response = self._get(client, "dashboard", mock_snowflake, mock_redis, auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["summary"]["total_ideas"] == 0
        assert data["score_series"] == []
        mock_redis.set.assert_not_called()

    def test_roadmap(self, client, mock_snowflake, mock_redis, rows, auth_headers):
        mock_snowflake.get_ideas_for_owner.return_value = rows

        response = self._get(client, "roadmap", mock_snowflake, mock_redis, auth_headers)

        data = response.json()
        assert [r["quarter"] for r in data["rows"]] == ["Q1", "Q2", "Q3", "Q4"]
        assert len(data["grid"][0]["slots"]) == 4

    def test_pitch(self, client, mock_snowflake, mock_redis, rows, auth_headers):
        mock_snowflake.get_ideas_for_owner.return_value = rows

        response = self._get(client, "pitch", mock_snowflake, mock_redis, auth_headers)

        data = response.json()
        assert data["total_pitches"] == 1
        assert {k["word"] for k in data["keywords"]} >= {"platform"}

    def test_financials(self, client, mock_snowflake, mock_redis, rows, auth_headers):
        mock_snowflake.get_ideas_for_owner.return_value = rows

        response = self._get(client, "financials", mock_snowflake, mock_redis, auth_headers)

        data = response.json()
        assert data["projections"][0]["investment_required"] == 760000
        assert data["summary"]["average_roi"] == 510
