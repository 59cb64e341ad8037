"""Pytest fixtures and configuration."""
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import fakeredis
import pytest
from fastapi.testclient import TestClient

from idea_validator.analytics.flavor import FlavorSource
from idea_validator.models import AnalysisResult, Contact, IdeaRecord
from idea_validator.services.redis_cache import RedisCache


@pytest.fixture
def mock_snowflake():
    """Mock Snowflake service."""
    mock = MagicMock()
    mock.health_check = AsyncMock(return_value=(True, None))
    mock.execute_query = MagicMock(return_value=[])
    mock.execute_write = MagicMock(return_value=1)
    mock.insert_idea = MagicMock(return_value="idea-1")
    mock.get_ideas_for_owner = MagicMock(return_value=[])
    return mock


@pytest.fixture
def mock_redis():
    """Mock Redis service."""
    mock = MagicMock()
    mock.health_check = AsyncMock(return_value=(True, None))
    mock.get = MagicMock(return_value=None)
    mock.set = MagicMock(return_value=True)
    return mock


@pytest.fixture
def fake_cache():
    """RedisCache backed by fakeredis."""
    cache = RedisCache(host="localhost", port=6379)
    cache.client = fakeredis.FakeRedis(decode_responses=True)
    return cache


@pytest.fixture
def client(mock_snowflake, mock_redis):
    """Create test client with mocked services."""
    with patch("idea_validator.routers.health.get_snowflake_service", return_value=mock_snowflake):
        with patch("idea_validator.routers.health.get_redis_cache", return_value=mock_redis):
            from idea_validator.main import app
            yield TestClient(app)


@pytest.fixture
def auth_headers():
    return {
        "X-User-Id": "user-123",
        "X-User-Email": "ada@example.com",
        "X-User-Name": "Ada",
    }


@pytest.fixture
def stable_flavor():
    return FlavorSource(stable=True, seed="test-seed")


@pytest.fixture
def sample_analysis_payload():
    """A complete, well-formed analysis as returned by the model."""
    return {
        "score": {"value": 72, "reasoning": "Solid market, crowded space"},
        "key_developments": ["Build subscription platform", "Partner with roasters"],
        "deployment_steps": ["Develop MVP", "Beta test with 50 users", "Launch in Austin"],
        "roadmap": {
            "q1": "Launch pilot",
            "q2": "Expand menu",
            "q3": "Open second city",
            "q4": "Raise seed round",
        },
        "investor_pitch": "A scalable, innovative coffee subscription platform with strong growth.",
    }


@pytest.fixture
def sample_analysis(sample_analysis_payload):
    return AnalysisResult.model_validate(sample_analysis_payload)


@pytest.fixture
def make_record():
    """Factory for IdeaRecord instances."""
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _make(analysis=None, idea_text="A coffee subscription for remote teams",
              days=0, record_id=None, owner_id="user-123"):
        if isinstance(analysis, dict):
            analysis = AnalysisResult.model_validate(analysis)
        return IdeaRecord(
            id=record_id or str(uuid4()),
            owner_id=owner_id,
            idea_text=idea_text,
            contact=Contact(name="Ada", email="ada@example.com"),
            submitted_at=base + timedelta(days=days),
            analysis=analysis,
        )

    return _make


@pytest.fixture
def make_row():
    """Factory for raw ``ideas`` rows as returned by Snowflake."""

    def _make(analysis=None, record_id=None, submitted_at=None, idea_text="Coffee"):
        return {
            "id": record_id or str(uuid4()),
            "owner_id": "user-123",
            "owner_email": "ada@example.com",
            "owner_name": "Ada",
            "idea_text": idea_text,
            "contact": json.dumps({"name": "Ada", "email": "ada@example.com", "phone": ""}),
            "analysis": json.dumps(analysis) if analysis is not None else None,
            "submitted_at": submitted_at,
        }

    return _make
