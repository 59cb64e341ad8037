"""Tests for keyword classification."""
import random

import pytest

from idea_validator.analytics.taxonomy import (
    classify_deployment,
    classify_development,
    classify_score,
    estimate_complexity,
    estimate_priority,
)
from idea_validator.models import DeploymentCategory, DevelopmentCategory, Level, ScoreBand


class TestDevelopmentCategory:

    @pytest.mark.parametrize("text,expected", [
        ("Build subscription platform", DevelopmentCategory.TECHNOLOGY),
        ("Grow the brand on social", DevelopmentCategory.MARKETING),
        ("Secure seed funding", DevelopmentCategory.BUSINESS),
        ("Ship a prototype", DevelopmentCategory.PRODUCT),
        ("Hire a barista", DevelopmentCategory.OTHER),
    ])
    def test_categories(self, text, expected):
        assert classify_development(text) == expected

    def test_first_matching_category_wins(self):
        # "app" (Technology) and "customer" (Marketing) both match
        assert classify_development("Customer app") == DevelopmentCategory.TECHNOLOGY

    def test_case_insensitive(self):
        assert classify_development("API GATEWAY") == DevelopmentCategory.TECHNOLOGY


class TestDeploymentCategory:

    @pytest.mark.parametrize("text,expected", [
        ("Research the market", DeploymentCategory.PLANNING),
        ("Develop MVP", DeploymentCategory.DEVELOPMENT),
        ("Beta with 50 users", DeploymentCategory.TESTING),
        ("Go-live in Austin", DeploymentCategory.LAUNCH),
        ("Run an outreach campaign", DeploymentCategory.MARKETING),
        ("Hire staff", DeploymentCategory.OTHER),
    ])
    def test_categories(self, text, expected):
        assert classify_deployment(text) == expected

    def test_planning_checked_before_launch(self):
        assert classify_deployment("Plan the launch") == DeploymentCategory.PLANNING


class TestComplexity:

    @pytest.mark.parametrize("text,expected", [
        ("Payment integration", Level.HIGH),
        ("Load testing", Level.MEDIUM),
        ("Print flyers", Level.LOW),
    ])
    def test_levels(self, text, expected):
        assert estimate_complexity(text) == expected


class TestPriority:

    @pytest.mark.parametrize("goals", ["Launch pilot", "Ship MVP", "Close funding", "Fix critical bugs"])
    def test_keyword_is_high(self, goals):
        assert estimate_priority(goals, random.Random(0)) == Level.HIGH

    def test_non_keyword_is_medium_or_low(self):
        levels = {estimate_priority("Expand menu", random.Random(i)) for i in range(50)}
        assert levels == {Level.MEDIUM, Level.LOW}

    def test_same_rng_state_same_priority(self):
        assert estimate_priority("Expand menu", random.Random(7)) == \
            estimate_priority("Expand menu", random.Random(7))


class TestScoreBand:

    @pytest.mark.parametrize("value,expected", [
        (100, ScoreBand.EXCELLENT),
        (80, ScoreBand.EXCELLENT),
        (79.9, ScoreBand.GOOD),
        (60, ScoreBand.GOOD),
        (59.99, ScoreBand.NEEDS_WORK),
        (0, ScoreBand.NEEDS_WORK),
    ])
    def test_boundaries(self, value, expected):
        assert classify_score(value) == expected

    def test_absent_score(self):
        assert classify_score(None) is None
