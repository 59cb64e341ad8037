"""Keyword-table classification of free-text analysis fields.

Each table is checked in declaration order and the first category with a
keyword contained in the lower-cased text wins. Text matching no keyword
falls back to the closed set's default (Other / Low).
"""
import random
from typing import Optional

import structlog

from idea_validator.analytics.utils import contains_any
from idea_validator.models.enums import (
    SCORE_BAND_FLOORS,
    DeploymentCategory,
    DevelopmentCategory,
    Level,
    ScoreBand,
)

logger = structlog.get_logger(__name__)

# ── Keyword tables (order is significant) ─────────────────────────────────────
DEVELOPMENT_KEYWORDS: dict[DevelopmentCategory, list[str]] = {
    DevelopmentCategory.TECHNOLOGY: ["tech", "platform", "system", "software", "app", "api", "database"],
    DevelopmentCategory.MARKETING: ["market", "brand", "customer", "user", "promotion", "advertising"],
    DevelopmentCategory.BUSINESS: ["revenue", "business", "strategy", "partnership", "funding", "monetization"],
    DevelopmentCategory.PRODUCT: ["feature", "product", "design", "prototype", "development", "testing"],
}

DEPLOYMENT_KEYWORDS: dict[DeploymentCategory, list[str]] = {
    DeploymentCategory.PLANNING: ["plan", "strategy", "roadmap", "design", "research"],
    DeploymentCategory.DEVELOPMENT: ["develop", "build", "create", "implement", "code"],
    DeploymentCategory.TESTING: ["test", "validate", "verify", "quality", "beta"],
    DeploymentCategory.LAUNCH: ["launch", "deploy", "release", "go-live", "publish"],
    DeploymentCategory.MARKETING: ["market", "promote", "advertise", "outreach", "campaign"],
}

HIGH_COMPLEXITY_KEYWORDS = ["integration", "architecture", "security", "scalability", "optimization"]
MEDIUM_COMPLEXITY_KEYWORDS = ["development", "testing", "implementation", "deployment"]

HIGH_PRIORITY_KEYWORDS = ["launch", "mvp", "revenue", "funding", "critical"]


def classify_development(text: str) -> DevelopmentCategory:
    """Category of a key development item."""
    for category, words in DEVELOPMENT_KEYWORDS.items():
        if contains_any(text, words):
            return category
    return DevelopmentCategory.OTHER


def classify_deployment(text: str) -> DeploymentCategory:
    """Category of a deployment step."""
    for category, words in DEPLOYMENT_KEYWORDS.items():
        if contains_any(text, words):
            return category
    return DeploymentCategory.OTHER


def estimate_complexity(text: str) -> Level:
    """Complexity tag of a deployment step: High → Medium → Low."""
    if contains_any(text, HIGH_COMPLEXITY_KEYWORDS):
        return Level.HIGH
    if contains_any(text, MEDIUM_COMPLEXITY_KEYWORDS):
        return Level.MEDIUM
    return Level.LOW


def estimate_priority(goals: str, rng: random.Random) -> Level:
    """Priority of a roadmap goal.

    High when the goal mentions a priority keyword; otherwise a coin flip
    between Medium and Low drawn from ``rng``.
    """
    if contains_any(goals, HIGH_PRIORITY_KEYWORDS):
        return Level.HIGH
    return Level.MEDIUM if rng.random() > 0.5 else Level.LOW


def classify_score(value: Optional[float]) -> Optional[ScoreBand]:
    """Score band for a 0-100 value; None when the score is absent."""
    if value is None:
        return None
    for band, floor in SCORE_BAND_FLOORS.items():
        if value >= floor:
            return band
    # Unreachable for validated scores; negative values are never produced
    logger.warning("score_below_range", value=value)
    return ScoreBand.NEEDS_WORK
