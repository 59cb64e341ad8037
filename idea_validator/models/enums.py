"""Enumeration types for the Idea Validator."""
from enum import Enum


class Quarter(str, Enum):
    """Roadmap quarters, declared in display order."""
    Q1 = "q1"
    Q2 = "q2"
    Q3 = "q3"
    Q4 = "q4"

    @property
    def label(self) -> str:
        return self.value.upper()


class ScoreBand(str, Enum):
    """Classification of a 0-100 idea score."""
    EXCELLENT = "Excellent"  # [80, 100]
    GOOD = "Good"  # [60, 80)
    NEEDS_WORK = "Needs Work"  # [0, 60)


class DevelopmentCategory(str, Enum):
    """Categories for key development items."""
    TECHNOLOGY = "Technology"
    MARKETING = "Marketing"
    BUSINESS = "Business"
    PRODUCT = "Product"
    OTHER = "Other"


class DeploymentCategory(str, Enum):
    """Categories for deployment steps."""
    PLANNING = "Planning"
    DEVELOPMENT = "Development"
    TESTING = "Testing"
    LAUNCH = "Launch"
    MARKETING = "Marketing"
    OTHER = "Other"


class Level(str, Enum):
    """Three-step level used for complexity, priority, threat and barriers."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Sentiment(str, Enum):
    """Investor pitch sentiment."""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class FundingStage(str, Enum):
    """Funding stages ordered from most to least ready."""
    SERIES_A = "Series A Ready"
    SEED = "Seed Ready"
    ANGEL = "Angel Ready"
    PRE_SEED = "Pre-Seed"


# Score band boundaries (lower-inclusive)
SCORE_BAND_FLOORS: dict[ScoreBand, float] = {
    ScoreBand.EXCELLENT: 80.0,
    ScoreBand.GOOD: 60.0,
    ScoreBand.NEEDS_WORK: 0.0,
}

SCORE_BAND_RANGES: dict[ScoreBand, str] = {
    ScoreBand.EXCELLENT: "80-100",
    ScoreBand.GOOD: "60-79",
    ScoreBand.NEEDS_WORK: "0-59",
}

SCORE_BAND_DESCRIPTIONS: dict[ScoreBand, str] = {
    ScoreBand.EXCELLENT: "Outstanding potential! Ready for investment and development.",
    ScoreBand.GOOD: "Good foundation with some areas for improvement.",
    ScoreBand.NEEDS_WORK: "Requires significant development and refinement before launch.",
}

# Funding readiness: (exclusive lower threshold, stage, amount range)
FUNDING_STAGE_THRESHOLDS: list[tuple[float, FundingStage, str]] = [
    (80.0, FundingStage.SERIES_A, "$2M-5M"),
    (60.0, FundingStage.SEED, "$500K-2M"),
    (40.0, FundingStage.ANGEL, "$100K-500K"),
]
PRE_SEED_FUNDING_RANGE = "$25K-100K"
