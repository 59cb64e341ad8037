"""Pydantic models for the Idea Validator."""

# Common Models
from .common import (
    HealthResponse,
    ErrorResponse,
)

# Enums
from .enums import (
    Quarter,
    ScoreBand,
    DevelopmentCategory,
    DeploymentCategory,
    Level,
    Sentiment,
    FundingStage,
    SCORE_BAND_FLOORS,
    SCORE_BAND_RANGES,
    SCORE_BAND_DESCRIPTIONS,
    FUNDING_STAGE_THRESHOLDS,
    PRE_SEED_FUNDING_RANGE,
)

# Analysis
from .analysis import (
    ScoreResult,
    AnalysisResult,
)

# Ideas
from .idea import (
    Contact,
    IdeaSubmission,
    CurrentUser,
    IdeaRecord,
    ValidationResponse,
    IdeaHistoryResponse,
)

# Analytics outputs
from .analytics import (
    ScorePoint,
    DistributionBucket,
    SummaryStats,
    DevelopmentItem,
    DeploymentItem,
    RoadmapRow,
    RoadmapSlot,
    RoadmapGrid,
    RoadmapReport,
    KeywordFrequency,
    PitchSentiment,
    PitchComplexity,
    IndustryTrend,
    FundingReadiness,
    PitchAnalytics,
    MarketTiming,
    MarketInsight,
    RevenueProjection,
    FinancialProjection,
    FinancialSummary,
    FinancialReport,
    CompetitivePosition,
    CompetitiveSummary,
    CompetitiveReport,
    DashboardResponse,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    # Enums
    "Quarter",
    "ScoreBand",
    "DevelopmentCategory",
    "DeploymentCategory",
    "Level",
    "Sentiment",
    "FundingStage",
    "SCORE_BAND_FLOORS",
    "SCORE_BAND_RANGES",
    "SCORE_BAND_DESCRIPTIONS",
    "FUNDING_STAGE_THRESHOLDS",
    "PRE_SEED_FUNDING_RANGE",
    # Analysis
    "ScoreResult",
    "AnalysisResult",
    # Ideas
    "Contact",
    "IdeaSubmission",
    "CurrentUser",
    "IdeaRecord",
    "ValidationResponse",
    "IdeaHistoryResponse",
    # Analytics
    "ScorePoint",
    "DistributionBucket",
    "SummaryStats",
    "DevelopmentItem",
    "DeploymentItem",
    "RoadmapRow",
    "RoadmapSlot",
    "RoadmapGrid",
    "RoadmapReport",
    "KeywordFrequency",
    "PitchSentiment",
    "PitchComplexity",
    "IndustryTrend",
    "FundingReadiness",
    "PitchAnalytics",
    "MarketTiming",
    "MarketInsight",
    "RevenueProjection",
    "FinancialProjection",
    "FinancialSummary",
    "FinancialReport",
    "CompetitivePosition",
    "CompetitiveSummary",
    "CompetitiveReport",
    "DashboardResponse",
]
