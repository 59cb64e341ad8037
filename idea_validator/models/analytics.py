"""Chart-ready output models produced by the analytics engine."""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from .enums import (
    DeploymentCategory,
    DevelopmentCategory,
    FundingStage,
    Level,
    ScoreBand,
    Sentiment,
)


# --- Scores ---

class ScorePoint(BaseModel):
    """One scored idea on the score trend chart."""
    label: str
    value: float = Field(..., ge=0, le=100)
    date: Optional[dt.date] = None
    excerpt: str
    record_id: str


class DistributionBucket(BaseModel):
    """Count of scored ideas in one score band."""
    band: ScoreBand
    range_label: str
    count: int = Field(..., ge=1)


class SummaryStats(BaseModel):
    """Headline numbers for an owner's history."""
    total_ideas: int = 0
    scored_ideas: int = 0
    average_score: int = 0
    highest_score: float = 0
    with_pitches: int = 0
    high_potential: int = 0
    success_rate: int = Field(0, description="Percent of all ideas scoring 70 or more")
    avg_developments_per_idea: int = 0
    avg_deployment_steps_per_idea: int = 0


# --- Taxonomies ---

class DevelopmentItem(BaseModel):
    """A key development item with its category."""
    idea_label: str
    record_index: int
    text: str
    category: DevelopmentCategory
    length: int


class DeploymentItem(BaseModel):
    """A deployment step with its category and complexity."""
    idea_label: str
    record_index: int
    phase: int = Field(..., ge=1)
    text: str
    category: DeploymentCategory
    complexity: Level


# --- Roadmap ---

class RoadmapRow(BaseModel):
    """One quarter goal of one idea."""
    idea_label: str
    record_index: int
    quarter: str
    goals: str
    priority: Level
    length: int


class RoadmapSlot(BaseModel):
    quarter: str
    row: Optional[RoadmapRow] = None


class RoadmapGrid(BaseModel):
    """Per-idea roadmap with all four quarters, empty slots included."""
    idea_label: str
    record_index: int
    slots: list[RoadmapSlot]


class RoadmapReport(BaseModel):
    rows: list[RoadmapRow] = Field(default_factory=list)
    grid: list[RoadmapGrid] = Field(default_factory=list)
    priority_distribution: dict[str, int] = Field(default_factory=dict)


# --- Pitch ---

class KeywordFrequency(BaseModel):
    word: str
    count: int = Field(..., ge=1, description="Total occurrences across pitches")
    percentage: int = Field(..., description="Percent of pitches containing the word")


class PitchSentiment(BaseModel):
    record_id: str
    sentiment: Sentiment
    positive: int
    negative: int
    score: int


class PitchComplexity(BaseModel):
    record_id: str
    complexity: Level
    readability_score: float = Field(..., ge=1, le=100)


class IndustryTrend(BaseModel):
    industry: str
    ideas: int
    growth: int
    investment_attraction: int


class FundingReadiness(BaseModel):
    record_id: str
    readiness: int = Field(..., ge=0, le=100)
    stage: FundingStage
    estimated_funding: str


class PitchAnalytics(BaseModel):
    """Aggregates over every idea with an investor pitch."""
    total_pitches: int = 0
    avg_word_count: int = 0
    avg_pitch_length: int = 0
    avg_sentiment_score: int = 0
    keywords: list[KeywordFrequency] = Field(default_factory=list)
    sentiment: list[PitchSentiment] = Field(default_factory=list)
    sentiment_counts: dict[str, int] = Field(default_factory=dict)
    complexity: list[PitchComplexity] = Field(default_factory=list)
    industry_trends: list[IndustryTrend] = Field(default_factory=list)
    funding_readiness: list[FundingReadiness] = Field(default_factory=list)


# --- Market, financial, competitive ---

class MarketTiming(BaseModel):
    label: str
    score: int


class MarketInsight(BaseModel):
    record_id: str
    market_size: str
    competitive_strength: int = Field(..., ge=0, le=100)
    target_audience: str
    market_timing: MarketTiming
    growth_potential: int
    risk_factors: list[str]


class RevenueProjection(BaseModel):
    year1: int
    year2: int
    year3: int
    year4: int
    year5: int


class FinancialProjection(BaseModel):
    record_id: str
    idea_title: str
    score: float
    projected_revenue: RevenueProjection
    investment_required: int
    break_even_months: int
    roi_percent: int
    market_cap: int


class FinancialSummary(BaseModel):
    total_investment: int = 0
    average_roi: int = 0
    average_break_even_months: int = 0
    total_market_cap: int = 0


class FinancialReport(BaseModel):
    projections: list[FinancialProjection] = Field(default_factory=list)
    summary: FinancialSummary = Field(default_factory=FinancialSummary)


class CompetitivePosition(BaseModel):
    record_id: str
    competitive_advantage: str
    market_position: str
    threat_level: Level
    uniqueness_score: int = Field(..., ge=60, le=100)
    barrier_to_entry: Level


class CompetitiveSummary(BaseModel):
    average_uniqueness: int = 0
    high_barrier: int = 0
    strong_position: int = 0
    low_threat: int = 0
    position_counts: dict[str, int] = Field(default_factory=dict)


class CompetitiveReport(BaseModel):
    positions: list[CompetitivePosition] = Field(default_factory=list)
    summary: CompetitiveSummary = Field(default_factory=CompetitiveSummary)


# --- Dashboard ---

class DashboardResponse(BaseModel):
    """Every aggregate view over an owner's idea history."""
    summary: SummaryStats = Field(default_factory=SummaryStats)
    score_series: list[ScorePoint] = Field(default_factory=list)
    score_distribution: list[DistributionBucket] = Field(default_factory=list)
    developments: list[DevelopmentItem] = Field(default_factory=list)
    development_categories: dict[str, int] = Field(default_factory=dict)
    deployment_steps: list[DeploymentItem] = Field(default_factory=list)
    deployment_categories: dict[str, int] = Field(default_factory=dict)
    deployment_complexity: dict[str, int] = Field(default_factory=dict)
    roadmap: RoadmapReport = Field(default_factory=RoadmapReport)
    pitch: PitchAnalytics = Field(default_factory=PitchAnalytics)
    market_insights: list[MarketInsight] = Field(default_factory=list)
    financials: FinancialReport = Field(default_factory=FinancialReport)
    competitive: CompetitiveReport = Field(default_factory=CompetitiveReport)
