"""Market, financial and competitive projections.

Financial fields are fixed functions of the idea score s (0-100):

  revenue year n   = round(s/100 × 1,000,000 × f_n),  f = 0.1, 0.3, 0.7, 1.2, 2.0
  investment       = round((100 − s)/100 × 2,000,000 + 200,000)
  break-even       = round((100 − s)/100 × 36 + 12)        months, 12-48
  ROI              = round(s/100 × 500 + 150)              percent, 150-650
  market cap       = round(s/100 × 50,000,000 + 5,000,000)

Market and competitive labels are presentational flavor drawn from a
FlavorSource; only their value sets and ranges are fixed.
"""
from decimal import Decimal
from typing import List, Sequence

import structlog

from idea_validator.analytics.flavor import FlavorSource, choice, uniform
from idea_validator.analytics.utils import excerpt, mean, ordered_counts, round_half_up, to_decimal
from idea_validator.models.analytics import (
    CompetitivePosition,
    CompetitiveReport,
    CompetitiveSummary,
    FinancialProjection,
    FinancialReport,
    FinancialSummary,
    MarketInsight,
    MarketTiming,
    RevenueProjection,
)
from idea_validator.models.enums import Level
from idea_validator.models.idea import IdeaRecord

logger = structlog.get_logger(__name__)

# ── Financial constants ───────────────────────────────────────────────────────
REVENUE_BASE: Decimal = Decimal("1000000")
REVENUE_CURVE: tuple[Decimal, ...] = (
    Decimal("0.1"), Decimal("0.3"), Decimal("0.7"), Decimal("1.2"), Decimal("2.0"),
)
INVESTMENT_SCALE: Decimal = Decimal("2000000")
INVESTMENT_FLOOR: Decimal = Decimal("200000")
BREAK_EVEN_SCALE: Decimal = Decimal("36")
BREAK_EVEN_FLOOR: Decimal = Decimal("12")
ROI_SCALE: Decimal = Decimal("500")
ROI_FLOOR: Decimal = Decimal("150")
MARKET_CAP_SCALE: Decimal = Decimal("50000000")
MARKET_CAP_FLOOR: Decimal = Decimal("5000000")

# ── Flavor value sets ─────────────────────────────────────────────────────────
MARKET_SIZES = ["$10M", "$50M", "$100M", "$500M", "$1B", "$5B", "$10B"]
TARGET_AUDIENCES = [
    "B2B Enterprise", "B2B SMB", "B2C Mass Market", "B2C Niche", "B2B2C", "Government", "Non-Profit",
]
MARKET_TIMINGS: list[tuple[str, int]] = [
    ("Perfect Timing", 95),
    ("Early Market", 85),
    ("Growing Market", 75),
    ("Mature Market", 60),
    ("Declining Market", 40),
]
RISK_FACTORS = [
    "Market Competition", "Technology Risk", "Regulatory Risk",
    "Execution Risk", "Market Adoption", "Funding Risk",
]
COMPETITIVE_ADVANTAGES = [
    "Technology Innovation", "First Mover Advantage", "Network Effects",
    "Brand Recognition", "Cost Leadership", "Differentiation",
]
MARKET_POSITIONS = ["Market Leader", "Strong Challenger", "Market Follower", "Niche Player"]
STRONG_POSITIONS = {"Market Leader", "Strong Challenger"}
THREE_LEVELS = [Level.LOW, Level.MEDIUM, Level.HIGH]
BARRIER_LEVELS = [Level.HIGH, Level.MEDIUM, Level.LOW]
UNSCORED_GROWTH_BASE = 50.0


# ── Financial ─────────────────────────────────────────────────────────────────

def revenue_projection(score: float) -> RevenueProjection:
    base = to_decimal(score) / Decimal(100) * REVENUE_BASE
    years = [round_half_up(base * f) for f in REVENUE_CURVE]
    return RevenueProjection(year1=years[0], year2=years[1], year3=years[2], year4=years[3], year5=years[4])


def investment_required(score: float) -> int:
    return round_half_up((Decimal(100) - to_decimal(score)) / Decimal(100) * INVESTMENT_SCALE + INVESTMENT_FLOOR)


def break_even_months(score: float) -> int:
    return round_half_up((Decimal(100) - to_decimal(score)) / Decimal(100) * BREAK_EVEN_SCALE + BREAK_EVEN_FLOOR)


def roi_percent(score: float) -> int:
    return round_half_up(to_decimal(score) / Decimal(100) * ROI_SCALE + ROI_FLOOR)


def market_cap(score: float) -> int:
    return round_half_up(to_decimal(score) / Decimal(100) * MARKET_CAP_SCALE + MARKET_CAP_FLOOR)


def financial_projection(record: IdeaRecord) -> FinancialProjection:
    score = record.score_value
    return FinancialProjection(
        record_id=record.id,
        idea_title=excerpt(record.idea_text),
        score=score,
        projected_revenue=revenue_projection(score),
        investment_required=investment_required(score),
        break_even_months=break_even_months(score),
        roi_percent=roi_percent(score),
        market_cap=market_cap(score),
    )


def financial_report(records: Sequence[IdeaRecord]) -> FinancialReport:
    """Projections for scored ideas plus portfolio totals."""
    projections = [financial_projection(r) for r in records if r.score_value is not None]
    if not projections:
        return FinancialReport()
    summary = FinancialSummary(
        total_investment=sum(p.investment_required for p in projections),
        average_roi=round_half_up(mean([p.roi_percent for p in projections])),
        average_break_even_months=round_half_up(mean([p.break_even_months for p in projections])),
        total_market_cap=sum(p.market_cap for p in projections),
    )
    logger.info("financial_projections_computed", ideas=len(projections),
                total_investment=summary.total_investment)
    return FinancialReport(projections=projections, summary=summary)


# ── Market ────────────────────────────────────────────────────────────────────

def market_insight(record: IdeaRecord, flavor: FlavorSource) -> MarketInsight:
    rng = flavor.rng(record.id, "market")
    score = record.score_value
    if score is not None:
        strength = min(score + uniform(rng, 0.0, 20.0), 100.0)
    else:
        strength = uniform(rng, 0.0, 100.0)
    timing_label, timing_score = choice(rng, MARKET_TIMINGS)
    growth_base = score if score is not None else UNSCORED_GROWTH_BASE
    return MarketInsight(
        record_id=record.id,
        market_size=choice(rng, MARKET_SIZES),
        competitive_strength=round_half_up(strength),
        target_audience=choice(rng, TARGET_AUDIENCES),
        market_timing=MarketTiming(label=timing_label, score=timing_score),
        growth_potential=round_half_up(growth_base + uniform(rng, 0.0, 30.0)),
        risk_factors=RISK_FACTORS[: int(rng.random() * 3) + 1],
    )


def market_insights(records: Sequence[IdeaRecord], flavor: FlavorSource) -> List[MarketInsight]:
    """One insight per idea, scored or not."""
    return [market_insight(r, flavor) for r in records]


# ── Competitive ───────────────────────────────────────────────────────────────

def competitive_position(record: IdeaRecord, flavor: FlavorSource) -> CompetitivePosition:
    rng = flavor.rng(record.id, "competitive")
    return CompetitivePosition(
        record_id=record.id,
        competitive_advantage=choice(rng, COMPETITIVE_ADVANTAGES),
        market_position=choice(rng, MARKET_POSITIONS),
        threat_level=choice(rng, THREE_LEVELS),
        uniqueness_score=round_half_up(uniform(rng, 60.0, 100.0)),
        barrier_to_entry=choice(rng, BARRIER_LEVELS),
    )


def competitive_report(records: Sequence[IdeaRecord], flavor: FlavorSource) -> CompetitiveReport:
    positions = [competitive_position(r, flavor) for r in records]
    if not positions:
        return CompetitiveReport()
    summary = CompetitiveSummary(
        average_uniqueness=round_half_up(mean([p.uniqueness_score for p in positions])),
        high_barrier=sum(1 for p in positions if p.barrier_to_entry == Level.HIGH),
        strong_position=sum(1 for p in positions if p.market_position in STRONG_POSITIONS),
        low_threat=sum(1 for p in positions if p.threat_level == Level.LOW),
        position_counts=ordered_counts((p.market_position for p in positions), MARKET_POSITIONS),
    )
    return CompetitiveReport(positions=positions, summary=summary)
