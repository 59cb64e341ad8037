"""Investor pitch analytics.

Computed over every record with a pitch:
  keyword frequency   fixed domain vocabulary, occurrence count and the
                      percentage of pitches mentioning each word
  sentiment           positive/negative word presence,
                      score = round(((positive − negative + 5) / 10) × 100)
  complexity          length buckets and a readability estimate
  funding readiness   min(100, score + pitch bonus + jitter) → funding stage
  industry trends     flavor only
"""
from typing import List, Sequence

import structlog

from idea_validator.analytics.flavor import FlavorSource, uniform
from idea_validator.analytics.utils import (
    clamp,
    count_words,
    mean,
    ordered_counts,
    round_half_up,
    to_decimal,
)
from idea_validator.models.analytics import (
    FundingReadiness,
    IndustryTrend,
    KeywordFrequency,
    PitchAnalytics,
    PitchComplexity,
    PitchSentiment,
)
from idea_validator.models.enums import (
    FUNDING_STAGE_THRESHOLDS,
    PRE_SEED_FUNDING_RANGE,
    FundingStage,
    Level,
    Sentiment,
)
from idea_validator.models.idea import IdeaRecord

logger = structlog.get_logger(__name__)

# ── Vocabularies ──────────────────────────────────────────────────────────────
PITCH_KEYWORDS = [
    "ai", "machine learning", "saas", "platform", "mobile", "web", "blockchain",
    "fintech", "healthcare", "education", "e-commerce", "social", "gaming", "iot", "cloud",
]
POSITIVE_WORDS = [
    "innovative", "revolutionary", "growth", "profitable", "scalable",
    "market-leading", "competitive advantage",
]
NEGATIVE_WORDS = ["risk", "challenge", "difficult", "expensive", "complex", "saturated"]

INDUSTRIES = [
    "Technology", "Healthcare", "Finance", "Education", "E-commerce",
    "Gaming", "Social Media", "IoT", "AI/ML",
]

# ── Constants ─────────────────────────────────────────────────────────────────
LONG_PITCH_CHARS = 300
LONG_PITCH_BONUS = 20
SHORT_PITCH_BONUS = 10
MAX_FUNDING_JITTER = 30.0
HIGH_COMPLEXITY_CHARS = 1000
MEDIUM_COMPLEXITY_CHARS = 500


def pitched_records(records: Sequence[IdeaRecord]) -> List[IdeaRecord]:
    return [r for r in records if r.analysis is not None and r.analysis.investor_pitch]


def keyword_frequency(pitches: Sequence[str]) -> List[KeywordFrequency]:
    """Vocabulary hits sorted by occurrence count, zero-count words omitted."""
    if not pitches:
        return []
    lowered = [p.lower() for p in pitches]
    results = []
    for word in PITCH_KEYWORDS:
        count = sum(text.count(word) for text in lowered)
        if count == 0:
            continue
        containing = sum(1 for text in lowered if word in text)
        results.append(KeywordFrequency(
            word=word,
            count=count,
            percentage=round_half_up(containing / len(lowered) * 100),
        ))
    results.sort(key=lambda k: k.count, reverse=True)
    return results


def pitch_sentiment(record_id: str, pitch: str) -> PitchSentiment:
    """Classify one pitch; ties are Neutral."""
    text = pitch.lower()
    positive = sum(1 for word in POSITIVE_WORDS if word in text)
    negative = sum(1 for word in NEGATIVE_WORDS if word in text)
    if positive > negative:
        sentiment = Sentiment.POSITIVE
    elif negative > positive:
        sentiment = Sentiment.NEGATIVE
    else:
        sentiment = Sentiment.NEUTRAL
    return PitchSentiment(
        record_id=record_id,
        sentiment=sentiment,
        positive=positive,
        negative=negative,
        score=round_half_up(((positive - negative + 5) / 10) * 100),
    )


def pitch_complexity(record_id: str, pitch: str) -> PitchComplexity:
    length = len(pitch)
    if length > HIGH_COMPLEXITY_CHARS:
        complexity = Level.HIGH
    elif length > MEDIUM_COMPLEXITY_CHARS:
        complexity = Level.MEDIUM
    else:
        complexity = Level.LOW
    # Single-space tokens, empty ones included
    tokens = len(pitch.split(" "))
    readability = clamp(120 - tokens / 10, 1.0, 100.0)
    return PitchComplexity(
        record_id=record_id,
        complexity=complexity,
        readability_score=float(to_decimal(readability, places=1)),
    )


def funding_stage(readiness: float) -> tuple[FundingStage, str]:
    """Stage and amount range for an unrounded readiness score."""
    for threshold, stage, amount in FUNDING_STAGE_THRESHOLDS:
        if readiness > threshold:
            return stage, amount
    return FundingStage.PRE_SEED, PRE_SEED_FUNDING_RANGE


def funding_readiness(records: Sequence[IdeaRecord], flavor: FlavorSource) -> List[FundingReadiness]:
    """Readiness per pitched idea, most ready first.

    A missing score counts as 0.
    """
    results = []
    for record in pitched_records(records):
        pitch = record.analysis.investor_pitch
        score = record.score_value or 0.0
        bonus = LONG_PITCH_BONUS if len(pitch) > LONG_PITCH_CHARS else SHORT_PITCH_BONUS
        jitter = uniform(flavor.rng(record.id, "funding"), 0.0, MAX_FUNDING_JITTER)
        raw = min(100.0, score + bonus + jitter)
        stage, amount = funding_stage(raw)
        results.append(FundingReadiness(
            record_id=record.id,
            readiness=round_half_up(raw),
            stage=stage,
            estimated_funding=amount,
        ))
    results.sort(key=lambda f: f.readiness, reverse=True)
    return results


def industry_trends(pitch_count: int, key: str, flavor: FlavorSource) -> List[IndustryTrend]:
    """Illustrative industry rows; empty when there are no pitches."""
    if pitch_count == 0:
        return []
    rng = flavor.rng(key, "industry_trends")
    trends = [
        IndustryTrend(
            industry=industry,
            ideas=int(rng.random() * pitch_count),
            growth=round_half_up(rng.random() * 100),
            investment_attraction=round_half_up(rng.random() * 100),
        )
        for industry in INDUSTRIES
    ]
    trends.sort(key=lambda t: t.ideas, reverse=True)
    return trends


def pitch_analytics(records: Sequence[IdeaRecord], flavor: FlavorSource) -> PitchAnalytics:
    """All pitch aggregates; an empty PitchAnalytics when no record has a pitch."""
    pitched = pitched_records(records)
    if not pitched:
        return PitchAnalytics()
    pitches = [r.analysis.investor_pitch for r in pitched]
    sentiment = [pitch_sentiment(r.id, r.analysis.investor_pitch) for r in pitched]
    analytics = PitchAnalytics(
        total_pitches=len(pitched),
        avg_word_count=round_half_up(mean([count_words(p) for p in pitches])),
        avg_pitch_length=round_half_up(mean([len(p) for p in pitches])),
        avg_sentiment_score=round_half_up(mean([s.score for s in sentiment])),
        keywords=keyword_frequency(pitches),
        sentiment=sentiment,
        sentiment_counts=ordered_counts(
            (s.sentiment.value for s in sentiment),
            [s.value for s in Sentiment],
        ),
        complexity=[pitch_complexity(r.id, r.analysis.investor_pitch) for r in pitched],
        industry_trends=industry_trends(len(pitched), ",".join(r.id for r in pitched), flavor),
        funding_readiness=funding_readiness(pitched, flavor),
    )
    logger.info(
        "pitch_analytics_computed",
        pitches=analytics.total_pitches,
        keywords=len(analytics.keywords),
        avg_sentiment=analytics.avg_sentiment_score,
    )
    return analytics
