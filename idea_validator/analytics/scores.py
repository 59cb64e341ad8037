"""Score-based aggregates: trend series, band distribution, summary stats."""
from typing import List, Sequence

from idea_validator.analytics.taxonomy import classify_score
from idea_validator.analytics.utils import excerpt, idea_label, mean, round_half_up
from idea_validator.models.analytics import DistributionBucket, ScorePoint, SummaryStats
from idea_validator.models.enums import SCORE_BAND_RANGES, ScoreBand
from idea_validator.models.idea import IdeaRecord

HIGH_POTENTIAL_FLOOR = 80.0
SUCCESS_FLOOR = 70.0


def scored_records(records: Sequence[IdeaRecord]) -> List[IdeaRecord]:
    """Records carrying a score, in input order."""
    return [r for r in records if r.score_value is not None]


def score_series(records: Sequence[IdeaRecord]) -> List[ScorePoint]:
    """One point per scored record; unscored records are dropped, not zero-filled."""
    return [
        ScorePoint(
            label=idea_label(i),
            value=record.score_value,
            date=record.submitted_at.date() if record.submitted_at else None,
            excerpt=excerpt(record.idea_text),
            record_id=record.id,
        )
        for i, record in enumerate(scored_records(records))
    ]


def score_distribution(records: Sequence[IdeaRecord]) -> List[DistributionBucket]:
    """Count scored records per band, omitting empty bands."""
    counts = {band: 0 for band in ScoreBand}
    for record in scored_records(records):
        counts[classify_score(record.score_value)] += 1
    return [
        DistributionBucket(band=band, range_label=SCORE_BAND_RANGES[band], count=count)
        for band, count in counts.items()
        if count > 0
    ]


def summary_stats(records: Sequence[IdeaRecord]) -> SummaryStats:
    """Headline numbers; all zero for an empty history."""
    total = len(records)
    if total == 0:
        return SummaryStats()
    scores = [r.score_value for r in scored_records(records)]
    analyses = [r.analysis for r in records if r.analysis is not None]
    developments = sum(len(a.key_developments) for a in analyses)
    steps = sum(len(a.deployment_steps) for a in analyses)
    return SummaryStats(
        total_ideas=total,
        scored_ideas=len(scores),
        average_score=round_half_up(mean(scores)),
        highest_score=max(scores, default=0),
        with_pitches=sum(1 for a in analyses if a.investor_pitch),
        high_potential=sum(1 for s in scores if s >= HIGH_POTENTIAL_FLOOR),
        success_rate=round_half_up(sum(1 for s in scores if s >= SUCCESS_FLOOR) / total * 100),
        avg_developments_per_idea=round_half_up(developments / total),
        avg_deployment_steps_per_idea=round_half_up(steps / total),
    )
