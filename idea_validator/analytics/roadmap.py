"""Roadmap expansion: one row per quarter goal, plus the per-idea grid."""
from typing import Dict, List, Sequence

import structlog

from idea_validator.analytics.flavor import FlavorSource
from idea_validator.analytics.taxonomy import estimate_priority
from idea_validator.analytics.utils import idea_label
from idea_validator.models.analytics import RoadmapGrid, RoadmapReport, RoadmapRow, RoadmapSlot
from idea_validator.models.enums import Level, Quarter
from idea_validator.models.idea import IdeaRecord

logger = structlog.get_logger(__name__)


def expand_roadmap(records: Sequence[IdeaRecord], flavor: FlavorSource) -> List[RoadmapRow]:
    """Flatten each record's roadmap into rows, quarters in Q1 → Q4 order.

    Only quarters present in the roadmap produce rows.
    """
    rows: List[RoadmapRow] = []
    for index, record in enumerate(records):
        if record.analysis is None:
            continue
        for quarter, goals in record.analysis.ordered_roadmap():
            if goals is None:
                continue
            rng = flavor.rng(record.id, f"roadmap:{quarter.value}")
            rows.append(RoadmapRow(
                idea_label=idea_label(index),
                record_index=index,
                quarter=quarter.label,
                goals=goals,
                priority=estimate_priority(goals, rng),
                length=len(goals),
            ))
    return rows


def roadmap_grid(rows: Sequence[RoadmapRow]) -> List[RoadmapGrid]:
    """Per-idea Q1..Q4 slots; quarters without a goal stay as empty slots."""
    by_record: Dict[int, Dict[str, RoadmapRow]] = {}
    labels: Dict[int, str] = {}
    for row in rows:
        by_record.setdefault(row.record_index, {})[row.quarter] = row
        labels[row.record_index] = row.idea_label
    return [
        RoadmapGrid(
            idea_label=labels[index],
            record_index=index,
            slots=[RoadmapSlot(quarter=q.label, row=quarters.get(q.label)) for q in Quarter],
        )
        for index, quarters in by_record.items()
    ]


def priority_distribution(rows: Sequence[RoadmapRow]) -> dict[str, int]:
    """Counts keyed "<QUARTER>-<PRIORITY>", ordered by quarter then priority."""
    counts: dict[str, int] = {}
    for quarter in Quarter:
        for level in Level:
            n = sum(1 for r in rows if r.quarter == quarter.label and r.priority == level)
            if n:
                counts[f"{quarter.label}-{level.value}"] = n
    return counts


def roadmap_report(records: Sequence[IdeaRecord], flavor: FlavorSource) -> RoadmapReport:
    rows = expand_roadmap(records, flavor)
    report = RoadmapReport(
        rows=rows,
        grid=roadmap_grid(rows),
        priority_distribution=priority_distribution(rows),
    )
    logger.info("roadmap_expanded", rows=len(rows), ideas=len(report.grid))
    return report
