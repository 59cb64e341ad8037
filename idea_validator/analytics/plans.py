"""Development and deployment taxonomies across an idea history."""
from typing import List, Sequence

from idea_validator.analytics.taxonomy import (
    classify_deployment,
    classify_development,
    estimate_complexity,
)
from idea_validator.analytics.utils import idea_label, ordered_counts
from idea_validator.models.analytics import DeploymentItem, DevelopmentItem
from idea_validator.models.enums import DeploymentCategory, DevelopmentCategory, Level
from idea_validator.models.idea import IdeaRecord


def development_taxonomy(records: Sequence[IdeaRecord]) -> List[DevelopmentItem]:
    """Classify every key development item of every record."""
    items: List[DevelopmentItem] = []
    for index, record in enumerate(records):
        if record.analysis is None:
            continue
        for text in record.analysis.key_developments:
            items.append(DevelopmentItem(
                idea_label=idea_label(index),
                record_index=index,
                text=text,
                category=classify_development(text),
                length=len(text),
            ))
    return items


def deployment_taxonomy(records: Sequence[IdeaRecord]) -> List[DeploymentItem]:
    """Classify every deployment step of every record, with its phase number."""
    items: List[DeploymentItem] = []
    for index, record in enumerate(records):
        if record.analysis is None:
            continue
        for phase, text in enumerate(record.analysis.deployment_steps, start=1):
            items.append(DeploymentItem(
                idea_label=idea_label(index),
                record_index=index,
                phase=phase,
                text=text,
                category=classify_deployment(text),
                complexity=estimate_complexity(text),
            ))
    return items


def development_category_counts(items: Sequence[DevelopmentItem]) -> dict[str, int]:
    return ordered_counts(
        (item.category.value for item in items),
        [c.value for c in DevelopmentCategory],
    )


def deployment_category_counts(items: Sequence[DeploymentItem]) -> dict[str, int]:
    return ordered_counts(
        (item.category.value for item in items),
        [c.value for c in DeploymentCategory],
    )


def deployment_complexity_counts(items: Sequence[DeploymentItem]) -> dict[str, int]:
    return ordered_counts(
        (item.complexity.value for item in items),
        [level.value for level in Level],
    )
