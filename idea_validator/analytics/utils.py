"""Rounding and text helpers shared by the analytics modules.

Every derived integer uses half-up rounding (2.5 → 3) through Decimal,
never Python's banker's rounding.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional, Sequence

EXCERPT_LENGTH = 30


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision and ROUND_HALF_UP rounding.

    Args:
        value: Numeric value to convert.
        places: Number of decimal places to quantize to.

    Returns:
        Decimal with the specified precision.
    """
    if isinstance(value, Decimal):
        return value.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places,
        rounding=ROUND_HALF_UP,
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(to_decimal(value, places=0))


def clamp(value: float, min_val: float = 0.0, max_val: float = 100.0) -> float:
    """Clamp a value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match against any keyword."""
    lowered = text.lower()
    return any(word in lowered for word in keywords)


def count_words(text: str) -> int:
    return len(text.split())


def excerpt(text: Optional[str], length: int = EXCERPT_LENGTH) -> str:
    """First ``length`` characters followed by an ellipsis."""
    return f"{(text or '')[:length]}..."


def idea_label(index: int) -> str:
    """Display label for the record at zero-based ``index``."""
    return f"Idea {index + 1}"


def count_by(labels: Iterable[str]) -> dict[str, int]:
    """Count occurrences, preserving first-seen order."""
    counts: dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return counts


def ordered_counts(labels: Iterable[str], order: List[str]) -> dict[str, int]:
    """Count occurrences, ordered by ``order`` and omitting zero counts."""
    raw = count_by(labels)
    return {key: raw[key] for key in order if key in raw}
