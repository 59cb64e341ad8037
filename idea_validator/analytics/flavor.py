"""Random source for presentational "flavor" fields.

Categorical labels such as market size or threat level, roadmap priorities of
goals without a priority keyword, and funding-readiness jitter are not
predictive. They are drawn from a ``FlavorSource`` so that callers choose
between two behaviours:

  stable=True   each draw uses random.Random seeded from (seed, key, topic);
                the same idea always shows the same labels
  stable=False  draws use one unseeded generator; labels change on every call
"""
import hashlib
import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_SEED = "idea-validator"


class FlavorSource:
    """Hand out random generators keyed by idea and topic."""

    def __init__(self, stable: bool = True, seed: str = DEFAULT_SEED,
                 rng: Optional[random.Random] = None) -> None:
        self.stable = stable
        self.seed = seed
        self._shared = rng or random.Random()

    def rng(self, key: str, topic: str) -> random.Random:
        """Generator for one (key, topic) pair."""
        if not self.stable:
            return self._shared
        digest = hashlib.sha256(f"{self.seed}:{key}:{topic}".encode("utf-8")).hexdigest()
        return random.Random(int(digest[:16], 16))


def choice(rng: random.Random, options: Sequence[T]) -> T:
    """Uniform pick, equivalent to options[floor(U[0,1) * len)]."""
    return options[int(rng.random() * len(options))]


def uniform(rng: random.Random, low: float, high: float) -> float:
    """Uniform draw in [low, high)."""
    return low + rng.random() * (high - low)
