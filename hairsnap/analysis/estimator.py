"""Density estimation interface and the random stand-in used until a real model exists."""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

from pydantic import BaseModel, Field

from hairsnap.models.snapshot import Snapshot, SubScores

logger = logging.getLogger(__name__)


class DensityEstimate(BaseModel):
    overall: float = Field(ge=0, le=100)
    crown: Optional[float] = Field(default=None, ge=0, le=100)
    hairline: Optional[float] = Field(default=None, ge=0, le=100)


class DensityEstimator(Protocol):
    """Anything that can score a stored image for hair density."""

    def estimate(self, image_uri: str) -> DensityEstimate:
        ...


class RandomDensityEstimator:
    """Returns uniform random integer scores in [low, high] for every region.

    With a seed, each image draws from its own generator seeded by the seed and
    the image uri, so scores are reproducible per image regardless of call order
    or process.
    """

    def __init__(self, low: int = 60, high: int = 100, seed: int | None = None):
        if not 0 <= low <= high <= 100:
            raise ValueError(f"Invalid estimator bounds: low={low}, high={high}")
        self.low = low
        self.high = high
        self.seed = seed
        self._rng = random.Random()

    def _rng_for(self, image_uri: str) -> random.Random:
        if self.seed is None:
            return self._rng
        return random.Random(f"{self.seed}:{image_uri}")

    def estimate(self, image_uri: str) -> DensityEstimate:
        rng = self._rng_for(image_uri)
        estimate = DensityEstimate(
            overall=rng.randint(self.low, self.high),
            crown=rng.randint(self.low, self.high),
            hairline=rng.randint(self.low, self.high),
        )
        logger.debug("Estimated %s -> overall %.0f", image_uri, estimate.overall)
        return estimate


def score_snapshot(snapshot: Snapshot, estimator: DensityEstimator) -> Snapshot:
    """Return a copy of the snapshot carrying the estimator's scores."""
    estimate = estimator.estimate(snapshot.image_uri)
    return snapshot.model_copy(update={
        "density_score": estimate.overall,
        "sub_scores": SubScores(
            crown=estimate.crown,
            hairline=estimate.hairline,
            overall=estimate.overall,
        ),
    })
