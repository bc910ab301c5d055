"""
Numpy-backed random-number service.
"""

import logging
import numpy as np
from typing import Optional

from .base_models import RandomService

logger = logging.getLogger(__name__)


class NumpyRandomService(RandomService):
    """
    Random-number service drawing from a numpy Generator.

    Two services built with the same seed produce identical sample streams.
    """

    def __init__(self, random_seed: Optional[int] = None):
        """
        Initialize the random service.

        Args:
            random_seed: Random seed for reproducible results
        """
        super().__init__()
        self.random_seed = random_seed
        self.rng = np.random.default_rng(random_seed)

    def normal(self, count: int, mean: float = 0.0, stddev: float = 1.0) -> np.ndarray:
        """Draw *count* samples from N(mean, stddev^2)."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if stddev < 0:
            raise ValueError(f"stddev must be non-negative, got {stddev}")
        return self.rng.normal(mean, stddev, size=count)

    def poisson(self, mean: float) -> int:
        """Draw one sample from Poisson(mean)."""
        if mean < 0:
            raise ValueError(f"Poisson mean must be non-negative, got {mean}")
        return int(self.rng.poisson(mean))

    def uniform_int(self, count: int, low: int, high: int) -> np.ndarray:
        """Draw *count* integers uniformly from the closed range [low, high]."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return np.empty(0, dtype=np.int64)
        if low > high:
            raise ValueError(f"Empty range: low={low} > high={high}")
        return self.rng.integers(low, high, size=count, endpoint=True)

    def reseed(self, random_seed: Optional[int] = None):
        """
        Restart the sample stream from a new seed.

        Args:
            random_seed: New random seed (None for fresh OS entropy)
        """
        logger.debug(f"Reseeding random service with seed={random_seed}")
        self.random_seed = random_seed
        self.rng = np.random.default_rng(random_seed)
