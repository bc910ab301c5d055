"""Shared fixtures for the random network tests."""

import numpy as np
import pytest

from random_network.core.base_models import RandomService


class ScriptedRandomService(RandomService):
    """Random service replaying fixed Poisson draws and link candidates.

    normal() returns 0, 1, 2, ... so node values equal node indices.
    """

    def __init__(self, poisson_draws=None, candidates=None):
        super().__init__()
        self.poisson_draws = list(poisson_draws or [])
        self.candidates = list(candidates or [])
        self.calls = []

    def normal(self, count, mean=0.0, stddev=1.0):
        self.calls.append(("normal", count, mean, stddev))
        return np.arange(count, dtype=float)

    def poisson(self, mean):
        self.calls.append(("poisson", mean))
        return self.poisson_draws.pop(0) if self.poisson_draws else 0

    def uniform_int(self, count, low, high):
        self.calls.append(("uniform_int", count, low, high))
        drawn, self.candidates = self.candidates[:count], self.candidates[count:]
        return np.array(drawn, dtype=np.int64)


@pytest.fixture
def scripted_service():
    """Factory for scripted random services."""
    return ScriptedRandomService
