"""
Base classes and interfaces for random network components.

This module provides the abstract interface for the random-number service
that network operations draw their samples from.
"""

from abc import ABC, abstractmethod
import numpy as np


class RandomService(ABC):
    """
    Abstract base class for random-number services.

    This defines the interface a Network uses to draw node values and
    link candidates. Implementations may be seeded or scripted so that
    network topologies can be reproduced exactly.
    """

    def __init__(self):
        self.name = self.__class__.__name__

    @abstractmethod
    def normal(self, count: int, mean: float = 0.0, stddev: float = 1.0) -> np.ndarray:
        """
        Draw independent normally distributed samples.

        Args:
            count: Number of samples
            mean: Mean of the distribution
            stddev: Standard deviation of the distribution

        Returns:
            Array of *count* floats
        """
        pass

    @abstractmethod
    def poisson(self, mean: float) -> int:
        """
        Draw a single Poisson distributed sample.

        Args:
            mean: Mean of the distribution

        Returns:
            Non-negative integer sample
        """
        pass

    @abstractmethod
    def uniform_int(self, count: int, low: int, high: int) -> np.ndarray:
        """
        Draw independent integers uniformly distributed in [low, high].

        Args:
            count: Number of samples
            low: Smallest possible value
            high: Largest possible value (inclusive)

        Returns:
            Array of *count* integers
        """
        pass
