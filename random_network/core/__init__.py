"""
Random-number services for the random network package.
"""

from .base_models import RandomService
from .random_service import NumpyRandomService

__all__ = [
    "RandomService",
    "NumpyRandomService"
]
