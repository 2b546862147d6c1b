"""Initialization strategies for clustering algorithms."""

from .random import RandomInit
from .kmeans_plusplus import KMeansPlusPlusInit

__all__ = [
    'RandomInit',
    'KMeansPlusPlusInit'
]
