"""Center update strategies for clustering algorithms."""

from .mean import MeanUpdater
from .empty_cluster import (
    EmptyClusterStrategy,
    LargestVarianceReseed,
    LargestPointsNumberReseed,
    FarthestPointReseed,
    ErrorOnEmpty,
    get_empty_cluster_handler
)

__all__ = [
    'MeanUpdater',
    'EmptyClusterStrategy',
    'LargestVarianceReseed',
    'LargestPointsNumberReseed',
    'FarthestPointReseed',
    'ErrorOnEmpty',
    'get_empty_cluster_handler'
]
