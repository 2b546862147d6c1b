"""Distance metrics for clustering algorithms."""

from typing import Union

from ..base.interfaces import DistanceMetric
from .euclidean import EuclideanDistance, WeightedEuclideanDistance
from .minkowski import ManhattanDistance, ChebyshevDistance, CanberraDistance


def get_distance(distance: Union[str, DistanceMetric]) -> DistanceMetric:
    """Resolve a metric name to a DistanceMetric instance.

    Instances are returned unchanged.
    """
    if isinstance(distance, DistanceMetric):
        return distance
    if distance == 'euclidean':
        return EuclideanDistance()
    elif distance == 'sqeuclidean':
        return EuclideanDistance(squared=True)
    elif distance == 'manhattan':
        return ManhattanDistance()
    elif distance == 'chebyshev':
        return ChebyshevDistance()
    elif distance == 'canberra':
        return CanberraDistance()
    else:
        raise ValueError(f"Unknown distance: {distance}")


__all__ = [
    # Euclidean distances
    'EuclideanDistance',
    'WeightedEuclideanDistance',

    # Coordinate-wise distances
    'ManhattanDistance',
    'ChebyshevDistance',
    'CanberraDistance',

    'get_distance'
]
