"""
Strategies for replacing the center of a cluster that lost all of its points.

When an update step finds an empty cluster, a point is taken from one of the
other clusters of the previous assignment and used as the new center:

- largest_variance: a random member of the cluster whose member-to-center
  distances vary the most
- largest_points_number: a random member of the most populated cluster
- farthest_point: the point farthest from its own center
- error: give up and raise EmptyClusterError

A point that has been taken is no longer available to later reseeds in the
same update step.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union
import torch
from torch import Tensor

from ..base.interfaces import EmptyClusterHandler, DistanceMetric
from ..base.data_structures import CentroidCluster
from ..base.exceptions import EmptyClusterError
from ..objectives.variance import distance_variance, member_distances


class EmptyClusterStrategy(str, Enum):
    """Named policies for handling empty clusters."""

    LARGEST_VARIANCE = 'largest_variance'
    LARGEST_POINTS_NUMBER = 'largest_points_number'
    FARTHEST_POINT = 'farthest_point'
    ERROR = 'error'


def _available_members(cluster: CentroidCluster, available: Tensor) -> Tuple[Tensor, Tensor]:
    """Members of ``cluster`` that have not been taken yet."""
    mask = available[cluster.indices]
    return cluster.points[mask], cluster.indices[mask]


def _take(points: Tensor, indices: Tensor, position: int, available: Tensor) -> Tensor:
    available[indices[position]] = False
    return points[position].clone()


class LargestVarianceReseed(EmptyClusterHandler):
    """Take a random point from the cluster with the largest distance variance."""

    def reseed(self, clusters: List[CentroidCluster], distance: DistanceMetric,
               available: Tensor, generator: Optional[torch.Generator] = None) -> Tensor:
        max_variance = float('-inf')
        selected = None

        for cluster in clusters:
            points, indices = _available_members(cluster, available)
            if len(points) == 0:
                continue
            variance = distance_variance(points, cluster.center, distance)
            if variance > max_variance:
                max_variance = variance
                selected = (points, indices)

        if selected is None:
            raise EmptyClusterError()

        points, indices = selected
        position = torch.randint(len(points), (1,), generator=generator).item()
        return _take(points, indices, position, available)


class LargestPointsNumberReseed(EmptyClusterHandler):
    """Take a random point from the cluster with the most points."""

    def reseed(self, clusters: List[CentroidCluster], distance: DistanceMetric,
               available: Tensor, generator: Optional[torch.Generator] = None) -> Tensor:
        max_number = 0
        selected = None

        for cluster in clusters:
            points, indices = _available_members(cluster, available)
            if len(points) > max_number:
                max_number = len(points)
                selected = (points, indices)

        if selected is None:
            raise EmptyClusterError()

        points, indices = selected
        position = torch.randint(len(points), (1,), generator=generator).item()
        return _take(points, indices, position, available)


class FarthestPointReseed(EmptyClusterHandler):
    """Take the point that lies farthest from its cluster center."""

    def reseed(self, clusters: List[CentroidCluster], distance: DistanceMetric,
               available: Tensor, generator: Optional[torch.Generator] = None) -> Tensor:
        max_distance = float('-inf')
        selected = None

        for cluster in clusters:
            points, indices = _available_members(cluster, available)
            if len(points) == 0:
                continue
            distances = member_distances(points, cluster.center, distance)
            position = torch.argmax(distances).item()
            if distances[position].item() > max_distance:
                max_distance = distances[position].item()
                selected = (points, indices, position)

        if selected is None:
            raise EmptyClusterError()

        points, indices, position = selected
        return _take(points, indices, position, available)


class ErrorOnEmpty(EmptyClusterHandler):
    """Refuse to recover from an empty cluster."""

    def reseed(self, clusters: List[CentroidCluster], distance: DistanceMetric,
               available: Tensor, generator: Optional[torch.Generator] = None) -> Tensor:
        raise EmptyClusterError()


def get_empty_cluster_handler(
        strategy: Union[str, EmptyClusterStrategy, EmptyClusterHandler]) -> EmptyClusterHandler:
    """Resolve a strategy name to a handler instance.

    Handler instances are returned unchanged.
    """
    if isinstance(strategy, EmptyClusterHandler):
        return strategy

    try:
        strategy = EmptyClusterStrategy(strategy)
    except ValueError:
        raise ValueError(f"Unknown empty cluster strategy: {strategy}") from None

    if strategy == EmptyClusterStrategy.LARGEST_VARIANCE:
        return LargestVarianceReseed()
    elif strategy == EmptyClusterStrategy.LARGEST_POINTS_NUMBER:
        return LargestPointsNumberReseed()
    elif strategy == EmptyClusterStrategy.FARTHEST_POINT:
        return FarthestPointReseed()
    else:
        return ErrorOnEmpty()
