"""
Distance-variance objective for ranking partitions.

A partition is scored by summing, over its non-empty clusters, the sample
variance of the distances between each member and the cluster center.
Lower is better: tight clusters have members at similar distances from
their center.
"""

from typing import Callable, List, Union
import torch
from torch import Tensor

from ..base.interfaces import ClusteringObjective, DistanceMetric
from ..base.data_structures import CentroidCluster

DistanceFn = Union[DistanceMetric, Callable[[Tensor, Tensor], Tensor]]


def member_distances(points: Tensor, center: Tensor, distance: DistanceFn) -> Tensor:
    """Distances from each member to the center.

    ``distance`` may be batched, mapping (m, d) points and a (d,) center to
    (m,) distances, or pairwise, mapping one (d,) point and the center to a
    scalar. A call on the whole batch that does not return one value per
    member is repeated row by row.

    Args:
        points: (m, d) member points
        center: (d,) cluster center
        distance: Batched or pairwise metric

    Returns:
        (m,) distances
    """
    distances = torch.as_tensor(distance(points, center))
    if distances.shape == (points.shape[0],):
        return distances
    return torch.stack([torch.as_tensor(distance(point, center)).reshape(())
                        for point in points])


def distance_variance(points: Tensor, center: Tensor, distance: DistanceFn) -> float:
    """Sample variance of member-to-center distances.

    Uses the bias-corrected estimator (divisor m - 1). Fewer than two
    members give 0.0.

    Args:
        points: (m, d) member points
        center: (d,) cluster center
        distance: Batched or pairwise metric, see ``member_distances``

    Returns:
        Variance as a Python float
    """
    if points.shape[0] < 2:
        return 0.0
    return member_distances(points, center, distance).double().var().item()


class DistanceVarianceObjective(ClusteringObjective):
    """Sum of per-cluster distance variances.

    Empty clusters are skipped: they neither add to nor are penalized by
    the score.
    """

    def __init__(self, distance: DistanceFn):
        """
        Args:
            distance: Metric used to measure member-to-center distances
        """
        self.distance = distance

    def compute(self, partition: List[CentroidCluster]) -> float:
        """Compute the variance sum of a partition."""
        total = 0.0
        for cluster in partition:
            if cluster.is_empty:
                continue
            total += distance_variance(cluster.points, cluster.center, self.distance)
        return total

    @property
    def minimize(self) -> bool:
        return True
