"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster center under the distance metric.
"""

import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    Ties go to the lowest cluster index.
    """

    def compute_assignments(self, points: Tensor, centers: Tensor,
                            distance: DistanceMetric) -> Tensor:
        """Assign each point to nearest center.

        Args:
            points: (n, d) data points
            centers: (K, d) cluster centers
            distance: Metric used to compare points with centers

        Returns:
            (n,) tensor of cluster indices
        """
        n_points = points.shape[0]
        n_clusters = centers.shape[0]

        # Compute distance matrix
        distances = torch.zeros(n_points, n_clusters, dtype=points.dtype, device=points.device)

        for k in range(n_clusters):
            distances[:, k] = distance(points, centers[k])

        # Assign to nearest cluster (minimum distance)
        return torch.argmin(distances, dim=1)
