"""
Random initialization strategy for clustering algorithms.

Selects random points from the dataset as initial cluster centers.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, DistanceMetric


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random points (without replacement) as initial centers.
    The distance metric is not consulted.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   distance: DistanceMetric,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        """Initialize clusters with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            distance: Unused
            generator: CPU random number generator

        Returns:
            (n_clusters, d) tensor of centers
        """
        n_points = points.shape[0]

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        # Select random indices without replacement
        indices = torch.randperm(n_points, generator=generator)[:n_clusters]

        return points[indices.to(points.device)].clone()
