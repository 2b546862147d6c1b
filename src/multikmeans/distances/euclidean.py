"""
Euclidean distance metrics for clustering.

The most common distance metric, used by k-means and to score partitions.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - μ|| where μ is the cluster center.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False, return actual Euclidean distances (default).
        """
        self.squared = squared

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute Euclidean distances from points to a center.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor

        Returns:
            (n,) tensor of distances
        """
        diff = points - center.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"


class WeightedEuclideanDistance(DistanceMetric):
    """Weighted Euclidean distance with feature weights.

    Computes sqrt(sum_i w_i * (x_i - μ_i)²) where w_i are feature weights.
    """

    def __init__(self, weights: Tensor, squared: bool = False):
        """
        Args:
            weights: (d,) tensor of non-negative feature weights
            squared: Whether to return squared distances
        """
        weights = torch.as_tensor(weights, dtype=torch.float32)
        if weights.dim() != 1:
            raise ValueError(f"Expected 1D weights, got {weights.dim()}D")
        if (weights < 0).any():
            raise ValueError("Feature weights must be non-negative")
        self.weights = weights
        self.squared = squared

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute weighted Euclidean distances.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor

        Returns:
            (n,) tensor of distances
        """
        # Ensure weights are on same device
        weights = self.weights.to(device=points.device, dtype=points.dtype)

        diff = points - center.unsqueeze(0)
        weighted_sq_diff = weights.unsqueeze(0) * diff * diff
        squared_distances = torch.sum(weighted_sq_diff, dim=1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)
