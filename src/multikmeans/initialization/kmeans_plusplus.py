"""
K-means++ initialization strategy.

Selects initial cluster centers using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, DistanceMetric


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute distance from each point to nearest existing center
       - Choose next center with probability proportional to squared distance
    """

    def __init__(self, n_local_trials: int = 1):
        """
        Args:
            n_local_trials: Number of candidates to sample for each center. The
                           candidate that most reduces the total squared distance
                           is kept. 1 gives classic k-means++.
        """
        if n_local_trials < 1:
            raise ValueError(f"n_local_trials must be positive, got {n_local_trials}")
        self.n_local_trials = n_local_trials

    def initialize(self, points: Tensor, n_clusters: int,
                   distance: DistanceMetric,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        """Initialize cluster centers using K-means++.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            distance: Metric used to measure spread
            generator: CPU random number generator

        Returns:
            (n_clusters, d) tensor of centers, each a copy of an input point
        """
        n_points = points.shape[0]

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        taken = torch.zeros(n_points, dtype=torch.bool)

        # Choose first center uniformly at random
        first_idx = torch.randint(n_points, (1,), generator=generator).item()
        center_indices = [first_idx]
        taken[first_idx] = True

        # Squared distance from each point to its nearest chosen center
        min_sq = (distance(points, points[first_idx]) ** 2).double().cpu()

        while len(center_indices) < n_clusters:
            weights = torch.where(taken, torch.zeros_like(min_sq), min_sq)
            total = weights.sum().item()

            if total > 0:
                candidates = torch.multinomial(weights / total, self.n_local_trials,
                                               replacement=True, generator=generator)
            else:
                # Remaining points coincide with chosen centers
                remaining = torch.nonzero(~taken).squeeze(1)
                pick = torch.randint(len(remaining), (1,), generator=generator)
                candidates = remaining[pick]

            # Keep the candidate with the smallest resulting potential
            best_idx = None
            best_potential = float('inf')
            best_sq = None

            for idx in candidates.tolist():
                candidate_sq = (distance(points, points[idx]) ** 2).double().cpu()
                new_sq = torch.minimum(min_sq, candidate_sq)
                potential = new_sq.sum().item()

                if best_idx is None or potential < best_potential:
                    best_potential = potential
                    best_idx = idx
                    best_sq = new_sq

            center_indices.append(best_idx)
            taken[best_idx] = True
            min_sq = best_sq

        return points[center_indices].clone()
