"""
Core data structures for multi-trial clustering.

This module provides the containers passed between a clustering procedure
and the trial orchestrator: clusters with their centers, the partition a
single run produces, and the scored result of one trial.
"""

from typing import Optional, List
import math
import torch
from torch import Tensor
from dataclasses import dataclass


@dataclass
class CentroidCluster:
    """A cluster represented by a center and the points assigned to it.

    The center need not be one of the input points. A cluster may have no
    members at all, which is a valid (if poor) outcome of a clustering run.
    """

    center: Tensor               # (d,) cluster center
    points: Tensor               # (m, d) member points, m may be 0
    indices: Optional[Tensor] = None  # (m,) row indices of members in the input

    def __post_init__(self):
        """Validate shapes and fill in defaults."""
        if self.center.dim() != 1:
            raise ValueError(f"Expected 1D center, got {self.center.dim()}D")
        if self.points.dim() != 2:
            raise ValueError(f"Expected 2D points, got {self.points.dim()}D")
        if self.points.shape[0] > 0 and self.points.shape[1] != self.center.shape[0]:
            raise ValueError(f"Points have dimension {self.points.shape[1]}, "
                             f"center has {self.center.shape[0]}")
        if self.indices is not None and self.indices.shape[0] != self.points.shape[0]:
            raise ValueError(f"Got {self.indices.shape[0]} indices for "
                             f"{self.points.shape[0]} points")

    @property
    def size(self) -> int:
        """Number of member points."""
        return self.points.shape[0]

    @property
    def is_empty(self) -> bool:
        """Whether no point was assigned to this cluster."""
        return self.size == 0

    @property
    def dimension(self) -> int:
        return self.center.shape[0]

    @classmethod
    def empty(cls, center: Tensor) -> 'CentroidCluster':
        """Create a cluster with no members around ``center``."""
        points = torch.empty(0, center.shape[0], dtype=center.dtype, device=center.device)
        indices = torch.empty(0, dtype=torch.long, device=center.device)
        return cls(center=center, points=points, indices=indices)

    def __repr__(self) -> str:
        return f"CentroidCluster(size={self.size}, center={self.center.tolist()})"


# One clustering run's output. Every input point belongs to exactly one cluster.
Partition = List[CentroidCluster]


@dataclass
class TrialResult:
    """Scored outcome of a clustering trial.

    Also used as the accumulator when folding over trials: the initial
    accumulator has no partition and an infinite score.
    """

    trial: int                       # 1-based trial number, 0 before any trial
    partition: Optional[Partition] = None
    score: float = math.inf

    @property
    def is_empty(self) -> bool:
        """Whether this holds no partition yet."""
        return self.partition is None

    def cluster_sizes(self) -> List[int]:
        """Member counts of each cluster in the partition."""
        if self.partition is None:
            return []
        return [cluster.size for cluster in self.partition]
