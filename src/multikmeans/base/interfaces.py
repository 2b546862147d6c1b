"""
Core interfaces for the multi-trial clustering library.

This module defines the abstract base classes that all components must implement,
ensuring a consistent API between the single-trial clusterers, the strategies
they are assembled from, and the trial orchestrator that consumes them.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, TYPE_CHECKING
import torch
from torch import Tensor

if TYPE_CHECKING:
    from .data_structures import CentroidCluster


class DistanceMetric(ABC):
    """Abstract base class for point-to-center distance computations.

    Distances must be non-negative. Metrics are used both inside the
    clustering procedure (assignment, seeding) and by the trial orchestrator
    to score partitions, so the same instance should serve both.
    """

    @abstractmethod
    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute distances from points to a center.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor holding the reference point
            **kwargs: Metric-specific parameters

        Returns:
            (n,) tensor of distances
        """
        pass

    def __call__(self, a: Tensor, b: Tensor) -> Tensor:
        """Distance between ``a`` and ``b``.

        ``a`` may be a single (d,) point, in which case a 0-d tensor is returned.
        """
        if a.dim() == 1:
            return self.compute(a.unsqueeze(0), b)[0]
        return self.compute(a, b)


class Clusterer(ABC):
    """A single-trial clustering procedure.

    Given a set of points, returns a partition: a list of clusters, each with
    a center and its member points. Implementations must be callable
    repeatedly on the same input and must validate their own input.
    """

    @abstractmethod
    def cluster(self, points: Tensor) -> List['CentroidCluster']:
        """Partition ``points`` into clusters."""
        pass

    @property
    @abstractmethod
    def distance_metric(self) -> DistanceMetric:
        """The distance metric used internally by this procedure."""
        pass


class ClusteringObjective(ABC):
    """Abstract base class for partition quality functions."""

    @abstractmethod
    def compute(self, partition: List['CentroidCluster']) -> float:
        """Compute objective value of a partition.

        Args:
            partition: List of clusters produced by one clustering run

        Returns:
            Scalar objective value
        """
        pass

    @property
    @abstractmethod
    def minimize(self) -> bool:
        """Whether to minimize (True) or maximize (False) this objective."""
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster center initialization."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   distance: DistanceMetric,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        """Choose initial cluster centers.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of centers to choose
            distance: Metric used to spread the centers
            generator: Random number generator to draw from

        Returns:
            (n_clusters, d) tensor of initial centers
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centers: Tensor,
                            distance: DistanceMetric) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of data points
            centers: (K, d) tensor of cluster centers
            distance: Metric used to compare points with centers

        Returns:
            (n,) tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster center update strategies."""

    @abstractmethod
    def update(self, points: Tensor, **kwargs) -> Tensor:
        """Compute a new center from the points assigned to a cluster.

        Args:
            points: (m, d) tensor of member points, m > 0

        Returns:
            (d,) tensor for the new center
        """
        pass


class EmptyClusterHandler(ABC):
    """Abstract base class for choosing a replacement center for an empty cluster."""

    @abstractmethod
    def reseed(self, clusters: List['CentroidCluster'],
               distance: DistanceMetric,
               available: Tensor,
               generator: Optional[torch.Generator] = None) -> Tensor:
        """Pick a new center for an empty cluster.

        Args:
            clusters: Clusters from the previous assignment step
            distance: Metric used by the clustering procedure
            available: (n,) boolean mask of input points still eligible as
                donors; the handler clears the entry of the point it takes
            generator: Random number generator to draw from

        Returns:
            (d,) tensor for the replacement center

        Raises:
            EmptyClusterError: If no replacement can be found
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
