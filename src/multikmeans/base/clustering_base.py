"""
Base class for single-trial clustering procedures.

Provides the common algorithmic skeleton for alternating optimization
between assignment and update steps, producing a partition of the input.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Tuple, Union
import torch
from torch import Tensor
import numpy as np
import time
import warnings

from .interfaces import (
    Clusterer, DistanceMetric, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion, EmptyClusterHandler
)
from .data_structures import CentroidCluster
from ..utils.validation import validate_data, check_n_clusters, check_random_state


class BaseClusterer(Clusterer):
    """Base class implementing the alternating optimization framework.

    Subclasses need to specify:
    - Distance metric
    - Initialization strategy
    - Assignment strategy
    - Center update strategy
    - Empty cluster handler
    - Convergence criterion

    Each call to ``cluster`` is an independent trial. Randomness is drawn from
    a generator owned by the instance, so successive calls explore different
    initializations while a fixed ``random_state`` keeps the whole sequence
    reproducible.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = -1,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations (negative for no limit)
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Random seed or generator for reproducibility
            device: Torch device (None for auto-detect)
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state

        if device is None:
            self.device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')
        else:
            self.device = torch.device(device)

        self._generator = check_random_state(random_state)

        # These will be set by subclasses
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.empty_cluster_handler: Optional[EmptyClusterHandler] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None

        # Diagnostics from the most recent call
        self.n_iter_ = 0

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.initialization_strategy
        - self.assignment_strategy
        - self.update_strategy
        - self.empty_cluster_handler
        - self.convergence_criterion
        """
        pass

    def cluster(self, points: Union[Tensor, np.ndarray, list]) -> List[CentroidCluster]:
        """Run one clustering trial.

        Args:
            points: (n, d) data

        Returns:
            List of K clusters; every input row belongs to exactly one of them

        Raises:
            ValueError: If the data is invalid or K exceeds the number of points
            EmptyClusterError: If a cluster empties and cannot be reseeded
        """
        X = self._validate_data(points)
        check_n_clusters(self.n_clusters, X.shape[0])

        self._create_components()
        distance = self.distance_metric

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        start_time = time.time()
        centers = self.initialization_strategy.initialize(
            X, self.n_clusters, distance, self._generator
        )
        assignments = self.assignment_strategy.compute_assignments(X, centers, distance)
        clusters = self._build_clusters(X, centers, assignments)

        self.convergence_criterion.reset()
        self.convergence_criterion.check({'iteration': -1, 'assignments': assignments})

        converged = False
        iteration = 0

        # Main optimization loop
        while self.max_iter < 0 or iteration < self.max_iter:
            iter_start_time = time.time()

            # Update step
            centers, empty_cluster = self._update_centers(clusters, distance)

            # Assignment step
            assignments = self.assignment_strategy.compute_assignments(X, centers, distance)
            clusters = self._build_clusters(X, centers, assignments)

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'assignments': assignments,
                'empty_cluster': empty_cluster
            })
            iteration += 1

            if self.verbose >= 2:
                n_changed = self.convergence_criterion.history[-1]['n_changed']
                print(f"Iteration {iteration - 1:3d}: {n_changed} reassigned"
                      f"{', reseeded empty cluster' if empty_cluster else ''} "
                      f"({time.time() - iter_start_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration - 1}")
                break

        self.n_iter_ = iteration

        if self.verbose:
            if not converged:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations")
            print(f"Total clustering time: {time.time() - start_time:.3f}s")

        return clusters

    def _update_centers(self, clusters: List[CentroidCluster],
                        distance: DistanceMetric) -> Tuple[Tensor, bool]:
        """Compute the next centers from the current clusters.

        Clusters are visited in order. An empty cluster gets a center from the
        empty cluster handler, and the point it takes is removed from its donor,
        so donors visited later average only their remaining members. A donor
        left with no members is treated as empty itself.

        Returns:
            (K, d) centers and whether any cluster had to be reseeded
        """
        n_points = sum(cluster.size for cluster in clusters)
        available = torch.ones(n_points, dtype=torch.bool, device=clusters[0].center.device)
        empty_cluster = False
        new_centers = []
        for cluster in clusters:
            members = cluster.points[available[cluster.indices]]
            if members.shape[0] == 0:
                new_centers.append(self.empty_cluster_handler.reseed(
                    clusters, distance, available, self._generator
                ))
                empty_cluster = True
            else:
                new_centers.append(self.update_strategy.update(members))
        return torch.stack(new_centers), empty_cluster

    def _build_clusters(self, X: Tensor, centers: Tensor,
                        assignments: Tensor) -> List[CentroidCluster]:
        """Group points by assignment into clusters around ``centers``."""
        clusters = []
        for k in range(centers.shape[0]):
            indices = torch.nonzero(assignments == k).squeeze(1)
            clusters.append(CentroidCluster(
                center=centers[k],
                points=X[indices],
                indices=indices
            ))
        return clusters

    def _validate_data(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Validate and prepare input data."""
        return validate_data(X, dtype=torch.float32, device=self.device)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device
        }

    def set_params(self, **params) -> 'BaseClusterer':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            setattr(self, key, value)
        if 'random_state' in params:
            self._generator = check_random_state(params['random_state'])
        return self
