"""
K-means++ clustering algorithm.

Single-trial K-means with K-means++ seeding, built from the modular
components. Used on its own or as the trial procedure wrapped by
MultiTrialClusterer.
"""

from typing import Optional, Union, Dict, Any
import torch

from ..base.clustering_base import BaseClusterer
from ..base.interfaces import DistanceMetric, EmptyClusterHandler
from ..assignments.hard import HardAssignment
from ..distances import get_distance
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.random import RandomInit
from ..updates.mean import MeanUpdater
from ..updates.empty_cluster import EmptyClusterStrategy, get_empty_cluster_handler
from ..utils.convergence import ChangeInAssignments


class KMeansPlusPlusClusterer(BaseClusterer):
    """K-means clustering with K-means++ initialization.

    Partitions data into K clusters by alternating nearest-center assignment
    and mean updates until no point changes cluster.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    max_iter : int, default=-1
        Maximum number of iterations; negative means iterate until stable
    distance : str or DistanceMetric, default='euclidean'
        Metric for assignment and seeding: 'euclidean', 'sqeuclidean',
        'manhattan', 'chebyshev', 'canberra' or a DistanceMetric instance
    empty_cluster_strategy : str, EmptyClusterStrategy or EmptyClusterHandler,
        default='largest_variance'
        What to do when a cluster loses all of its points:
        - 'largest_variance' : reseed from the cluster with the largest distance variance
        - 'largest_points_number' : reseed from the most populated cluster
        - 'farthest_point' : reseed with the point farthest from its center
        - 'error' : raise EmptyClusterError
    init : str, default='k-means++'
        Initialization method:
        - 'k-means++' : K-means++ initialization
        - 'random' : Random initialization
    tol : float, default=0.0
        Fraction of reassigned points below which the run is considered converged
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility
    device : torch.device, optional
        Device for computation (CPU/GPU)

    Attributes
    ----------
    n_iter_ : int
        Number of iterations run by the most recent call to ``cluster``
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = -1,
                 distance: Union[str, DistanceMetric] = 'euclidean',
                 empty_cluster_strategy: Union[str, EmptyClusterStrategy,
                                               EmptyClusterHandler] = 'largest_variance',
                 init: str = 'k-means++',
                 tol: float = 0.0,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[torch.device] = None):
        """Initialize K-means++ algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state,
            device=device
        )
        self.distance = get_distance(distance)
        self.empty_cluster_strategy = empty_cluster_strategy
        self.init = init
        self.tol = tol

        # Fail on unknown names at construction rather than on first use
        get_empty_cluster_handler(empty_cluster_strategy)
        if init not in ('k-means++', 'random'):
            raise ValueError(f"Unknown init method: {init}")

    @property
    def distance_metric(self) -> DistanceMetric:
        """The metric used for assignment, seeding and empty cluster handling."""
        return self.distance

    def _create_components(self) -> None:
        """Create K-means++ specific components."""
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()
        self.empty_cluster_handler = get_empty_cluster_handler(self.empty_cluster_strategy)

        if self.init == 'k-means++':
            self.initialization_strategy = KMeansPlusPlusInit()
        elif self.init == 'random':
            self.initialization_strategy = RandomInit()
        else:
            raise ValueError(f"Unknown init method: {self.init}")

        self.convergence_criterion = ChangeInAssignments(tol=self.tol)

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        params = super().get_params(deep)
        params.update({
            'distance': self.distance,
            'empty_cluster_strategy': self.empty_cluster_strategy,
            'init': self.init,
            'tol': self.tol
        })
        return params

    def set_params(self, **params) -> 'KMeansPlusPlusClusterer':
        """Set parameters (sklearn compatibility)."""
        if 'distance' in params:
            params['distance'] = get_distance(params['distance'])
        super().set_params(**params)
        return self

    def __repr__(self) -> str:
        strategy = getattr(self.empty_cluster_strategy, 'value', self.empty_cluster_strategy)
        return (f"KMeansPlusPlusClusterer(n_clusters={self.n_clusters}, "
                f"max_iter={self.max_iter}, distance={self.distance!r}, "
                f"empty_cluster_strategy={strategy!r})")
