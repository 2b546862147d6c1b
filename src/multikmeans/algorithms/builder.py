"""
Builder pattern for configuring clusterers.

Provides a fluent interface for assembling a K-means++ clusterer and,
optionally, the multi-trial wrapper around it.
"""

from typing import Optional, Union, Callable
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric, EmptyClusterHandler
from ..updates.empty_cluster import EmptyClusterStrategy
from ..utils.validation import check_n_trials
from .kmeans_plusplus import KMeansPlusPlusClusterer
from .multi_trial import MultiTrialClusterer


class ClusteringBuilder:
    """Fluent builder for creating clusterers.

    Examples
    --------
    >>> # Single-trial K-means++ with Manhattan distance
    >>> clusterer = (ClusteringBuilder()
    ...     .with_distance('manhattan')
    ...     .with_max_iter(100)
    ...     .build(n_clusters=5))

    >>> # Best of 10 trials, refusing empty clusters
    >>> clusterer = (ClusteringBuilder()
    ...     .with_empty_cluster_strategy('error')
    ...     .with_random_state(0)
    ...     .with_trials(10)
    ...     .build(n_clusters=3))
    """

    def __init__(self):
        """Initialize builder with defaults."""
        self._distance: Union[str, DistanceMetric] = 'euclidean'
        self._empty_cluster_strategy: Union[str, EmptyClusterStrategy,
                                            EmptyClusterHandler] = 'largest_variance'
        self._init = 'k-means++'
        self._tol = 0.0

        # Algorithm parameters
        self._max_iter = -1
        self._verbose = 0
        self._random_state = None
        self._device = None

        # Multi-trial parameters
        self._n_trials: Optional[int] = None
        self._scoring_distance = None

    def with_distance(self, distance: Union[str, DistanceMetric]) -> 'ClusteringBuilder':
        """Set the distance metric used by the clusterer."""
        self._distance = distance
        return self

    def with_empty_cluster_strategy(
            self, strategy: Union[str, EmptyClusterStrategy, EmptyClusterHandler]) -> 'ClusteringBuilder':
        """Set how empty clusters are handled."""
        self._empty_cluster_strategy = strategy
        return self

    def with_init(self, init: str) -> 'ClusteringBuilder':
        """Set initialization method ('k-means++' or 'random')."""
        self._init = init
        return self

    def with_kmeans_plusplus_init(self) -> 'ClusteringBuilder':
        """Use K-means++ initialization."""
        return self.with_init('k-means++')

    def with_random_init(self) -> 'ClusteringBuilder':
        """Use random initialization."""
        return self.with_init('random')

    def with_tol(self, tol: float) -> 'ClusteringBuilder':
        """Set the fraction of reassigned points treated as converged."""
        self._tol = tol
        return self

    def with_max_iter(self, max_iter: int) -> 'ClusteringBuilder':
        """Set maximum iterations per trial (negative for no limit)."""
        self._max_iter = max_iter
        return self

    def with_verbose(self, verbose: int) -> 'ClusteringBuilder':
        """Set verbosity level."""
        self._verbose = verbose
        return self

    def with_random_state(self, random_state: Union[int, torch.Generator]) -> 'ClusteringBuilder':
        """Set random seed."""
        self._random_state = random_state
        return self

    def with_device(self, device: Union[str, torch.device]) -> 'ClusteringBuilder':
        """Set computation device."""
        if isinstance(device, str):
            device = torch.device(device)
        self._device = device
        return self

    def with_trials(self, n_trials: int) -> 'ClusteringBuilder':
        """Run several trials and keep the best partition."""
        check_n_trials(n_trials)
        self._n_trials = n_trials
        return self

    def with_scoring_distance(
            self, distance: Union[str, DistanceMetric,
                                  Callable[[Tensor, Tensor], Tensor]]) -> 'ClusteringBuilder':
        """Score trials with a metric other than the clusterer's own."""
        self._scoring_distance = distance
        return self

    def build(self, n_clusters: int) -> Union[KMeansPlusPlusClusterer, MultiTrialClusterer]:
        """Build the clusterer.

        Parameters
        ----------
        n_clusters : int
            Number of clusters

        Returns
        -------
        clusterer : KMeansPlusPlusClusterer or MultiTrialClusterer
            The single-trial clusterer, wrapped in a MultiTrialClusterer
            when a trial count was set
        """
        clusterer = KMeansPlusPlusClusterer(
            n_clusters=n_clusters,
            max_iter=self._max_iter,
            distance=self._distance,
            empty_cluster_strategy=self._empty_cluster_strategy,
            init=self._init,
            tol=self._tol,
            verbose=max(self._verbose - 1, 0),
            random_state=self._random_state,
            device=self._device
        )

        if self._n_trials is None:
            clusterer.verbose = self._verbose
            return clusterer

        return MultiTrialClusterer(
            clusterer,
            n_trials=self._n_trials,
            distance=self._scoring_distance,
            verbose=self._verbose
        )


def _apply_options(builder: ClusteringBuilder, options: dict) -> None:
    for key, value in options.items():
        method = getattr(builder, f'with_{key}', None)
        if method is None:
            raise TypeError(f"Unknown option: {key}")
        method(value)


def create_kmeans(n_clusters: int, **kwargs) -> KMeansPlusPlusClusterer:
    """Create a single-trial K-means++ clusterer using the builder.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    **kwargs : dict
        Builder options, e.g. ``distance='manhattan'``, ``max_iter=50``

    Returns
    -------
    clusterer : KMeansPlusPlusClusterer
    """
    if 'trials' in kwargs:
        raise TypeError("Use create_multi_kmeans to run several trials")
    builder = ClusteringBuilder()
    _apply_options(builder, kwargs)
    return builder.build(n_clusters)


def create_multi_kmeans(n_clusters: int, n_trials: int, **kwargs) -> MultiTrialClusterer:
    """Create a best-of-``n_trials`` K-means++ clusterer using the builder.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    n_trials : int
        Number of trials
    **kwargs : dict
        Builder options, e.g. ``empty_cluster_strategy='error'``

    Returns
    -------
    clusterer : MultiTrialClusterer
    """
    builder = ClusteringBuilder().with_trials(n_trials)
    _apply_options(builder, kwargs)
    return builder.build(n_clusters)
