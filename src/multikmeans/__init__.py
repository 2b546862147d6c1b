"""
multikmeans: best-of-N clustering over randomly initialized trials.

Clustering procedures such as K-means depend on their random starting
centers. This package runs such a procedure several times and keeps the
partition whose clusters are tightest, measured as the sum over clusters
of the variance of member-to-center distances.

Example usage:
    >>> import torch
    >>> from multikmeans import KMeansPlusPlusClusterer, MultiTrialClusterer
    >>>
    >>> # Generate sample data
    >>> X = torch.randn(1000, 10)
    >>>
    >>> # Best of 10 K-means++ runs
    >>> clusterer = MultiTrialClusterer(
    ...     KMeansPlusPlusClusterer(n_clusters=5, random_state=0),
    ...     n_trials=10,
    ... )
    >>> partition = clusterer.cluster(X)
    >>> [cluster.size for cluster in partition]
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans_plusplus import KMeansPlusPlusClusterer
from .algorithms.multi_trial import MultiTrialClusterer
from .algorithms.builder import ClusteringBuilder, create_kmeans, create_multi_kmeans

# Distances and objectives
from .distances import (
    EuclideanDistance,
    WeightedEuclideanDistance,
    ManhattanDistance,
    ChebyshevDistance,
    CanberraDistance,
    get_distance
)
from .objectives import DistanceVarianceObjective, distance_variance, member_distances
from .updates import EmptyClusterStrategy

# Convenience imports
from .base import (
    CentroidCluster,
    TrialResult,
    ConvergenceError,
    EmptyClusterError
)

__all__ = [
    # Algorithms
    'KMeansPlusPlusClusterer',
    'MultiTrialClusterer',

    # Builder
    'ClusteringBuilder',
    'create_kmeans',
    'create_multi_kmeans',

    # Distances
    'EuclideanDistance',
    'WeightedEuclideanDistance',
    'ManhattanDistance',
    'ChebyshevDistance',
    'CanberraDistance',
    'get_distance',

    # Scoring
    'DistanceVarianceObjective',
    'distance_variance',
    'member_distances',

    # Core data structures
    'CentroidCluster',
    'TrialResult',
    'EmptyClusterStrategy',

    # Errors
    'ConvergenceError',
    'EmptyClusterError',

    # Version
    '__version__'
]
