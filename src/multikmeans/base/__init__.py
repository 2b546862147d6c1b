"""Base classes and interfaces for clustering algorithms."""

from .interfaces import (
    DistanceMetric,
    Clusterer,
    ClusteringObjective,
    InitializationStrategy,
    AssignmentStrategy,
    ParameterUpdater,
    EmptyClusterHandler,
    ConvergenceCriterion
)

from .data_structures import (
    CentroidCluster,
    Partition,
    TrialResult
)

from .exceptions import ConvergenceError, EmptyClusterError

from .clustering_base import BaseClusterer

__all__ = [
    # Interfaces
    'DistanceMetric',
    'Clusterer',
    'ClusteringObjective',
    'InitializationStrategy',
    'AssignmentStrategy',
    'ParameterUpdater',
    'EmptyClusterHandler',
    'ConvergenceCriterion',

    # Data structures
    'CentroidCluster',
    'Partition',
    'TrialResult',

    # Errors
    'ConvergenceError',
    'EmptyClusterError',

    # Base algorithm
    'BaseClusterer'
]
