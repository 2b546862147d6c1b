"""Clustering algorithm implementations."""

from .kmeans_plusplus import KMeansPlusPlusClusterer
from .multi_trial import MultiTrialClusterer
from .builder import ClusteringBuilder, create_kmeans, create_multi_kmeans

__all__ = [
    'KMeansPlusPlusClusterer',
    'MultiTrialClusterer',
    'ClusteringBuilder',
    'create_kmeans',
    'create_multi_kmeans'
]
