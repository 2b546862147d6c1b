"""Objective functions for ranking clustering results."""

from .variance import DistanceVarianceObjective, distance_variance, member_distances

__all__ = [
    'DistanceVarianceObjective',
    'distance_variance',
    'member_distances'
]
