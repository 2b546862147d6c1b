"""Utility functions for clustering algorithms."""

from .convergence import ChangeInAssignments

from .validation import (
    validate_data,
    check_n_clusters,
    check_n_trials,
    check_random_state
)

__all__ = [
    # Convergence criteria
    'ChangeInAssignments',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_n_trials',
    'check_random_state'
]
