"""
Input validation utilities.

Provides functions for validating data and configuration before clustering,
including data type conversion and sanity checks.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float32,
                  device: Optional[torch.device] = None) -> Tensor:
    """Validate and convert input data to a 2D tensor.

    A 1D input is treated as n samples with one feature each.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        device: Target device

    Returns:
        Validated (n, d) tensor

    Raises:
        ValueError: If the data is None, not 2D, empty, or not finite
        TypeError: If the data cannot be converted to a tensor
    """
    if X is None:
        raise ValueError("Input data must not be None")

    # Convert to tensor
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        X = torch.tensor(X, dtype=dtype, device=device)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1:
        X = X.unsqueeze(1)
    elif X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    n_samples, n_features = X.shape
    if n_samples == 0:
        raise ValueError("Found 0 samples, but need at least 1")
    if n_features == 0:
        raise ValueError("Found 0 features, but need at least 1")

    if torch.isnan(X).any():
        raise ValueError("Input contains NaN values")
    if torch.isinf(X).any():
        raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        ValueError: If invalid
    """
    if not isinstance(n_clusters, int) or isinstance(n_clusters, bool):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise ValueError(f"n_clusters ({n_clusters}) cannot be larger than "
                        f"n_samples ({n_samples})")


def check_n_trials(n_trials: int) -> None:
    """Validate number of clustering trials.

    Raises:
        TypeError: If not an integer
        ValueError: If not positive
    """
    if not isinstance(n_trials, int) or isinstance(n_trials, bool):
        raise TypeError(f"n_trials must be int, got {type(n_trials)}")

    if n_trials < 1:
        raise ValueError(f"n_trials must be positive, got {n_trials}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a freshly seeded generator

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
