# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the test suite.

    >>> X, y = make_blobs(n_per=50, centers=[(0, 0), (10, 0)], seed=0)
    >>> X.shape, y.shape
    ((100, 2), (100,))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray


def make_blobs(
    n_per: int = 100,
    centers: Sequence[Sequence[float]] = ((0.0, 0.0), (10.0, 0.0), (0.0, 10.0)),
    spread: float = 0.5,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Isotropic Gaussian blobs, ``n_per`` points around each center.

    Parameters
    ----------
    n_per : int
        Points per blob.
    centers : sequence of points
        Blob centers; all must share one dimension.
    spread : float
        Standard deviation of each coordinate.
    seed : Optional[int]
        RNG seed for reproducibility.

    Returns
    -------
    X : (n_per * len(centers), d) float32 array, ordered blob by blob
    y : (n_per * len(centers),) int array of blob labels
    """
    rng = np.random.default_rng(seed)
    centers = np.asarray(centers, dtype=np.float64)
    K, d = centers.shape

    X = np.concatenate([
        centers[k] + spread * rng.standard_normal((n_per, d)) for k in range(K)
    ]).astype(np.float32)
    y = np.repeat(np.arange(K), n_per)
    return X, y


def make_line_1d(values: Sequence[float]) -> NDArray:
    """Column vector of 1D points, shape (len(values), 1)."""
    return np.asarray(values, dtype=np.float32).reshape(-1, 1)
