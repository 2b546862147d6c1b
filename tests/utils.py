# tests/utils.py
"""
Small, reusable helpers used across the test suite.

Functions:
- cluster_at(distances): 1D cluster whose members lie at the given distances from its center.
- partition_labels(partition, n): per-point cluster labels recovered from member indices.
- assert_covers(partition, n): every input row appears in exactly one cluster.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.

Classes:
- ScriptedClusterer: stub clustering procedure replaying fixed partitions.
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import torch

from multikmeans.base.interfaces import Clusterer
from multikmeans.base.data_structures import CentroidCluster
from multikmeans.distances import EuclideanDistance


def cluster_at(distances: Sequence[float], center: float = 0.0) -> CentroidCluster:
    """
    Build a 1D cluster centered at ``center`` with members at the given
    (non-negative) Euclidean distances from it.
    """
    center_t = torch.tensor([center], dtype=torch.float32)
    if len(distances) == 0:
        return CentroidCluster.empty(center_t)
    points = torch.tensor([[center + d] for d in distances], dtype=torch.float32)
    return CentroidCluster(center=center_t, points=points)


def partition_labels(partition: List[CentroidCluster], n_points: int) -> np.ndarray:
    """Labels per input row, -1 where a row belongs to no cluster."""
    labels = np.full(n_points, -1, dtype=np.int64)
    for k, cluster in enumerate(partition):
        labels[cluster.indices.cpu().numpy()] = k
    return labels


def assert_covers(partition: List[CentroidCluster], n_points: int) -> None:
    """Every row index 0..n-1 appears in exactly one cluster."""
    all_indices = torch.cat([cluster.indices.cpu() for cluster in partition])
    assert len(all_indices) == n_points, f"{len(all_indices)} memberships for {n_points} points"
    assert torch.equal(torch.sort(all_indices).values, torch.arange(n_points)), \
        "Some points are missing or duplicated"


class ScriptedClusterer(Clusterer):
    """
    Stub clustering procedure returning preset partitions in order.

    ``fail_on`` (1-based) makes that call raise ``error`` instead. Calls are
    counted in ``calls``; each call records the points it received.
    """

    def __init__(self, partitions: Sequence[List[CentroidCluster]],
                 fail_on: Optional[int] = None,
                 error: Optional[Exception] = None):
        self.partitions = list(partitions)
        self.fail_on = fail_on
        self.error = error if error is not None else RuntimeError("scripted failure")
        self.calls = 0
        self.received: List[Any] = []

    @property
    def distance_metric(self) -> EuclideanDistance:
        return EuclideanDistance()

    def cluster(self, points: Any) -> List[CentroidCluster]:
        self.calls += 1
        self.received.append(points)
        if self.fail_on is not None and self.calls == self.fail_on:
            raise self.error
        return self.partitions[(self.calls - 1) % len(self.partitions)]


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] cluster {"n":300,"K":3,"trials":5} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        meta_str = " " + json.dumps(meta, separators=(",", ":")) if meta else ""
        print(f"[timing] {label}{meta_str} {dt:.3f}s")
