"""
Empty cluster reseeding strategies.

Each handler picks a donor point from the previous assignment, marks it as
taken, and refuses with EmptyClusterError when no donor is left.
"""

from __future__ import annotations

import pytest
import torch

from multikmeans import CentroidCluster, EuclideanDistance, EmptyClusterError
from multikmeans.updates import (
    EmptyClusterStrategy,
    LargestVarianceReseed,
    LargestPointsNumberReseed,
    FarthestPointReseed,
    ErrorOnEmpty,
    get_empty_cluster_handler,
)


def _clusters():
    """
    Cluster 0: indices 0-1, distances 1, 9  (variance 32)
    Cluster 1: indices 2-4, distances 1, 2, 3 (variance 1)
    Cluster 2: empty
    """
    wide = CentroidCluster(
        center=torch.tensor([0.0]),
        points=torch.tensor([[1.0], [9.0]]),
        indices=torch.tensor([0, 1])
    )
    packed = CentroidCluster(
        center=torch.tensor([100.0]),
        points=torch.tensor([[101.0], [102.0], [103.0]]),
        indices=torch.tensor([2, 3, 4])
    )
    empty = CentroidCluster.empty(torch.tensor([50.0]))
    return [wide, packed, empty]


def _generator():
    return torch.Generator().manual_seed(0)


def test_largest_variance_takes_from_widest_cluster():
    available = torch.ones(5, dtype=torch.bool)

    center = LargestVarianceReseed().reseed(_clusters(), EuclideanDistance(), available, _generator())

    assert center.item() in (1.0, 9.0)
    taken = torch.nonzero(~available).squeeze(1).tolist()
    assert len(taken) == 1 and taken[0] in (0, 1)


def test_largest_points_number_takes_from_biggest_cluster():
    available = torch.ones(5, dtype=torch.bool)

    center = LargestPointsNumberReseed().reseed(_clusters(), EuclideanDistance(), available, _generator())

    assert center.item() in (101.0, 102.0, 103.0)
    assert available[:2].all()
    assert (~available[2:]).sum().item() == 1


def test_farthest_point_takes_farthest_then_next():
    clusters = _clusters()
    available = torch.ones(5, dtype=torch.bool)
    handler = FarthestPointReseed()

    first = handler.reseed(clusters, EuclideanDistance(), available, _generator())
    second = handler.reseed(clusters, EuclideanDistance(), available, _generator())

    assert first.item() == 9.0
    assert second.item() == 103.0
    assert available.tolist() == [True, False, True, True, False]


def test_taken_points_shrink_donor_cluster():
    # After both wide members are gone the packed cluster is the only donor
    clusters = _clusters()
    available = torch.tensor([False, False, True, True, True])

    center = LargestVarianceReseed().reseed(clusters, EuclideanDistance(), available, _generator())

    assert center.item() in (101.0, 102.0, 103.0)


@pytest.mark.parametrize("handler", [LargestVarianceReseed(), LargestPointsNumberReseed(),
                                     FarthestPointReseed()])
def test_no_donor_left_raises(handler):
    available = torch.zeros(5, dtype=torch.bool)
    with pytest.raises(EmptyClusterError):
        handler.reseed(_clusters(), EuclideanDistance(), available, _generator())


def test_error_strategy_always_raises():
    available = torch.ones(5, dtype=torch.bool)
    with pytest.raises(EmptyClusterError, match="empty cluster encountered"):
        ErrorOnEmpty().reseed(_clusters(), EuclideanDistance(), available)
    assert available.all()


@pytest.mark.parametrize("name, cls", [
    ("largest_variance", LargestVarianceReseed),
    ("largest_points_number", LargestPointsNumberReseed),
    ("farthest_point", FarthestPointReseed),
    ("error", ErrorOnEmpty),
    (EmptyClusterStrategy.FARTHEST_POINT, FarthestPointReseed),
])
def test_handler_lookup(name, cls):
    assert isinstance(get_empty_cluster_handler(name), cls)


def test_handler_lookup_passes_instances_and_rejects_unknown():
    handler = FarthestPointReseed()
    assert get_empty_cluster_handler(handler) is handler
    with pytest.raises(ValueError):
        get_empty_cluster_handler("nearest_point")
