"""
Coordinate-wise distance metrics: Manhattan, Chebyshev and Canberra.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class ManhattanDistance(DistanceMetric):
    """L1 distance, sum_i |x_i - μ_i|."""

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        return torch.sum(torch.abs(points - center.unsqueeze(0)), dim=1)

    def __repr__(self) -> str:
        return "ManhattanDistance()"


class ChebyshevDistance(DistanceMetric):
    """L-infinity distance, max_i |x_i - μ_i|."""

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        diff = torch.abs(points - center.unsqueeze(0))
        if diff.shape[1] == 0:
            return torch.zeros(diff.shape[0], dtype=diff.dtype, device=diff.device)
        return diff.max(dim=1)[0]

    def __repr__(self) -> str:
        return "ChebyshevDistance()"


class CanberraDistance(DistanceMetric):
    """Canberra distance, sum_i |x_i - μ_i| / (|x_i| + |μ_i|).

    Coordinates where both values are zero contribute nothing.
    """

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        center = center.unsqueeze(0)
        num = torch.abs(points - center)
        denom = torch.abs(points) + torch.abs(center)
        terms = torch.where(denom == 0, torch.zeros_like(num), num / denom.clamp(min=1e-30))
        return torch.sum(terms, dim=1)

    def __repr__(self) -> str:
        return "CanberraDistance()"
