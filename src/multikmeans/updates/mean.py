"""
Mean update strategy for centroid-based clustering.
"""

from torch import Tensor

from ..base.interfaces import ParameterUpdater


class MeanUpdater(ParameterUpdater):
    """Updates a cluster center to the mean of its assigned points."""

    def update(self, points: Tensor, **kwargs) -> Tensor:
        """Compute cluster mean.

        Args:
            points: (m, d) points assigned to this cluster, m > 0
            **kwargs: Ignored

        Returns:
            (d,) mean of the points
        """
        if points.shape[0] == 0:
            raise ValueError("Cannot compute the mean of an empty cluster")
        return points.mean(dim=0)
