"""
Multi-trial clustering.

Runs a clustering procedure that depends on its random initialization
several times over the same data and keeps the partition whose clusters
are tightest.

Example usage:
    >>> import torch
    >>> from multikmeans import KMeansPlusPlusClusterer, MultiTrialClusterer
    >>>
    >>> X = torch.randn(500, 2)
    >>> clusterer = MultiTrialClusterer(KMeansPlusPlusClusterer(n_clusters=4), n_trials=10)
    >>> partition = clusterer.cluster(X)
"""

from functools import reduce
from typing import Any, Callable, Dict, Iterator, List, Optional, Union
from torch import Tensor

from ..base.interfaces import Clusterer, DistanceMetric
from ..base.data_structures import CentroidCluster, TrialResult
from ..distances import get_distance
from ..objectives.variance import DistanceVarianceObjective
from ..utils.validation import check_n_trials


def _keep_better(best: TrialResult, candidate: TrialResult) -> TrialResult:
    """Reduction step: the candidate replaces the best on a lower or equal score."""
    if candidate.score <= best.score:
        return candidate
    return best


class MultiTrialClusterer(Clusterer):
    """Wrapper that performs several clustering trials and keeps the best.

    Each trial runs the wrapped clusterer on the same points. A partition is
    scored by summing, over its non-empty clusters, the variance of the
    distances from members to their center; the lowest score wins. When
    several trials reach the same lowest score, the latest of them is kept.

    The wrapped clusterer validates the input and decides how to handle
    empty clusters. Any exception it raises ends the whole run and reaches
    the caller unchanged: no trial is retried and no partial result is
    returned.

    Parameters
    ----------
    clusterer : Clusterer
        Single-trial procedure; any object with a ``cluster(points)`` method
        returning a list of CentroidCluster
    n_trials : int
        Number of trials to run, at least 1
    distance : str, DistanceMetric or callable, optional
        Metric used to score partitions. Defaults to the clusterer's
        ``distance_metric`` so that scoring agrees with how the clusterer
        assigned points.
    verbose : int, default=0
        Verbosity level (0=silent, 1=summary, 2=per trial)
    """

    def __init__(self,
                 clusterer: Clusterer,
                 n_trials: int,
                 distance: Optional[Union[str, DistanceMetric,
                                          Callable[[Tensor, Tensor], Tensor]]] = None,
                 verbose: int = 0):
        check_n_trials(n_trials)

        if distance is None:
            distance = getattr(clusterer, 'distance_metric', None)
            if distance is None:
                raise ValueError("No distance given and the clusterer does not "
                                 "expose a distance_metric")
        elif isinstance(distance, str):
            distance = get_distance(distance)

        self._clusterer = clusterer
        self._n_trials = n_trials
        self._distance = distance
        self._objective = DistanceVarianceObjective(distance)
        self.verbose = verbose

    @property
    def clusterer(self) -> Clusterer:
        """The wrapped single-trial clusterer."""
        return self._clusterer

    @property
    def n_trials(self) -> int:
        """Number of trials run per call to ``cluster``."""
        return self._n_trials

    @property
    def distance_metric(self) -> Union[DistanceMetric, Callable[[Tensor, Tensor], Tensor]]:
        """Metric used to score partitions."""
        return self._distance

    @property
    def objective(self) -> DistanceVarianceObjective:
        return self._objective

    def score(self, partition: List[CentroidCluster]) -> float:
        """Sum of per-cluster distance variances; empty clusters add nothing."""
        return self._objective.compute(partition)

    def iter_trials(self, points: Any) -> Iterator[TrialResult]:
        """Run the trials one after another, yielding each scored result.

        Args:
            points: Data handed unchanged to the wrapped clusterer

        Yields:
            TrialResult for trials 1..n_trials, in order
        """
        for trial in range(1, self._n_trials + 1):
            partition = self._clusterer.cluster(points)
            score = self.score(partition)

            if self.verbose >= 2:
                sizes = [cluster.size for cluster in partition]
                print(f"Trial {trial:3d}/{self._n_trials}: variance sum = {score:.6f} "
                      f"(cluster sizes {sizes})")

            yield TrialResult(trial=trial, partition=partition, score=score)

    def best_trial(self, points: Any) -> TrialResult:
        """Run all trials and return the best scoring one.

        Args:
            points: Data handed unchanged to the wrapped clusterer

        Returns:
            The winning TrialResult
        """
        best = reduce(_keep_better, self.iter_trials(points), TrialResult(trial=0))

        if self.verbose:
            print(f"Best of {self._n_trials} trials: trial {best.trial} "
                  f"with variance sum {best.score:.6f}")

        return best

    def cluster(self, points: Any) -> List[CentroidCluster]:
        """Run all trials and return the best partition.

        Args:
            points: Data handed unchanged to the wrapped clusterer

        Returns:
            Partition with the lowest variance sum, the latest on ties
        """
        return self.best_trial(points).partition

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        params = {
            'clusterer': self._clusterer,
            'n_trials': self._n_trials,
            'distance': self._distance,
            'verbose': self.verbose
        }
        if deep and hasattr(self._clusterer, 'get_params'):
            for key, value in self._clusterer.get_params(deep=True).items():
                params[f'clusterer__{key}'] = value
        return params

    def __repr__(self) -> str:
        return f"MultiTrialClusterer(clusterer={self._clusterer!r}, n_trials={self._n_trials})"
