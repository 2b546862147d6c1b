"""
Convergence criteria for the single-trial clustering loop.
"""

from typing import Dict, Any
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


class ChangeInAssignments(ConvergenceCriterion):
    """Convergence based on fraction of points that change clusters.

    With the default ``tol=0.0`` the criterion is met only when no point
    changed cluster. An iteration that had to reseed an empty cluster
    (``state['empty_cluster']``) is never considered stable.
    """

    def __init__(self, tol: float = 0.0, patience: int = 1):
        """
        Args:
            tol: Largest fraction of changed assignments treated as stable
            patience: Number of stable iterations required
        """
        super().__init__()
        if tol < 0:
            raise ValueError(f"tol must be non-negative, got {tol}")
        if patience < 1:
            raise ValueError(f"patience must be positive, got {patience}")
        self.tol = tol
        self.patience = patience
        self._prev_assignments = None
        self._stable_count = 0

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if assignments have stabilized."""
        current_assignments: Tensor = current_state['assignments']

        if self._prev_assignments is None:
            self._prev_assignments = current_assignments.clone()
            return False

        # Compute fraction of changed assignments
        n_changed = (current_assignments != self._prev_assignments).sum().item()
        n_total = len(current_assignments)
        change_fraction = n_changed / n_total if n_total else 0.0
        empty_cluster = bool(current_state.get('empty_cluster', False))

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': change_fraction,
            'empty_cluster': empty_cluster
        })

        if change_fraction <= self.tol and not empty_cluster:
            self._stable_count += 1
            converged = self._stable_count >= self.patience
        else:
            self._stable_count = 0
            converged = False

        self._prev_assignments = current_assignments.clone()

        return converged

    def reset(self):
        """Reset history and remembered assignments."""
        super().reset()
        self._prev_assignments = None
        self._stable_count = 0
