# tests/test_convergence.py
"""
Convergence criterion behavior.

Covers:
- ChangeInAssignments: zero-change default, fraction threshold + patience
- Iterations that reseeded an empty cluster never count as stable
- reset() forgets the remembered assignments
"""

from __future__ import annotations

import pytest
import torch

from multikmeans.utils.convergence import ChangeInAssignments


def test_default_requires_no_changes():
    crit = ChangeInAssignments()
    a0 = torch.tensor([0, 0, 1, 1])
    a1 = torch.tensor([0, 1, 1, 1])

    assert crit.check({"iteration": -1, "assignments": a0}) is False  # initializes prev
    assert crit.check({"iteration": 0, "assignments": a1}) is False   # 1 change
    assert crit.check({"iteration": 1, "assignments": a1}) is True    # stable
    assert crit.history[-1]["n_changed"] == 0


def test_fraction_threshold_and_patience():
    """
    tol is the largest fraction still considered stable.
    Using patience=2, we feed two consecutive steps with 10% changes (<= 20%).
    """
    crit = ChangeInAssignments(tol=0.2, patience=2)

    a0 = torch.zeros(10, dtype=torch.long)
    a1 = a0.clone()
    a1[0] = 1
    a2 = a1.clone()
    a2[1] = 1

    assert crit.check({"iteration": 0, "assignments": a0}) is False
    assert crit.check({"iteration": 1, "assignments": a1}) is False  # stable_count = 1
    assert crit.check({"iteration": 2, "assignments": a2}) is True   # stable_count = 2


def test_empty_cluster_iteration_is_not_stable():
    crit = ChangeInAssignments()
    a = torch.tensor([0, 0, 0])

    crit.check({"assignments": a})
    assert crit.check({"assignments": a, "empty_cluster": True}) is False
    assert crit.check({"assignments": a, "empty_cluster": False}) is True


def test_reset_forgets_previous_assignments():
    crit = ChangeInAssignments()
    a = torch.tensor([1, 0])
    crit.check({"assignments": a})
    crit.reset()

    assert crit.history == []
    assert crit.check({"assignments": a}) is False


@pytest.mark.parametrize("kwargs", [{"tol": -0.1}, {"patience": 0}])
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        ChangeInAssignments(**kwargs)
