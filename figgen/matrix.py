"""
Fixed-size matrix helpers for cubic patch evaluation.

A 4x4 matrix of points is a numpy array of shape ``(4, 4, 3)``; the last axis
holds x, y and z. Blending works per coordinate, so any 4x4 cubic basis
(Bezier, B-spline, Catmull-Rom) can be plugged in.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .vector import Point


def _frozen(rows) -> np.ndarray:
    m = np.array(rows, dtype=float)
    m.setflags(write=False)
    return m


BEZIER_BASIS = _frozen([
    [-1.0, 3.0, -3.0, 1.0],
    [3.0, -6.0, 3.0, 0.0],
    [-3.0, 3.0, 0.0, 0.0],
    [1.0, 0.0, 0.0, 0.0],
])


def control_matrix(points: Sequence[Point]) -> np.ndarray:
    """Arrange 16 row-major points into a ``(4, 4, 3)`` array."""
    if len(points) != 16:
        raise ValueError(f"a control matrix needs 16 points (got {len(points)})")
    return np.array([p.as_tuple() for p in points], dtype=float).reshape(4, 4, 3)


def blend(basis: np.ndarray, P: np.ndarray) -> np.ndarray:
    """Return ``basis · P · basisᵗ`` for a ``(4, 4, 3)`` point matrix."""
    if basis.shape != (4, 4) or P.shape != (4, 4, 3):
        raise ValueError("blend expects a 4x4 basis and a 4x4 point matrix")
    # (M P Mᵗ)[i, l] = sum_k sum_j M[i, k] P[k, j] M[l, j]
    return np.einsum("ik,kjc,lj->ilc", basis, P, basis)


def power_basis(t) -> np.ndarray:
    """``[t³, t², t, 1]``; ``t`` may be a scalar or a 1-D array of samples."""
    t = np.asarray(t, dtype=float)
    return np.stack([t ** 3, t ** 2, t, np.ones_like(t)], axis=-1)
