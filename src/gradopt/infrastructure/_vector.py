"""
Parameter-vector conversion utilities.

The optimizers keep their working vector as a 1-D ``float64`` NumPy array.
These helpers create that array from caller input and validate each gradient
returned by a model before it is folded into the working vector.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..domain._errors import DimensionMismatchError


def as_param_vector(start: Sequence[float]) -> np.ndarray:
    """
    Copy `start` into a fresh 1-D float64 working vector.

    The copy guarantees the caller's vector is never aliased or mutated by
    the optimizer.

    Raises
    ------
    DimensionMismatchError
        If `start` is not one-dimensional.
    """
    vec = np.array(start, dtype=np.float64)
    if vec.ndim != 1:
        raise DimensionMismatchError("start ndim", 1, vec.ndim)
    return vec


def as_gradient(grad: Sequence[float], dim: int) -> np.ndarray:
    """
    Convert a model gradient to a flat float64 array of length `dim`.

    Column-shaped gradients (e.g., ``(dim, 1)``) are flattened.

    Raises
    ------
    DimensionMismatchError
        If the gradient does not hold exactly `dim` values.
    """
    g = np.asarray(grad, dtype=np.float64).reshape(-1)
    if g.size != dim:
        raise DimensionMismatchError("gradient", dim, int(g.size))
    return g
