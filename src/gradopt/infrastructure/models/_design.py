"""
Input shaping shared by the regression models.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain._errors import DimensionMismatchError


def as_design_matrix(inputs: Any) -> np.ndarray:
    """
    Convert `inputs` to a 2-D float64 array (rows = observations).

    Raises
    ------
    ValueError
        If `inputs` is not two-dimensional.
    """
    x = np.asarray(inputs, dtype=np.float64)
    if x.ndim != 2:
        raise ValueError(f"inputs must be 2-D (rows, features), got ndim={x.ndim}")
    return x


def as_target_vector(targets: Any, n_rows: int) -> np.ndarray:
    """
    Flatten `targets` to a 1-D float64 array with one value per row.

    Raises
    ------
    DimensionMismatchError
        If the number of targets differs from `n_rows`.
    """
    t = np.asarray(targets, dtype=np.float64).reshape(-1)
    if t.size != n_rows:
        raise DimensionMismatchError("target rows", n_rows, int(t.size))
    return t


def add_bias_column(inputs: Any) -> np.ndarray:
    """
    Prepend a column of ones to the design matrix.
    """
    x = as_design_matrix(inputs)
    return np.hstack([np.ones((x.shape[0], 1), dtype=np.float64), x])


def as_coefficients(params: Any, n_features: int) -> np.ndarray:
    """
    Flatten `params` and check it has one coefficient per feature column.
    """
    beta = np.asarray(params, dtype=np.float64).reshape(-1)
    if beta.size != n_features:
        raise DimensionMismatchError("params", n_features, int(beta.size))
    return beta
