"""
Elementwise activation functions for the reference models.
"""

from __future__ import annotations

import numpy as np


def sigmoid(x: np.ndarray) -> np.ndarray:
    """
    Logistic sigmoid, ``1 / (1 + exp(-x))``, evaluated elementwise.

    Computed as ``exp(-log(1 + exp(-x)))`` through ``np.logaddexp`` so that
    large negative inputs do not overflow.
    """
    x = np.asarray(x, dtype=np.float64)
    return np.exp(-np.logaddexp(0.0, -x))
