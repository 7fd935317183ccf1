"""
Reference models implementing the `IOptimizable` capability.
"""

from ._activations import sigmoid
from ._cost_fn import CrossEntropyError, MeanSqError
from ._linear_regression import LinearRegressor
from ._logistic_regression import LogisticRegressor

__all__ = [
    "CrossEntropyError",
    "LinearRegressor",
    "LogisticRegressor",
    "MeanSqError",
    "sigmoid",
]
