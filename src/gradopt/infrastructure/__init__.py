"""
NumPy-backed implementations for gradopt.
"""

from ._batch import check_row_alignment, row_count, select_rows
from ._vector import as_gradient, as_param_vector
from .models import (
    CrossEntropyError,
    LinearRegressor,
    LogisticRegressor,
    MeanSqError,
)
from .optimizers import (
    GradientDesc,
    StochasticGD,
    optimizer_from_config,
    optimizer_to_config,
    register_optimizer,
    registered_optimizers,
)

__all__ = [
    "CrossEntropyError",
    "GradientDesc",
    "LinearRegressor",
    "LogisticRegressor",
    "MeanSqError",
    "StochasticGD",
    "as_gradient",
    "as_param_vector",
    "check_row_alignment",
    "optimizer_from_config",
    "optimizer_to_config",
    "register_optimizer",
    "registered_optimizers",
    "row_count",
    "select_rows",
]
