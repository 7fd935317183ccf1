"""
gradopt: gradient-based parameter optimization for parametric models.

A model exposes ``compute_grad(params, data, targets) -> (cost, gradient)``
and an optimization strategy (`GradientDesc`, `StochasticGD`) turns a starting
parameter vector into an improved one.

Logging goes through loguru and is disabled for this package by default.
Enable it with ``loguru.logger.enable("gradopt")``.
"""

from loguru import logger

from .domain import (
    DimensionMismatchError,
    EmptyDatasetError,
    IOptimAlgorithm,
    IOptimizable,
    UntrainedModelError,
)
from .infrastructure import (
    CrossEntropyError,
    GradientDesc,
    LinearRegressor,
    LogisticRegressor,
    MeanSqError,
    StochasticGD,
    optimizer_from_config,
    optimizer_to_config,
)

logger.disable("gradopt")

__version__ = "0.1.0"

__all__ = [
    "CrossEntropyError",
    "DimensionMismatchError",
    "EmptyDatasetError",
    "GradientDesc",
    "IOptimAlgorithm",
    "IOptimizable",
    "LinearRegressor",
    "LogisticRegressor",
    "MeanSqError",
    "StochasticGD",
    "UntrainedModelError",
    "optimizer_from_config",
    "optimizer_to_config",
]
