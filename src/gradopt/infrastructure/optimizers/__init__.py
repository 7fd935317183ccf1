"""
Optimization strategies.

Each strategy lives in its own module and registers itself for dictionary
configuration on import.
"""

from ._grad_desc import GradientDesc
from ._registry import (
    optimizer_from_config,
    optimizer_to_config,
    register_optimizer,
    registered_optimizers,
)
from ._stochastic_gd import StochasticGD

__all__ = [
    "GradientDesc",
    "StochasticGD",
    "optimizer_from_config",
    "optimizer_to_config",
    "register_optimizer",
    "registered_optimizers",
]
