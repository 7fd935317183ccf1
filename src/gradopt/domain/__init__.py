"""
Backend-agnostic contracts for gradopt.

The domain layer holds the protocols that connect models and optimization
algorithms, plus the exceptions raised at that seam. It does not import NumPy.
"""

from ._errors import DimensionMismatchError, EmptyDatasetError, UntrainedModelError
from ._optim_algorithm import IOptimAlgorithm
from ._optimizable import IOptimizable
from .types import BatchLike, IRowSelectable

__all__ = [
    "BatchLike",
    "DimensionMismatchError",
    "EmptyDatasetError",
    "IOptimAlgorithm",
    "IOptimizable",
    "IRowSelectable",
    "UntrainedModelError",
]
