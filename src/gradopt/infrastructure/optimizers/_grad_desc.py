"""
Full-batch gradient descent.

Every iteration evaluates the model gradient over the entire data set and
takes one step of fixed size against it:

    w <- w - alpha * grad(w; data, targets)

There is no convergence test. Exactly ``iters`` gradient evaluations are made,
each over the whole batch, and the final working vector is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence

import numpy as np
from loguru import logger

from ...domain._optimizable import IOptimizable
from .._batch import check_row_alignment, has_row_axis
from .._vector import as_gradient, as_param_vector
from ._registry import register_optimizer, validate_iters


@register_optimizer()
@dataclass(frozen=True)
class GradientDesc:
    """
    Batch gradient descent algorithm.

    Parameters
    ----------
    alpha : float, optional
        Step size of each descent step. Defaults to 0.3. Not range-checked;
        too large a value makes the iteration diverge.
    iters : int, optional
        Number of iterations to run. Must be >= 0. Defaults to 100.

    Notes
    -----
    - Instances are immutable; create a new one to change hyperparameters.
    - ``iters=0`` returns a copy of ``start`` without calling the model.
    """

    alpha: float = 0.3
    iters: int = 100

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", float(self.alpha))
        object.__setattr__(self, "iters", validate_iters(self.iters))

    @classmethod
    def default(cls) -> "GradientDesc":
        """
        Construct a gradient descent algorithm with default settings.

        Uses 100 iterations and a step size of 0.3.
        """
        return cls()

    def optimize(
        self,
        model: IOptimizable,
        start: Sequence[float],
        data: Any,
        targets: Any,
    ) -> np.ndarray:
        """
        Run batch gradient descent from `start`.

        Parameters
        ----------
        model : IOptimizable
            Model providing ``compute_grad``.
        start : Sequence[float]
            Initial parameter vector. Copied, never mutated.
        data : Any
            Full input data set, passed to the model unchanged. Any batch
            type the model understands is accepted.
        targets : Any
            Full target set, row-aligned with `data`.

        Returns
        -------
        np.ndarray
            Final parameter vector (1-D float64, same length as `start`).

        Raises
        ------
        DimensionMismatchError
            If `data` and `targets` both expose a row axis and their row counts
            differ, or if the model returns
            a gradient whose length differs from ``len(start)``.
        """
        optimizing_val = as_param_vector(start)
        dim = optimizing_val.size
        n_rows = None
        if has_row_axis(data) and has_row_axis(targets):
            n_rows = check_row_alignment(data, targets)

        logger.debug(
            "GradientDesc: {} iterations, dim={}, rows={}, alpha={}",
            self.iters,
            dim,
            n_rows,
            self.alpha,
        )

        for it in range(self.iters):
            cost, grad = model.compute_grad(optimizing_val, data, targets)
            logger.trace("GradientDesc iter {}: cost={}", it, cost)
            optimizing_val = optimizing_val - as_gradient(grad, dim) * self.alpha

        if not np.all(np.isfinite(optimizing_val)):
            logger.debug("GradientDesc: result contains non-finite values")
        return optimizing_val

    def get_config(self) -> Dict[str, Any]:
        """
        Return the hyperparameters as a JSON-serializable dict.
        """
        return {"alpha": self.alpha, "iters": self.iters}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "GradientDesc":
        """
        Construct a GradientDesc from a config dict.

        Missing keys fall back to the defaults.
        """
        return cls(
            alpha=float(cfg.get("alpha", 0.3)),
            iters=cfg.get("iters", 100),
        )
