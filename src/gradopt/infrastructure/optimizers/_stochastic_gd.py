"""
Stochastic gradient descent with momentum.

The data set is swept row by row in ascending index order, with a momentum
term smoothing the per-row gradients.

Update rule
-----------
Bootstrap on row 0 only:

    delta_w = alpha * grad(w0; row 0)
    w       = w0 - mu * delta_w

Then for each of ``iters`` passes and each row ``i`` in ``1 .. rows - 1``:

    delta_w = mu * grad(w; row i) + alpha * delta_w
    w       = w - mu * delta_w

Row 0 is only visited by the bootstrap step. The momentum term is carried
across passes and is local to a single `optimize` call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence

import numpy as np
from loguru import logger

from ...domain._errors import EmptyDatasetError
from ...domain._optimizable import IOptimizable
from .._batch import as_row_container, check_row_alignment, select_rows
from .._vector import as_gradient, as_param_vector
from ._registry import register_optimizer, validate_iters


@register_optimizer()
@dataclass(frozen=True)
class StochasticGD:
    """
    Stochastic gradient descent algorithm with basic momentum.

    Parameters
    ----------
    alpha : float, optional
        Momentum decay applied to the previous ``delta_w``. Defaults to 0.1.
    mu : float, optional
        Square root of the raw learning rate; it scales both the gradient
        entering the momentum term and the step taken. Defaults to 0.1.
    iters : int, optional
        Number of passes through the data. Must be >= 0. Defaults to 20.

    Notes
    -----
    - Rows are visited deterministically; nothing is shuffled.
    - The model is called ``1 + iters * (rows - 1)`` times, each time with a
      single-row batch.
    - Data and targets must support row selection (NumPy arrays or
      containers exposing ``rows`` and ``select_rows``).
    """

    alpha: float = 0.1
    mu: float = 0.1
    iters: int = 20

    def __post_init__(self) -> None:
        object.__setattr__(self, "alpha", float(self.alpha))
        object.__setattr__(self, "mu", float(self.mu))
        object.__setattr__(self, "iters", validate_iters(self.iters))

    @classmethod
    def default(cls) -> "StochasticGD":
        """
        Construct a stochastic gradient descent algorithm with default
        settings: 20 passes, momentum decay 0.1 and rate 0.1.
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
        Run momentum SGD from `start`.

        Parameters
        ----------
        model : IOptimizable
            Model providing ``compute_grad``.
        start : Sequence[float]
            Initial parameter vector. Copied, never mutated.
        data : Any
            Full input data set.
        targets : Any
            Full target set, row-aligned with `data`.

        Returns
        -------
        np.ndarray
            Final parameter vector (1-D float64, same length as `start`).

        Raises
        ------
        EmptyDatasetError
            If `data` has no rows.
        DimensionMismatchError
            If `data` and `targets` row counts differ, or if the model returns
            a gradient whose length differs from ``len(start)``.
        """
        start_val = as_param_vector(start)
        dim = start_val.size
        data = as_row_container(data)
        targets = as_row_container(targets)
        n_rows = check_row_alignment(data, targets)
        if n_rows == 0:
            raise EmptyDatasetError(type(self).__name__)

        logger.debug(
            "StochasticGD: {} passes, dim={}, rows={}, alpha={}, mu={}",
            self.iters,
            dim,
            n_rows,
            self.alpha,
            self.mu,
        )

        cost, grad = model.compute_grad(
            start_val, select_rows(data, [0]), select_rows(targets, [0])
        )
        logger.trace("StochasticGD bootstrap: cost={}", cost)
        delta_w = as_gradient(grad, dim) * self.alpha
        optimizing_val = start_val - delta_w * self.mu

        for epoch in range(self.iters):
            for i in range(1, n_rows):
                cost, grad = model.compute_grad(
                    optimizing_val, select_rows(data, [i]), select_rows(targets, [i])
                )
                delta_w = as_gradient(grad, dim) * self.mu + delta_w * self.alpha
                optimizing_val = optimizing_val - delta_w * self.mu
            logger.trace("StochasticGD pass {}: last row cost={}", epoch, cost)

        logger.debug(
            "StochasticGD: done after {} gradient evaluations",
            1 + self.iters * (n_rows - 1),
        )
        if not np.all(np.isfinite(optimizing_val)):
            logger.debug("StochasticGD: result contains non-finite values")
        return optimizing_val

    def get_config(self) -> Dict[str, Any]:
        """
        Return the hyperparameters as a JSON-serializable dict.
        """
        return {"alpha": self.alpha, "mu": self.mu, "iters": self.iters}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "StochasticGD":
        return cls(
            alpha=float(cfg.get("alpha", 0.1)),
            mu=float(cfg.get("mu", 0.1)),
            iters=cfg.get("iters", 20),
        )
