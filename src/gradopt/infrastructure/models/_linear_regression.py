"""
Linear regression trained through an optimization algorithm.

`LinearRegressor` implements the `IOptimizable` capability: given a
coefficient vector ``beta`` (bias first once trained via `train`), it reports
the halved mean squared error and its gradient

    outputs = X @ beta
    cost    = sum((outputs - t)^2) / (2n)
    grad    = X^T (outputs - t) / n

`train` prepends a bias column, starts from the zero vector and hands the
problem to the configured optimization algorithm.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from ...domain._errors import UntrainedModelError
from ...domain._optim_algorithm import IOptimAlgorithm
from ..optimizers._grad_desc import GradientDesc
from ._cost_fn import MeanSqError
from ._design import (
    add_bias_column,
    as_coefficients,
    as_design_matrix,
    as_target_vector,
)


class LinearRegressor:
    """
    Least-squares linear regression model.

    Parameters
    ----------
    alg : IOptimAlgorithm, optional
        Optimization algorithm used by `train`. Defaults to ``GradientDesc()``.

    Notes
    -----
    - `compute_grad` works on raw design matrices; it does not add the bias
      column. Only `train` and `predict` do.
    """

    def __init__(self, alg: Optional[IOptimAlgorithm] = None) -> None:
        self.alg = alg if alg is not None else GradientDesc()
        self._parameters: Optional[np.ndarray] = None

    @property
    def parameters(self) -> np.ndarray:
        """
        Trained coefficients, bias first.

        Raises
        ------
        UntrainedModelError
            If the model has not been trained.
        """
        if self._parameters is None:
            raise UntrainedModelError(type(self).__name__)
        return self._parameters

    def compute_grad(
        self, params: Sequence[float], inputs: Any, targets: Any
    ) -> Tuple[float, np.ndarray]:
        """
        Compute the halved MSE and its gradient at `params`.

        Parameters
        ----------
        params : Sequence[float]
            Coefficients, one per column of `inputs`.
        inputs : Any
            2-D design matrix.
        targets : Any
            One target per row of `inputs`.

        Returns
        -------
        Tuple[float, np.ndarray]
            ``(cost, gradient)``.
        """
        x = as_design_matrix(inputs)
        t = as_target_vector(targets, x.shape[0])
        beta = as_coefficients(params, x.shape[1])

        outputs = x @ beta
        cost = MeanSqError.cost(outputs, t)
        grad = x.T @ MeanSqError.grad_cost(outputs, t) / x.shape[0]
        return cost, grad

    def train(self, inputs: Any, targets: Any) -> None:
        """
        Fit the coefficients with the configured optimization algorithm.
        """
        x = add_bias_column(inputs)
        t = as_target_vector(targets, x.shape[0])
        start = np.zeros(x.shape[1], dtype=np.float64)

        logger.debug(
            "LinearRegressor: training on {} rows with {}",
            x.shape[0],
            type(self.alg).__name__,
        )
        self._parameters = np.asarray(
            self.alg.optimize(self, start, x, t), dtype=np.float64
        )

    def predict(self, inputs: Any) -> np.ndarray:
        """
        Predict targets for `inputs` using the trained coefficients.
        """
        beta = self.parameters
        return add_bias_column(inputs) @ beta
