"""
Logistic regression trained through an optimization algorithm.

`LogisticRegressor` implements the `IOptimizable` capability with the binary
cross-entropy cost on sigmoid outputs:

    outputs = sigmoid(X @ beta)
    cost    = -sum(t ln(outputs) + (1 - t) ln(1 - outputs)) / n
    grad    = X^T (outputs - t) / n

The cost is evaluated from the logits ``X @ beta`` so that it stays finite
when the sigmoid saturates to exactly 0 or 1.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from ...domain._errors import UntrainedModelError
from ...domain._optim_algorithm import IOptimAlgorithm
from ..optimizers._grad_desc import GradientDesc
from ._activations import sigmoid
from ._cost_fn import CrossEntropyError
from ._design import (
    add_bias_column,
    as_coefficients,
    as_design_matrix,
    as_target_vector,
)


class LogisticRegressor:
    """
    Binary logistic regression model.

    Parameters
    ----------
    alg : IOptimAlgorithm, optional
        Optimization algorithm used by `train`. Defaults to ``GradientDesc()``.

    Notes
    -----
    - Targets are expected to be 0 or 1.
    - `predict` returns probabilities; threshold them to obtain classes.
    """

    def __init__(self, alg: Optional[IOptimAlgorithm] = None) -> None:
        self.alg = alg if alg is not None else GradientDesc()
        self._parameters: Optional[np.ndarray] = None

    @property
    def parameters(self) -> np.ndarray:
        if self._parameters is None:
            raise UntrainedModelError(type(self).__name__)
        return self._parameters

    def compute_grad(
        self, params: Sequence[float], inputs: Any, targets: Any
    ) -> Tuple[float, np.ndarray]:
        x = as_design_matrix(inputs)
        t = as_target_vector(targets, x.shape[0])
        beta = as_coefficients(params, x.shape[1])

        logits = x @ beta
        cost = CrossEntropyError.cost_from_logits(logits, t)
        grad = x.T @ CrossEntropyError.grad_cost_from_logits(logits, t) / x.shape[0]
        return cost, grad

    def train(self, inputs: Any, targets: Any) -> None:
        """
        Fit the coefficients with the configured optimization algorithm.
        """
        x = add_bias_column(inputs)
        t = as_target_vector(targets, x.shape[0])
        start = np.zeros(x.shape[1], dtype=np.float64)

        logger.debug(
            "LogisticRegressor: training on {} rows with {}",
            x.shape[0],
            type(self.alg).__name__,
        )
        self._parameters = np.asarray(
            self.alg.optimize(self, start, x, t), dtype=np.float64
        )

    def predict(self, inputs: Any) -> np.ndarray:
        """
        Return the predicted probability of class 1 for each row.
        """
        beta = self.parameters
        return sigmoid(add_bias_column(inputs) @ beta)
