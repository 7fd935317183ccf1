"""
Cost functions used by the reference models.

Currently implemented costs:
- MeanSqError       : halved mean squared error, for regression
- CrossEntropyError : binary cross entropy on probabilities, for classification

Design notes
------------
- Costs are stateless and exposed as static methods, so a cost class can be
  referenced by models without instantiation.
- Reductions divide by the number of rows (observations), not by the number
  of elements.
- `grad_cost` returns the elementwise derivative of the un-reduced cost with
  respect to the outputs; callers apply their own chain rule and scaling.
"""

from __future__ import annotations

import numpy as np

from ._activations import sigmoid


def _n_rows(arr: np.ndarray) -> int:
    return int(arr.shape[0]) if arr.ndim > 0 else 1


class MeanSqError:
    """
    Mean squared error, halved:

        cost(o, t) = sum((o - t)^2) / (2 * n)

    where ``n`` is the number of rows.
    """

    @staticmethod
    def cost(outputs: np.ndarray, targets: np.ndarray) -> float:
        """
        Compute the halved mean squared error.

        Parameters
        ----------
        outputs : np.ndarray
            Model outputs.
        targets : np.ndarray
            Targets, same shape as `outputs`.

        Returns
        -------
        float
            Scalar cost.
        """
        outputs = np.asarray(outputs, dtype=np.float64)
        diff = outputs - np.asarray(targets, dtype=np.float64)
        return float(np.sum(diff * diff) / (2.0 * _n_rows(diff)))

    @staticmethod
    def grad_cost(outputs: np.ndarray, targets: np.ndarray) -> np.ndarray:
        """
        Derivative with respect to the outputs: ``o - t``.
        """
        return np.asarray(outputs, dtype=np.float64) - np.asarray(
            targets, dtype=np.float64
        )


class CrossEntropyError:
    """
    Binary cross entropy on probability outputs:

        cost(o, t) = -sum(t * ln(o) + (1 - t) * ln(1 - o)) / n

    Notes
    -----
    - `outputs` must lie in the open interval (0, 1). Values of exactly 0 or 1
      produce infinite costs; no clipping is applied.
    - Models that produce probabilities through a sigmoid should use the
      logit forms, `cost_from_logits` and `grad_cost_from_logits`, which stay
      finite when the sigmoid saturates. `cost` and `grad_cost` serve callers
      that only hold probabilities.
    """

    @staticmethod
    def cost(outputs: np.ndarray, targets: np.ndarray) -> float:
        o = np.asarray(outputs, dtype=np.float64)
        t = np.asarray(targets, dtype=np.float64)
        loss = -(t * np.log(o) + (1.0 - t) * np.log(1.0 - o))
        return float(np.sum(loss) / _n_rows(o))

    @staticmethod
    def grad_cost(outputs: np.ndarray, targets: np.ndarray) -> np.ndarray:
        """
        Derivative with respect to the outputs:

            (o - t) / (o * (1 - o))
        """
        o = np.asarray(outputs, dtype=np.float64)
        t = np.asarray(targets, dtype=np.float64)
        return (o - t) / (o * (1.0 - o))

    @staticmethod
    def cost_from_logits(logits: np.ndarray, targets: np.ndarray) -> float:
        """
        Cross entropy of ``sigmoid(z)`` computed from the logits ``z``:

            cost(z, t) = sum(ln(1 + exp(z)) - t * z) / n

        Algebraically equal to ``cost(sigmoid(z), t)``, but evaluated with
        ``np.logaddexp`` so that saturated logits give a finite cost.
        """
        z = np.asarray(logits, dtype=np.float64)
        t = np.asarray(targets, dtype=np.float64)
        loss = np.logaddexp(0.0, z) - t * z
        return float(np.sum(loss) / _n_rows(z))

    @staticmethod
    def grad_cost_from_logits(logits: np.ndarray, targets: np.ndarray) -> np.ndarray:
        """
        Derivative with respect to the logits: ``sigmoid(z) - t``.
        """
        return sigmoid(logits) - np.asarray(targets, dtype=np.float64)
