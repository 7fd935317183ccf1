"""
Domain-level contract for models that can be optimized.

This module defines the `IOptimizable` protocol, the single capability an
optimization algorithm consumes from a model: evaluating its cost and the
gradient of that cost at a candidate parameter vector.

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Implementations must be pure with respect to their inputs. Optimizers call
  `compute_grad` repeatedly (full batch or one row at a time) and rely on no
  hidden state being carried between calls.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class IOptimizable(Protocol):
    """
    Optimizable model interface contract.

    Required methods
    ----------------
    - `compute_grad(params, data, targets)` returns the cost and the gradient
      of the model's loss at `params` over the given batch.
    """

    def compute_grad(
        self, params: Sequence[float], data: Any, targets: Any
    ) -> Tuple[float, Sequence[float]]:
        """
        Compute the cost and gradient at `params`.

        Parameters
        ----------
        params : Sequence[float]
            Candidate parameter vector. Its length equals the model's
            parameter dimension.
        data : Any
            Input batch (rows are observations).
        targets : Any
            Targets corresponding 1:1 to the rows of `data`.

        Returns
        -------
        Tuple[float, Sequence[float]]
            ``(cost, gradient)`` where ``gradient`` has the same length as
            ``params``.

        Notes
        -----
        Implementations must not mutate `params`, `data` or `targets`.
        """
        ...
