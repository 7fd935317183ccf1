"""
Domain-level optimization algorithm contract.

An optimization algorithm turns a starting parameter vector into an improved
one by repeatedly querying an `IOptimizable` model for gradients. Concrete
strategies (full-batch gradient descent, momentum stochastic gradient descent)
live in the infrastructure layer and are selected by type, not by inheritance.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from ._optimizable import IOptimizable


@runtime_checkable
class IOptimAlgorithm(Protocol):
    """
    Optimization algorithm interface contract.

    Any strategy must satisfy the same operation signature and guarantees:

    - the returned vector has the same dimension as `start`;
    - `model`, `start`, `data` and `targets` are not mutated;
    - no randomness is introduced by the algorithm itself.
    """

    def optimize(
        self,
        model: IOptimizable,
        start: Sequence[float],
        data: Any,
        targets: Any,
    ) -> Sequence[float]:
        """
        Run the optimization and return the final parameter vector.

        Parameters
        ----------
        model : IOptimizable
            Model providing cost and gradient evaluation.
        start : Sequence[float]
            Initial parameter vector.
        data : Any
            Full input data set.
        targets : Any
            Full target set, row-aligned with `data`.

        Returns
        -------
        Sequence[float]
            Optimized parameter vector of length ``len(start)``.
        """
        ...
