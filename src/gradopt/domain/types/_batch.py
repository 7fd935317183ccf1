"""
Domain-level structural typing for data and target batches.

Optimizers never own the data they traverse. They only need two read-only
capabilities from a batch container: asking how many rows it holds, and
selecting a subset of rows by index. This module describes those capabilities
as Protocols so that the domain layer stays free of NumPy.

Two container styles are recognised:

- :class:`IRowSelectable`: matrix-style containers exposing ``rows`` and
  ``select_rows(indices)``.
- :class:`BatchLike`: NumPy-like arrays exposing ``shape`` and supporting
  integer-array indexing along the first axis (e.g., ``numpy.ndarray``).
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class IRowSelectable(Protocol):
    """
    Matrix-style container with explicit row selection.

    Notes
    -----
    ``select_rows`` must preserve the column structure and the order of the
    requested indices, and must not mutate the receiver.
    """

    @property
    def rows(self) -> int:
        """
        Number of rows (observations) in the container.
        """
        ...

    def select_rows(self, indices: Sequence[int]) -> IRowSelectable:
        """
        Return a container restricted to the given rows.

        Parameters
        ----------
        indices : Sequence[int]
            Row indices to keep, in the order they should appear.

        Returns
        -------
        IRowSelectable
            View or copy holding only the selected rows.
        """
        ...


@runtime_checkable
class BatchLike(Protocol):
    """
    NumPy-like array usable as a batch.

    Only the subset of the ndarray API that the optimizers rely on is modelled:
    the ``shape`` attribute (first entry is the row count) and indexing along
    the first axis.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array; ``shape[0]`` is the number of rows.
        """
        ...

    def __getitem__(self, key: Any) -> Any:
        """
        Index the array. Integer-array keys select rows.
        """
        ...
