"""
Row-level helpers for data and target batches.

Optimizers treat data and targets as read-only containers and only need to
count and select rows. These helpers hide the difference between matrix-style
containers (``rows`` / ``select_rows``) and NumPy arrays, so the optimizer
code can be written once for both.

Design notes
------------
- Row selection on NumPy arrays uses integer-array indexing along axis 0,
  which returns a new array with the rows in the requested order and the
  column structure intact. The source array is never modified.
- 1-D arrays are treated as column data (one value per row), which is the
  usual layout for regression targets.
- Plain sequences carry no row axis of their own; `as_row_container` turns
  them into an array once so that repeated row selection stays cheap.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ..domain._errors import DimensionMismatchError
from ..domain.types._batch import BatchLike, IRowSelectable


def has_row_axis(batch: Any) -> bool:
    """
    Return True if `batch` can report a row count without conversion.

    Matrix-style containers and NumPy-like arrays with at least one dimension
    qualify. Plain sequences, mappings and other custom batch objects do not.
    """
    if isinstance(batch, IRowSelectable):
        return True
    return isinstance(batch, BatchLike) and len(batch.shape) > 0


def as_row_container(batch: Any) -> Any:
    """
    Return `batch` in a form that supports row counting and selection.

    Matrix-style containers and NumPy-like arrays are returned unchanged;
    anything else (e.g., nested lists) is converted to an array once.
    """
    if isinstance(batch, (IRowSelectable, BatchLike)):
        return batch
    return np.asarray(batch)


def row_count(batch: Any) -> int:
    """
    Return the number of rows held by `batch`.

    Parameters
    ----------
    batch : Any
        Matrix-style container, NumPy-like array, or nested sequence.

    Returns
    -------
    int
        Number of rows (observations).

    Raises
    ------
    ValueError
        If `batch` is a 0-dimensional array and therefore has no rows.
    """
    if isinstance(batch, IRowSelectable):
        return int(batch.rows)

    shape = batch.shape if isinstance(batch, BatchLike) else np.shape(batch)
    if len(shape) == 0:
        raise ValueError("A 0-dimensional value has no rows.")
    return int(shape[0])


def select_rows(batch: Any, indices: Sequence[int]) -> Any:
    """
    Select a subset of rows from `batch`.

    Parameters
    ----------
    batch : Any
        Matrix-style container or NumPy-like array.
    indices : Sequence[int]
        Row indices to keep, in order.

    Returns
    -------
    Any
        A container of the same kind holding only the selected rows.
    """
    if isinstance(batch, IRowSelectable):
        return batch.select_rows(list(indices))

    idx = np.asarray(indices, dtype=np.intp)
    return as_row_container(batch)[idx]


def check_row_alignment(data: Any, targets: Any) -> int:
    """
    Verify that `data` and `targets` have the same number of rows.

    Returns
    -------
    int
        The shared row count.

    Raises
    ------
    DimensionMismatchError
        If the row counts differ.
    """
    n_data = row_count(data)
    n_targets = row_count(targets)
    if n_data != n_targets:
        raise DimensionMismatchError("target rows", n_data, n_targets)
    return n_data
