from __future__ import annotations

import numpy as np

from udpkit.foundation.exceptions import SparsityError
from udpkit.foundation.problem.types import SparsityPattern, VectorLike


def dense_sparsity(n: int, nf: int) -> SparsityPattern:
    """All (objective, variable) pairs, row-major by objective then variable."""
    rows, cols = np.meshgrid(np.arange(nf), np.arange(n), indexing="ij")
    return np.column_stack([rows.ravel(), cols.ravel()]).astype(np.int64)


def check_sparsity(pattern: VectorLike, n: int, nf: int) -> SparsityPattern:
    """
    Validate a sparsity pattern and return it as an int64 array of shape (k, 2).

    Pairs must lie in ``[0, nf) x [0, n)`` and appear at most once. The order
    is kept because it fixes the layout of the gradient vector.
    """
    try:
        raw = np.asarray(pattern)
    except (TypeError, ValueError) as exc:
        raise SparsityError("Sparsity pattern must be a rectangular (k, 2) array of index pairs.", pattern) from exc
    if raw.size == 0:
        return np.empty((0, 2), dtype=np.int64)
    if raw.ndim != 2 or raw.shape[1] != 2:
        raise SparsityError(f"Sparsity pattern must have shape (k, 2), got {raw.shape}.", pattern)
    # Floats are not truncated: a silently rounded index would shift the gradient layout.
    if not np.issubdtype(raw.dtype, np.integer):
        raise SparsityError(f"Sparsity indices must be integers, got dtype {raw.dtype}.", pattern)
    arr = raw.astype(np.int64)
    bad_rows = (arr[:, 0] < 0) | (arr[:, 0] >= nf) | (arr[:, 1] < 0) | (arr[:, 1] >= n)
    if np.any(bad_rows):
        first = tuple(int(v) for v in arr[np.argmax(bad_rows)])
        raise SparsityError(f"Sparsity index {first} is out of range for nf={nf}, n={n}.", pattern)
    unique = np.unique(arr, axis=0)
    if unique.shape[0] != arr.shape[0]:
        raise SparsityError("Sparsity pattern contains repeated index pairs.", pattern)
    return arr


__all__ = ["check_sparsity", "dense_sparsity"]
