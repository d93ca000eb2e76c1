# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

import numpy as np

from .errors import DimensionError, ParseError

EPS: float = 1e-12

# correct(): magnitudes below this are treated as round-off and zeroed
CLEANUP_TOL: float = 1e-6
# correct(): a fractional part above this is rounded up to the next integer
ROUND_UP_FRACTION: float = 0.9999999
# det(): cofactor expansion is O(n!), warn past this size
COFACTOR_WARN_SIZE: int = 8


def shape_str(A: np.ndarray) -> str:
    """Return the shape of A as ``"RxC"``."""
    m, n = A.shape
    return f"{m}x{n}"


def require_square(A: np.ndarray, what: str) -> int:
    """Return n for an n-by-n matrix A, raise DimensionError otherwise."""
    m, n = A.shape
    if m != n:
        raise DimensionError(
            f"{what} is undefined for non-square matrices (got {m}x{n})"
        )
    return n


def require_float_array(A, what: str) -> None:
    """
    In-place routines need a float ndarray: integer arrays cannot hold
    the quotients and anything else cannot be updated in place.
    """
    if not isinstance(A, np.ndarray):
        raise TypeError(f"{what}: A must be a NumPy ndarray")
    if not np.issubdtype(A.dtype, np.floating):
        raise TypeError(
            f"{what}: A must have a floating dtype, got {A.dtype} "
            "(convert with A.astype(float))"
        )


def as_grid(values) -> np.ndarray:
    """
    Convert a nested sequence (or array) of numbers into a fresh
    float64 grid, checking that it is a non-empty rectangle.

    Returns
    -------
    (m, n) ndarray, never aliasing ``values``
    """
    if isinstance(values, np.ndarray):
        if values.dtype.kind not in "biuf":
            raise ParseError(
                f"Matrix entries must be real numbers, got dtype {values.dtype}"
            )
        grid = values.astype(float, copy=True)
    else:
        try:
            rows = [list(row) for row in values]
        except TypeError:
            raise DimensionError("A matrix needs 2 dimensions, got 1") from None
        if rows:
            width = len(rows[0])
            for i, row in enumerate(rows):
                if len(row) != width:
                    raise DimensionError(
                        f"Not a valid matrix! row {i} has {len(row)} values, "
                        f"expected {width}"
                    )
                for j, v in enumerate(row):
                    if not isinstance(v, numbers.Real):
                        raise ParseError(
                            f"Matrix entry ({i}, {j}) is not a number: {v!r}"
                        )
        grid = np.array(rows, dtype=float)

    if grid.ndim != 2:
        raise DimensionError(f"A matrix needs 2 dimensions, got {grid.ndim}")
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise DimensionError("Matrix dimensions must be positive")
    return grid
