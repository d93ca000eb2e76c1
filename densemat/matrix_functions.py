# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .errors import DimensionError
from .utils import COFACTOR_WARN_SIZE, require_square, shape_str

logger = logging.getLogger(__name__)

# Laplace expansion runs along this row
EXPANSION_ROW = 1


def minor(A: np.ndarray, row: int, col: int) -> np.ndarray:
    """Return A with ``row`` and ``col`` deleted."""
    m, n = A.shape
    if m < 2 or n < 2:
        raise DimensionError(f"A {shape_str(A)} matrix has no minors")
    if not (0 <= row < m and 0 <= col < n):
        raise IndexError(f"({row}, {col}) is outside a {shape_str(A)} matrix")
    return A[np.arange(m) != row][:, np.arange(n) != col]


def cofactor(A: np.ndarray, row: int, col: int) -> float:
    """(-1)^(row + col) times the determinant of the (row, col) minor."""
    require_square(A, "The cofactor")
    return ((-1) ** (row + col)) * _det(minor(A, row, col))


def det(A: np.ndarray) -> float:
    """
    Determinant of the n-by-n matrix A by cofactor expansion.

    1x1 and 2x2 matrices are computed directly, anything larger is
    expanded along row 1:

        det(A) = sum_j cofactor(A, 1, j) * A[1, j]

    The expansion costs O(n!) and is only practical for small n.
    """
    n = require_square(A, "The determinant")
    if n > COFACTOR_WARN_SIZE:
        logger.warning(f"det(): cofactor expansion of a {n}x{n} matrix, O(n!)")
    return _det(A)


def _det(A: np.ndarray) -> float:
    # recursive step, A is square
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    i = EXPANSION_ROW
    return float(sum(cofactor(A, i, j) * A[i, j] for j in range(n)))


def cofactor_matrix(A: np.ndarray) -> np.ndarray:
    """C[i, j] = cofactor(A, i, j) for every entry of the square matrix A."""
    n = require_square(A, "The cofactor matrix")
    if n == 1:
        return np.ones((1, 1))
    C = np.empty((n, n), dtype=float)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return C


def adj(A: np.ndarray) -> np.ndarray:
    """
    Adjugate (classical adjoint) of a square matrix A, the transpose of
    its cofactor matrix. A @ adj(A) == det(A) * I.
    """
    return cofactor_matrix(A).T
