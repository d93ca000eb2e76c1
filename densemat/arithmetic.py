# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Element-wise and matrix products on float grids.

Every binary operation validates shapes before computing and returns a
new array; operands are never modified.
"""

import logging
from typing import Callable

import numpy as np

from .errors import DimensionError
from .utils import shape_str

logger = logging.getLogger(__name__)


def _require_same_shape(A: np.ndarray, B: np.ndarray, verb: str) -> None:
    if A.shape != B.shape:
        raise DimensionError(
            f"Can't {verb} two matrices of different dimensions "
            f"({shape_str(A)} and {shape_str(B)})"
        )


def add(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    _require_same_shape(A, B, "add")
    return A + B


def subtract(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    _require_same_shape(A, B, "subtract")
    return A - B


def scale(A: np.ndarray, k: float) -> np.ndarray:
    """Multiply every entry of A by the scalar k."""
    return A * float(k)


def multiply(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """
    Matrix product of an m by n matrix A and an n by p matrix B.

    Returns
    -------
    C : (m, p) ndarray
        C[i, j] is the dot product of row i of A with column j of B.
    """
    if A.shape[1] != B.shape[0]:
        raise DimensionError(
            f"Dimensions not matched. M1 is {shape_str(A)} "
            f"and M2 is {shape_str(B)}"
        )
    logger.debug(f"multiply {shape_str(A)} by {shape_str(B)}")
    return A @ B


def apply(A: np.ndarray, f: Callable[[float], float]) -> np.ndarray:
    """Replace every entry v of A by f(v), in place. Returns A."""
    for idx, v in np.ndenumerate(A):
        A[idx] = f(float(v))
    return A
