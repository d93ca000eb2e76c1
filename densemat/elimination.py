# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

import numpy as np

from .utils import (
    CLEANUP_TOL,
    ROUND_UP_FRACTION,
    require_float_array,
    require_square,
)

logger = logging.getLogger(__name__)


def identity(A: np.ndarray) -> np.ndarray:
    """
    Set every diagonal entry of the square matrix A to 1.0, in place.

    Off-diagonal entries are left as they are, so A only becomes the
    identity matrix if it started out as a zero matrix.
    """
    require_square(A, "identity")
    np.fill_diagonal(A, 1.0)
    return A


def swap_rows(A: np.ndarray, target_row: int) -> Optional[int]:
    """
    Move the first row (scanning top to bottom) with a non-zero entry
    in column 0 into ``target_row``.

    Returns
    -------
    The index of the row swapped in, or None if column 0 is all zeros.
    """
    nonzero = np.flatnonzero(A[:, 0])
    if nonzero.size == 0:
        return None
    src = int(nonzero[0])
    if src != target_row:
        A[[target_row, src]] = A[[src, target_row]]
        logger.debug(f"swapped row {src} into row {target_row}")
    return src


def rref(A: np.ndarray) -> np.ndarray:
    """
    Reduce the m by n matrix A to reduced row-echelon form, in place,
    using Gauss-Jordan elimination.

    For each lead index the pivot row is scaled so the pivot becomes 1
    and the pivot column is cleared both above and below the pivot.
    Only a zero pivot at A[0, 0] is repaired (see ``swap_rows``); a
    zero pivot further down is not, and leaves inf/NaN in the result.

    Returns
    -------
    A, after ``correct`` has cleaned up round-off.

    Raises
    ------
    TypeError : A is not a float ndarray (integer arrays cannot be
                reduced in place, pass A.astype(float))
    """
    require_float_array(A, "rref")
    m, n = A.shape
    if A[0, 0] == 0:
        swap_rows(A, 0)

    with np.errstate(divide="ignore", invalid="ignore"):
        for lead in range(min(m, n)):
            if A[lead, lead] == 0:
                logger.warning(
                    f"rref(): zero pivot at ({lead}, {lead}), "
                    "result will contain inf/NaN"
                )
            for r in range(m):
                div = A[lead, lead]
                mult = A[r, lead] / div
                if r == lead:
                    A[r] /= div
                else:
                    A[r] -= mult * A[lead]

    return correct(A)


def correct(
    A: np.ndarray,
    tol: float = CLEANUP_TOL,
    round_up: float = ROUND_UP_FRACTION,
) -> np.ndarray:
    """
    Snap floating point noise in A, in place.

    - entries with 0 < |v| < tol become 0.0
    - negative zero becomes 0.0
    - entries whose fractional part exceeds ``round_up`` become
      floor(v) + 1
    """
    require_float_array(A, "correct")
    with np.errstate(invalid="ignore"):
        mag = np.abs(A)
        A[(mag > 0) & (mag < tol)] = 0.0
        # -0.0 == 0.0, so this also clears the sign bit
        A[A == 0.0] = 0.0

        floor = np.floor(A)
        near = (A - floor) > round_up
        A[near] = floor[near] + 1.0
    return A
