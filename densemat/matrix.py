# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
The Matrix type, a dense float64 grid that owns its data.
"""

import logging
import numbers
import os
from typing import Callable, List, Tuple, Union

import numpy as np

from . import arithmetic, elimination, matrix_functions, parsing
from .errors import DimensionError
from .utils import EPS, as_grid

logger = logging.getLogger(__name__)


class Matrix:
    """
    A rows-by-cols matrix of floats.

    Named methods (``add``, ``subtract``, ``multiply``, ``scale``) are
    the primary interface; ``+``, ``-``, ``*`` and ``@`` delegate to
    them. Operations that change shape or combine matrices return a new
    Matrix. ``identity``, ``apply``, ``rref`` and ``correct`` work in
    place and return ``self``.

    >>> A = Matrix.from_str("1,2;3,4")
    >>> A.det()
    -2.0
    """

    __slots__ = ("_data",)
    # make numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, values):
        if isinstance(values, Matrix):
            values = values._data
        self._data = as_grid(values)

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------
    @classmethod
    def _wrap(cls, grid: np.ndarray) -> "Matrix":
        # grid is freshly computed and owned by nobody else
        obj = cls.__new__(cls)
        obj._data = grid
        return obj

    @classmethod
    def new(cls, rows: int, cols: int) -> "Matrix":
        """Zero-filled rows-by-cols matrix. Both sizes must be >= 1."""
        if rows < 1 or cols < 1:
            raise DimensionError(
                f"Matrix dimensions must be positive (got {rows}x{cols})"
            )
        return cls._wrap(np.zeros((rows, cols), dtype=float))

    @classmethod
    def eye(cls, n: int) -> "Matrix":
        return cls.new(n, n).identity()

    @classmethod
    def from_str(cls, s: str) -> "Matrix":
        return cls._wrap(parsing.parse_str(s))

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "Matrix":
        return cls._wrap(parsing.parse_file(path))

    def copy(self) -> "Matrix":
        return self._wrap(self._data.copy())

    # ------------------------------------------------------------------
    # store
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def data(self) -> np.ndarray:
        """The live grid. Use ``to_array`` for an independent copy."""
        return self._data

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        i, j = idx
        return float(self._data[i, j])

    def __setitem__(self, idx: Tuple[int, int], value: float) -> None:
        i, j = idx
        self._data[i, j] = value

    def row(self, i: int) -> List[float]:
        return self._data[i].tolist()

    def to_list(self) -> List[List[float]]:
        return self._data.tolist()

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def allclose(self, other: "Matrix", atol: float = EPS) -> bool:
        return self.shape == other.shape and np.allclose(
            self._data, other._data, rtol=0.0, atol=atol
        )

    def __str__(self) -> str:
        return parsing.format_matrix(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()})"

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------
    def add(self, other: "Matrix") -> "Matrix":
        return self._wrap(arithmetic.add(self._data, other._data))

    def subtract(self, other: "Matrix") -> "Matrix":
        return self._wrap(arithmetic.subtract(self._data, other._data))

    def scale(self, k: float) -> "Matrix":
        return self._wrap(arithmetic.scale(self._data, k))

    def multiply(self, other: "Matrix") -> "Matrix":
        return self._wrap(arithmetic.multiply(self._data, other._data))

    def apply(self, f: Callable[[float], float]) -> "Matrix":
        arithmetic.apply(self._data, f)
        return self

    def transpose(self) -> "Matrix":
        return self._wrap(self._data.T.copy())

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "Matrix":
        return self.scale(-1.0)

    # ------------------------------------------------------------------
    # row reduction / determinants
    # ------------------------------------------------------------------
    def identity(self) -> "Matrix":
        """Set the diagonal to 1.0 in place, other entries are kept."""
        elimination.identity(self._data)
        return self

    def rref(self) -> "Matrix":
        """Reduce to reduced row-echelon form in place."""
        logger.debug(f"rref of a {self.rows}x{self.cols} matrix")
        elimination.rref(self._data)
        return self

    def correct(self) -> "Matrix":
        elimination.correct(self._data)
        return self

    def det(self) -> float:
        return matrix_functions.det(self._data)

    def minor(self, row: int, col: int) -> "Matrix":
        return self._wrap(matrix_functions.minor(self._data, row, col))

    def cofactor(self, row: int, col: int) -> float:
        return matrix_functions.cofactor(self._data, row, col)

    def adjugate(self) -> "Matrix":
        return self._wrap(matrix_functions.adj(self._data).copy())
