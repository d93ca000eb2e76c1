# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

A small dense-matrix library built around Gauss-Jordan row reduction
and cofactor-expansion determinants.

Public API
~~~~~~~~~~
- The `Matrix` type
    - construction: `Matrix`, `Matrix.new`, `Matrix.eye`,
      `Matrix.from_str`, `Matrix.from_file`
    - arithmetic: `add`, `subtract`, `scale`, `multiply`, `apply`
    - row reduction: `identity`, `rref`, `correct`
    - determinants: `det`, `minor`, `cofactor`, `adjugate`
- Array-level engine
    - `rref`, `correct`, `swap_rows`
    - `det`, `cofactor`, `minor`, `cofactor_matrix`, `adj`
- Text formats
    - `parse_str`, `parse_file`, `format_matrix`
- Errors
    - `MatrixError`, `DimensionError`, `ParseError`

Example
-------
>>> import densemat as dm
>>> A = dm.Matrix.from_str("2,4,6;1,1,1")
>>> A.rref().to_list()
[[1.0, 0.0, -1.0], [0.0, 1.0, 2.0]]
"""

from importlib.metadata import version as _pkg_version

from .elimination import correct, rref, swap_rows
from .errors import DimensionError, MatrixError, ParseError
from .matrix import Matrix
from .matrix_functions import adj, cofactor, cofactor_matrix, det, minor
from .parsing import format_matrix, parse_file, parse_str

__all__ = [
    "Matrix",
    "MatrixError",
    "DimensionError",
    "ParseError",
    "rref",
    "correct",
    "swap_rows",
    "det",
    "cofactor",
    "minor",
    "cofactor_matrix",
    "adj",
    "parse_str",
    "parse_file",
    "format_matrix",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densemat”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see warnings only if
# they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
