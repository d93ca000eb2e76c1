# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Text formats for matrices

String:  rows separated by ";", values by ","     e.g. "1,2;3,4"
File:    one row per line, values separated by a single space
"""

import logging
import os
from typing import Iterable, List, Union

import numpy as np

from .errors import ParseError
from .utils import as_grid

logger = logging.getLogger(__name__)

ROW_SEP = ";"
VALUE_SEP = ","
FILE_VALUE_SEP = " "


def parse_rows(lines: Iterable[str], separator: str) -> np.ndarray:
    """
    Parse each line into a row of floats.

    Raises
    ------
    ParseError     : a value is empty or not a number
    DimensionError : rows differ in length
    """
    rows: List[List[float]] = []
    for i, line in enumerate(lines):
        row = []
        for j, token in enumerate(line.split(separator)):
            token = token.strip()
            try:
                row.append(float(token))
            except ValueError:
                raise ParseError(
                    f"Failed to parse value {token!r} at row {i}, column {j}"
                ) from None
        rows.append(row)
    return as_grid(rows)


def parse_str(s: str) -> np.ndarray:
    return parse_rows(s.split(ROW_SEP), VALUE_SEP)


def parse_file(path: Union[str, os.PathLike]) -> np.ndarray:
    """Read a space separated matrix file. Blank lines are skipped."""
    with open(path, encoding="utf-8") as fh:
        lines = [line.rstrip("\r\n") for line in fh if line.strip()]
    logger.debug(f"read {len(lines)} rows from {path}")
    return parse_rows(lines, FILE_VALUE_SEP)


def format_value(v: float) -> str:
    """
    Integral values print without a decimal point: 1 not 1.0.

    Negative zero prints as 0 and small or large magnitudes use
    Python's exponent form (1e-07), not fixed-point digits.
    """
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def format_matrix(A: np.ndarray) -> str:
    """
    Render A inside a bracket box:

        ┌     ┐
        | 1 2 |
        | 3 4 |
        └     ┘
    """
    whitespace = " " * (A.shape[1] * 2)
    lines = [f"┌ {whitespace}┐"]
    for row in A:
        lines.append("| " + "".join(f"{format_value(v)} " for v in row) + "|")
    lines.append(f"└ {whitespace}┘")
    return "\n".join(lines)
