# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by densemat
"""


class MatrixError(ValueError):
    """
    Base class for every failure raised by the library.

    Attributes
    ----------
    category : str
        Short symbolic name of the failure, e.g. ``"DimensionError"``.
    message : str
        Human readable detail.
    """

    category = "MatrixError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.category}: {self.message}"


class DimensionError(MatrixError):
    """An operation was given matrices whose shapes do not fit."""

    category = "DimensionError"


class ParseError(MatrixError):
    """Matrix text contained a value that is not a number."""

    category = "ParseError"
