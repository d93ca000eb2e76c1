# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densemat import DimensionError, Matrix, MatrixError, ParseError


def test_new_is_zero_filled():
    M = Matrix.new(2, 3)
    assert (M.rows, M.cols) == (2, 3)
    assert M.shape == (2, 3)
    assert M.to_list() == [[0.0] * 3, [0.0] * 3]


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_new_rejects_non_positive(rows, cols):
    with pytest.raises(DimensionError, match="positive"):
        Matrix.new(rows, cols)


@pytest.mark.parametrize("values", [[], [[]], [[1, 2], [3]], [1, 2, 3]])
def test_constructor_rejects_bad_grids(values):
    with pytest.raises(DimensionError):
        Matrix(values)


@pytest.mark.parametrize(
    "values", [[[1, "a"]], ["12", "34"], np.array([["1", "2"]]), [[1.0, None]]]
)
def test_constructor_rejects_non_numeric(values):
    with pytest.raises(ParseError):
        Matrix(values)


def test_constructor_accepts_numpy_scalars_and_ints():
    M = Matrix([[np.float64(1.5), np.int64(2)], [3, True]])
    assert M.to_list() == [[1.5, 2.0], [3.0, 1.0]]
    assert Matrix(np.array([[1, 2]])).to_list() == [[1.0, 2.0]]


def test_constructor_copies_input():
    src = np.array([[1.0, 2.0], [3.0, 4.0]])
    M = Matrix(src)
    src[0, 0] = 99.0
    assert M[0, 0] == 1.0
    assert Matrix(M) == M
    assert Matrix(M).data is not M.data


def test_copy_is_independent():
    A = Matrix.from_str("1,2;3,4")
    B = A.copy()
    assert A == B
    B[0, 0] = -5.0
    B.identity()
    assert A.to_list() == [[1.0, 2.0], [3.0, 4.0]]


def test_element_access():
    M = Matrix.new(2, 2)
    M[1, 0] = 3.5
    assert M[1, 0] == 3.5
    assert M.row(1) == [3.5, 0.0]
    with pytest.raises(IndexError):
        M[2, 0]


def test_identity_keeps_off_diagonal_entries():
    M = Matrix.from_str("5,6,7;8,9,10;11,12,13").identity()
    assert M.to_list() == [[1.0, 6.0, 7.0], [8.0, 1.0, 10.0], [11.0, 12.0, 1.0]]


def test_eye():
    np.testing.assert_array_equal(Matrix.eye(3).data, np.eye(3))


def test_transpose():
    T = Matrix.from_str("1,2,3;4,5,6").transpose()
    assert T.shape == (3, 2)
    assert T.to_list() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]


def test_equality_and_allclose():
    A = Matrix.from_str("1,2;3,4")
    B = Matrix.from_str("1,2;3,4.0000000001")
    assert A != B
    assert A.allclose(B, atol=1e-9)
    assert not A.allclose(Matrix.new(2, 3))
    assert A != "1,2;3,4"


def test_display():
    assert str(Matrix.from_str("1,2;3,4")) == "┌     ┐\n| 1 2 |\n| 3 4 |\n└     ┘"
    assert str(Matrix.from_str("0.5,-1")) == "┌     ┐\n| 0.5 -1 |\n└     ┘"


def test_repr():
    assert repr(Matrix.from_str("1;2")) == "Matrix([[1.0], [2.0]])"


def test_error_signal():
    err = DimensionError("Not a valid matrix!")
    assert err.category == "DimensionError"
    assert err.message == "Not a valid matrix!"
    assert str(err) == "DimensionError: Not a valid matrix!"
    assert isinstance(err, MatrixError)
    assert isinstance(err, ValueError)
    assert ParseError("x").category == "ParseError"
