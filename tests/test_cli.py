# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from densemat.cli import main


def test_det(capsys):
    assert main(["det", "1,2;3,4"]) == 0
    assert capsys.readouterr().out == "-2.0\n"


def test_rref_from_file(tmp_path, capsys):
    path = tmp_path / "a.txt"
    path.write_text("2 4 6\n1 1 1\n")
    assert main(["rref", f"@{path}"]) == 0
    assert capsys.readouterr().out == "┌       ┐\n| 1 0 -1 |\n| 0 1 2 |\n└       ┘\n"


def test_scale(capsys):
    assert main(["scale", "1,2", "3"]) == 0
    assert "| 3 6 |" in capsys.readouterr().out


def test_dimension_error_reported(capsys):
    assert main(["mul", "1,2,3;4,5,6", "1,2,3;4,5,6"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: DimensionError: Dimensions not matched")


def test_parse_error_reported(capsys):
    assert main(["show", "1,b"]) == 1
    assert "ParseError" in capsys.readouterr().err
