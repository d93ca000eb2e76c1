#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command line front end.

Matrix operands are strings in the "1,2;3,4" format, or a file path
prefixed with "@":

    densemat det "1,2;3,4"
    densemat mul @a.txt "1;2;3"
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import MatrixError
from .matrix import Matrix

logger = logging.getLogger(__name__)


def load_operand(text: str) -> Matrix:
    if text.startswith("@"):
        return Matrix.from_file(text[1:])
    return Matrix.from_str(text)


def _unary(op):
    def run(args):
        return op(load_operand(args.matrix))

    return run


def _binary(op):
    def run(args):
        return op(load_operand(args.left), load_operand(args.right))

    return run


COMMANDS = {
    "show": (_unary(lambda A: A), 1, "print a matrix"),
    "det": (_unary(Matrix.det), 1, "determinant by cofactor expansion"),
    "rref": (_unary(Matrix.rref), 1, "reduced row-echelon form"),
    "transpose": (_unary(Matrix.transpose), 1, "transpose"),
    "add": (_binary(Matrix.add), 2, "element-wise sum"),
    "sub": (_binary(Matrix.subtract), 2, "element-wise difference"),
    "mul": (_binary(Matrix.multiply), 2, "matrix product"),
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="densemat", description=__doc__.split("\n")[1])
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = ap.add_subparsers(dest="command", required=True)

    for name, (_run, arity, help_text) in COMMANDS.items():
        p = sub.add_parser(name, help=help_text)
        if arity == 1:
            p.add_argument("matrix")
        else:
            p.add_argument("left")
            p.add_argument("right")

    p = sub.add_parser("scale", help="multiply every entry by a scalar")
    p.add_argument("matrix")
    p.add_argument("k", type=float)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        if args.command == "scale":
            result = load_operand(args.matrix).scale(args.k)
        else:
            result = COMMANDS[args.command][0](args)
    except MatrixError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
