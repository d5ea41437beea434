#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line: print the report of a scalar multiplication.

    python -m ecarith 2 --curve ec313 --point 205 130
"""

import argparse
import sys
from typing import List, Optional

from ecarith.curve import CURVES
from ecarith.exceptions import NotInvertibleError
from ecarith.point import AffinePoint
from ecarith.report import mult_report


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecarith",
        description="Elliptic curve scalar multiplication in affine coordinates.",
    )
    parser.add_argument(
        "n", nargs="?", type=int, default=2, help="non-negative scalar (default: 2)"
    )
    parser.add_argument(
        "-c",
        "--curve",
        default="ec313",
        choices=sorted(CURVES),
        help="named curve (default: ec313)",
    )
    parser.add_argument(
        "-p",
        "--point",
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        help="point to be multiplied (default: the curve base point)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)

    if args.n < 0:
        parser.error(f"negative n: {args.n}")

    ec = CURVES[args.curve]
    Q = ec.G if args.point is None else AffinePoint(*args.point)
    if Q is None:
        parser.error(f"no base point for {args.curve}, use --point")
    if not ec.is_on_curve(Q):
        parser.error(f"point not on curve {args.curve}: ({Q.x}, {Q.y})")

    try:
        print(mult_report(args.n, Q, ec))
    except NotInvertibleError as e:
        print(f"ecarith: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
