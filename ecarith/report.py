#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Textual report of a scalar multiplication."""

from ecarith.curve import Curve
from ecarith.point import Point, PointAtInfinity


def mult_report(n: int, Q: Point, ec: Curve) -> str:
    """Return the report of n*Q on the curve.

    The resulting point is rendered together with
    its curve membership, unless it is the point at infinity.
    """

    R = ec.mult(n, Q)
    if isinstance(R, PointAtInfinity):
        return f"{n}P is the point at infinity"
    result = f"{n}P = ({R.x}, {R.y})"
    result += f"\nIs the point on the curve? {ec.is_on_curve(R)}"
    return result
