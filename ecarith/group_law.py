#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve group law in affine coordinates.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b integers mod m,
together with a point at infinity INF.

The group law is the chord-and-tangent construction;
b does not enter the formulas, so it is not an argument here.
Input points are assumed to be on the curve:
use ecarith.curve.is_on_curve to check them.

Slope denominators are inverted with ecarith.number_theory.mod_inv:
when m is not a prime, a denominator can be non-invertible
and NotInvertibleError is propagated to the caller.
"""

from ecarith.exceptions import ECArithTypeError
from ecarith.number_theory import mod_inv
from ecarith.point import INF, AffinePoint, Point, PointAtInfinity, is_point


def _require_point(p: Point) -> None:
    if not is_point(p):
        raise ECArithTypeError("not a point")


def add(p: Point, q: Point, a: int, m: int) -> Point:
    """Return the sum of two points.

    Doubling is handled here too, when p == q.
    """

    _require_point(p)
    _require_point(q)

    if isinstance(p, PointAtInfinity):
        return q
    if isinstance(q, PointAtInfinity):
        return p

    x1, y1 = p.x, p.y
    x2, y2 = q.x, q.y

    # opposite points, or doubling a point with vertical tangent (y == 0);
    # this check must come before the slope: inverting 2*0 would fail
    if x1 == x2 and (y1 != y2 or y1 == 0):
        return INF

    if x1 == x2:  # point doubling
        lam = (3 * x1 * x1 + a) * mod_inv(2 * y1, m)
    else:
        lam = (y2 - y1) * mod_inv((x2 - x1) % m, m)
    lam %= m

    x3 = (lam * lam - x1 - x2) % m
    y3 = (lam * (x1 - x3) - y1) % m
    return AffinePoint(x3, y3)


def double(p: Point, a: int, m: int) -> Point:
    return add(p, p, a, m)


def negate(p: Point, m: int) -> Point:
    """Return the opposite point.

    The input point is not checked to be on the curve.
    """

    _require_point(p)
    if isinstance(p, PointAtInfinity):
        return INF
    # % m maps y == 0 to itself
    return AffinePoint(p.x, (m - p.y) % m)
