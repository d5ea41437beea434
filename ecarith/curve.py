#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve parameters and curve membership.

A curve y^2 = x^3 + a*x + b (mod m) is fully described by
the plain integers a, b, and m: the functions of
ecarith.group_law and ecarith.curve_mult take them as arguments.
The Curve class bundles them, optionally with a base point G,
and exposes the same operations as methods.

Curve parameters are not validated beyond m > 0:
it is up to the caller to provide a non-singular curve
(4*a^3 + 27*b^2 != 0 mod m) and, ideally, a prime m.

Named curves are loaded from the package data file _data/curves.json
into the CURVES dictionary.
"""

import json
from dataclasses import dataclass
from os import path
from typing import Dict, Optional, Sequence, Union

from dataclasses_json import DataClassJsonMixin

from ecarith.alias import Integer
from ecarith.curve_mult import scalar_multiply
from ecarith.exceptions import ECArithTypeError, ECArithValueError
from ecarith.group_law import add, double, negate
from ecarith.point import AffinePoint, Point, PointAtInfinity, is_point
from ecarith.utils import int_from_integer, int_repr


def is_on_curve(p: Point, a: int, b: int, m: int) -> bool:
    """Return True if the point is on the curve.

    The point at infinity is always on the curve.
    """

    if isinstance(p, PointAtInfinity):
        return True
    return p.y * p.y % m == (p.x * p.x * p.x + a * p.x + b) % m


@dataclass(frozen=True)
class Curve(DataClassJsonMixin):
    """Elliptic curve y^2 = x^3 + a*x + b (mod m).

    G is an optional base point, used as default by mult.
    """

    m: int
    a: int
    b: int
    G: Optional[AffinePoint] = None
    name: str = ""

    def __init__(
        self,
        m: Integer,
        a: Integer,
        b: Integer,
        G: Union[None, AffinePoint, Sequence[Integer]] = None,
        name: str = "",
    ) -> None:

        m = int_from_integer(m)
        if m <= 0:
            raise ECArithValueError(f"non-positive modulus: {int_repr(m)}")
        object.__setattr__(self, "m", m)
        object.__setattr__(self, "a", int_from_integer(a))
        object.__setattr__(self, "b", int_from_integer(b))

        if G is not None and not isinstance(G, AffinePoint):
            if isinstance(G, PointAtInfinity):
                raise ECArithValueError("INF point cannot be a base point")
            if len(G) != 2:
                raise ECArithValueError("base point must be a sequence[int, int]")
            G = AffinePoint(*G)
        object.__setattr__(self, "G", G)
        object.__setattr__(self, "name", name)

        if G is not None:
            if not self.is_on_curve(G):
                raise ECArithValueError("base point is not on the curve")

    def __str__(self) -> str:
        result = f"Curve {self.name}" if self.name else "Curve"
        result += f"\n m   = {int_repr(self.m)}"
        result += f"\n a   = {int_repr(self.a)}"
        result += f"\n b   = {int_repr(self.b)}"
        if self.G is not None:
            result += f"\n G   = ({int_repr(self.G.x)}, {int_repr(self.G.y)})"
        return result

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if not is_point(Q):
            raise ECArithTypeError("not a point")
        return is_on_curve(Q, self.a, self.b, self.m)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECArithValueError("point not on curve")

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return add(Q1, Q2, self.a, self.m)

    def double(self, Q: Point) -> Point:
        self.require_on_curve(Q)
        return double(Q, self.a, self.m)

    def negate(self, Q: Point) -> Point:
        return negate(Q, self.m)

    def mult(self, n: int, Q: Optional[Point] = None) -> Point:
        """Return n*Q, with Q defaulting to the base point G.

        The input point must be on the curve.
        """

        if Q is None:
            if self.G is None:
                raise ECArithValueError("no point and no base point available")
            Q = self.G
        self.require_on_curve(Q)
        return scalar_multiply(n, Q, self.a, self.m)


CURVES: Dict[str, Curve] = {}
datadir = path.join(path.dirname(__file__), "_data")
filename = path.join(datadir, "curves.json")
with open(filename, "r", encoding="ascii") as file_:
    for curve_dict in json.load(file_):
        CURVES[curve_dict["name"]] = Curve.from_dict(curve_dict)

ec313 = CURVES["ec313"]
