#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points in affine coordinates.

A point is either an AffinePoint(x, y)
or the point at infinity, the group identity element.
The two cases are distinct types, so that the identity
cannot be mistaken for an affine point with unused coordinates:

    Point = Union[AffinePoint, PointAtInfinity]

Points are immutable values; all operations return new points.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from ecarith.alias import Integer
from ecarith.utils import int_from_integer


@dataclass(frozen=True)
class AffinePoint:
    """Affine point (x, y).

    The coordinates are not checked to be reduced mod m:
    a point is meaningful only with respect to a given curve,
    see ecarith.curve.is_on_curve.
    """

    x: int
    y: int

    def __init__(self, x: Integer, y: Integer) -> None:
        object.__setattr__(self, "x", int_from_integer(x))
        object.__setattr__(self, "y", int_from_integer(y))

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))


@dataclass(frozen=True)
class PointAtInfinity:
    "The point at infinity: all instances are equal."

    def __repr__(self) -> str:
        return "INF"


Point = Union[AffinePoint, PointAtInfinity]

INF = PointAtInfinity()


def at_infinity() -> PointAtInfinity:
    "Return the group identity element."
    return INF


def is_at_infinity(p: Point) -> bool:
    return isinstance(p, PointAtInfinity)


def is_point(p: object) -> bool:
    return isinstance(p, (AffinePoint, PointAtInfinity))
