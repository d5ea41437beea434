#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Scalar multiplication of curve points in affine coordinates."""

from ecarith.exceptions import ECArithValueError
from ecarith.group_law import add
from ecarith.point import INF, Point
from ecarith.utils import int_repr


def scalar_multiply(n: int, p: Point, a: int, m: int) -> Point:
    """Return n*p, i.e. p added to itself n times.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the n coefficient,
    affine coordinates.

    It costs O(log n) group operations; it is not constant-time.

    The input point is assumed to be on curve and
    the n coefficient is not reduced mod the point order.
    """

    if n < 0:
        raise ECArithValueError(f"negative n: {int_repr(n)}")

    # running result
    result: Point = INF
    addend = p
    while n > 0:
        # if least significant bit of n is 1, then add addend to result
        if n & 1:
            result = add(result, addend, a, m)
        # the doubling part of 'double & add'
        addend = add(addend, addend, a, m)
        # remove the bit just accounted for
        n >>= 1
    return result
