#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecarith.group_law` module."

import pytest

from ecarith.curve import ec313, is_on_curve
from ecarith.exceptions import ECArithTypeError, NotInvertibleError
from ecarith.group_law import add, double, negate
from ecarith.point import INF, AffinePoint
from tests.test_curve import all_points, low_card_curves

P = AffinePoint(205, 130)


def test_reference_doubling() -> None:
    Q = add(P, P, ec313.a, ec313.m)
    assert Q == AffinePoint(79, 178)
    assert Q == double(P, ec313.a, ec313.m)
    assert is_on_curve(Q, ec313.a, ec313.b, ec313.m)


def test_identity() -> None:
    for ec in low_card_curves.values():
        for Q in all_points(ec):
            assert add(Q, INF, ec.a, ec.m) == Q
            assert add(INF, Q, ec.a, ec.m) == Q
    assert add(INF, INF, 4, 313) == INF
    assert add(P, INF, 4, 313) is P


def test_opposite_points() -> None:
    for ec in low_card_curves.values():
        for Q in all_points(ec):
            if Q == INF or Q.y == 0:
                continue
            assert add(Q, AffinePoint(Q.x, ec.m - Q.y), ec.a, ec.m) == INF
            assert add(Q, negate(Q, ec.m), ec.a, ec.m) == INF

    assert add(P, AffinePoint(205, 313 - 130), 4, 313) == INF


def test_vertical_tangent() -> None:
    # doubling a point with y == 0 does not try to invert 2*0
    for x in range(13):
        Q = AffinePoint(x, 0)
        assert add(Q, Q, 7, 13) == INF
        assert double(Q, 7, 13) == INF
    # not even on composite moduli
    assert double(AffinePoint(3, 0), 0, 15) == INF


def test_commutativity_and_closure() -> None:
    for ec in low_card_curves.values():
        points = all_points(ec)
        for Q1 in points:
            for Q2 in points:
                R = add(Q1, Q2, ec.a, ec.m)
                assert R == add(Q2, Q1, ec.a, ec.m)
                assert is_on_curve(R, ec.a, ec.b, ec.m)


def test_associativity() -> None:
    ec = low_card_curves["ec13_7_6"]
    points = all_points(ec)
    for Q1 in points:
        for Q2 in points:
            Q12 = add(Q1, Q2, ec.a, ec.m)
            for Q3 in points:
                R = add(Q12, Q3, ec.a, ec.m)
                assert R == add(Q1, add(Q2, Q3, ec.a, ec.m), ec.a, ec.m)


def test_reduced_coordinates() -> None:
    ec = low_card_curves["ec23_5_1"]
    for Q1 in all_points(ec):
        R = double(Q1, ec.a, ec.m)
        if R != INF:
            assert 0 <= R.x < ec.m
            assert 0 <= R.y < ec.m


def test_negate() -> None:
    assert negate(INF, 313) == INF
    assert negate(P, 313) == AffinePoint(205, 183)
    assert negate(AffinePoint(5, 0), 313) == AffinePoint(5, 0)
    assert negate(negate(P, 313), 313) == P


def test_not_invertible() -> None:
    # composite modulus: the slope denominator 4-1 is not a unit mod 15
    err_msg = "No inverse for 3 mod 15"
    with pytest.raises(NotInvertibleError, match=err_msg):
        add(AffinePoint(1, 1), AffinePoint(4, 2), 0, 15)

    # doubling: 2*5 is not a unit mod 15
    err_msg = "No inverse for 10 mod 15"
    with pytest.raises(NotInvertibleError, match=err_msg):
        add(AffinePoint(1, 5), AffinePoint(1, 5), 0, 15)


def test_not_a_point() -> None:
    with pytest.raises(ECArithTypeError, match="not a point"):
        add((205, 130), P, 4, 313)  # type: ignore
    with pytest.raises(ECArithTypeError, match="not a point"):
        add(P, None, 4, 313)  # type: ignore
    with pytest.raises(ECArithTypeError, match="not a point"):
        negate((205, 130), 313)  # type: ignore
