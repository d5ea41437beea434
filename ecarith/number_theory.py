#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic.

The modular inverse is computed with the iterative
Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

The modulus does not have to be a prime:
the inverse exists if and only if gcd(a, m) == 1,
otherwise NotInvertibleError is raised.
"""

from ecarith.exceptions import ECArithValueError, NotInvertibleError
from ecarith.utils import int_repr


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m), in the [0, m-1] range.

    Only the Bezout coefficient t of a is tracked,
    alongside the remainder r:
    at each step r = t * a (mod m).
    When the remainder reaches zero, the last nonzero remainder
    is gcd(a, m) and t is the inverse of a if gcd(a, m) == 1.
    """

    if m <= 0:
        raise ECArithValueError(f"non-positive modulus: {int_repr(m)}")

    a %= m
    t, new_t = 0, 1
    r, new_r = m, a
    while new_r != 0:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r

    if r > 1:
        err_msg = f"No inverse for {int_repr(a)} mod {int_repr(m)}"
        raise NotInvertibleError(a, m, err_msg)

    # t is in (-m, m)
    if t < 0:
        t += m
    return t
