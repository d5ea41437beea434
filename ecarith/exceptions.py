#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

They discriminate exceptions raised by ecarith
from those raised by other code.

Callers may keep catching the plain ValueError, TypeError,
and RuntimeError the ecarith classes derive from;
NotInvertibleError is the only domain-specific failure
of the curve arithmetic.
"""


class ECArithValueError(ValueError):
    pass


class ECArithTypeError(TypeError):
    pass


class ECArithRuntimeError(RuntimeError):
    pass


class NotInvertibleError(ECArithValueError):
    """No modular inverse exists, i.e. gcd(a, m) > 1.

    Raised by the modular inverse and propagated unchanged
    by the group law and by scalar multiplication:
    the requested operation is undefined for those inputs.
    """

    def __init__(self, a: int, m: int, msg: str) -> None:
        super().__init__(msg)
        self.a = a
        self.m = m
