## scalar conventions and sentinel values for geombasics

## Copyright (c) 2020 geombasics contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""scalar conventions shared by every **geombasics** value type

constants
=========

``epsilon`` is the tolerance used by the ``close()`` family of helpers
and by every query that takes a ``tol`` argument.  It matches the
empirically-chosen value used throughout yapCAD.  Redefine it at your
peril.

sentinels
=========

Scalars are ordinary Python ``float`` values with double-precision
dynamic range.  The sentinel conventions are:

- ``UNSET`` (``None``) -- the value is absent or was never computed
- ``INFINITY`` / ``NEGATIVE_INFINITY`` -- boundary extremes; never valid
- ``MAX`` / ``MIN`` -- the largest finite magnitudes; valid

A NaN that arises from arithmetic is treated like infinity: it can be
stored, but it never passes a validity check.

"""

from __future__ import annotations

import math
import sys
from typing import Optional

from geombasics.errors import ConstructionError

epsilon = 0.000005

UNSET = None
INFINITY = math.inf
NEGATIVE_INFINITY = -math.inf
MAX = sys.float_info.max
MIN = -sys.float_info.max


## booleans are ints as far as isinstance() is concerned, but a True
## coordinate is almost certainly a bug
def isgoodnum(n) -> bool:
    """is ``n`` a real number, and not a boolean?"""
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def is_valid_scalar(n: Optional[float]) -> bool:
    """is ``n`` present and finite?"""
    return n is not None and math.isfinite(n)


def close(a: float, b: float, tol: float = epsilon) -> bool:
    """are two scalars the same within ``tol``"""
    return abs(a - b) < tol


def coerce(n, name: str = 'value') -> Optional[float]:
    """Return ``n`` as a float, passing ``None`` (unset) through.

    Raises ``ConstructionError`` for anything that is not a number.
    """
    if n is None:
        return None
    if not isgoodnum(n):
        raise ConstructionError(f'{name} must be a number, got {n!r}',
                                details={name: n})
    return float(n)


def divide(a: float, b: float) -> float:
    """``a / b`` with IEEE-754 semantics for a zero divisor.

    Python raises ``ZeroDivisionError`` where IEEE arithmetic yields a
    signed infinity (or NaN for ``0/0``).  Geometry built from such a
    quotient is caught later by the validity predicate.
    """
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


__all__ = [
    'epsilon',
    'UNSET',
    'INFINITY',
    'NEGATIVE_INFINITY',
    'MAX',
    'MIN',
    'isgoodnum',
    'is_valid_scalar',
    'close',
    'coerce',
    'divide',
]
