## three-component coordinate base class for geombasics

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

"""three-component values shared by ``Point3d`` and ``Vector3d``

A ``Coordinate3d`` holds ``x``, ``y`` and ``z``.  Either all three are
present, or all three are ``None`` and the value is *unset*.  Unset is
an explicit tag, not a NaN: arithmetic involving an unset operand
returns the unset value of the result type rather than silently
spreading NaN through the components.

Arithmetic is component-wise.  ``a * b`` is the Hadamard product, not
the cross product; ``Vector3d.cross()`` is the cross product.  Both
``*`` and ``/`` also accept a scalar on the right, and ``*`` accepts a
scalar on the left.  Equality is exact component equality; use
``vclose()`` when a tolerance is wanted.

"""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import Optional, Tuple

from geombasics.errors import ConstructionError
from geombasics.scalar import coerce, divide, epsilon, isgoodnum
from geombasics.validity import Validatable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate3d(Validatable):
    """base class for three-component values"""

    x: Optional[float]
    y: Optional[float]
    z: Optional[float]

    def __post_init__(self):
        values = (coerce(self.x, 'x'), coerce(self.y, 'y'), coerce(self.z, 'z'))
        present = [v is not None for v in values]
        if any(present) and not all(present):
            logger.debug('rejecting partially unset %s %r',
                         type(self).__name__, values)
            raise ConstructionError(
                f'{type(self).__name__} components must be all set or all unset',
                details={'x': self.x, 'y': self.y, 'z': self.z})
        for name, value in zip('xyz', values):
            object.__setattr__(self, name, value)

    @classmethod
    def unset(cls):
        unset = getattr(cls, 'UNSET', None)
        if unset is None:
            unset = cls(None, None, None)
        return unset

    @property
    def is_set(self) -> bool:
        return self.x is not None

    def is_valid(self) -> bool:
        return (self.is_set and
                math.isfinite(self.x) and
                math.isfinite(self.y) and
                math.isfinite(self.z))

    def as_tuple(self) -> Tuple[Optional[float], Optional[float], Optional[float]]:
        return (self.x, self.y, self.z)

    def _mag(self) -> Optional[float]:
        if not self.is_set:
            return None
        return math.hypot(self.x, self.y, self.z)

    def _combine(self, other, op):
        if not isinstance(other, Coordinate3d):
            return NotImplemented
        if not (self.is_set and other.is_set):
            return self.unset()
        return type(self)(op(self.x, other.x),
                          op(self.y, other.y),
                          op(self.z, other.z))

    def _scale(self, factor, op):
        if not isgoodnum(factor):
            return NotImplemented
        if not self.is_set:
            return self.unset()
        return type(self)(op(self.x, factor),
                          op(self.y, factor),
                          op(self.z, factor))

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        if isinstance(other, Coordinate3d):
            return self._combine(other, operator.mul)
        return self._scale(other, operator.mul)

    def __rmul__(self, factor):
        return self._scale(factor, operator.mul)

    def __truediv__(self, other):
        if isinstance(other, Coordinate3d):
            return self._combine(other, divide)
        return self._scale(other, divide)

    def __neg__(self):
        return self._scale(-1.0, operator.mul)


def vclose(a: Coordinate3d, b: Coordinate3d, tol: float = epsilon) -> bool:
    """are ``a`` and ``b`` the same to within ``tol``?"""
    if not (a.is_set and b.is_set):
        return False
    d = (a - b)._mag()
    return d is not None and d < tol


__all__ = ['Coordinate3d', 'vclose']
