## Vector3d, vectors in three-dimensional space

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

"""vectors in three-dimensional space"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from geombasics import scalar
from geombasics.coords import Coordinate3d


@dataclass(frozen=True)
class Vector3d(Coordinate3d):
    """A direction and magnitude in three-dimensional space.

    ``unitize()`` divides by the vector's own length with no special
    case for zero length: the zero vector unitizes to an all-NaN vector
    that fails ``is_valid()``.
    """

    ORIGIN: ClassVar[Vector3d]
    UNSET: ClassVar[Vector3d]
    INFINITY: ClassVar[Vector3d]
    NEGATIVE_INFINITY: ClassVar[Vector3d]
    MAX: ClassVar[Vector3d]
    MIN: ClassVar[Vector3d]
    XAXIS: ClassVar[Vector3d]
    YAXIS: ClassVar[Vector3d]
    ZAXIS: ClassVar[Vector3d]

    def length(self) -> Optional[float]:
        """Euclidean norm, or ``None`` if unset"""
        return self._mag()

    def unitize(self) -> Vector3d:
        """Return this vector scaled to unit length."""
        if not self.is_set:
            return Vector3d.UNSET
        ## pre-scale so MAX-sized components do not overflow the norm
        biggest = max(abs(self.x), abs(self.y), abs(self.z))
        if math.isfinite(biggest) and biggest > 0:
            scaled = self / biggest
            return scaled / scaled.length()
        return self / self.length()

    def is_unit(self, tol: float = scalar.epsilon) -> bool:
        length = self.length()
        return length is not None and scalar.close(length, 1.0, tol)

    def dot(self, other: Vector3d) -> Optional[float]:
        """``self . other``, or ``None`` if either is unset"""
        if not (self.is_set and other.is_set):
            return None
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        """``self x other``, see https://en.wikipedia.org/wiki/Cross_product"""
        if not (self.is_set and other.is_set):
            return Vector3d.UNSET
        return Vector3d(self.y * other.z - self.z * other.y,
                        self.z * other.x - self.x * other.z,
                        self.x * other.y - self.y * other.x)

    def to_point(self):
        from geombasics.point import Point3d
        return Point3d(self.x, self.y, self.z)


Vector3d.ORIGIN = Vector3d(0.0, 0.0, 0.0)
Vector3d.UNSET = Vector3d(None, None, None)
Vector3d.INFINITY = Vector3d(scalar.INFINITY, scalar.INFINITY, scalar.INFINITY)
Vector3d.NEGATIVE_INFINITY = Vector3d(scalar.NEGATIVE_INFINITY,
                                      scalar.NEGATIVE_INFINITY,
                                      scalar.NEGATIVE_INFINITY)
Vector3d.MAX = Vector3d(scalar.MAX, scalar.MAX, scalar.MAX)
Vector3d.MIN = Vector3d(scalar.MIN, scalar.MIN, scalar.MIN)
Vector3d.XAXIS = Vector3d(1.0, 0.0, 0.0)
Vector3d.YAXIS = Vector3d(0.0, 1.0, 0.0)
Vector3d.ZAXIS = Vector3d(0.0, 0.0, 1.0)


__all__ = ['Vector3d']
