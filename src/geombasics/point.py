## Point3d, points in three-dimensional space

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

"""points in three-dimensional space"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from geombasics import scalar
from geombasics.coords import Coordinate3d


@dataclass(frozen=True)
class Point3d(Coordinate3d):
    """A point in three-dimensional space.

    Besides the component-wise arithmetic inherited from
    ``Coordinate3d``, points carry a strict component-wise partial
    order: ``a > b`` only when *every* component of ``a`` exceeds the
    matching component of ``b``.  Two points can therefore be neither
    ``<`` nor ``>`` each other, nor equal.
    """

    ORIGIN: ClassVar[Point3d]
    UNSET: ClassVar[Point3d]
    INFINITY: ClassVar[Point3d]
    NEGATIVE_INFINITY: ClassVar[Point3d]
    MAX: ClassVar[Point3d]
    MIN: ClassVar[Point3d]

    def distance_to(self, other: Coordinate3d) -> Optional[float]:
        """Euclidean distance to ``other``, or ``None`` if either is unset"""
        return (other - self)._mag()

    def interpolate(self, other: Point3d, t: float) -> Point3d:
        """Sample the segment from ``self`` to ``other`` at parameter ``t``.

        ``t=0`` gives ``self`` and ``t=1`` gives ``other``.  Values
        outside ``[0, 1]`` extrapolate along the same line.
        """
        return self + (other - self) * t

    def to_vector(self):
        from geombasics.vector import Vector3d
        return Vector3d(self.x, self.y, self.z)

    def _dominates(self, other, op) -> bool:
        if not isinstance(other, Point3d):
            return NotImplemented
        if not (self.is_set and other.is_set):
            return False
        return (op(self.x, other.x) and
                op(self.y, other.y) and
                op(self.z, other.z))

    def __gt__(self, other):
        return self._dominates(other, lambda a, b: a > b)

    def __lt__(self, other):
        return self._dominates(other, lambda a, b: a < b)


Point3d.ORIGIN = Point3d(0.0, 0.0, 0.0)
Point3d.UNSET = Point3d(None, None, None)
Point3d.INFINITY = Point3d(scalar.INFINITY, scalar.INFINITY, scalar.INFINITY)
Point3d.NEGATIVE_INFINITY = Point3d(scalar.NEGATIVE_INFINITY,
                                    scalar.NEGATIVE_INFINITY,
                                    scalar.NEGATIVE_INFINITY)
Point3d.MAX = Point3d(scalar.MAX, scalar.MAX, scalar.MAX)
Point3d.MIN = Point3d(scalar.MIN, scalar.MIN, scalar.MIN)


__all__ = ['Point3d']
