## Plane, an origin and a basis-vector frame

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

"""planes defined by an origin and a pair of basis vectors

A ``Plane`` is built from an origin and two basis vectors, ``x`` and
``y``.  The third basis vector, ``z``, is always derived as ``x x y``
and can never be supplied, so ``z`` is always orthogonal to the input
pair.  ``x`` and ``y`` themselves are accepted as given, orthogonal or
not, unit length or not; use ``is_orthogonal()`` to check.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from geombasics import scalar
from geombasics.errors import ConstructionError
from geombasics.point import Point3d
from geombasics.validity import Validatable
from geombasics.vector import Vector3d


@dataclass(frozen=True)
class Plane(Validatable):
    """An infinite plane with a local coordinate frame."""

    origin: Point3d
    x: Vector3d
    y: Vector3d
    z: Vector3d = field(init=False)

    UNSET: ClassVar[Plane]
    WORLDXY: ClassVar[Plane]
    WORLDYZ: ClassVar[Plane]
    WORLDZX: ClassVar[Plane]

    def __post_init__(self):
        if not isinstance(self.origin, Point3d):
            raise ConstructionError('plane origin must be a Point3d',
                                    details={'origin': self.origin})
        if not (isinstance(self.x, Vector3d) and isinstance(self.y, Vector3d)):
            raise ConstructionError('plane basis vectors must be Vector3d',
                                    details={'x': self.x, 'y': self.y})
        object.__setattr__(self, 'z', self.x.cross(self.y))

    @property
    def normal(self) -> Vector3d:
        return self.z

    def is_valid(self) -> bool:
        return (self.origin.is_valid() and
                self.x.is_valid() and
                self.y.is_valid() and
                self.z.is_valid())

    def is_orthogonal(self, tol: float = scalar.epsilon) -> bool:
        """are the ``x`` and ``y`` basis vectors perpendicular?"""
        d = self.x.dot(self.y)
        return d is not None and abs(d) < tol

    def point_at(self, u: float, v: float) -> Point3d:
        """Map local coordinates ``(u, v)`` to world space."""
        return self.origin + self.x * u + self.y * v


Plane.UNSET = Plane(Point3d.UNSET, Vector3d.UNSET, Vector3d.UNSET)
Plane.WORLDXY = Plane(Point3d.ORIGIN, Vector3d.XAXIS, Vector3d.YAXIS)
Plane.WORLDYZ = Plane(Point3d.ORIGIN, Vector3d.YAXIS, Vector3d.ZAXIS)
Plane.WORLDZX = Plane(Point3d.ORIGIN, Vector3d.ZAXIS, Vector3d.XAXIS)


__all__ = ['Plane']
