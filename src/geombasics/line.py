## Line, bounded line segments

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

"""line segments between two points

Lines are parameterized over ``0 <= t <= 1``, where ``t=0`` is the
start point and ``t=1`` is the end point.  Parameters outside that
interval still lie on the line, just not inside the segment.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from geombasics.errors import ConstructionError
from geombasics.point import Point3d
from geombasics.validity import Validatable
from geombasics.vector import Vector3d


@dataclass(frozen=True)
class Line(Validatable):
    """A line segment constrained between two points."""

    start: Point3d
    end: Point3d

    UNSET: ClassVar[Line]

    def __post_init__(self):
        if not (isinstance(self.start, Point3d) and isinstance(self.end, Point3d)):
            raise ConstructionError('line endpoints must be Point3d',
                                    details={'start': self.start, 'end': self.end})

    @classmethod
    def from_direction(cls, origin: Point3d, direction: Vector3d,
                       distance: float) -> Line:
        """Build the line starting at ``origin`` and running ``distance``
        along ``direction``.  The direction is unitized first, so only its
        orientation matters.
        """
        offset = direction.unitize() * distance
        return cls(origin, origin + offset)

    def is_valid(self) -> bool:
        return self.start.is_valid() and self.end.is_valid()

    def start_tangent(self) -> Vector3d:
        """The direction of the line, pointing from start toward end.

        The result is not unitized; its length is the line length.
        """
        return (self.end - self.start).to_vector()

    def length(self) -> Optional[float]:
        return self.start.distance_to(self.end)

    def point_at(self, t: float) -> Point3d:
        return self.start.interpolate(self.end, t)

    def reversed(self) -> Line:
        return Line(self.end, self.start)


Line.UNSET = Line(Point3d.UNSET, Point3d.UNSET)


__all__ = ['Line']
