## PolyLine, ordered paths through points

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

"""polylines: ordered sequences of points

The order of the points is the geometric order of the path.  An empty
polyline is representable; it has zero length, and it is invalid.
These are two independent facts.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Tuple

import numpy as np

from geombasics.bbox import BoundingBox
from geombasics.errors import ConstructionError
from geombasics.line import Line
from geombasics.point import Point3d
from geombasics.scalar import epsilon
from geombasics.validity import Validatable


@dataclass(frozen=True)
class PolyLine(Validatable):
    """A path through an ordered sequence of ``Point3d``."""

    points: Tuple[Point3d, ...] = ()

    UNSET: ClassVar[PolyLine]

    def __post_init__(self):
        points = tuple(self.points)
        bad = [p for p in points if not isinstance(p, Point3d)]
        if bad:
            raise ConstructionError(f'non-point arguments to PolyLine: {bad}',
                                    details={'points': bad})
        object.__setattr__(self, 'points', points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __iter__(self) -> Iterator[Point3d]:
        return iter(self.points)

    def is_valid(self) -> bool:
        if len(self.points) == 0:
            return False
        return all(p.is_valid() for p in self.points)

    def length(self) -> Optional[float]:
        """Sum of the distances between consecutive points.

        Zero for an empty polyline, ``None`` if any point is unset.
        """
        if not self.points:
            return 0.0
        if not all(p.is_set for p in self.points):
            return None
        length = 0.0
        last = self.points[0]
        for p in self.points[1:]:
            length += last.distance_to(p)
            last = p
        return length

    def segments(self) -> Tuple[Line, ...]:
        return tuple(Line(a, b) for a, b in zip(self.points, self.points[1:]))

    ## Note: this does not test for all points lying in the same plane
    def is_closed(self, tol: float = epsilon) -> bool:
        """Does the path end where it starts, to within ``tol``?"""
        if len(self.points) < 3:
            return False
        d = self.points[0].distance_to(self.points[-1])
        return d is not None and d <= tol

    def appended(self, point: Point3d) -> PolyLine:
        return PolyLine(self.points + (point,))

    def as_array(self) -> np.ndarray:
        """The points as an ``(N, 3)`` float array; unset points become NaN."""
        return np.asarray([p.as_tuple() for p in self.points],
                          dtype=float).reshape(-1, 3)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)


PolyLine.UNSET = PolyLine(())


__all__ = ['PolyLine']
