## BoundingBox, axis-aligned boxes

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

"""axis-aligned bounding boxes

A ``BoundingBox`` spans the "lower bottom left" corner ``min`` to the
"upper top right" corner ``max``.  It is valid only when both corners
are valid and ``max`` is strictly greater than ``min`` on every axis,
so flat and inverted boxes are representable but invalid.

Parametric queries map ``(u, v, w)`` in ``[0, 1]`` on each axis onto
the box; parameters outside that range extrapolate, they are never
clamped.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Tuple

import numpy as np

from geombasics.errors import ConstructionError
from geombasics.point import Point3d
from geombasics.validity import Validatable
from geombasics.vector import Vector3d

logger = logging.getLogger(__name__)

## corner order, as (u, v, w) parameters for point_at()
_CORNERS = ((0, 0, 0), (0, 1, 0), (0, 0, 1), (0, 1, 1),
            (1, 0, 0), (1, 1, 0), (1, 0, 1), (1, 1, 1))


@dataclass(frozen=True)
class BoundingBox(Validatable):
    """A box aligned with the world axes."""

    min: Point3d
    max: Point3d

    EMPTY: ClassVar[BoundingBox]
    UNSET: ClassVar[BoundingBox]

    def __post_init__(self):
        if not (isinstance(self.min, Point3d) and isinstance(self.max, Point3d)):
            raise ConstructionError('bounding box corners must be Point3d',
                                    details={'min': self.min, 'max': self.max})

    @classmethod
    def from_points(cls, points: Iterable[Point3d]) -> BoundingBox:
        """Compute the bounding box of ``points``.

        Returns ``BoundingBox.UNSET`` if there are no points or any
        point is unset.
        """
        points = list(points)
        if not points or not all(p.is_set for p in points):
            logger.debug('no bounding box for %d points, some unset or none given',
                         len(points))
            return cls.UNSET
        coords = np.asarray([p.as_tuple() for p in points], dtype=float)
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return cls(Point3d(*(float(c) for c in lo)),
                   Point3d(*(float(c) for c in hi)))

    @property
    def is_set(self) -> bool:
        return self.min.is_set and self.max.is_set

    def is_valid(self) -> bool:
        return (self.min.is_valid() and
                self.max.is_valid() and
                self.max > self.min)

    def size(self) -> Vector3d:
        """the extent of the box along each axis"""
        return (self.max - self.min).to_vector()

    def volume(self) -> Optional[float]:
        if not self.is_set:
            return None
        extent = self.max - self.min
        return extent.x * extent.y * extent.z

    def center(self) -> Point3d:
        return self.point_at(0.5, 0.5, 0.5)

    def point_at(self, u: float, v: float, w: float) -> Point3d:
        """Trilinear interpolation of ``(u, v, w)`` into world space."""
        if not self.is_set:
            return Point3d.UNSET
        return Point3d(self.min.x + (self.max.x - self.min.x) * u,
                       self.min.y + (self.max.y - self.min.y) * v,
                       self.min.z + (self.max.z - self.min.z) * w)

    def corners(self) -> Tuple[Point3d, ...]:
        """All eight corners of the box, in a fixed order: the ``min.x``
        face first, each face ordered by ``(y, z)`` as
        ``(lo, lo), (hi, lo), (lo, hi), (hi, hi)``.
        """
        return tuple(self.point_at(u, v, w) for u, v, w in _CORNERS)

    def contains_point(self, p: Point3d) -> bool:
        """does ``p`` lie inside the box, boundary included?"""
        if not (self.is_set and p.is_set):
            return False
        return (self.min.x <= p.x <= self.max.x and
                self.min.y <= p.y <= self.max.y and
                self.min.z <= p.z <= self.max.z)

    def contains_box(self, other: BoundingBox) -> bool:
        return self.contains_point(other.min) and self.contains_point(other.max)

    def union(self, other: BoundingBox) -> BoundingBox:
        """the smallest box enclosing both boxes"""
        if not (self.is_set and other.is_set):
            return BoundingBox.UNSET
        return BoundingBox(Point3d(min(self.min.x, other.min.x),
                                   min(self.min.y, other.min.y),
                                   min(self.min.z, other.min.z)),
                           Point3d(max(self.max.x, other.max.x),
                                   max(self.max.y, other.max.y),
                                   max(self.max.z, other.max.z)))

    def inflate(self, x: float, y: float, z: float) -> BoundingBox:
        """Grow the box outward by ``x``, ``y`` and ``z`` on each side of
        the matching axis.  Negative amounts shrink it, possibly until it
        becomes invalid.
        """
        amount = Vector3d(x, y, z)
        return BoundingBox(self.min - amount, self.max + amount)

    def inflate_uniform(self, amount: float) -> BoundingBox:
        return self.inflate(amount, amount, amount)


BoundingBox.EMPTY = BoundingBox(Point3d.ORIGIN, Point3d.ORIGIN)
BoundingBox.UNSET = BoundingBox(Point3d.UNSET, Point3d.UNSET)


__all__ = ['BoundingBox']
