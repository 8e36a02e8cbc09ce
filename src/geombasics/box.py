## Box, boxes oriented by a plane

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

"""oriented boxes"""

from __future__ import annotations

from dataclasses import dataclass

from geombasics.bbox import BoundingBox
from geombasics.errors import ConstructionError
from geombasics.plane import Plane
from geombasics.point import Point3d
from geombasics.validity import Validatable


@dataclass(frozen=True)
class Box(Validatable):
    """A box whose ``min`` and ``max`` extents are expressed in the local
    frame of ``plane`` rather than in world coordinates.
    """

    plane: Plane
    min: Point3d
    max: Point3d

    def __post_init__(self):
        if not isinstance(self.plane, Plane):
            raise ConstructionError('box plane must be a Plane',
                                    details={'plane': self.plane})
        if not (isinstance(self.min, Point3d) and isinstance(self.max, Point3d)):
            raise ConstructionError('box extents must be Point3d',
                                    details={'min': self.min, 'max': self.max})

    def local_bounds(self) -> BoundingBox:
        """the extents as an axis-aligned box in the plane's frame"""
        return BoundingBox(self.min, self.max)

    def is_valid(self) -> bool:
        return self.plane.is_valid() and self.local_bounds().is_valid()


__all__ = ['Box']
