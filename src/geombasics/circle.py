## Circle, center and radius

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

"""circles"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from geombasics.errors import ConstructionError
from geombasics.point import Point3d
from geombasics.scalar import coerce, is_valid_scalar
from geombasics.validity import Validatable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Circle(Validatable):
    """A circle given by its center and radius.

    A negative radius is malformed input and raises
    ``ConstructionError``.  A zero radius constructs fine but is
    degenerate, so ``is_valid()`` reports ``False`` for it.
    """

    center: Point3d
    radius: Optional[float]

    UNSET: ClassVar[Circle]

    def __post_init__(self):
        if not isinstance(self.center, Point3d):
            raise ConstructionError('circle center must be a Point3d',
                                    details={'center': self.center})
        radius = coerce(self.radius, 'radius')
        if radius is not None and radius < 0:
            logger.debug('rejecting circle with radius %r', radius)
            raise ConstructionError('Input radius cannot be negative',
                                    details={'radius': radius})
        object.__setattr__(self, 'radius', radius)

    def is_valid(self) -> bool:
        return (self.center.is_valid() and
                is_valid_scalar(self.radius) and
                self.radius > 0)

    def diameter(self) -> Optional[float]:
        if self.radius is None:
            return None
        return 2.0 * self.radius

    def circumference(self) -> Optional[float]:
        if self.radius is None:
            return None
        return 2.0 * math.pi * self.radius

    def area(self) -> Optional[float]:
        if self.radius is None:
            return None
        return math.pi * self.radius * self.radius


Circle.UNSET = Circle(Point3d.UNSET, None)


__all__ = ['Circle']
