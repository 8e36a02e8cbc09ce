## Interval, ranges on the real line

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

"""intervals on the real line

An ``Interval`` stores ``min`` and ``max`` exactly as given.  Nothing
forces ``min <= max``: a *descending* interval (``min > max``) is a
legitimate value, and ``normalized()`` or ``swap()`` will turn it
around.  Membership tests are open, so the endpoints themselves are
never included.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

from geombasics import scalar
from geombasics.errors import ConstructionError
from geombasics.scalar import coerce, is_valid_scalar, isgoodnum
from geombasics.validity import Validatable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interval(Validatable):
    """An interval between two numbers."""

    min: Optional[float]
    max: Optional[float]

    UNSET: ClassVar[Interval]
    ZERO: ClassVar[Interval]
    INFINITY: ClassVar[Interval]
    NEGATIVE_INFINITY: ClassVar[Interval]
    MAX: ClassVar[Interval]
    MIN: ClassVar[Interval]

    def __post_init__(self):
        lo = coerce(self.min, 'min')
        hi = coerce(self.max, 'max')
        if (lo is None) != (hi is None):
            raise ConstructionError('interval bounds must be both set or both unset',
                                    details={'min': self.min, 'max': self.max})
        object.__setattr__(self, 'min', lo)
        object.__setattr__(self, 'max', hi)

    @property
    def is_set(self) -> bool:
        return self.min is not None

    def is_valid(self) -> bool:
        return is_valid_scalar(self.min) and is_valid_scalar(self.max)

    def mid(self) -> Optional[float]:
        if not self.is_set:
            return None
        return self.min + ((self.max - self.min) / 2.0)

    def length(self) -> Optional[float]:
        """signed length, negative for a descending interval"""
        if not self.is_set:
            return None
        return self.max - self.min

    def is_ascending(self) -> bool:
        return self.is_set and self.min < self.max

    def is_descending(self) -> bool:
        return self.is_set and self.min > self.max

    def swap(self) -> Interval:
        return Interval(self.max, self.min)

    def normalized(self) -> Interval:
        """Return this interval with ``min <= max``."""
        if self.is_descending():
            return self.swap()
        return self

    def includes(self, other: Interval) -> bool:
        """does ``other`` lie strictly inside this interval?"""
        if not (self.is_set and other.is_set):
            return False
        return other.min > self.min and other.max < self.max

    def includes_parameter(self, p: float) -> bool:
        """does ``p`` lie strictly between ``min`` and ``max``?"""
        if not self.is_set:
            return False
        return self.min < p < self.max

    @classmethod
    def from_union(cls, a: Interval, b: Interval) -> Interval:
        """The smallest interval spanning both ``a`` and ``b``."""
        if not (a.is_set and b.is_set):
            return cls.UNSET
        return cls(min(a.min, b.min), max(a.max, b.max))

    @classmethod
    def from_intersection(cls, a: Interval, b: Interval) -> Interval:
        """The overlap of ``a`` and ``b``.

        Returns ``Interval.UNSET`` if the intervals do not overlap.
        Touching intervals overlap in a single point.  Bounds are used
        as stored, so normalize descending intervals first.
        """
        if not (a.is_set and b.is_set):
            return cls.UNSET
        lo = max(a.min, b.min)
        hi = min(a.max, b.max)
        if lo > hi:
            logger.debug('intervals %r and %r are disjoint', a, b)
            return cls.UNSET
        return cls(lo, hi)

    def _shift(self, amount, sign):
        if not isgoodnum(amount):
            return NotImplemented
        if not self.is_set:
            return Interval.UNSET
        return Interval(self.min + sign * amount, self.max + sign * amount)

    def __add__(self, shift):
        return self._shift(shift, 1.0)

    def __sub__(self, shift):
        return self._shift(shift, -1.0)


Interval.UNSET = Interval(None, None)
Interval.ZERO = Interval(0.0, 0.0)
Interval.INFINITY = Interval(scalar.INFINITY, scalar.INFINITY)
Interval.NEGATIVE_INFINITY = Interval(scalar.NEGATIVE_INFINITY, scalar.NEGATIVE_INFINITY)
Interval.MAX = Interval(scalar.MAX, scalar.MAX)
Interval.MIN = Interval(scalar.MIN, scalar.MIN)


__all__ = ['Interval']
