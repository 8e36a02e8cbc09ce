## the geombasics validity protocol

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

"""the validity protocol

Every geometric value answers one question, ``is_valid()``: can this
instance be used in further computation?  Composite values are valid
only when every constituent is valid under its own rule *and* their
own structural rule holds.  The predicate never raises.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Validatable(ABC):
    """Base class for values that implement the validity protocol."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return ``True`` if this value is usable for computation."""
        pass


def is_valid(value) -> bool:
    """Return ``True`` if ``value`` implements the protocol and is valid."""
    return isinstance(value, Validatable) and value.is_valid()


def all_valid(*values) -> bool:
    """Return ``True`` if every value is valid."""
    return all(is_valid(v) for v in values)


__all__ = ['Validatable', 'is_valid', 'all_valid']
