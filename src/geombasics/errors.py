## exceptions for geombasics

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

"""Exceptions raised by **geombasics**.

Only malformed input raises.  Degenerate-but-representable values
(unset sentinels, a zero radius, an empty polyline, an inverted box)
construct normally and are reported by ``is_valid()`` instead.
"""


class GeometryError(ValueError):
    """Base class for geometry exceptions."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class ConstructionError(GeometryError):
    """Raised when input can never produce a meaningful value."""


__all__ = ['GeometryError', 'ConstructionError']
