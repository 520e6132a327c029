## exception types for kernel3d

## Copyright (c) 2026 kernel3d contributors
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

"""Exceptions raised by kernel3d for mathematically undefined operations.

Only hard failures are represented here.  Geometric "no answer" outcomes
(parallel lines, singular matrices, non-planar polylines) are reported by
returning ``None``.
"""


class GeometryError(ValueError):
    """Base class for precondition violations in geometry operations."""


class ZeroLengthVectorError(GeometryError):
    """A direction was required but the vector has zero length."""


class InvalidLineError(GeometryError):
    """A line with coincident end points was used where a direction is needed."""


class ScalarDivisionError(GeometryError, ZeroDivisionError):
    """Division of a point or vector by exactly zero."""


class NotClosedError(GeometryError):
    """A polyline query requires a closed polyline."""


class NotPlanarError(GeometryError):
    """A polyline query requires a planar polyline."""


class NonAffineTransformError(GeometryError):
    """A decomposition was requested on a singular transform."""


__all__ = [
    "GeometryError",
    "ZeroLengthVectorError",
    "InvalidLineError",
    "ScalarDivisionError",
    "NotClosedError",
    "NotPlanarError",
    "NonAffineTransformError",
]
