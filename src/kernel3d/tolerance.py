## tolerance constants and scalar comparison helpers for kernel3d

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

"""Global tolerances and the scalar primitives every geometry type uses.

``EPSILON`` is the linear tolerance used for coordinate comparison and
``ANGLE_EPSILON`` (radians) the angular tolerance used when classifying
vectors as parallel or perpendicular.  Functions that accept a ``tol``
keyword resolve ``None`` to the current module value at call time, so
rebinding ``kernel3d.tolerance.EPSILON`` changes the default everywhere.
"""

from math import degrees, isfinite, pi, radians

EPSILON = 1e-6
ANGLE_EPSILON = 0.001

pi2 = 2.0 * pi


def eps(tol=None):
    """return ``tol`` or the current linear tolerance"""
    return EPSILON if tol is None else tol


def angle_eps(tol=None):
    """return ``tol`` or the current angular tolerance"""
    return ANGLE_EPSILON if tol is None else tol


def epsilon_equals(a, b, tol=None):
    """true if ``|a-b| < tol``"""
    return abs(a - b) < eps(tol)


def close(a, b, tol=None):
    return epsilon_equals(a, b, tol)


def is_zero(a, tol=None):
    return abs(a) < eps(tol)


def clamp(value, lo, hi):
    """clamp ``value`` into ``[lo, hi]``; swapped bounds are reordered"""
    if lo > hi:
        lo, hi = hi, lo
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def is_valid_number(x):
    """true for finite, non-NaN ints and floats (booleans excluded)"""
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    return isfinite(x)


def to_radians(deg):
    return radians(deg)


def to_degrees(rad):
    return degrees(rad)
