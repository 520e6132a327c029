## three-component vector and point types for kernel3d

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

from enum import Enum
from math import acos, cos, pi, sin, sqrt

from kernel3d import tolerance
from kernel3d.errors import ScalarDivisionError, ZeroLengthVectorError

## Vector3d is a free direction: it is immutable and ignores the
## translation part of a transform.  Point3d is a position: its
## coordinates may be assigned in place and it is transformed by the
## full affine map.  Subtracting two points yields a vector, and adding
## a vector to a point yields a point.


class ParallelIndicator(Enum):
    """result of :meth:`Vector3d.is_parallel_to`"""
    NOT_PARALLEL = 0
    PARALLEL = 1
    ANTI_PARALLEL = -1


def _check_divisor(s):
    if s == 0:
        raise ScalarDivisionError('divide: scalar divisor is zero')


class Vector3d:
    """immutable 3D direction/displacement"""

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def z(self):
        return self._z

    @classmethod
    def from_point(cls, p):
        return cls(p.x, p.y, p.z)

    def __repr__(self):
        return 'Vector3d({}, {}, {})'.format(self._x, self._y, self._z)

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z

    def __getitem__(self, i):
        return (self._x, self._y, self._z)[i]

    def __len__(self):
        return 3

    def __eq__(self, other):
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Point3d):
            return other.add(self)
        if isinstance(other, Vector3d):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3d):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, s):
        if isinstance(s, (int, float)):
            return self.multiply(s)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, s):
        if isinstance(s, (int, float)):
            return self.divide(s)
        return NotImplemented

    def __neg__(self):
        return self.reverse()

    ## properties

    @property
    def length(self):
        return sqrt(self._x*self._x + self._y*self._y + self._z*self._z)

    def is_zero(self, tol=None):
        """true if the length is within ``tol`` of zero"""
        return tolerance.is_zero(self.length, tol)

    def is_unit_vector(self, tol=None):
        return tolerance.epsilon_equals(self.length, 1.0, tol)

    ## arithmetic

    def add(self, other):
        return Vector3d(self._x + other.x, self._y + other.y, self._z + other.z)

    def add_to_point(self, p):
        return Point3d(p.x + self._x, p.y + self._y, p.z + self._z)

    def subtract(self, other):
        return Vector3d(self._x - other.x, self._y - other.y, self._z - other.z)

    def multiply(self, s):
        return Vector3d(self._x * s, self._y * s, self._z * s)

    def divide(self, s):
        _check_divisor(s)
        return Vector3d(self._x / s, self._y / s, self._z / s)

    def reverse(self):
        return Vector3d(-self._x, -self._y, -self._z)

    def dot(self, other):
        return self._x*other.x + self._y*other.y + self._z*other.z

    def cross(self, other):
        return Vector3d(self._y*other.z - other.y*self._z,
                        self._z*other.x - other.z*self._x,
                        self._x*other.y - other.x*self._y)

    def distance_to(self, other):
        return self.subtract(other).length

    def equals(self, other, tol=None):
        """per-component epsilon equality"""
        return (tolerance.epsilon_equals(self._x, other.x, tol) and
                tolerance.epsilon_equals(self._y, other.y, tol) and
                tolerance.epsilon_equals(self._z, other.z, tol))

    def unitize(self):
        """return a unit-length copy; raises on an exactly zero-length vector"""
        l = self.length
        if l == 0:
            raise ZeroLengthVectorError('unitize: vector has zero length')
        return Vector3d(self._x / l, self._y / l, self._z / l)

    ## classification

    def is_parallel_to(self, other, angle_tol=None):
        """Classify the pair as parallel, anti-parallel or neither.

        A zero-length operand is reported as ``PARALLEL``; callers who
        care about degenerate input must check :meth:`is_zero` first.
        """
        ll = self.length * other.length
        if ll == 0:
            return ParallelIndicator.PARALLEL
        cos_angle = self.dot(other) / ll
        cos_tol = cos(tolerance.angle_eps(angle_tol))
        if cos_angle >= cos_tol:
            return ParallelIndicator.PARALLEL
        if cos_angle <= -cos_tol:
            return ParallelIndicator.ANTI_PARALLEL
        return ParallelIndicator.NOT_PARALLEL

    def is_perpendicular_to(self, other, angle_tol=None):
        """true if the angle is within ``angle_tol`` of a right angle;
        a zero-length operand counts as perpendicular"""
        ll = self.length * other.length
        if ll == 0:
            return True
        return abs(self.dot(other)) / ll < sin(tolerance.angle_eps(angle_tol))

    def perpendicular_vector(self):
        """Return some vector perpendicular to this one.

        The two largest-magnitude components are swapped (one negated) and
        the smallest is zeroed, so the result is never accidentally zero
        for a non-zero input.
        """
        x, y, z = abs(self._x), abs(self._y), abs(self._z)
        if y > x:
            if z > y:
                i, j, k, a, b = 2, 1, 0, self._z, -self._y
            elif z >= x:
                i, j, k, a, b = 1, 2, 0, self._y, -self._z
            else:
                i, j, k, a, b = 1, 0, 2, self._y, -self._x
        elif z > x:
            i, j, k, a, b = 2, 0, 1, self._z, -self._x
        elif z > y:
            i, j, k, a, b = 0, 2, 1, self._x, -self._z
        else:
            i, j, k, a, b = 0, 1, 2, self._x, -self._y
        out = [0.0, 0.0, 0.0]
        out[i] = b
        out[j] = a
        out[k] = 0.0
        return Vector3d(*out)

    ## transformation

    def rotate(self, angle, axis):
        from kernel3d.xform import RotateAtOrigin
        return self.transform(RotateAtOrigin(angle, axis))

    def transform(self, xf):
        """apply the linear (upper-left 3x3) part of ``xf``"""
        m = xf.m
        x, y, z = self._x, self._y, self._z
        return Vector3d(m[0]*x + m[1]*y + m[2]*z,
                        m[4]*x + m[5]*y + m[6]*z,
                        m[8]*x + m[9]*y + m[10]*z)

    @staticmethod
    def interpolate(a, b, t):
        return Vector3d(a.x + (b.x - a.x)*t,
                        a.y + (b.y - a.y)*t,
                        a.z + (b.z - a.z)*t)


Vector3d.X_AXIS = Vector3d(1, 0, 0)
Vector3d.Y_AXIS = Vector3d(0, 1, 0)
Vector3d.Z_AXIS = Vector3d(0, 0, 1)
Vector3d.ZERO = Vector3d(0, 0, 0)


def vector_angle(a, b, normal=None, tol=None):
    """Return the angle between ``a`` and ``b`` in radians.

    With ``normal`` the angle is signed and measured counter-clockwise
    about ``normal``, in the range ``[0, 2*pi)``.
    """
    if a.is_zero(tol) or b.is_zero(tol):
        raise ZeroLengthVectorError('vector_angle: operand has zero length')
    c = tolerance.clamp(a.dot(b) / (a.length * b.length), -1.0, 1.0)
    angle = acos(c)
    if normal is not None and normal.dot(a.cross(b)) < 0:
        angle = 2*pi - angle
    return angle


Vector3d.vector_angle = staticmethod(vector_angle)


class Point3d:
    """3D position with assignable coordinates"""

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def origin(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_vector(cls, v):
        return cls(v.x, v.y, v.z)

    def copy(self):
        return Point3d(self.x, self.y, self.z)

    def __repr__(self):
        return 'Point3d({}, {}, {})'.format(self.x, self.y, self.z)

    def __str__(self):
        return '({}, {}, {})'.format(self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, i):
        return (self.x, self.y, self.z)[i]

    def __len__(self):
        return 3

    def __eq__(self, other):
        if not isinstance(other, Point3d):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __add__(self, other):
        if isinstance(other, Vector3d):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point3d):
            return self.subtract_point(other)
        if isinstance(other, Vector3d):
            return self.subtract(other)
        return NotImplemented

    def __mul__(self, s):
        if isinstance(s, (int, float)):
            return self.multiply(s)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, s):
        if isinstance(s, (int, float)):
            return self.divide(s)
        return NotImplemented

    def add(self, v):
        return Point3d(self.x + v.x, self.y + v.y, self.z + v.z)

    def add_point(self, p):
        """component-wise sum, used for weighted averages"""
        return Point3d(self.x + p.x, self.y + p.y, self.z + p.z)

    def subtract(self, v):
        return Point3d(self.x - v.x, self.y - v.y, self.z - v.z)

    def subtract_point(self, p):
        return Vector3d(self.x - p.x, self.y - p.y, self.z - p.z)

    def multiply(self, s):
        return Point3d(self.x * s, self.y * s, self.z * s)

    def divide(self, s):
        _check_divisor(s)
        return Point3d(self.x / s, self.y / s, self.z / s)

    def dot(self, other):
        return self.x*other.x + self.y*other.y + self.z*other.z

    def distance_to(self, p):
        dx = self.x - p.x
        dy = self.y - p.y
        dz = self.z - p.z
        return sqrt(dx*dx + dy*dy + dz*dz)

    def equals(self, other, tol=None):
        return (tolerance.epsilon_equals(self.x, other.x, tol) and
                tolerance.epsilon_equals(self.y, other.y, tol) and
                tolerance.epsilon_equals(self.z, other.z, tol))

    def transform(self, xf):
        """apply the full affine map of ``xf`` including translation"""
        m = xf.m
        x, y, z = self.x, self.y, self.z
        xx = m[0]*x + m[1]*y + m[2]*z + m[3]
        yy = m[4]*x + m[5]*y + m[6]*z + m[7]
        zz = m[8]*x + m[9]*y + m[10]*z + m[11]
        w = m[12]*x + m[13]*y + m[14]*z + m[15]
        if w != 0 and w != 1:
            xx /= w
            yy /= w
            zz /= w
        return Point3d(xx, yy, zz)

    @staticmethod
    def interpolate(a, b, t):
        return Point3d(a.x + (b.x - a.x)*t,
                       a.y + (b.y - a.y)*t,
                       a.z + (b.z - a.z)*t)


def distance(a, b):
    """Euclidean distance between two points or two vectors"""
    return a.distance_to(b)


__all__ = ['ParallelIndicator', 'Vector3d', 'Point3d', 'vector_angle', 'distance']
