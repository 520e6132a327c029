## oriented planes for kernel3d

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

"""Oriented planes with an orthonormal frame."""

from __future__ import annotations

from typing import Optional, Tuple

from kernel3d.errors import ZeroLengthVectorError
from kernel3d.line import Line
from kernel3d.vector import Point3d, Vector3d


class Plane:
    """Plane through ``origin`` spanned by ``x_axis`` and ``y_axis``.

    The constructor unitizes both axes, derives ``z_axis = x × y`` and then
    re-derives ``y_axis = z × x`` so the frame is exactly orthonormal even
    when the supplied axes are not perpendicular.  ``z_axis`` is the
    normal.
    """

    __slots__ = ('origin', 'x_axis', 'y_axis', 'z_axis')

    def __init__(self, origin: Point3d, x_axis: Vector3d, y_axis: Vector3d):
        x = x_axis.unitize()
        y = y_axis.unitize()
        z = x.cross(y).unitize()
        y = z.cross(x).unitize()
        self.origin = origin.copy()
        self.x_axis = x
        self.y_axis = y
        self.z_axis = z

    def __repr__(self) -> str:
        return 'Plane({!r}, {!r}, {!r})'.format(self.origin, self.x_axis, self.y_axis)

    ## named planes through the origin (or a given point)

    @classmethod
    def plane_xy(cls, origin: Optional[Point3d] = None) -> 'Plane':
        return cls(Point3d.origin() if origin is None else origin, Vector3d.X_AXIS, Vector3d.Y_AXIS)

    @classmethod
    def plane_zx(cls, origin: Optional[Point3d] = None) -> 'Plane':
        return cls(Point3d.origin() if origin is None else origin, Vector3d.Z_AXIS, Vector3d.X_AXIS)

    @classmethod
    def plane_yz(cls, origin: Optional[Point3d] = None) -> 'Plane':
        return cls(Point3d.origin() if origin is None else origin, Vector3d.Y_AXIS, Vector3d.Z_AXIS)

    @classmethod
    def from_frame(cls, origin: Point3d, x_axis: Vector3d, y_axis: Vector3d) -> 'Plane':
        return cls(origin, x_axis, y_axis)

    @classmethod
    def from_normal(cls, origin: Point3d, normal: Vector3d) -> 'Plane':
        """plane through ``origin`` with an arbitrary but deterministic x axis"""
        z = normal.unitize()
        x = normal.perpendicular_vector()
        y = z.cross(x).unitize()
        return cls(origin, x, y)

    @classmethod
    def from_3_points(cls, a: Point3d, b: Point3d, c: Point3d) -> 'Plane':
        """plane through ``a`` with normal ``(b-a) × (c-a)``"""
        n = b.subtract_point(a).cross(c.subtract_point(a))
        if n.is_zero():
            raise ZeroLengthVectorError('from_3_points: points are collinear')
        return cls.from_normal(a, n)

    ## properties

    @property
    def normal(self) -> Vector3d:
        return self.z_axis

    @property
    def x_axis_line(self) -> Line:
        return Line(self.origin, self.origin.add(self.x_axis))

    @property
    def y_axis_line(self) -> Line:
        return Line(self.origin, self.origin.add(self.y_axis))

    @property
    def z_axis_line(self) -> Line:
        return Line(self.origin, self.origin.add(self.z_axis))

    def equation(self) -> Tuple[float, float, float, float]:
        """``(A, B, C, D)`` with ``Ax + By + Cz + D = 0`` on the plane"""
        n = self.normal
        return (n.x, n.y, n.z, -n.dot(self.origin))

    def frame(self):
        return (self.origin, self.x_axis, self.y_axis, self.z_axis)

    ## queries

    def point_at(self, u: float, v: float) -> Point3d:
        return self.origin.add(self.x_axis.multiply(u)).add(self.y_axis.multiply(v))

    def closest_parameter(self, point: Point3d) -> Tuple[float, float]:
        # separate projections onto each axis line; exact because the
        # axes are orthonormal
        u = self.x_axis_line.closest_parameter(point)
        v = self.y_axis_line.closest_parameter(point)
        return u, v

    def closest_point(self, point: Point3d) -> Point3d:
        return self.point_at(*self.closest_parameter(point))

    def distance_to(self, point: Point3d) -> float:
        """signed distance, negative below the plane"""
        d = point.distance_to(self.closest_point(point))
        if point.subtract_point(self.origin).dot(self.z_axis) < 0:
            return -d
        return d

    def is_point_coplanar(self, point: Point3d, tol: Optional[float] = None) -> bool:
        return self.closest_point(point).equals(point, tol)

    def is_line_coplanar(self, line: Line, tol: Optional[float] = None) -> bool:
        return (self.is_point_coplanar(line.from_point, tol) and
                self.is_point_coplanar(line.to_point, tol))

    ## derived planes

    def copy(self) -> 'Plane':
        return Plane(self.origin, self.x_axis, self.y_axis)

    def flip(self) -> 'Plane':
        """swap the in-plane axes, reversing the normal"""
        return Plane(self.origin, self.y_axis, self.x_axis)

    def transform(self, xf) -> 'Plane':
        return Plane(self.origin.transform(xf),
                     self.x_axis.transform(xf),
                     self.y_axis.transform(xf))


__all__ = ['Plane']
