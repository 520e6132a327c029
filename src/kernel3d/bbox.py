## axis-aligned bounding boxes for kernel3d

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

from math import inf

from kernel3d import tolerance
from kernel3d.vector import Point3d

## A box is valid when min <= max on every axis.  The empty box,
## min=(1,0,0) max=(-1,0,0), is invalid; union and
## intersection skip invalid operands instead of computing through them.
##
## The corner order used by corners() is
##
##        7-------6
##       /|      /|
##      4-------5 |          z
##      | 3-----|-2          | y
##      |/      |/           |/
##      0-------1            +---x


class BoundingBox:
    """axis-aligned box given by its ``min`` and ``max`` corners"""

    __slots__ = ('min', 'max')

    def __init__(self, min_pt, max_pt):
        self.min = min_pt.copy()
        self.max = max_pt.copy()

    @classmethod
    def empty(cls):
        return cls.from_min_max(1, 0, 0, -1, 0, 0)

    @classmethod
    def from_min_max(cls, min_x, min_y, min_z, max_x, max_y, max_z):
        return cls(Point3d(min_x, min_y, min_z), Point3d(max_x, max_y, max_z))

    @classmethod
    def from_points(cls, points):
        """tightest box around ``points``; no points gives the empty box"""
        lo = [inf, inf, inf]
        hi = [-inf, -inf, -inf]
        count = 0
        for p in points:
            count += 1
            for i, c in enumerate((p.x, p.y, p.z)):
                if c < lo[i]:
                    lo[i] = c
                if c > hi[i]:
                    hi[i] = c
        if count == 0:
            return cls.empty()
        return cls.from_min_max(*lo, *hi)

    def __repr__(self):
        return 'BoundingBox({!r}, {!r})'.format(self.min, self.max)

    def __str__(self):
        return '{} - {}'.format(self.min, self.max)

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    ## properties

    @property
    def is_valid(self):
        return (self.min.x <= self.max.x and
                self.min.y <= self.max.y and
                self.min.z <= self.max.z)

    @property
    def area(self):
        """surface area"""
        if not self.is_valid:
            return 0.0
        dx, dy, dz = self._extent()
        return 2.0*(dx*dy + dy*dz + dz*dx)

    @property
    def volume(self):
        if not self.is_valid:
            return 0.0
        dx, dy, dz = self._extent()
        return dx*dy*dz

    @property
    def center(self):
        return Point3d.interpolate(self.min, self.max, 0.5)

    @property
    def diagonal(self):
        return self.max.subtract_point(self.min)

    def _extent(self):
        return (abs(self.max.x - self.min.x),
                abs(self.max.y - self.min.y),
                abs(self.max.z - self.min.z))

    def is_degenerate(self, tol=None):
        """number of flat axes (0 to 3), or 4 for an invalid box"""
        if not self.is_valid:
            return 4
        return sum(1 for a, b in zip(self.min, self.max)
                   if tolerance.epsilon_equals(a, b, tol))

    ## mutation

    def make_valid(self):
        """swap any inverted coordinates in place and return the box"""
        lo = list(self.min)
        hi = list(self.max)
        for i in range(3):
            if lo[i] > hi[i]:
                lo[i], hi[i] = hi[i], lo[i]
        self.min = Point3d(*lo)
        self.max = Point3d(*hi)
        return self

    ## queries

    def copy(self):
        return BoundingBox(self.min, self.max)

    def equals(self, other, tol=None):
        return self.min.equals(other.min, tol) and self.max.equals(other.max, tol)

    def point_at(self, tx, ty, tz):
        """point at normalized box coordinates"""
        return Point3d(self.min.x + (self.max.x - self.min.x)*tx,
                       self.min.y + (self.max.y - self.min.y)*ty,
                       self.min.z + (self.max.z - self.min.z)*tz)

    def corners(self):
        lo = self.min
        hi = self.max
        return [Point3d(lo.x, lo.y, lo.z),
                Point3d(hi.x, lo.y, lo.z),
                Point3d(hi.x, hi.y, lo.z),
                Point3d(lo.x, hi.y, lo.z),
                Point3d(lo.x, lo.y, hi.z),
                Point3d(hi.x, lo.y, hi.z),
                Point3d(hi.x, hi.y, hi.z),
                Point3d(lo.x, hi.y, hi.z)]

    def corner(self, min_x, min_y, min_z):
        return Point3d(self.min.x if min_x else self.max.x,
                       self.min.y if min_y else self.max.y,
                       self.min.z if min_z else self.max.z)

    def closest_point(self, point, include_interior=True):
        """Closest point of the box to ``point``.

        Coordinates are clamped into the box.  With
        ``include_interior=False`` an interior point is moved onto the
        nearest face; only that one coordinate changes, and ties go to the
        first face in the order min x, max x, min y, max y, min z, max z.
        """
        x = tolerance.clamp(point.x, self.min.x, self.max.x)
        y = tolerance.clamp(point.y, self.min.y, self.max.y)
        z = tolerance.clamp(point.z, self.min.z, self.max.z)

        if not include_interior:
            gaps = [x - self.min.x, self.max.x - x,
                    y - self.min.y, self.max.y - y,
                    z - self.min.z, self.max.z - z]
            face = gaps.index(min(gaps))
            if face == 0:
                x = self.min.x
            elif face == 1:
                x = self.max.x
            elif face == 2:
                y = self.min.y
            elif face == 3:
                y = self.max.y
            elif face == 4:
                z = self.min.z
            else:
                z = self.max.z

        return Point3d(x, y, z)

    def furthest_point(self, point):
        """corner of the box furthest from ``point``"""
        c = self.center
        return Point3d(self.max.x if point.x < c.x else self.min.x,
                       self.max.y if point.y < c.y else self.min.y,
                       self.max.z if point.z < c.z else self.min.z)

    def contains_point(self, point, strict=False):
        """containment test; ``strict`` excludes the boundary"""
        lo = self.min
        hi = self.max
        if strict:
            return (lo.x < point.x < hi.x and
                    lo.y < point.y < hi.y and
                    lo.z < point.z < hi.z)
        return (lo.x <= point.x <= hi.x and
                lo.y <= point.y <= hi.y and
                lo.z <= point.z <= hi.z)

    def contains_box(self, other, strict=False):
        return all(self.contains_point(c, strict) for c in other.corners())

    ## derived boxes

    def inflate(self, dx, dy, dz):
        """grow outward per axis; an invalid box is returned unchanged"""
        if not self.is_valid:
            return self.copy()
        return BoundingBox.from_min_max(self.min.x - dx, self.min.y - dy, self.min.z - dz,
                                        self.max.x + dx, self.max.y + dy, self.max.z + dz)

    def inflate_equal(self, amount):
        return self.inflate(amount, amount, amount)

    def transform(self, xf):
        """axis-aligned box around the eight transformed corners"""
        return BoundingBox.from_points(c.transform(xf) for c in self.corners())

    def union(self, other):
        return union(self, other)

    def intersect(self, other):
        return intersect(self, other)


def _combine(a, b, lo_fn, hi_fn):
    if not a.is_valid and not b.is_valid:
        return BoundingBox.empty()
    if not a.is_valid:
        return b.copy()
    if not b.is_valid:
        return a.copy()
    return BoundingBox.from_min_max(lo_fn(a.min.x, b.min.x),
                                    lo_fn(a.min.y, b.min.y),
                                    lo_fn(a.min.z, b.min.z),
                                    hi_fn(a.max.x, b.max.x),
                                    hi_fn(a.max.y, b.max.y),
                                    hi_fn(a.max.z, b.max.z))


def union(a, b):
    """smallest box enclosing both; invalid operands are ignored"""
    return _combine(a, b, min, max)


def intersect(a, b):
    """Overlap of two boxes; invalid operands are ignored.

    Disjoint valid boxes produce an invalid result.
    """
    return _combine(a, b, max, min)


__all__ = ['BoundingBox', 'union', 'intersect']
