## polylines for kernel3d

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

"""
==============================
Polylines for kernel3d
==============================

A Polyline is an ordered list of points joined by straight segments.
Points are held in an ordinary Python list owned by the polyline; the
usual sequence operations (len, iteration, indexing, append, extend)
are forwarded to it.

A polyline parameter ``t`` has the segment index as its integer part
and the position within that segment as its fractional part, so the
polyline's domain is ``[0, len-1]``.  Parameters outside the domain
clamp to the nearest end point.

A polyline is closed when it has more than two points and its first and
last points coincide.  Closed, planar polylines support area and
point-in-polygon queries, both evaluated after re-orienting the
polyline onto the world XY plane.
"""

import logging
from math import floor, inf

from kernel3d import tolerance
from kernel3d.bbox import BoundingBox
from kernel3d.errors import NotClosedError, NotPlanarError
from kernel3d.interval import Interval
from kernel3d.line import Line
from kernel3d.plane import Plane
from kernel3d.vector import Point3d, Vector3d
from kernel3d.xform import PlaneToPlane

logger = logging.getLogger(__name__)


class Polyline:
    """ordered sequence of points joined by line segments"""

    def __init__(self, points=None):
        self._points = [p.copy() for p in points] if points else []

    @classmethod
    def from_points(cls, points):
        return cls(points)

    def __repr__(self):
        return 'Polyline({})'.format(self._points)

    ## sequence protocol

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __getitem__(self, i):
        return self._points[i]

    def __setitem__(self, i, p):
        self._points[i] = p

    def append(self, p):
        self._points.append(p)

    def extend(self, points):
        self._points.extend(points)

    @property
    def first(self):
        return self._points[0]

    @property
    def last(self):
        return self._points[-1]

    def copy(self):
        return Polyline(self._points)

    ## properties

    @property
    def count(self):
        return len(self._points)

    @property
    def segment_count(self):
        return max(0, self.count - 1)

    @property
    def domain(self):
        return Interval(0.0, float(self.segment_count))

    def is_closed(self, tol=None):
        return self.count > 2 and self.first.equals(self.last, tol)

    def is_closed_within_tolerance(self, tol):
        if self.count <= 2:
            return False
        return self.first.distance_to(self.last) <= tol

    def is_valid(self, tol=None):
        """at least one segment, no zero-length segments, and a closed
        polyline needs at least three distinct corners"""
        if self.count < 2:
            return False
        pts = self._points
        for i in range(1, self.count):
            if pts[i].equals(pts[i - 1], tol):
                return False
        if self.count < 4 and self.is_closed(tol):
            return False
        return True

    @property
    def length(self):
        pts = self._points
        return sum(pts[i].distance_to(pts[i + 1]) for i in range(self.count - 1))

    @property
    def center_point(self):
        """segment midpoints averaged with segment length as weight"""
        if self.count == 0:
            return Point3d.origin()
        if self.count == 1:
            return self.first.copy()
        center = Point3d.origin()
        weight = 0.0
        pts = self._points
        for i in range(self.count - 1):
            a = pts[i]
            b = pts[i + 1]
            d = a.distance_to(b)
            center = center.add_point(a.add_point(b).multiply(0.5*d))
            weight += d
        if weight == 0:
            return self.first.copy()
        return center.divide(weight)

    @property
    def bounding_box(self):
        return BoundingBox.from_points(self._points)

    ## evaluation

    def point_at(self, t):
        count = self.count
        if count < 1:
            return Point3d.origin()
        if count == 1:
            return self.first.copy()
        idx = floor(t)
        if idx < 0:
            return self._points[0].copy()
        if idx >= count - 1:
            return self._points[-1].copy()
        t -= idx
        a = self._points[idx]
        b = self._points[idx + 1]
        if t <= 0.0:
            return a.copy()
        if t >= 1.0:
            return b.copy()
        s = 1.0 - t
        return Point3d(s*a.x + t*b.x, s*a.y + t*b.y, s*a.z + t*b.z)

    def segment_at(self, index):
        """segment ``floor(index)``, or ``None`` outside the polyline"""
        if index < 0 or index >= self.count - 1:
            return None
        i = floor(index)
        return Line(self._points[i], self._points[i + 1])

    def segments(self):
        pts = self._points
        return [Line(pts[i], pts[i + 1]) for i in range(self.count - 1)]

    def tangent_at(self, t):
        """unit direction of the segment holding ``t``"""
        if self.count < 2:
            return Vector3d.ZERO
        i = int(tolerance.clamp(floor(t), 0, self.count - 2))
        return self._points[i + 1].subtract_point(self._points[i]).unitize()

    def trim(self, t0, t1):
        """sub-polyline between parameters ``t0`` and ``t1``"""
        n = self.count - 1
        si0 = floor(t0)
        si1 = floor(t1)
        st0 = t0 - si0
        st1 = t1 - si1
        if st0 < 0.0:
            st0 = 0.0
        if st0 >= 1.0:
            si0 += 1
            st0 = 0.0
        if st1 < 0.0:
            st1 = 0.0
        if st1 >= 1.0:
            si1 += 1
            st1 = 0.0

        if si0 < 0:
            si0, st0 = 0, 0.0
        if si0 >= n:
            si0, st0 = n, 0.0
        if si1 < 0:
            si1, st1 = 0, 0.0
        if si1 >= n:
            si1, st1 = n, 0.0

        out = Polyline([self.point_at(t0)])
        for i in range(si0 + 1, si1 + 1):
            out.append(self._points[i].copy())
        if st1 > 0.0:
            out.append(self.point_at(t1))
        return out

    ## proximity

    def closest_parameter(self, point):
        """Parameter of the point on the polyline closest to ``point``.

        Every segment is scanned; the first segment reaching the minimum
        distance wins.  A zero-length segment is treated as its start point.
        """
        if self.count < 2:
            return 0.0
        best_seg = 0
        best_t = 0.0
        best_d = inf
        pts = self._points
        for i in range(self.count - 1):
            a = pts[i]
            b = pts[i + 1]
            if not Line(a, b).is_valid():
                t = 0.0
                d = a.distance_to(point)
            else:
                seg = Line(a, b)
                t = seg.closest_parameter(point, True)
                d = seg.point_at(t).distance_to(point)
            if d < best_d:
                best_d = d
                best_t = t
                best_seg = i
        return best_seg + best_t

    def closest_point(self, point):
        return self.point_at(self.closest_parameter(point))

    def is_point_on(self, point, tol=None):
        """true when ``point`` lies on any segment; degenerate segments
        are tested as their start point"""
        tol = tolerance.eps(tol)
        for seg in self.segments():
            if seg.is_valid():
                if seg.is_point_on(point, True, tol):
                    return True
            elif seg.from_point.distance_to(point) <= tol:
                return True
        return False

    ## clean-up

    def delete_short_segments(self, tol=None):
        """Drop points closer than ``tol`` to their kept predecessor.

        The first and last points always survive.  A forward pass drops
        points too close to the previously kept point; a backward pass
        then drops kept points too close to the final point, stopping at
        the first one that is far enough away.
        """
        tol = tolerance.eps(tol)
        count = self.count
        if count < 3:
            return self.copy()
        pts = self._points
        keep = [True] * count

        j = 0
        for i in range(1, count - 1):
            if pts[i].distance_to(pts[j]) <= tol:
                keep[i] = False
            else:
                j = i

        for i in range(count - 2, 0, -1):
            if keep[i]:
                if pts[i].distance_to(pts[-1]) <= tol:
                    keep[i] = False
                else:
                    break

        return Polyline([p for p, k in zip(pts, keep) if k])

    def smooth(self, amount):
        """Move each vertex ``amount/2`` of the way towards the midpoint of
        its neighbours.

        End points move only on a closed polyline.  Returns ``None`` for
        fewer than three points.
        """
        count = self.count
        if count < 3:
            logger.debug('smooth: %d points is too few to smooth', count)
            return None
        n = count - 1
        amount *= 0.5
        pts = self._points
        v = [None] * count
        if self.is_closed():
            v[0] = _smooth_vertex(pts[n - 1], pts[0], pts[1], amount)
            v[n] = v[0].copy()
        else:
            v[0] = pts[0].copy()
            v[n] = pts[n].copy()
        for i in range(1, n):
            v[i] = _smooth_vertex(pts[i - 1], pts[i], pts[i + 1], amount)
        return Polyline(v)

    ## planarity and area

    def try_get_plane(self, tol=None):
        """Plane through the first three points if every point lies on it.

        Planarity is judged from the first three points only, so a planar
        polyline whose first three points are collinear yields ``None``.
        """
        if self.count < 3:
            return None
        a, b, c = self._points[:3]
        if b.subtract_point(a).cross(c.subtract_point(a)).is_zero():
            logger.debug('try_get_plane: first three points are collinear')
            return None
        plane = Plane.from_3_points(a, b, c)
        for p in self._points[3:]:
            if not plane.is_point_coplanar(p, tol):
                logger.debug('try_get_plane: %r is off plane', p)
                return None
        return plane

    def is_planar(self, tol=None):
        return self.try_get_plane(tol) is not None

    def try_get_area(self, tol=None):
        """enclosed area of a closed planar polyline, else ``None``; see
        ``try_get_plane`` for how planarity is decided"""
        if not self.is_closed():
            return None
        plane = self.try_get_plane(tol)
        if plane is None:
            return None
        flat = self.transform(PlaneToPlane(plane, Plane.plane_xy()))
        return abs(_signed_area_xy(flat))

    def is_point_inside(self, point, tol=None):
        """Even-odd point-in-polygon test.

        The polyline must be closed and planar.  Planarity follows
        ``try_get_plane``.  Points on the boundary or
        off the polyline's plane are outside.
        """
        if not self.is_closed():
            raise NotClosedError('is_point_inside: polyline is not closed')
        plane = self.try_get_plane(tol)
        if plane is None:
            raise NotPlanarError('is_point_inside: polyline is not planar')
        if self.is_point_on(point, tol):
            return False
        if not plane.is_point_coplanar(point, tol):
            return False
        orient = PlaneToPlane(plane, Plane.plane_xy())
        return _inside_xy(self.transform(orient), point.transform(orient))

    def transform(self, xf):
        return Polyline([p.transform(xf) for p in self._points])


def _smooth_vertex(v0, v1, v2, amount):
    mid = Point3d.interpolate(v0, v2, 0.5)
    return Point3d(v1.x + amount*(mid.x - v1.x),
                   v1.y + amount*(mid.y - v1.y),
                   v1.z + amount*(mid.z - v1.z))


def _signed_area_xy(pl):
    ## shoelace over the XY coordinates
    pts = list(pl)
    count = len(pts)
    area = 0.0
    for i in range(count):
        p1 = pts[i]
        p2 = pts[(i + 1) % count]
        area += p1.x*p2.y - p2.x*p1.y
    return 0.5*area


def _inside_xy(pl, p):
    ## cast a ray towards +x and count edge crossings
    pts = list(pl)
    inside = False
    j = len(pts) - 1
    for i in range(len(pts)):
        a = pts[i]
        b = pts[j]
        if (a.y > p.y) != (b.y > p.y):
            x = (b.x - a.x)*(p.y - a.y)/(b.y - a.y) + a.x
            if p.x < x:
                inside = not inside
        j = i
    return inside


__all__ = ['Polyline']
