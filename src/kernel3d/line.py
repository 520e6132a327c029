## directed line segments for kernel3d

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

"""Line segments defined by two points.

A :class:`Line` is always stored as a finite directed segment from
``from_point`` to ``to_point``.  Queries that can treat it as an infinite
line take a ``limit`` flag; with ``limit=True`` parameters are confined to
the segment's ``[0, 1]`` range.

``from_point`` and ``to_point`` are plain attributes and may be reassigned;
doing so changes :attr:`direction`, :attr:`length` and every query result.
"""

from kernel3d import tolerance
from kernel3d.errors import InvalidLineError
from kernel3d.vector import Point3d


class Line:

    __slots__ = ('from_point', 'to_point')

    def __init__(self, from_point, to_point):
        self.from_point = from_point.copy()
        self.to_point = to_point.copy()

    @classmethod
    def from_origin_and_direction(cls, origin, direction, length=None):
        """line from ``origin`` along ``direction``; with ``length`` the
        direction is unitized and scaled to that length"""
        if length is not None:
            direction = direction.unitize().multiply(length)
        return cls(origin, origin.add(direction))

    def __repr__(self):
        return 'Line({!r}, {!r})'.format(self.from_point, self.to_point)

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    ## properties

    def is_valid(self, tol=None):
        """a line is valid when its end points differ"""
        return not self.from_point.equals(self.to_point, tol)

    @property
    def direction(self):
        if not self.is_valid():
            raise InvalidLineError('direction: line end points coincide')
        return self.to_point.subtract_point(self.from_point)

    @property
    def unit_direction(self):
        return self.direction.unitize()

    @property
    def length(self):
        return self.to_point.distance_to(self.from_point)

    @length.setter
    def length(self, value):
        ## keeps from_point fixed; a negative value flips the direction
        d = self.unit_direction
        if value < 0:
            d = d.reverse()
        self.to_point = self.from_point.add(d.multiply(abs(value)))

    @property
    def bounding_box(self):
        from kernel3d.bbox import BoundingBox
        if not self.is_valid():
            return BoundingBox.empty()
        return BoundingBox(self.from_point, self.to_point).make_valid()

    ## evaluation

    def copy(self):
        return Line(self.from_point, self.to_point)

    def point_at(self, t):
        """``from_point + t*direction``"""
        return self.direction.multiply(t).add_to_point(self.from_point)

    def point_at_length(self, d):
        """point at distance ``d`` from ``from_point``; a degenerate line
        returns ``from_point``"""
        if not self.is_valid():
            return self.from_point.copy()
        return self.unit_direction.multiply(d).add_to_point(self.from_point)

    def closest_parameter(self, point, limit=False):
        if not self.is_valid():
            raise InvalidLineError('closest_parameter: line end points coincide')
        se = self.to_point.subtract_point(self.from_point)
        sp = point.subtract_point(self.from_point)
        t = se.dot(sp) / se.dot(se)
        if limit:
            t = tolerance.clamp(t, 0.0, 1.0)
        return t

    def closest_point(self, point, limit=False):
        return self.point_at(self.closest_parameter(point, limit))

    def equals(self, other, tol=None):
        return (self.from_point.equals(other.from_point, tol) and
                self.to_point.equals(other.to_point, tol))

    def is_point_on(self, point, limit=False, tol=None):
        return self.distance_to_point(point, limit) <= tolerance.eps(tol)

    ## distances

    def distance_to_point(self, point, limit=False):
        return point.distance_to(self.closest_point(point, limit))

    def distance_to_line(self, other, limit=False):
        """Shortest distance between two lines.

        Parallel lines, and segments whose closest approach falls outside
        either segment when ``limit`` is set, fall back to end point
        distances.
        """
        from kernel3d.intersection import crossing_line_line
        event = crossing_line_line(self, other, limit)
        if event is not None:
            return event.point_a.distance_to(event.point_b)
        if limit:
            return min(other.distance_to_point(self.from_point, True),
                       other.distance_to_point(self.to_point, True),
                       self.distance_to_point(other.from_point, True),
                       self.distance_to_point(other.to_point, True))
        return self.distance_to_point(other.from_point)

    def distance_to_plane(self, plane, limit=False):
        """zero for a crossing line, else the unsigned end point distance"""
        from kernel3d.intersection import line_plane
        if line_plane(self, plane, limit) is not None:
            return 0.0
        if limit:
            return min(abs(plane.distance_to(self.from_point)),
                       abs(plane.distance_to(self.to_point)))
        return abs(plane.distance_to(self.from_point))

    def closest_points(self, other, limit=False):
        """closest-approach point pair, or ``None`` for parallel lines"""
        from kernel3d.intersection import crossing_line_line
        event = crossing_line_line(self, other, limit)
        if event is None:
            return None
        return event.point_a, event.point_b

    ## derived lines

    def extend(self, start_length, end_length):
        """move ``from_point`` back by ``start_length`` and ``to_point``
        forward by ``end_length``"""
        d = self.unit_direction
        return Line(d.multiply(-start_length).add_to_point(self.from_point),
                    d.multiply(end_length).add_to_point(self.to_point))

    def flip(self):
        return Line(self.to_point, self.from_point)

    def transform(self, xf):
        return Line(self.from_point.transform(xf), self.to_point.transform(xf))


__all__ = ['Line']
