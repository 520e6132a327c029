## intersection solvers for lines and planes in kernel3d

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

"""Closed-form intersection of lines and planes.

Every solver returns ``None`` when the inputs have no unique answer
(parallel lines, a line parallel to a plane, parallel planes, or a
degenerate plane triple).  A line lying in a plane is reported as no
intersection rather than infinitely many.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import inf
from typing import Optional, Tuple

from kernel3d import tolerance
from kernel3d.line import Line
from kernel3d.plane import Plane
from kernel3d.vector import ParallelIndicator, Point3d

logger = logging.getLogger(__name__)


@dataclass
class IntersectionEvent:
    """Closest approach between two lines.

    ``parameter_a``/``point_a`` lie on the first line and
    ``parameter_b``/``point_b`` on the second; the points coincide only
    when the lines actually meet.
    """

    parameter_a: float
    parameter_b: float
    point_a: Point3d
    point_b: Point3d

    @property
    def separation(self) -> float:
        return self.point_a.distance_to(self.point_b)


def line_line_t_parameters(line1: Line, line2: Line,
                           tol: Optional[float] = None) -> Optional[Tuple[float, float]]:
    """Return the closest-approach parameters ``(mua, mub)`` of two lines.

    Uses the Bourke formulation; ``None`` when the lines are parallel.
    """
    p13 = line1.from_point.subtract_point(line2.from_point)
    p43 = line2.direction
    p21 = line1.direction

    d1343 = p13.dot(p43)
    d4321 = p43.dot(p21)
    d1321 = p13.dot(p21)
    d4343 = p43.dot(p43)
    d2121 = p21.dot(p21)

    denom = d2121*d4343 - d4321*d4321
    if tolerance.is_zero(denom, tol):
        return None
    numer = d1343*d4321 - d1321*d4343

    mua = numer / denom
    mub = (d1343 + d4321*mua) / d4343
    return mua, mub


def crossing_line_line(line1: Line, line2: Line, limit: bool = False,
                       distance: float = inf) -> Optional[IntersectionEvent]:
    """Closest approach of two lines as an :class:`IntersectionEvent`.

    ``None`` when either line is degenerate, the lines are parallel,
    ``limit`` is set and a parameter falls outside ``[0, 1]``, or the
    closest points are more than ``distance`` apart.
    """
    if not line1.is_valid() or not line2.is_valid():
        return None
    params = line_line_t_parameters(line1, line2)
    if params is None:
        logger.debug('crossing_line_line: parallel lines %r, %r', line1, line2)
        return None
    mua, mub = params

    if limit and (mua < 0 or mua > 1 or mub < 0 or mub > 1):
        return None

    pa = line1.point_at(mua)
    pb = line2.point_at(mub)
    if pa.distance_to(pb) > distance:
        return None
    return IntersectionEvent(mua, mub, pa, pb)


def line_line(line1: Line, line2: Line, limit: bool = False,
              tol: Optional[float] = None) -> Optional[Point3d]:
    """Intersection point of two lines.

    The lines must pass within ``tol`` of each other; the midpoint of the
    two closest points is returned.
    """
    event = crossing_line_line(line1, line2, limit, tolerance.eps(tol))
    if event is None:
        return None
    return event.point_a.add_point(event.point_b).multiply(0.5)


def line_plane(line: Line, plane: Plane, limit: bool = False,
               tol: Optional[float] = None) -> Optional[Point3d]:
    """Point where ``line`` crosses ``plane``.

    With ``limit`` the point must lie between the line's end points.
    """
    n = plane.normal
    u = line.unit_direction
    along = u.dot(n)
    if tolerance.is_zero(along, tol):
        logger.debug('line_plane: line %r parallel to plane', line)
        return None

    t = -line.from_point.subtract_point(plane.origin).dot(n) / along
    if limit and (t < 0 or t > line.length):
        return None
    return line.from_point.add(u.multiply(t))


def plane_plane(a: Plane, b: Plane, angle_tol: Optional[float] = None) -> Optional[Line]:
    """Line of intersection of two planes, or ``None`` if they are parallel.

    The line passes through the point shared with a helper plane placed
    midway between the two origins, and is directed along ``b.normal ×
    a.normal``.
    """
    if a.normal.is_parallel_to(b.normal, angle_tol) != ParallelIndicator.NOT_PARALLEL:
        logger.debug('plane_plane: parallel planes')
        return None

    normal = b.normal.cross(a.normal)
    mid = a.origin.add_point(b.origin).multiply(0.5)
    helper = Plane.from_normal(mid, normal)

    pt = plane_plane_plane(a, b, helper)
    if pt is None:
        return None
    return Line(pt, pt.add(helper.normal))


def plane_plane_plane(a: Plane, b: Plane, c: Plane,
                      tol: Optional[float] = None) -> Optional[Point3d]:
    """Unique point common to three planes, solved with a 3x3 adjugate."""
    ea = a.equation()
    eb = b.equation()
    ec = c.equation()
    a11, a12, a13 = ea[:3]
    a21, a22, a23 = eb[:3]
    a31, a32, a33 = ec[:3]
    b1, b2, b3 = -ea[3], -eb[3], -ec[3]

    det = (a11*(a22*a33 - a23*a32) -
           a12*(a21*a33 - a23*a31) +
           a13*(a21*a32 - a22*a31))
    if tolerance.is_zero(det, tol):
        logger.debug('plane_plane_plane: singular system, det=%g', det)
        return None
    inv = 1.0 / det

    v11 = inv*(a22*a33 - a23*a32)
    v12 = inv*(a13*a32 - a12*a33)
    v13 = inv*(a12*a23 - a13*a22)
    v21 = inv*(a23*a31 - a21*a33)
    v22 = inv*(a11*a33 - a13*a31)
    v23 = inv*(a13*a21 - a11*a23)
    v31 = inv*(a21*a32 - a22*a31)
    v32 = inv*(a12*a31 - a11*a32)
    v33 = inv*(a11*a22 - a12*a21)

    return Point3d(v11*b1 + v12*b2 + v13*b3,
                   v21*b1 + v22*b2 + v23*b3,
                   v31*b1 + v32*b2 + v33*b3)


__all__ = [
    'IntersectionEvent',
    'line_line_t_parameters',
    'crossing_line_line',
    'line_line',
    'line_plane',
    'plane_plane',
    'plane_plane_plane',
]
