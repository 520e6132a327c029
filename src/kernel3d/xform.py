## 4x4 affine transformation matrices for kernel3d

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

import logging
from math import cos, pi, sin

from kernel3d import tolerance
from kernel3d.errors import NonAffineTransformError, ZeroLengthVectorError
from kernel3d.vector import Point3d, Vector3d, vector_angle

logger = logging.getLogger(__name__)

## A transform is stored as a flat list of sixteen floats in row-major
## order, m[4*i+j] being row i, column j.  Transforms act on column
## vectors on the right, so A.multiply(B) means "apply B, then A".
## CombineTransforms([a, b, c]) applies a first and c last.

_IDENTITY = (1.0, 0.0, 0.0, 0.0,
             0.0, 1.0, 0.0, 0.0,
             0.0, 0.0, 1.0, 0.0,
             0.0, 0.0, 0.0, 1.0)


def _goodnum(x):
    return (not isinstance(x, bool)) and isinstance(x, (int, float))


class Transform:
    """4x4 transformation matrix for homogeneous 3D coordinates"""

    __slots__ = ('m',)

    def __init__(self, a=None):
        self.m = list(_IDENTITY)

        if a is None:
            return
        if isinstance(a, Transform):
            self.m = list(a.m)
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4
                                   for r in a):
                flat = [x for r in a for x in r]
            elif len(a) == 16:
                flat = list(a)
            else:
                raise ValueError('bad shape in transform initialization: {}'.format(a))
            for x in flat:
                if not _goodnum(x):
                    raise ValueError('bad element in transform initialization: {}'.format(x))
            self.m = [float(x) for x in flat]
        else:
            raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))

    def __repr__(self):
        return 'Transform({})'.format(self.m)

    def __str__(self):
        rows = []
        for i in range(4):
            rows.append('R{}=({})'.format(i, ', '.join(str(x) for x in self.getrow(i))))
        return ', '.join(rows)

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __mul__(self, x):
        return self.mul(x)

    ## element access

    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[4*i + j]

    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not _goodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        self.m[4*i + j] = float(x)

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return self.m[4*i:4*i + 4]

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[j], self.m[4 + j], self.m[8 + j], self.m[12 + j]]

    def to_list(self):
        return list(self.m)

    def copy(self):
        return Transform(self)

    ## comparison

    def equals(self, other, tol=None):
        """per-element epsilon equality"""
        return all(tolerance.epsilon_equals(a, b, tol)
                   for a, b in zip(self.m, other.m))

    def is_identity(self, tol=None):
        return self.equals(Identity(), tol)

    def is_zero_transformation(self, tol=None):
        return self.equals(ZeroTransformation(), tol)

    ## algebra

    def multiply(self, other):
        """matrix product ``self * other``"""
        a = self.m
        b = other.m
        r = [0.0]*16
        for i in range(4):
            a0, a1, a2, a3 = a[4*i:4*i + 4]
            for j in range(4):
                r[4*i + j] = a0*b[j] + a1*b[4 + j] + a2*b[8 + j] + a3*b[12 + j]
        return Transform(r)

    def multiply_scalar(self, s):
        return Transform([x*s for x in self.m])

    def mul(self, x):
        """Multiply by a transform, point, vector or scalar.

        Points receive the full affine map, vectors only the linear part.
        """
        if isinstance(x, Transform):
            return self.multiply(x)
        if isinstance(x, Point3d):
            return x.transform(self)
        if isinstance(x, Vector3d):
            return x.transform(self)
        if _goodnum(x):
            return self.multiply_scalar(x)
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def transpose(self):
        m = self.m
        return Transform([m[0], m[4], m[8], m[12],
                          m[1], m[5], m[9], m[13],
                          m[2], m[6], m[10], m[14],
                          m[3], m[7], m[11], m[15]])

    def _minor(self, row, col):
        ## determinant of the 3x3 submatrix with row and col removed
        m = self.m
        rs = [i for i in range(4) if i != row]
        cs = [j for j in range(4) if j != col]
        a, b, c = (m[4*rs[0] + j] for j in cs)
        d, e, f = (m[4*rs[1] + j] for j in cs)
        g, h, i = (m[4*rs[2] + j] for j in cs)
        return a*e*i + b*f*g + c*d*h - c*e*g - b*d*i - a*f*h

    def determinant(self):
        """cofactor expansion along the first row"""
        m = self.m
        return (m[0]*self._minor(0, 0) - m[1]*self._minor(0, 1) +
                m[2]*self._minor(0, 2) - m[3]*self._minor(0, 3))

    def try_get_inverse(self):
        """Return the adjugate inverse, or ``None`` for a singular matrix.

        Only an exactly zero determinant is treated as singular; a
        near-singular matrix yields a numerically poor inverse.
        """
        det = self.determinant()
        if det == 0:
            logger.debug('try_get_inverse: singular transform %s', self.m)
            return None
        inv = 1.0 / det
        r = [0.0]*16
        for i in range(4):
            for j in range(4):
                sign = -1.0 if (i + j) % 2 else 1.0
                r[4*i + j] = sign * self._minor(j, i) * inv
        return Transform(r)

    ## decomposition

    def scale_factor(self):
        """magnitudes of the rows of the upper-left 3x3 block"""
        m = self.m
        return Vector3d(Vector3d(m[0], m[1], m[2]).length,
                        Vector3d(m[4], m[5], m[6]).length,
                        Vector3d(m[8], m[9], m[10]).length)

    def scale_transform(self):
        s = self.scale_factor()
        return ScaleAtOrigin(s.x, s.y, s.z)

    def translation_vector(self):
        m = self.m
        return Vector3d(m[3], m[7], m[11])

    def translation_transform(self):
        return Translation(self.translation_vector())

    def base_vectors(self):
        """unitized rows of the linear block; raises on a singular matrix"""
        if self.determinant() == 0:
            raise NonAffineTransformError('base_vectors: non affine transformation')
        m = self.m
        return (Vector3d(m[0], m[1], m[2]).unitize(),
                Vector3d(m[4], m[5], m[6]).unitize(),
                Vector3d(m[8], m[9], m[10]).unitize())

    def base_transform(self):
        x, y, z = self.base_vectors()
        return Transform([x.x, x.y, x.z, 0,
                          y.x, y.y, y.z, 0,
                          z.x, z.y, z.z, 0,
                          0, 0, 0, 1])


## constructors

def Identity():
    return Transform()


def ZeroTransformation():
    """all zeros except the homogeneous corner"""
    return Transform([0, 0, 0, 0,
                      0, 0, 0, 0,
                      0, 0, 0, 0,
                      0, 0, 0, 1])


def CombineTransforms(transforms):
    """return the transform that applies ``transforms`` left to right"""
    result = Identity()
    for xf in reversed(list(transforms)):
        result = result.multiply(xf)
    return result


def Translation(v):
    return Transform([1, 0, 0, v.x,
                      0, 1, 0, v.y,
                      0, 0, 1, v.z,
                      0, 0, 0, 1])


def ScaleAtOrigin(sx, sy, sz):
    return Transform([sx, 0, 0, 0,
                      0, sy, 0, 0,
                      0, 0, sz, 0,
                      0, 0, 0, 1])


def Scale(center, factor):
    """uniform scale about ``center``"""
    v = Vector3d.from_point(center)
    return CombineTransforms([Translation(v.reverse()),
                              ScaleAtOrigin(factor, factor, factor),
                              Translation(v)])


def RotateAtOrigin(angle, axis):
    """Rodrigues rotation by ``angle`` radians about ``axis`` through the origin"""
    if axis.is_zero():
        raise ZeroLengthVectorError('rotation: axis is a zero-length vector')
    u = axis.unitize()
    c = cos(angle)
    s = sin(angle)
    t = 1.0 - c
    x, y, z = u.x, u.y, u.z
    tx = t*x
    ty = t*y
    return Transform([tx*x + c, tx*y - s*z, tx*z + s*y, 0,
                      tx*y + s*z, ty*y + c, ty*z - s*x, 0,
                      tx*z - s*y, ty*z + s*x, t*z*z + c, 0,
                      0, 0, 0, 1])


def Rotation(angle, axis=None, center=None):
    """rotation by ``angle`` radians about ``axis`` through ``center``"""
    if axis is None:
        axis = Vector3d.Z_AXIS
    if center is None:
        center = Point3d.origin()
    v = Vector3d.from_point(center)
    return CombineTransforms([Translation(v.reverse()),
                              RotateAtOrigin(angle, axis),
                              Translation(v)])


def RotationX(angle):
    return Rotation(angle, Vector3d.X_AXIS)


def RotationY(angle):
    return Rotation(angle, Vector3d.Y_AXIS)


def RotationZ(angle):
    return Rotation(angle, Vector3d.Z_AXIS)


def RotationZYX(yaw, pitch, roll):
    """roll about X, then pitch about Y, then yaw about Z"""
    return CombineTransforms([RotationX(roll), RotationY(pitch), RotationZ(yaw)])


def VectorToVector(from_vec, to_vec):
    """Rotation about the origin taking the direction of ``from_vec`` to
    that of ``to_vec``.

    Parallel inputs give the identity; anti-parallel inputs give a half
    turn about an axis perpendicular to ``from_vec``.
    """
    if from_vec.is_zero() or to_vec.is_zero():
        raise ZeroLengthVectorError('vector_to_vector: operand has zero length')
    axis = to_vec.cross(from_vec)
    if axis.is_zero():
        ## exactly or nearly collinear
        if from_vec.dot(to_vec) > 0:
            return Identity()
        return RotateAtOrigin(pi, from_vec.perpendicular_vector())
    return RotateAtOrigin(-vector_angle(from_vec, to_vec), axis)


def PlanarProjection(plane):
    """orthogonal projection onto ``plane``; points on the plane are fixed"""
    x = plane.x_axis
    y = plane.y_axis
    p = plane.origin
    xs = (x.x, x.y, x.z)
    ys = (y.x, y.y, y.z)
    ps = (p.x, p.y, p.z)
    n = [[xs[i]*xs[j] + ys[i]*ys[j] for j in range(3)] for i in range(3)]
    t = [ps[i] - (n[i][0]*ps[0] + n[i][1]*ps[1] + n[i][2]*ps[2])
         for i in range(3)]
    return Transform([n[0][0], n[0][1], n[0][2], t[0],
                      n[1][0], n[1][1], n[1][2], t[1],
                      n[2][0], n[2][1], n[2][2], t[2],
                      0, 0, 0, 1])


def Mirror(plane):
    """reflection through ``plane``"""
    a, b, c, d = plane.equation()
    v = Vector3d(a, b, c).multiply(-2.0*d)
    return Transform([1 - 2*a*a, -2*a*b, -2*a*c, v.x,
                      -2*b*a, 1 - 2*b*b, -2*b*c, v.y,
                      -2*c*a, -2*c*b, 1 - 2*c*c, v.z,
                      0, 0, 0, 1])


def WorldXYToFrame(origin, x_axis, y_axis, z_axis):
    """map the world frame onto the given frame; axes become columns"""
    return Transform([x_axis.x, y_axis.x, z_axis.x, origin.x,
                      x_axis.y, y_axis.y, z_axis.y, origin.y,
                      x_axis.z, y_axis.z, z_axis.z, origin.z,
                      0, 0, 0, 1])


def FrameToFramePoint(frame1, frame2, point):
    """Express ``point`` in ``frame1`` and rebuild it in ``frame2``.

    Frames are ``(origin, x_axis, y_axis, z_axis)`` tuples.
    """
    o1, x1, y1, z1 = frame1
    o2, x2, y2, z2 = frame2
    loc = point.subtract_point(o1)
    return (o2.add(x2.multiply(loc.dot(x1)))
              .add(y2.multiply(loc.dot(y1)))
              .add(z2.multiply(loc.dot(z1))))


def FrameToFrame(frame1, frame2):
    """transform carrying ``frame1`` onto ``frame2``"""
    o = FrameToFramePoint(frame1, frame2, Point3d(0, 0, 0))
    x = FrameToFramePoint(frame1, frame2, Point3d(1, 0, 0))
    y = FrameToFramePoint(frame1, frame2, Point3d(0, 1, 0))
    z = FrameToFramePoint(frame1, frame2, Point3d(0, 0, 1))
    return WorldXYToFrame(o, x.subtract_point(o), y.subtract_point(o),
                          z.subtract_point(o))


def PlaneToPlane(from_plane, to_plane):
    """orient geometry from ``from_plane`` to ``to_plane``"""
    return FrameToFrame(from_plane.frame(), to_plane.frame())


__all__ = [
    'Transform', 'Identity', 'ZeroTransformation', 'CombineTransforms',
    'Translation', 'Scale', 'ScaleAtOrigin', 'Rotation', 'RotateAtOrigin',
    'RotationX', 'RotationY', 'RotationZ', 'RotationZYX', 'VectorToVector',
    'PlanarProjection', 'Mirror', 'WorldXYToFrame', 'FrameToFramePoint',
    'FrameToFrame', 'PlaneToPlane',
]
