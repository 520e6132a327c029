import logging
import math

import numpy as np
import pytest

from kernel3d.errors import NonAffineTransformError, ZeroLengthVectorError
from kernel3d.plane import Plane
from kernel3d.vector import Point3d, Vector3d
from kernel3d.xform import *

## unit tests for kernel3d xform.py

T1 = [5, 7, 9, 10, 2, 3, 3, 8, 8, 10, 2, 3, 3, 3, 4, 8]
T2 = [3, 10, 12, 18, 12, 1, 4, 9, 9, 10, 12, 2, 3, 12, 4, 10]
T3 = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16]


def _np(xf):
    return np.array(xf.to_list()).reshape(4, 4)


class TestTransform:
    """unit tests for kernel3d Transform construction and algebra"""

    def test_construction(self):
        assert Transform().is_identity()
        assert Transform(T1).to_list() == [float(x) for x in T1]
        nested = [T1[0:4], T1[4:8], T1[8:12], T1[12:16]]
        assert Transform(nested) == Transform(T1)
        t = Transform(T1)
        c = Transform(t)
        c.set(0, 0, 99)
        assert t.get(0, 0) == 5

    @pytest.mark.parametrize('bad', [
        [1, 2, 3],
        [[1, 2], [3, 4]],
        T1[:15] + ['x'],
        T1[:15] + [True],
        'abcd',
    ])
    def test_bad_construction(self, bad):
        with pytest.raises(ValueError):
            Transform(bad)

    def test_access(self):
        t = Transform(T1)
        assert t.getrow(1) == [2, 3, 3, 8]
        assert t.getcol(3) == [10, 8, 3, 8]
        with pytest.raises(ValueError):
            t.get(4, 0)
        with pytest.raises(ValueError):
            t.set(0, 0, 'x')
        assert 'R0=(5.0, 7.0, 9.0, 10.0)' in str(t)

    def test_determinant(self):
        assert Transform(T1).determinant() == -361
        assert Transform(T3).determinant() == 0
        assert Transform(T2).determinant() == pytest.approx(np.linalg.det(_np(Transform(T2))))

    def test_inverse(self):
        inv = Transform(T1).try_get_inverse()
        expected = Transform([-71, -271, 26, 350,
                              51, 215, 22, -287,
                              71, -90, -26, 11,
                              -28, 66, -5, 16]).multiply_scalar(1.0/361)
        assert inv == expected
        assert np.allclose(_np(inv), np.linalg.inv(_np(Transform(T1))))
        assert Transform(T1).multiply(inv).is_identity()

    def test_singular_inverse(self):
        assert Transform(T3).try_get_inverse() is None

    def test_multiply(self):
        a = Transform(T1)
        b = Transform(T2)
        assert np.allclose(_np(a.multiply(b)), _np(a) @ _np(b))
        assert (a * b) == a.multiply(b)
        assert a.mul(2.0) == Transform([2*x for x in T1])
        with pytest.raises(ValueError):
            a.mul('foo')

    def test_transpose(self):
        t = Transform(T3)
        assert np.array_equal(_np(t.transpose()), _np(t).T)
        assert t.transpose().transpose() == t

    def test_zero_transformation(self):
        z = ZeroTransformation()
        assert z.is_zero_transformation()
        assert not Identity().is_zero_transformation()
        assert z.mul(Point3d(3, 4, 5)) == Point3d.origin()

    def test_homogeneous_point(self):
        ## a non-unit w divides through
        t = Transform([1, 0, 0, 0,
                       0, 1, 0, 0,
                       0, 0, 1, 0,
                       0, 0, 0, 2])
        assert t.mul(Point3d(2, 4, 6)) == Point3d(1, 2, 3)


class TestDecomposition:
    """unit tests for scale, translation and basis extraction"""

    def test_scale_and_translation(self):
        xf = CombineTransforms([ScaleAtOrigin(2, 3, 4), Translation(Vector3d(1, 2, 3))])
        assert xf.scale_factor() == Vector3d(2, 3, 4)
        assert xf.scale_transform() == ScaleAtOrigin(2, 3, 4)
        assert xf.translation_vector() == Vector3d(1, 2, 3)
        assert xf.translation_transform() == Translation(Vector3d(1, 2, 3))

    def test_base_vectors(self):
        xf = CombineTransforms([ScaleAtOrigin(2, 3, 4), RotationZ(math.pi/2)])
        x, y, z = xf.base_vectors()
        assert all(v.is_unit_vector() for v in (x, y, z))
        assert xf.base_transform().determinant() == pytest.approx(1.0)

    def test_base_vectors_singular(self):
        with pytest.raises(NonAffineTransformError):
            ScaleAtOrigin(1, 0, 1).base_vectors()


class TestConstructors:
    """unit tests for the named transform factories"""

    def test_translation(self):
        xf = Translation(Vector3d(2.2, 1, 5.5))
        assert xf.to_list() == [1, 0, 0, 2.2, 0, 1, 0, 1, 0, 0, 1, 5.5, 0, 0, 0, 1]
        assert xf.mul(Point3d(1, 1, 1)) == Point3d(3.2, 2, 6.5)

    def test_combine_order(self):
        ## translate first, then rotate
        xf = CombineTransforms([Translation(Vector3d(1, 0, 0)), RotationZ(math.pi/2)])
        assert xf.mul(Point3d(1, 0, 0)) == Point3d(0, 2, 0)
        assert CombineTransforms([]).is_identity()

    def test_combine_with_inverse(self):
        xf = Rotation(0.7, Vector3d(1, -2, 0.5), Point3d(3, 1, -4))
        assert CombineTransforms([xf, xf.try_get_inverse()]).is_identity()

    def test_scale(self):
        xf = Scale(Point3d(1, 1, 1), 2)
        assert xf.mul(Point3d(2, 2, 2)) == Point3d(3, 3, 3)
        assert xf.mul(Point3d(1, 1, 1)) == Point3d(1, 1, 1)

    def test_rotation_about_center(self):
        xf = Rotation(math.pi/3, Vector3d(1, 2, 3), Point3d(1, 2, 3))
        p = xf.mul(Point3d(-5, 3, 0))
        assert p == Point3d(-4.54738093877396, -1.9003968027185, 3.11605818140365)

    def test_rotation_preserves_distance(self):
        xf = Rotation(1.234, Vector3d(0.3, 0.4, -2))
        p = Point3d(7, -1, 2)
        assert xf.mul(p).distance_to(Point3d.origin()) == pytest.approx(p.distance_to(Point3d.origin()))
        assert xf.determinant() == pytest.approx(1.0)

    def test_rotation_zero_axis(self):
        with pytest.raises(ZeroLengthVectorError):
            RotateAtOrigin(1.0, Vector3d.ZERO)

    def test_axis_rotations(self):
        assert RotationX(math.pi/2).mul(Vector3d.Y_AXIS) == Vector3d.Z_AXIS
        assert RotationY(math.pi/2).mul(Vector3d.Z_AXIS) == Vector3d.X_AXIS
        assert RotationZ(math.pi/2).mul(Vector3d.X_AXIS) == Vector3d.Y_AXIS

    def test_rotation_zyx(self):
        assert RotationZYX(0.4, 0, 0) == RotationZ(0.4)
        xf = RotationZYX(math.pi/2, 0, math.pi/2)
        ## roll takes Y to Z, yaw leaves Z alone
        assert xf.mul(Vector3d.Y_AXIS) == Vector3d.Z_AXIS

    def test_vector_to_vector(self):
        assert VectorToVector(Vector3d.X_AXIS, Vector3d.Y_AXIS).mul(Vector3d.X_AXIS) == Vector3d.Y_AXIS
        a = Vector3d(1, 2, 3)
        b = Vector3d(-2, 1, 5)
        assert VectorToVector(a, b).mul(a).unitize() == b.unitize()

    def test_vector_to_vector_collinear(self):
        assert VectorToVector(Vector3d(1, 2, 3), Vector3d(2, 4, 6)).is_identity()
        xf = VectorToVector(Vector3d(1, 2, 3), Vector3d(-1, -2, -3))
        assert xf.mul(Vector3d(1, 2, 3)) == Vector3d(-1, -2, -3)
        with pytest.raises(ZeroLengthVectorError):
            VectorToVector(Vector3d.ZERO, Vector3d.X_AXIS)

    def test_planar_projection(self):
        plane = Plane(Point3d.origin(), Vector3d(8.66, 2.5, -4.33), Vector3d(0, 8.66, 5))
        p = PlanarProjection(plane).mul(Point3d(-5, 3, 0))
        assert p == Point3d(-3.10045052477886, 1.35491777084041, 2.84928242090441)
        assert plane.is_point_coplanar(p)

    def test_planar_projection_offset_plane(self):
        xf = PlanarProjection(Plane.plane_xy(Point3d(0, 0, 2)))
        assert xf.mul(Point3d(1, 1, 5)) == Point3d(1, 1, 2)

    def test_mirror(self):
        plane = Plane(Point3d.origin(), Vector3d(8.66, 2.5, -4.33), Vector3d(0, 8.66, 5))
        m = Mirror(plane)
        assert m.mul(Point3d(-5, 3, 0)) == Point3d(-1.20090104955773, -0.290164458319175, 5.69856484180881)
        assert m.multiply(m).is_identity()

    def test_mirror_offset_plane(self):
        m = Mirror(Plane.plane_xy(Point3d(0, 0, 2)))
        assert m.mul(Point3d(1, 1, 5)) == Point3d(1, 1, -1)

    def test_plane_to_plane(self):
        target = Plane(Point3d(1, 2, 3), Vector3d(0, 1, 0), Vector3d(-1, 0, 0))
        xf = PlaneToPlane(Plane.plane_xy(), target)
        assert xf.mul(Point3d.origin()) == Point3d(1, 2, 3)
        assert xf.mul(Point3d(1, 0, 0)) == Point3d(1, 3, 3)
        assert xf.mul(Point3d(0, 1, 0)) == Point3d(0, 2, 3)
        back = PlaneToPlane(target, Plane.plane_xy())
        assert CombineTransforms([xf, back]).is_identity()

    def test_world_xy_to_frame(self):
        xf = WorldXYToFrame(Point3d(1, 2, 3), Vector3d.Y_AXIS, Vector3d.Z_AXIS, Vector3d.X_AXIS)
        assert xf.getcol(0) == [0, 1, 0, 0]
        assert xf.mul(Point3d(1, 0, 0)) == Point3d(1, 3, 3)


def test_singular_inverse_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='kernel3d.xform'):
        assert Transform(T3).try_get_inverse() is None
    assert 'singular transform' in caplog.text
