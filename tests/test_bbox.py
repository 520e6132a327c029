import math

import pytest

from kernel3d.bbox import BoundingBox, intersect, union
from kernel3d.vector import Point3d, Vector3d
from kernel3d.xform import RotationZ, Translation

## unit tests for kernel3d bbox.py


@pytest.fixture
def b1():
    return BoundingBox(Point3d(-9.847383153, -9.092637979, -8.103615608),
                       Point3d(4.992788358, 6.176224321, 6.748736056))


class TestBoundingBox:
    """unit tests for BoundingBox"""

    def test_min_max_validity(self, b1):
        assert b1.is_valid
        b1.min = Point3d(100, 2, 3)
        assert not b1.is_valid

    def test_max_reassignment(self, b1):
        b1.max = Point3d(100, 2, 3)
        assert b1.is_valid

    def test_center_and_diagonal(self, b1):
        assert b1.center == Point3d(-2.427297397, -1.458206829, -0.677439776)
        assert b1.diagonal == Vector3d(14.840171511, 15.2688623, 14.852351664)

    def test_make_valid(self):
        b = BoundingBox.from_min_max(0, 0, 0, -1, -3, 0)
        assert not b.is_valid
        assert b.make_valid() is b
        assert b.is_valid
        assert b.min == Point3d(-1, -3, 0)

    def test_area_and_volume(self, b1):
        assert b1.area == pytest.approx(1347.564987468)
        assert b1.volume == pytest.approx(3365.432018859)
        assert BoundingBox.empty().area == 0
        assert BoundingBox.empty().volume == 0

    def test_is_degenerate(self, b1):
        assert b1.is_degenerate() == 0
        b1.max.z = b1.min.z
        assert b1.is_degenerate() == 1
        b1.max.y = b1.min.y
        assert b1.is_degenerate() == 2
        b1.max.x = b1.min.x
        assert b1.is_degenerate() == 3
        assert BoundingBox.empty().is_degenerate() == 4

    def test_from_points(self):
        pts = [Point3d(1, 5, -2), Point3d(-3, 0, 4), Point3d(2, 2, 2)]
        b = BoundingBox.from_points(pts)
        assert b.min == Point3d(-3, 0, -2)
        assert b.max == Point3d(2, 5, 4)
        assert not BoundingBox.from_points([]).is_valid

    def test_closest_point_outside(self, b1):
        p = b1.closest_point(Point3d(13.502516727, -1.269467385, 4.154620531))
        assert p == Point3d(4.992788358, -1.269467385, 4.154620531)

    def test_closest_point_inside(self, b1):
        inside = Point3d(0.423155795, 0.952666255, 4.154620531)
        assert b1.closest_point(inside) == inside
        assert b1.closest_point(inside, False) == Point3d(0.423155795, 0.952666255, 6.748736056)

    def test_furthest_point(self):
        b = BoundingBox.from_min_max(0, 0, 0, 2, 2, 2)
        assert b.furthest_point(Point3d(-1, 0.5, 3)) == Point3d(2, 2, 0)

    def test_corners(self):
        b = BoundingBox.from_min_max(0, 0, 0, 1, 2, 3)
        c = b.corners()
        assert len(c) == 8
        assert c[0] == b.min
        assert c[6] == b.max
        assert c[1] == Point3d(1, 0, 0)
        assert c[7] == Point3d(0, 2, 3)
        assert b.corner(False, True, False) == Point3d(1, 0, 3)

    def test_point_at(self):
        b = BoundingBox.from_min_max(0, 0, 0, 2, 4, 6)
        assert b.point_at(0.5, 0.5, 0.5) == b.center
        assert b.point_at(1, 0, 1) == Point3d(2, 0, 6)

    def test_contains(self):
        b = BoundingBox.from_min_max(0, 0, 0, 2, 2, 2)
        assert b.contains_point(Point3d(1, 1, 1))
        assert b.contains_point(Point3d(2, 1, 1))
        assert not b.contains_point(Point3d(2, 1, 1), strict=True)
        assert not b.contains_point(Point3d(3, 1, 1))
        assert b.contains_box(BoundingBox.from_min_max(0.5, 0.5, 0.5, 1, 1, 1))
        assert not b.contains_box(BoundingBox.from_min_max(0.5, 0.5, 0.5, 3, 1, 1))

    def test_inflate(self):
        b = BoundingBox.from_min_max(0, 0, 0, 1, 1, 1)
        assert b.inflate(1, 2, 3) == BoundingBox.from_min_max(-1, -2, -3, 2, 3, 4)
        assert b.inflate_equal(0.5).volume == pytest.approx(8.0)
        assert not BoundingBox.empty().inflate_equal(5).is_valid

    def test_transform(self):
        b = BoundingBox.from_min_max(0, 0, 0, 1, 1, 1)
        moved = b.transform(Translation(Vector3d(1, 2, 3)))
        assert moved == BoundingBox.from_min_max(1, 2, 3, 2, 3, 4)
        turned = b.transform(RotationZ(math.pi/4))
        assert turned.diagonal.x == pytest.approx(math.sqrt(2))
        assert turned.diagonal.z == pytest.approx(1.0)

    def test_union_and_intersect(self):
        a = BoundingBox.from_min_max(0, 0, 0, 2, 2, 2)
        b = BoundingBox.from_min_max(1, 1, 1, 3, 3, 3)
        assert union(a, b) == BoundingBox.from_min_max(0, 0, 0, 3, 3, 3)
        assert a.intersect(b) == BoundingBox.from_min_max(1, 1, 1, 2, 2, 2)
        far = BoundingBox.from_min_max(5, 5, 5, 6, 6, 6)
        assert not intersect(a, far).is_valid

    def test_union_skips_invalid(self):
        a = BoundingBox.from_min_max(0, 0, 0, 2, 2, 2)
        e = BoundingBox.empty()
        assert a.union(e) == a
        assert intersect(e, a) == a
        assert not union(e, BoundingBox.empty()).is_valid

    def test_union_and_intersect_return_copies(self):
        a = BoundingBox.from_min_max(0, 0, 0, 2, 2, 2)
        e = BoundingBox.empty()
        u = union(a, e)
        i = intersect(e, a)
        assert u is not a
        assert i is not a
        u.min.x = -5
        i.min.y = -5
        assert a.min == Point3d(0, 0, 0)
