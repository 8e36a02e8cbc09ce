import pytest
from geombasics.bbox import BoundingBox
from geombasics.errors import ConstructionError
from geombasics.point import Point3d
from geombasics.vector import Vector3d
## unit tests for geombasics bbox.py


class TestBoundingBox:

    box = BoundingBox(Point3d(-1, -2, -3), Point3d(1, 2, 3))

    def test_is_valid(self):
        assert self.box.is_valid()
        assert not BoundingBox.UNSET.is_valid()
        assert not BoundingBox.EMPTY.is_valid()
        assert not BoundingBox(Point3d.ORIGIN, Point3d.INFINITY).is_valid()

    @pytest.mark.parametrize('hi', [
        Point3d(0, 1, 1),
        Point3d(1, 0, 1),
        Point3d(1, 1, 0),
        Point3d(-1, 1, 1),
        Point3d(1, 1, -1),
    ])
    def test_flat_or_inverted_is_invalid(self, hi):
        assert not BoundingBox(Point3d.ORIGIN, hi).is_valid()

    def test_inverted_is_invalid(self):
        assert not BoundingBox(self.box.max, self.box.min).is_valid()

    def test_volume(self):
        assert self.box.volume() == 48.0
        assert BoundingBox(Point3d(1, 1, 1), Point3d(3, 4, 6)).volume() == 30.0
        assert BoundingBox.EMPTY.volume() == 0.0
        assert BoundingBox.UNSET.volume() is None

    def test_size(self):
        size = self.box.size()
        assert isinstance(size, Vector3d)
        assert size == Vector3d(2, 4, 6)

    def test_center(self):
        assert self.box.center() == Point3d.ORIGIN
        assert BoundingBox(Point3d(0, 0, 0), Point3d(2, 4, 8)).center() == Point3d(1, 2, 4)
        assert BoundingBox.UNSET.center() == Point3d.UNSET

    def test_point_at(self):
        assert self.box.point_at(0, 0, 0) == self.box.min
        assert self.box.point_at(1, 1, 1) == self.box.max
        assert self.box.point_at(0.5, 0.25, 0) == Point3d(0, -1, -3)
        # no clamping
        assert self.box.point_at(2, -1, 1.5) == Point3d(3, -6, 6)

    def test_corners(self):
        corners = self.box.corners()
        assert len(corners) == 8
        assert len(set(corners)) == 8
        assert corners[0] == self.box.min
        assert corners[1] == Point3d(-1, 2, -3)
        assert corners[2] == Point3d(-1, -2, 3)
        assert corners[-1] == self.box.max
        for c in corners:
            assert self.box.contains_point(c)

    def test_from_points(self):
        pts = [Point3d(1, 5, -2), Point3d(-3, 0, 4), Point3d(2, 2, 2)]
        bbox = BoundingBox.from_points(pts)
        assert bbox == BoundingBox(Point3d(-3, 0, -2), Point3d(2, 5, 4))
        assert all(bbox.contains_point(p) for p in pts)
        assert BoundingBox.from_points([]) == BoundingBox.UNSET
        assert BoundingBox.from_points([Point3d.ORIGIN, Point3d.UNSET]) == BoundingBox.UNSET

    def test_bad_construction(self):
        with pytest.raises(ConstructionError):
            BoundingBox((0, 0, 0), Point3d(1, 1, 1))


class TestContainment:

    box = BoundingBox(Point3d(0, 0, 0), Point3d(10, 10, 10))

    def test_contains_point(self):
        assert self.box.contains_point(Point3d(5, 5, 5))
        assert self.box.contains_point(Point3d(0, 0, 0))
        assert self.box.contains_point(Point3d(10, 10, 10))
        assert self.box.contains_point(Point3d(0, 10, 5))
        assert not self.box.contains_point(Point3d(-0.1, 5, 5))
        assert not self.box.contains_point(Point3d(5, 10.1, 5))
        assert not self.box.contains_point(Point3d(5, 5, 11))
        assert not self.box.contains_point(Point3d.UNSET)
        assert not BoundingBox.UNSET.contains_point(Point3d.ORIGIN)

    def test_contains_box(self):
        inner = BoundingBox(Point3d(1, 1, 1), Point3d(9, 9, 9))
        overlapping = BoundingBox(Point3d(5, 5, 5), Point3d(15, 15, 15))
        assert self.box.contains_box(inner)
        assert self.box.contains_box(self.box)
        assert not self.box.contains_box(overlapping)
        assert not inner.contains_box(self.box)


class TestOperations:

    box = BoundingBox(Point3d(0, 0, 0), Point3d(10, 10, 10))

    def test_inflate(self):
        grown = self.box.inflate(1, 2, 3)
        assert grown == BoundingBox(Point3d(-1, -2, -3), Point3d(11, 12, 13))
        assert grown.contains_box(self.box)
        assert self.box == BoundingBox(Point3d(0, 0, 0), Point3d(10, 10, 10))

    def test_inflate_uniform(self):
        assert self.box.inflate_uniform(2) == self.box.inflate(2, 2, 2)
        assert self.box.inflate_uniform(2).volume() == 14.0 ** 3

    def test_deflate(self):
        shrunk = self.box.inflate_uniform(-4)
        assert shrunk == BoundingBox(Point3d(4, 4, 4), Point3d(6, 6, 6))
        assert shrunk.is_valid()
        assert not self.box.inflate_uniform(-5).is_valid()

    def test_union(self):
        other = BoundingBox(Point3d(5, -5, 5), Point3d(20, 5, 8))
        assert self.box.union(other) == BoundingBox(Point3d(0, -5, 0), Point3d(20, 10, 10))
        assert self.box.union(BoundingBox.UNSET) == BoundingBox.UNSET
