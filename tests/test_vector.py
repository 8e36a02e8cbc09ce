import math

import pytest
from geombasics.coords import vclose
from geombasics.point import Point3d
from geombasics.vector import Vector3d
## unit tests for geombasics vector.py


class TestVector:

    def test_is_valid(self):
        # not valid
        assert not Vector3d.UNSET.is_valid()
        assert not Vector3d.INFINITY.is_valid()
        assert not Vector3d.NEGATIVE_INFINITY.is_valid()

        # valid
        assert Vector3d.ORIGIN.is_valid()
        assert Vector3d.MAX.is_valid()
        assert Vector3d.MIN.is_valid()

    def test_axes(self):
        assert Vector3d.XAXIS == Vector3d(1, 0, 0)
        assert Vector3d.YAXIS == Vector3d(0, 1, 0)
        assert Vector3d.ZAXIS == Vector3d(0, 0, 1)

    def test_arithmetic(self):
        a = Vector3d(100, 100, 100)
        b = Vector3d(200, 200, 200)
        assert a + b == Vector3d(300, 300, 300)
        assert b - a == Vector3d(100, 100, 100)
        assert b / a == Vector3d(2, 2, 2)
        assert Vector3d(100, 200, 300) / 2 == Vector3d(50, 100, 150)
        assert Vector3d(100, 200, 300) * 2 == Vector3d(200, 400, 600)

    def test_multiply_is_componentwise(self):
        product = Vector3d.XAXIS * Vector3d.YAXIS
        assert product == Vector3d.ORIGIN
        assert product != Vector3d.XAXIS.cross(Vector3d.YAXIS)
        assert Vector3d(4, 4, 4) * Vector3d(5, 5, 5) == Vector3d(20, 20, 20)


class TestProducts:

    def test_cross(self):
        assert Vector3d.XAXIS.cross(Vector3d.YAXIS) == Vector3d.ZAXIS
        assert Vector3d.YAXIS.cross(Vector3d.ZAXIS) == Vector3d.XAXIS
        assert Vector3d.ZAXIS.cross(Vector3d.XAXIS) == Vector3d.YAXIS
        assert Vector3d.YAXIS.cross(Vector3d.XAXIS) == -Vector3d.ZAXIS
        assert Vector3d.cross(Vector3d(5, 0, 0), Vector3d(0, 5, 0)) == Vector3d(0, 0, 25)
        assert Vector3d.XAXIS.cross(Vector3d.UNSET) == Vector3d.UNSET

    def test_dot(self):
        assert Vector3d.XAXIS.dot(Vector3d.YAXIS) == 0.0
        assert Vector3d(1, 2, 3).dot(Vector3d(4, 5, 6)) == 32.0
        assert Vector3d.XAXIS.dot(Vector3d.UNSET) is None


class TestLength:

    def test_length(self):
        assert Vector3d(3, 4, 0).length() == 5.0
        assert math.isclose(Vector3d(2, 3, 6).length(), 7.0)
        assert Vector3d.ORIGIN.length() == 0.0
        assert Vector3d.UNSET.length() is None
        assert Vector3d.INFINITY.length() == math.inf

    @pytest.mark.parametrize('v', [
        Vector3d(3, 4, 0),
        Vector3d(-1e-3, 2e-3, 5e-4),
        Vector3d(1e6, -2e6, 3e6),
        Vector3d(0, 0, -7),
    ])
    def test_unitize(self, v):
        unit = v.unitize()
        assert unit.is_valid()
        assert math.isclose(unit.length(), 1.0)
        assert unit.is_unit()

    def test_unitize_direction(self):
        assert vclose(Vector3d(0, 10, 0).unitize(), Vector3d.YAXIS)
        assert Vector3d.unitize(Vector3d(3, 4, 0)) == Vector3d(0.6, 0.8, 0.0)

    def test_unitize_zero_is_invalid(self):
        unit = Vector3d.ORIGIN.unitize()
        assert unit.is_set
        assert not unit.is_valid()
        assert Vector3d.UNSET.unitize() == Vector3d.UNSET

    def test_to_point(self):
        p = Vector3d(1, 2, 3).to_point()
        assert isinstance(p, Point3d)
        assert p == Point3d(1, 2, 3)


class TestExtremeMagnitudes:

    def test_large_length(self):
        assert math.isclose(Vector3d(1e200, 0, 0).length(), 1e200)
        assert math.isclose(Vector3d(3e200, 4e200, 0).length(), 5e200)

    def test_tiny_length(self):
        assert math.isclose(Vector3d(1e-200, 0, 0).length(), 1e-200)
        assert Vector3d(1e-200, 0, 0).length() > 0.0

    @pytest.mark.parametrize('v', [
        Vector3d(1e200, 0, 0),
        Vector3d(1e-200, 0, 0),
        Vector3d(3e-200, -4e-200, 0),
        Vector3d.MAX,
        Vector3d.MIN,
    ])
    def test_unitize_extremes(self, v):
        unit = v.unitize()
        assert unit.is_valid()
        assert math.isclose(unit.length(), 1.0)

    def test_unitize_large_keeps_direction(self):
        assert vclose(Vector3d(1e200, 0, 0).unitize(), Vector3d.XAXIS)
        assert vclose(Vector3d(0, -1e-200, 0).unitize(), -Vector3d.YAXIS)


class TestSentinelsAreShared:

    def test_unset_results_are_the_constant(self):
        assert (Vector3d.UNSET + Vector3d.XAXIS) is Vector3d.UNSET
        assert (Vector3d.UNSET * 2) is Vector3d.UNSET
        assert Vector3d.unset() is Vector3d.UNSET
