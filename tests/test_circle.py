import logging
import math

import pytest
from geombasics.circle import Circle
from geombasics.errors import ConstructionError
from geombasics.point import Point3d
## unit tests for geombasics circle.py


class TestCircle:

    def test_is_valid(self):
        assert Circle(Point3d.ORIGIN, 100).is_valid()
        assert Circle(Point3d.ORIGIN, 0.000001).is_valid()

    def test_zero_radius_constructs_but_is_invalid(self):
        zero = Circle(Point3d.ORIGIN, 0)
        assert zero.radius == 0.0
        assert not zero.is_valid()

    @pytest.mark.parametrize('radius', [-100, -1e-12, -math.inf])
    def test_negative_radius_fails(self, radius):
        with pytest.raises(ConstructionError):
            Circle(Point3d.ORIGIN, radius)

    def test_unset(self):
        assert not Circle.UNSET.is_valid()
        assert Circle.UNSET.radius is None
        assert Circle.UNSET.area() is None

    def test_invalid_values(self):
        assert not Circle(Point3d.ORIGIN, math.inf).is_valid()
        assert not Circle(Point3d.ORIGIN, math.nan).is_valid()
        assert not Circle(Point3d.INFINITY, 1).is_valid()
        assert not Circle(Point3d.UNSET, 1).is_valid()

    def test_measures(self):
        c = Circle(Point3d(1, 2, 3), 2)
        assert c.diameter() == 4.0
        assert math.isclose(c.circumference(), 4 * math.pi)
        assert math.isclose(c.area(), 4 * math.pi)

    def test_equality(self):
        assert Circle(Point3d.ORIGIN, 1) == Circle(Point3d(0, 0, 0), 1.0)
        assert Circle(Point3d.ORIGIN, 1) != Circle(Point3d.ORIGIN, 2)

    def test_bad_construction(self):
        with pytest.raises(ConstructionError):
            Circle(Point3d.ORIGIN, '1')
        with pytest.raises(ConstructionError):
            Circle((0, 0, 0), 1)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='geombasics'):
            with pytest.raises(ConstructionError):
                Circle(Point3d.ORIGIN, -1)
        assert 'rejecting circle' in caplog.text
