"""Tests for the rectangle factory."""

from decimal import Decimal
from fractions import Fraction

import pytest

from selkit.shapes import Rectangle, make_rectangle


class TestMakeRectangle:
    def test_fields(self):
        r = make_rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert make_rectangle(10, 20).area() == 200

    @pytest.mark.parametrize(
        "width,height",
        [(0, 5), (-3, 4), (2.5, 4), (Fraction(1, 3), 3), (Decimal("1.5"), Decimal("2"))],
    )
    def test_area_is_product(self, width, height):
        r = make_rectangle(width, height)
        assert r.area() == width * height
        assert r.width is width
        assert r.height is height

    def test_returns_rectangle(self):
        assert isinstance(make_rectangle(1, 2), Rectangle)

    def test_frozen(self):
        r = make_rectangle(1, 2)
        with pytest.raises(AttributeError):
            r.width = 5  # type: ignore[misc]

    def test_equality(self):
        assert make_rectangle(1, 2) == Rectangle(width=1, height=2)
        assert make_rectangle(1, 2) != make_rectangle(2, 1)
