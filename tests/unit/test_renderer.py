"""Unit tests for the viewer's colour map and coordinate mapping."""

import pytest

from renderer import ColorMap, cartesian_to_screen, screen_to_cartesian
from topopt.Vec2 import Vec2


class TestColorMap:

    def test_low_strain_is_blue(self):
        assert ColorMap().rgb(0.0) == (23, 72, 255)

    def test_mid_strain_is_green(self):
        assert ColorMap().rgb(0.5) == (72, 255, 72)

    def test_high_strain_is_red(self):
        assert ColorMap().rgb(1.0) == (255, 72, 23)


class TestCoordinates:

    def test_origin_maps_to_centre(self):
        assert cartesian_to_screen(Vec2(0, 0), 100, 800, 600) == Vec2(400, 300)

    def test_y_axis_flips(self):
        sp = cartesian_to_screen(Vec2(1, 1), 100, 800, 600)
        assert sp == Vec2(500, 200)

    def test_round_trip(self):
        pos = Vec2(0.0125, -0.003)
        back = screen_to_cartesian(cartesian_to_screen(pos))
        assert back.x == pytest.approx(pos.x)
        assert back.y == pytest.approx(pos.y)
