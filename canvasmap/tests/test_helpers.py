import pytest

from canvasmap import (
    ConfigurationError,
    InputError,
    Point,
    to_canvas,
    to_data,
)
from canvasmap.config import config_context


class TestHelpers:
    def test_to_canvas(self, canvas: list, data: list):
        points = to_canvas(
            [Point(x=-100, y=-100), (100, 100)], data=data, canvas=canvas
        )

        assert points == [
            Point(x=pytest.approx(10), y=pytest.approx(100)),
            Point(x=pytest.approx(100), y=pytest.approx(10)),
        ]

    def test_to_data(self, canvas: list, data: list):
        points = to_data([(10, 100), (55, 55)], data=data, canvas=canvas)

        assert [(point.x, point.y) for point in points] == [
            (pytest.approx(-100), pytest.approx(-100)),
            (pytest.approx(0, abs=1e-9), pytest.approx(0, abs=1e-9)),
        ]

    def test_round_trip(self, canvas: list, data: list):
        original = [Point(x=-42.5, y=17), Point(x=99, y=-3)]

        points = to_data(
            to_canvas(original, data=data, canvas=canvas),
            data=data,
            canvas=canvas,
        )
        for point, expected in zip(points, original):
            assert point.x == pytest.approx(expected.x)
            assert point.y == pytest.approx(expected.y)

    def test_empty(self, canvas: list, data: list):
        assert to_canvas([], data=data, canvas=canvas) == []

    def test_default_canvas(self, data: list):
        with pytest.raises(ConfigurationError, match="missing canvas data"):
            to_canvas([(0, 0)], data=data)

        with config_context("canvas", [0, 0, 20, 20]):
            assert to_canvas([(0, 0)], data=data) == [
                Point(x=pytest.approx(10), y=pytest.approx(10))
            ]

    def test_invalid_point(self, canvas: list, data: list):
        with pytest.raises(InputError, match="Invalid point"):
            to_canvas([(1, 2, 3)], data=data, canvas=canvas)

        with pytest.raises(InputError, match="Invalid point"):
            to_canvas([5], data=data, canvas=canvas)
