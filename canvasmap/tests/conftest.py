"""Module to store common fixtures. """

import pytest

from canvasmap import AxisTransform


@pytest.fixture
def canvas() -> list:
    return [10, 10, 100, 100]


@pytest.fixture
def data() -> list:
    return [-100, -100, 100, 100]


@pytest.fixture
def transform(canvas: list, data: list) -> AxisTransform:
    return AxisTransform(canvas=canvas, data=data)
