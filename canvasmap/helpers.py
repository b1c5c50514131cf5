from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .config import get_config
from .domain import AxisTransform, Point, Rectangle
from .exceptions import ConfigurationError, InputError

PointLike = Union[Point, Tuple[float, float]]
RectangleLike = Union[Rectangle, Sequence[float]]


def _build_transform(
    data: RectangleLike, canvas: Optional[RectangleLike]
) -> AxisTransform:
    if canvas is None:
        canvas = get_config("canvas")
    if canvas is None:
        raise ConfigurationError("missing canvas data")

    return AxisTransform(canvas=canvas, data=data)


def _split_points(
    points: Iterable[PointLike],
) -> Tuple[List[float], List[float]]:
    xs, ys = [], []
    for point in points:
        if isinstance(point, Point):
            xs.append(point.x)
            ys.append(point.y)
            continue

        try:
            x, y = point
        except (TypeError, ValueError) as e:
            raise InputError(f"Invalid point: {point!r}") from e
        xs.append(x)
        ys.append(y)
    return xs, ys


def _apply(
    transform: AxisTransform, points: Iterable[PointLike]
) -> List[Point]:
    xs, ys = _split_points(points)
    if not xs:
        return []

    p_x, p_y = transform.map(xs, ys)
    return [Point(x=x, y=y) for x, y in zip(p_x, p_y)]


def to_canvas(
    points: Iterable[PointLike],
    data: RectangleLike,
    canvas: Optional[RectangleLike] = None,
) -> List[Point]:
    """Map points from the data space onto the canvas.

    When `canvas` is omitted the `canvas` config value is used.
    """
    return _apply(_build_transform(data, canvas), points)


def to_data(
    points: Iterable[PointLike],
    data: RectangleLike,
    canvas: Optional[RectangleLike] = None,
) -> List[Point]:
    """Map canvas points back to the data space."""
    return _apply(_build_transform(data, canvas).inverted(), points)
