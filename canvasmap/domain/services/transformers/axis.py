import logging
import sys
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from canvasmap.domain.models import (
    AxisMap,
    Rectangle,
    TransformConfig,
    TransformMap,
)
from canvasmap.exceptions import ConfigurationError, InputError
from canvasmap.utils import is_scalar

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

Number = Union[int, float]
Coordinates = Union[Number, Sequence[Number], np.ndarray]


def _as_array(values: Coordinates, name: str) -> np.ndarray:
    try:
        # be flexible about single values or sequences
        if is_scalar(values):
            values = [values]
        array = np.asarray(values, dtype=float)
    except (TypeError, ValueError, OverflowError) as e:
        raise InputError(
            f"{name} must be a number or a sequence of numbers"
        ) from e

    if array.ndim != 1:
        raise InputError(f"{name} must be a number or a sequence of numbers")
    return array


def _unwrap(values: List[float]) -> Union[float, List[float]]:
    if len(values) == 1:
        return values[0]
    return values


class AxisTransform:
    """
    Maps coordinates from a data space onto a canvas space.

    The data space is a mathematical coordinate system with the y-axis
    pointing up, the canvas uses the painter's model (origin at the top
    left, y-axis pointing down, as in SVG). Each axis is scaled
    independently, the y-axis is flipped.

    Arguments:
        canvas: `[x0, y0, x1, y1]` bounds of the canvas (target) space
        data: `[x0, y0, x1, y1]` bounds of the data (source) space

    Example:
        >>> transform = AxisTransform(
        ...     canvas=[10, 10, 100, 100], data=[-100, -100, 100, 100]
        ... )
        >>> transform.map_x(-100)
        10.0
        >>> transform.map([-100, 100], [-100, 100])
        ([10.0, 100.0], [100.0, 10.0])
    """

    def __init__(
        self,
        canvas: Union[Rectangle, Sequence[float], None],
        data: Union[Rectangle, Sequence[float], None],
    ):
        self._config = TransformConfig.from_sequences(canvas, data)
        self._mapping = self._prepare_map()

    @classmethod
    def from_config(cls, config: TransformConfig) -> Self:
        return cls(canvas=config.canvas, data=config.data)

    def _prepare_map(self) -> TransformMap:
        with np.errstate(divide="ignore", invalid="ignore"):
            sx = np.float64(self.cx1 - self.cx0) / np.float64(
                self.dx1 - self.dx0
            )
            sy = np.float64(self.cy1 - self.cy0) / np.float64(
                self.dy1 - self.dy0
            )

        mapping = TransformMap(
            x=AxisMap(scale=float(sx), translation=float(self.cx0)),
            y=AxisMap(scale=float(sy), translation=float(self.cy0)),
        )
        if not mapping.is_finite:
            logger.warning(
                f"Data space {self.data.as_tuple()} has zero width or height, "
                f"mapped coordinates will not be finite"
            )
        logger.debug(f"Prepared {mapping}")
        return mapping

    @property
    def canvas(self) -> Rectangle:
        return self._config.canvas

    @property
    def data(self) -> Rectangle:
        return self._config.data

    @property
    def config(self) -> TransformConfig:
        return self._config

    @property
    def mapping(self) -> TransformMap:
        return self._mapping

    @staticmethod
    def _bound(value: Optional[float], description: str) -> float:
        if value is None:
            raise ConfigurationError(f"{description} value not set")
        return value

    @property
    def cx0(self) -> float:
        """Canvas minimal x value"""
        return self._bound(self.canvas.x0, "canvas min x")

    @property
    def cx1(self) -> float:
        """Canvas maximal x value"""
        return self._bound(self.canvas.x1, "canvas max x")

    @property
    def cy0(self) -> float:
        """Canvas minimal y value"""
        return self._bound(self.canvas.y0, "canvas min y")

    @property
    def cy1(self) -> float:
        """Canvas maximal y value"""
        return self._bound(self.canvas.y1, "canvas max y")

    @property
    def dx0(self) -> float:
        """Data space minimal x value"""
        return self._bound(self.data.x0, "data min x")

    @property
    def dx1(self) -> float:
        """Data space maximal x value"""
        return self._bound(self.data.x1, "data max x")

    @property
    def dy0(self) -> float:
        """Data space minimal y value"""
        return self._bound(self.data.y0, "data min y")

    @property
    def dy1(self) -> float:
        """Data space maximal y value"""
        return self._bound(self.data.y1, "data max y")

    def _map_x(self, x: np.ndarray) -> List[float]:
        with np.errstate(invalid="ignore", over="ignore"):
            p_x = (x - self.dx0) * self._mapping.x.scale + (
                self._mapping.x.translation
            )
        return p_x.tolist()

    def _map_y(self, y: np.ndarray) -> List[float]:
        # distance from the top of the data space, this flips the y-axis
        with np.errstate(invalid="ignore", over="ignore"):
            p_y = (self.dy1 - y) * self._mapping.y.scale + (
                self._mapping.y.translation
            )
        return p_y.tolist()

    def map(
        self, x: Coordinates, y: Coordinates
    ) -> Tuple[List[float], List[float]]:
        """
        Map values from the (x, y) data axes to the (x, y) canvas axes.

        Both `x` and `y` can be a single value or a sequence. The result is
        always a pair of lists, also for single values.

        Raises:
            InputError: when `x` or `y` is missing, or when they have
                different lengths
        """
        if x is None:
            raise InputError("map error: x is undefined")
        if y is None:
            raise InputError("map error: y is undefined")

        x = _as_array(x, "x")
        y = _as_array(y, "y")
        if len(x) != len(y):
            raise InputError("x and y arrays different lengths")

        return self._map_x(x), self._map_y(y)

    def map_x(self, x: Coordinates) -> Union[float, List[float]]:
        """Map a value or a sequence of the x data axis to the x canvas axis.

        A single value (or a sequence of one) gives a single value back.
        """
        if x is None:
            raise InputError("x is undefined")

        return _unwrap(self._map_x(_as_array(x, "x")))

    def map_y(self, y: Coordinates) -> Union[float, List[float]]:
        """Map a value or a sequence of the y data axis to the y canvas axis.

        A single value (or a sequence of one) gives a single value back.
        """
        if y is None:
            raise InputError("y is undefined")

        return _unwrap(self._map_y(_as_array(y, "y")))

    def inverted(self) -> Self:
        """Transform mapping canvas coordinates back to data coordinates."""
        return self.from_config(self._config.swapped())

    def __eq__(self, other):
        if isinstance(other, AxisTransform):
            return self._config == other._config
        return False

    def __hash__(self):
        return hash(self._config)

    def __repr__(self):
        return (
            f"AxisTransform(canvas={list(self.canvas.as_tuple())}, "
            f"data={list(self.data.as_tuple())})"
        )
