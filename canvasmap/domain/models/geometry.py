import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from canvasmap.exceptions import ConfigurationError


@dataclass(frozen=True)
class Point:
    """
    Point in either data or canvas space.

    Attributes:
        x: x coordinate
        y: y coordinate
    """

    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned bounds of a coordinate space.

    Attributes:
        x0: Minimal x value
        y0: Minimal y value
        x1: Maximal x value
        y1: Maximal y value
    """

    x0: Optional[float] = None
    y0: Optional[float] = None
    x1: Optional[float] = None
    y1: Optional[float] = None

    @classmethod
    def from_sequence(
        cls, values: Union["Rectangle", Sequence[float], None], name: str
    ) -> "Rectangle":
        """Build a rectangle from an ordered `[x0, y0, x1, y1]` sequence.

        Arguments:
            values: The four bounds, or an existing rectangle
            name: Name of the space, used in the error message
        Raises:
            ConfigurationError: when `values` is absent or does not hold
                exactly four elements
        """
        if isinstance(values, Rectangle):
            return values
        try:
            size = len(values)
        except TypeError:
            raise ConfigurationError(f"missing {name} data")
        if size != 4:
            raise ConfigurationError(f"missing {name} data")

        x0, y0, x1, y1 = values
        return cls(x0=x0, y0=y0, x1=x1, y1=y1)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.x0, self.y0, self.x1, self.y1


@dataclass(frozen=True)
class AxisMap:
    """Linear map along a single axis.

    Attributes:
        scale: Canvas units per data unit
        translation: Canvas offset added after scaling
    """

    scale: float
    translation: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.scale) and math.isfinite(self.translation)


@dataclass(frozen=True)
class TransformMap:
    x: AxisMap
    y: AxisMap

    @property
    def is_finite(self) -> bool:
        return self.x.is_finite and self.y.is_finite


@dataclass(frozen=True)
class TransformConfig:
    """The two rectangles an [`AxisTransform`][canvasmap.AxisTransform] maps between.

    Attributes:
        canvas: Bounds of the target (painter) space, y increasing downward
        data: Bounds of the source (mathematical) space, y increasing upward
    """

    canvas: Rectangle
    data: Rectangle

    @classmethod
    def from_sequences(
        cls,
        canvas: Union[Rectangle, Sequence[float], None],
        data: Union[Rectangle, Sequence[float], None],
    ) -> "TransformConfig":
        return cls(
            canvas=Rectangle.from_sequence(canvas, "canvas"),
            data=Rectangle.from_sequence(data, "data"),
        )

    def swapped(self) -> "TransformConfig":
        return TransformConfig(canvas=self.data, data=self.canvas)
