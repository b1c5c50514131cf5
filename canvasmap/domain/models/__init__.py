from .geometry import (
    AxisMap,
    Point,
    Rectangle,
    TransformConfig,
    TransformMap,
)
