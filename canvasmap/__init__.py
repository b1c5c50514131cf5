# detect if we are imported from the setup procedure (borrowed from numpy code)
try:
    __CANVASMAP_SETUP__
except NameError:
    __CANVASMAP_SETUP__ = False

if not __CANVASMAP_SETUP__:
    from .domain import (
        AxisMap,
        AxisTransform,
        Point,
        Rectangle,
        TransformConfig,
        TransformMap,
    )
    from .exceptions import CanvasMapError, ConfigurationError, InputError
    from .helpers import to_canvas, to_data

__version__ = "0.1.0"
