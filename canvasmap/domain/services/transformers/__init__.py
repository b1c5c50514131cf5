from .axis import AxisTransform
