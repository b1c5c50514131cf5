from .transformers import AxisTransform
